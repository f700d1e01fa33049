"""
Result values returned by the service layer.

Services report expected failures (bad arguments, missing records,
persistence faults) by returning a failed ``Result`` instead of raising.
The HTTP layer maps ``ErrorKind`` to a status code in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from fastapi import status


T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.INVALID_ARGUMENT: 422,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call: either a value or an error kind with a message."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T, message: str = "") -> "Result[T]":
        return cls(value=value, message=message)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "Result[T]":
        return cls(error=error, message=message)

    @classmethod
    def internal(cls) -> "Result[T]":
        return cls(error=ErrorKind.INTERNAL, message=INTERNAL_ERROR_MESSAGE)
