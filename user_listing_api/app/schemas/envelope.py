"""
Uniform response envelope.

Every response body, successful or not, has the shape
``{"success": bool, "message": str, "data": object | null}``.
"""

from typing import Any, Generic, Optional, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.result import Result


DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    success: bool
    message: str
    data: Optional[DataT] = None


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a failure envelope.  Failures never carry data."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None},
    )


def envelope_response(result: Result[Any], status_code: int = 200) -> JSONResponse:
    """Render a service ``Result`` as an envelope response.

    Successful results use ``status_code``; failures use the status code
    of their ``ErrorKind``.
    """
    if not result.is_ok:
        return error_response(result.error.status_code, result.message)
    return JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "message": result.message,
            "data": jsonable_encoder(result.value),
        },
    )
