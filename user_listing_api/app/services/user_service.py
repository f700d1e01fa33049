"""
Business logic for users.

``UserService`` exposes the two read operations of the API: a paginated
listing and a lookup by id.  It never writes to the database.  Expected
failures are returned as ``Result`` values; persistence faults are
logged and returned as ``ErrorKind.INTERNAL``.
"""

import logging
import sqlite3
from typing import Optional, Tuple, Union

from ..core.db import get_connection
from ..core.result import ErrorKind, Result
from ..schemas.user import UserPage, UserRead


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5

PAGE_ERROR = "Page value must be 1 or more"
LIMIT_ERROR = "Limit value must be 1 or more"
NOT_FOUND_ERROR = "Could not find user"

# Largest value SQLite can bind as an INTEGER.
SQLITE_MAX_INT = 2 ** 63 - 1

RawInt = Union[int, str, None]


def _coerce_int(value: RawInt) -> Optional[int]:
    """Convert a query/path value to ``int``; ``None`` if it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _is_missing(value: RawInt) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_window(page: RawInt = None, limit: RawInt = None) -> Result[Tuple[int, int]]:
    """Apply defaults and validate ``page`` and ``limit``.

    ``page`` is checked before ``limit``.  On success the result holds
    the ``(offset, limit)`` pair to query with.
    """
    page_value = DEFAULT_PAGE if _is_missing(page) else _coerce_int(page)
    limit_value = DEFAULT_LIMIT if _is_missing(limit) else _coerce_int(limit)

    if page_value is None or page_value <= 0:
        return Result.fail(ErrorKind.INVALID_ARGUMENT, PAGE_ERROR)
    if limit_value is None or limit_value <= 0:
        return Result.fail(ErrorKind.INVALID_ARGUMENT, LIMIT_ERROR)
    offset = min((page_value - 1) * limit_value, SQLITE_MAX_INT)
    return Result.ok((offset, min(limit_value, SQLITE_MAX_INT)))


class UserService:
    """Read-only access to the ``users`` table."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path

    async def list_users(self, page: RawInt = None, limit: RawInt = None) -> Result[UserPage]:
        """Return one page of users and the total number of users.

        Rows are ordered by ``id`` so consecutive pages do not overlap.
        ``total`` comes from its own ``COUNT(*)`` query and does not depend
        on the requested window.
        """
        window = resolve_window(page, limit)
        if not window.is_ok:
            return Result.fail(window.error, window.message)
        offset, size = window.value

        try:
            conn = get_connection(self.database_path)
            try:
                cursor = conn.cursor()
                rows = cursor.execute(
                    "SELECT * FROM users ORDER BY id ASC LIMIT ? OFFSET ?",
                    (size, offset),
                ).fetchall()
                total = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()["count"]
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to list users (offset=%s, limit=%s)", offset, size)
            return Result.internal()

        users = [UserRead(**dict(row)) for row in rows]
        return Result.ok(
            UserPage(users=users, total=total),
            "Successfully received all users",
        )

    async def get_user_by_id(self, user_id: RawInt) -> Result[UserRead]:
        """Retrieve a user by ID.

        An id that is not an integer cannot match any record and yields
        ``ErrorKind.NOT_FOUND``.
        """
        value = _coerce_int(user_id)
        if value is None or abs(value) > SQLITE_MAX_INT:
            return Result.fail(ErrorKind.NOT_FOUND, NOT_FOUND_ERROR)

        try:
            conn = get_connection(self.database_path)
            try:
                row = conn.execute(
                    "SELECT * FROM users WHERE id = ? LIMIT 1",
                    (value,),
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to fetch user %s", value)
            return Result.internal()

        if row is None:
            return Result.fail(ErrorKind.NOT_FOUND, NOT_FOUND_ERROR)
        return Result.ok(
            UserRead(**dict(row)),
            f"Successfully received user with id: {value}",
        )
