"""
Pydantic models for user data.

A user record is identified by ``id``; every other column of the
``users`` table is passed through unchanged, so ``UserRead`` allows
extra fields.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    email: Optional[str] = Field(None, examples=["user@example.com"])
    name: Optional[str] = Field(None, examples=["Jane Doe"])

    model_config = {
        "from_attributes": True,
        "extra": "allow",
    }


class UserPage(BaseModel):
    """One window of users together with the size of the whole collection."""

    users: List[UserRead]
    total: int
