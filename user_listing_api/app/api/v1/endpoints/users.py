"""
User endpoints.

``GET /users/all`` returns a page of users together with the total
number of users; ``GET /user/{user_id}`` returns a single user.  Both
respond with the standard envelope.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from user_listing_api.app.api.deps import get_user_service
from user_listing_api.app.schemas.envelope import Envelope, envelope_response
from user_listing_api.app.schemas.user import UserPage, UserRead
from user_listing_api.app.services.user_service import UserService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/all", response_model=Envelope[UserPage])
async def list_users(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default 5)"),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """List users one page at a time.

    ``page`` and ``limit`` are taken as raw strings so that invalid
    values are reported by the service with the standard 422 envelope.
    """
    logger.info("All users request hit (page=%s, limit=%s)", page, limit)
    result = await service.list_users(page, limit)
    return envelope_response(result)


@router.get("/user/{user_id}", response_model=Envelope[UserRead])
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    logger.info("Single user request hit (id=%s)", user_id)
    result = await service.get_user_by_id(user_id)
    return envelope_response(result)
