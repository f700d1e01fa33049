"""
Health check endpoint.

Used by container orchestration to decide whether the service is ready.
Reports 503 when the database cannot be queried.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_listing_api.app.api.deps import get_settings
from user_listing_api.app.core.config import Settings
from user_listing_api.app.core.db import check_connection
from user_listing_api.app.schemas.envelope import error_response


router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> JSONResponse:
    if not check_connection(settings.database_path):
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable")
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "success": True,
            "message": "ok",
            "data": {"status": "ok", "database": "ok"},
        },
    )
