"""
Shared FastAPI dependencies.

The application settings are stored on ``app.state`` by ``create_app``;
dependencies build request-scoped collaborators from them.
"""

from fastapi import Request

from ..core.config import Settings
from ..services.user_service import UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_service(request: Request) -> UserService:
    return UserService(get_settings(request).database_path)
