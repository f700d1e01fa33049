"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  The user routes are
mounted at the root because their paths (``/users/all``, ``/user/{id}``)
are part of the public contract.
"""

from fastapi import APIRouter

from .endpoints import health, users


router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(health.router, tags=["health"])
