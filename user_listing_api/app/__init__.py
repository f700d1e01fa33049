"""
Application package initializer.

``core`` holds configuration, logging and database helpers, ``services``
the business logic, ``schemas`` the pydantic models and ``api`` the
versioned routers.  ``create_app`` in ``main`` assembles them.
"""

from .main import create_app  # noqa: F401
