from typing import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_listing_api.app.core.config import Settings
from user_listing_api.app.core.db import get_cursor, init_db
from user_listing_api.app.main import create_app


@pytest.fixture
def database_path(tmp_path) -> str:
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture
def add_users(database_path) -> Callable[[int], None]:
    """Insert ``count`` users with ids 1..count into the test database."""

    def _add(count: int) -> None:
        with get_cursor(database_path) as cursor:
            cursor.executemany(
                "INSERT INTO users (email, name) VALUES (?, ?)",
                [(f"user{i}@example.com", f"User {i}") for i in range(1, count + 1)],
            )

    return _add


@pytest.fixture
def settings(database_path) -> Settings:
    return Settings(database_url=f"sqlite:///{database_path}", server_port=7999)


@pytest.fixture
def app(settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
