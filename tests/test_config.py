import pytest

from user_listing_api.app.core import config
from user_listing_api.app.core.config import ConfigurationError, Settings, parse_database_url


@pytest.fixture(autouse=True)
def no_dockerenv(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "DOCKERENV_MARKER", str(tmp_path / ".dockerenv"))


def test_local_development_defaults():
    settings = Settings.from_env({})
    assert settings.database_url == "sqlite:///users.db"
    assert settings.database_path == "users.db"
    assert settings.server_port == 7999
    assert settings.is_local_development
    assert settings.defaulted == ["DATABASE_URL", "SERVER_PORT"]


def test_explicit_values():
    settings = Settings.from_env({
        "DATABASE_URL": "sqlite:////var/lib/app/users.db",
        "SERVER_PORT": "8080",
        "APP_ENV": "production",
        "LOG_LEVEL": "debug",
        "CORS_ORIGINS": "https://a.example, https://b.example",
    })
    assert settings.database_path == "/var/lib/app/users.db"
    assert settings.server_port == 8080
    assert settings.environment == "production"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.defaulted == []


@pytest.mark.parametrize("env", [
    {"APP_ENV": "production", "SERVER_PORT": "80"},
    {"DOCKER_ENV": "true", "SERVER_PORT": "80"},
])
def test_database_url_required_outside_local_development(env):
    with pytest.raises(ConfigurationError, match="DATABASE_URL"):
        Settings.from_env(env)


def test_port_required_in_container():
    with pytest.raises(ConfigurationError, match="SERVER_PORT"):
        Settings.from_env({"DOCKER_ENV": "true", "DATABASE_URL": "users.db"})


def test_dockerenv_marker_detected(monkeypatch, tmp_path):
    marker = tmp_path / "marker"
    marker.touch()
    monkeypatch.setattr(config, "DOCKERENV_MARKER", str(marker))
    with pytest.raises(ConfigurationError):
        Settings.from_env({})


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_invalid_port(port):
    with pytest.raises(ConfigurationError):
        Settings.from_env({"SERVER_PORT": port})


def test_parse_database_url():
    assert parse_database_url("data/users.db") == "data/users.db"
    assert parse_database_url("sqlite:///data/users.db") == "data/users.db"
    with pytest.raises(ConfigurationError, match="postgresql"):
        parse_database_url("postgresql://user:pw@localhost:5432/db")
    with pytest.raises(ConfigurationError):
        parse_database_url("sqlite:///")
