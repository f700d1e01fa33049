"""Entry point for the User Listing API.

Reads the configuration from the environment once, builds the FastAPI
application and serves it with Uvicorn.  Intended to be executed from
the project root, for example as the container command.

Required outside local development: ``DATABASE_URL`` and
``SERVER_PORT``.  See ``user_listing_api/app/core/config.py`` for the
full list of supported variables.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from user_listing_api.app.core.config import ConfigurationError, Settings
from user_listing_api.app.main import create_app


logger = logging.getLogger("user_listing_api")


async def serve(settings: Settings) -> None:
    """Start the API using Uvicorn on the configured host and port."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Listening to port: %s", settings.server_port)
    await server.serve()


def main() -> int:
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", exc)
        return 1
    asyncio.run(serve(settings))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except (KeyboardInterrupt, SystemExit):
        pass
