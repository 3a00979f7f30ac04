"""Entry point for the Recommendation API.

Launches the FastAPI application under uvicorn.  Configuration such as
the database path, log level and listen address is read from
environment variables; see ``recommendation_api/app/core/config.py``
for the supported names.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recommendation_api.app.core.config import settings
from recommendation_api.app.main import app


async def run_api() -> None:
    """Serve the API using Uvicorn.

    Host and port are read from the ``API_HOST`` and ``API_PORT``
    environment variables.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Exception in API server")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
