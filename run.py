"""Entry point for the Daily Dashboard API.

Starts the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example under Docker, where you only
specify a single Python file to run.

Configuration is read from environment variables (see
``dashboard_api/app/core/config.py``).  Host and port come from
``HOST`` and ``PORT`` and default to ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from dashboard_api.app.main import app


async def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
