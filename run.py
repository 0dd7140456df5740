"""Entry point for serving the Entrant API.

Host, port and log level are taken from the environment (see
``entrant_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from entrant_api.app.core.config import settings
from entrant_api.app.main import app


async def main() -> None:
    """Serve the API with Uvicorn until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
