"""Entry point for serving the Event Hub API.

Runs the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example in Docker or on a PaaS
where only a single Python file is specified.

Configuration such as ``MONGO_URI``, ``PORT`` and ``UPLOAD_DIR`` is
read from the environment or from a ``.env`` file in the same
directory.  See ``.env.example`` for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from event_hub_api.app.core.config import settings
from event_hub_api.app.main import app


async def run_api() -> None:
    """Serve the API on ``settings.host``/``settings.port``.

    Defaults are ``0.0.0.0`` and ``5000``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
