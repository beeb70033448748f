"""Entry point for the Marine Species Database API.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables through
the application settings (defaults ``0.0.0.0`` and ``8000``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from marine_species_api.app.core.config import settings
from marine_species_api.app.main import app


async def main() -> None:
    """Run the API server until it is stopped."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
