"""Entry point for the Bookstore API.

Launches the FastAPI application under Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables; the
MongoDB connection settings are read by ``bookstore_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from bookstore_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logging.getLogger(__name__).info("Starting Bookstore API on %s:%s", host, port)
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
