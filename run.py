"""Unified entry point for the user and flight services.

This script launches both services concurrently in one process, the
user service on ``USERS_PORT`` (default 3001) and the flight service
on ``FLIGHTS_PORT`` (default 3002).  The flight service reaches the
user service through ``USER_SERVICE_URL``, which defaults to the
local user service.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from flight_booking_api.app.core.config import settings
from flight_booking_api.app.main import flight_app, user_app


async def serve(app, port: int) -> None:
    """Serve ``app`` with uvicorn on ``settings.host:port``."""
    config = Config(app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both services and stop when either of them fails."""
    tasks = [
        asyncio.create_task(serve(user_app, settings.users_port)),
        asyncio.create_task(serve(flight_app, settings.flights_port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
