"""
Logging for the user and flight services.

Both services usually share one process (see ``run.py``) and therefore
one root logger.  To tell their output apart, every record carries a
``service`` attribute taken from the ``current_service`` context
variable, which each application sets for the duration of a request
(see ``tag_requests``).  Records logged outside a request, such as
startup messages, show ``-``.
"""

import logging
from contextvars import ContextVar
from pathlib import Path

from fastapi import FastAPI, Request

from .config import Settings

current_service: ContextVar[str] = ContextVar("current_service", default="-")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(service)s %(name)s: %(message)s"


class ServiceNameFilter(logging.Filter):
    """Stamp each record with the service handling the current request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = current_service.get()
        return True


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    A console handler is always attached, plus a file handler when
    ``settings.log_file`` is set.  Nothing happens if the root logger
    already has handlers, so the second application factory (or a
    test runner that installed its own handlers) leaves it alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ServiceNameFilter())
        root.addHandler(handler)


def tag_requests(app: FastAPI, service: str) -> None:
    """Make every request served by ``app`` log under ``service``."""

    @app.middleware("http")
    async def _set_service(request: Request, call_next):
        token = current_service.set(service)
        try:
            return await call_next(request)
        finally:
            current_service.reset(token)
