"""
Main entrypoint for the user and flight services.

This module assembles the two FastAPI applications.  The
``create_user_app`` and ``create_flight_app`` factories build and
configure each service; they are instantiated at module import time as
``user_app`` and ``flight_app`` so that they can be served directly
with uvicorn, e.g.::

    uvicorn flight_booking_api.app.main:user_app --port 3001
    uvicorn flight_booking_api.app.main:flight_app --port 3002

``run.py`` at the project root starts both at once.  Stores and the
user checker can be injected, which is how the tests build isolated
applications.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import flights_router, users_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging, tag_requests
from .core.store import RecordStore, build_store
from .services.flight_service import FLIGHT_FIELDS, FlightService, UserChecker
from .services.user_client import UserServiceClient
from .services.user_service import USER_FIELDS, UserService


def _base_app(settings: Settings, service: str) -> FastAPI:
    # Initialise logging before anything else so that the store and
    # service setup below can log.
    setup_logging(settings)
    app = FastAPI(title=f"{settings.project_name} - {service.capitalize()}", version=settings.api_version)
    register_exception_handlers(app)
    tag_requests(app, service)
    return app


def create_user_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
) -> FastAPI:
    """Create and configure the user service application.

    Parameters
    ----------
    settings : Settings, optional
        Configuration to use.  Defaults to the environment-derived
        module settings.
    store : RecordStore, optional
        Store for user records.  When omitted one is built from
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    app = _base_app(settings, "users")
    if store is None:
        store = build_store("users", USER_FIELDS, settings.database_url)
    app.state.user_service = app.state.service = UserService(store)
    app.include_router(users_router, prefix=settings.api_prefix)
    return app


def create_flight_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    user_checker: Optional[UserChecker] = None,
) -> FastAPI:
    """Create and configure the flight service application.

    ``user_checker`` answers whether a user exists; by default it is a
    ``UserServiceClient`` pointed at ``settings.user_service_url``.
    """
    settings = settings or default_settings
    app = _base_app(settings, "flights")
    if store is None:
        store = build_store("flights", FLIGHT_FIELDS, settings.database_url)
    if user_checker is None:
        user_checker = UserServiceClient(
            base_url=settings.user_service_url + settings.api_prefix,
            timeout=settings.user_service_timeout,
        )
    app.state.flight_service = app.state.service = FlightService(store, user_checker)
    app.include_router(flights_router, prefix=settings.api_prefix)
    return app


# Create the application instances at import time so that tools such
# as uvicorn can discover them without calling the factories manually.
user_app = create_user_app()
flight_app = create_flight_app()
