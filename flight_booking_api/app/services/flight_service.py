"""
Service layer for flights.

Flights behave like any other collection, except that creating a
flight with a ``userId`` first asks the user service whether that
user exists.  The check is a blocking HTTP call, so it runs in the
threadpool.  If the inbound request is cancelled while waiting, the
cancellation takes effect as soon as the check returns (at the latest
after the client timeout) and no flight is stored.

There is no transaction spanning both services: once the user has
been confirmed, a failure of the local insert is reported as an
internal error and nothing is compensated.
"""

from __future__ import annotations

from typing import Protocol

from fastapi.concurrency import run_in_threadpool

from flight_booking_api.app.core.errors import NotFoundError
from flight_booking_api.app.core.store import RecordStore
from flight_booking_api.app.schemas.flight import FlightCreate, FlightRead
from flight_booking_api.app.services.collection_service import CollectionService

FLIGHT_FIELDS = ("origin", "destination", "price", "user_id")


class UserChecker(Protocol):
    def check_exists(self, user_id: int) -> bool:
        ...


class FlightService(CollectionService[FlightRead]):
    """Service class for managing flights."""

    entity_name = "flight"
    read_schema = FlightRead

    def __init__(self, store: RecordStore, user_checker: UserChecker) -> None:
        super().__init__(store)
        self.user_checker = user_checker

    async def create(self, payload: FlightCreate) -> FlightRead:
        if payload.user_id is not None:
            await self.validate_user(payload.user_id)
        return await super().create(payload)

    async def validate_user(self, user_id: int) -> None:
        """Raise ``NotFoundError`` unless the user service knows ``user_id``.

        ``UpstreamUnavailableError`` from the checker propagates as is.
        """
        exists = await run_in_threadpool(self.user_checker.check_exists, user_id)
        if not exists:
            self.logger.info("Rejected flight for unknown user %s", user_id)
            raise NotFoundError("User not found")
        self.logger.debug("User %s validated", user_id)
