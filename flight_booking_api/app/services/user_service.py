"""
Service layer for users.

Users are stored with their ``name`` and ``email``.  All behaviour is
inherited from ``CollectionService``.
"""

from flight_booking_api.app.schemas.user import UserRead
from flight_booking_api.app.services.collection_service import CollectionService

USER_FIELDS = ("name", "email")


class UserService(CollectionService[UserRead]):
    """Service class for managing users."""

    entity_name = "user"
    read_schema = UserRead
