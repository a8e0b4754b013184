"""
Generic collection service.

``CollectionService`` maps the five collection operations (create,
list, get, update, delete) onto a record store and converts stored
records into the entity's read schema.  Entity services subclass it
and only declare their schema and name.  Input validation happens in
the schema layer before a service method is called, so every method
here receives an already validated payload.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Generic, List, Type, TypeVar

from pydantic import BaseModel

from flight_booking_api.app.core.errors import NotFoundError
from flight_booking_api.app.core.store import Record, RecordStore

ReadSchema = TypeVar("ReadSchema", bound=BaseModel)


class CollectionService(Generic[ReadSchema]):
    """CRUD operations over one record store."""

    entity_name: ClassVar[str] = "record"
    read_schema: ClassVar[Type[BaseModel]]

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.logger = logging.getLogger(self.__class__.__module__)

    def fields(self, payload: BaseModel) -> Record:
        """Extract the stored fields from a validated payload."""
        return payload.model_dump(by_alias=False)

    async def create(self, payload: BaseModel) -> ReadSchema:
        record = self.store.insert(self.fields(payload))
        self.logger.info("Created %s %s", self.entity_name, record["id"])
        return self.read_schema.model_validate(record)

    async def list(self) -> List[ReadSchema]:
        return [self.read_schema.model_validate(record) for record in self.store.list()]

    async def get(self, record_id: int) -> ReadSchema:
        record = self.store.get_by_id(record_id)
        if record is None:
            raise NotFoundError(f"{self.entity_name.capitalize()} not found")
        return self.read_schema.model_validate(record)

    async def update(self, record_id: int, payload: BaseModel) -> ReadSchema:
        record = self.store.replace_by_id(record_id, self.fields(payload))
        if record is None:
            raise NotFoundError(f"{self.entity_name.capitalize()} not found")
        self.logger.info("Updated %s %s", self.entity_name, record_id)
        return self.read_schema.model_validate(record)

    async def delete(self, record_id: int) -> None:
        """Remove a record.

        Deleting an id that does not exist is not an error; the
        operation is idempotent and always succeeds.
        """
        self.store.delete_by_id(record_id)
        self.logger.info("Deleted %s %s", self.entity_name, record_id)

    def count(self) -> int:
        return self.store.count()
