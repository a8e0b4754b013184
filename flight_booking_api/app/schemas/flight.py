"""
Pydantic schemas for flights.

A flight has an origin, a destination, a price and optionally the id
of the user it belongs to.  On the wire the user reference is called
``userId``; internally it is ``user_id``, which is also the column
name in the SQLite store.
"""

import math
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationInfo, field_validator

from flight_booking_api.app.core.db import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER


class FlightBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(..., examples=["New York"])
    destination: str = Field(..., examples=["Los Angeles"])
    price: Union[int, float] = Field(..., examples=[300])
    user_id: Optional[StrictInt] = Field(
        None, alias="userId", ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER, examples=[1]
    )

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        # Numeric strings and booleans are rejected rather than coerced.
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("price must be a number")
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("price must be a finite number")
        if isinstance(v, int) and not SQLITE_MIN_INTEGER <= v <= SQLITE_MAX_INTEGER:
            raise ValueError("price is out of range")
        return v

    @field_validator("origin", "destination")
    @classmethod
    def validate_place(cls, v: str, info: ValidationInfo) -> str:
        if not v.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return v


class FlightCreate(FlightBase):
    """Schema for creating a flight.

    When ``userId`` is given, the user service is asked whether the
    user exists before the flight is stored.
    """


class FlightUpdate(FlightBase):
    """Schema for replacing a flight.  ``userId`` is not re-checked."""


class FlightRead(BaseModel):
    """Schema for reading a flight."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    origin: str
    destination: str
    price: Union[int, float]
    user_id: Optional[int] = Field(None, alias="userId")
