"""
Pydantic models for user data.

A user carries a display name and an e-mail address.  The same
validation applies to creation (POST) and replacement (PUT); the
read model adds the store-assigned ``id``.
"""

import re

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class UserBase(BaseModel):
    name: str = Field(..., examples=["Alice Johnson"])
    email: str = Field(..., examples=["alice@example.com"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("email must be a valid email address")
        return v


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(UserBase):
    """Schema for replacing a user.  All fields are required."""


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str
