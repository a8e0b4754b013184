"""
Top-level routers for version 1 of the API.

The user and flight services run as separate applications, so instead
of one aggregated router this module builds one router per service.
Both include the health endpoint.
"""

from fastapi import APIRouter

from .endpoints import flights, health, users

users_router = APIRouter()
users_router.include_router(users.router, prefix="/users", tags=["users"])
users_router.include_router(health.router, tags=["health"])

flights_router = APIRouter()
flights_router.include_router(flights.router, prefix="/flights", tags=["flights"])
flights_router.include_router(health.router, tags=["health"])
