"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
both services start locally without any setup: the user service on
port 3001, the flight service on port 3002, and records kept in
memory.  In a deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Flight Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    users_port: int = int(os.getenv("USERS_PORT", "3001"))
    flights_port: int = int(os.getenv("FLIGHTS_PORT", "3002"))

    # Optional path prefix shared by both services, e.g. "/api/v1".
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path or connection string for the SQLite database.  When empty,
    # each service keeps its records in memory for the lifetime of the
    # process.  Relative paths are resolved against the project root by
    # the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "")

    # Base address of the user service, used by the flight service to
    # check that a referenced user exists before creating a flight.
    user_service_url: str = os.getenv("USER_SERVICE_URL", "http://localhost:3001")
    user_service_timeout: float = float(os.getenv("USER_SERVICE_TIMEOUT", "5.0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
