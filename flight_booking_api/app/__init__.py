"""
Application package.

This package contains the two services (users and flights) and all of
their submodules.  Schemas, services and record stores are kept in
separate subpackages, and each entity exposes a router defined in
``api/v1/endpoints``.
"""

from .main import flight_app, user_app  # noqa: F401
