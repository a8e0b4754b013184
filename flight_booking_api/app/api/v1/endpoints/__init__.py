"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one entity (users, flights) or
for the shared health check.  The routers are combined per service in
``router.py``.
"""
