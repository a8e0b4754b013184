"""
API package containing versioned routes.

A version subpackage exposes one router per service.  New versions
can be added by creating a new subpackage (e.g. ``v2``).
"""
