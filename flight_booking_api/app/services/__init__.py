"""
Service layer abstraction.

Each service encapsulates the logic for one entity.  Services receive
their record store (and, for flights, the user checker) through the
constructor, so the API handlers never touch storage directly and
tests can build isolated instances.
"""
