"""
Pydantic schema definitions for API payloads.

Each entity (users, flights) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the record
stores to decouple API representation from persistence.
"""
