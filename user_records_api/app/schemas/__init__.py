"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the record store so that the API
representation can evolve independently of storage.
"""
