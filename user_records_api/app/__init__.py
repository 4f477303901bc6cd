"""
Application package initializer.

The project is split into a few small pieces: ``core`` holds
configuration, logging, errors and the in‑memory record store,
``services`` holds the business rules, ``schemas`` the Pydantic
payloads and ``api`` the routers that bind HTTP paths to services.
"""

from .main import app  # noqa: F401
