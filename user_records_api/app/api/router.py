"""
Top‑level router.

Aggregates the domain routers.  The system router (health check and
root description) is mounted without a prefix; user routes live under
``/api/users``.
"""

from fastapi import APIRouter

from .endpoints import system, users


router = APIRouter()

router.include_router(system.router, tags=["system"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
