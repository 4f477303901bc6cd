"""
Service information endpoints: the health check and the root
description listing the available endpoints.
"""

import time
from typing import Any, Dict

from fastapi import APIRouter, Request

from ...core.clock import utc_now_iso


router = APIRouter()

# Process start, used to report uptime.
_STARTED_AT = time.monotonic()


def process_uptime() -> float:
    """Seconds elapsed since this module was first imported."""
    return time.monotonic() - _STARTED_AT


@router.get("/health")
async def health(request: Request) -> Dict[str, Any]:
    """Report liveness.  Always succeeds while the process is serving."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "timestamp": utc_now_iso(),
        "uptime": process_uptime(),
        "environment": settings.environment,
        "version": settings.api_version,
    }


@router.get("/")
async def root(request: Request) -> Dict[str, Any]:
    settings = request.app.state.settings
    return {
        "message": f"Welcome to the {settings.project_name}!",
        "version": settings.api_version,
        "endpoints": {
            "health": "/health",
            "users": "/api/users",
        },
    }
