"""
Endpoint subpackage.

Each module defines an APIRouter for one area (system information,
users).  The routers are aggregated in ``api/router.py``.
"""
