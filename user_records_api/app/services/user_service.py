"""
Business logic for users.

``UserService`` applies the domain rules on top of a ``RecordStore``:
the default role, duplicate‑email rejection and the creation
timestamp.  Every call first waits for a configurable latency,
modelling a round trip to a real backend; a latency of ``0`` skips the
wait entirely.
"""

import asyncio
import logging
from typing import List, Optional

from ..core.clock import utc_now_iso
from ..core.errors import DuplicateEmailError
from ..core.store import RecordStore
from ..schemas.user import DEFAULT_ROLE, UserCreate, UserRead


logger = logging.getLogger(__name__)


class UserService:
    """Service for reading, creating and deleting user records."""

    def __init__(self, store: RecordStore, latency: float = 0.0) -> None:
        self.store = store
        self.latency = latency

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def get_all_users(self) -> List[UserRead]:
        """Return every record in insertion order."""
        await self._simulate_latency()
        return self.store.list()

    async def get_user_by_id(self, user_id: str) -> Optional[UserRead]:
        """Return the record with ``user_id`` or ``None``.  Absence is not an error."""
        await self._simulate_latency()
        return self.store.find_by_id(user_id)

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create a new user.

        Raises ``DuplicateEmailError`` when another record already uses
        ``data.email``; the store is left untouched in that case.  The
        duplicate check, identifier assignment and insert run under a
        single store transaction.
        """
        await self._simulate_latency()
        with self.store.transaction() as store:
            if store.find_by_email(data.email) is not None:
                logger.info("Rejected user creation: email %s already exists", data.email)
                raise DuplicateEmailError(data.email)
            user = UserRead(
                id=store.next_id(),
                name=data.name,
                email=data.email,
                role=data.role or DEFAULT_ROLE,
                created_at=utc_now_iso(),
            )
            store.insert(user)
        logger.info("Created user %s <%s> with role %s", user.id, user.email, user.role)
        return user

    async def delete_user(self, user_id: str) -> bool:
        """Delete the record with ``user_id``; return whether one was removed."""
        await self._simulate_latency()
        removed = self.store.remove_by_id(user_id)
        if removed:
            logger.info("Deleted user %s", user_id)
        return removed
