"""
In‑memory record store for user records.

``RecordStore`` keeps users in insertion order and hands out
identifiers from a monotonic counter, so an identifier is never
reused after a deletion.  Every operation takes a re‑entrant lock;
callers that need a check‑then‑insert sequence to be atomic wrap it in
``transaction()``.

Nothing is persisted: the store lives for the lifetime of the process
(or of the application instance that owns it).  ``reset`` restores the
seed set and exists for test fixtures.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..schemas.user import UserRead


SEED_USERS = (
    {"id": "1", "name": "John Doe", "email": "john@example.com", "role": "admin"},
    {"id": "2", "name": "Jane Smith", "email": "jane@example.com", "role": "user"},
    {"id": "3", "name": "Bob Johnson", "email": "bob@example.com", "role": "user"},
)


class RecordStore:
    """Ordered collection of user records guarded by a lock."""

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.RLock()
        self._records: List[UserRead] = []
        self._last_id = 0
        if seed:
            self.reset()

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield self

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> List[UserRead]:
        """Return all records in insertion order.

        The returned list is a copy; mutating it does not affect the store.
        """
        with self._lock:
            return list(self._records)

    def find_by_id(self, user_id: str) -> Optional[UserRead]:
        with self._lock:
            for record in self._records:
                if record.id == user_id:
                    return record
            return None

    def find_by_email(self, email: str) -> Optional[UserRead]:
        with self._lock:
            for record in self._records:
                if record.email == email:
                    return record
            return None

    def next_id(self) -> str:
        """Reserve and return the next identifier."""
        with self._lock:
            self._last_id += 1
            return str(self._last_id)

    def insert(self, record: UserRead) -> None:
        """Append ``record``.  Uniqueness is the caller's responsibility."""
        with self._lock:
            self._records.append(record)

    def remove_by_id(self, user_id: str) -> bool:
        """Remove the first record with ``user_id``; return whether one was removed."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == user_id:
                    del self._records[index]
                    return True
            return False

    def reset(self) -> None:
        """Restore the seed records and restart the identifier counter after them."""
        with self._lock:
            self._records = [UserRead(**data) for data in SEED_USERS]
            self._last_id = len(SEED_USERS)
