from __future__ import annotations

import asyncio
import logging
import threading
from datetime import datetime

import pytest

from user_records_api.app.core.errors import DuplicateEmailError
from user_records_api.app.core.store import RecordStore
from user_records_api.app.schemas.user import UserCreate
from user_records_api.app.services.user_service import UserService


def test_get_all_users_returns_seed(service: UserService) -> None:
    users = asyncio.run(service.get_all_users())

    assert len(users) == 3
    for user in users:
        assert user.id and user.name and user.email and user.role


def test_get_user_by_id(service: UserService) -> None:
    user = asyncio.run(service.get_user_by_id("1"))

    assert user is not None
    assert user.id == "1"
    assert user.name == "John Doe"


@pytest.mark.parametrize("user_id", ["999", "", "0", "abc"])
def test_get_user_by_id_returns_none_when_missing(service: UserService, user_id: str) -> None:
    assert asyncio.run(service.get_user_by_id(user_id)) is None


def test_create_user_applies_defaults(service: UserService) -> None:
    user = asyncio.run(service.create_user(UserCreate(name="Test User", email="test@example.com")))

    assert user.id == "4"
    assert user.name == "Test User"
    assert user.email == "test@example.com"
    assert user.role == "user"
    assert user.created_at.endswith("Z")
    datetime.fromisoformat(user.created_at.replace("Z", "+00:00"))
    assert asyncio.run(service.get_user_by_id("4")) == user


def test_create_user_keeps_supplied_role(service: UserService) -> None:
    user = asyncio.run(service.create_user(UserCreate(name="Admin User", email="admin@example.com", role="admin")))

    assert user.role == "admin"


def test_create_user_treats_empty_role_as_missing(service: UserService) -> None:
    user = asyncio.run(service.create_user(UserCreate(name="Blank Role", email="blank@example.com", role="")))

    assert user.role == "user"


def test_create_user_rejects_duplicate_email(service: UserService, store: RecordStore) -> None:
    with pytest.raises(DuplicateEmailError, match="Email already exists"):
        asyncio.run(service.create_user(UserCreate(name="Duplicate", email="john@example.com")))

    assert store.count == 3


def test_delete_user(service: UserService) -> None:
    assert asyncio.run(service.delete_user("1")) is True
    assert asyncio.run(service.get_user_by_id("1")) is None


def test_delete_user_returns_false_when_missing(service: UserService) -> None:
    assert asyncio.run(service.delete_user("999")) is False


def test_identifiers_are_not_reused_after_delete(service: UserService) -> None:
    created = asyncio.run(service.create_user(UserCreate(name="A", email="a@example.com")))
    asyncio.run(service.delete_user(created.id))
    again = asyncio.run(service.create_user(UserCreate(name="B", email="b@example.com")))

    assert created.id == "4"
    assert again.id == "5"
    ids = [user.id for user in asyncio.run(service.get_all_users())]
    assert len(ids) == len(set(ids))


def test_count_tracks_creations_and_deletions(service: UserService) -> None:
    async def scenario() -> int:
        await service.create_user(UserCreate(name="One", email="one@example.com"))
        await service.create_user(UserCreate(name="Two", email="two@example.com"))
        with pytest.raises(DuplicateEmailError):
            await service.create_user(UserCreate(name="Again", email="one@example.com"))
        await service.delete_user("2")
        await service.delete_user("999")
        return len(await service.get_all_users())

    assert asyncio.run(scenario()) == 3 + 2 - 1


def test_latency_is_awaited(store: RecordStore, monkeypatch) -> None:
    delays = []

    async def fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr("user_records_api.app.services.user_service.asyncio.sleep", fake_sleep)
    service = UserService(store, latency=0.01)

    asyncio.run(service.get_all_users())
    asyncio.run(service.get_user_by_id("1"))

    assert delays == [0.01, 0.01]


def test_concurrent_creates_with_same_email_insert_once(store: RecordStore) -> None:
    service = UserService(store, latency=0.001)

    async def scenario():
        payload = UserCreate(name="Racer", email="race@example.com")
        return await asyncio.gather(
            *(service.create_user(payload) for _ in range(10)),
            return_exceptions=True,
        )

    results = asyncio.run(scenario())

    created = [result for result in results if not isinstance(result, Exception)]
    assert len(created) == 1
    assert sum(isinstance(result, DuplicateEmailError) for result in results) == 9
    assert store.count == 4


def test_threaded_creates_keep_ids_unique(store: RecordStore) -> None:
    service = UserService(store)
    errors = []

    def worker(index: int) -> None:
        try:
            asyncio.run(service.create_user(UserCreate(name=f"User {index}", email=f"user{index}@example.com")))
        except Exception as exc:  # pragma: no cover - reported through the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    ids = [user.id for user in store.list()]
    assert len(ids) == 23
    assert len(set(ids)) == 23


def test_create_and_delete_are_logged(service: UserService, caplog) -> None:
    caplog.set_level(logging.INFO, logger="user_records_api.app.services.user_service")

    user = asyncio.run(service.create_user(UserCreate(name="Logged", email="logged@example.com")))
    asyncio.run(service.delete_user(user.id))

    messages = [record.getMessage() for record in caplog.records]
    assert any("Created user 4 <logged@example.com>" in message for message in messages)
    assert any("Deleted user 4" in message for message in messages)
