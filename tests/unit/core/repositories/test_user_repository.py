"""Unit tests for UserRepository without DB."""

import uuid
import pytest

from postbook.core.repositories.user_repository import UserRepository
from postbook.core.models.user import User


class FakeResult:
    def __init__(self, scalar=None):
        self._scalar = scalar

    def scalar_one_or_none(self):
        return self._scalar


class FakeSession:
    def __init__(self, result=None):
        self._result = result
        self.added = []
        self.commits = 0
        self.refreshed = []

    async def execute(self, stmt):
        return self._result

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        self.commits += 1

    async def refresh(self, obj, attrs=None):
        self.refreshed.append((obj, attrs))


@pytest.mark.asyncio
async def test_create_user():
    session = FakeSession()
    repo = UserRepository(session)
    data = {"username": "alice", "password_hash": "h", "is_active": True}
    user = await repo.create_user(data)
    assert isinstance(user, User)
    assert session.added and session.added[0] is user
    assert session.commits == 1
    assert session.refreshed and session.refreshed[0][0] is user


@pytest.mark.asyncio
async def test_get_by_id_found_and_not_found():
    uid = uuid.uuid4()
    session = FakeSession(FakeResult(User(id=uid, username="bob", password_hash="x", is_active=True)))
    repo = UserRepository(session)
    u = await repo.get_by_id(uid)
    assert u.id == uid

    repo = UserRepository(FakeSession(FakeResult(None)))
    assert await repo.get_by_id(uid) is None


@pytest.mark.asyncio
async def test_is_username_taken():
    taken = UserRepository(FakeSession(FakeResult(User(username="bob", password_hash="x"))))
    free = UserRepository(FakeSession(FakeResult(None)))
    assert await taken.is_username_taken("bob") is True
    assert await free.is_username_taken("bob") is False
