"""UserRepository against an in-memory SQLite database."""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from notekeeper.core.models.user import User
from notekeeper.core.repositories.user_repository import UserRepository


def _user_data(email="alice@example.com", **overrides):
    data = {"name": "Alice", "email": email, "password_hash": "not-a-real-hash"}
    data.update(overrides)
    return data


async def test_create_user(test_session):
    repo = UserRepository(test_session)
    user = await repo.create_user(_user_data())

    assert isinstance(user, User)
    assert isinstance(user.id, uuid.UUID)
    assert user.created_at is not None
    assert user.email == "alice@example.com"


async def test_get_by_id_found_and_not_found(test_session):
    repo = UserRepository(test_session)
    user = await repo.create_user(_user_data())

    assert (await repo.get_by_id(user.id)).id == user.id
    assert await repo.get_by_id(uuid.uuid4()) is None


async def test_get_by_email_ignores_case(test_session):
    repo = UserRepository(test_session)
    user = await repo.create_user(_user_data())

    found = await repo.get_by_email("ALICE@Example.com")
    assert found is not None and found.id == user.id
    assert await repo.get_by_email("nobody@example.com") is None


async def test_is_email_taken(test_session):
    repo = UserRepository(test_session)
    await repo.create_user(_user_data())

    assert await repo.is_email_taken("alice@example.com") is True
    assert await repo.is_email_taken("bob@example.com") is False


async def test_duplicate_email_violates_unique_constraint(test_session):
    repo = UserRepository(test_session)
    await repo.create_user(_user_data())

    with pytest.raises(IntegrityError):
        await repo.create_user(_user_data(name="Impostor"))


async def test_update_user(test_session):
    repo = UserRepository(test_session)
    user = await repo.create_user(_user_data())

    updated = await repo.update_user(user.id, {"name": "Alice L."})
    assert updated.name == "Alice L."
    assert updated.email == "alice@example.com"


async def test_update_missing_user_returns_none(test_session):
    repo = UserRepository(test_session)
    assert await repo.update_user(uuid.uuid4(), {"name": "Ghost"}) is None


def test_email_is_indexed_once_through_its_unique_constraint():
    table = User.__table__
    assert table.c.email.unique is True
    email_indexes = [ix for ix in table.indexes if [c.name for c in ix.columns] == ["email"]]
    assert email_indexes == []
