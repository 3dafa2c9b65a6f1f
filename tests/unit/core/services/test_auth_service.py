"""Unit tests for AuthService (notekeeper/core/services/auth_service.py)."""

import uuid

import pytest
from fastapi import HTTPException

from notekeeper.core.repositories.user_repository import UserRepository
from notekeeper.core.schemas.auth import LoginRequest, SignupRequest, UserUpdateRequest
from notekeeper.core.services.auth_service import AuthService
from notekeeper.security import PasswordHasher, PasswordHashingError


class FailingHasher(PasswordHasher):
    def hash(self, password):
        raise PasswordHashingError("backend unavailable")


@pytest.fixture
def auth_service(test_session, hasher, token_service):
    return AuthService(test_session, hasher, token_service)


async def _signup(svc, email="ada@example.com", password="p"):
    return await svc.signup(SignupRequest(name="Ada", email=email, password=password))


async def test_signup_stores_hash_not_password(auth_service, hasher):
    user = await _signup(auth_service, password="secret")

    assert user.email == "ada@example.com"
    assert user.password_hash != "secret"
    assert hasher.verify("secret", user.password_hash)


async def test_signup_duplicate_email_rejected(auth_service):
    await _signup(auth_service)

    with pytest.raises(HTTPException) as exc:
        await _signup(auth_service, email="ADA@example.com")
    assert exc.value.status_code == 400
    assert exc.value.detail == "Please choose another email"


async def test_signup_hash_failure_is_internal_error(test_session, token_service):
    svc = AuthService(test_session, FailingHasher(rounds=4), token_service)

    with pytest.raises(HTTPException) as exc:
        await _signup(svc)
    assert exc.value.status_code == 500
    assert await UserRepository(test_session).get_by_email("ada@example.com") is None


async def test_login_returns_token_for_user(auth_service, token_service):
    user = await _signup(auth_service, password="p")

    token = await auth_service.login(LoginRequest(email="ada@example.com", password="p"))
    identity = token_service.verify(token)
    assert identity.user_id == user.id
    assert identity.name == "Ada"


@pytest.mark.parametrize(
    "email,password",
    [("ada@example.com", "wrong"), ("nobody@example.com", "p")],
)
async def test_login_bad_credentials(auth_service, email, password):
    await _signup(auth_service, password="p")

    with pytest.raises(HTTPException) as exc:
        await auth_service.login(LoginRequest(email=email, password=password))
    assert exc.value.status_code == 400


async def test_login_with_malformed_hash_is_internal_error(test_session, auth_service):
    await UserRepository(test_session).create_user(
        {"name": "Broken", "email": "broken@example.com", "password_hash": "not-a-hash"}
    )

    with pytest.raises(HTTPException) as exc:
        await auth_service.login(LoginRequest(email="broken@example.com", password="p"))
    assert exc.value.status_code == 500


async def test_login_upgrades_outdated_hash(test_session, token_service):
    old = PasswordHasher(rounds=4)
    user = await AuthService(test_session, old, token_service).signup(
        SignupRequest(name="Ada", email="ada@example.com", password="p")
    )
    old_hash = user.password_hash

    stronger = PasswordHasher(rounds=5)
    await AuthService(test_session, stronger, token_service).login(
        LoginRequest(email="ada@example.com", password="p")
    )

    refreshed = await UserRepository(test_session).get_by_id(user.id)
    assert refreshed.password_hash != old_hash
    assert stronger.verify("p", refreshed.password_hash)
    assert not stronger.needs_rehash(refreshed.password_hash)


async def test_get_profile_missing_user(auth_service):
    with pytest.raises(HTTPException) as exc:
        await auth_service.get_profile(uuid.uuid4())
    assert exc.value.status_code == 500


async def test_update_profile_changes_password(auth_service, hasher):
    user = await _signup(auth_service, password="old")

    updated = await auth_service.update_profile(user.id, UserUpdateRequest(password="new"))
    assert hasher.verify("new", updated.password_hash)
    assert not hasher.verify("old", updated.password_hash)


async def test_update_profile_rejects_empty_and_taken_email(auth_service):
    user = await _signup(auth_service)
    await _signup(auth_service, email="grace@example.com")

    with pytest.raises(HTTPException) as exc:
        await auth_service.update_profile(user.id, UserUpdateRequest())
    assert exc.value.status_code == 400

    with pytest.raises(HTTPException) as exc:
        await auth_service.update_profile(user.id, UserUpdateRequest(email="grace@example.com"))
    assert exc.value.status_code == 400
    assert exc.value.detail == "Please choose another email"
