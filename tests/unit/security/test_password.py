"""Unit tests for security/password.py"""

import pytest

from notekeeper.security.password import (
    MalformedHashError,
    PasswordHasher,
    PasswordHashingError,
)


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


def test_hash_and_verify_roundtrip(hasher):
    pwd = "StrongPassw0rd!"
    h = hasher.hash(pwd)
    assert h != pwd
    assert pwd not in h
    assert hasher.verify(pwd, h) is True
    assert hasher.verify("wrong", h) is False


@pytest.mark.parametrize("pwd", ["p", "with spaces ", "ünïcødé", "x" * 128])
def test_only_the_original_password_verifies(hasher, pwd):
    h = hasher.hash(pwd)
    assert hasher.verify(pwd, h) is True
    assert hasher.verify(pwd + "1", h) is False
    assert hasher.verify(pwd.strip() + "?", h) is False


def test_hashes_are_salted(hasher):
    assert hasher.hash("same") != hasher.hash("same")


def test_long_passwords_are_not_truncated(hasher):
    base = "a" * 80
    h = hasher.hash(base + "b")
    assert hasher.verify(base + "c", h) is False


def test_verify_malformed_hash_raises(hasher):
    with pytest.raises(MalformedHashError):
        hasher.verify("anything", "not-a-real-hash")


def test_hash_failure_raises(hasher):
    with pytest.raises(PasswordHashingError):
        hasher.hash(None)


def test_needs_rehash_when_cost_changes():
    old = PasswordHasher(rounds=4)
    new = PasswordHasher(rounds=5)
    h = old.hash("pw")
    assert old.needs_rehash(h) is False
    assert new.needs_rehash(h) is True
    # rounds only affect new hashes
    assert new.verify("pw", h) is True
