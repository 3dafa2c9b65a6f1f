"""Security utilities."""

from functools import lru_cache

from fastapi import Depends

from ..config import Settings, get_settings
from .jwt import InvalidTokenError, TokenIdentity, TokenService
from .password import MalformedHashError, PasswordHasher, PasswordHashingError


@lru_cache(maxsize=8)
def _hasher_for(rounds: int) -> PasswordHasher:
    return PasswordHasher(rounds=rounds)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    """Password hasher configured from settings."""
    return _hasher_for(settings.password_hash_rounds)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    """Token service configured from settings."""
    return TokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


__all__ = [
    "PasswordHasher",
    "PasswordHashingError",
    "MalformedHashError",
    "TokenService",
    "TokenIdentity",
    "InvalidTokenError",
    "get_password_hasher",
    "get_token_service",
]
