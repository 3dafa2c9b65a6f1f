"""JWT token utilities."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be turned back into an identity."""


@dataclass(frozen=True)
class TokenIdentity:
    """Who a token was issued to."""

    user_id: UUID
    name: str


class TokenService:
    """Issues and verifies signed bearer tokens.

    Tokens carry ``userId`` and ``name`` claims. An ``exp`` claim is only
    added when ``expire_minutes`` is set.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: Optional[int] = None,
    ):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, identity: TokenIdentity, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token for the identity."""
        now = datetime.now(timezone.utc)
        to_encode: Dict[str, Any] = {
            "userId": str(identity.user_id),
            "name": identity.name,
            "iat": now,
        }

        if expires_delta is not None:
            to_encode["exp"] = now + expires_delta
        elif self.expire_minutes:
            to_encode["exp"] = now + timedelta(minutes=self.expire_minutes)

        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> TokenIdentity:
        """Check the signature and return the identity the token was issued to."""
        if not token:
            raise InvalidTokenError("Missing token")

        # jose decodes base64 leniently, so a signature whose unused trailing
        # bits were altered would still verify. Only the canonical form passes.
        _, sep, signature = token.rpartition(".")
        if not sep:
            raise InvalidTokenError("Malformed token")
        try:
            raw = signature.encode("ascii")
            canonical = base64url_encode(base64url_decode(raw))
        except ValueError as exc:
            raise InvalidTokenError("Malformed token signature") from exc
        if canonical != raw:
            raise InvalidTokenError("Malformed token signature")

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        user_id = payload.get("userId")
        name = payload.get("name")
        if not isinstance(user_id, str) or not isinstance(name, str):
            raise InvalidTokenError("Token is missing identity claims")

        try:
            return TokenIdentity(user_id=UUID(user_id), name=name)
        except ValueError as exc:
            raise InvalidTokenError("Token carries a malformed user id") from exc
