"""Password hashing utilities."""

from passlib.context import CryptContext


class PasswordHashingError(Exception):
    """Raised when a digest could not be produced for a password."""


class MalformedHashError(Exception):
    """Raised when a stored digest is not a recognisable password hash."""


class PasswordHasher:
    """Salted, slow password hashing with a fixed cost factor.

    Use bcrypt_sha256 to avoid bcrypt's 72-byte truncation issue on long passwords.
    This pre-hashes with SHA-256 before applying bcrypt.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt_sha256"],
            deprecated="auto",
            bcrypt_sha256__rounds=rounds,
            # hashes below the current cost are flagged by needs_rehash()
            bcrypt_sha256__min_rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a password."""
        try:
            digest = self._context.hash(password)
        except (TypeError, ValueError) as exc:
            raise PasswordHashingError("could not hash password") from exc
        if not digest:
            raise PasswordHashingError("empty digest")
        return digest

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash.

        Mismatch is ``False``; only a malformed stored hash raises.
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except (TypeError, ValueError) as exc:
            raise MalformedHashError("stored password hash is malformed") from exc

    def needs_rehash(self, hashed_password: str) -> bool:
        """Check if password hash was made with outdated settings."""
        try:
            return self._context.needs_update(hashed_password)
        except (TypeError, ValueError) as exc:
            raise MalformedHashError("stored password hash is malformed") from exc
