"""Authentication service implementation."""

from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import (
    MalformedHashError,
    PasswordHasher,
    PasswordHashingError,
    TokenIdentity,
    TokenService,
)
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, SignupRequest, UserUpdateRequest
from .interfaces import IAuthService

logger = get_logger("services.auth")

GENERIC_ERROR = "Something went wrong. Please try again later."
EMAIL_TAKEN = "Please choose another email"
BAD_CREDENTIALS = "Login failed. Invalid credentials, please signup if you haven't."
USER_NOT_FOUND = "Something went wrong, user not found. Please try again later."


def _internal_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_ERROR)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, hasher: PasswordHasher, tokens: TokenService):
        self.session = session
        self.user_repo = UserRepository(session)
        self.hasher = hasher
        self.tokens = tokens

    async def signup(self, request: SignupRequest) -> User:
        """Register new user."""
        if await self.user_repo.is_email_taken(request.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)

        try:
            password_hash = self.hasher.hash(request.password)
        except PasswordHashingError:
            logger.exception("Password hashing failed during signup")
            raise _internal_error()

        user_data = {
            "name": request.name,
            "email": request.email,
            "password_hash": password_hash,
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError:
            # lost a race against a concurrent signup with the same email
            await self.session.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to save new user")
            raise _internal_error()

        logger.info("User signed up", extra={"user_id": str(user.id)})
        return user

    async def login(self, request: LoginRequest) -> str:
        """Login user and return a bearer token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_CREDENTIALS)

        try:
            if not self.hasher.verify(request.password, user.password_hash):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_CREDENTIALS
                )
            outdated = self.hasher.needs_rehash(user.password_hash)
        except MalformedHashError:
            logger.exception("Stored password hash is malformed", extra={"user_id": str(user.id)})
            raise _internal_error()

        identity = TokenIdentity(user_id=user.id, name=user.name)
        if outdated:
            await self._upgrade_hash(identity.user_id, request.password)

        return self.tokens.issue(identity)

    async def get_profile(self, user_id: UUID) -> User:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            # absent users surface as a generic failure
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=USER_NOT_FOUND
            )
        return user

    async def update_profile(self, user_id: UUID, request: UserUpdateRequest) -> User:
        """Update user profile."""
        if not request.has_changes():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Nothing to update"
            )

        user = await self.get_profile(user_id)

        if request.email and request.email != user.email:
            if await self.user_repo.is_email_taken(request.email):
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)

        update_data = {}
        if request.name is not None:
            update_data["name"] = request.name
        if request.email is not None:
            update_data["email"] = request.email
        if request.password is not None:
            try:
                update_data["password_hash"] = self.hasher.hash(request.password)
            except PasswordHashingError:
                logger.exception("Password hashing failed during profile update")
                raise _internal_error()

        try:
            updated = await self.user_repo.update_user(user_id, update_data)
        except IntegrityError:
            await self.session.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to update user", extra={"user_id": str(user_id)})
            raise _internal_error()

        if updated is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=USER_NOT_FOUND
            )
        return updated

    async def _upgrade_hash(self, user_id: UUID, password: str) -> None:
        """Re-hash with the current cost factor. Failure here never blocks a login."""
        try:
            await self.user_repo.update_user(user_id, {"password_hash": self.hasher.hash(password)})
        except (PasswordHashingError, SQLAlchemyError) as e:
            await self.session.rollback()
            logger.warning(f"Could not upgrade password hash for user {user_id}: {e}")
