"""Authentication and authorization dependencies."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.logging import get_logger
from ..core.models.note import Note
from ..core.services import NoteService
from ..database import get_db_session
from ..security import InvalidTokenError, TokenIdentity, TokenService, get_token_service

logger = get_logger("auth")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    On success the identity is returned and also stored on
    ``request.state.identity``.
    """

    def __init__(self):
        # we raise our own 401s instead of the framework's default
        super().__init__(auto_error=False)

    async def __call__(
        self,
        request: Request,
        tokens: TokenService = Depends(get_token_service),
    ) -> TokenIdentity:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or credentials.scheme.lower() != "bearer":
            raise _unauthorized("Authentication required. Please login first")

        try:
            identity = tokens.verify(credentials.credentials)
        except InvalidTokenError as e:
            logger.info(f"Rejected bearer token: {e}", extra={"path": request.url.path})
            raise _unauthorized("Invalid or expired token. Please login again")

        request.state.identity = identity
        return identity


# Dependency for getting the authenticated identity from the JWT
async def get_current_identity(identity: TokenIdentity = Depends(JWTBearer())) -> TokenIdentity:
    """Get current authenticated identity."""
    return identity


async def require_note_owner(
    note_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
) -> Note:
    """Load the note from the path only if the authenticated user owns it."""
    return await NoteService(session).get_owned_note(note_id, identity.user_id)


async def require_self(
    user_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
) -> TokenIdentity:
    """Only let users act on their own account."""
    if user_id != identity.user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only update your own profile",
        )
    return identity
