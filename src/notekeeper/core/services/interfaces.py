"""
Service interfaces for Notekeeper.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..models.note import Note
from ..models.user import User
from ..schemas.auth import LoginRequest, SignupRequest, UserUpdateRequest
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteUpdate


class IAuthService(ABC):
    """Account and credential handling."""

    @abstractmethod
    async def signup(self, request: SignupRequest) -> User:
        """Create an account with a hashed password."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> str:
        """Check credentials and return a bearer token."""
        pass

    @abstractmethod
    async def get_profile(self, user_id: UUID) -> User:
        """Get user by ID."""
        pass

    @abstractmethod
    async def update_profile(self, user_id: UUID, request: UserUpdateRequest) -> User:
        """Update user profile."""
        pass


class INoteService(ABC):
    """Note CRUD with ownership checks."""

    @abstractmethod
    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by the user."""
        pass

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> Note:
        """Create a note for the authenticated user."""
        pass

    @abstractmethod
    async def get_owned_note(self, note_id: UUID, user_id: UUID) -> Note:
        """Load a note only if the user owns it."""
        pass

    @abstractmethod
    async def update_note(self, note: Note, request: NoteUpdate) -> Note:
        """Update an owned note."""
        pass

    @abstractmethod
    async def delete_note(self, note: Note) -> None:
        """Delete an owned note."""
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check database connectivity."""
        pass
