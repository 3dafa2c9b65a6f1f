"""Note service implementation."""

from typing import List
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteCreate, NoteUpdate
from .interfaces import INoteService

logger = get_logger("services.notes")

NOTE_NOT_FOUND = "Note not found"
GENERIC_ERROR = "Something went wrong."


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        # Used to make sure a note owner exists
        self.user_repo = UserRepository(session)

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by the user."""
        try:
            return await self.note_repo.list_user_notes(user_id)
        except SQLAlchemyError:
            logger.exception("Failed to list notes", extra={"user_id": str(user_id)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Something went wrong"
            )

    async def create_note(self, user_id: UUID, request: NoteCreate) -> Note:
        """Create a note.

        ``request.user_id`` must name the authenticated user; notes cannot be
        created on someone else's behalf.
        """
        if request.user_id != user_id:
            logger.warning(
                "Note creation for another user rejected",
                extra={"user_id": str(user_id), "requested_owner": str(request.user_id)},
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only create notes for yourself",
            )

        if not await self.user_repo.get_by_id(user_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown user")

        note_data = {
            "user_id": user_id,
            "heading": request.heading,
            "description": request.description,
            "tag": request.tag,
        }

        try:
            note = await self.note_repo.create_note(note_data)
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to save note", extra={"user_id": str(user_id)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_ERROR
            )

        logger.info("Note created", extra={"note_id": str(note.id), "user_id": str(user_id)})
        return note

    async def get_owned_note(self, note_id: UUID, user_id: UUID) -> Note:
        """Get note by ID if the user owns it.

        Missing and foreign notes both give 404 so the response does not
        reveal whether another user's note exists.
        """
        note = await self.note_repo.get_by_id(note_id)
        if note is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND)

        if not note.is_owned_by(user_id):
            logger.warning(
                "Ownership check failed",
                extra={"note_id": str(note_id), "user_id": str(user_id)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND)

        return note

    async def update_note(self, note: Note, request: NoteUpdate) -> Note:
        """Update an owned note."""
        changes = request.changes()
        if not changes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Please provide heading, description or tag to update",
            )

        note_id = note.id
        try:
            return await self.note_repo.update_note(note, changes)
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to update note", extra={"note_id": str(note_id)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_ERROR
            )

    async def delete_note(self, note: Note) -> None:
        """Delete an owned note."""
        note_id = note.id
        try:
            await self.note_repo.delete_note(note)
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to delete note", extra={"note_id": str(note_id)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_ERROR
            )
        logger.info("Note deleted", extra={"note_id": str(note_id)})
