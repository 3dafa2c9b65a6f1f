"""Note repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


class NoteRepository:
    """Repository for note database operations.

    Ownership is not checked here; the service layer decides who may
    touch a note.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by the user, oldest first."""
        stmt = select(Note).where(Note.user_id == user_id).order_by(Note.created_at, Note.id)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply changes to an already loaded note."""
        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete an already loaded note."""
        await self.session.delete(note)
        await self.session.commit()
