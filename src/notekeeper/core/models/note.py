# Note model for user content
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User


class Note(BaseModel):
    """Note owned by a single user."""

    __tablename__ = "notes"

    # owner reference
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    heading: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tag: Mapped[str] = mapped_column(String(50), nullable=False)

    owner: Mapped["User"] = relationship(
        "User",
        back_populates="notes",
        lazy="raise",
        doc="User who created and owns this note",
    )

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
        Index("idx_notes_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        # keep reprs short in logs
        truncated = self.heading if len(self.heading) <= 30 else (self.heading[:30] + "...")
        return f"<Note(heading='{truncated}', user_id={self.user_id})>"

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Check if this note is owned by the specified user."""
        return self.user_id == user_id
