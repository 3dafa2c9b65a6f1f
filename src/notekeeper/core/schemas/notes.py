"""
Note management schemas.

Notes are exposed with a camel-case ``userId`` owner field.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Note creation request schema. Every field is required."""

    user_id: uuid.UUID = Field(alias="userId", description="Owner of the note")
    heading: str = Field(min_length=1, max_length=200, description="Note heading")
    description: str = Field(min_length=1, description="Note body")
    tag: str = Field(min_length=1, max_length=50, description="Single tag")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "userId": "123e4567-e89b-12d3-a456-426614174000",
                "heading": "Groceries",
                "description": "Milk, eggs, bread",
                "tag": "home",
            }
        },
    )


class NoteUpdate(BaseModel):
    """Note update request schema. The owner cannot be changed."""

    heading: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    tag: Optional[str] = Field(default=None, min_length=1, max_length=50)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={"example": {"heading": "Groceries (weekend)"}},
    )

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class NoteResponse(BaseModel):
    """Single note."""

    id: uuid.UUID
    user_id: uuid.UUID = Field(
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )
    heading: str
    description: str
    tag: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class NoteListResponse(BaseModel):
    """All notes of the authenticated user."""

    msg: str
    name: str = Field(description="Name of the authenticated user")
    notes: List[NoteResponse]


class NoteDetailResponse(BaseModel):
    """One note wrapped in a message."""

    msg: str
    note: NoteResponse
