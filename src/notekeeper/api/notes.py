"""Notes API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.models.note import Note
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteDetailResponse,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_identity, require_note_owner
from ..security import TokenIdentity

router = APIRouter(
    prefix="/notes",
    tags=["Notes"],
    responses={401: {"model": ErrorResponse}},
)

_owner_errors = {404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("", response_model=NoteListResponse)
async def list_notes(
    identity: TokenIdentity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Get all notes of the authenticated user."""
    notes = await NoteService(session).list_user_notes(identity.user_id)
    return {
        "msg": "Data fetched",
        "name": identity.name,
        "notes": [NoteResponse.model_validate(n) for n in notes],
    }


@router.post(
    "/create",
    response_model=NoteDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_note(
    request: NoteCreate,
    identity: TokenIdentity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note = await NoteService(session).create_note(identity.user_id, request)
    return {"msg": "Note Created", "note": NoteResponse.model_validate(note)}


@router.get("/{note_id}", response_model=NoteDetailResponse, responses=_owner_errors)
async def get_note(note: Note = Depends(require_note_owner)):
    """Get a single note by ID."""
    return {"msg": "Note fetched", "note": NoteResponse.model_validate(note)}


@router.patch(
    "/update/{note_id}",
    response_model=NoteDetailResponse,
    responses={400: {"model": ErrorResponse}, **_owner_errors},
)
async def update_note(
    request: NoteUpdate,
    note: Note = Depends(require_note_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note by ID."""
    updated = await NoteService(session).update_note(note, request)
    return {"msg": "Note updated", "note": NoteResponse.model_validate(updated)}


@router.delete("/{note_id}", response_model=MessageResponse, responses=_owner_errors)
async def delete_note(
    note: Note = Depends(require_note_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note by ID."""
    await NoteService(session).delete_note(note)
    return {"msg": "Note deleted"}
