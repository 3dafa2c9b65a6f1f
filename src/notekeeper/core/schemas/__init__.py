"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserProfileResponse,
    UserResponse,
    UserUpdateRequest,
)
from .common import ErrorResponse, HealthCheckResponse, MessageResponse, ValidationErrorItem
from .notes import NoteCreate, NoteDetailResponse, NoteListResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "LoginResponse",
    "UserUpdateRequest",
    "UserResponse",
    "UserProfileResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListResponse",
    "NoteDetailResponse",
    # Common schemas
    "MessageResponse",
    "ErrorResponse",
    "ValidationErrorItem",
    "HealthCheckResponse",
]
