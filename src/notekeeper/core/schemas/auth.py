"""
Authentication and account schemas.

These schemas define the API contracts for signup, login and the
user profile routes. Passwords are taken verbatim, never stripped.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupRequest(BaseModel):
    """User signup request schema."""

    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN, description="Unique email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        """Emails are compared case-insensitively."""
        return v.strip().lower() if isinstance(v, str) else v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Ada", "email": "ada@example.com", "password": "correct horse"}
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(min_length=1, max_length=255, description="Account email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "ada@example.com", "password": "correct horse"}}
    )


class UserUpdateRequest(BaseModel):
    """User profile update request schema. Only provided fields change."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)
    password: Optional[str] = Field(default=None, min_length=1, max_length=128)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Ada Lovelace"}})

    def has_changes(self) -> bool:
        return bool(self.model_dump(exclude_none=True))


class UserResponse(BaseModel):
    """User information response schema. Never carries the password."""

    id: uuid.UUID = Field(description="User unique identifier")
    name: str = Field(description="Display name")
    email: str = Field(description="Account email")
    created_at: datetime = Field(description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class UserProfileResponse(BaseModel):
    """Response of the profile lookup route."""

    msg: str
    user: UserResponse


class LoginResponse(BaseModel):
    """Successful login."""

    message: str = Field(description="Success message")
    token: str = Field(description="Bearer token for the Authorization header")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "login successful",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        }
    )
