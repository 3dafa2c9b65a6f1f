"""
Database models for Notekeeper.

SQLAlchemy ORM models for the two resources the API exposes:
    - User: account with name, unique email and password hash
    - Note: heading/description/tag owned by a single user
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
