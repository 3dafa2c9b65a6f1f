"""Authentication and authorization dependencies."""

from .auth import JWTBearer, get_current_identity, require_note_owner, require_self

__all__ = ["JWTBearer", "get_current_identity", "require_note_owner", "require_self"]
