"""Database model exports."""

from .claim import ClaimHistory
from .user import User

__all__ = ["ClaimHistory", "User"]
