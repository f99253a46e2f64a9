"""
Auth Service Domain Entities

Each entity in its own file.
"""

from .enums import Role
from .user import User
from .refresh_token import RefreshToken

__all__ = [
    # Enums
    "Role",
    # Entities
    "User",
    "RefreshToken",
]
