from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import RefreshToken, User


class IRefreshTokenRepository(ABC):
    """Refresh token record store interface - application layer"""

    @abstractmethod
    async def save(self, user: User, expires_at: datetime) -> RefreshToken:
        """Persist a refresh token record for user; returns it with its generated id"""
        pass

    @abstractmethod
    async def get_by_id(self, token_id: int) -> Optional[RefreshToken]:
        """Get refresh token record by ID"""
        pass

    @abstractmethod
    async def count_by_user_id(self, user_id: int) -> int:
        """Number of refresh token records owned by a user"""
        pass
