from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.refresh_token_repository import IRefreshTokenRepository
from src.domain.entities import RefreshToken, User


class RefreshTokenRepository(IRefreshTokenRepository):
    """Refresh token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, user: User, expires_at: datetime) -> RefreshToken:
        """
        Persist a refresh token record.

        Flushes so the database assigns the id the signed token will embed.
        """
        token = RefreshToken(user_id=user.id, expires_at=expires_at)
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_id(self, token_id: int) -> Optional[RefreshToken]:
        """Get refresh token record by ID"""
        stmt = select(RefreshToken).where(RefreshToken.id == token_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def count_by_user_id(self, user_id: int) -> int:
        """Number of refresh token records owned by a user"""
        stmt = select(func.count()).select_from(RefreshToken).where(
            RefreshToken.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one()
