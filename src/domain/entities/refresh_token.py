"""
RefreshToken Entity

Server-side record every issued refresh token points at.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class RefreshToken(SQLModel, table=True):
    """
    RefreshToken entity - backs a signed refresh token.

    Business Rules:
    - The signed refresh token carries this record's id (``id``/``jti`` claims)
    - The record must be persisted before the token referencing it is minted
    - References its user; deleting a record never touches the user
    - Expires one year after creation by default
    """

    __tablename__ = "refresh_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_refresh_token_expires_at", "expires_at"),)
