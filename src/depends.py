from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.jwt_token_service import JwtTokenService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import RegisterUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service() -> ITokenService:
    return JwtTokenService(ApplicationConfig)


def get_register_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ITokenService = Depends(get_token_service),
) -> RegisterUseCase:
    """
    Build RegisterUseCase with its collaborators.

    Tests swap any of them through app.dependency_overrides.
    """
    return RegisterUseCase(
        uow,
        token_service,
        refresh_token_ttl=timedelta(seconds=ApplicationConfig.REFRESH_TOKEN_TTL),
    )
