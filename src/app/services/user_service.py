import logging

import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import Role, User
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt cost factor 12"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(12)).decode("utf-8")


class UserService:
    """
    Creates user accounts.

    Owns password hashing and email uniqueness. Uniqueness is checked up
    front and enforced again by the database constraint, so a concurrent
    registration that wins the race still surfaces as DUPLICATE_EMAIL.
    """

    def __init__(self, users: IUserRepository):
        self.users = users

    async def create(
        self, first_name: str, last_name: str, email: str, password: str
    ) -> Result[User]:
        """
        Create and persist a user with the default role

        Returns:
            Result[User] with the generated id,
            or Error(DUPLICATE_EMAIL) / Error(PERSISTENCE_FAILURE)
        """
        try:
            existing_user = await self.users.get_by_email(email)
            if existing_user:
                return Return.err(Error("DUPLICATE_EMAIL", "Email already exists"))

            user = User(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hash_password(password),
                role=Role.customer,
            )
            user = await self.users.create(user)
        except IntegrityError:
            return Return.err(Error("DUPLICATE_EMAIL", "Email already exists"))
        except SQLAlchemyError as exc:
            logger.error(f"Failed to persist user: {exc.__class__.__name__}")
            return Return.err(
                Error("PERSISTENCE_FAILURE", "Failed to store the user")
            )

        return Return.ok(user)
