import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from src.app.services.token_service import ITokenService, TokenSigningError
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_service import UserService
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return
from .register_dto import IssuedCredentials, RegisterCommand, RegisterResult

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResult] (user id and issued credentials)

    Business Logic (strict order, one transaction):
    1. Create the User (unique email, bcrypt hash, default role)
    2. Build claims {sub, role} from the created user
    3. Mint the access token
    4. Persist a RefreshToken record (expires now + refresh TTL)
    5. Mint the refresh token embedding the record id
    6. Commit

    Any failure short-circuits the remaining steps. Nothing is committed
    until both tokens exist, so a failed registration leaves neither a
    user row nor a refresh token row behind.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: ITokenService,
        refresh_token_ttl: timedelta,
    ):
        self.uow = uow
        self.token_service = token_service
        self.refresh_token_ttl = refresh_token_ttl

    async def execute(self, command: RegisterCommand) -> Result[RegisterResult]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated profile fields and password

        Returns:
            Result[RegisterResult], or Error(DUPLICATE_EMAIL),
            Error(PERSISTENCE_FAILURE), Error(SIGNING_FAILURE)
        """
        async with self.uow:
            user_service = UserService(self.uow.users)
            user_result = await user_service.create(
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
                password=command.password,
            )
            if user_result.is_err():
                return Return.err(user_result.error)
            user = user_result.value

            claims = {"sub": str(user.id), "role": user.role.value}

            try:
                access_token = self.token_service.generate_access_token(claims)

                # Record must exist before the refresh token that points at it
                refresh_record = await self.uow.refresh_tokens.save(
                    user, expires_at=utcnow() + self.refresh_token_ttl
                )
                refresh_token = self.token_service.generate_refresh_token(
                    {**claims, "id": str(refresh_record.id)}
                )

                await self.uow.commit()
            except TokenSigningError as exc:
                logger.error(f"Token signing failed: {exc}")
                return Return.err(Error("SIGNING_FAILURE", "Failed to sign token"))
            except SQLAlchemyError as exc:
                logger.error(f"Failed to persist registration: {exc.__class__.__name__}")
                return Return.err(
                    Error("PERSISTENCE_FAILURE", "Failed to store the registration")
                )

        logger.info(f"User has been registered: id={user.id}")

        return Return.ok(
            RegisterResult(
                user_id=user.id,
                credentials=IssuedCredentials(
                    access_token=access_token, refresh_token=refresh_token
                ),
            )
        )
