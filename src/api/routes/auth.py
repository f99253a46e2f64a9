import logging

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.cookies import set_auth_cookies
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.depends import get_register_use_case

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Field names follow the public JSON contract (camelCase).
    """

    firstName: str = Field(..., min_length=1, max_length=100, description="First name")
    lastName: str = Field(..., min_length=1, max_length=100, description="Last name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ..., min_length=8, max_length=72, description="User password (8-72 chars)"
    )

    @field_validator("firstName", "lastName", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class RegisterResponse(BaseModel):
    """Only the new user's id; tokens travel in cookies"""

    id: int


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    response: Response,
    use_case: RegisterUseCase = Depends(get_register_use_case),
):
    """
    User Registration

    Command/Response Flow:
    1. RegisterRequest validates HTTP input (400 with "errors" on failure)
    2. Map to RegisterCommand (business intent)
    3. Execute RegisterUseCase
    4. Set accessToken / refreshToken cookies, return the user id

    Raises:
        - 400 Bad Request: Invalid input (handled by the validation handler)
        - 409 Conflict: Email already exists
        - 500 Internal Server Error: Persistence or token signing failure
    """
    # Map HTTP request to Command (validated business intent)
    command = RegisterCommand(
        first_name=request.firstName,
        last_name=request.lastName,
        email=request.email,
        password=request.password,
    )
    logger.debug(f"New request to register a user: {command.redacted()}")

    # Execute use case with command
    result = await use_case.execute(command)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "DUPLICATE_EMAIL":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    set_auth_cookies(response, result.value.credentials, ApplicationConfig)

    return RegisterResponse(id=result.value.user_id)
