"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- RegisterResult: Output from use case (structured result)
"""

from pydantic import BaseModel

PASSWORD_MASK = "******"


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    first_name: str
    last_name: str
    email: str
    password: str

    def redacted(self) -> dict:
        """Loggable view of the command, password masked"""
        return {**self.model_dump(exclude={"password"}), "password": PASSWORD_MASK}

    def __repr_args__(self):
        # Keep the plaintext password out of repr() and str()
        for name, value in super().__repr_args__():
            yield name, PASSWORD_MASK if name == "password" else value


class IssuedCredentials(BaseModel):
    """Signed tokens issued at registration; delivered as cookies only"""

    access_token: str
    refresh_token: str


class RegisterResult(BaseModel):
    """
    Register result - structured output from use case

    Decoupled from HTTP response format: the API layer returns user_id
    in the body and moves the credentials into cookies.
    """

    user_id: int
    credentials: IssuedCredentials
