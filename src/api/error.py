from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    """
    Business error the caller can act on (duplicate email, ...)

    Rendered by the central handler as {"error": {code, message}} with the
    given status code.
    """

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Infrastructure failure (persistence, token signing)

    Rendered as an opaque 500; only the error code reaches the caller.
    """

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(f"{base_error.code}: {base_error.message}")
