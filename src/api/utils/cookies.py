from fastapi import Response

from src.app.use_cases.auth import IssuedCredentials

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


def set_auth_cookies(response: Response, credentials: IssuedCredentials, config) -> None:
    """
    Attach both tokens as HTTP-only, same-site, domain-scoped cookies

    Max-Age is the token validity window in seconds (3600 for the access
    token, 31536000 for the refresh token with default settings).
    """
    common = dict(
        domain=config.COOKIE_DOMAIN,
        samesite=config.COOKIE_SAMESITE,
        secure=config.COOKIE_SECURE,
        httponly=True,
    )
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        credentials.access_token,
        max_age=config.ACCESS_TOKEN_TTL,
        **common,
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        credentials.refresh_token,
        max_age=config.REFRESH_TOKEN_TTL,
        **common,
    )
