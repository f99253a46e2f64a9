from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Optional

from jose import JOSEError, JWTError, jwt

from src.app.services.token_service import ITokenService, TokenSigningError


class JwtTokenService(ITokenService):
    """
    JWT implementation of ITokenService (python-jose)

    Access and refresh tokens are signed with separate secrets so a leaked
    access-token key cannot forge refresh tokens.
    """

    def __init__(self, config):
        self.access_secret = config.JWT_SECRET
        self.refresh_secret = config.REFRESH_TOKEN_SECRET
        self.algorithm = config.JWT_ALGORITHM
        self.issuer = config.JWT_ISSUER
        self.access_token_ttl = timedelta(seconds=config.ACCESS_TOKEN_TTL)
        self.refresh_token_ttl = timedelta(seconds=config.REFRESH_TOKEN_TTL)

    def generate_access_token(self, claims: Dict[str, Any]) -> str:
        """
        Generate JWT access token

        Args:
            claims: sub (user id as string) and role

        Returns:
            JWT token string (1-hour expiry by default)
        """
        return self._sign(claims, self.access_secret, self.access_token_ttl)

    def generate_refresh_token(self, claims: Dict[str, Any]) -> str:
        """
        Generate JWT refresh token

        Args:
            claims: sub, role and id (refresh token record id as string)

        Returns:
            JWT token string (1-year expiry by default), jti = record id
        """
        if "id" not in claims:
            raise TokenSigningError("Refresh token claims must carry the record id")
        return self._sign(
            claims,
            self.refresh_secret,
            self.refresh_token_ttl,
            jwt_id=str(claims["id"]),
        )

    def decode_refresh_token(self, token: str) -> Optional[dict]:
        """
        Verify and decode a refresh token

        Returns:
            Decoded payload dict or None if invalid
        """
        try:
            return jwt.decode(
                token,
                self.refresh_secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except JWTError:
            return None

    def _sign(
        self,
        claims: Dict[str, Any],
        secret: str,
        ttl: timedelta,
        jwt_id: Optional[str] = None,
    ) -> str:
        if not secret:
            raise TokenSigningError("Signing secret is not configured")

        now = datetime.now(UTC)
        payload = {
            **claims,
            "iss": self.issuer,
            "iat": now,
            "exp": now + ttl,
        }
        if jwt_id is not None:
            payload["jti"] = jwt_id

        try:
            return jwt.encode(payload, secret, algorithm=self.algorithm)
        except JOSEError as exc:
            raise TokenSigningError(str(exc)) from exc
