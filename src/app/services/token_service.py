from abc import ABC, abstractmethod
from typing import Any, Dict


class TokenSigningError(Exception):
    """Token could not be signed (missing or unusable signing key)"""


class ITokenService(ABC):
    """Token minting interface - application layer"""

    @abstractmethod
    def generate_access_token(self, claims: Dict[str, Any]) -> str:
        """Sign a short-lived access token for the given claims"""
        pass

    @abstractmethod
    def generate_refresh_token(self, claims: Dict[str, Any]) -> str:
        """
        Sign a long-lived refresh token.

        claims must carry ``id``: the persisted refresh token record id.
        """
        pass
