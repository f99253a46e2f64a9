"""
Use Cases

Organized into domain folders:
- auth/: Registration and credential issuance
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    RegisterResult,
    IssuedCredentials,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "RegisterResult",
    "IssuedCredentials",
]
