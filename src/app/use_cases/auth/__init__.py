"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .register_dto import IssuedCredentials, RegisterCommand, RegisterResult

__all__ = [
    # Use Cases
    "RegisterUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResult",
    "IssuedCredentials",
]
