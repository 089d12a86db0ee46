"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for raw input and display output
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.accounts.application.dto import UserDTO, UserInput
from app.accounts.application.exceptions import (
    ApplicationError,
    InvalidAddressError,
    InvalidEmailError,
)
from app.accounts.application.use_cases import BuildUserUseCase

__all__ = [
    # DTOs
    "UserInput",
    "UserDTO",
    # Use Cases
    "BuildUserUseCase",
    # Exceptions
    "ApplicationError",
    "InvalidEmailError",
    "InvalidAddressError",
]
