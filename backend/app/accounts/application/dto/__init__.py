"""Data transfer objects for application layer."""

from app.accounts.application.dto.user_dto import UserDTO, UserInput

__all__ = [
    "UserInput",
    "UserDTO",
]
