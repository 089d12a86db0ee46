"""Application use cases for orchestrating domain logic."""

from app.accounts.application.use_cases.build_user import BuildUserUseCase

__all__ = [
    "BuildUserUseCase",
]
