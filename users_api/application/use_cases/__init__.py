from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    CreateUserUseCase,
)

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "CreateUserUseCase",
]
