from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase
from .update_user import UpdateUserUseCase
from .create_user import CreateUserUseCase

__all__ = ["ListUsersUseCase", "GetUserUseCase", "UpdateUserUseCase", "CreateUserUseCase"]
