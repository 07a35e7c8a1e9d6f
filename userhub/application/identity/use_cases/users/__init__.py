from .create_user_use_case import CreateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .get_all_users_use_case import GetAllUsersUseCase
from .get_user_by_id_use_case import GetUserByIdUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetAllUsersUseCase",
    "GetUserByIdUseCase",
    "UpdateUserUseCase",
]
