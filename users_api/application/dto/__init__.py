from .user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    UserListResponse,
    UserDetailResponse,
    AcknowledgementResponse,
    MessageResponse,
    ErrorResponse,
)

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "UserListResponse",
    "UserDetailResponse",
    "AcknowledgementResponse",
    "MessageResponse",
    "ErrorResponse",
]
