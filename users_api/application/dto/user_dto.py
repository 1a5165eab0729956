from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _UserFieldsRequest(BaseModel):
    """Shared body for create/update: both fields optional, unvalidated"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    email: Optional[str] = None

    @field_validator("first_name", "email", mode="before")
    @classmethod
    def coerce_scalar_to_str(cls, value: Any) -> Any:
        """Store JSON numbers and booleans as their text form"""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class UserCreateRequest(_UserFieldsRequest):
    """DTO for user creation request"""


class UserUpdateRequest(_UserFieldsRequest):
    """DTO for user update request - only fields present in the body are written"""


class UserResponse(BaseModel):
    """DTO for user response"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    email: Optional[str] = None


class UserListResponse(BaseModel):
    message: str
    success: bool = True
    users: List[UserResponse]


class UserDetailResponse(BaseModel):
    success: bool = True
    user: UserResponse


class AcknowledgementResponse(BaseModel):
    """Success status without an entity payload"""
    message: str
    success: bool = True


class MessageResponse(BaseModel):
    """Error body used by the list and create routes"""
    message: str


class ErrorResponse(BaseModel):
    """Error body used by the get and update routes"""
    error: str
