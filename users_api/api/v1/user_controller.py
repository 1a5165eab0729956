# Standard library imports
import logging
from typing import Optional, Union

# External package imports
from fastapi import APIRouter, Body, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserListResponse,
    UserDetailResponse,
    AcknowledgementResponse,
    MessageResponse,
    ErrorResponse,
)
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...domain.exceptions import UserNotFoundError, UserRepositoryError
from ...core.config import get_settings
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get(
    "/users",
    response_model=UserListResponse,
    summary="Get all users",
    description="Retrieve a list of all users",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse}},
)
async def list_users() -> Union[UserListResponse, JSONResponse]:
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    try:
        users = await list_users_use_case.execute()
    except Exception as exception:
        logger.error(f"Failed to list users: {exception}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exception)},
        )
    
    return UserListResponse(message="Users retrieved", success=True, users=users)


@router.get(
    "/user/{user_id}",
    response_model=UserDetailResponse,
    summary="Get user by ID",
    description="Retrieve a user by their ID",
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def get_user(user_id: str) -> Union[UserDetailResponse, JSONResponse]:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserDetailResponse wrapping the user's id, firstName and email
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        user = await get_user_use_case.execute(user_id)
    except UserNotFoundError as exception:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": exception.message},
        )
    except Exception as exception:
        logger.error(f"Failed to get user {user_id}: {exception}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exception)},
        )
    
    return UserDetailResponse(success=True, user=user)


@router.put(
    "/update/{user_id}",
    response_model=AcknowledgementResponse,
    summary="Update user by ID",
    description="Update a user's email and firstName by their ID. Omitted fields keep their stored value.",
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def update_user(
    user_id: str,
    request: Optional[UserUpdateRequest] = Body(default=None),
) -> Union[AcknowledgementResponse, JSONResponse]:
    """
    Update a user by ID
    
    Args:
        user_id: ID of the user
        request: New email and/or firstName
        
    Returns:
        AcknowledgementResponse (the updated user is not returned)
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    if request is None:
        request = UserUpdateRequest()
    
    try:
        await update_user_use_case.execute(user_id, request)
    except UserNotFoundError as exception:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": exception.message},
        )
    except Exception as exception:
        logger.error(f"Failed to update user {user_id}: {exception}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exception)},
        )
    
    return AcknowledgementResponse(message="User updated", success=True)


@router.post(
    "/add",
    response_model=AcknowledgementResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new user",
    description="Add a new user with the specified firstName and email",
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "Bad request"}},
)
async def add_user(
    request: Optional[UserCreateRequest] = Body(default=None),
) -> Union[AcknowledgementResponse, JSONResponse]:
    """
    Create a new user
    
    Storage rejections are reported as 400 since they stem from the
    submitted record. Neither the record nor its ID is echoed back.
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    if request is None:
        request = UserCreateRequest()
    
    try:
        await create_user_use_case.execute(request)
    except UserRepositoryError as exception:
        logger.error(f"Failed to add user: {exception}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exception.message},
        )
    
    return AcknowledgementResponse(message="User added", success=True)


def _describe_validation_error(exception: RequestValidationError) -> str:
    messages = []
    for error in exception.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(messages) or "Invalid request body"


async def user_body_validation_handler(request: Request, exception: RequestValidationError):
    """
    Report unparseable create/update bodies in the error shape of their route.
    
    /add answers 400 {message}, /update/{id} answers 500 {error}; any other
    route keeps FastAPI's default 422 response.
    """
    prefix = get_settings().api_prefix
    path = request.url.path
    
    if path == f"{prefix}/add":
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _describe_validation_error(exception)},
        )
    if path.startswith(f"{prefix}/update/"):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": _describe_validation_error(exception)},
        )
    return await request_validation_exception_handler(request, exception)
