# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with user details
            
        Returns:
            UserResponse with created user information
            
        Raises:
            UserRepositoryError: If storage rejects the new record
        """
        # Create domain user entity
        new_user = User(
            id=None,  # Will be set by repository
            first_name=request.first_name,
            email=request.email,
        )
        
        saved_user = await self.user_repository.insert(new_user)
        logger.info(f"Created user {saved_user.id}")
        
        return UserResponse(
            id=saved_user.id or "",
            first_name=saved_user.first_name,
            email=saved_user.email,
        )
