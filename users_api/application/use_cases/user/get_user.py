# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse with user information
            
        Raises:
            UserNotFoundError: If no user matches user_id
        """
        user = await self.user_repository.find_by_id(user_id)
        
        if user is None:
            logger.debug(f"User {user_id} not found")
            raise UserNotFoundError()
        
        logger.debug(f"Retrieved user {user.id}")
        return UserResponse(
            id=user.id or "",
            first_name=user.first_name,
            email=user.email,
        )
