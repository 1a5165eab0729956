# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Use case for listing all users"""
    
    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> List[UserResponse]:
        """
        List all users
        
        Returns:
            List of UserResponse objects in storage order (empty if none exist)
        """
        users = await self.user_repository.find_all()
        logger.debug(f"Retrieved {len(users)} user(s)")
        
        return [
            UserResponse(
                id=user.id or "",
                first_name=user.first_name,
                email=user.email,
            )
            for user in users
        ]
