# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserUpdateRequest

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's first name and email"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> None:
        """
        Update a user by ID
        
        Only fields present in the request body are overwritten. A field sent
        as null is stored as null; an omitted field keeps its stored value.
        
        Args:
            user_id: ID of the user to update
            request: Update request with the new field values
            
        Raises:
            UserNotFoundError: If no user matches user_id
        """
        fields: Dict[str, Any] = {}
        if "first_name" in request.model_fields_set:
            fields[UserFields.FIRST_NAME] = request.first_name
        if "email" in request.model_fields_set:
            fields[UserFields.EMAIL] = request.email
        
        updated_user = await self.user_repository.update_by_id(user_id, fields)
        if updated_user is None:
            raise UserNotFoundError()
        
        logger.info(f"Updated user {updated_user.id} (fields: {sorted(fields) or 'none'})")
