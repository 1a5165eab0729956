from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users in storage order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Overwrite the given fields and return the updated user"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user and return it with its assigned ID"""
        pass
