# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import UserRepositoryError
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_all(self) -> List[User]:
        """
        Find all users
        
        Returns:
            List of User domain models in the collection's natural order
        """
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise UserRepositoryError(str(e)) from e
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise UserRepositoryError(str(e)) from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """
        Overwrite fields of an existing user
        
        Args:
            user_id: ID of the user to update
            fields: Storage field names mapped to their new values
            
        Returns:
            Updated User domain model, or None if no user matches user_id
        """
        if not fields:
            # Nothing to write; $set rejects an empty document
            return await self.find_by_id(user_id)
        
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise UserRepositoryError(str(e)) from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model (its id is ignored)
            
        Returns:
            User domain model with the storage-assigned ID set
        """
        user_dict = self._user_to_dict(user)
        
        try:
            result = await self.user_collection.insert_one(user_dict)
        except PyMongoError as e:
            raise UserRepositoryError(str(e)) from e
        
        return User(
            id=str(result.inserted_id),
            first_name=user.first_name,
            email=user.email,
        )
    
    @staticmethod
    def _to_object_id(user_id: str) -> Optional[ObjectId]:
        if not user_id:
            return None
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise UserRepositoryError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            first_name=document.get(UserFields.FIRST_NAME),
            email=document.get(UserFields.EMAIL),
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to a new MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage (no _id; Mongo assigns it)
        """
        return {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.EMAIL: user.email,
        }
