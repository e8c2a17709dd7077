# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import PersistenceError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}")
            raise PersistenceError(f"Error finding user by email: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None
        
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID {user_id}: {e}")
            raise PersistenceError(f"Error finding user by ID: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            PersistenceError: On invalid/unknown ID or any MongoDB failure
        """
        if user is None:
            raise PersistenceError("User cannot be None")
        
        if user.id:
            return await self._update(user)
        return await self._insert(user)
    
    async def _insert(self, user: User) -> User:
        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            logger.error(f"Error saving user: {e}")
            raise PersistenceError(f"Error saving user: {str(e)}") from e
        
        if new_document is None:
            raise PersistenceError("User was created but could not be retrieved")
        return self._document_to_user(new_document)
    
    async def _update(self, user: User) -> User:
        try:
            object_id = ObjectId(user.id)
        except (InvalidId, TypeError) as e:
            raise PersistenceError(f"Invalid user ID format: {user.id}") from e
        
        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": self._user_to_dict(user)}
            )
            if update_result.matched_count == 0:
                raise PersistenceError(
                    f"User with ID {user.id} not found",
                    details={"user_id": user.id},
                )
            updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error updating user {user.id}: {e}")
            raise PersistenceError(f"Error updating user: {str(e)}") from e
        
        if updated_document is None:
            raise PersistenceError(f"User {user.id} was updated but could not be retrieved")
        return self._document_to_user(updated_document)
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise PersistenceError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
