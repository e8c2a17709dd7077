# Standard library imports
import logging
from typing import Dict, List, Optional
from uuid import uuid4

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed implementation of UserRepository.
    
    Stores copies so callers cannot mutate stored state without save().
    Used for tests and for local runs without MongoDB.
    """
    
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
    
    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        for user in self._users.values():
            if user.email == email:
                return self._copy(user)
        return None
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None
        user = self._users.get(user_id)
        return self._copy(user) if user is not None else None
    
    async def save(self, user: User) -> User:
        if user is None:
            raise PersistenceError("User cannot be None")
        
        if user.id is None:
            stored = User(
                id=uuid4().hex,
                name=user.name,
                email=user.email,
                password_hash=user.password_hash,
            )
        elif user.id in self._users:
            stored = self._copy(user)
        else:
            raise PersistenceError(
                f"User with ID {user.id} not found",
                details={"user_id": user.id},
            )
        
        self._users[stored.id] = stored
        logger.debug(f"Stored user {stored.id} in memory")
        return self._copy(stored)
    
    def all(self) -> List[User]:
        """Snapshot of every stored user"""
        return [self._copy(user) for user in self._users.values()]
    
    @staticmethod
    def _copy(user: User) -> User:
        return User(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
        )
