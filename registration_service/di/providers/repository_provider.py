from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.in_memory_user_repository import InMemoryUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the UserRepository implementation for the configured backend.
        
        Raises:
            ValueError: If USER_REPOSITORY_BACKEND names an unknown backend
        """
        backend = container.get(Settings).user_repository_backend
        
        if backend == "mongo":
            repository = MongoUserRepository(user_collection=container.get("user_collection"))
        elif backend == "memory":
            repository = InMemoryUserRepository()
        else:
            raise ValueError(f"Unknown USER_REPOSITORY_BACKEND: {backend!r}")
        
        # Domain interface -> Infrastructure implementation
        container.register_singleton(UserRepository, repository)
