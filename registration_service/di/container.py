# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    NotificationProvider,
    RepositoryProvider,
)
from ..core.config import Settings, get_settings


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider) - mongo backend only
    2. Repositories (RepositoryProvider) - depends on database
    3. Notifications (NotificationProvider)
    4. Use cases (AuthProvider) - depend on repositories and notifications
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database -> repositories -> notifications -> use cases
        """
        self.register_singleton(Settings, self.settings)
        
        if self.settings.user_repository_backend == "mongo":
            DatabaseProvider.register(self)
        
        RepositoryProvider.register(self)
        NotificationProvider.register(self)
        AuthProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next get_container() rebuilds it"""
    global _container
    _container = None
