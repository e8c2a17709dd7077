# Standard library imports
import asyncio
import logging
from typing import Callable, Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.notification_service import NotificationService
from ....domain.models.user import User
from ....domain.exceptions import NotificationError, PersistenceError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse
from ...validators.registration_validator import RegistrationValidator, normalize_email

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use case for registering a new user.
    
    Runs validate -> build entity -> save -> welcome email -> response, in
    that order, aborting at the first failing step. A failed welcome email
    after a successful save is logged and does not fail the registration.
    Email uniqueness is not checked here.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        notification_service: NotificationService,
        validator: Optional[RegistrationValidator] = None,
        password_hasher: Callable[[str], str] = hash_password,
        persistence_timeout: Optional[float] = None,
        notification_timeout: Optional[float] = None,
    ) -> None:
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.validator = validator or RegistrationValidator()
        self.password_hasher = password_hasher
        self.persistence_timeout = persistence_timeout
        self.notification_timeout = notification_timeout
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with user details
            
        Returns:
            UserResponse with created user information (no password data)
            
        Raises:
            ValidationError: If the request breaks one or more input rules
            PersistenceError: If the user could not be saved
        """
        self.validator.validate(request)
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name.strip(),
            email=normalize_email(request.email),
            password_hash=self.password_hasher(request.password),
        )
        
        saved_user = await self._save(new_user)
        if not saved_user.id:
            raise PersistenceError("Repository returned the saved user without an id")
        logger.info(f"Registered user {saved_user.id}")
        
        await self._send_welcome_email(saved_user)
        
        return UserResponse.from_user(saved_user)
    
    async def _save(self, user: User) -> User:
        try:
            return await asyncio.wait_for(
                self.user_repository.save(user),
                timeout=self.persistence_timeout,
            )
        except asyncio.TimeoutError as e:
            raise PersistenceError(
                f"Saving user timed out after {self.persistence_timeout}s"
            ) from e
    
    async def _send_welcome_email(self, user: User) -> None:
        try:
            await asyncio.wait_for(
                self.notification_service.send_welcome_email(user.email),
                timeout=self.notification_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Welcome email for user {user.id} timed out after "
                f"{self.notification_timeout}s; registration kept"
            )
        except NotificationError as e:
            logger.warning(
                f"Welcome email for user {user.id} failed; registration kept: {e.message}",
                exc_info=True,
            )
