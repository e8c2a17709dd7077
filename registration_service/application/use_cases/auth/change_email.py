# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.auth_dto import ChangeEmailRequest
from ...dto.user_dto import UserResponse
from ...validators.registration_validator import validate_new_email

logger = logging.getLogger(__name__)


class ChangeEmailUseCase:
    """Use case for replacing a user's email through User.change_email"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: ChangeEmailRequest) -> UserResponse:
        """
        Change the email of an existing user
        
        Raises:
            ValidationError: If the new email is empty or malformed
            UserNotFoundError: If no user has this id
            PersistenceError: If the update could not be saved
        """
        new_email = validate_new_email(request.new_email)
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        
        user.change_email(new_email)
        saved_user = await self.user_repository.save(user)
        logger.info(f"Changed email for user {saved_user.id}")
        
        return UserResponse.from_user(saved_user)
