from abc import ABC, abstractmethod


class NotificationService(ABC):
    """Port for user-facing notifications sent as side effects of use cases"""
    
    @abstractmethod
    async def send_welcome_email(self, email: str) -> None:
        """
        Send the welcome email to a newly registered user
        
        Raises:
            NotificationError: If the message could not be delivered
        """
        pass
