from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.services.notification_service import NotificationService
from ...infrastructure.notifications.smtp_notification_service import SmtpNotificationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NotificationProvider:
    """Notification registration provider - wires the notification port to SMTP"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            NotificationService,
            SmtpNotificationService(settings=container.get(Settings)),
        )
