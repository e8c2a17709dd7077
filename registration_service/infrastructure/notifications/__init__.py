"""Notification adapters for user-facing messages"""

from .smtp_notification_service import SmtpNotificationService

__all__ = [
    "SmtpNotificationService",
]
