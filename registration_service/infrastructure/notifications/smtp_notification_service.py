"""
Welcome email notifications over SMTP (async).
==============================================

Implements the NotificationService port with aiosmtplib. When SMTP is not
configured the send is skipped with a warning; delivery failures are raised
as NotificationError so the use case decides what to do with them.
"""
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Optional

import aiosmtplib

from ...core.config import Settings, get_settings
from ...domain.exceptions import NotificationError
from ...domain.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


def _build_text_body(app_name: str) -> str:
    return (
        f"Welcome to {app_name}!\n\n"
        "Your account has been created. You can now sign in with the email "
        "address this message was sent to.\n\n"
        "This is an automated message. Do not reply to this email.\n"
    )


def _build_html_body(app_name: str) -> str:
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Welcome to {name}</title>
</head>
<body style="font-family:Segoe UI,Helvetica,Arial,sans-serif;background:#f5f5f5;margin:0;padding:24px;">
  <div style="max-width:600px;margin:0 auto;background:#fff;border-radius:8px;overflow:hidden;">
    <div style="background:#1a237e;color:#fff;padding:20px 24px;">
      <h1 style="margin:0;font-size:20px;font-weight:600;">Welcome to {name}</h1>
    </div>
    <div style="padding:24px;font-size:14px;color:#333;">
      <p>Your account has been created. You can now sign in with the email address this message was sent to.</p>
    </div>
    <div style="background:#fafafa;padding:12px 24px;font-size:12px;color:#888;">
      This is an automated message. Do not reply to this email.
    </div>
  </div>
</body>
</html>
"""


class SmtpNotificationService(NotificationService):
    """Sends the welcome email through the configured SMTP server"""
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
    
    def build_welcome_message(self, email: str) -> MIMEMultipart:
        """Build the multipart (text + HTML) welcome message for one recipient"""
        settings = self.settings
        msg = MIMEMultipart("alternative")
        msg["Subject"] = f"Welcome to {settings.app_name}"
        msg["From"] = f"{settings.email_from_name} <{settings.email_from}>"
        msg["To"] = email
        msg.attach(MIMEText(_build_text_body(settings.app_name), "plain", "utf-8"))
        msg.attach(MIMEText(_build_html_body(settings.app_name), "html", "utf-8"))
        return msg
    
    async def send_welcome_email(self, email: str) -> None:
        """
        Send the welcome email
        
        Raises:
            NotificationError: If the SMTP server rejects or cannot be reached
        """
        settings = self.settings
        if not settings.smtp_configured:
            logger.warning(
                "SMTP not configured (set SMTP_HOST, SMTP_USER, SMTP_PASSWORD); "
                f"skipping welcome email to {email}"
            )
            return
        
        msg = self.build_welcome_message(email)
        try:
            await aiosmtplib.send(
                msg,
                sender=settings.email_from,
                recipients=[email],
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_user,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
                start_tls=settings.smtp_start_tls if not settings.smtp_use_tls else False,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            raise NotificationError(
                f"Failed to send welcome email to {email}: {e}",
                details={"recipient": email},
            ) from e
        
        logger.info(f"Welcome email sent to {email}")
