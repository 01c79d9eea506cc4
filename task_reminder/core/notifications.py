"""
Email reminders for newly created tasks.
"""
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)

REMINDER_SUBJECT = "Task Reminder"


class Notifier:
    """Sends best-effort reminder emails through an SMTP relay"""

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int,
        smtp_user: str = "",
        smtp_password: str = "",
        from_email: str = "",
        enabled: bool = True,
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_password = smtp_password
        self.from_email = from_email or smtp_user
        self.enabled = enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> "Notifier":
        return cls(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_password=settings.smtp_password,
            from_email=settings.from_email,
            enabled=settings.enable_email_notifications,
        )

    @property
    def configured(self) -> bool:
        return bool(self.enabled and self.smtp_user and self.smtp_password)

    def build_reminder(self, to_address: str, title: str, deadline: str) -> MIMEMultipart:
        """Create the reminder email for a task"""
        msg = MIMEMultipart()
        msg['From'] = self.from_email
        msg['To'] = to_address
        msg['Subject'] = REMINDER_SUBJECT
        msg.attach(MIMEText(f'You added a task: "{title}" which is due on {deadline}', 'plain'))
        return msg

    def send_reminder(self, to_address: str, title: str, deadline: str) -> bool:
        """
        Send a task reminder.

        Runs unsupervised after the response has been sent. Failures are
        logged and never raised; nothing is retried.

        Returns:
            bool: True if the relay accepted the message
        """
        if not self.configured:
            logger.info(f"Reminder for '{title}' simulated (no SMTP config)")
            return False

        try:
            msg = self.build_reminder(to_address, title, deadline)
            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                server.starttls()
                server.login(self.smtp_user, self.smtp_password)
                server.sendmail(self.from_email, [to_address], msg.as_string())

            logger.info(f"Reminder sent to {to_address} for '{title}'")
            return True

        except Exception as e:
            logger.error(f"Mail error for '{title}': {e}")
            return False


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier
