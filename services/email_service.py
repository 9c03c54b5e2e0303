import logging
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

import aiosmtplib

from config import Settings
from .exceptions import MailDeliveryError

logger = logging.getLogger(__name__)


def build_subject(subject: Optional[str], name: str) -> str:
    # The legacy contact handler combined these with a bitwise `|`, which
    # yielded numeric subjects such as "0". The evident intent is a fallback.
    if subject and subject.strip():
        return subject.strip()
    return f"New Inquiry from {name}"


class EmailService:
    """Delivers contact-form inquiries to the site's own mailbox over SMTPS"""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def configured(self) -> bool:
        return bool(self.settings.smtp_host and self.settings.email_user)

    def build_message(self, name: str, email: str, message: str, subject: Optional[str] = None) -> EmailMessage:
        mail = EmailMessage()
        mail["From"] = formataddr((name, self.settings.email_user))
        mail["To"] = self.settings.email_user
        mail["Reply-To"] = email
        mail["Subject"] = build_subject(subject, name)
        mail.set_content(f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}")
        return mail

    async def send_inquiry(self, name: str, email: str, message: str, subject: Optional[str] = None) -> None:
        if not self.configured:
            raise MailDeliveryError("SMTP is not configured")

        mail = self.build_message(name, email, message, subject)
        try:
            await aiosmtplib.send(
                mail,
                hostname=self.settings.smtp_host,
                port=self.settings.smtp_port,
                username=self.settings.email_user,
                password=self.settings.email_pass,
                use_tls=True,
                validate_certs=self.settings.smtp_validate_certs,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Error sending email: %s", e)
            raise MailDeliveryError(str(e)) from e

        logger.info("Email sent successfully from %s", email)
