# File: chronoboard/services/mail_service.py

"""
Outgoing mail.

With ``mail_file_transport`` enabled (the default for development) messages
are written as ``.eml`` files into ``mail_dir`` instead of being sent, so the
contact form can be exercised without an SMTP server.
"""

import uuid
from datetime import datetime, timezone
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from pathlib import Path
from typing import Optional

import aiosmtplib

from chronoboard.core.config import Settings, settings as default_settings
from chronoboard.core.logging_config import get_logger

logger = get_logger(__name__)


class Mailer:
    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def compose(
        self,
        *,
        to: str,
        subject: str,
        body: str,
        reply_to: Optional[str] = None,
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.config.sender_name, self.config.sender_email))
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain="chronoboard.local")
        if reply_to:
            message["Reply-To"] = reply_to
        message.set_content(body)
        return message

    async def send(
        self,
        *,
        to: str,
        subject: str,
        body: str,
        reply_to: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Deliver one message.

        Returns the written file path under file transport, else None.
        SMTP failures propagate as ``aiosmtplib.SMTPException`` / ``OSError``.
        """
        message = self.compose(to=to, subject=subject, body=body, reply_to=reply_to)

        if self.config.mail_file_transport:
            return self._write_file(message)

        await aiosmtplib.send(
            message,
            hostname=self.config.smtp_host,
            port=self.config.smtp_port,
            timeout=10,
        )
        logger.info("Mail sent to %s: %s", to, subject)
        return None

    def _write_file(self, message: EmailMessage) -> Path:
        mail_dir = Path(self.config.mail_dir)
        mail_dir.mkdir(parents=True, exist_ok=True)

        stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        path = mail_dir / f"{stamp}-{uuid.uuid4().hex[:8]}.eml"
        path.write_bytes(message.as_bytes())
        logger.info("Mail written to %s", path)
        return path


async def send_contact_message(mailer: Mailer, *, name: str, email: str, subject: str, body: str) -> Optional[Path]:
    """Forward a contact form submission to the site administrator."""
    return await mailer.send(
        to=mailer.config.admin_email,
        subject=subject,
        body=f"From: {name} <{email}>\n\n{body}",
        reply_to=formataddr((name, email)),
    )
