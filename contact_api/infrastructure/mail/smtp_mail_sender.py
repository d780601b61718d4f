"""
SMTP Mail Sender - Delivers notification emails through the configured relay.

smtplib is blocking, so every relay round trip runs in a worker thread.
A new SMTP session is opened per message; the sender object itself is long-lived.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from contact_api.domain.entities.notification_email import NotificationEmail
from contact_api.domain.exceptions import MailError
from contact_api.domain.ports.mail_sender import MailSender
from contact_api.domain.result import Result

logger = logging.getLogger(__name__)

# Anything smtplib or the socket layer raises, plus malformed header values
_SEND_ERRORS = (smtplib.SMTPException, OSError, ValueError)


class SmtpMailSender(MailSender):
    def __init__(
        self,
        host: str,
        port: int,
        secure: bool = False,
        user: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self._host = host
        self._port = port
        self._secure = secure
        self._user = user
        self._password = password
        self._timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if not self._host:
            raise MailError("EMAIL_HOST is not configured")

        if self._secure:
            server = smtplib.SMTP_SSL(self._host, self._port, timeout=self._timeout)
        else:
            server = smtplib.SMTP(self._host, self._port, timeout=self._timeout)

        try:
            if not self._secure:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
            if self._user and self._password:
                server.login(self._user, self._password)
        except Exception:
            server.close()
            raise
        return server

    @staticmethod
    def build_message(notification: NotificationEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = notification.sender
        msg["To"] = notification.to
        msg["Reply-To"] = notification.reply_to
        msg["Subject"] = notification.subject
        msg.set_content(notification.text_body)
        msg.add_alternative(notification.html_body, subtype="html")
        return msg

    def _send_sync(self, notification: NotificationEmail) -> None:
        msg = self.build_message(notification)
        with self._connect() as server:
            server.send_message(msg)

    def _verify_sync(self) -> None:
        with self._connect() as server:
            server.noop()

    async def send(self, notification: NotificationEmail) -> Result[None, MailError]:
        try:
            await asyncio.to_thread(self._send_sync, notification)
        except MailError as e:
            logger.error(f"[SMTP] Error sending email: {e.message}")
            return Result.failure(e)
        except _SEND_ERRORS as e:
            logger.error(f"[SMTP] Error sending email: {e}", exc_info=True)
            return Result.failure(MailError(f"Failed to send email: {e}"))
        return Result.success()

    async def verify(self) -> Result[None, MailError]:
        try:
            await asyncio.to_thread(self._verify_sync)
        except MailError as e:
            return Result.failure(e)
        except _SEND_ERRORS as e:
            return Result.failure(MailError(f"Mail relay verification failed: {e}"))
        return Result.success()
