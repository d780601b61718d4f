"""
Mail Sender Port - Interface for the outbound mail relay.
Implementation: contact_api/infrastructure/mail/smtp_mail_sender.py
"""

from abc import ABC, abstractmethod

from contact_api.domain.entities.notification_email import NotificationEmail
from contact_api.domain.exceptions import MailError
from contact_api.domain.result import Result


class MailSender(ABC):
    @abstractmethod
    async def send(self, notification: NotificationEmail) -> Result[None, MailError]: ...

    @abstractmethod
    async def verify(self) -> Result[None, MailError]:
        """Check relay connectivity and credentials without sending anything."""
        ...
