"""
PORTS - Interfaces the infrastructure layer implements.
"""

from contact_api.domain.ports.contact_repository import ContactRepository
from contact_api.domain.ports.mail_sender import MailSender

__all__ = [
    "ContactRepository",
    "MailSender",
]
