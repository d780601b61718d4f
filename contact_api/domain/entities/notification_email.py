"""
NotificationEmail Entity - Transient email announcing a new submission.

Built per request, handed to the MailSender, never stored.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationEmail:
    sender: str
    reply_to: str
    to: str
    subject: str
    text_body: str
    html_body: str
