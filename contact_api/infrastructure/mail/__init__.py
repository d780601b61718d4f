"""
Mail Layer - Outbound relay implementations.
"""

from contact_api.infrastructure.mail.smtp_mail_sender import SmtpMailSender

__all__ = ["SmtpMailSender"]
