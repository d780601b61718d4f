"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: MongoDB implementation of ContactRepository
- mail/: SMTP implementation of MailSender
"""
