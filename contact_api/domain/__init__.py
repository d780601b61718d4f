"""
DOMAIN LAYER - Contact submissions and their rules

This layer contains:
- Entities: ContactSubmission, NotificationEmail
- Value Objects: SubmissionId, ContactEmail
- Ports: Interfaces the infrastructure implements (store, mail relay)
- Services: Pure domain logic (submission validation)
- Exceptions: The error taxonomy carried through the pipeline

RULES:
1. NO framework imports (no FastAPI, pymongo, Pydantic, etc.)
2. NO I/O operations (no database, no SMTP, no file system)
3. Only depends on Python stdlib
"""
