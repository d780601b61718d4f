"""
Contact Repository Port - Interface for submission persistence.
Implementation: contact_api/infrastructure/persistence/mongo_contact_repository.py

Append-only: the only operation is insert.
"""

from abc import ABC, abstractmethod

from contact_api.domain.entities.contact_submission import ContactSubmission
from contact_api.domain.exceptions import StoreError
from contact_api.domain.result import Result
from contact_api.domain.value_objects.submission_id import SubmissionId


class ContactRepository(ABC):
    @abstractmethod
    async def save(
        self, submission: ContactSubmission
    ) -> Result[SubmissionId, StoreError]: ...
