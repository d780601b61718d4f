"""
MongoDB Contact Repository Implementation.

Implements ContactRepository port from the domain layer with a single insert.

Stored document:
    {
        "_id": ObjectId,
        "name": str,
        "email": str,
        "message": str,
        "createdAt": datetime (UTC)
    }
"""

import logging
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from contact_api.config.settings import Config
from contact_api.domain.entities.contact_submission import ContactSubmission
from contact_api.domain.exceptions import StoreError
from contact_api.domain.ports.contact_repository import ContactRepository
from contact_api.domain.result import Result
from contact_api.domain.value_objects.submission_id import SubmissionId

logger = logging.getLogger(__name__)


class MongoContactRepository(ContactRepository):
    """
    MongoDB implementation of ContactRepository.

    Handles persistence of ContactSubmission entities to the contacts collection.
    """

    def __init__(
        self,
        client: AsyncMongoClient,
        database_name: str | None = None,
        collection_name: str | None = None,
    ):
        """
        Initialize repository with a connected client.

        Args:
            client: Connected AsyncMongoClient (injected by DI container)
            database_name: Database used when the connection string names none
            collection_name: Collection holding submissions
        """
        database = client.get_default_database(
            default=database_name or Config.MONGODB_DB_NAME
        )
        self._collection = database[collection_name or Config.MONGODB_COLLECTION]

    @staticmethod
    def _to_document(submission: ContactSubmission) -> dict:
        return {
            "name": submission.name,
            "email": str(submission.email),
            "message": submission.message,
            "createdAt": submission.created_at,
        }

    async def save(
        self, submission: ContactSubmission
    ) -> Result[SubmissionId, StoreError]:
        """
        Insert a submission.

        Returns:
            Result holding the new SubmissionId, or a StoreError on any driver failure
        """
        try:
            inserted = await self._collection.insert_one(self._to_document(submission))
        except PyMongoError as e:
            logger.exception("[MongoDB] insert_one failed")
            return Result.failure(StoreError(f"Failed to store contact: {e}"))

        return Result.success(SubmissionId(str(inserted.inserted_id)))
