"""
Persistence Layer - Document store implementations.
"""

from contact_api.infrastructure.persistence.mongo_client import (
    close_mongo_client,
    create_mongo_client,
)
from contact_api.infrastructure.persistence.mongo_contact_repository import (
    MongoContactRepository,
)

__all__ = [
    "create_mongo_client",
    "close_mongo_client",
    "MongoContactRepository",
]
