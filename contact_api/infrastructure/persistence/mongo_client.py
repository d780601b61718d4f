"""
Async MongoDB Client Factory.

Creates the process-wide MongoDB client (one connection pool) for the DI container.
"""

import logging
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from contact_api.config.settings import Config
from contact_api.domain.exceptions import StartupError

logger = logging.getLogger(__name__)


async def create_mongo_client(
    uri: str | None = None, timeout_ms: int | None = None
) -> AsyncMongoClient:
    """
    Create async MongoDB client and check the server is reachable.

    Returns:
        AsyncMongoClient: Connected client

    Raises:
        StartupError: If MongoDB is not reachable

    Note:
        - Connection pooling is handled by the driver
        - ping() is issued before returning so a bad URI fails at boot, not on first request
    """
    uri = uri or Config.MONGODB_URI
    timeout_ms = timeout_ms or Config.MONGODB_TIMEOUT_MS
    client = AsyncMongoClient(
        uri,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
        tz_aware=True,
    )

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        await client.close()
        logger.error(f"[MongoDB] Connection error: {e}")
        raise StartupError(f"MongoDB connection failed: {e}") from e

    logger.info("[MongoDB] Connected")
    return client


async def close_mongo_client(client: AsyncMongoClient) -> None:
    """
    Close MongoDB client connection.

    Note:
        Should be called on application shutdown.
    """
    if client:
        await client.close()
        logger.info("[MongoDB] Connection closed")
