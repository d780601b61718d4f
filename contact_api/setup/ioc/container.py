"""
Dishka DI Container Setup.

Guidelines:
- Registers the long-lived collaborators (MongoDB client, repository, mail sender)
- Maps domain ports to concrete implementations
- Builds the pipeline handler once per request

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  InfrastructureProvider → MongoContactRepository / SmtpMailSender
                                    ↓
  AppProvider → SubmitContactHandler (uses ContactRepository / MailSender interfaces)
"""

import logging
from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from pymongo import AsyncMongoClient

from contact_api.application.commands.contact import SubmitContactHandler
from contact_api.config.settings import Config
from contact_api.domain.ports import ContactRepository, MailSender
from contact_api.infrastructure.mail import SmtpMailSender
from contact_api.infrastructure.persistence import (
    MongoContactRepository,
    close_mongo_client,
    create_mongo_client,
)

logger = logging.getLogger(__name__)


class InfrastructureProvider(Provider):
    """
    Store and mail relay adapters.

    Everything here is Scope.APP: created once, shared by every request,
    finalized when the container closes.
    """

    def __init__(self, config: Optional[type[Config]] = None):
        super().__init__()
        self._config = config or Config

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_mongo_client(self) -> AsyncIterable[AsyncMongoClient]:
        """
        Provide the MongoDB client (singleton, app-scoped).

        - Connects and pings on first resolution; raises StartupError when unreachable
        - Code after yield runs on container.close()
        """
        client = await create_mongo_client(
            self._config.MONGODB_URI, self._config.MONGODB_TIMEOUT_MS
        )
        yield client
        await close_mongo_client(client)

    @provide(scope=Scope.APP)
    def get_contact_repository(self, client: AsyncMongoClient) -> ContactRepository:
        return MongoContactRepository(
            client,
            database_name=self._config.MONGODB_DB_NAME,
            collection_name=self._config.MONGODB_COLLECTION,
        )

    # ==================== MAIL RELAY ====================

    @provide(scope=Scope.APP)
    def get_mail_sender(self) -> MailSender:
        return SmtpMailSender(
            host=self._config.EMAIL_HOST,
            port=self._config.EMAIL_PORT,
            secure=self._config.EMAIL_SECURE,
            user=self._config.EMAIL_USER,
            password=self._config.EMAIL_PASS,
            timeout=self._config.EMAIL_TIMEOUT,
        )


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers the command handlers; they only see the domain ports.
    """

    def __init__(
        self,
        sender_address: Optional[str] = None,
        recipient_address: Optional[str] = None,
    ):
        super().__init__()
        self._sender_address = Config.EMAIL_FROM if sender_address is None else sender_address
        self._recipient_address = (
            Config.EMAIL_TO if recipient_address is None else recipient_address
        )

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_submit_contact_handler(
        self, contact_repository: ContactRepository, mail_sender: MailSender
    ) -> SubmitContactHandler:
        """
        Provide SubmitContactHandler.

        - Parameters ask for the abstract ports
        - Dishka resolves them from whichever provider registers them
        """
        return SubmitContactHandler(
            contact_repository=contact_repository,
            mail_sender=mail_sender,
            sender_address=self._sender_address,
            recipient_address=self._recipient_address,
        )


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create the DI container.

    Args:
        providers: Replacement providers; defaults to the MongoDB/SMTP wiring

    Returns:
        AsyncContainer (nothing is connected until first resolution)
    """
    if not providers:
        providers = (AppProvider(), InfrastructureProvider())
    return make_async_container(*providers)


async def connect_store(container: AsyncContainer) -> ContactRepository:
    """
    Resolve the repository so the store connects before traffic is accepted.

    Raises:
        StartupError: If MongoDB cannot be reached (fatal, the app must not start)
    """
    return await container.get(ContactRepository)


async def verify_mail_relay(container: AsyncContainer) -> bool:
    """
    Check the mail relay once at startup.

    A failure is logged and does not stop the application.
    """
    mail_sender = await container.get(MailSender)
    result = await mail_sender.verify()
    if result.ok:
        logger.info("[SMTP] Mail relay is ready")
        return True
    logger.error(f"[SMTP] Mail relay verification failed: {result.error.message}")
    return False
