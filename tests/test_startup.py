"""Lifespan behaviour: the store is mandatory, the mail relay is not."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from contact_api import fastapi_app
from contact_api.application.commands.contact import SubmitContactHandler
from contact_api.domain.exceptions import StartupError
from contact_api.domain.ports import ContactRepository, MailSender
from contact_api.infrastructure.mail import SmtpMailSender
from contact_api.infrastructure.persistence import MongoContactRepository
from contact_api.setup.ioc import container as ioc
from fakes import InMemoryContactRepository, InMemoryInfrastructureProvider, RecordingMailSender


def _app_with(infrastructure):
    return fastapi_app.create_fastapi_app(
        container=ioc.create_container(ioc.AppProvider(), infrastructure)
    )


def test_store_connection_failure_aborts_startup():
    infrastructure = InMemoryInfrastructureProvider(
        InMemoryContactRepository(), RecordingMailSender(), unreachable_store=True
    )

    with pytest.raises(StartupError):
        with TestClient(_app_with(infrastructure)):
            pass


def test_mail_relay_failure_does_not_block_startup():
    mail_sender = RecordingMailSender(fail_verify=True)
    app = _app_with(InMemoryInfrastructureProvider(InMemoryContactRepository(), mail_sender))

    with TestClient(app) as client:
        res = client.get("/api/health")

    assert res.status_code == 200
    assert mail_sender.verify_calls == 1


def test_container_is_closed_on_shutdown():
    infrastructure = InMemoryInfrastructureProvider(
        InMemoryContactRepository(), RecordingMailSender()
    )

    with TestClient(_app_with(infrastructure)):
        assert infrastructure.store_closed is False

    assert infrastructure.store_closed is True


class TestDefaultContainer:
    """The production wiring, with the MongoDB driver calls patched out."""

    @pytest.fixture()
    def mongo(self, monkeypatch):
        client = MagicMock()
        create = AsyncMock(return_value=client)
        close = AsyncMock()
        monkeypatch.setattr(ioc, "create_mongo_client", create)
        monkeypatch.setattr(ioc, "close_mongo_client", close)
        return client, create, close

    def test_resolves_mongo_and_smtp_adapters(self, mongo):
        client, create, close = mongo

        async def _resolve():
            container = ioc.create_container()
            repository = await container.get(ContactRepository)
            mail_sender = await container.get(MailSender)
            async with container() as request_container:
                handler = await request_container.get(SubmitContactHandler)
            await container.close()
            return repository, mail_sender, handler

        repository, mail_sender, handler = asyncio.run(_resolve())

        assert isinstance(repository, MongoContactRepository)
        assert isinstance(mail_sender, SmtpMailSender)
        assert isinstance(handler, SubmitContactHandler)
        create.assert_awaited_once()
        close.assert_awaited_once_with(client)

    def test_unreachable_store_raises_startup_error(self, monkeypatch):
        monkeypatch.setattr(
            ioc,
            "create_mongo_client",
            AsyncMock(side_effect=StartupError("MongoDB connection failed: timeout")),
        )

        async def _connect():
            container = ioc.create_container()
            try:
                await ioc.connect_store(container)
            finally:
                await container.close()

        with pytest.raises(StartupError):
            asyncio.run(_connect())
