import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from fastapi.testclient import TestClient

from contact_api.fastapi_app import create_fastapi_app
from contact_api.presentation.rate_limiting import limiter
from contact_api.setup.ioc.container import AppProvider, create_container
from fakes import (
    RECIPIENT,
    SENDER,
    InMemoryContactRepository,
    InMemoryInfrastructureProvider,
    RecordingMailSender,
)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture()
def repository():
    return InMemoryContactRepository()


@pytest.fixture()
def mail_sender():
    return RecordingMailSender()


@pytest.fixture()
def infrastructure(repository, mail_sender):
    return InMemoryInfrastructureProvider(repository, mail_sender)


@pytest.fixture()
def container(infrastructure):
    """DI container with the real handler wiring over in-memory adapters."""
    return create_container(
        AppProvider(sender_address=SENDER, recipient_address=RECIPIENT),
        infrastructure,
    )


@pytest.fixture()
def app(container):
    """Create a new FastAPI app wired to in-memory collaborators."""
    return create_fastapi_app(container=container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs the lifespan)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def valid_payload():
    return {"name": "Ada", "email": "ada@example.com", "message": "Hello\nWorld"}
