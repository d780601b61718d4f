"""Dishka dependency container."""

from contact_api.setup.ioc.container import (
    AppProvider,
    InfrastructureProvider,
    connect_store,
    create_container,
    verify_mail_relay,
)

__all__ = [
    "AppProvider",
    "InfrastructureProvider",
    "connect_store",
    "create_container",
    "verify_mail_relay",
]
