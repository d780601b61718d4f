"""
Rate limiting - per client address.

The limiter is module-level so route modules can decorate endpoints at import time.
The client address comes from ProxyHeadersMiddleware when the peer is a trusted proxy.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from contact_api.config.settings import Config

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=Config.RATELIMIT_STORAGE_URI,
    enabled=Config.RATE_LIMIT_ENABLED,
)
