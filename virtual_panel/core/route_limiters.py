"""
Description:
This module sets up a rate limiter for the application using SlowAPI.
It initializes a Limiter instance with a key function to identify clients by their IP address.
The per-route limit comes from RATE_LIMIT and the limiter can be switched off with RATE_LIMIT_ENABLED.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For utility functions like get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger

from virtual_panel.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
ROUTE_LIMIT = settings.rate_limit
logger.info(f"Rate limiter initialized (enabled={settings.rate_limit_enabled}, limit={ROUTE_LIMIT})")
