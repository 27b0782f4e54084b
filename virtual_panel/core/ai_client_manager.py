"""
AI Client Manager

This module manages the AsyncOpenAI client instances used to reach the generative
language model through its OpenAI-compatible endpoint. Interview and resume analysis
each get their own dedicated client so a slow resume call does not hold up the
connection pool used by interview traffic.

When GEMINI_API_KEY is missing, or still set to the placeholder value from the example
.env file, no clients are created and every accessor returns None. Callers treat that
as "AI disabled" and go straight to their fallback.
"""

import threading
from typing import Dict, Optional

from loguru import logger
from openai import AsyncOpenAI

from virtual_panel.core.config import Settings, settings as default_settings

SERVICE_TYPES = ("interview", "resume")


class AIClientManager:
    """
    Manages dedicated AI client instances for different services.

    Clients are built lazily on first access. Each client is configured for a single
    attempt (no SDK retries) with the configured timeout; the gateway enforces the
    overall bound on top of that.
    """

    _instance: Optional['AIClientManager'] = None
    _lock = threading.Lock()

    def __init__(self, config: Settings = default_settings):
        self._config = config
        self._clients: Dict[str, AsyncOpenAI] = {}
        self._initialized = False

    @classmethod
    def get_instance(cls) -> 'AIClientManager':
        """Thread-safe singleton instance getter."""
        if cls._instance is None:
            with cls._lock:
                # Double-check locking pattern
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @property
    def enabled(self) -> bool:
        return self._config.ai_enabled

    def _initialize_clients(self):
        """Lazy initialization of client instances."""
        if self._initialized:
            return

        with self._lock:
            if self._initialized:
                return

            if not self.enabled:
                logger.warning("No valid GEMINI_API_KEY configured; AI features will use fallbacks")
                self._initialized = True
                return

            try:
                self._clients = {
                    service_type: AsyncOpenAI(
                        base_url=self._config.ai_base_url,
                        api_key=self._config.gemini_api_key,
                        timeout=self._config.ai_timeout_seconds,
                        max_retries=0,
                    )
                    for service_type in SERVICE_TYPES
                }
                self._initialized = True
                logger.info(f"Initialized {len(self._clients)} dedicated AI client instances")
            except Exception as e:
                logger.error(f"Failed to initialize AI clients: {e}")
                raise RuntimeError(f"Failed to initialize AI clients: {e}") from e

    def get_client(self, service_type: str) -> Optional[AsyncOpenAI]:
        """
        Get the dedicated client for the specified service type.

        Args:
            service_type (str): Type of service ("interview", "resume")

        Returns:
            Optional[AsyncOpenAI]: Dedicated client instance, or None when AI is disabled

        Raises:
            ValueError: If service_type is not supported
        """
        if service_type not in SERVICE_TYPES:
            raise ValueError(f"Unsupported service type: {service_type}. Available: {list(SERVICE_TYPES)}")

        self._initialize_clients()
        return self._clients.get(service_type)

    def get_interview_client(self) -> Optional[AsyncOpenAI]:
        """Get dedicated client for question generation and transcript analysis."""
        return self.get_client("interview")

    def get_resume_client(self) -> Optional[AsyncOpenAI]:
        """Get dedicated client for resume analysis."""
        return self.get_client("resume")


def get_ai_client_manager() -> AIClientManager:
    """Return the process-wide AIClientManager."""
    return AIClientManager.get_instance()
