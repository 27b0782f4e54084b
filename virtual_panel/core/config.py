"""
Description:
Application settings loaded from environment variables (and a local .env file).

Settings are read once at import time into a frozen dataclass so request handlers
only ever see immutable configuration.

Dependencies:
- python-dotenv: For loading a local .env file.
- dataclasses: For the immutable settings container.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# Value shipped in the example .env; treated the same as a missing key.
PLACEHOLDER_API_KEY = "your_gemini_api_key_here"
GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None
    ai_base_url: str
    interview_model: str
    resume_model: str
    ai_timeout_seconds: float
    environment: str
    log_level: str
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    max_resume_bytes: int
    min_resume_text_chars: int
    host: str
    port: int

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def ai_enabled(self) -> bool:
        """True when a usable credential for the generative model is configured."""
        return bool(self.gemini_api_key) and self.gemini_api_key != PLACEHOLDER_API_KEY


def load_settings() -> Settings:
    return Settings(
        gemini_api_key=_get_env("GEMINI_API_KEY"),
        ai_base_url=_get_env("AI_BASE_URL", GEMINI_OPENAI_BASE_URL) or GEMINI_OPENAI_BASE_URL,
        interview_model=_get_env("INTERVIEW_MODEL", "gemini-2.5-flash") or "gemini-2.5-flash",
        resume_model=_get_env("RESUME_MODEL", "gemini-2.5-pro") or "gemini-2.5-pro",
        ai_timeout_seconds=_get_env_float("AI_TIMEOUT_SECONDS", 20.0),
        environment=(_get_env("ENVIRONMENT", "production") or "production").strip().lower(),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:3000",
                "http://127.0.0.1:3000",
            ],
        ),
        max_resume_bytes=_get_env_int("MAX_RESUME_BYTES", 5 * 1024 * 1024),
        min_resume_text_chars=_get_env_int("MIN_RESUME_TEXT_CHARS", 50),
        host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
        port=_get_env_int("PORT", 5000),
    )


settings = load_settings()
