from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "https://financial-chatbot-app.netlify.app",
    "https://cosmic-hummingbird-6314a4.netlify.app",
]
DEFAULT_CORS_ORIGIN_REGEX = r"https://.*\.netlify\.(app|live)"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name) or ""
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    def __init__(self) -> None:
        self.app_env: str = os.getenv("APP_ENV") or os.getenv("NODE_ENV", "development")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "5002"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # An explicit CORS_ORIGIN replaces the default frontend list and regex.
        explicit_origins = _env_list("CORS_ORIGIN")
        self.cors_origins: List[str] = explicit_origins or list(DEFAULT_CORS_ORIGINS)
        self.cors_origin_regex: Optional[str] = None if explicit_origins else DEFAULT_CORS_ORIGIN_REGEX

        self.gemini_api_key: Optional[str] = os.getenv("GEMINI_API_KEY") or None
        self.gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
        self.temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.7"))
        self.top_p: float = float(os.getenv("MODEL_TOP_P", "0.95"))
        self.top_k: int = int(os.getenv("MODEL_TOP_K", "40"))
        self.max_output_tokens: int = int(os.getenv("MODEL_MAX_OUTPUT_TOKENS", "4096"))
        # One attempt per provider call; failures fall back to canned content.
        self.max_retries: int = int(os.getenv("MODEL_MAX_RETRIES", "0"))
        self.probe_on_startup: bool = _env_bool("GEMINI_PROBE_ON_STARTUP", True)

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() in {"prod", "production"}

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
