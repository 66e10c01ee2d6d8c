from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}

PROVIDER_KEY_VARS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}


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


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    ai_provider: str
    ai_model: str
    gemini_api_key: str | None
    openai_api_key: str | None
    openai_base_url: str | None
    openai_timeout_s: float
    openai_max_retries: int
    host: str
    port: int
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    max_upload_bytes: int

    @property
    def api_key(self) -> str | None:
        if self.ai_provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key


def load_settings() -> Settings:
    provider = (_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower()
    if provider not in PROVIDER_KEY_VARS:
        raise RuntimeError(f"AI_PROVIDER must be one of: {', '.join(sorted(PROVIDER_KEY_VARS))}.")

    settings = Settings(
        ai_provider=provider,
        ai_model=(_get_env("AI_MODEL", DEFAULT_MODELS[provider]) or DEFAULT_MODELS[provider]).strip(),
        gemini_api_key=_get_env("GEMINI_API_KEY"),
        openai_api_key=_get_env("OPENAI_API_KEY"),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        openai_timeout_s=float(_get_env("OPENAI_TIMEOUT_S", "60") or "60"),
        openai_max_retries=_get_env_int("OPENAI_MAX_RETRIES", 2),
        host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
        port=_get_env_int("PORT", 3000),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "https://skillscope-ai.vercel.app",
            ],
        ),
        cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
        max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
    )

    if not (settings.api_key or "").strip():
        raise RuntimeError(f"{PROVIDER_KEY_VARS[provider]} environment variable is not set.")

    return settings
