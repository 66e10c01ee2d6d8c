from __future__ import annotations

from skillscope.core.config import Settings

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def cors_allowed_origins(settings: Settings) -> list[str]:
    # Starlette compares origins literally, so trailing slashes never match.
    origins = [origin.strip().rstrip("/") for origin in settings.cors_allowed_origins]
    return [origin for origin in origins if origin]
