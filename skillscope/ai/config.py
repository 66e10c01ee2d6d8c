from dataclasses import dataclass

from skillscope.core.config import Settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str
    base_url: str | None = None
    timeout_s: float = 60.0
    max_retries: int = 2


def load_ai_config(settings: Settings) -> AIConfig:
    return AIConfig(
        provider=settings.ai_provider,
        model=settings.ai_model,
        api_key=(settings.api_key or "").strip(),
        base_url=settings.openai_base_url if settings.ai_provider == "openai" else None,
        timeout_s=settings.openai_timeout_s,
        max_retries=settings.openai_max_retries,
    )
