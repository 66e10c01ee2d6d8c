from skillscope.ai.config import AIConfig
from skillscope.ai.types import TextModel

from skillscope.ai.providers.gemini_provider import GeminiProvider
from skillscope.ai.providers.openai_provider import OpenAIProvider


def get_ai_client(cfg: AIConfig) -> TextModel:
    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model, api_key=cfg.api_key)

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            max_retries=cfg.max_retries,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
