from contextlib import asynccontextmanager
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    settings = app.state.settings
    logger.info(
        "skillscope_startup provider=%s model=%s max_upload_bytes=%s",
        settings.ai_provider,
        settings.ai_model,
        settings.max_upload_bytes,
    )
    yield
    close = getattr(app.state.analyzer.model, "aclose", None)
    if close is not None:
        try:
            await close()
        except Exception as exc:  # pragma: no cover - shutdown must not mask the exit
            logger.warning("model_client_close_failed: %s", exc)
    logger.info("skillscope_shutdown")
