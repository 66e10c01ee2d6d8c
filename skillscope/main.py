import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk
import uvicorn

from skillscope.ai.config import load_ai_config
from skillscope.ai.factory import get_ai_client
from skillscope.ai.types import TextModel
from skillscope.api.v1.analyze import router as analyze_router
from skillscope.api.v1.health import router as health_router
from skillscope.core.config import Settings, load_settings
from skillscope.core.cors import CORS_ALLOWED_HEADERS, CORS_ALLOWED_METHODS, cors_allowed_origins
from skillscope.core.errors import (
    ApiError,
    api_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from skillscope.core.lifespan import lifespan
from skillscope.core.uploads import UploadSizeLimitMiddleware
from skillscope.services.resume_analyzer import ResumeAnalyzer


def create_app(settings: Settings | None = None, model: TextModel | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)

    if model is None:
        model = get_ai_client(load_ai_config(settings))

    app = FastAPI(title="SkillScope API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.analyzer = ResumeAnalyzer(model)

    app.add_middleware(UploadSizeLimitMiddleware, max_bytes=settings.max_upload_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allowed_origins(settings),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
    )
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router, prefix="/api", tags=["Health"])
    app.include_router(analyze_router, prefix="/api", tags=["Analyze"])
    return app


def run() -> None:
    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
