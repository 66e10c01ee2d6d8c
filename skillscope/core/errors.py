from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_MESSAGE = "An internal server error occurred."

class ApiError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingInputError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedInputError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLargeError(ApiError):
    status_code = 413


class ExtractionError(ApiError):
    pass


class AnalysisError(ApiError):
    pass


class UnhandledFaultError(ApiError):
    pass


def error_envelope(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    _ = request
    return error_envelope(exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    _ = request, exc
    return error_envelope("Invalid request body.", status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_request_error path=%s: %s", request.url.path, exc, exc_info=exc)
    return error_envelope(UNHANDLED_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
