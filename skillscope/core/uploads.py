from __future__ import annotations

from fastapi import Request, UploadFile
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from skillscope.core.errors import PayloadTooLargeError, error_envelope

READ_CHUNK_BYTES = 1024 * 64
# Room for multipart boundaries and part headers around the file itself.
MULTIPART_OVERHEAD_BYTES = 1024 * 64


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects bodies whose declared Content-Length cannot fit under the upload cap.

    Runs before any form parsing, so oversized uploads are never spooled.
    Bodies without a Content-Length still go through ``read_upload``.
    """

    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        declared = request.headers.get("content-length", "").strip()
        if declared.isdigit() and int(declared) > self.max_bytes + MULTIPART_OVERHEAD_BYTES:
            return error_envelope(_too_large_message(self.max_bytes), PayloadTooLargeError.status_code)
        return await call_next(request)


async def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload into memory, failing as soon as it grows past ``max_bytes``."""
    if file.size is not None and file.size > max_bytes:
        raise PayloadTooLargeError(_too_large_message(max_bytes))

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise PayloadTooLargeError(_too_large_message(max_bytes))
        chunks.append(chunk)
    return b"".join(chunks)


def _too_large_message(max_bytes: int) -> str:
    return f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB."
