from __future__ import annotations

from io import BytesIO
from typing import Callable

from docx import Document
from pypdf import PdfReader

from .models import (
    DOCX_MEDIA_TYPE,
    PDF_MEDIA_TYPE,
    ExtractionFailed,
    ParsedDoc,
    UnsupportedMediaType,
)

Decoder = Callable[[bytes], str]


def _decode_pdf(content: bytes) -> str:
    reader = PdfReader(BytesIO(content))
    page_chunks: list[str] = []
    for page in reader.pages:
        page_text = page.extract_text() or ""
        if page_text.strip():
            page_chunks.append(page_text)
    return "\n\n".join(page_chunks)


def _decode_docx(content: bytes) -> str:
    document = Document(BytesIO(content))
    lines = [paragraph.text for paragraph in document.paragraphs if paragraph.text.strip()]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append("\t".join(cells))
    return "\n".join(lines)


DECODERS: dict[str, tuple[str, Decoder]] = {
    PDF_MEDIA_TYPE: ("pdf", _decode_pdf),
    DOCX_MEDIA_TYPE: ("docx", _decode_docx),
}


def normalize_media_type(media_type: str | None) -> str:
    return (media_type or "").split(";")[0].strip().lower()


def extract_text(content: bytes, media_type: str | None) -> ParsedDoc | UnsupportedMediaType | ExtractionFailed:
    """Extract plain text from an in-memory PDF or DOCX upload.

    The media type is the one declared by the client; the payload is never sniffed.
    Decoder exceptions are left to the caller.
    """
    normalized = normalize_media_type(media_type)
    entry = DECODERS.get(normalized)
    if entry is None:
        return UnsupportedMediaType(media_type=media_type or "")

    if not content:
        return ExtractionFailed(media_type=normalized, reason="empty upload")

    source_type, decoder = entry
    text = decoder(content)
    if not text or not text.strip():
        return ExtractionFailed(media_type=normalized, reason=f"no extractable text found in {source_type.upper()}")

    return ParsedDoc(source_type=source_type, media_type=normalized, text=text)
