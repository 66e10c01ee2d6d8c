from __future__ import annotations

from pydantic import BaseModel, field_validator

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class ParsedDoc(BaseModel):
    source_type: str
    media_type: str
    text: str

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx"}:
            raise ValueError("source_type must be one of: pdf, docx")
        return normalized


class UnsupportedMediaType(BaseModel):
    media_type: str


class ExtractionFailed(BaseModel):
    media_type: str
    reason: str
