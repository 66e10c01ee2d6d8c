import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from skillscope.core.errors import (
    UNHANDLED_ERROR_MESSAGE,
    AnalysisError,
    ExtractionError,
    MissingInputError,
    UnhandledFaultError,
    UnsupportedInputError,
)
from skillscope.core.uploads import read_upload
from skillscope.parsing.extract import extract_text
from skillscope.parsing.models import ExtractionFailed, UnsupportedMediaType
from skillscope.schemas.analysis import AnalyzeResponse, AnalyzeTextRequest, ErrorResponse
from skillscope.services.resume_analyzer import ResumeAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_analyzer(request: Request) -> ResumeAnalyzer:
    return request.app.state.analyzer


def get_max_upload_bytes(request: Request) -> int:
    return request.app.state.settings.max_upload_bytes


@router.post("/analyze-text", response_model=AnalyzeResponse, responses=ERROR_RESPONSES)
async def analyze_text(
    payload: AnalyzeTextRequest | None = None,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
):
    resume_text = payload.resume_text if payload else None
    if not resume_text or not resume_text.strip():
        raise MissingInputError("Resume text is required")

    analysis = await analyzer.analyze(resume_text)
    if analysis is None:
        raise AnalysisError("Failed to analyze resume from text.")
    return AnalyzeResponse(analysis=analysis)


@router.post("/analyze-file", response_model=AnalyzeResponse, responses=ERROR_RESPONSES)
async def analyze_file(
    resume: UploadFile | None = File(default=None),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    max_upload_bytes: int = Depends(get_max_upload_bytes),
):
    if resume is None or not resume.filename:
        raise MissingInputError("No file uploaded.")

    content = await read_upload(resume, max_upload_bytes)

    try:
        outcome = await run_in_threadpool(extract_text, content, resume.content_type)
    except Exception as exc:
        logger.exception("resume_extraction_failed file=%s media_type=%s: %s", resume.filename, resume.content_type, exc)
        raise UnhandledFaultError(UNHANDLED_ERROR_MESSAGE) from exc

    if isinstance(outcome, UnsupportedMediaType):
        raise UnsupportedInputError("Unsupported file type. Please upload a PDF or DOCX file.")
    if isinstance(outcome, ExtractionFailed):
        logger.warning("resume_extraction_empty media_type=%s reason=%s", outcome.media_type, outcome.reason)
        raise ExtractionError("Failed to extract text from the file.")

    analysis = await analyzer.analyze(outcome.text)
    if analysis is None:
        raise AnalysisError("Failed to analyze resume from file.")
    return AnalyzeResponse(analysis=analysis)
