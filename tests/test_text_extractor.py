import unittest
from io import BytesIO
from unittest.mock import patch

from docx import Document
from pypdf import PdfWriter

from skillscope.parsing import extract
from skillscope.parsing.extract import extract_text
from skillscope.parsing.models import (
    DOCX_MEDIA_TYPE,
    PDF_MEDIA_TYPE,
    ExtractionFailed,
    ParsedDoc,
    UnsupportedMediaType,
)

from pdf_fixtures import text_pdf_bytes


def _docx_bytes(*paragraphs: str, table_rows: list[list[str]] | None = None) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table_rows:
        table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for row_index, row in enumerate(table_rows):
            for col_index, value in enumerate(row):
                table.cell(row_index, col_index).text = value
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _blank_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class TextExtractorTests(unittest.TestCase):
    def test_plain_text_media_type_is_unsupported(self):
        outcome = extract_text(b"Python developer", "text/plain")
        self.assertIsInstance(outcome, UnsupportedMediaType)
        self.assertEqual(outcome.media_type, "text/plain")

    def test_missing_media_type_is_unsupported(self):
        self.assertIsInstance(extract_text(b"data", None), UnsupportedMediaType)

    def test_docx_paragraphs_and_tables_are_extracted(self):
        content = _docx_bytes(
            "Jane Doe",
            "Backend engineer with Python and SQL",
            table_rows=[["Skills", "Docker, AWS"]],
        )
        outcome = extract_text(content, DOCX_MEDIA_TYPE)
        self.assertIsInstance(outcome, ParsedDoc)
        self.assertEqual(outcome.source_type, "docx")
        self.assertIn("Backend engineer with Python and SQL", outcome.text)
        self.assertIn("Docker, AWS", outcome.text)

    def test_media_type_parameters_and_case_are_ignored(self):
        content = _docx_bytes("Data analyst")
        outcome = extract_text(content, DOCX_MEDIA_TYPE.upper() + "; charset=binary")
        self.assertIsInstance(outcome, ParsedDoc)
        self.assertEqual(outcome.text, "Data analyst")

    def test_pdf_text_is_extracted_with_pypdf(self):
        outcome = extract_text(text_pdf_bytes("Python and SQL developer"), PDF_MEDIA_TYPE)
        self.assertIsInstance(outcome, ParsedDoc)
        self.assertEqual(outcome.source_type, "pdf")
        self.assertIn("Python and SQL developer", outcome.text)

    def test_pdf_without_text_is_extraction_failure(self):
        outcome = extract_text(_blank_pdf_bytes(), PDF_MEDIA_TYPE)
        self.assertIsInstance(outcome, ExtractionFailed)
        self.assertEqual(outcome.media_type, PDF_MEDIA_TYPE)

    def test_empty_bytes_are_extraction_failure_without_decoding(self):
        with patch.dict(extract.DECODERS, {PDF_MEDIA_TYPE: ("pdf", self._fail_decoder)}):
            outcome = extract_text(b"", PDF_MEDIA_TYPE)
        self.assertIsInstance(outcome, ExtractionFailed)

    def test_pdf_decoder_text_is_returned(self):
        with patch.dict(extract.DECODERS, {PDF_MEDIA_TYPE: ("pdf", lambda content: "Page one\n\nPage two")}):
            outcome = extract_text(b"%PDF-1.7", PDF_MEDIA_TYPE)
        self.assertIsInstance(outcome, ParsedDoc)
        self.assertEqual(outcome.source_type, "pdf")
        self.assertEqual(outcome.text, "Page one\n\nPage two")

    def test_whitespace_only_text_is_extraction_failure(self):
        with patch.dict(extract.DECODERS, {PDF_MEDIA_TYPE: ("pdf", lambda content: "  \n ")}):
            outcome = extract_text(b"%PDF-1.7", PDF_MEDIA_TYPE)
        self.assertIsInstance(outcome, ExtractionFailed)

    def test_decoder_errors_propagate(self):
        with self.assertRaises(Exception):
            extract_text(b"definitely not a docx archive", DOCX_MEDIA_TYPE)

    @staticmethod
    def _fail_decoder(content: bytes) -> str:
        raise AssertionError("decoder must not run for empty uploads")


if __name__ == "__main__":
    unittest.main()
