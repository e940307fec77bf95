"""
Tests for resume text extraction.

These tests verify:
1. PDF pages come out in order, words space-joined, pages newline-joined
2. Both PDF engines can be used side by side
3. DOCX paragraphs and table cells are extracted
4. Unsupported and corrupt files fail with the right error
"""

import io
import pytest
from unittest.mock import MagicMock

from exceptions import ExtractionError, UnsupportedFormatError
from parsers.extract import DocumentExtractor, file_extension
from parsers.pdf import PdfTextReader


class TestFileExtension:

    @pytest.mark.parametrize("name, expected", [
        ("resume.pdf", "pdf"),
        ("Resume.PDF", "pdf"),
        ("my.cv.DocX", "docx"),
        ("resume", ""),
        ("", ""),
    ])
    def test_extension_is_lowercased(self, name, expected):
        assert file_extension(name) == expected


class TestPdfExtraction:

    def test_pages_joined_in_order(self, make_pdf):
        data = make_pdf(["Alice Smith Python", "Second page here"])
        text = DocumentExtractor().extract_text("resume.pdf", data)

        assert text == "Alice Smith Python\nSecond page here"

    def test_uppercase_extension_and_file_object(self, make_pdf):
        data = make_pdf(["Senior Engineer"])
        text = DocumentExtractor().extract_text("RESUME.PDF", io.BytesIO(data))

        assert text == "Senior Engineer"

    def test_pypdf2_engine_reads_same_words(self, make_pdf):
        data = make_pdf(["Data Scientist with SQL", "Page two"])
        text = DocumentExtractor(pdf_engine="pypdf2").extract_text("resume.pdf", data)

        lines = text.split("\n")
        assert len(lines) == 2
        assert lines[0].split() == ["Data", "Scientist", "with", "SQL"]
        assert lines[1].split() == ["Page", "two"]

    def test_engines_are_independent(self):
        fast = PdfTextReader(engine="pymupdf")
        fallback = PdfTextReader(engine="PyPDF2")

        assert fast.engine == "pymupdf"
        assert fallback.engine == "pypdf2"

    def test_unknown_engine_rejected(self):
        with pytest.raises(ValueError):
            DocumentExtractor(pdf_engine="pdfjs")

    @pytest.mark.parametrize("engine", ["pymupdf", "pypdf2"])
    def test_corrupt_pdf_raises_extraction_error(self, engine):
        with pytest.raises(ExtractionError):
            DocumentExtractor(pdf_engine=engine).extract_text("resume.pdf", b"not a pdf at all")


class TestDocxExtraction:

    def test_paragraphs_in_order(self, make_docx):
        data = make_docx(["Jane Doe", "Backend Engineer", "Built REST APIs"])
        text = DocumentExtractor().extract_text("resume.docx", data)

        assert "Jane Doe" in text
        assert text.index("Jane Doe") < text.index("Backend Engineer") < text.index("Built REST APIs")
        assert "Backend Engineer\n\nBuilt REST APIs" in text

    def test_table_cells_included(self, make_docx):
        data = make_docx(["Skills"], table_rows=[["Python", "Go"]])
        text = DocumentExtractor().extract_text("cv.DOCX", data)

        assert "Python" in text
        assert "Go" in text

    def test_table_stays_in_body_order(self, make_docx):
        data = make_docx(["Header"], table_rows=[["TableCell"]], after_table=["Footer"])
        text = DocumentExtractor().extract_text("resume.docx", data)

        assert text.index("Header") < text.index("TableCell") < text.index("Footer")

    def test_corrupt_docx_raises_extraction_error(self):
        with pytest.raises(ExtractionError):
            DocumentExtractor().extract_text("resume.docx", b"PK garbage")


class TestUnsupportedFormat:

    @pytest.mark.parametrize("name", ["resume.txt", "resume.doc", "resume", "resume.pdf.zip"])
    def test_rejected_without_reading(self, name):
        source = MagicMock()

        with pytest.raises(UnsupportedFormatError):
            DocumentExtractor().extract_text(name, source)

        source.read.assert_not_called()
