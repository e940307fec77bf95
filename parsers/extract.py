import io
import logging
from pathlib import PurePath
from typing import BinaryIO, List, Union

import docx
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from exceptions import ExtractionError, UnsupportedFormatError
from parsers.pdf import PdfTextReader

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx")

Source = Union[bytes, bytearray, BinaryIO]


def file_extension(file_name: str) -> str:
    """Lower-cased extension without the dot ('' when there is none)."""
    return PurePath(file_name or "").suffix.lstrip(".").lower()


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return source.read()


def _cell_blocks(table: Table) -> List[str]:
    blocks: List[str] = []
    for row in table.rows:
        for cell in row.cells:
            blocks.extend(para.text for para in cell.paragraphs)
    return blocks


def read_docx(data: bytes) -> str:
    """Raw text of a DOCX body in document order, blank-line separated.

    Tables contribute their cell paragraphs where the table sits in the body.
    """
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as e:
        logger.warning(f"DOCX extraction failed: {e}")
        raise ExtractionError(f"Could not read DOCX: {e}") from e

    blocks: List[str] = []
    for child in document.element.body.iterchildren():
        if child.tag == qn("w:p"):
            blocks.append(Paragraph(child, document).text)
        elif child.tag == qn("w:tbl"):
            blocks.extend(_cell_blocks(Table(child, document)))
    return "\n\n".join(blocks)


class DocumentExtractor:
    """Turn an uploaded resume (PDF or DOCX) into plain text."""

    def __init__(self, pdf_engine: str = "pymupdf"):
        self.pdf_reader = PdfTextReader(engine=pdf_engine)

    def extract_text(self, file_name: str, source: Source) -> str:
        """
        Extract text based on file extension.

        Args:
            file_name: original name of the upload, used only for its extension
            source: file contents as bytes or a binary file-like object

        Raises:
            UnsupportedFormatError: extension is not pdf/docx (source is not read)
            ExtractionError: the document could not be decoded
        """
        extension = file_extension(file_name)
        if extension not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError("Unsupported file type. Only PDF and DOCX are allowed.")

        logger.debug(f"Detected extension: {extension}")
        data = _read_bytes(source)
        if extension == "pdf":
            return self.pdf_reader.read(data)
        return read_docx(data)
