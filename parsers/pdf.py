import io
import logging
from typing import List

import fitz  # PyMuPDF
from PyPDF2 import PdfReader

from exceptions import ExtractionError

logger = logging.getLogger(__name__)

PDF_ENGINES = ("pymupdf", "pypdf2")


class PdfTextReader:
    """
    Extract plain text from PDF bytes.

    The backend is chosen when the reader is built, so several readers with
    different engines can live side by side. Words inside a page are joined
    by a single space and pages by a newline, first page to last.
    """

    def __init__(self, engine: str = "pymupdf"):
        engine = (engine or "").lower().strip()
        if engine not in PDF_ENGINES:
            raise ValueError(f"Unknown PDF engine '{engine}'. Expected one of {PDF_ENGINES}")
        self.engine = engine

    def read(self, data: bytes) -> str:
        try:
            if self.engine == "pymupdf":
                pages = self._pages_pymupdf(data)
            else:
                pages = self._pages_pypdf2(data)
        except Exception as e:
            logger.warning(f"PDF extraction failed ({self.engine}): {e}")
            raise ExtractionError(f"Could not read PDF: {e}") from e

        logger.info(f"Extracted {len(pages)} page(s) via {self.engine}")
        return "\n".join(pages)

    @staticmethod
    def _pages_pymupdf(data: bytes) -> List[str]:
        with fitz.open(stream=data, filetype="pdf") as doc:
            # each word tuple is (x0, y0, x1, y1, text, block, line, word)
            return [" ".join(w[4] for w in page.get_text("words")) for page in doc]

    @staticmethod
    def _pages_pypdf2(data: bytes) -> List[str]:
        reader = PdfReader(io.BytesIO(data))
        return [" ".join((page.extract_text() or "").split()) for page in reader.pages]
