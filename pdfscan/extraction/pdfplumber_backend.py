"""
pdfplumber-based text extraction backend.

Better handling of complex layouts and multi-column documents.
Slower than pypdf but more accurate for difficult PDFs, so it serves
as the fallback backend.
"""

from pathlib import Path
from typing import List, Tuple, Union

import pdfplumber

from ..core import get_logger, ExtractionError
from .errors import classify_exception

logger = get_logger(__name__)


class PDFPlumberBackend:
    """PDF text extraction using pdfplumber."""

    name = "pdfplumber"

    def extract(self, filepath: Union[str, Path]) -> List[Tuple[int, str]]:
        """
        Extract text from all pages of a PDF.

        Args:
            filepath: Path to the PDF file.

        Returns:
            List of (page_number, text) tuples. Page numbers are 1-indexed.

        Raises:
            ExtractionError: If the document cannot be opened.
        """
        filepath = Path(filepath)
        results = []

        try:
            with pdfplumber.open(filepath) as pdf:
                total_pages = len(pdf.pages)
                logger.debug(f"Processing {total_pages} pages: {filepath.name}")

                for page_num, page in enumerate(pdf.pages, start=1):
                    try:
                        text = page.extract_text() or ""

                        if text.strip():
                            results.append((page_num, text))
                        else:
                            logger.debug(f"Empty page {page_num} in {filepath.name}")

                    except Exception as e:
                        logger.warning(
                            f"Failed to extract page {page_num} from {filepath.name}: {e}"
                        )

        except Exception as e:
            raise ExtractionError(
                f"pdfplumber extraction failed: {e}",
                filepath=str(filepath),
                kind=classify_exception(e)
            )

        return results
