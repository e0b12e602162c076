"""
pypdf-based text extraction backend.

Fast extraction suitable for most standard PDF files.
Handles encryption detection and empty password decryption.
"""

from pathlib import Path
from typing import List, Tuple, Union

from pypdf import PdfReader

from ..core import get_logger, ExtractionError, ExtractErrorKind
from .errors import classify_exception

logger = get_logger(__name__)


class PyPDFBackend:
    """
    PDF text extraction using the pypdf library.

    Provides fast extraction for standard PDFs with basic
    encryption handling.
    """

    name = "pypdf"

    def extract(self, filepath: Union[str, Path]) -> List[Tuple[int, str]]:
        """
        Extract text from all pages of a PDF.

        Args:
            filepath: Path to the PDF file.

        Returns:
            List of (page_number, text) tuples. Page numbers are 1-indexed.
            Pages without text are omitted.

        Raises:
            ExtractionError: If the document cannot be opened or decrypted.
        """
        filepath = Path(filepath)
        results = []

        try:
            reader = PdfReader(filepath)
            self._decrypt(reader, filepath)

            total_pages = len(reader.pages)
            logger.debug(f"Processing {total_pages} pages: {filepath.name}")

            for page_num, page in enumerate(reader.pages, start=1):
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

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"pypdf extraction failed: {e}",
                filepath=str(filepath),
                kind=classify_exception(e)
            )

        return results

    @staticmethod
    def _decrypt(reader: PdfReader, filepath: Path) -> None:
        """Try the empty user password on encrypted documents."""
        if not reader.is_encrypted:
            return

        try:
            decrypted = reader.decrypt("")
        except Exception as e:
            raise ExtractionError(
                f"PDF is encrypted and cannot be decrypted: {e}",
                filepath=str(filepath),
                kind=ExtractErrorKind.PASSWORD_PROTECTED
            )

        # PasswordType.NOT_DECRYPTED is 0
        if not decrypted:
            raise ExtractionError(
                "PDF is encrypted and cannot be decrypted",
                filepath=str(filepath),
                kind=ExtractErrorKind.PASSWORD_PROTECTED
            )


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m pdfscan.extraction.pypdf_backend <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    backend = PyPDFBackend()

    try:
        pages = backend.extract(pdf_path)
        print(f"Extracted {len(pages)} pages from {pdf_path.name}")
        for page_num, text in pages[:2]:
            preview = text[:500] + "..." if len(text) > 500 else text
            print(f"\n=== Page {page_num} ===")
            print(preview)
    except ExtractionError as e:
        print(f"Extraction error [{e.kind.value}]: {e.message}")
