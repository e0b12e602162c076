"""
Unified PDF extraction interface with automatic fallback.

Wraps multiple extraction backends and attempts fallback when
the primary backend fails or returns empty results. PDFExtractor is the
production TextExtractor used by the analysis and search pipelines.
"""

from pathlib import Path
from typing import List, Tuple, Union

from ..core import get_config, get_logger, ExtractionError, ExtractErrorKind
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend

logger = get_logger(__name__)


BACKENDS = {
    "pypdf": PyPDFBackend,
    "pdfplumber": PDFPlumberBackend
}


class PDFExtractor:
    """
    Unified PDF extraction with automatic backend fallback.

    Tries the primary backend first, falls back to secondary
    if extraction fails or produces empty results.
    """

    def __init__(
        self,
        primary_backend: str = None,
        fallback_backend: str = None
    ):
        """
        Initialize the extractor with configured backends.

        Args:
            primary_backend: Name of primary backend ("pypdf" or "pdfplumber").
            fallback_backend: Name of fallback backend, "none" to disable.

        Raises:
            ExtractionError: If the primary backend name is unknown.
        """
        config = get_config()

        primary_name = primary_backend or config.extraction.primary_backend
        fallback_name = fallback_backend or config.extraction.fallback_backend

        if primary_name not in BACKENDS:
            raise ExtractionError(f"Unknown backend: {primary_name}")

        self.primary = BACKENDS[primary_name]()
        self.fallback = BACKENDS[fallback_name]() if fallback_name in BACKENDS else None

        logger.debug(
            f"Initialized extractor: primary={primary_name}, fallback={fallback_name}"
        )

    def extract(self, filepath: Union[str, Path]) -> List[Tuple[int, str]]:
        """
        Extract text from a PDF using available backends.

        Tries primary backend first, falls back if needed.

        Args:
            filepath: Path to the PDF file.

        Returns:
            List of (page_number, text) tuples.

        Raises:
            ExtractionError: If all backends fail or find no text.
        """
        filepath = Path(filepath)
        primary_error = None

        try:
            results = self.primary.extract(filepath)

            if results:
                return results

            logger.debug(f"Primary backend returned empty results: {filepath.name}")

        except ExtractionError as e:
            primary_error = e
            logger.debug(f"Primary backend failed: {e.message}")

        if self.fallback and not self._is_file_error(primary_error):
            try:
                logger.debug(f"Trying fallback backend for: {filepath.name}")
                results = self.fallback.extract(filepath)

                if results:
                    return results

            except ExtractionError as e:
                logger.debug(f"Fallback backend also failed: {e.message}")

        if primary_error:
            raise primary_error

        raise ExtractionError(
            "No extractable text (all backends returned empty results)",
            filepath=str(filepath),
            kind=ExtractErrorKind.EMPTY_DOCUMENT
        )

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Extract the whole document as a single string.

        Pages are joined with newlines in page order.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Extracted text.

        Raises:
            ExtractionError: If extraction fails, with a classified kind.
        """
        pages = self.extract(filepath)
        return "\n".join(text for _, text in pages)

    @staticmethod
    def _is_file_error(error: ExtractionError) -> bool:
        # Another backend cannot open a file the OS refused either.
        return error is not None and error.kind in (
            ExtractErrorKind.NOT_FOUND,
            ExtractErrorKind.PERMISSION_DENIED
        )


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m pdfscan.extraction.extractor <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    extractor = PDFExtractor()

    try:
        text = extractor.extract_text(pdf_path)
        print(f"Total characters: {len(text):,}")
        preview = text[:300] + "..." if len(text) > 300 else text
        print(preview)
    except ExtractionError as e:
        print(f"Extraction failed [{e.kind.value}]: {e.message}")
