"""
Plain-text export of a PDF collection.

Extracts every discovered document and writes the texts into a single
UTF-8 file, one section per document in discovery order.

Workers append each extracted text to an anonymous spool file as soon as
it is available and keep only its (offset, length). Once the pool has
joined, the sections are copied from the spool into the output file in
document order, so no document text is held in memory after its worker
finishes.
"""

import os
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, List, Tuple, Union

from ..core import get_logger, InputError, OutputError
from ..utils import ensure_directory
from .corpus_loader import CorpusLoader
from .extractor import PDFExtractor
from .models import TextExtractor
from .pool import ExtractionPool

logger = get_logger(__name__)

SECTION_HEADER = "==== {name} ===="
COPY_CHUNK_SIZE = 1024 * 1024


@dataclass
class ExportStats:
    """Statistics from an export run."""
    documents_found: int = 0
    documents_written: int = 0
    documents_failed: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class TextSpool:
    """
    Append-only scratch file shared by extraction workers.

    append() is safe to call from several threads; copy_to() is meant for
    the coordinating thread after all appends are done.
    """

    def __init__(self):
        self._file = tempfile.TemporaryFile()
        self._lock = threading.Lock()

    def append(self, text: str) -> Tuple[int, int]:
        """Store text and return its (offset, length) in bytes."""
        data = text.encode("utf-8")
        with self._lock:
            self._file.seek(0, os.SEEK_END)
            offset = self._file.tell()
            self._file.write(data)
        return offset, len(data)

    def copy_to(self, target: BinaryIO, offset: int, length: int) -> None:
        """Copy one stored text into target."""
        self._file.seek(offset)
        remaining = length
        while remaining > 0:
            chunk = self._file.read(min(remaining, COPY_CHUNK_SIZE))
            if not chunk:
                break
            target.write(chunk)
            remaining -= len(chunk)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "TextSpool":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def export_text(
    input_paths: Iterable[Union[str, Path]],
    output_file: Union[str, Path],
    extractor: TextExtractor = None,
    workers: int = None,
    loader: CorpusLoader = None
) -> ExportStats:
    """
    Extract text from all PDFs under input_paths into one file.

    Args:
        input_paths: Files and directories to export.
        output_file: Destination text file.
        extractor: Text extractor, defaults to PDFExtractor.
        workers: Worker thread count for extraction.
        loader: Corpus loader, defaults to a config-driven CorpusLoader.

    Returns:
        ExportStats for the run.

    Raises:
        InputError: If no documents were discovered.
        OutputError: If the spool or the output file cannot be written.
    """
    if extractor is None:
        extractor = PDFExtractor()

    scan = (loader or CorpusLoader()).load(input_paths)
    stats = ExportStats(documents_found=len(scan.documents), warnings=list(scan.warnings))

    if not scan.documents:
        raise InputError("No PDF documents found in the given input paths")

    output_file = Path(output_file)
    try:
        with TextSpool() as spool:
            outcomes = ExtractionPool(extractor, workers=workers).run(
                scan.documents, process=spool.append
            )

            ensure_directory(output_file.parent)
            with open(output_file, "wb") as f:
                for outcome in outcomes:
                    if not outcome.ok:
                        stats.documents_failed += 1
                        stats.errors.append(
                            f"{outcome.document.path}: [{outcome.error_kind.value}] {outcome.message}"
                        )
                        continue

                    header = SECTION_HEADER.format(name=outcome.document.path)
                    f.write(f"{header}\n".encode("utf-8"))
                    spool.copy_to(f, *outcome.data)
                    f.write(b"\n\n")
                    stats.documents_written += 1
    except OSError as e:
        raise OutputError(f"Cannot write {output_file}: {e}", path=str(output_file))

    logger.info(
        f"Exported {stats.documents_written} documents to {output_file} "
        f"({stats.documents_failed} failed)"
    )

    return stats
