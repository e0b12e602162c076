"""
Concurrent extraction pool.

Runs a TextExtractor over many documents with a bounded thread pool and
collects one ExtractionOutcome per document. A failure in one document
is recorded in its outcome and never affects the others.

Outcomes live in a list indexed by document position. Workers only return
values; the coordinating thread writes each slot exactly once as futures
complete, so no lock is needed and the returned order equals the input
order whatever the completion order was.
"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional, Sequence

from ..core import get_config, get_logger, ExtractionError, ExtractErrorKind
from .models import DocumentHandle, ExtractionOutcome, TextExtractor

logger = get_logger(__name__)


class ExtractionPool:
    """
    Parallel text extraction with per-document failure isolation.

    When a process callable is supplied to run(), it is applied to the
    extracted text inside the worker and only its result is kept, so
    memory stays proportional to the number of workers rather than the
    size of the corpus.
    """

    def __init__(
        self,
        extractor: TextExtractor,
        workers: int = None,
        progress_callback: Callable[[int, int, str], None] = None
    ):
        """
        Initialize the pool.

        Args:
            extractor: Backend implementing extract_text(path).
            workers: Maximum worker threads. Defaults to config, then CPU count.
            progress_callback: Optional callback(current, total, display_name)
                              called as each document finishes.
        """
        config = get_config()

        self.extractor = extractor
        self.workers = max(1, workers or config.analysis.workers or os.cpu_count() or 1)
        self.progress_callback = progress_callback
        self.log_every = max(1, config.analysis.log_progress_every)

    def run(
        self,
        documents: Sequence[DocumentHandle],
        process: Optional[Callable[[str], Any]] = None
    ) -> List[ExtractionOutcome]:
        """
        Extract every document and return outcomes in input order.

        Args:
            documents: Documents to extract.
            process: Optional callable applied to each extracted text in
                     the worker; its return value becomes outcome.data and
                     the text itself is not retained.

        Returns:
            One ExtractionOutcome per document, same order as documents.
        """
        total = len(documents)
        outcomes: List[Optional[ExtractionOutcome]] = [None] * total

        if total == 0:
            return []

        logger.info(f"Extracting {total} documents with {min(self.workers, total)} workers")

        if total == 1 or self.workers == 1:
            for index, document in enumerate(documents):
                outcomes[index] = self._process_document(document, process)
                self._report_progress(index + 1, total, outcomes[index])
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = {
                    executor.submit(self._process_document, document, process): index
                    for index, document in enumerate(documents)
                }
                for done, future in enumerate(as_completed(futures), start=1):
                    index = futures[future]
                    outcomes[index] = future.result()
                    self._report_progress(done, total, outcomes[index])

        failed = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(f"Extraction complete: {total - failed} succeeded, {failed} failed")

        return outcomes

    def _process_document(
        self,
        document: DocumentHandle,
        process: Optional[Callable[[str], Any]]
    ) -> ExtractionOutcome:
        """Worker body. Never raises; every failure becomes an outcome."""
        try:
            text = self.extractor.extract_text(document.path)
            if process is None:
                return ExtractionOutcome.success(document, text=text)
            return ExtractionOutcome.success(document, data=process(text))

        except ExtractionError as e:
            logger.warning(f"Failed to extract {document.display_name}: [{e.kind.value}] {e.message}")
            return ExtractionOutcome.failure(document, e.kind, e.message)

        except Exception as e:
            logger.error(f"Unexpected error processing {document.display_name}: {e}")
            return ExtractionOutcome.failure(document, ExtractErrorKind.UNKNOWN, str(e) or type(e).__name__)

    def _report_progress(self, current: int, total: int, outcome: ExtractionOutcome) -> None:
        if self.progress_callback:
            self.progress_callback(current, total, outcome.document.display_name)

        if current % self.log_every == 0:
            logger.info(f"Progress: {current}/{total} documents")
