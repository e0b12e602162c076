"""
Corpus analysis pipeline.

Orchestrates one analysis run: discover documents, extract and count
keywords in parallel, then correlate keywords and rank documents once all
workers have joined. Each call to analyze() is independent; nothing is
carried over between runs.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Union

from ..core import get_config, get_logger, InputError
from ..extraction import CorpusLoader, ExtractionPool, PDFExtractor, TextExtractor
from ..utils import normalize_keyword
from .correlation import CorrelationEngine
from .keyword_counter import KeywordCounter
from .models import AnalysisReport, KeywordCountVector
from .ranking import RelevanceRanker

logger = get_logger(__name__)


class CorpusAnalyzer:
    """
    Keyword co-occurrence analysis over a PDF corpus.

    Keyword counting happens inside the extraction workers, so extracted
    texts are released as soon as they have been counted.
    """

    def __init__(
        self,
        keywords: Iterable[str],
        threshold: float = None,
        workers: int = None,
        extractor: TextExtractor = None,
        weights: Dict[str, float] = None,
        loader: CorpusLoader = None,
        progress_callback: Callable[[int, int, str], None] = None
    ):
        """
        Initialize the analyzer.

        Args:
            keywords: Keywords or phrases to count (at least one).
            threshold: Minimum absolute correlation to report. Defaults to config.
            workers: Extraction worker threads. Defaults to config, then CPU count.
            extractor: Text extractor, defaults to PDFExtractor.
            weights: Per-keyword relevance weights. Defaults to config.
            loader: Corpus loader, defaults to a config-driven CorpusLoader.
            progress_callback: Optional callback(current, total, name).

        Raises:
            InputError: If keywords or threshold are invalid.
        """
        self.config = get_config()

        self.counter = KeywordCounter(keywords)
        self.engine = CorrelationEngine(
            self.config.analysis.threshold if threshold is None else threshold
        )

        if weights is None:
            weights = self.config.analysis.keyword_weights
        self.ranker = RelevanceRanker(
            {normalize_keyword(keyword): weight for keyword, weight in weights.items()}
        )

        self.loader = loader or CorpusLoader()
        self.pool = ExtractionPool(
            extractor or PDFExtractor(),
            workers=workers,
            progress_callback=progress_callback
        )

    @property
    def keywords(self) -> List[str]:
        return self.counter.keywords

    def count_text(self, text: str) -> KeywordCountVector:
        """Count keywords in one extracted text."""
        return self.counter.count(text)

    def analyze(self, input_paths: Iterable[Union[str, Path]]) -> AnalysisReport:
        """
        Run the full analysis.

        Args:
            input_paths: Files and directories forming the corpus.

        Returns:
            AnalysisReport for the corpus.

        Raises:
            InputError: If no documents were discovered.
        """
        scan = self.loader.load(input_paths)

        if not scan.documents:
            raise InputError(
                "No PDF documents found in the given input paths",
                {"warnings": scan.warnings}
            )

        logger.info(
            f"Analyzing {len(scan.documents)} documents for {len(self.keywords)} keywords"
        )

        outcomes = self.pool.run(scan.documents, process=self.count_text)

        succeeded = [outcome for outcome in outcomes if outcome.ok]
        failures = [outcome for outcome in outcomes if not outcome.ok]

        # Correlation input is ordered by path so scores never depend on
        # discovery or completion order.
        succeeded.sort(key=lambda outcome: outcome.document.sort_key)
        vectors = [outcome.data for outcome in succeeded]

        matrix = self.engine.compute(self.keywords, vectors)
        ranking = self.ranker.rank((outcome.document, outcome.data) for outcome in succeeded)

        keyword_totals = {
            keyword: sum(vector[keyword] for vector in vectors)
            for keyword in self.keywords
        }

        logger.info(
            f"Analysis complete: {len(succeeded)} analyzed, {len(failures)} failed, "
            f"{len(matrix)} correlated pairs"
        )

        return AnalysisReport(
            keywords=list(self.keywords),
            threshold=self.engine.threshold,
            matrix=matrix,
            ranking=ranking,
            documents_discovered=len(scan.documents),
            failures=failures,
            warnings=list(scan.warnings),
            keyword_totals=keyword_totals
        )
