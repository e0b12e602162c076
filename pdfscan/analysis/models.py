"""
Data models for corpus analysis.

Defines keyword count vectors, the keyword correlation matrix, document
ranking entries, and the report that aggregates them for one run.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..extraction.models import DocumentHandle, ExtractionOutcome

# Normalized keyword -> occurrence count, one entry per configured keyword.
KeywordCountVector = Dict[str, int]


@dataclass(frozen=True)
class CorrelationEntry:
    """
    Association score for one unordered keyword pair.

    Attributes:
        keyword_a: Lexicographically smaller keyword.
        keyword_b: Lexicographically larger keyword.
        score: Pearson correlation in [-1, 1], 0.0 when undefined.
    """
    keyword_a: str
    keyword_b: str
    score: float


@dataclass(frozen=True)
class CorrelationMatrix:
    """
    Symmetric keyword correlation matrix holding only surfaced pairs.

    Pairs whose absolute score fell below the threshold are not stored.
    Lookups are order-independent: score(a, b) == score(b, a).
    """
    keywords: Tuple[str, ...]
    threshold: float
    entries: Tuple[CorrelationEntry, ...] = ()
    degenerate_keywords: Tuple[str, ...] = ()

    def score(self, keyword_a: str, keyword_b: str) -> Optional[float]:
        """
        Look up the score of a pair.

        Returns:
            The score, or None for self-pairs and pairs below threshold.
        """
        if keyword_a == keyword_b:
            return None

        first, second = sorted((keyword_a, keyword_b))
        for entry in self.entries:
            if entry.keyword_a == first and entry.keyword_b == second:
                return entry.score
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(frozen=True)
class RankingEntry:
    """One document in the relevance ranking."""
    document: DocumentHandle
    score: float
    counts: KeywordCountVector


@dataclass
class AnalysisReport:
    """
    Everything produced by one analysis run.

    Attributes:
        keywords: Normalized keywords in configured order.
        threshold: Correlation threshold used.
        matrix: Keyword correlation matrix.
        ranking: Documents ordered by descending relevance.
        documents_discovered: Documents found by the corpus loader.
        failures: Outcomes of documents that could not be extracted.
        warnings: Non-fatal discovery warnings.
        keyword_totals: Corpus-wide count per keyword.
    """
    keywords: List[str]
    threshold: float
    matrix: CorrelationMatrix
    ranking: List[RankingEntry] = field(default_factory=list)
    documents_discovered: int = 0
    failures: List[ExtractionOutcome] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    keyword_totals: KeywordCountVector = field(default_factory=dict)

    @property
    def documents_analyzed(self) -> int:
        return len(self.ranking)

    @property
    def failure_count(self) -> int:
        return len(self.failures)
