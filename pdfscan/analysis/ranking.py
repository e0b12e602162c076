"""
Relevance ranking of analyzed documents.

The relevance score of a document is the weighted sum of its keyword
counts. Every keyword weighs 1.0 unless a weight is configured, which
makes the default score the plain total number of keyword occurrences.
"""

from typing import Dict, Iterable, List, Tuple

from ..extraction.models import DocumentHandle
from .models import KeywordCountVector, RankingEntry

DEFAULT_WEIGHT = 1.0


class RelevanceRanker:
    """Orders documents by descending relevance, ties broken by path."""

    def __init__(self, weights: Dict[str, float] = None):
        """
        Args:
            weights: Optional per-keyword weights (normalized keywords).
                     Keywords without an entry weigh DEFAULT_WEIGHT.
        """
        self.weights = dict(weights or {})

    def score(self, counts: KeywordCountVector) -> float:
        return float(sum(
            self.weights.get(keyword, DEFAULT_WEIGHT) * count
            for keyword, count in counts.items()
        ))

    def rank(self, scored: Iterable[Tuple[DocumentHandle, KeywordCountVector]]) -> List[RankingEntry]:
        """
        Rank documents by relevance.

        Args:
            scored: (document, keyword counts) pairs in any order.

        Returns:
            Entries sorted by descending score, then ascending path.
        """
        entries = [
            RankingEntry(document=document, score=self.score(counts), counts=dict(counts))
            for document, counts in scored
        ]
        entries.sort(key=lambda entry: (-entry.score, entry.document.sort_key))
        return entries
