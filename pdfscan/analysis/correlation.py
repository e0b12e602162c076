"""
Keyword correlation engine.

Treats each keyword's per-document occurrence counts as a vector over the
corpus and scores every keyword pair with Pearson's correlation
coefficient. Pairs are visited in lexicographic order so the result is
reproducible, and pairs below the threshold are dropped from the matrix.
"""

from typing import List, Sequence

import numpy as np

from ..core import get_logger, InputError
from .models import CorrelationEntry, CorrelationMatrix, KeywordCountVector

logger = get_logger(__name__)

DEFAULT_THRESHOLD = 0.1
UNDEFINED_SCORE = 0.0


def pearson(x: np.ndarray, y: np.ndarray) -> float:
    """
    Pearson correlation of two equally sized vectors.

    Args:
        x: First vector.
        y: Second vector.

    Returns:
        Coefficient clamped to [-1, 1]; UNDEFINED_SCORE when either
        vector has zero variance or there are fewer than two samples.
    """
    if x.size < 2:
        return UNDEFINED_SCORE

    dx = x - x.mean()
    dy = y - y.mean()
    denominator = np.sqrt(np.dot(dx, dx) * np.dot(dy, dy))

    if denominator == 0:
        return UNDEFINED_SCORE

    score = float(np.dot(dx, dy) / denominator)
    return max(-1.0, min(1.0, score))


class CorrelationEngine:
    """
    Builds a CorrelationMatrix from per-document keyword counts.

    Raw counts are correlated, not presence flags, so a document that
    mentions both keywords often weighs more than one mentioning each once.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        """
        Initialize the engine.

        Args:
            threshold: Minimum absolute score for a pair to be kept (0..1).

        Raises:
            InputError: If threshold is outside [0, 1].
        """
        if threshold is None or not 0.0 <= threshold <= 1.0:
            raise InputError(
                f"Threshold must be between 0 and 1, got {threshold}",
                {"threshold": threshold}
            )
        self.threshold = float(threshold)

    def compute(
        self,
        keywords: Sequence[str],
        vectors: Sequence[KeywordCountVector]
    ) -> CorrelationMatrix:
        """
        Correlate every keyword pair across the given documents.

        Args:
            keywords: Normalized keywords.
            vectors: One count vector per successfully analyzed document.

        Returns:
            Immutable CorrelationMatrix with surfaced pairs only.
        """
        counts = self._to_array(keywords, vectors)
        columns = {keyword: counts[:, i] for i, keyword in enumerate(keywords)}

        degenerate = [
            keyword for keyword in keywords
            if counts.shape[0] < 2 or np.all(columns[keyword] == columns[keyword][0])
        ]
        if degenerate and len(keywords) > 1:
            logger.info(
                f"Zero variance across {counts.shape[0]} documents for: {', '.join(degenerate)}"
            )

        ordered = sorted(keywords)
        entries: List[CorrelationEntry] = []
        considered = 0

        for i, keyword_a in enumerate(ordered):
            for keyword_b in ordered[i + 1:]:
                considered += 1
                score = pearson(columns[keyword_a], columns[keyword_b])
                if abs(score) < self.threshold:
                    continue
                entries.append(CorrelationEntry(keyword_a, keyword_b, score))

        logger.debug(
            f"Correlation: {len(entries)} of {considered} pairs at or above {self.threshold}"
        )

        return CorrelationMatrix(
            keywords=tuple(keywords),
            threshold=self.threshold,
            entries=tuple(entries),
            degenerate_keywords=tuple(degenerate)
        )

    @staticmethod
    def _to_array(keywords: Sequence[str], vectors: Sequence[KeywordCountVector]) -> np.ndarray:
        """Documents x keywords array of counts."""
        if not vectors:
            return np.zeros((0, len(keywords)), dtype=float)

        return np.array(
            [[vector.get(keyword, 0) for keyword in keywords] for vector in vectors],
            dtype=float
        )


if __name__ == "__main__":
    engine = CorrelationEngine(threshold=0.1)
    matrix = engine.compute(
        ["machine learning", "neural networks", "datasets"],
        [
            {"machine learning": 3, "neural networks": 2, "datasets": 0},
            {"machine learning": 0, "neural networks": 1, "datasets": 4},
            {"machine learning": 2, "neural networks": 2, "datasets": 1},
        ]
    )
    for entry in matrix:
        print(f"{entry.keyword_a} / {entry.keyword_b}: {entry.score:+.4f}")
    print(f"Degenerate: {matrix.degenerate_keywords}")
