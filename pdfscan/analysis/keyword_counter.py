"""
Keyword occurrence counting.

Counts case-insensitive, non-overlapping literal occurrences of each
configured keyword in a document's text. Multi-word keywords are matched
as whole phrases, never tokenized. Text and keywords go through the same
normalization before matching.
"""

from typing import Iterable, List

from ..core import InputError
from ..utils import clean_text, normalize_keyword
from .models import KeywordCountVector


class KeywordCounter:
    """
    Counts a fixed keyword list in document texts.

    Keywords are normalized once at construction; duplicates that only
    differ by case or surrounding whitespace are collapsed, keeping the
    first occurrence's position.
    """

    def __init__(self, keywords: Iterable[str]):
        """
        Initialize the counter.

        Args:
            keywords: User-supplied keywords or phrases.

        Raises:
            InputError: If the list is empty or any keyword is blank.
        """
        self.keywords = self.normalize_keywords(keywords)

    @staticmethod
    def normalize_keywords(keywords: Iterable[str]) -> List[str]:
        """
        Validate and normalize a keyword list.

        Args:
            keywords: Raw keywords.

        Returns:
            Normalized, deduplicated keywords in input order.

        Raises:
            InputError: If the list is empty or any keyword is blank.
        """
        if keywords is None:
            raise InputError("At least one keyword is required")

        normalized: List[str] = []
        for raw in keywords:
            keyword = normalize_keyword(raw or "")
            if not keyword:
                raise InputError("Keywords must not be empty", {"keyword": raw})
            if keyword not in normalized:
                normalized.append(keyword)

        if not normalized:
            raise InputError("At least one keyword is required")

        return normalized

    def count(self, text: str) -> KeywordCountVector:
        """
        Count every keyword in text.

        Args:
            text: Extracted document text, possibly empty.

        Returns:
            Mapping with an entry for every keyword, 0 when absent.
        """
        haystack = clean_text(text).lower()
        return {keyword: haystack.count(keyword) for keyword in self.keywords}


if __name__ == "__main__":
    counter = KeywordCounter(["machine learning", "Neural Networks", "datasets"])
    print(counter.count("Machine learning improves neural networks"))
    print(counter.count("Neural networks require large datasets"))
    print(counter.count(""))
