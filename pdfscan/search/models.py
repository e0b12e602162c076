"""
Data models for phrase search.

Defines dataclasses for single matches, per-document results, and the
outcome of a search over a corpus.
"""

from dataclasses import dataclass, field
from typing import List

from ..extraction.models import DocumentHandle, ExtractionOutcome


@dataclass(frozen=True)
class PhraseMatch:
    """
    One occurrence of the phrase in a document.

    Attributes:
        position: Character offset of the match in the extracted text.
        context: Surrounding text, including the match itself.
    """
    position: int
    context: str


@dataclass
class DocumentMatches:
    """All matches of the phrase in one document."""
    document: DocumentHandle
    matches: List[PhraseMatch] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matches)


@dataclass
class SearchOutcome:
    """
    Result of searching a corpus for one phrase.

    Attributes:
        phrase: The phrase searched for.
        results: Documents with at least one match, sorted by path.
        documents_searched: Documents successfully extracted and searched.
        failures: Outcomes of documents that could not be extracted.
        warnings: Non-fatal discovery warnings.
    """
    phrase: str
    results: List[DocumentMatches] = field(default_factory=list)
    documents_searched: int = 0
    failures: List[ExtractionOutcome] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return sum(result.match_count for result in self.results)
