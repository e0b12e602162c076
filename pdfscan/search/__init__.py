"""
Phrase search module for pdfscan.

Provides literal phrase matching with context snippets and corpus-wide
search built on the parallel extraction pool.
"""

from .models import PhraseMatch, DocumentMatches, SearchOutcome
from .phrase_search import PhraseSearcher, find_matches, format_search_results

__all__ = [
    "PhraseMatch",
    "DocumentMatches",
    "SearchOutcome",
    "PhraseSearcher",
    "find_matches",
    "format_search_results"
]
