"""
Literal phrase search over PDF collections.

Finds non-overlapping occurrences of a phrase in extracted text and keeps
a short context window around each one. Corpus-wide search reuses the
extraction pool, so documents are searched in parallel and a failing
document only shows up in the failure list.
"""

import re
from pathlib import Path
from typing import Iterable, List, Union

from ..core import get_config, get_logger, InputError
from ..extraction import CorpusLoader, ExtractionPool, PDFExtractor, TextExtractor
from ..utils import single_line, truncate_text
from .models import DocumentMatches, PhraseMatch, SearchOutcome

logger = get_logger(__name__)


def find_matches(
    text: str,
    phrase: str,
    case_sensitive: bool = False,
    context_chars: int = 40
) -> List[PhraseMatch]:
    """
    Find all non-overlapping occurrences of phrase in text.

    Args:
        text: Text to search.
        phrase: Literal phrase to look for.
        case_sensitive: Match case exactly when True.
        context_chars: Characters of context kept on each side.

    Returns:
        Matches in text order.
    """
    if not text or not phrase:
        return []

    flags = 0 if case_sensitive else re.IGNORECASE
    pattern = re.compile(re.escape(phrase), flags)

    matches = []
    for found in pattern.finditer(text):
        start = max(0, found.start() - context_chars)
        end = min(len(text), found.end() + context_chars)
        matches.append(PhraseMatch(position=found.start(), context=text[start:end]))

    return matches


class PhraseSearcher:
    """Searches every document of a corpus for a phrase."""

    def __init__(
        self,
        extractor: TextExtractor = None,
        workers: int = None,
        case_sensitive: bool = None,
        context_chars: int = None,
        loader: CorpusLoader = None
    ):
        """
        Initialize the searcher.

        Args:
            extractor: Text extractor, defaults to PDFExtractor.
            workers: Extraction worker threads.
            case_sensitive: Override config search.case_sensitive.
            context_chars: Override config search.context_chars.
            loader: Corpus loader, defaults to a config-driven CorpusLoader.
        """
        config = get_config()

        self.case_sensitive = (
            config.search.case_sensitive if case_sensitive is None else case_sensitive
        )
        self.context_chars = (
            config.search.context_chars if context_chars is None else context_chars
        )
        self.loader = loader or CorpusLoader()
        self.pool = ExtractionPool(extractor or PDFExtractor(), workers=workers)

    def search(self, input_paths: Iterable[Union[str, Path]], phrase: str) -> SearchOutcome:
        """
        Search all documents under input_paths.

        Args:
            input_paths: Files and directories to search.
            phrase: Phrase to look for.

        Returns:
            SearchOutcome with matching documents sorted by path.

        Raises:
            InputError: If the phrase is empty or no documents were found.
        """
        if not phrase or not phrase.strip():
            raise InputError("Search phrase must not be empty")

        scan = self.loader.load(input_paths)
        if not scan.documents:
            raise InputError("No PDF documents found in the given input paths")

        logger.info(f"Searching {len(scan.documents)} documents for: {phrase!r}")

        outcomes = self.pool.run(
            scan.documents,
            process=lambda text: find_matches(
                text, phrase, self.case_sensitive, self.context_chars
            )
        )

        result = SearchOutcome(phrase=phrase, warnings=list(scan.warnings))

        for outcome in outcomes:
            if not outcome.ok:
                result.failures.append(outcome)
                continue

            result.documents_searched += 1
            if outcome.data:
                result.results.append(DocumentMatches(outcome.document, outcome.data))

        result.results.sort(key=lambda r: r.document.sort_key)

        logger.info(
            f"Search complete: {len(result.results)} of {result.documents_searched} "
            f"documents match ({result.total_matches} occurrences)"
        )

        return result


def format_search_results(outcome: SearchOutcome, max_snippets: int = 3, snippet_length: int = 120) -> str:
    """
    Render a SearchOutcome as plain text.

    Args:
        outcome: Search outcome.
        max_snippets: Context snippets shown per document.
        snippet_length: Maximum characters per snippet.

    Returns:
        Text ending with a newline.
    """
    lines = [
        f"Search phrase: {outcome.phrase!r}",
        f"Documents searched: {outcome.documents_searched}",
        f"Matching documents: {len(outcome.results)} ({outcome.total_matches} matches)",
        ""
    ]

    if not outcome.results:
        lines.append("No documents contain the phrase.")

    for result in outcome.results:
        lines.append(f"{result.document.path} ({result.match_count} matches)")
        for match in result.matches[:max_snippets]:
            snippet = truncate_text(single_line(match.context), snippet_length)
            lines.append(f"  @{match.position}: ...{snippet}...")
        if result.match_count > max_snippets:
            lines.append(f"  ... and {result.match_count - max_snippets} more")

    if outcome.failures:
        lines.append("")
        lines.append(f"Extraction failures ({len(outcome.failures)}):")
        for failed in sorted(outcome.failures, key=lambda o: o.document.sort_key):
            lines.append(f"  {failed.document.path}: [{failed.error_kind.value}] {failed.message}")

    if outcome.warnings:
        lines.append("")
        lines.append(f"Warnings ({len(outcome.warnings)}):")
        for warning in outcome.warnings:
            lines.append(f"  {warning}")

    return "\n".join(lines) + "\n"
