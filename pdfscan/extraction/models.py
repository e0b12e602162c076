"""
Data models for document discovery and extraction.

Defines the document handle produced by the corpus loader, the per-document
extraction outcome produced by the pool, and the TextExtractor capability
that extraction backends implement.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Protocol, Union

from ..core import ExtractErrorKind


class TextExtractor(Protocol):
    """Anything that can turn a PDF path into plain text."""

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Extract the full text of a document.

        Raises:
            ExtractionError: With a classified kind on failure.
        """
        ...


@dataclass(frozen=True)
class DocumentHandle:
    """
    Identifies one input PDF.

    Attributes:
        path: Absolute, resolved path to the file.
        display_name: Path relative to the input root it was found under,
            or the file name for explicitly listed files.
    """
    path: Path
    display_name: str

    @property
    def sort_key(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class ExtractionOutcome:
    """
    Result of extracting (and optionally processing) one document.

    Exactly one of the success fields or error_kind is meaningful:
    a successful outcome has error_kind None and carries either the raw
    text or the result of the per-worker processing step in data.
    """
    document: DocumentHandle
    text: Optional[str] = None
    data: Any = None
    error_kind: Optional[ExtractErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, document: DocumentHandle, text: str = None, data: Any = None) -> "ExtractionOutcome":
        return cls(document=document, text=text, data=data)

    @classmethod
    def failure(cls, document: DocumentHandle, kind: ExtractErrorKind, message: str) -> "ExtractionOutcome":
        return cls(document=document, error_kind=kind, message=message)


@dataclass
class CorpusScan:
    """Documents discovered for one run plus non-fatal discovery warnings."""
    documents: List[DocumentHandle] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
