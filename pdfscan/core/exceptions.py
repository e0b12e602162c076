"""
Custom exception hierarchy for pdfscan.

Provides specific exception types for the failure modes of a scan run:
configuration errors, bad user input, per-document extraction failures,
and report output problems.
"""

from enum import Enum


class ExtractErrorKind(Enum):
    """Classified reason for a failed text extraction."""
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    CORRUPT_DOCUMENT = "corrupt_document"
    PASSWORD_PROTECTED = "password_protected"
    ENCODING_ERROR = "encoding_error"
    EMPTY_DOCUMENT = "empty_document"
    UNKNOWN = "unknown"


class PDFScanError(Exception):
    """Base exception for all pdfscan errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PDFScanError):
    """Raised when configuration is invalid or missing."""
    pass


class InputError(PDFScanError):
    """Raised when user-supplied paths or arguments are unusable."""
    pass


class ExtractionError(PDFScanError):
    """Raised when PDF text extraction fails."""

    def __init__(
        self,
        message: str,
        filepath: str = None,
        kind: ExtractErrorKind = ExtractErrorKind.UNKNOWN,
        details: dict = None
    ):
        """
        Initialize extraction error.

        Args:
            message: Error description.
            filepath: Path to the problematic PDF file.
            kind: Classified failure reason.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath
        self.kind = kind


class OutputError(PDFScanError):
    """Raised when a report or export cannot be written."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        super().__init__(message, details)
        self.path = path
