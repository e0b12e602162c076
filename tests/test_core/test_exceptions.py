"""
Tests for custom exception classes.

Tests exception creation, message formatting, and details handling.
"""

import pytest

from pdfscan.core.exceptions import (
    PDFScanError,
    ConfigurationError,
    InputError,
    ExtractionError,
    ExtractErrorKind,
    OutputError
)


class TestPDFScanError:
    """Tests for base PDFScanError."""

    def test_basic_creation(self):
        """Test creating exception with just a message."""
        error = PDFScanError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_creation_with_details(self):
        """Test creating exception with details dict."""
        error = PDFScanError("File error", {"filename": "test.pdf", "size": 1024})

        assert error.details["filename"] == "test.pdf"
        assert error.details["size"] == 1024


class TestSubclasses:
    """Tests for the specific error types."""

    @pytest.mark.parametrize("error_cls", [ConfigurationError, InputError, ExtractionError, OutputError])
    def test_can_be_caught_as_base(self, error_cls):
        """Test that every error can be caught as PDFScanError."""
        with pytest.raises(PDFScanError):
            raise error_cls("Test error")

    def test_extraction_error_defaults_to_unknown(self):
        """Test that ExtractionError kind defaults to UNKNOWN."""
        error = ExtractionError("Failed", filepath="/test.pdf")

        assert error.filepath == "/test.pdf"
        assert error.kind is ExtractErrorKind.UNKNOWN

    def test_extraction_error_with_kind_and_details(self):
        """Test ExtractionError with kind and details."""
        error = ExtractionError(
            "Encrypted",
            filepath="/secret.pdf",
            kind=ExtractErrorKind.PASSWORD_PROTECTED,
            details={"backend": "pypdf"}
        )

        assert error.kind is ExtractErrorKind.PASSWORD_PROTECTED
        assert error.details["backend"] == "pypdf"

    def test_output_error_with_path(self):
        """Test OutputError keeps the destination path."""
        error = OutputError("Cannot write", path="/readonly/report.txt")

        assert error.path == "/readonly/report.txt"
        assert error.message == "Cannot write"


class TestExtractErrorKind:
    """Tests for the failure kind enum."""

    def test_values_are_snake_case(self):
        """Test that kind values are stable, report-friendly strings."""
        assert ExtractErrorKind.NOT_FOUND.value == "not_found"
        assert ExtractErrorKind.CORRUPT_DOCUMENT.value == "corrupt_document"
        assert ExtractErrorKind.EMPTY_DOCUMENT.value == "empty_document"
