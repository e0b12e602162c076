"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, generated PDFs, an in-memory text
extractor, and singleton reset helpers so tests stay isolated.
"""

import io
import json
import pytest
import tempfile
import shutil
import threading
from pathlib import Path
from typing import Callable, Dict, Generator, Union

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pypdf import PdfReader, PdfWriter  # noqa: E402

from pdfscan.core.exceptions import ExtractionError, ExtractErrorKind  # noqa: E402


def build_pdf_bytes(text: str) -> bytes:
    """
    Build a valid single-page PDF showing text in Helvetica.

    Object offsets in the xref table are computed, so strict readers
    accept the file.
    """
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1, xref_offset
    )

    return bytes(out)


def build_encrypted_pdf_bytes(text: str, user_password: str = "secret") -> bytes:
    """Build a generated PDF locked with a non-empty user password."""
    reader = PdfReader(io.BytesIO(build_pdf_bytes(text)))
    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(page)
    writer.encrypt(user_password=user_password, owner_password="owner")

    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


class FakeExtractor:
    """
    In-memory TextExtractor keyed by file name.

    Values are either the text to return or an exception to raise.
    Unknown files raise a NOT_FOUND ExtractionError.
    """

    def __init__(self, texts: Dict[str, Union[str, Exception]] = None):
        self.texts = dict(texts or {})
        self.calls = []
        self._lock = threading.Lock()

    def extract_text(self, filepath) -> str:
        filepath = Path(filepath)
        with self._lock:
            self.calls.append(filepath.name)

        value = self.texts.get(filepath.name)
        if value is None:
            raise ExtractionError(
                "File not found",
                filepath=str(filepath),
                kind=ExtractErrorKind.NOT_FOUND
            )
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="pdfscan_test_")
    yield Path(tmp).resolve()
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "logs_directory": str(logs_dir)
        },
        "extraction": {
            "primary_backend": "pypdf",
            "fallback_backend": "pdfplumber",
            "max_file_size_mb": 100,
            "supported_extensions": [".pdf"]
        },
        "analysis": {
            "threshold": 0.1,
            "workers": 2,
            "log_progress_every": 5,
            "keyword_weights": {}
        },
        "search": {
            "case_sensitive": False,
            "context_chars": 20,
            "max_snippets": 2
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def configured(temp_config, reset_config_singleton):
    """Load the temporary config into the singleton for one test."""
    from pdfscan.core.config_loader import get_config
    return get_config(temp_config)


@pytest.fixture
def make_pdf(temp_dir: Path) -> Callable[..., Path]:
    """
    Factory writing a generated PDF below temp_dir.

    Usage: make_pdf("sub/doc.pdf", "some text") -> Path
    """
    def _make(relative: str, text: str = "Hello World") -> Path:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(build_pdf_bytes(text))
        return path

    return _make


@pytest.fixture
def sample_pdf(make_pdf) -> Path:
    """A single readable PDF containing 'Hello World'."""
    return make_pdf("sample.pdf", "Hello World")


@pytest.fixture
def encrypted_pdf(temp_dir: Path) -> Path:
    """A PDF that opens only with the password 'secret'."""
    path = temp_dir / "locked.pdf"
    path.write_bytes(build_encrypted_pdf_bytes("Confidential figures"))
    return path


@pytest.fixture
def sample_pdf_collection(temp_dir: Path, make_pdf) -> Path:
    """
    Create multiple PDF files in a directory structure.

    Returns:
        Path to the data directory containing PDFs.
    """
    data_dir = temp_dir / "data"

    make_pdf("data/root_doc.pdf", "Root document")
    make_pdf("data/folder1/doc1.pdf", "First document")
    make_pdf("data/folder1/doc2.pdf", "Second document")
    make_pdf("data/folder2/doc3.pdf", "Third document")

    # Non-PDF file (should be ignored)
    (data_dir / "readme.txt").write_text("Not a PDF")

    return data_dir


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    """An empty FakeExtractor; tests fill fake_extractor.texts."""
    return FakeExtractor()


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from pdfscan.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from pdfscan.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
