"""
PDF extraction module for pdfscan.

Provides corpus discovery, text extraction with multiple backends
(pypdf and pdfplumber) with automatic fallback, and a bounded thread
pool that extracts whole collections with per-document failure isolation.
"""

from .models import CorpusScan, DocumentHandle, ExtractionOutcome, TextExtractor
from .corpus_loader import CorpusLoader
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend
from .extractor import PDFExtractor
from .pool import ExtractionPool
from .text_export import ExportStats, export_text

__all__ = [
    "CorpusScan",
    "DocumentHandle",
    "ExtractionOutcome",
    "TextExtractor",
    "CorpusLoader",
    "PyPDFBackend",
    "PDFPlumberBackend",
    "PDFExtractor",
    "ExtractionPool",
    "ExportStats",
    "export_text"
]
