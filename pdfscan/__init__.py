"""
pdfscan package.

Extracts text from PDF collections, searches it for phrases, and analyzes
keyword co-occurrence across a corpus to rank documents by relevance.
"""

__version__ = "0.1.0"
