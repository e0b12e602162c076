"""
Corpus analysis module for pdfscan.

Counts keywords per document, correlates keyword pairs across the corpus,
ranks documents by relevance, and renders the result as a text report.
"""

from .models import (
    AnalysisReport,
    CorrelationEntry,
    CorrelationMatrix,
    KeywordCountVector,
    RankingEntry
)
from .keyword_counter import KeywordCounter
from .correlation import CorrelationEngine, pearson
from .ranking import RelevanceRanker
from .report_formatter import ReportFormatter, write_report
from .analyzer import CorpusAnalyzer

__all__ = [
    "AnalysisReport",
    "CorrelationEntry",
    "CorrelationMatrix",
    "KeywordCountVector",
    "RankingEntry",
    "KeywordCounter",
    "CorrelationEngine",
    "pearson",
    "RelevanceRanker",
    "ReportFormatter",
    "write_report",
    "CorpusAnalyzer"
]
