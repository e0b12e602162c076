"""
Plain-text rendering of an AnalysisReport.

The correlation section lists only surfaced pairs, one row per unordered
pair sorted lexicographically, rather than a full keyword x keyword grid.
Output contains no timestamps so repeated runs over an unchanged corpus
produce identical reports.
"""

import sys
from pathlib import Path
from typing import List, Union

from ..core import get_logger, OutputError
from ..utils import ensure_directory
from .models import AnalysisReport

logger = get_logger(__name__)

RULE_CHAR = "-"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.2f}"


class ReportFormatter:
    """Renders analysis reports as human-readable text."""

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def format(self, report: AnalysisReport) -> str:
        """
        Render a report.

        Args:
            report: Completed analysis report.

        Returns:
            Report text ending with a newline.
        """
        lines: List[str] = []

        title = "PDF corpus keyword analysis"
        lines.append(title)
        lines.append("=" * len(title))
        lines.append(f"Keywords:  {', '.join(report.keywords)}")
        lines.append(f"Threshold: {report.threshold:g}")

        self._summary(report, lines)
        self._keyword_totals(report, lines)
        self._correlations(report, lines)
        self._ranking(report, lines)
        self._failures(report, lines)
        self._warnings(report, lines)
        self._notes(report, lines)

        return "\n".join(lines) + "\n"

    def _section(self, lines: List[str], heading: str) -> None:
        lines.append("")
        lines.append(heading)
        lines.append(RULE_CHAR * len(heading))

    def _summary(self, report: AnalysisReport, lines: List[str]) -> None:
        self._section(lines, "Summary")
        lines.append(f"{self.indent}Documents discovered: {report.documents_discovered}")
        lines.append(f"{self.indent}Documents analyzed:   {report.documents_analyzed}")
        lines.append(f"{self.indent}Extraction failures:  {report.failure_count}")

    def _keyword_totals(self, report: AnalysisReport, lines: List[str]) -> None:
        self._section(lines, "Keyword totals")
        width = max(len(keyword) for keyword in report.keywords)
        for keyword in report.keywords:
            total = report.keyword_totals.get(keyword, 0)
            lines.append(f"{self.indent}{keyword:<{width}}  {total}")

    def _correlations(self, report: AnalysisReport, lines: List[str]) -> None:
        threshold = f"{report.threshold:g}"
        self._section(lines, f"Keyword correlations (|r| >= {threshold})")

        if report.matrix.is_empty:
            lines.append(f"{self.indent}No correlations above threshold ({threshold}).")
            return

        width_a = max(len("Keyword A"), *(len(e.keyword_a) for e in report.matrix))
        width_b = max(len("Keyword B"), *(len(e.keyword_b) for e in report.matrix))

        lines.append(f"{self.indent}{'Keyword A':<{width_a}}  {'Keyword B':<{width_b}}  {'r':>7}")
        for entry in report.matrix:
            lines.append(
                f"{self.indent}{entry.keyword_a:<{width_a}}  "
                f"{entry.keyword_b:<{width_b}}  {entry.score:>+7.4f}"
            )

    def _ranking(self, report: AnalysisReport, lines: List[str]) -> None:
        self._section(lines, "Document ranking")

        if not report.ranking:
            lines.append(f"{self.indent}No documents analyzed.")
            return

        position_width = len(str(len(report.ranking)))
        score_width = max(len(_format_number(entry.score)) for entry in report.ranking)

        for position, entry in enumerate(report.ranking, start=1):
            counts = ", ".join(
                f"{keyword}: {count}" for keyword, count in entry.counts.items() if count
            )
            line = (
                f"{self.indent}{position:>{position_width}}. "
                f"{_format_number(entry.score):>{score_width}}  {entry.document.path}"
            )
            if counts:
                line += f"  ({counts})"
            lines.append(line)

    def _failures(self, report: AnalysisReport, lines: List[str]) -> None:
        if not report.failures:
            return

        self._section(lines, f"Extraction failures ({report.failure_count})")
        for outcome in sorted(report.failures, key=lambda o: o.document.sort_key):
            lines.append(
                f"{self.indent}{outcome.document.path}: "
                f"[{outcome.error_kind.value}] {outcome.message}"
            )

    def _warnings(self, report: AnalysisReport, lines: List[str]) -> None:
        if not report.warnings:
            return

        self._section(lines, f"Warnings ({len(report.warnings)})")
        for warning in report.warnings:
            lines.append(f"{self.indent}{warning}")

    def _notes(self, report: AnalysisReport, lines: List[str]) -> None:
        degenerate = report.matrix.degenerate_keywords
        if not degenerate or len(report.keywords) < 2:
            return

        self._section(lines, "Notes")
        lines.append(
            f"{self.indent}Constant counts across analyzed documents, correlation "
            f"undefined and scored 0: {', '.join(degenerate)}"
        )


def write_report(text: str, output_file: Union[str, Path] = None) -> None:
    """
    Write report text to a file, or stdout when output_file is None.

    Raises:
        OutputError: If the destination cannot be written.
    """
    if output_file is None:
        try:
            sys.stdout.write(text)
            sys.stdout.flush()
        except OSError as e:
            raise OutputError(f"Cannot write report to stdout: {e}")
        return

    output_file = Path(output_file)
    try:
        ensure_directory(output_file.parent)
        output_file.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Cannot write report to {output_file}: {e}", path=str(output_file))

    logger.info(f"Report written to {output_file}")
