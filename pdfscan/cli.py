"""
Command-line interface for pdfscan.

Usage:
    pdfscan analyze --keywords "machine learning" datasets --input-paths docs/
    pdfscan analyze -k ai -i docs/ --threshold 0.3 --output-file report.txt
    pdfscan search --search-phrase "neural network" --input-paths docs/
    pdfscan extract all_text.txt docs/ extra.pdf
    pdfscan --config path/to/config.json --log-level DEBUG analyze ...
"""

import argparse
import sys
from pathlib import Path
from typing import List

from . import __version__
from .analysis import CorpusAnalyzer, ReportFormatter, write_report
from .core import (
    get_config,
    reload_config,
    setup_logging,
    ConfigurationError,
    PDFScanError
)
from .extraction import export_text
from .search import PhraseSearcher, format_search_results


def _threshold(value: str) -> float:
    """argparse type for a correlation threshold in [0, 1]."""
    try:
        threshold = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not 0.0 <= threshold <= 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {value}")
    return threshold


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with analyze, search and extract commands."""
    parser = argparse.ArgumentParser(
        prog="pdfscan",
        description="PDF text extraction, phrase search and keyword correlation analysis"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to custom config.json file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser(
        "analyze",
        help="Count keywords, correlate them across documents and rank documents"
    )
    analyze.add_argument(
        "--keywords", "-k",
        nargs="+",
        required=True,
        help="Keywords or phrases to count (case-insensitive)"
    )
    analyze.add_argument(
        "--input-paths", "-i",
        nargs="+",
        required=True,
        type=Path,
        help="PDF files or directories (searched recursively)"
    )
    analyze.add_argument(
        "--output-file", "-o",
        type=Path,
        help="Write the report here instead of stdout"
    )
    analyze.add_argument(
        "--threshold", "-t",
        type=_threshold,
        help="Minimum absolute correlation to report, 0..1 (default from config, 0.1)"
    )
    analyze.add_argument(
        "--workers", "-j",
        type=_positive_int,
        help="Parallel extraction workers (default: CPU count)"
    )

    search = subparsers.add_parser(
        "search",
        help="List PDF files containing a phrase"
    )
    search.add_argument(
        "--search-phrase", "-s",
        required=True,
        help="Text to search for"
    )
    search.add_argument(
        "--input-paths", "--directories", "-d",
        dest="input_paths",
        nargs="+",
        required=True,
        type=Path,
        help="PDF files or directories to search in"
    )
    search.add_argument(
        "--case-sensitive",
        action="store_true",
        default=None,
        help="Match case exactly"
    )
    search.add_argument(
        "--output-file", "-o",
        type=Path,
        help="Write results here instead of stdout"
    )
    search.add_argument(
        "--workers", "-j",
        type=_positive_int,
        help="Parallel extraction workers (default: CPU count)"
    )

    extract = subparsers.add_parser(
        "extract",
        help="Extract text from PDFs and save it to a file"
    )
    extract.add_argument("output_file", type=Path, help="Output text file path")
    extract.add_argument("input_paths", nargs="+", type=Path, help="Input paths (directories or PDF files)")
    extract.add_argument(
        "--workers", "-j",
        type=_positive_int,
        help="Parallel extraction workers (default: CPU count)"
    )

    return parser


def _configure(args: argparse.Namespace) -> None:
    """Load config and set up logging with command-line overrides."""
    config = reload_config(args.config) if args.config else get_config()

    setup_logging(
        log_level=args.log_level or config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.paths.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        force=True
    )


def _run_analyze(args: argparse.Namespace) -> int:
    analyzer = CorpusAnalyzer(
        keywords=args.keywords,
        threshold=args.threshold,
        workers=args.workers
    )
    report = analyzer.analyze(args.input_paths)

    write_report(ReportFormatter().format(report), args.output_file)

    for outcome in report.failures:
        print(
            f"Failed: {outcome.document.path}: [{outcome.error_kind.value}] {outcome.message}",
            file=sys.stderr
        )

    if report.documents_analyzed == 0:
        print(
            f"Error: all {report.documents_discovered} documents failed extraction",
            file=sys.stderr
        )
        return 1

    return 0


def _run_search(args: argparse.Namespace) -> int:
    searcher = PhraseSearcher(workers=args.workers, case_sensitive=args.case_sensitive)
    outcome = searcher.search(args.input_paths, args.search_phrase)

    text = format_search_results(outcome, max_snippets=get_config().search.max_snippets)
    write_report(text, args.output_file)

    if outcome.documents_searched == 0:
        print("Error: no document could be extracted", file=sys.stderr)
        return 1

    return 0


def _run_extract(args: argparse.Namespace) -> int:
    stats = export_text(args.input_paths, args.output_file, workers=args.workers)

    print(f"Extracted {stats.documents_written} of {stats.documents_found} documents to {args.output_file}")
    for error in stats.errors:
        print(f"Failed: {error}", file=sys.stderr)

    if stats.documents_written == 0:
        print("Error: no document could be extracted", file=sys.stderr)
        return 1

    return 0


COMMANDS = {
    "analyze": _run_analyze,
    "search": _run_search,
    "extract": _run_extract
}


def main(argv: List[str] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        _configure(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    try:
        return COMMANDS[args.command](args)
    except PDFScanError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
