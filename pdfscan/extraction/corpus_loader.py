"""
Corpus loader for recursive PDF discovery.

Turns a list of input paths (files and directories) into a deduplicated,
ordered list of DocumentHandle. Directories are walked to unbounded depth,
following symlinks while remembering visited directories so that symlink
loops are skipped instead of walked forever. Problems with individual
inputs are collected as warnings, never raised.
"""

import os
from pathlib import Path
from typing import Iterable, List, Set, Union

from ..core import get_config, get_logger
from ..utils import get_file_size_mb, get_relative_path
from .models import CorpusScan, DocumentHandle

logger = get_logger(__name__)


class CorpusLoader:
    """
    Discovers PDF documents from explicit files and directory trees.

    Output order follows input order. Files found under a directory are
    ordered by their path relative to it, which is also their display name.
    """

    def __init__(
        self,
        extensions: List[str] = None,
        max_file_size_mb: float = None
    ):
        """
        Initialize the loader.

        Args:
            extensions: File extensions to include (e.g., [".pdf"]).
            max_file_size_mb: Skip files larger than this size.
        """
        config = get_config()

        self.extensions = [
            ext.lower() for ext in (extensions or config.extraction.supported_extensions)
        ]
        self.max_file_size_mb = (
            config.extraction.max_file_size_mb if max_file_size_mb is None else max_file_size_mb
        )

    def load(self, input_paths: Iterable[Union[str, Path]]) -> CorpusScan:
        """
        Discover all documents under the given input paths.

        Args:
            input_paths: File or directory paths.

        Returns:
            CorpusScan with the documents and any discovery warnings.
        """
        scan = CorpusScan()
        seen: Set[Path] = set()

        for raw_path in input_paths:
            path = Path(raw_path).expanduser()

            if path.is_dir():
                logger.info(f"Scanning directory: {path}")
                for filepath in self._walk(path, scan.warnings):
                    self._add(filepath, get_relative_path(filepath, path), scan, seen)

            elif path.is_file():
                if self._matches_extension(path):
                    self._add(path, path.name, scan, seen)
                else:
                    self._warn(scan, f"Skipping file without a supported extension: {path}")

            elif path.exists() or path.is_symlink():
                self._warn(scan, f"Not a regular file or directory: {path}")

            else:
                self._warn(scan, f"Input path does not exist: {path}")

        logger.info(
            f"Discovery complete: {len(scan.documents)} documents, "
            f"{len(scan.warnings)} warnings"
        )

        return scan

    def _walk(self, root: Path, warnings: List[str]) -> List[Path]:
        """Matching files below root sorted by path, skipping directories seen twice."""
        visited = set()
        found: List[Path] = []

        def on_error(error: OSError) -> None:
            self._warn_list(warnings, f"Cannot read directory {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=True):
            try:
                stat = os.stat(dirpath)
            except OSError as e:
                self._warn_list(warnings, f"Cannot access directory {dirpath}: {e.strerror}")
                dirnames[:] = []
                continue

            key = (stat.st_dev, stat.st_ino)
            if key in visited:
                logger.warning(f"Skipping directory already visited (symlink loop): {dirpath}")
                dirnames[:] = []
                continue
            visited.add(key)

            dirnames.sort()

            for name in sorted(filenames):
                filepath = Path(dirpath) / name
                if self._matches_extension(filepath) and filepath.is_file():
                    found.append(filepath)

        return sorted(found, key=lambda filepath: filepath.relative_to(root).as_posix())

    def _add(self, filepath: Path, display_name: str, scan: CorpusScan, seen: Set[Path]) -> None:
        """Register a file unless it is a duplicate or too large."""
        try:
            resolved = filepath.resolve()
            size_mb = get_file_size_mb(resolved)
        except OSError as e:
            self._warn(scan, f"Cannot access file {filepath}: {e}")
            return

        if resolved in seen:
            logger.debug(f"Skipping duplicate path: {filepath}")
            return

        if size_mb > self.max_file_size_mb:
            self._warn(scan, f"Skipping large file ({size_mb}MB): {filepath}")
            return

        seen.add(resolved)
        scan.documents.append(DocumentHandle(path=resolved, display_name=display_name))

    def _matches_extension(self, filepath: Path) -> bool:
        return filepath.suffix.lower() in self.extensions

    def _warn(self, scan: CorpusScan, message: str) -> None:
        self._warn_list(scan.warnings, message)

    @staticmethod
    def _warn_list(warnings: List[str], message: str) -> None:
        logger.warning(message)
        warnings.append(message)


if __name__ == "__main__":
    import sys

    loader = CorpusLoader()
    result = loader.load(sys.argv[1:] or ["."])

    for i, document in enumerate(result.documents):
        print(f"  {document.display_name}")
        if i >= 9:
            print("  ... (showing first 10 only)")
            break

    for warning in result.warnings:
        print(f"  warning: {warning}")
