"""
File utility functions for pdfscan.

Provides common file operations: size calculations, path manipulation,
and directory management.
"""

from pathlib import Path
from typing import Union


def get_file_size_mb(filepath: Union[str, Path]) -> float:
    """
    Get file size in megabytes.

    Args:
        filepath: Path to the file.

    Returns:
        File size in MB, rounded to 2 decimal places.
    """
    filepath = Path(filepath)
    size_bytes = filepath.stat().st_size
    return round(size_bytes / (1024 * 1024), 2)


def get_relative_path(filepath: Union[str, Path], base: Union[str, Path]) -> str:
    """
    Compute relative path from base directory.

    Args:
        filepath: Absolute path to the file.
        base: Base directory to compute relative path from.

    Returns:
        Relative path as string (POSIX separators), or absolute path
        if not relative to base.
    """
    filepath = Path(filepath).resolve()
    base = Path(base).resolve()

    try:
        return filepath.relative_to(base).as_posix()
    except ValueError:
        return str(filepath)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Create directory tree if it doesn't exist.

    Args:
        path: Directory path to create.

    Returns:
        Path object of the directory.
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
