"""
Text utility functions for pdfscan.

Provides text cleaning, truncation, and keyword normalization
for processing extracted PDF content.
"""

import re
import unicodedata


def clean_text(text: str) -> str:
    """
    Normalize and clean extracted text.

    Removes control characters, normalizes whitespace, and handles
    common PDF extraction artifacts.

    Args:
        text: Raw text from PDF extraction.

    Returns:
        Cleaned text string.
    """
    if not text:
        return ""

    # Normalize unicode characters (ligatures, full-width forms)
    text = unicodedata.normalize("NFKC", text)

    # Remove control characters except newlines and tabs
    text = "".join(
        char for char in text
        if not unicodedata.category(char).startswith("C")
        or char in "\n\t"
    )

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    lines = [line.strip() for line in text.split("\n")]
    text = "\n".join(lines)

    return text.strip()


def single_line(text: str) -> str:
    """Collapse all whitespace, newlines included, into single spaces."""
    return " ".join(text.split())


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to maximum length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length including suffix.
        suffix: String to append when truncated.

    Returns:
        Truncated text or original if within limit.
    """
    if not text or len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return suffix[:max_length]

    # Try to break at word boundary
    truncated = text[:truncate_at]
    last_space = truncated.rfind(" ")

    if last_space > truncate_at * 0.7:
        truncated = truncated[:last_space]

    return truncated + suffix


def normalize_keyword(keyword: str) -> str:
    """
    Normalize a user-supplied keyword for case-insensitive matching.

    Applies the same normalization clean_text applies to document text
    (NFKC, control characters dropped, whitespace runs collapsed), then
    lowercases, so a keyword matches wherever its cleaned form occurs.
    """
    return single_line(clean_text(keyword)).lower()


if __name__ == "__main__":
    sample_text = """
    Machine    learning   improves  neural networks.



    Second paragraph.
    """

    print("=== clean_text ===")
    print(repr(clean_text(sample_text)))

    print("\n=== truncate_text ===")
    long_text = "Neural networks require large datasets to generalize well."
    print(f"Truncated (30): {truncate_text(long_text, 30)}")

    print("\n=== normalize_keyword ===")
    print(repr(normalize_keyword("  Neural Networks ")))
