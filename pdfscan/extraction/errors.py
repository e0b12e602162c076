"""
Classification of backend exceptions into extraction failure kinds.

Both backends funnel library and OS exceptions through classify_exception()
so the report shows one consistent reason per failed document.
"""

from pdfminer.pdfdocument import PDFEncryptionError
from pdfminer.pdfparser import PDFSyntaxError
from pypdf.errors import FileNotDecryptedError, PdfReadError

from ..core import ExtractErrorKind


def _unwrap(exc: BaseException) -> BaseException:
    # pdfplumber wraps pdfminer failures and keeps the original as args[0]
    if exc.args and isinstance(exc.args[0], BaseException):
        return exc.args[0]
    if exc.__cause__ is not None:
        return exc.__cause__
    return exc


def classify_exception(exc: BaseException) -> ExtractErrorKind:
    """
    Map an exception raised while reading a PDF to an ExtractErrorKind.

    Args:
        exc: Exception raised by a backend library or the OS.

    Returns:
        The matching failure kind, UNKNOWN when nothing matches.
    """
    for candidate in (exc, _unwrap(exc)):
        if isinstance(candidate, FileNotFoundError):
            return ExtractErrorKind.NOT_FOUND
        if isinstance(candidate, PermissionError):
            return ExtractErrorKind.PERMISSION_DENIED
        if isinstance(candidate, (FileNotDecryptedError, PDFEncryptionError)):
            return ExtractErrorKind.PASSWORD_PROTECTED
        if isinstance(candidate, (PdfReadError, PDFSyntaxError)):
            return ExtractErrorKind.CORRUPT_DOCUMENT
        if isinstance(candidate, UnicodeError):
            return ExtractErrorKind.ENCODING_ERROR

    return ExtractErrorKind.UNKNOWN
