"""
office2text: limited plain-text extraction from ODT and DOCX documents.

Reads at most a given number of characters of text from the document body,
streaming the XML inside the ZIP container instead of loading it. Text is
normalized into words separated by single spaces. The result tells apart a
document that fit within the limit (COMPLETE) from one that was cut short
(TRUNCATED).
"""

import io
from pathlib import Path

from office2text.exceptions import (
    ContentNotFoundError,
    ExtractionError,
    ExtractionFileEncryptedError,
    ExtractionFileFormatNotSupportedError,
    ExtractionZipBombError,
    InvalidContainerError,
    MalformedXmlError,
    UnexpectedEndOfStreamError,
)
from office2text.extractors.data_types import (
    ExtractionStatus,
    LimitedTextContent,
    LimitUnit,
)
from office2text.extractors.formats import DocumentFormat
from office2text.router import get_document_format, get_extractor, is_supported_file

__version__ = "0.1.0"


def read_limited_odt(
    file_like: io.BufferedIOBase, limit: int, total_size: int | None = None, **kwargs
) -> LimitedTextContent:
    """Read at most ``limit`` characters of text from an ODT file."""
    from office2text.extractors.open_office.odt_extractor import (
        read_limited_odt as _read_limited_odt,
    )

    return _read_limited_odt(file_like, limit, total_size, **kwargs)


def read_limited_docx(
    file_like: io.BufferedIOBase, limit: int, total_size: int | None = None, **kwargs
) -> LimitedTextContent:
    """Read at most ``limit`` characters of text from a DOCX file."""
    from office2text.extractors.ms_modern.docx_extractor import (
        read_limited_docx as _read_limited_docx,
    )

    return _read_limited_docx(file_like, limit, total_size, **kwargs)


def read_limited(
    file_like: io.BufferedIOBase,
    limit: int,
    fmt: DocumentFormat,
    total_size: int | None = None,
    **kwargs,
) -> LimitedTextContent:
    """Read at most ``limit`` characters of text from a document of a known format."""
    if fmt is DocumentFormat.ODT:
        return read_limited_odt(file_like, limit, total_size, **kwargs)
    return read_limited_docx(file_like, limit, total_size, **kwargs)


def read_limited_file(path: str | Path, limit: int, **kwargs) -> LimitedTextContent:
    """
    Read at most ``limit`` characters of text from a file on disk.

    The format is chosen from the file extension (.odt or .docx); the content
    is never sniffed.

    Args:
        path: Path to the file to read.
        limit: Maximum number of characters to return.
        **kwargs: Passed on to the format's reader (``unit``,
            ``zip_limits``, ``chunk_size``).

    Returns:
        LimitedTextContent with the text and whether it was truncated.

    Raises:
        ExtractionFileFormatNotSupportedError: The extension is not supported.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> import office2text
        >>> result = office2text.read_limited_file("document.docx", 100)
        >>> if not result.is_truncated:
        ...     print("Document was shorter than 100 characters")
        >>> print(result.text)
    """
    path = Path(path)
    extractor = get_extractor(str(path))
    with open(path, "rb") as f:
        return extractor(f, limit, path=str(path), **kwargs)


__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_limited_file",
    "read_limited",
    "read_limited_odt",
    "read_limited_docx",
    "is_supported_file",
    "get_document_format",
    "get_extractor",
    # Types
    "DocumentFormat",
    "ExtractionStatus",
    "LimitUnit",
    "LimitedTextContent",
    # Errors
    "ExtractionError",
    "ExtractionFileFormatNotSupportedError",
    "InvalidContainerError",
    "ExtractionFileEncryptedError",
    "ExtractionZipBombError",
    "ContentNotFoundError",
    "MalformedXmlError",
    "UnexpectedEndOfStreamError",
]
