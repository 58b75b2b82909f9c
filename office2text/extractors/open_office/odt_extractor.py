"""
ODT Limited Text Extractor
==========================

Reads the first N characters of plain text from OpenDocument Text (.odt)
files created by LibreOffice, OpenOffice, and other ODF-compatible
applications.

File Format Background
----------------------
ODT files are ZIP archives containing XML files following the OASIS
OpenDocument standard (ISO/IEC 26300). Only content.xml, the document
body, is read. Its text lives in:

    - text:p: Paragraphs
    - text:h: Headings
    - text:span: Inline runs inside paragraphs and headings

Spans nested in a paragraph are collected as part of that paragraph, so
their text is emitted once. Text inside tables, lists and frames is reached
through the paragraphs those structures contain.

ODF whitespace elements (text:s, text:tab, text:line-break) carry no
character data. The words around them stay apart because every piece of
character data is followed by a separator before normalization.

Encrypted documents keep the ZIP layout but list encryption data in
META-INF/manifest.xml; they are rejected before content.xml is parsed.

Usage
-----
    >>> from office2text.extractors.open_office.odt_extractor import read_limited_odt
    >>>
    >>> with open("document.odt", "rb") as f:
    ...     result = read_limited_odt(f, 100)
    ...     print(result.text, result.status)
"""

import io
import logging
from pathlib import Path

from office2text.exceptions import ExtractionFileEncryptedError
from office2text.extractors.data_types import LimitedTextContent, LimitUnit
from office2text.extractors.formats import DocumentFormat
from office2text.extractors.limited_extractor import extract_limited
from office2text.extractors.util.encryption import is_odf_encrypted
from office2text.extractors.util.xml_stream import DEFAULT_CHUNK_SIZE
from office2text.extractors.util.zip_bomb import DEFAULT_ZIP_BOMB_LIMITS, ZipBombLimits

logger = logging.getLogger(__name__)


def read_limited_odt(
    file_like: io.BufferedIOBase,
    limit: int,
    total_size: int | None = None,
    *,
    unit: LimitUnit = LimitUnit.CHARS,
    zip_limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    path: str | Path | None = None,
) -> LimitedTextContent:
    """
    Read at most ``limit`` characters of normalized text from an ODT file.

    Text is normalized into a continuous sequence of words separated by
    single spaces; the limit counts the normalized text, so a run of spaces
    in the document counts as one character.

    Args:
        file_like: Seekable binary stream holding the complete ODT file.
        limit: Maximum number of characters (or bytes, see ``unit``).
        total_size: Declared size of the file in bytes. Must match the
            stream's length when given.
        unit: ``LimitUnit.BYTES`` counts UTF-8 bytes instead; the result
            may then be up to 3 bytes short of the limit to keep the last
            character whole.
        zip_limits: ZIP-bomb heuristics applied when the archive is opened.
        chunk_size: Bytes handed to the XML tokenizer per read.
        path: Optional file path to populate file metadata fields.

    Returns:
        LimitedTextContent with status COMPLETE when the document text fit
        within the limit, TRUNCATED when the limit cut it short.

    Raises:
        ExtractionFileEncryptedError: The document is password-protected.
        InvalidContainerError: Not a ZIP archive, or content.xml unreadable.
        ContentNotFoundError: The archive has no content.xml.
        MalformedXmlError: content.xml is not well-formed.
    """
    logger.debug("Reading ODT file")
    file_like.seek(0)
    if is_odf_encrypted(file_like, limits=zip_limits):
        raise ExtractionFileEncryptedError("ODT is encrypted or password-protected")

    return extract_limited(
        file_like,
        limit,
        DocumentFormat.ODT,
        total_size,
        unit=unit,
        zip_limits=zip_limits,
        chunk_size=chunk_size,
        path=path,
    )
