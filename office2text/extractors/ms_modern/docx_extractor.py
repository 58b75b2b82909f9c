"""
DOCX Limited Text Extractor
===========================

Reads the first N characters of plain text from Microsoft Word .docx files
(Office Open XML format, Word 2007 and later).

The main document body, word/document.xml, is streamed; headers, footers,
footnotes and comments live in other parts and are not read. Text is taken
from w:t (run text) elements only. A word split across two runs, as Word
does around formatting or spell-check marks, comes out as two words.

Password-protected .docx files are OLE compound files instead of ZIP
archives and are rejected with ExtractionFileEncryptedError.
"""

import io
import logging
from pathlib import Path

from office2text.exceptions import ExtractionFileEncryptedError
from office2text.extractors.data_types import LimitedTextContent, LimitUnit
from office2text.extractors.formats import DocumentFormat
from office2text.extractors.limited_extractor import extract_limited
from office2text.extractors.util.encryption import is_ooxml_encrypted
from office2text.extractors.util.xml_stream import DEFAULT_CHUNK_SIZE
from office2text.extractors.util.zip_bomb import DEFAULT_ZIP_BOMB_LIMITS, ZipBombLimits

logger = logging.getLogger(__name__)


def read_limited_docx(
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
    Read at most ``limit`` characters of normalized text from a DOCX file.

    Arguments and outcomes are the same as for ``read_limited_odt``; the
    content entry is word/document.xml.
    """
    logger.debug("Reading DOCX file")
    file_like.seek(0)
    if is_ooxml_encrypted(file_like):
        raise ExtractionFileEncryptedError("DOCX is encrypted or password-protected")

    return extract_limited(
        file_like,
        limit,
        DocumentFormat.DOCX,
        total_size,
        unit=unit,
        zip_limits=zip_limits,
        chunk_size=chunk_size,
        path=path,
    )
