"""
Limited text reading from a streamed XML content entry.

Text elements are collected one at a time, normalized and appended to the
output, words separated by single spaces. Separators count toward the limit,
so the result is always a prefix of the full normalized document text.

Reading stops as soon as the limit is known to be reached:
    - a fragment that does not fit is cut on a character boundary and the
      result is TRUNCATED;
    - a fragment that fits exactly is kept whole and reading continues only
      until the next non-empty fragment shows that more text exists
      (TRUNCATED) or the stream ends (COMPLETE).

A document that is shorter than the limit, or exactly as long, is therefore
always COMPLETE.
"""

import io
import logging

from office2text.exceptions import MalformedXmlError
from office2text.extractors.data_types import (
    ExtractionStatus,
    LimitedTextContent,
    LimitUnit,
)
from office2text.extractors.formats import DocumentFormat
from office2text.extractors.util.normalize import normalize_whitespace
from office2text.extractors.util.runes import take_chars, trim_incomplete_char
from office2text.extractors.util.xml_stream import (
    DEFAULT_CHUNK_SIZE,
    StartElement,
    collect_element_text,
    iter_xml_events,
)

logger = logging.getLogger(__name__)


def _cut(piece: bytes, remaining: int, unit: LimitUnit) -> bytes:
    if unit is LimitUnit.BYTES:
        return trim_incomplete_char(piece[:remaining])
    prefix, _ = take_chars(piece, remaining)
    return prefix


def read_content_limited(
    stream: io.BufferedIOBase,
    limit: int,
    fmt: DocumentFormat,
    *,
    unit: LimitUnit = LimitUnit.CHARS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> LimitedTextContent:
    """
    Read at most ``limit`` units of normalized text from an XML stream.

    Args:
        stream: Binary stream over the content entry, read forward only.
        limit: Maximum output length, measured in ``unit``.
        fmt: Decides which start elements carry text.
        unit: Count the limit in characters (default) or UTF-8 bytes.
        chunk_size: Bytes handed to the tokenizer per read.

    Raises:
        ValueError: ``limit`` is negative.
        MalformedXmlError: The XML is broken. ``partial_text`` holds the
            text read before the error.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    text = bytearray()
    consumed = 0

    def result(status: ExtractionStatus) -> LimitedTextContent:
        return LimitedTextContent(
            content=bytes(text), status=status, limit=limit, unit=unit
        )

    events = iter_xml_events(stream, chunk_size)
    try:
        for event in events:
            if not isinstance(event, StartElement) or not fmt.is_text_element(
                event.tag
            ):
                continue

            fragment = normalize_whitespace(collect_element_text(events, event))
            if not fragment:
                continue

            if consumed >= limit:
                logger.debug(f"Limit of {limit} {unit.value} reached")
                return result(ExtractionStatus.TRUNCATED)

            piece = fragment if not text else " " + fragment
            size = unit.measure(piece)
            encoded = piece.encode("utf-8")

            if consumed + size > limit:
                text += _cut(encoded, limit - consumed, unit)
                logger.debug(f"Limit of {limit} {unit.value} reached mid-fragment")
                return result(ExtractionStatus.TRUNCATED)

            text += encoded
            consumed += size
    except MalformedXmlError as exc:
        exc.partial_text = bytes(text).decode("utf-8")
        raise
    finally:
        events.close()

    logger.debug(f"Document exhausted after {consumed} {unit.value}")
    return result(ExtractionStatus.COMPLETE)
