"""
Shared driver for limited extraction from ZIP-packaged XML documents.

Opens the container, locates the format's content entry and streams it
through the limited reader. The archive and entry stream are released on
every exit path.
"""

import io
import logging
from pathlib import Path

from office2text.extractors.data_types import LimitedTextContent, LimitUnit
from office2text.extractors.formats import DocumentFormat
from office2text.extractors.util.limited_reader import read_content_limited
from office2text.extractors.util.xml_stream import DEFAULT_CHUNK_SIZE
from office2text.extractors.util.zip_bomb import DEFAULT_ZIP_BOMB_LIMITS, ZipBombLimits
from office2text.extractors.util.zip_context import open_content_stream

logger = logging.getLogger(__name__)


def extract_limited(
    file_like: io.BufferedIOBase,
    limit: int,
    fmt: DocumentFormat,
    total_size: int | None = None,
    *,
    unit: LimitUnit = LimitUnit.CHARS,
    zip_limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    path: str | Path | None = None,
) -> LimitedTextContent:
    logger.debug(f"Reading up to {limit} {unit.value} from {fmt.name} document")
    with open_content_stream(
        file_like, fmt.content_path, total_size, limits=zip_limits
    ) as stream:
        content = read_content_limited(
            stream, limit, fmt, unit=unit, chunk_size=chunk_size
        )
    content.metadata.populate_from_path(path)
    return content
