import io
import logging
import os
import zipfile
import zlib
from contextlib import contextmanager
from typing import Iterator

from office2text.exceptions import ContentNotFoundError, InvalidContainerError
from office2text.extractors.util.zip_bomb import (
    DEFAULT_ZIP_BOMB_LIMITS,
    ZipBombLimits,
    open_zipfile,
)

logger = logging.getLogger(__name__)

# Errors zipfile raises for damaged archives or entries.
ZIP_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError)


def _source_size(file_like: io.BufferedIOBase) -> int:
    position = file_like.tell()
    size = file_like.seek(0, os.SEEK_END)
    file_like.seek(position)
    return size


class ZipContext:
    """ZIP container opened once and validated against ZIP-bomb heuristics."""

    def __init__(
        self,
        file_like: io.BufferedIOBase,
        total_size: int | None = None,
        *,
        limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    ):
        if total_size is not None:
            actual_size = _source_size(file_like)
            if actual_size != total_size:
                raise InvalidContainerError(
                    f"Declared size {total_size} does not match source size {actual_size}"
                )

        self.file_like = file_like
        try:
            self._zip = open_zipfile(file_like, limits=limits, source=type(self).__name__)
        except ZIP_READ_ERRORS as exc:
            raise InvalidContainerError(
                f"Not a valid ZIP container: {exc}", cause=exc
            ) from exc

    def find_entry(self, path: str) -> zipfile.ZipInfo | None:
        """Return the first entry named exactly ``path`` (case-sensitive)."""
        for info in self._zip.infolist():
            if info.filename == path:
                return info
        return None

    def open_stream(self, path: str) -> io.BufferedIOBase:
        info = self.find_entry(path)
        if info is None:
            raise ContentNotFoundError(path)
        try:
            return self._zip.open(info)
        except (*ZIP_READ_ERRORS, RuntimeError) as exc:
            raise InvalidContainerError(
                f"Failed to open ZIP entry {path}: {exc}", cause=exc
            ) from exc

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ZipContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@contextmanager
def open_content_stream(
    file_like: io.BufferedIOBase,
    content_path: str,
    total_size: int | None = None,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
) -> Iterator[io.BufferedIOBase]:
    """
    Yield a forward-only stream over one entry of a ZIP container.

    Raises:
        InvalidContainerError: The source is not a ZIP archive, its size does
            not match ``total_size``, or the entry cannot be decompressed.
        ContentNotFoundError: No entry is named exactly ``content_path``.

    Both the entry stream and the archive are closed when the block exits,
    whatever the outcome.
    """
    with ZipContext(file_like, total_size, limits=limits) as ctx:
        with ctx.open_stream(content_path) as stream:
            logger.debug(f"Opened content entry [{content_path}]")
            try:
                yield stream
            except ZIP_READ_ERRORS as exc:
                raise InvalidContainerError(
                    f"Failed to read ZIP entry {content_path}: {exc}", cause=exc
                ) from exc
