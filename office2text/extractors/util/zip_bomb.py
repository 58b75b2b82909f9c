from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass

from office2text.exceptions import ExtractionZipBombError


@dataclass(frozen=True)
class ZipBombLimits:
    """
    Central-directory limits a document archive must stay within.

    Only one entry of a document is ever decompressed, and it is streamed,
    so an oversized entry cannot exhaust memory. It can still keep the
    tokenizer busy for a long time when the document holds little text
    and the limit is never reached. These limits reject such archives
    before any entry is read.

    Attributes:
        max_entries: Entries listed in the central directory.
        max_total_uncompressed_bytes: Declared size of all entries together.
        max_single_uncompressed_bytes: Declared size of any one entry.
        max_total_compression_ratio: Uncompressed to compressed bytes over
            the whole archive.
        max_entry_compression_ratio: The same ratio for one entry.
    """

    max_entries: int = 10_000
    max_total_uncompressed_bytes: int = 2 * 1024 * 1024 * 1024  # 2 GiB
    max_single_uncompressed_bytes: int = 1 * 1024 * 1024 * 1024  # 1 GiB
    max_total_compression_ratio: float = 200.0
    max_entry_compression_ratio: float = 500.0


DEFAULT_ZIP_BOMB_LIMITS = ZipBombLimits()


def _reject(message: str, source: str | None) -> ExtractionZipBombError:
    if source:
        message = f"{message} [{source}]"
    return ExtractionZipBombError(message)


def _check_entry(
    info: zipfile.ZipInfo, limits: ZipBombLimits, source: str | None
) -> None:
    if info.file_size > limits.max_single_uncompressed_bytes:
        raise _reject(
            f"Entry {info.filename} declares {info.file_size} bytes"
            f" (limit {limits.max_single_uncompressed_bytes})",
            source,
        )
    if info.file_size == 0:
        return
    if info.compress_size <= 0:
        raise _reject(
            f"Entry {info.filename} declares content but no compressed bytes",
            source,
        )
    ratio = info.file_size / info.compress_size
    if ratio > limits.max_entry_compression_ratio:
        raise _reject(
            f"Entry {info.filename} compression ratio {ratio:.1f}"
            f" exceeds {limits.max_entry_compression_ratio}",
            source,
        )


def validate_zipfile(
    zf: zipfile.ZipFile,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> None:
    """
    Check the central directory of ``zf`` against ``limits``.

    Sizes are the ones the archive declares; nothing is decompressed.
    """
    infos = zf.infolist()
    if len(infos) > limits.max_entries:
        raise _reject(
            f"Archive lists {len(infos)} entries (limit {limits.max_entries})",
            source,
        )

    files = [info for info in infos if not info.is_dir()]
    for info in files:
        _check_entry(info, limits, source)

    uncompressed = sum(info.file_size for info in files)
    if uncompressed > limits.max_total_uncompressed_bytes:
        raise _reject(
            f"Archive declares {uncompressed} bytes in total"
            f" (limit {limits.max_total_uncompressed_bytes})",
            source,
        )

    compressed = sum(info.compress_size for info in files)
    if uncompressed and compressed:
        ratio = uncompressed / compressed
        if ratio > limits.max_total_compression_ratio:
            raise _reject(
                f"Archive compression ratio {ratio:.1f}"
                f" exceeds {limits.max_total_compression_ratio}",
                source,
            )


def open_zipfile(
    file_like: io.BufferedIOBase,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> zipfile.ZipFile:
    """Open ``file_like`` as a ZIP archive that passed ``validate_zipfile``.

    The caller closes the returned archive.
    """
    file_like.seek(0)
    zf = zipfile.ZipFile(file_like, "r")
    try:
        validate_zipfile(zf, limits=limits, source=source)
    except ExtractionZipBombError:
        zf.close()
        raise
    return zf
