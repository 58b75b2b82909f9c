import io
import zipfile

import olefile

from office2text.exceptions import InvalidContainerError
from office2text.extractors.util.xml_stream import DEFAULT_CHUNK_SIZE
from office2text.extractors.util.zip_bomb import DEFAULT_ZIP_BOMB_LIMITS, ZipBombLimits
from office2text.extractors.util.zip_context import ZIP_READ_ERRORS, ZipContext

ODF_MANIFEST_PATH = "META-INF/manifest.xml"

_ODF_ENCRYPTION_MARKERS = (
    b"encryption-data",
    b"manifest:encrypted",
    b"manifest:algorithm",
)


def _has_ole_encryption_stream(ole: olefile.OleFileIO) -> bool:
    for stream in ("EncryptionInfo", "EncryptedPackage", "DataSpaces"):
        if ole.exists(stream):
            return True
    return False


def is_ooxml_encrypted(file_like: io.BufferedIOBase) -> bool:
    """Password-protected OOXML files are stored as OLE compound files, not ZIPs."""
    file_like.seek(0)
    try:
        if not olefile.isOleFile(file_like):
            return False
        file_like.seek(0)
        with olefile.OleFileIO(file_like) as ole:
            return _has_ole_encryption_stream(ole)
    except OSError as exc:
        # olefile reports damaged headers and sector chains as OSError
        raise InvalidContainerError(
            f"Damaged OLE container: {exc}", cause=exc
        ) from exc
    finally:
        file_like.seek(0)


def _stream_contains(
    stream: io.BufferedIOBase,
    markers: tuple[bytes, ...],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bool:
    """Search a stream chunk by chunk; markers may straddle two chunks."""
    overlap = max(len(marker) for marker in markers) - 1
    tail = b""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return False
        window = tail + chunk
        if any(marker in window for marker in markers):
            return True
        tail = window[-overlap:]


def is_odf_encrypted(
    file_like: io.BufferedIOBase,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
) -> bool:
    """
    ODF keeps the ZIP layout when encrypted and flags it in the manifest.

    Sources that are not ZIP archives are reported as not encrypted; the
    content reader rejects them afterwards.

    Raises:
        InvalidContainerError: The archive or its manifest cannot be read.
        ExtractionZipBombError: The archive trips ``limits``.
    """
    file_like.seek(0)
    try:
        if not zipfile.is_zipfile(file_like):
            return False

        with ZipContext(file_like, limits=limits) as ctx:
            if ctx.find_entry(ODF_MANIFEST_PATH) is None:
                return False
            with ctx.open_stream(ODF_MANIFEST_PATH) as manifest:
                return _stream_contains(manifest, _ODF_ENCRYPTION_MARKERS)
    except ZIP_READ_ERRORS as exc:
        raise InvalidContainerError(
            f"Failed to read {ODF_MANIFEST_PATH}: {exc}", cause=exc
        ) from exc
    finally:
        file_like.seek(0)
