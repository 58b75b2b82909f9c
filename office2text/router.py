import logging
import mimetypes
from typing import Callable

from office2text.exceptions import ExtractionFileFormatNotSupportedError
from office2text.extractors.data_types import LimitedTextContent
from office2text.extractors.formats import DocumentFormat

logger = logging.getLogger(__name__)

mime_type_mapping = {fmt.mime_type: fmt for fmt in DocumentFormat}

# mimetypes does not know the OpenDocument types on every platform
_extension_mapping = {f".{fmt.extension}": fmt for fmt in DocumentFormat}


def _get_extractor(
    fmt: DocumentFormat,
) -> Callable[..., LimitedTextContent]:
    """Return the limited reader for a document format (lazy import)."""
    if fmt is DocumentFormat.ODT:
        from office2text.extractors.open_office.odt_extractor import read_limited_odt

        return read_limited_odt
    elif fmt is DocumentFormat.DOCX:
        from office2text.extractors.ms_modern.docx_extractor import read_limited_docx

        return read_limited_docx
    else:
        raise RuntimeError(f"No extractor for document format: {fmt}")


def is_supported_file(path: str) -> bool:
    """Checks if the path is a supported file"""
    try:
        get_document_format(path)
    except ExtractionFileFormatNotSupportedError:
        return False
    return True


def get_document_format(path: str) -> DocumentFormat:
    """Analyses the path of a file and returns its document format.
       Only the name is looked at; the file does not need to exist.

    :raises ExtractionFileFormatNotSupportedError: neither ODT nor DOCX
    """
    lowered = str(path).lower()
    mime_type, _ = mimetypes.guess_type(lowered)

    if mime_type in mime_type_mapping:
        fmt = mime_type_mapping[mime_type]
        logger.debug(f"Detected format: {fmt.name} (MIME: {mime_type}) for file: {path}")
        return fmt

    for extension, fmt in _extension_mapping.items():
        if lowered.endswith(extension):
            logger.debug(f"Detected format: {fmt.name} for file: {path}")
            return fmt

    logger.debug(f"File [{path}] with mime type [{mime_type}] is not supported")
    raise ExtractionFileFormatNotSupportedError(str(path))


def get_extractor(path: str) -> Callable[..., LimitedTextContent]:
    """Returns the limited reader suited for the file at ``path``.

    :returns a function taking a seekable binary file-like object and a limit
    :raises ExtractionFileFormatNotSupportedError: File is not covered by any extractor
    """
    return _get_extractor(get_document_format(path))
