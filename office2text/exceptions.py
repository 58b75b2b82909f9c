class ExtractionError(Exception):
    """Base class for all errors raised while extracting document text."""

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        self.__cause__ = cause  # Optional chaining for debugging


class ExtractionFileFormatNotSupportedError(ExtractionError):
    """Raised when the file format for extraction is not supported."""

    def __init__(self, file_path: str, message: str = None, *, cause: Exception = None):
        self.file_path = file_path
        if message is None:
            message = f"Extraction file format not supported: {file_path}"
        super().__init__(message, cause=cause)


class InvalidContainerError(ExtractionError):
    """The document is not a readable ZIP container, or its content entry is unreadable."""


class ExtractionFileEncryptedError(InvalidContainerError):
    """The document is password-protected and its content cannot be read."""


class ExtractionZipBombError(InvalidContainerError):
    """The ZIP container trips one of the ZIP-bomb heuristics."""


class ContentNotFoundError(ExtractionError):
    """The container is valid but has no entry at the expected content path."""

    def __init__(self, content_path: str, message: str = None, *, cause: Exception = None):
        self.content_path = content_path
        if message is None:
            message = f"Content path not found: {content_path}"
        super().__init__(message, cause=cause)


class MalformedXmlError(ExtractionError):
    """
    The content entry is not well-formed XML.

    ``partial_text`` holds whatever text was extracted before the problem was
    hit, so callers that only need "enough" text can still use it.
    """

    def __init__(
        self, detail: str, *, partial_text: str = "", cause: Exception = None
    ):
        self.detail = detail
        self.partial_text = partial_text
        super().__init__(f"Malformed XML content: {detail}", cause=cause)


class UnexpectedEndOfStreamError(MalformedXmlError):
    """The XML events ended while a text element was still open."""
