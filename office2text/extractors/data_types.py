import typing
from abc import abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol


class ExtractionStatus(Enum):
    # the whole document text fit within the limit
    COMPLETE = "complete"
    # the limit was reached while the document still had text left
    TRUNCATED = "truncated"


class LimitUnit(Enum):
    CHARS = "chars"
    BYTES = "bytes"

    def measure(self, text: str) -> int:
        if self is LimitUnit.BYTES:
            return len(text.encode("utf-8"))
        return len(text)


@dataclass
class FileMetadataInterface:
    filename: str | None = None
    file_extension: str | None = None
    file_path: str | None = None
    folder_path: str | None = None

    def populate_from_path(self, path: str | Path | None) -> None:
        """Populate file metadata fields from a path."""
        if path is None:
            return
        p = Path(path)
        self.filename = p.name
        self.file_extension = p.suffix
        self.file_path = str(p.resolve()) if p.exists() else str(p)
        self.folder_path = (
            str(p.parent.resolve()) if p.parent.exists() else str(p.parent)
        )


class ExtractionInterface(Protocol):
    @abstractmethod
    def iterator(self) -> typing.Iterator[str]:
        """
        Returns an iterator over the extracted text. Limited extraction yields
        a single unit: the flat normalized text.
        """
        ...

    @abstractmethod
    def get_full_text(self) -> str:
        """Extracted text as one single block of text"""
        ...

    @abstractmethod
    def get_metadata(self) -> FileMetadataInterface:
        """Returns the metadata of the extracted file"""
        ...


@dataclass
class LimitedTextContent(ExtractionInterface):
    """
    Text read from a document up to a limit.

    ``content`` is always valid UTF-8 and never longer than ``limit``
    measured in ``unit``. Words are separated by single spaces.
    """

    content: bytes = b""
    status: ExtractionStatus = ExtractionStatus.COMPLETE
    limit: int = 0
    unit: LimitUnit = LimitUnit.CHARS
    metadata: FileMetadataInterface = field(default_factory=FileMetadataInterface)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    @property
    def is_truncated(self) -> bool:
        return self.status is ExtractionStatus.TRUNCATED

    @property
    def char_count(self) -> int:
        return len(self.text)

    def iterator(self) -> typing.Iterator[str]:
        yield self.text

    def get_full_text(self) -> str:
        return self.text

    def get_metadata(self) -> FileMetadataInterface:
        return self.metadata

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "status": self.status.value,
            "limit": self.limit,
            "unit": self.unit.value,
            "filename": self.metadata.filename,
        }
