"""
Where each supported format keeps its text, and which elements carry it.

ODT (OpenDocument Text):
    content.xml holds the document body. User-visible text lives in
    text:p (paragraph), text:h (heading) and text:span elements.

DOCX (WordprocessingML):
    word/document.xml holds the document body. User-visible text lives in
    w:t (run text) elements.

Elements are matched by local name only, so documents that bind the
namespaces to unusual prefixes are still read.
"""

from enum import Enum

from office2text.extractors.util.xml_stream import local_name


class DocumentFormat(Enum):
    ODT = (
        "odt",
        "content.xml",
        frozenset({"p", "h", "span"}),
        "application/vnd.oasis.opendocument.text",
    )
    DOCX = (
        "docx",
        "word/document.xml",
        frozenset({"t"}),
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )

    def __init__(
        self,
        extension: str,
        content_path: str,
        text_tags: frozenset[str],
        mime_type: str,
    ):
        self.extension = extension
        self.content_path = content_path
        self.text_tags = text_tags
        self.mime_type = mime_type

    def is_text_element(self, tag: str) -> bool:
        return local_name(tag) in self.text_tags
