"""
Streaming XML events on top of the lxml feed parser.

The content entry of a document is fed to lxml in chunks. Instead of building
a tree, a parser target records start, end and character-data events which
are handed out one at a time. Nothing older than the current event is kept,
so memory use does not grow with the document size.

Character data reported by lxml may be split at chunk boundaries or around
entity references. Adjacent pieces are joined back into one ``CharData``
event before it is handed out.
"""

import io
import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Union

from lxml import etree

from office2text.exceptions import MalformedXmlError, UnexpectedEndOfStreamError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part of a Clark-notation tag."""
    return tag.rpartition("}")[2]


@dataclass(frozen=True)
class StartElement:
    tag: str

    @property
    def local_name(self) -> str:
        return local_name(self.tag)


@dataclass(frozen=True)
class EndElement:
    tag: str

    @property
    def local_name(self) -> str:
        return local_name(self.tag)


@dataclass(frozen=True)
class CharData:
    text: str


XmlEvent = Union[StartElement, EndElement, CharData]


class _EventTarget:
    """lxml parser target that queues events instead of building a tree."""

    def __init__(self):
        self.events: deque[XmlEvent] = deque()
        self._text: list[str] = []

    def _flush_text(self) -> None:
        if self._text:
            self.events.append(CharData("".join(self._text)))
            self._text.clear()

    def start(self, tag, attrib):
        self._flush_text()
        self.events.append(StartElement(tag))

    def end(self, tag):
        self._flush_text()
        self.events.append(EndElement(tag))

    def data(self, data):
        self._text.append(data)

    def comment(self, text):
        self._flush_text()

    def pi(self, target, data=None):
        self._flush_text()

    def close(self):
        self._flush_text()


def iter_xml_events(
    stream: io.BufferedIOBase, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[XmlEvent]:
    """
    Yield XML events from a binary stream, reading it forward only.

    Events parsed before a syntax error are still yielded; the error is raised
    as ``MalformedXmlError`` once they are drained.

    A stream holding no bytes at all yields nothing and is not an error.
    """
    target = _EventTarget()
    parser = etree.XMLParser(target=target, resolve_entities=False, no_network=True)
    error: etree.XMLSyntaxError | None = None
    fed = False

    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            fed = True
            parser.feed(chunk)
            while target.events:
                yield target.events.popleft()
        if fed:
            parser.close()
    except etree.XMLSyntaxError as exc:
        error = exc

    while target.events:
        yield target.events.popleft()

    if error is not None:
        logger.debug(f"XML syntax error: {error}")
        raise MalformedXmlError(str(error), cause=error) from error


def collect_element_text(events: Iterator[XmlEvent], start: StartElement) -> str:
    """
    Collect the character data inside ``start``, nested elements included.

    ``events`` must be positioned just after ``start``; it is consumed up to
    and including the matching end event. Each piece of character data is
    followed by one space so words split across events stay apart.

    Open elements are tracked on an explicit stack, so arbitrarily deep
    nesting does not recurse.
    """
    parts: list[str] = []
    open_tags = [start.local_name]

    for event in events:
        if isinstance(event, CharData):
            parts.append(event.text)
            parts.append(" ")
        elif isinstance(event, StartElement):
            open_tags.append(event.local_name)
        elif isinstance(event, EndElement):
            # an end tag that closes nothing we opened is ignored
            if event.local_name == open_tags[-1]:
                open_tags.pop()
                if not open_tags:
                    return "".join(parts)

    raise UnexpectedEndOfStreamError(
        f"unexpected end of stream inside <{start.local_name}>"
    )
