import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_whitespace(raw: str) -> str:
    """Collapse every whitespace run to one space and strip both ends."""
    return _WHITESPACE_RUN.sub(" ", raw).strip()
