"""
Character-boundary helpers for UTF-8 byte strings.

Limits are counted in decoded characters (code points), but the output buffer
holds UTF-8 bytes. These helpers cut a byte string so that a multi-byte
character is either kept whole or dropped entirely.
"""

from enum import Enum


class TakeStatus(Enum):
    OK = "ok"
    INSUFFICIENT = "insufficient"
    INVALID_ENCODING = "invalid_encoding"


def _sequence_length(lead: int) -> int:
    """Length of the UTF-8 sequence introduced by ``lead``, or 0 if it cannot start one."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def take_chars(data: bytes, n_chars: int) -> tuple[bytes, TakeStatus]:
    """
    Return the prefix of ``data`` holding exactly ``n_chars`` characters.

    If ``data`` runs out first, the characters found so far are returned with
    ``TakeStatus.INSUFFICIENT``. If an invalid sequence is hit, the validly
    decoded prefix is returned with ``TakeStatus.INVALID_ENCODING``.
    """
    pos = 0
    count = 0
    size = len(data)

    while count < n_chars:
        if pos >= size:
            return data[:pos], TakeStatus.INSUFFICIENT

        width = _sequence_length(data[pos])
        if width == 0 or pos + width > size:
            return data[:pos], TakeStatus.INVALID_ENCODING

        try:
            data[pos : pos + width].decode("utf-8")
        except UnicodeDecodeError:
            return data[:pos], TakeStatus.INVALID_ENCODING

        pos += width
        count += 1

    return data[:pos], TakeStatus.OK


def trim_incomplete_char(data: bytes) -> bytes:
    """Drop a trailing partial UTF-8 sequence left by a cut at an arbitrary byte offset."""
    if not data:
        return data

    i = len(data)
    # step back over continuation bytes (10xxxxxx)
    while i > 0 and (data[i - 1] & 0xC0) == 0x80:
        i -= 1

    if i == 0:
        # nothing but continuation bytes
        return b""

    try:
        data[i - 1 :].decode("utf-8")
    except UnicodeDecodeError:
        return data[: i - 1]
    return data
