"""Size-bounded string copy and concatenation with BSD ``strlcpy``/``strlcat`` semantics.

Strings are immutable in Python, so each function returns the resulting buffer
content together with the length of the string it *tried* to create. If that
length is at least ``size``, the result was truncated.

Both ``str`` and ``bytes`` are accepted. A NUL character ends a string, just as
it would in a C buffer.
"""

from __future__ import annotations

from typing import TypeVar

AnyText = TypeVar("AnyText", str, bytes)

__all__ = ["strlcpy", "strlcat"]


def _nul_for(value: str | bytes) -> str | bytes:
    if isinstance(value, str):
        return "\0"
    if isinstance(value, bytes):
        return b"\0"
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def _until_nul(value: AnyText) -> AnyText:
    """Return *value* cut at its first NUL, as a C string would be read."""
    head, _, _ = value.partition(_nul_for(value))
    return head


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")


def strlcpy(src: AnyText, size: int) -> tuple[AnyText, int]:
    """Copy *src* into a buffer of *size* units.

    At most ``size - 1`` units are copied. Returns the buffer content and
    ``len(src)``; a returned length ``>= size`` means truncation occurred.
    """
    _check_size(size)
    text = _until_nul(src)
    if size == 0:
        return text[:0], len(text)
    return text[: size - 1], len(text)


def strlcat(dst: AnyText, src: AnyText, size: int) -> tuple[AnyText, int]:
    """Append *src* to *dst*, where *size* is the full size of the destination buffer.

    At most ``size - len(dst) - 1`` units are appended. If *dst* already fills
    the whole buffer (no terminator within *size* units) it is returned
    unchanged. Returns the buffer content and ``min(size, len(dst)) + len(src)``;
    a returned length ``>= size`` means truncation occurred.
    """
    _check_size(size)
    if type(dst) is not type(src):
        raise TypeError("dst and src must both be str or both be bytes")

    head = _until_nul(dst)
    tail = _until_nul(src)
    dlen = min(len(head), size)

    if dlen == size:
        return dst, dlen + len(tail)

    room = size - dlen - 1
    return head + tail[:room], dlen + len(tail)