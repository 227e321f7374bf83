"""Range replacement over immutable byte buffers."""
from __future__ import annotations

from typing import Union

from ..errors import InvalidRangeError

BytesLike = Union[bytes, bytearray, memoryview]


def replace_range(buffer: BytesLike, start: int, end: int, replacement: BytesLike) -> bytes:
    """Return a new buffer with ``[start, end)`` replaced by ``replacement``.

    The replacement may be empty, shorter, equal to or longer than the span it
    replaces. Inputs are never modified.

    Args:
        buffer: Source bytes.
        start: First byte offset of the span (inclusive).
        end: Last byte offset of the span (exclusive).
        replacement: Bytes to put in place of the span.
    Returns:
        ``buffer[:start] + replacement + buffer[end:]`` as ``bytes``.
    Raises:
        InvalidRangeError: If ``end < start`` or either offset falls outside
            ``[0, len(buffer)]``.
    """
    length = len(buffer)
    if end < start or start < 0 or end > length:
        raise InvalidRangeError(start, end, length)

    view = memoryview(buffer)
    return b"".join((view[:start], replacement, view[end:]))
