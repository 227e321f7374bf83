"""Detection and removal of the leading header token in fragment files."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import ENCODING, HEADER_TOKEN, NEWLINE_BYTE


@dataclass
class HeaderStrip:
    content: bytes
    stripped: bool = False
    misplaced: bool = False
    position: int = -1  # offset of the token in the raw content, -1 if absent
    removed: int = 0  # bytes dropped from the front


def strip_leading_header(content: bytes, token: str = HEADER_TOKEN) -> HeaderStrip:
    """Drop ``token`` and the newlines right after it from the top of ``content``.

    Only a token sitting at offset 0 is removed. A token found further down is
    reported as misplaced and the content is returned untouched.
    """
    needle = token.encode(ENCODING)
    position = content.find(needle) if needle else -1
    if position == -1:
        return HeaderStrip(content=content)
    if position > 0:
        return HeaderStrip(content=content, misplaced=True, position=position)

    cut = len(needle)
    while cut < len(content) and content[cut] == NEWLINE_BYTE:
        cut += 1
    return HeaderStrip(content=content[cut:], stripped=True, position=0, removed=cut)
