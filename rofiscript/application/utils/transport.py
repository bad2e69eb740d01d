from __future__ import annotations

import base64
import struct

from rofiscript.application.exceptions import TransportFormatError

# Characters the legacy writer could leave behind (NUL fill from a fixed-size
# buffer) or that a shell may add; none of them belong to the ASCII85 alphabet.
_IGNORED = {code: None for code in range(0x21)}
_IGNORED[0x7F] = None

GROUP_CHARS = 5


def encode(data: bytes) -> str:
    """Encode bytes as unframed ASCII85 text, ``z`` for all-zero groups."""
    return base64.a85encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode text written by :func:`encode` or by the legacy writer.

    A short final group of n characters yields n - 1 bytes, so only the zero
    padding the encoder added (at most 3 bytes) is dropped and genuine
    trailing zero bytes are kept.
    """
    cleaned = sanitize(text)
    if not cleaned:
        return b""

    tail = _final_group_length(cleaned)
    if tail == 1:
        raise TransportFormatError("dangling single character in final ASCII85 group")

    try:
        return base64.a85decode(cleaned)
    except (ValueError, struct.error) as exc:
        raise TransportFormatError(f"invalid ASCII85 data: {exc}") from exc


def sanitize(text: str) -> str:
    return text.translate(_IGNORED)


def _final_group_length(cleaned: str) -> int:
    count = 0
    for char in cleaned:
        if char == "z" and count == 0:
            continue
        count = (count + 1) % GROUP_CHARS
    return count
