"""
Tests for the ASCII85 transport used by ROFI_DATA.
"""

from __future__ import annotations

import random

import pytest

from rofiscript.application.exceptions import TransportFormatError
from rofiscript.application.utils.transport import decode, encode, sanitize


def test_round_trip_all_short_lengths():
    """Every length from 0 to 64 bytes decodes back to the original bytes."""
    rng = random.Random(85)
    for length in range(65):
        data = bytes(rng.randrange(256) for _ in range(length))
        assert decode(encode(data)) == data


def test_known_encoding():
    """Output uses the Adobe alphabet without <~ ~> framing."""
    assert encode(b"Man ") == "9jqo^"
    assert encode(b"") == ""
    assert decode("9jqo^") == b"Man "


def test_zero_group_is_folded():
    """An all-zero 4-byte group is written as 'z'."""
    assert encode(b"\x00\x00\x00\x00") == "z"
    assert decode("z") == b"\x00\x00\x00\x00"


@pytest.mark.parametrize(
    "data",
    [
        b"abc\x00",
        b"ab\x00\x00",
        b"a\x00\x00\x00",
        b"abcd\x00",
        b"abcd\x00\x00\x00",
        b"\x00",
        b"\x00\x00\x00\x00\x00",
    ],
)
def test_genuine_trailing_zero_bytes_survive(data):
    """Trailing zero bytes that belong to the payload are not trimmed."""
    assert decode(encode(data)) == data


def test_legacy_nul_fill_is_ignored():
    """Text padded with NUL bytes by the legacy writer still decodes."""
    assert decode(encode(b"A") + "\x00\x00\x00") == b"A"
    assert decode(encode(b"foo bar") + "\x00" * 4) == b"foo bar"


def test_whitespace_is_ignored():
    """Spaces and newlines added around the value are dropped."""
    assert decode(" 9jq\no^\n") == b"Man "
    assert sanitize("\x00 9j\tq\r") == "9jq"


def test_empty_after_sanitizing_is_empty_bytes():
    """A value made only of ignored characters decodes to nothing."""
    assert decode("\x00\x00 ") == b""


@pytest.mark.parametrize(
    "text",
    [
        "9jqo^B",  # dangling single character
        "abc~",  # outside the alphabet
        "9jz",  # z inside a group
        "uuuuu",  # overflows 32 bits
        "9jqoé",  # non-ASCII
    ],
)
def test_malformed_text_raises_format_error(text):
    """Ill-formed text raises TransportFormatError."""
    with pytest.raises(TransportFormatError):
        decode(text)
