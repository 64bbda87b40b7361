"""Hex text parsing, display formatting, and raw sample-file authoring.

WHY: Both shells take code points and byte sequences as hex text typed
by a person ("20AC", "E2 82 AC") and show results the same way. Sample
files for testing the converter are also built from hex input, written
raw so that malformed data can be produced on purpose.

HOW: Parsing validates with a regex before calling int(..., 16) so that
signs, underscores and empty strings are rejected. The writers use
struct for UTF-32LE units and plain byte writes for UTF-8, bypassing the
codec entirely.

RULES:
- Code points accept optional "0x" or "U+" prefixes and must fit in 32 bits
- Byte lists are whitespace separated, 1–2 hex digits each, optional "0x"
- Invalid text raises HexFormatError (a ValueError)
- Sample writers never validate Unicode ranges
"""

from __future__ import annotations

import re
import struct
from pathlib import Path
from typing import Iterable, List, Union

from unicode_converter.config import UTF32_STRUCT_FORMAT
from unicode_converter.core.errors import HexFormatError

_HEX_DIGITS_RE = re.compile(r"^[0-9A-Fa-f]+$")
_BYTE_RE = re.compile(r"^(?:0[xX])?([0-9A-Fa-f]{1,2})$")
_UINT32_MAX = 0xFFFFFFFF


def _strip_prefix(text: str) -> str:
    for prefix in ("0x", "0X", "U+", "u+"):
        if text.startswith(prefix):
            return text[len(prefix):]
    return text


def parse_code_point(text: str) -> int:
    """Parse a hex code point such as ``"20AC"``, ``"0x20AC"`` or ``"U+20AC"``.

    The value is not range-checked against 0x10FFFF; that is the
    encoder's job. It must fit in an unsigned 32-bit integer.
    """
    digits = _strip_prefix(text.strip())
    if not _HEX_DIGITS_RE.match(digits):
        raise HexFormatError(text)
    value = int(digits, 16)
    if value > _UINT32_MAX:
        raise HexFormatError(text, reason="value does not fit in 32 bits")
    return value


def parse_byte_list(text: str) -> bytes:
    """Parse whitespace separated hex bytes such as ``"E2 82 AC"``."""
    tokens = text.split()
    if not tokens:
        raise HexFormatError(text, reason="no bytes given")
    values: List[int] = []
    for token in tokens:
        match = _BYTE_RE.match(token)
        if match is None:
            raise HexFormatError(token)
        values.append(int(match.group(1), 16))
    return bytes(values)


def format_bytes(data: bytes) -> str:
    """Render bytes as ``"0xE2 0x82 0xAC"``."""
    return " ".join("0x{:02X}".format(b) for b in data)


def format_code_point(code_point: int) -> str:
    """Render a code point as ``"0x20AC (8364 decimal)"``."""
    return "0x{:04X} ({} decimal)".format(code_point, code_point)


def write_u32_file(path: Union[str, Path], values: Iterable[int]) -> int:
    """Write raw little-endian uint32 values; return the number of bytes written.

    Raises:
        HexFormatError: If a value does not fit in 32 bits.
    """
    out = bytearray()
    for value in values:
        if not 0 <= value <= _UINT32_MAX:
            raise HexFormatError(str(value), reason="value does not fit in 32 bits")
        out += struct.pack(UTF32_STRUCT_FORMAT, value)
    Path(path).write_bytes(bytes(out))
    return len(out)


def write_utf8_file(path: Union[str, Path], data: bytes) -> int:
    """Write raw bytes (no UTF-8 validation); return the number of bytes written."""
    Path(path).write_bytes(bytes(data))
    return len(data)
