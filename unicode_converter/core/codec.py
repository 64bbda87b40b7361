"""Single code point encoder and single sequence decoder for UTF-8.

WHY: Everything else in the package (file conversion, CLI, interactive
shell) is built on two operations: turn one code point into its UTF-8
bytes, and read one UTF-8 sequence back into a code point. Keeping them
as pure functions makes them trivial to test and reuse.

HOW: encode() dispatches on the code point's range and packs 1–4 bytes.
decode() classifies the lead byte to learn the sequence length and its
data bits, then folds in 6 bits from each continuation byte. The decoder
never mutates anything; it returns the position just past the sequence
so callers thread the cursor explicitly.

RULES:
- Valid code points are 0x000000–0x10FFFF
- Lead byte masks: 0xxxxxxx (7 bits), 110xxxxx (5), 1110xxxx (4), 11110xxx (3)
- Continuation bytes must match 10xxxxxx
- decode() returns (code_point, position + length); consecutive calls tile
  the buffer with no gaps or overlaps
- The first byte must exist: position >= len(buffer) raises IndexError
- Permissive by default: surrogates, overlong forms, and 4-byte values
  above 0x10FFFF pass through. strict=True rejects all three.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from unicode_converter.config import MAX_CODE_POINT
from unicode_converter.core.errors import (
    InvalidCodePointError,
    InvalidContinuationByteError,
    InvalidLeadByteError,
    OverlongEncodingError,
    SurrogateCodePointError,
    TruncatedSequenceError,
)

# Upper bound (inclusive) of each sequence length's range.
_ONE_BYTE_MAX = 0x7F
_TWO_BYTE_MAX = 0x7FF
_THREE_BYTE_MAX = 0xFFFF

_SURROGATE_MIN = 0xD800
_SURROGATE_MAX = 0xDFFF

_CONTINUATION_TAG = 0x80
_CONTINUATION_MASK = 0xC0
_DATA_MASK = 0x3F

# Smallest code point that legitimately needs a sequence of this length.
_MIN_VALUE_FOR_LENGTH = {1: 0x0, 2: 0x80, 3: 0x800, 4: 0x10000}


def _is_surrogate(code_point: int) -> bool:
    return _SURROGATE_MIN <= code_point <= _SURROGATE_MAX


def encoded_length(code_point: int) -> int:
    """Return how many UTF-8 bytes ``code_point`` encodes to (1–4).

    Raises:
        InvalidCodePointError: If the value is negative or above 0x10FFFF.
    """
    if code_point < 0:
        raise InvalidCodePointError(code_point, reason="negative value")
    if code_point <= _ONE_BYTE_MAX:
        return 1
    if code_point <= _TWO_BYTE_MAX:
        return 2
    if code_point <= _THREE_BYTE_MAX:
        return 3
    if code_point <= MAX_CODE_POINT:
        return 4
    raise InvalidCodePointError(code_point)


def encode(code_point: int, strict: bool = False) -> bytes:
    """Encode one code point as UTF-8.

    WHY: The UTF-32 → UTF-8 direction converts each 32-bit value on its
    own; this is the per-value step.

    HOW: encoded_length() picks the range. The lead byte gets the high
    bits under its run-length prefix (0, 110, 1110, 11110); each
    continuation byte takes the next 6 bits, most significant first,
    tagged with 10.

    RULES:
    - 0x000000–0x00007F → 1 byte, 0x000080–0x0007FF → 2 bytes,
      0x000800–0x00FFFF → 3 bytes, 0x010000–0x10FFFF → 4 bytes
    - Values above 0x10FFFF (or negative) raise InvalidCodePointError
    - Surrogates encode as ordinary 3-byte sequences unless strict=True

    Args:
        code_point: The Unicode scalar value to encode.
        strict: Reject UTF-16 surrogate code points.

    Returns:
        The canonical UTF-8 byte sequence.
    """
    length = encoded_length(code_point)
    if strict and _is_surrogate(code_point):
        raise SurrogateCodePointError(code_point)

    if length == 1:
        return bytes((code_point,))
    if length == 2:
        return bytes((
            0xC0 | (code_point >> 6),
            _CONTINUATION_TAG | (code_point & _DATA_MASK),
        ))
    if length == 3:
        return bytes((
            0xE0 | (code_point >> 12),
            _CONTINUATION_TAG | ((code_point >> 6) & _DATA_MASK),
            _CONTINUATION_TAG | (code_point & _DATA_MASK),
        ))
    return bytes((
        0xF0 | (code_point >> 18),
        _CONTINUATION_TAG | ((code_point >> 12) & _DATA_MASK),
        _CONTINUATION_TAG | ((code_point >> 6) & _DATA_MASK),
        _CONTINUATION_TAG | (code_point & _DATA_MASK),
    ))


def _classify_lead(lead: int, offset: int) -> Tuple[int, int]:
    """Return (sequence_length, initial_bits) for a lead byte."""
    if lead & 0x80 == 0x00:
        return 1, lead
    if lead & 0xE0 == 0xC0:
        return 2, lead & 0x1F
    if lead & 0xF0 == 0xE0:
        return 3, lead & 0x0F
    if lead & 0xF8 == 0xF0:
        return 4, lead & 0x07
    raise InvalidLeadByteError(lead, offset)


def decode(buffer: bytes, position: int = 0, strict: bool = False) -> Tuple[int, int]:
    """Decode the UTF-8 sequence starting at ``position``.

    WHY: The UTF-8 → UTF-32 direction walks a whole buffer one sequence
    at a time. Sequences are variable length, so each step must report
    where the next one starts.

    HOW: The lead byte's high bits give the length n and the first data
    bits. Each of the n-1 following bytes is bounds-checked, checked for
    the 10xxxxxx pattern, and its low 6 bits are shifted in.

    RULES:
    - Returns (code_point, position + n)
    - 0 <= position < len(buffer); a negative position raises IndexError,
      a position past the end fails on index access
    - Lead byte not matching a known prefix → InvalidLeadByteError
    - Buffer ends before the sequence does → TruncatedSequenceError
    - Continuation byte not 10xxxxxx → InvalidContinuationByteError
    - strict=True additionally raises OverlongEncodingError,
      SurrogateCodePointError, or InvalidCodePointError (> 0x10FFFF)

    Args:
        buffer: Any bytes-like object.
        position: Absolute offset of the lead byte.
        strict: Enable overlong/surrogate/range rejection.

    Returns:
        Tuple of (code_point, new_position).
    """
    if position < 0:
        raise IndexError("decode position {} is negative".format(position))
    lead = buffer[position]
    length, code_point = _classify_lead(lead, position)

    for i in range(1, length):
        index = position + i
        if index >= len(buffer):
            raise TruncatedSequenceError(position, length, len(buffer) - position)
        byte = buffer[index]
        if byte & _CONTINUATION_MASK != _CONTINUATION_TAG:
            raise InvalidContinuationByteError(byte, index)
        code_point = (code_point << 6) | (byte & _DATA_MASK)

    if strict:
        _check_strict(code_point, position, length)

    return code_point, position + length


def _check_strict(code_point: int, offset: int, length: int) -> None:
    if code_point < _MIN_VALUE_FOR_LENGTH[length]:
        raise OverlongEncodingError(code_point, offset, length)
    if code_point > MAX_CODE_POINT:
        raise InvalidCodePointError(code_point)
    if _is_surrogate(code_point):
        raise SurrogateCodePointError(code_point)


def iter_decode(buffer: bytes, strict: bool = False) -> Iterator[Tuple[int, int]]:
    """Yield ``(offset, code_point)`` for every sequence in ``buffer``.

    Stops at the first malformed sequence by letting decode() raise.
    """
    position = 0
    end = len(buffer)
    while position < end:
        code_point, next_position = decode(buffer, position, strict=strict)
        yield position, code_point
        position = next_position
