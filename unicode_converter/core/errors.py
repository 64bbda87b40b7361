"""Typed exceptions for the UTF-32 / UTF-8 codec and file converter.

WHY: Callers (CLI, interactive shell, tests) need to tell an out-of-range
code point from a malformed UTF-8 sequence or a truncated UTF-32 file
without parsing message strings. Each error carries the offending value
and its position as attributes.

HOW: CodecError is the common base for everything the encoder, decoder,
and buffer converters raise. It subclasses ValueError because every one
of these is bad input data. ConversionFailedError is what convert_file
raises; it wraps the codec error or OSError and keeps it on ``cause``.

RULES:
- Messages are derived from the structured attributes, never the reverse
- Offsets are absolute 0-based positions in the input buffer
- ConversionFailedError always keeps the original exception in ``cause``
- HexFormatError is about user-typed text, not data, so it is not a CodecError
"""

from __future__ import annotations

from typing import Optional


class CodecError(ValueError):
    """Base class for all encode/decode failures."""


class InvalidCodePointError(CodecError):
    """Raised when a code point is outside 0x000000–0x10FFFF.

    Attributes:
        code_point: The rejected value.
    """

    def __init__(self, code_point: int, reason: str = "exceeds 0x10FFFF") -> None:
        self.code_point = code_point
        super().__init__("Invalid code point 0x{:X}: {}".format(code_point, reason))


class SurrogateCodePointError(InvalidCodePointError):
    """Raised in strict mode for UTF-16 surrogates (0xD800–0xDFFF)."""

    def __init__(self, code_point: int) -> None:
        super().__init__(code_point, reason="UTF-16 surrogate")


class InvalidLeadByteError(CodecError):
    """Raised when a byte cannot start a UTF-8 sequence.

    Covers bare continuation bytes (10xxxxxx) and the prefixes
    11111xxx that no valid sequence uses.
    """

    def __init__(self, byte: int, offset: int) -> None:
        self.byte = byte
        self.offset = offset
        super().__init__(
            "Invalid UTF-8 lead byte 0x{:02X} at offset {}".format(byte, offset)
        )


class InvalidContinuationByteError(CodecError):
    """Raised when a byte inside a sequence does not match 10xxxxxx."""

    def __init__(self, byte: int, offset: int) -> None:
        self.byte = byte
        self.offset = offset
        super().__init__(
            "Invalid UTF-8 continuation byte 0x{:02X} at offset {}".format(byte, offset)
        )


class TruncatedSequenceError(CodecError):
    """Raised when the buffer ends in the middle of a UTF-8 sequence.

    Attributes:
        offset: Position of the sequence's lead byte.
        expected: Sequence length announced by the lead byte.
        available: Bytes actually left from ``offset`` to the end.
    """

    def __init__(self, offset: int, expected: int, available: int) -> None:
        self.offset = offset
        self.expected = expected
        self.available = available
        super().__init__(
            "Truncated UTF-8 sequence at offset {}: expected {} bytes, {} available".format(
                offset, expected, available
            )
        )


class OverlongEncodingError(CodecError):
    """Raised in strict mode when a sequence is longer than necessary."""

    def __init__(self, code_point: int, offset: int, length: int) -> None:
        self.code_point = code_point
        self.offset = offset
        self.length = length
        super().__init__(
            "Overlong {}-byte encoding of 0x{:X} at offset {}".format(
                length, code_point, offset
            )
        )


class TruncatedInputError(CodecError):
    """Raised when a UTF-32 input ends with fewer than 4 bytes."""

    def __init__(self, offset: int, remaining: int) -> None:
        self.offset = offset
        self.remaining = remaining
        super().__init__(
            "Truncated UTF-32 input at offset {}: {} trailing byte(s), expected 4".format(
                offset, remaining
            )
        )


class HexFormatError(ValueError):
    """Raised when user-supplied hex text cannot be parsed.

    Attributes:
        text: The offending token or line.
    """

    def __init__(self, text: str, reason: str = "invalid hexadecimal format") -> None:
        self.text = text
        super().__init__("{}: {!r}".format(reason, text))


class ConversionFailedError(Exception):
    """Raised by convert_file when a conversion is aborted.

    WHY: The shell only needs one exception type to catch around a file
    conversion, but tests and scripted callers still want to know what
    went wrong.

    HOW: Wraps any CodecError or OSError. The message repeats the
    underlying message; the original exception is kept on ``cause`` and
    chained as ``__cause__``.

    RULES:
    - ``cause`` is never None when raised by convert_file
    - Output bytes written before the failure are left on disk
    """

    def __init__(self, cause: Optional[BaseException]) -> None:
        self.cause = cause
        super().__init__("Conversion failed: {}".format(cause))
