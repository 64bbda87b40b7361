"""Codec and file conversion core.

WHY: The core holds everything with real algorithmic content: the
single code point encoder, the single sequence decoder, and the whole
buffer / whole file converter built on them. The shells (CLI and
interactive menu) only parse input and print results around it.

HOW: codec.py holds encode/decode, converter.py drives them over buffers
and files, errors.py defines the typed exceptions, hexio.py parses and
formats the hex text the shells exchange with users.

RULES:
- Nothing in core imports from the shells
- encode/decode are pure functions with no shared state
- The three operations the shells rely on are encode, decode, convert_file
"""

from unicode_converter.core.codec import decode, encode, encoded_length, iter_decode
from unicode_converter.core.converter import (
    Direction,
    convert_file,
    default_output_path,
    utf8_to_utf32,
    utf32_to_utf8,
)
from unicode_converter.core.errors import (
    CodecError,
    ConversionFailedError,
    HexFormatError,
    InvalidCodePointError,
    InvalidContinuationByteError,
    InvalidLeadByteError,
    OverlongEncodingError,
    SurrogateCodePointError,
    TruncatedInputError,
    TruncatedSequenceError,
)

__all__ = [
    "CodecError",
    "ConversionFailedError",
    "Direction",
    "HexFormatError",
    "InvalidCodePointError",
    "InvalidContinuationByteError",
    "InvalidLeadByteError",
    "OverlongEncodingError",
    "SurrogateCodePointError",
    "TruncatedInputError",
    "TruncatedSequenceError",
    "convert_file",
    "decode",
    "default_output_path",
    "encode",
    "encoded_length",
    "iter_decode",
    "utf8_to_utf32",
    "utf32_to_utf8",
]
