"""Whole-buffer and whole-file conversion between UTF-32LE and UTF-8.

WHY: Users convert complete files, not single characters. This module
drives the codec over an input byte stream and defines the on-disk
layout of both formats.

HOW: UTF-32 → UTF-8 reads the input in 4-byte little-endian groups and
encodes each value. UTF-8 → UTF-32 reads the whole input into memory and
walks it with iter_decode(), packing each code point as a 4-byte
little-endian integer. convert_file() streams results into the output
as they are produced and wraps any failure in ConversionFailedError.

RULES:
- UTF-32LE files have no header, no BOM, and a length that is a multiple of 4
- A short final UTF-32 group raises TruncatedInputError
- The output file is created or overwritten; bytes written before an
  error stay on disk (no rollback)
- convert_file wraps CodecError and OSError in ConversionFailedError,
  keeping the original on ``cause``
- Files are opened with ``with`` and closed on every exit path
"""

from __future__ import annotations

import enum
import logging
import os
import shutil
import struct
from pathlib import Path
from typing import BinaryIO, Union

from unicode_converter.config import (
    UTF32_EXTENSION,
    UTF32_STRUCT_FORMAT,
    UTF32_UNIT_SIZE,
    UTF8_EXTENSION,
)
from unicode_converter.core.codec import encode, iter_decode
from unicode_converter.core.errors import (
    CodecError,
    ConversionFailedError,
    TruncatedInputError,
)

logger = logging.getLogger(__name__)

_UTF32_UNIT = struct.Struct(UTF32_STRUCT_FORMAT)

PathLike = Union[str, Path]


class Direction(str, enum.Enum):
    """Which way a file conversion goes.

    Inherits from str so values work directly as CLI choices.
    """

    U32_TO_UTF8 = "u32-to-utf8"
    UTF8_TO_U32 = "utf8-to-u32"

    @property
    def output_extension(self) -> str:
        """Extension of the file this direction produces."""
        if self is Direction.U32_TO_UTF8:
            return UTF8_EXTENSION
        return UTF32_EXTENSION


def coerce_direction(direction: Union[Direction, str, bool]) -> Direction:
    """Accept a Direction, its string value, or a bool (True = UTF-32 → UTF-8)."""
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, bool):
        return Direction.U32_TO_UTF8 if direction else Direction.UTF8_TO_U32
    return Direction(direction)


def default_output_path(input_path: PathLike, direction: Union[Direction, str, bool]) -> Path:
    """Derive the output path next to the input.

    Same directory, same stem, extension swapped to ``.utf8`` or ``.u32``
    depending on what the conversion produces.
    """
    path = Path(input_path)
    return path.with_name(path.stem + coerce_direction(direction).output_extension)


# ---------------------------------------------------------------------------
# In-memory conversion
# ---------------------------------------------------------------------------


def utf32_to_utf8(data: bytes, strict: bool = False) -> bytes:
    """Convert a complete UTF-32LE buffer to UTF-8.

    Raises:
        TruncatedInputError: If ``len(data)`` is not a multiple of 4.
        InvalidCodePointError: If a unit holds a value above 0x10FFFF.
    """
    remainder = len(data) % UTF32_UNIT_SIZE
    if remainder:
        raise TruncatedInputError(len(data) - remainder, remainder)
    out = bytearray()
    for (code_point,) in _UTF32_UNIT.iter_unpack(data):
        out += encode(code_point, strict=strict)
    return bytes(out)


def utf8_to_utf32(data: bytes, strict: bool = False) -> bytes:
    """Convert a complete UTF-8 buffer to UTF-32LE."""
    out = bytearray()
    for _offset, code_point in iter_decode(data, strict=strict):
        out += _UTF32_UNIT.pack(code_point)
    return bytes(out)


# ---------------------------------------------------------------------------
# File conversion
# ---------------------------------------------------------------------------


def _stream_utf32_to_utf8(fin: BinaryIO, fout: BinaryIO, strict: bool) -> int:
    """Encode 4-byte groups from ``fin`` into ``fout``; return units converted."""
    offset = 0
    units = 0
    while True:
        chunk = fin.read(UTF32_UNIT_SIZE)
        if not chunk:
            break
        if len(chunk) < UTF32_UNIT_SIZE:
            raise TruncatedInputError(offset, len(chunk))
        (code_point,) = _UTF32_UNIT.unpack(chunk)
        fout.write(encode(code_point, strict=strict))
        offset += UTF32_UNIT_SIZE
        units += 1
    return units


def _write_utf8_as_utf32(data: bytes, fout: BinaryIO, strict: bool) -> int:
    """Decode ``data`` and write each code point to ``fout``; return count."""
    count = 0
    for _offset, code_point in iter_decode(data, strict=strict):
        fout.write(_UTF32_UNIT.pack(code_point))
        count += 1
    return count


def _is_same_file(input_path: PathLike, output_path: PathLike) -> bool:
    """True if both paths name one file (symlinks and hard links included)."""
    if os.path.exists(input_path) and os.path.exists(output_path):
        return os.path.samefile(input_path, output_path)
    return Path(input_path).resolve() == Path(output_path).resolve()


def convert_file(
    input_path: PathLike,
    output_path: PathLike,
    direction: Union[Direction, str, bool],
    strict: bool = False,
) -> None:
    """Convert a whole file between UTF-32LE and UTF-8.

    WHY: This is the file-level operation both shells expose. It owns the
    input and output handles for the duration of one conversion.

    HOW: Opens the input first (so a missing input never creates an
    output), then creates the output and streams converted bytes into it.
    UTF-32 input is read in 4-byte groups; UTF-8 input is read whole and
    decoded by absolute position.

    RULES:
    - Output is created or overwritten, unless it is the input file itself
      (shutil.SameFileError, raised before anything is opened)
    - Any CodecError or OSError becomes ConversionFailedError with the
      original on ``cause`` and ``__cause__``
    - Partial output is left in place on failure

    Args:
        input_path: File to read.
        output_path: File to write.
        direction: Direction, its string value, or True for UTF-32 → UTF-8.
        strict: Enable strict codec validation.

    Raises:
        ConversionFailedError: On any codec or I/O failure.
        ValueError: If ``direction`` is not recognised.
    """
    direction = coerce_direction(direction)
    logger.info("Converting %s -> %s (%s)", input_path, output_path, direction.value)

    try:
        if _is_same_file(input_path, output_path):
            raise shutil.SameFileError(
                "Output {} is the same file as the input".format(output_path)
            )
        if direction is Direction.U32_TO_UTF8:
            with open(input_path, "rb") as fin, open(output_path, "wb") as fout:
                count = _stream_utf32_to_utf8(fin, fout, strict)
        else:
            data = Path(input_path).read_bytes()
            with open(output_path, "wb") as fout:
                count = _write_utf8_as_utf32(data, fout, strict)
    except (CodecError, OSError) as exc:
        logger.warning("Conversion of %s failed: %s", input_path, exc)
        raise ConversionFailedError(exc) from exc

    logger.info("Converted %d code point(s) into %s", count, output_path)
