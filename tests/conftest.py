"""Shared test fixtures for the unicode_converter test suite.

WHY: Codec, converter, CLI and shell tests all need the same small set
of known-good vectors and the files built from them. Centralizing them
here keeps the expected bytes in one place.

HOW: Module-level constants hold the code points and both encodings;
fixtures write them to tmp_path files.

RULES:
- SAMPLE_UTF32 and SAMPLE_UTF8 encode exactly SAMPLE_CODE_POINTS
- File fixtures use tmp_path for isolation
"""

import struct

import pytest

# "A", Euro sign, first supplementary-plane code point
SAMPLE_CODE_POINTS = [0x41, 0x20AC, 0x10000]

SAMPLE_UTF32 = struct.pack("<3I", *SAMPLE_CODE_POINTS)

SAMPLE_UTF8 = bytes([
    0x41,
    0xE2, 0x82, 0xAC,
    0xF0, 0x90, 0x80, 0x80,
])


@pytest.fixture
def u32_file(tmp_path):
    """A UTF-32LE file holding SAMPLE_CODE_POINTS."""
    path = tmp_path / "sample.u32"
    path.write_bytes(SAMPLE_UTF32)
    return path


@pytest.fixture
def utf8_file(tmp_path):
    """A UTF-8 file holding SAMPLE_CODE_POINTS."""
    path = tmp_path / "sample.utf8"
    path.write_bytes(SAMPLE_UTF8)
    return path
