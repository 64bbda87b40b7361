"""Configuration constants, file naming defaults, and .env loading.

WHY: Centralizes the codec limits, the file extensions used when an
output path is derived from an input path, and the overridable runtime
defaults, so they are plain data rather than buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level. Runtime defaults read environment variables once.

RULES:
- MAX_CODE_POINT is the Unicode upper bound, 0x10FFFF
- UTF-32 files use ".u32", UTF-8 files use ".utf8"
- UNICODE_CONVERTER_STRICT turns on strict validation by default
- UNICODE_CONVERTER_LOG_LEVEL sets the CLI log level (default WARNING)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Codec limits
# ---------------------------------------------------------------------------

MAX_CODE_POINT = 0x10FFFF
"""Highest valid Unicode code point."""

UTF32_UNIT_SIZE = 4
"""Bytes per code point in a UTF-32LE file."""

UTF32_STRUCT_FORMAT = "<I"
"""struct format of one UTF-32LE unit (little-endian uint32)."""

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------

UTF32_EXTENSION = ".u32"
UTF8_EXTENSION = ".utf8"


def parse_bool(value: str) -> bool:
    """Interpret an environment string as a boolean ("true" is True)."""
    return value.strip().lower() == "true"


# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

DEFAULT_STRICT = parse_bool(os.getenv("UNICODE_CONVERTER_STRICT", "false"))
DEFAULT_LOG_LEVEL = os.getenv("UNICODE_CONVERTER_LOG_LEVEL", "WARNING").upper()
