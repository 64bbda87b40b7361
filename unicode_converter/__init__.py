"""Unicode-32 / UTF-8 Converter — bidirectional codec and file converter.

WHY: UTF-32LE stores every code point in a fixed 4 bytes; UTF-8 packs
the same code points into 1–4 bytes. This package converts single code
points, single byte sequences, and whole files between the two.

HOW: A pure codec (encode one code point, decode one sequence) sits
under a file converter. A command line and an interactive menu shell
are thin layers over those three operations.

RULES:
- Only UTF-32LE and UTF-8 are supported
- The codec is permissive by default; strict mode is opt-in
- Shells never contain codec logic
"""

__version__ = "0.1.0"
