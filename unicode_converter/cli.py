"""Command-line interface for the Unicode-32 / UTF-8 Converter.

WHY: Scripts and users at a terminal need the converter's operations
without stepping through a menu: encode one code point, decode one byte
sequence, convert a whole file, or author a raw sample file from hex.

HOW: argparse with one subcommand per operation. Each subcommand handler
parses its hex arguments with core.hexio, calls the core, prints the
result to stdout and status lines to stderr. main() configures logging,
dispatches, and turns any conversion error into "Error: ..." plus exit
status 1.

RULES:
- Results go to stdout; status and errors go to stderr
- --strict enables overlong/surrogate/range rejection (default from config)
- convert without --output writes next to the input ({stem}.utf8 / {stem}.u32)
- convert refuses a missing input file before touching the output
- Exit status 1 on any error, 0 otherwise
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from unicode_converter import __version__
from unicode_converter.config import DEFAULT_LOG_LEVEL, DEFAULT_STRICT
from unicode_converter.core.codec import decode, encode
from unicode_converter.core.converter import Direction, convert_file, default_output_path
from unicode_converter.core.errors import ConversionFailedError
from unicode_converter.core.hexio import (
    format_bytes,
    format_code_point,
    parse_byte_list,
    parse_code_point,
    write_u32_file,
    write_utf8_file,
)

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _cmd_encode(args: argparse.Namespace) -> None:
    code_point = parse_code_point(args.code_point)
    _status("Unicode-32 value: {}".format(format_code_point(code_point)))
    data = encode(code_point, strict=args.strict)
    print(format_bytes(data))


def _cmd_decode(args: argparse.Namespace) -> None:
    data = parse_byte_list(" ".join(args.bytes))
    _status("UTF-8 bytes: {}".format(format_bytes(data)))
    code_point, end = decode(data, 0, strict=args.strict)
    print(format_code_point(code_point))
    if end < len(data):
        _status("Consumed {} of {} byte(s); trailing bytes ignored".format(end, len(data)))


def _cmd_convert(args: argparse.Namespace) -> None:
    input_path = Path(args.input_file)
    if not input_path.is_file():
        _fail("Input file not found: {}".format(input_path))

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = default_output_path(input_path, args.direction)

    _status("Converting {} ({})...".format(input_path, args.direction.value))
    convert_file(input_path, output_path, args.direction, strict=args.strict)
    _status("Done! Output file: {}".format(output_path))
    print(output_path)


def _cmd_make_u32(args: argparse.Namespace) -> None:
    values = [parse_code_point(v) for v in args.values]
    written = write_u32_file(args.path, values)
    _status("Created {} ({} value(s), {} bytes)".format(args.path, len(values), written))


def _cmd_make_utf8(args: argparse.Namespace) -> None:
    data = parse_byte_list(" ".join(args.bytes))
    written = write_utf8_file(args.path, data)
    _status("Created {} ({} bytes)".format(args.path, written))


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running a command.

    RULES:
    - Global: --strict/--no-strict, --log-level, --version
    - Subcommands: encode, decode, convert, make-u32, make-utf8
    - convert requires exactly one of --to-utf8 / --to-u32
    """
    parser = argparse.ArgumentParser(
        prog="unicode_converter",
        description="Convert between Unicode-32 (UTF-32LE) and UTF-8, one "
                    "character at a time or whole files.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_STRICT,
        help="Reject overlong encodings, surrogates and values above 0x10FFFF "
             "(default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity on stderr (default: %(default)s).",
    )

    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    p_encode = sub.add_parser("encode", help="Encode one hex code point as UTF-8.")
    p_encode.add_argument("code_point", help="Code point in hex, e.g. 20AC, 0x20AC or U+20AC.")
    p_encode.set_defaults(handler=_cmd_encode)

    p_decode = sub.add_parser("decode", help="Decode one UTF-8 sequence given as hex bytes.")
    p_decode.add_argument("bytes", nargs="+", help="Hex bytes, e.g. E2 82 AC.")
    p_decode.set_defaults(handler=_cmd_decode)

    p_convert = sub.add_parser("convert", help="Convert a whole file.")
    p_convert.add_argument("input_file", help="Path to the file to convert.")
    p_convert.add_argument(
        "--output", "-o",
        default=None,
        help="Output path (default: input stem with .utf8 or .u32 next to the input).",
    )
    direction = p_convert.add_mutually_exclusive_group(required=True)
    direction.add_argument(
        "--to-utf8",
        dest="direction",
        action="store_const",
        const=Direction.U32_TO_UTF8,
        help="Input is UTF-32LE, write UTF-8.",
    )
    direction.add_argument(
        "--to-u32",
        dest="direction",
        action="store_const",
        const=Direction.UTF8_TO_U32,
        help="Input is UTF-8, write UTF-32LE.",
    )
    p_convert.set_defaults(handler=_cmd_convert)

    p_make_u32 = sub.add_parser("make-u32", help="Write raw UTF-32LE values to a file.")
    p_make_u32.add_argument("path", help="File to create (conventionally *.u32).")
    p_make_u32.add_argument("values", nargs="+", help="Hex values, one per code point.")
    p_make_u32.set_defaults(handler=_cmd_make_u32)

    p_make_utf8 = sub.add_parser("make-utf8", help="Write raw bytes to a file.")
    p_make_utf8.add_argument("path", help="File to create (conventionally *.utf8).")
    p_make_utf8.add_argument("bytes", nargs="+", help="Hex bytes, e.g. E2 82 AC.")
    p_make_utf8.set_defaults(handler=_cmd_make_utf8)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    logger.debug("Running %s (strict=%s)", args.command, args.strict)

    try:
        args.handler(args)
    except ConversionFailedError as e:
        _fail(str(e.cause))
    except (ValueError, OSError) as e:
        # Codec errors and hex parse errors are ValueErrors
        _fail(str(e))


if __name__ == "__main__":
    main()
