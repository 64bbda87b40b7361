"""Menu-driven interactive shell for the Unicode-32 / UTF-8 Converter.

WHY: Not every user wants to remember subcommands. The menu shell walks
them through single-character conversion, whole-file conversion, and
sample-file creation, and keeps running after a mistake.

HOW: A single ConverterShell class holds the menu loop and one method per
menu action. Prompts and output go through injectable input/output
functions so tests can drive the shell with scripted answers. Every
action runs inside _run_action(), which turns errors into an
"Error: ..." line and returns to the menu.

RULES:
- Main menu: 1 interactive, 2 file, 3 create UTF-32 file, 4 create UTF-8 file, 5 quit
- Interactive sub-menu: 1 U32 → UTF-8, 2 UTF-8 → U32, 3 back
- Errors never leave the menu loop; end of input (EOF) quits cleanly
- File mode output option 1 writes next to the input ({stem}.utf8 / {stem}.u32)
- Sample files are written raw, bypassing the codec
- main() takes --strict and --log-level like the CLI; defaults come from config
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path
from typing import List, Optional

from unicode_converter.config import DEFAULT_LOG_LEVEL, DEFAULT_STRICT
from unicode_converter.core.codec import decode, encode
from unicode_converter.core.converter import Direction, convert_file, default_output_path
from unicode_converter.core.errors import ConversionFailedError, HexFormatError
from unicode_converter.core.hexio import (
    format_bytes,
    format_code_point,
    parse_byte_list,
    parse_code_point,
    write_u32_file,
    write_utf8_file,
)

logger = logging.getLogger(__name__)

_MAIN_MENU = """
=== Unicode-32 <-> UTF-8 Converter ===
1. Interactive mode
2. File mode
3. Create Unicode-32 file
4. Create UTF-8 file
5. Quit"""

_INTERACTIVE_MENU = """
=== Interactive Mode ===
1. Unicode-32 to UTF-8
2. UTF-8 to Unicode-32
3. Back to main menu"""

_FILE_MENU = """
=== File Mode ===
1. Unicode-32 to UTF-8
2. UTF-8 to Unicode-32"""


class ConverterShell:
    """Interactive menu loop over the codec and file converter.

    Args:
        input_fn: Called with a prompt, returns one line of user input.
                  Raising EOFError ends the session.
        output_fn: Called with one line of text to show the user.
        strict: Enable strict codec validation for every conversion.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        strict: bool = False,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self.strict = strict

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _say(self, text: str = "") -> None:
        self._output(text)

    def _run_action(self, action: Callable[[], None]) -> None:
        """Run one menu action, reporting any failure instead of raising."""
        try:
            action()
        except HexFormatError as e:
            self._say("Error: invalid hexadecimal format ({})".format(e.text))
        except ConversionFailedError as e:
            self._say("Error: {}".format(e.cause))
        except (ValueError, OSError) as e:
            self._say("Error: {}".format(e))

    # -----------------------------------------------------------------------
    # Menus
    # -----------------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user quits or input ends."""
        actions = {
            "1": self.interactive_mode,
            "2": lambda: self._run_action(self.file_mode),
            "3": lambda: self._run_action(self.create_u32_file),
            "4": lambda: self._run_action(self.create_utf8_file),
        }
        try:
            while True:
                self._say(_MAIN_MENU)
                choice = self._ask("\nChoose a mode (1-5): ")
                if choice == "5":
                    return
                action = actions.get(choice)
                if action is None:
                    self._say("Invalid option. Please try again.")
                    continue
                action()
        except EOFError:
            self._say()

    def interactive_mode(self) -> None:
        """Single-character conversions until the user goes back."""
        while True:
            self._say(_INTERACTIVE_MENU)
            choice = self._ask("\nChoose an option (1-3): ")
            if choice == "1":
                self._run_action(self.convert_u32_to_utf8)
            elif choice == "2":
                self._run_action(self.convert_utf8_to_u32)
            elif choice == "3":
                return
            else:
                self._say("Invalid option. Please try again.")

    # -----------------------------------------------------------------------
    # Actions
    # -----------------------------------------------------------------------

    def convert_u32_to_utf8(self) -> None:
        self._say("\n--- Unicode-32 to UTF-8 ---")
        code_point = parse_code_point(self._ask("Enter a Unicode-32 value (hex, e.g. 20AC): "))
        self._say("\nUnicode-32 value: {}".format(format_code_point(code_point)))
        data = encode(code_point, strict=self.strict)
        self._say("UTF-8 result (bytes): {}".format(format_bytes(data)))

    def convert_utf8_to_u32(self) -> None:
        self._say("\n--- UTF-8 to Unicode-32 ---")
        data = parse_byte_list(
            self._ask("Enter UTF-8 bytes (hex, space separated, e.g. E2 82 AC): ")
        )
        self._say("\nUTF-8 bytes entered: {}".format(format_bytes(data)))
        code_point, _end = decode(data, 0, strict=self.strict)
        self._say("Unicode-32 result: {}".format(format_code_point(code_point)))

    def file_mode(self) -> None:
        """Convert a whole file, choosing direction and output location."""
        self._say(_FILE_MENU)
        choice = self._ask("\nChoose a direction (1-2): ")
        if choice == "1":
            direction = Direction.U32_TO_UTF8
        elif choice == "2":
            direction = Direction.UTF8_TO_U32
        else:
            self._say("Invalid option.")
            return

        input_text = self._ask("\nEnter the input file path: ")
        if not input_text or not Path(input_text).is_file():
            self._say("Input file is invalid or does not exist.")
            return
        input_path = Path(input_text)

        self._say("\nChoose the output option:")
        self._say("1. Same directory as the input")
        self._say("2. Specify a different path")
        output_choice = self._ask("Option (1-2): ")

        if output_choice == "1":
            output_path = default_output_path(input_path, direction)
        else:
            output_text = self._ask("\nEnter the output file path: ")
            if not output_text:
                self._say("Invalid output path.")
                return
            output_path = Path(output_text)

        convert_file(input_path, output_path, direction, strict=self.strict)
        self._say("Conversion succeeded. Output file: {}".format(output_path))

    def _ask_file_name(self, extension: str) -> Optional[str]:
        name = self._ask("Enter the name of the file to create (with extension {}): ".format(extension))
        if not name:
            self._say("Invalid file name.")
            return None
        return name

    def _collect_lines(self, prompt: str) -> List[str]:
        """Read lines until an empty one."""
        lines: List[str] = []
        while True:
            line = self._ask(prompt)
            if not line:
                return lines
            lines.append(line)

    def create_u32_file(self) -> None:
        """Write hex values entered one per line as raw UTF-32LE units."""
        name = self._ask_file_name(".u32")
        if name is None:
            return
        self._say("\nEnter Unicode-32 values in hex (one per line).")
        self._say("Press Enter on an empty line to finish.")
        values = [parse_code_point(line) for line in self._collect_lines("Value (hex): ")]
        write_u32_file(name, values)
        logger.info("Wrote %d UTF-32 value(s) to %s", len(values), name)
        self._say("File {} created successfully.".format(name))

    def create_utf8_file(self) -> None:
        """Write hex bytes entered on one or more lines as raw bytes."""
        name = self._ask_file_name(".utf8")
        if name is None:
            return
        self._say("\nEnter UTF-8 bytes in hex (space separated).")
        self._say("Press Enter on an empty line to finish.")
        data = b"".join(parse_byte_list(line) for line in self._collect_lines("Bytes (hex): "))
        write_utf8_file(name, data)
        logger.info("Wrote %d byte(s) to %s", len(data), name)
        self._say("File {} created successfully.".format(name))


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the menu shell's own flags.

    RULES:
    - --interactive is accepted so ``python -m unicode_converter --interactive``
      can hand its whole argv over unchanged
    - --strict/--no-strict and --log-level mirror the CLI's global flags
    """
    parser = argparse.ArgumentParser(
        prog="unicode_converter --interactive",
        description="Menu-driven Unicode-32 / UTF-8 converter.",
    )
    parser.add_argument("--interactive", action="store_true", help=argparse.SUPPRESS)
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
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the menu shell.

    RULES:
    - argv=None means use sys.argv (normal invocation)
    - Explicit argv is for testing
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Starting menu shell (strict=%s)", args.strict)
    ConverterShell(strict=args.strict).run()


if __name__ == "__main__":
    main()
