"""Tests for the argparse command line.

WHY: The CLI is how scripts use the converter; its stdout must be
pipeable and its failures must exit non-zero with a readable message.

HOW: Calls main() with explicit argv and inspects stdout/stderr via
capsys. Errors are observed as SystemExit.
"""

import pytest

from unicode_converter.cli import build_parser, main
from unicode_converter.core.converter import Direction
from tests.conftest import SAMPLE_UTF8, SAMPLE_UTF32


class TestParser:

    def test_convert_direction_flags(self):
        args = build_parser().parse_args(["convert", "in.u32", "--to-utf8"])
        assert args.direction is Direction.U32_TO_UTF8
        assert args.output is None

    def test_convert_requires_direction(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["convert", "in.u32"])
        assert exc_info.value.code == 2

    def test_directions_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["convert", "in.u32", "--to-utf8", "--to-u32"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_strict_flag(self):
        args = build_parser().parse_args(["--strict", "encode", "41"])
        assert args.strict is True
        args = build_parser().parse_args(["--no-strict", "encode", "41"])
        assert args.strict is False


class TestEncodeCommand:

    def test_prints_bytes(self, capsys):
        main(["encode", "20AC"])
        captured = capsys.readouterr()
        assert captured.out.strip() == "0xE2 0x82 0xAC"
        assert "0x20AC (8364 decimal)" in captured.err

    def test_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "110000"])
        assert exc_info.value.code == 1
        assert "Error: Invalid code point 0x110000" in capsys.readouterr().err

    def test_bad_hex(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "nothex"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_strict_surrogate(self, capsys):
        main(["encode", "D800"])
        assert capsys.readouterr().out.strip() == "0xED 0xA0 0x80"
        with pytest.raises(SystemExit):
            main(["--strict", "encode", "D800"])


class TestDecodeCommand:

    def test_prints_code_point(self, capsys):
        main(["decode", "E2", "82", "AC"])
        assert capsys.readouterr().out.strip() == "0x20AC (8364 decimal)"

    def test_accepts_single_quoted_argument(self, capsys):
        main(["decode", "E2 82 AC"])
        assert capsys.readouterr().out.strip() == "0x20AC (8364 decimal)"

    def test_reports_trailing_bytes(self, capsys):
        main(["decode", "41", "42"])
        captured = capsys.readouterr()
        assert captured.out.strip() == "0x0041 (65 decimal)"
        assert "Consumed 1 of 2" in captured.err

    @pytest.mark.parametrize("argv,fragment", [
        (["decode", "80"], "lead byte 0x80"),
        (["decode", "E2", "82"], "Truncated UTF-8 sequence"),
        (["decode", "C0", "00"], "continuation byte 0x00"),
    ])
    def test_errors(self, capsys, argv, fragment):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 1
        assert fragment in capsys.readouterr().err

    def test_strict_overlong(self, capsys):
        with pytest.raises(SystemExit):
            main(["--strict", "decode", "C0", "80"])
        assert "Overlong" in capsys.readouterr().err


class TestConvertCommand:

    def test_default_output_path(self, u32_file, capsys):
        main(["convert", str(u32_file), "--to-utf8"])
        expected = u32_file.with_suffix(".utf8")
        assert expected.read_bytes() == SAMPLE_UTF8
        assert capsys.readouterr().out.strip() == str(expected)

    def test_explicit_output(self, utf8_file, tmp_path):
        out = tmp_path / "result.bin"
        main(["convert", str(utf8_file), "--to-u32", "--output", str(out)])
        assert out.read_bytes() == SAMPLE_UTF32

    def test_missing_input(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", str(tmp_path / "nope.u32"), "--to-utf8"])
        assert exc_info.value.code == 1
        assert "Input file not found" in capsys.readouterr().err
        assert not (tmp_path / "nope.utf8").exists()

    def test_output_equal_to_input_refused(self, u32_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", str(u32_file), "--to-utf8", "-o", str(u32_file)])
        assert exc_info.value.code == 1
        assert "same file as the input" in capsys.readouterr().err
        assert u32_file.read_bytes() == SAMPLE_UTF32

    def test_conversion_error_shows_cause(self, tmp_path, capsys):
        src = tmp_path / "short.u32"
        src.write_bytes(b"\x41\x00\x00")
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", str(src), "--to-utf8"])
        assert exc_info.value.code == 1
        assert "Truncated UTF-32 input" in capsys.readouterr().err


class TestMakeCommands:

    def test_make_u32(self, tmp_path):
        path = tmp_path / "sample.u32"
        main(["make-u32", str(path), "41", "20AC", "U+10000"])
        assert path.read_bytes() == SAMPLE_UTF32

    def test_make_utf8(self, tmp_path):
        path = tmp_path / "sample.utf8"
        main(["make-utf8", str(path), "41", "E2 82 AC", "F0", "90", "80", "80"])
        assert path.read_bytes() == SAMPLE_UTF8

    def test_make_then_convert(self, tmp_path):
        path = tmp_path / "made.u32"
        main(["make-u32", str(path), "41", "20AC", "10000"])
        main(["convert", str(path), "--to-utf8"])
        assert (tmp_path / "made.utf8").read_bytes() == SAMPLE_UTF8

    def test_make_utf8_bad_byte(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["make-utf8", str(tmp_path / "x.utf8"), "1FF"])
        assert exc_info.value.code == 1
        assert not (tmp_path / "x.utf8").exists()
