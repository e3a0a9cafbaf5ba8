"""Tests for the textops command line."""

import io

import pytest

from textops.cli import main, read_text, setup_argparser


class TestCommands:
    """Tests for running each command."""

    def test_swapcase(self, capsys):
        assert main(["swapcase", "Hello World"]) == 0
        assert capsys.readouterr().out == "hELLO wORLD\n"

    def test_abbreviate_with_config_defaults(self, capsys):
        assert main(["abbreviate", "Hello World"]) == 0
        assert capsys.readouterr().out == "Hello...\n"

    def test_abbreviate_with_options(self, capsys):
        assert main(["abbreviate", "abcdefghij", "--upper", "5", "--suffix", "~"]) == 0
        assert capsys.readouterr().out == "abcde~\n"

    def test_initials(self, capsys):
        assert main(["initials", "John A. Doe", "--delimiters", " ."]) == 0
        assert capsys.readouterr().out == "JAD\n"

    def test_initials_without_delimiters(self, capsys):
        assert main(["initials", "John Doe", "--no-delimiters"]) == 0
        assert capsys.readouterr().out == "\n"

    def test_wrap(self, capsys):
        assert main(["wrap", "The quick brown fox", "--width", "5"]) == 0
        assert capsys.readouterr().out == "The\nquick\nbrown\nfox\n"

    def test_wrap_long_words(self, capsys):
        assert main(["wrap", "abcdefghij", "-w", "3", "--wrap-long-words"]) == 0
        assert capsys.readouterr().out == "abc\ndef\nghi\nj\n"

    def test_text_from_stdin(self, capsys):
        assert main(["initials"], stdin=io.StringIO("John Doe\n")) == 0
        assert capsys.readouterr().out == "JD\n"


class TestConfigAndErrors:
    """Tests for configuration handling and exit codes."""

    def test_config_file_sets_defaults(self, tmp_path, capsys):
        path = tmp_path / "textops.yaml"
        path.write_text("wrap:\n  width: 8\n", encoding="utf-8")

        assert main(["--config", str(path), "wrap", "hello world"]) == 0
        assert capsys.readouterr().out == "hello\nworld\n"

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yaml"), "swapcase", "x"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_bounds(self, capsys):
        assert main(["abbreviate", "Hello World", "--lower", "5", "--upper", "3"]) == 1
        assert "Invalid argument" in capsys.readouterr().err

    def test_invalid_wrap_on_pattern(self, capsys):
        assert main(["wrap", "abc def", "--wrap-on", "("]) == 1
        assert "Invalid wrap-on pattern" in capsys.readouterr().err

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            main([])


class TestReadText:
    """Tests for reading input text."""

    def test_argument_wins_over_stdin(self):
        args = setup_argparser().parse_args(["swapcase", "abc"])
        assert read_text(args, io.StringIO("ignored")) == "abc"

    def test_only_one_trailing_newline_is_stripped(self):
        args = setup_argparser().parse_args(["swapcase"])
        assert read_text(args, io.StringIO("abc\n\n")) == "abc\n"
