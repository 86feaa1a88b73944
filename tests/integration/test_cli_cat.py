# tests/integration/test_cli_cat.py
# Integration tests for the catr command: numbering flags, stdin & settings

import pytest
from typer.testing import CliRunner

from catr.cli.app import app

runner = CliRunner()


def invoke(args, **kwargs):
    return runner.invoke(app, [str(a) for a in args], **kwargs)


# * Plain concatenation of one file
def test_plain_output(text_file):
    path = text_file("a.txt", "hello\nworld\n")
    result = invoke([path])
    assert result.exit_code == 0
    assert result.stdout == "hello\nworld\n"


# * -n numbers all lines
def test_number_flag(text_file):
    path = text_file("a.txt", "x\ny\n")
    result = invoke(["-n", path])
    assert result.exit_code == 0
    assert result.stdout == "     1\tx\n     2\ty\n"


# * --number-nonblank skips blank lines
def test_number_nonblank_flag(text_file):
    path = text_file("a.txt", "x\n\ny\n")
    result = invoke(["--number-nonblank", path])
    assert result.exit_code == 0
    assert result.stdout == "     1\tx\n\n     2\ty\n"


# * "-" reads standard input
def test_stdin_dash():
    result = invoke(["-n", "-"], input="only\n")
    assert result.exit_code == 0
    assert result.stdout == "     1\tonly\n"


# * Numbering is continuous over several files & stdin
def test_continuity_across_sources(text_file):
    first = text_file("a.txt", "a\n")
    second = text_file("b.txt", "b\n")
    result = invoke(["-n", first, "-", second], input="s\n")
    assert result.stdout == "     1\ta\n     2\ts\n     3\tb\n"


# * Flags may follow file arguments
def test_flag_after_files(text_file):
    path = text_file("a.txt", "x\n")
    result = invoke([path, "-n"])
    assert result.stdout == "     1\tx\n"


# * Settings file changes number width & separator
def test_settings_format(text_file, write_settings):
    write_settings(number_width=3, number_separator=" | ")
    path = text_file("a.txt", "x\n")
    result = invoke(["-n", path])
    assert result.exit_code == 0
    assert result.stdout == "  1 | x\n"


# * --version prints the version
def test_version():
    result = invoke(["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("catr ")


# * --help documents both numbering flags
def test_help():
    result = invoke(["--help"])
    assert result.exit_code == 0
    assert "--number" in result.stdout
    assert "--number-nonblank" in result.stdout


# * --verbose logs source lifecycle to stderr only
def test_verbose_goes_to_stderr(text_file):
    path = text_file("a.txt", "x\n")
    result = invoke(["--verbose", path])
    assert result.exit_code == 0
    assert result.stdout == "x\n"
    assert "Open:" in result.stderr
    assert "Done:" in result.stderr


# * --log-file writes diagnostics to file
def test_log_file(tmp_path, text_file):
    path = text_file("a.txt", "x\n")
    log_file = tmp_path / "logs" / "catr.log"
    result = invoke(["--log-file", log_file, path])
    assert result.exit_code == 0
    assert result.stdout == "x\n"
    content = log_file.read_text(encoding="utf-8")
    assert "Session Started" in content
    assert "[SOURCE] Open:" in content


# * Invalid bytes on stdin pass through as replacement characters
def test_stdin_invalid_bytes():
    result = invoke(["-n", "-"], input=b"caf\xff\nnext\n")
    assert result.exit_code == 0
    assert result.stdout == "     1\tcaf\ufffd\n     2\tnext\n"


# * Every supported decode_errors setting streams bad bytes w/o failing
@pytest.mark.parametrize(
    "handler, expected",
    [
        ("replace", "caf\ufffd\n"),
        ("ignore", "caf\n"),
        ("backslashreplace", "caf\\xff\n"),
    ],
)
def test_decode_errors_setting(write_settings, handler, expected):
    write_settings(decode_errors=handler)
    result = invoke(["-"], input=b"caf\xff\n")
    assert result.exit_code == 0
    assert result.stdout == expected


# * A lone carriage return does not split a line
def test_lone_cr_single_line(tmp_path):
    path = tmp_path / "cr.txt"
    path.write_bytes(b"a\rb\n")
    result = invoke(["-n", path])
    assert result.exit_code == 0
    assert result.stdout == "     1\ta\rb\n"
