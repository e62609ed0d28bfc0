import io
import sys

import pytest

from sqlprettify.cli import main, read_stdin
from sqlprettify.formatter import Formatter

SAMPLE = "SELECT * FROM users WHERE id = 1"


def test_sql_flag(capsys):
    assert main(["-sql", SAMPLE]) == 0
    assert capsys.readouterr().out == Formatter().format(SAMPLE) + "\n"


def test_sql_flag_with_equals_and_double_dash(capsys):
    assert main([f"--sql={SAMPLE}"]) == 0
    assert capsys.readouterr().out == Formatter().format(SAMPLE) + "\n"


def test_positional_arguments_are_joined(capsys):
    assert main(["select", "id", "from", "users"]) == 0
    assert capsys.readouterr().out == Formatter().format("select id from users") + "\n"


def test_sql_flag_wins_over_positional(capsys):
    assert main(["-sql", SAMPLE, "delete", "from", "t"]) == 0
    assert capsys.readouterr().out == Formatter().format(SAMPLE) + "\n"


def test_indent_and_lowercase_options(capsys):
    sql = "SELECT id, name FROM users"
    assert main(["-indent", "4", "-uppercase=false", sql]) == 0
    expected = Formatter(indent_size=4, keyword_upper=False).format(sql)
    assert capsys.readouterr().out == expected + "\n"


def test_input_and_output_files(tmp_path, capsys):
    source = tmp_path / "in.sql"
    source.write_text("DELETE FROM users\nWHERE age < 18\n", encoding="utf-8")
    target = tmp_path / "out.sql"
    assert main(["-input", str(source), "-output", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == Formatter().format(
        "DELETE FROM users WHERE age < 18"
    )
    assert str(target) in capsys.readouterr().out


def test_missing_input_file(tmp_path, capsys):
    assert main(["-input", str(tmp_path / "absent.sql")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


def test_stdin_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("select *\nfrom users\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == Formatter().format("select * from users") + "\n"


def test_empty_stdin_is_an_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("   \n"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Error: No SQL statement provided" in captured.err
    assert "sqlformatter - SQL Formatter Tool" in captured.out


def test_help(capsys):
    assert main(["-help"]) == 0
    assert capsys.readouterr().out.startswith("sqlformatter - SQL Formatter Tool")


def test_unknown_flag(capsys):
    assert main(["-bogus"]) == 2
    assert "flag provided but not defined: -bogus" in capsys.readouterr().err


def test_bad_boolean_value(capsys):
    assert main(["-uppercase=maybe", SAMPLE]) == 2
    assert "-uppercase" in capsys.readouterr().err


def test_bad_indent_value():
    assert main(["-indent", "wide", SAMPLE]) == 2


def test_flag_without_argument():
    assert main(["-sql"]) == 2


def test_read_stdin_joins_lines():
    assert read_stdin(io.StringIO("a\r\nb\n\nc")) == "a b  c"


@pytest.mark.parametrize("text", ["", "\n\n"])
def test_read_stdin_blank(text):
    assert read_stdin(io.StringIO(text)) == ""