"""Command-line entry point for formatting SQL statements."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .formatter import Formatter

USAGE = """sqlformatter - SQL Formatter Tool

Usage:
  sqlformatter [options] [SQL statement]

Options:
  -sql string      SQL statement to format
  -input string    Input SQL file
  -output string   Output file
  -indent int      Number of spaces for indentation (default: 2)
  -uppercase       Use uppercase for keywords (default: true)
  -help            Show help information

Examples:
  sqlformatter -sql "select * from users"
  echo "select * from users" | sqlformatter
  sqlformatter -input input.sql -output output.sql
  sqlformatter "select u.id, u.name from users u where u.age > 25"

"""

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class _UsageError(Exception):
    pass


@dataclass
class _Options:
    indent: int = 2
    uppercase: bool = True
    input: str = ""
    output: str = ""
    sql: str = ""
    help: bool = False
    args: list[str] = field(default_factory=list)


def _parse_bool(name: str, value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise _UsageError(f'invalid boolean value "{value}" for -{name}: parse error')


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        try:
            return int(value, 10)
        except ValueError:
            raise _UsageError(f'invalid value "{value}" for flag -{name}: parse error') from None


def _parse_args(argv: list[str]) -> _Options:
    opts = _Options()
    rest = list(argv)
    while rest:
        arg = rest[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        rest.pop(0)
        if arg == "--":
            break
        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise _UsageError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")

        if name in ("help", "h"):
            opts.help = _parse_bool(name, value) if has_value else True
        elif name == "uppercase":
            opts.uppercase = _parse_bool(name, value) if has_value else True
        elif name in ("indent", "input", "output", "sql"):
            if not has_value:
                if not rest:
                    raise _UsageError(f"flag needs an argument: -{name}")
                value = rest.pop(0)
            if name == "indent":
                opts.indent = _parse_int(name, value)
            else:
                setattr(opts, name, value)
        else:
            raise _UsageError(f"flag provided but not defined: -{name}")
    opts.args = rest
    return opts


def read_stdin(stream: TextIO | None = None) -> str:
    """Read all lines from *stream*, joining them with single spaces."""
    if stream is None:
        stream = sys.stdin
    if stream.isatty():
        print("Enter SQL statement (press Ctrl+D to finish):")
    lines = []
    for line in stream:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        lines.append(line + " ")
    return "".join(lines).strip()


def main(argv: list[str] | None = None) -> int:
    """Run the formatter command; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        opts = _parse_args(argv)
    except _UsageError as exc:
        print(exc, file=sys.stderr)
        sys.stderr.write(USAGE)
        return 2

    if opts.help:
        sys.stdout.write(USAGE)
        return 0

    formatter = Formatter(indent_size=opts.indent, keyword_upper=opts.uppercase)

    if opts.sql:
        sql = opts.sql
    elif opts.args:
        sql = " ".join(opts.args)
    elif opts.input:
        try:
            sql = Path(opts.input).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            print(f"Failed to read file: {exc}", file=sys.stderr)
            return 1
    else:
        try:
            sql = read_stdin(sys.stdin)
        except OSError as exc:
            print(f"Failed to read from stdin: {exc}", file=sys.stderr)
            return 1

    if not sql.strip():
        print("Error: No SQL statement provided", file=sys.stderr)
        sys.stdout.write(USAGE)
        return 1

    try:
        formatted = formatter.format(sql)
    except ValueError as exc:
        print(f"Formatting failed: {exc}", file=sys.stderr)
        return 1

    if opts.output:
        try:
            with open(opts.output, "w", encoding="utf-8") as handle:
                handle.write(formatted)
        except OSError as exc:
            print(f"Failed to write file: {exc}", file=sys.stderr)
            return 1
        print(f"Formatting completed, result saved to: {opts.output}")
    else:
        print(formatted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())