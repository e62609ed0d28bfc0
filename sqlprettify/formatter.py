"""Reformat single SQL statements into an indented, clause-per-line layout."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FLAGS = re.IGNORECASE | re.ASCII

_KEYWORDS = (
    "SELECT", "FROM", "WHERE", "GROUP BY", "HAVING", "ORDER BY", "LIMIT",
    "INSERT", "INTO", "VALUES", "UPDATE", "SET", "DELETE",
    "JOIN", "INNER JOIN", "LEFT JOIN", "RIGHT JOIN", "FULL JOIN",
    "UNION", "UNION ALL", "CASE", "WHEN", "THEN", "ELSE", "END",
)

_FALLBACK_KEYWORDS = (
    "INSERT INTO", "VALUES", "UPDATE", "SET", "DELETE FROM", "WHERE",
)


def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(r"\b" + re.escape(word) + r"\b", _FLAGS)


_KEYWORD_PATTERNS = tuple((word, _word_pattern(word)) for word in _KEYWORDS)
_FALLBACK_PATTERNS = tuple((word, _word_pattern(word)) for word in _FALLBACK_KEYWORDS)

_WHITESPACE = re.compile(r"\s+", re.ASCII)

# Clauses of a SELECT statement, in the order they are written out.
_SELECT_CLAUSES = tuple(
    (name, re.compile(pattern, _FLAGS))
    for name, pattern in (
        ("SELECT", r"\bSELECT\s+(.*?)(?:\s+FROM|\s*\Z)"),
        ("FROM", r"\bFROM\s+(.*?)(?:\s+WHERE|\s+GROUP\s+BY|\s+HAVING|\s+ORDER\s+BY|\s+LIMIT|\s*\Z)"),
        ("WHERE", r"\bWHERE\s+(.*?)(?:\s+GROUP\s+BY|\s+HAVING|\s+ORDER\s+BY|\s+LIMIT|\s*\Z)"),
        ("GROUP BY", r"\bGROUP\s+BY\s+(.*?)(?:\s+HAVING|\s+ORDER\s+BY|\s+LIMIT|\s*\Z)"),
        ("HAVING", r"\bHAVING\s+(.*?)(?:\s+ORDER\s+BY|\s+LIMIT|\s*\Z)"),
        ("ORDER BY", r"\bORDER\s+BY\s+(.*?)(?:\s+LIMIT|\s*\Z)"),
        ("LIMIT", r"\bLIMIT\s+(.*?)(?:\s*\Z)"),
    )
)

_UPDATE_TARGET = re.compile(r"\bUPDATE\s+(.*?)(?:\s+SET|\s*\Z)", _FLAGS)
_UPDATE_SET = re.compile(r"\bSET\s+(.*?)(?:\s+WHERE|\s*\Z)", _FLAGS)
_TRAILING_WHERE = re.compile(r"\bWHERE\s+(.*?)(?:\s*\Z)", _FLAGS)
_DELETE_FROM = re.compile(r"\bDELETE\s+FROM\s+(.*?)(?:\s+WHERE|\s*\Z)", _FLAGS)

_JOIN = re.compile(r"\b(?:INNER\s+JOIN|LEFT\s+JOIN|RIGHT\s+JOIN|FULL\s+JOIN|JOIN)\b", _FLAGS)

_INSERT = re.compile(
    r"\bINSERT\s+INTO\s+(\S+)\s*\(([^)]+)\)\s+VALUES\s*\(([^)]+)\)", _FLAGS
)


class FormatError(ValueError):
    """Raised when a statement cannot be formatted."""


def split_columns(columns: str) -> list[str]:
    """Split on commas that are not inside parentheses; pieces keep their spacing."""
    pieces: list[str] = []
    current: list[str] = []
    depth = 0
    for char in columns:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            pieces.append("".join(current))
            current = []
            continue
        current.append(char)
    if current:
        pieces.append("".join(current))
    return pieces


def _capture(pattern: re.Pattern[str], sql: str) -> str:
    match = pattern.search(sql)
    return match.group(1).strip() if match else ""


@dataclass
class Formatter:
    """Formatting options and the formatting itself."""

    indent_size: int = 2
    keyword_upper: bool = True

    def format(self, sql: str) -> str:
        """Return *sql* laid out one clause per line."""
        if not sql.strip():
            raise FormatError("SQL statement cannot be empty")
        cleaned = _WHITESPACE.sub(" ", sql).strip()
        return self._format_statement(cleaned)

    def keyword(self, word: str) -> str:
        """Return *word* in the configured keyword case."""
        return word.upper() if self.keyword_upper else word.lower()

    def indent(self, level: int) -> str:
        """Return the whitespace for the given nesting level."""
        width = level * self.indent_size
        if width < 0:
            raise ValueError(f"negative indentation width: {width}")
        return " " * width

    def _format_statement(self, sql: str) -> str:
        for word, pattern in _KEYWORD_PATTERNS:
            replacement = self.keyword(word)
            sql = pattern.sub(lambda _m, r=replacement: r, sql)

        head = sql.strip().upper()
        if head.startswith("SELECT"):
            return self._format_select(sql)
        if head.startswith("INSERT"):
            return self._format_insert(sql)
        if head.startswith("UPDATE"):
            return self._format_update(sql)
        if head.startswith("DELETE"):
            return self._format_delete(sql)
        return sql

    def _format_select(self, sql: str) -> str:
        indent = self.indent(1)
        out: list[str] = []
        for name, pattern in _SELECT_CLAUSES:
            body = _capture(pattern, sql)
            if not body:
                continue
            if name == "SELECT":
                body = self._format_select_columns(body)
            elif name == "FROM":
                body = self._format_from(body)
            prefix = "" if name == "SELECT" else "\n"
            out.append(f"{prefix}{self.keyword(name)}\n{indent}{body}")
        return "".join(out)

    def _format_select_columns(self, select_part: str) -> str:
        columns = split_columns(select_part)
        if not columns:
            return select_part
        return (",\n" + self.indent(1)).join(col.strip() for col in columns)

    def _format_from(self, from_part: str) -> str:
        pieces = _JOIN.split(from_part)
        joins = _JOIN.findall(from_part)
        indent = self.indent(1)
        out = [pieces[0].strip()]
        for join, piece in zip(joins, pieces[1:]):
            out.append(f"\n{indent}{self.keyword(join)} {piece.strip()}")
        return "".join(out)

    def _format_insert(self, sql: str) -> str:
        match = _INSERT.search(sql)
        if match is None:
            return self._format_keywords(sql)
        table, columns, values = (group.strip() for group in match.groups())
        indent = self.indent(1)
        return (
            f"{self.keyword('INSERT INTO')} {table}"
            f"\n{indent}({self._inline_list(columns)})"
            f"\n{self.keyword('VALUES')}"
            f"\n{indent}({self._inline_list(values)})"
        )

    def _format_update(self, sql: str) -> str:
        indent = self.indent(1)
        out: list[str] = []
        target = _capture(_UPDATE_TARGET, sql)
        if target:
            out.append(f"{self.keyword('UPDATE')} {target}")
        assignments = _capture(_UPDATE_SET, sql)
        if assignments:
            out.append(f"\n{self.keyword('SET')}\n{indent}{self._format_set(assignments)}")
        condition = _capture(_TRAILING_WHERE, sql)
        if condition:
            out.append(f"\n{self.keyword('WHERE')}\n{indent}{condition}")
        return "".join(out)

    def _format_delete(self, sql: str) -> str:
        indent = self.indent(1)
        out: list[str] = []
        table = _capture(_DELETE_FROM, sql)
        if table:
            out.append(f"{self.keyword('DELETE FROM')} {table}")
        condition = _capture(_TRAILING_WHERE, sql)
        if condition:
            out.append(f"\n{self.keyword('WHERE')}\n{indent}{condition}")
        return "".join(out)

    @staticmethod
    def _inline_list(items: str) -> str:
        pieces = split_columns(items)
        if len(pieces) <= 1:
            return items
        return ", ".join(piece.strip() for piece in pieces)

    def _format_set(self, set_part: str) -> str:
        assignments = split_columns(set_part)
        if len(assignments) <= 1:
            return set_part
        return (",\n" + self.indent(1)).join(a.strip() for a in assignments)

    def _format_keywords(self, sql: str) -> str:
        for word, pattern in _FALLBACK_PATTERNS:
            replacement = self.keyword(word)
            sql = pattern.sub(lambda _m, r=replacement: r, sql)
        return sql