"""Print a few statements before and after formatting."""

from __future__ import annotations

import sys

from .formatter import FormatError, Formatter

SAMPLE_SQL = (
    "select u.id, p.product_name, u.name from users u join products p on u.id = p.user_id "
    "where u.age > 25 and p.category = 'electronics' group by u.id order by p.price desc limit 10"
)

EXAMPLES = (
    "SELECT * FROM users WHERE id = 1",
    "SELECT COUNT(*) as total, category FROM products GROUP BY category HAVING COUNT(*) > 5",
    "UPDATE users SET name = 'John' WHERE id = 1",
    "INSERT INTO users (name, email) VALUES ('Alice', 'alice@example.com')",
    "DELETE FROM users WHERE age < 18",
)


def main(argv: list[str] | None = None) -> int:
    """Show the formatter on sample statements; return the exit status."""
    formatter = Formatter()

    print("Original SQL:")
    print(SAMPLE_SQL)
    print("\nFormatted SQL:")
    try:
        formatted = formatter.format(SAMPLE_SQL)
    except FormatError as exc:
        print(f"Formatting failed: {exc}", file=sys.stderr)
        return 1
    print(formatted)

    print("\n" + "=" * 50)
    print("More examples:")
    for number, sql in enumerate(EXAMPLES, start=1):
        print(f"\nExample {number}:")
        print(f"Original: {sql}")
        try:
            formatted = formatter.format(sql)
        except FormatError as exc:
            print(f"Formatting failed: {exc}")
            continue
        print(f"Formatted:\n{formatted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())