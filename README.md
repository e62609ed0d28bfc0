# sqlprettify

A small SQL formatter. It puts each clause of a `SELECT`, `INSERT`,
`UPDATE` or `DELETE` statement on its own line, indents the clause
bodies and sets the case of the keywords it knows. Any other kind of
statement comes back with its whitespace collapsed and those keywords
in the chosen case.

## Installation

```
pip install .
```

## Command line

```
sqlprettify "select u.id, u.name from users u where u.age > 25"
```

Output:

```
SELECT
  u.id,
  u.name
FROM
  users u
WHERE
  u.age > 25
```

The SQL can come from several places. The tool uses the first one that
is present, in this order:

1. the `-sql` option
2. positional arguments, joined with spaces
3. the file named by `-input`
4. standard input, with its lines joined by spaces

Options may be written with one dash or two, and a value may follow the
option as the next argument or after `=`. Options must come before any
positional arguments; `--` ends the options.

| Option              | Meaning                                         |
|---------------------|-------------------------------------------------|
| `-sql STRING`       | SQL statement to format                         |
| `-input FILE`       | Read the SQL from a file                        |
| `-output FILE`      | Write the result to a file, not standard output |
| `-indent N`         | Spaces per indentation level (default 2)        |
| `-uppercase=false`  | Write keywords in lower case                    |
| `-help`, `-h`       | Show help                                       |

The command exits with status 0 on success, 1 when there is no SQL or
reading, formatting or writing fails, and 2 when the options are wrong.

More examples:

```
sqlprettify -sql "select * from users"
echo "select * from users" | sqlprettify
sqlprettify -input input.sql -output output.sql
sqlprettify -indent 4 -uppercase=false "SELECT id, name FROM users"
```

To see the formatter run on a handful of sample statements:

```
sqlprettify-demo
```

## Library

```python
from sqlprettify.formatter import Formatter, FormatError

formatter = Formatter()
print(formatter.format("UPDATE users SET name = 'John', email = 'john@example.com' WHERE id = 1"))
```

```
UPDATE users
SET
  name = 'John',
  email = 'john@example.com'
WHERE
  id = 1
```

`Formatter` is a dataclass with two settings, `indent_size` (default 2)
and `keyword_upper` (default `True`). Besides `format`, it offers
`keyword(word)`, which returns a word in the configured case, and
`indent(level)`, which returns `level * indent_size` spaces and raises
`ValueError` if that is negative. Formatting an empty or
whitespace-only string raises `FormatError`, a subclass of `ValueError`.

`split_columns` splits a comma-separated list at its top level and
leaves commas inside parentheses alone:

```python
from sqlprettify.formatter import split_columns

split_columns("id, COUNT(*), MAX(age)")
# ['id', ' COUNT(*)', ' MAX(age)']
```

## Limits

The formatter works with regular expressions, not a SQL parser. It
does not check that a statement is valid, takes one statement at a
time, and does not know about comments or quoted strings, so keywords
inside them are recased too. Only the clause keywords are recased;
words such as `on`, `and` or `desc` are left as written. `CASE`
expressions and subqueries are not laid out. An `INSERT` is laid out
only in the form `INSERT INTO table (columns) VALUES (values)` with no
parentheses inside the lists; any other `INSERT` is returned on one
line.

## Running the tests

```
pip install ".[test]"
pytest
```