from sqlprettify.demo import EXAMPLES, SAMPLE_SQL, main
from sqlprettify.formatter import Formatter


def test_demo_prints_sample(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Original SQL:\n" + SAMPLE_SQL + "\n")
    assert Formatter().format(SAMPLE_SQL) in out
    assert "=" * 50 in out


def test_demo_prints_every_example(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    formatter = Formatter()
    for number, sql in enumerate(EXAMPLES, start=1):
        block = f"\nExample {number}:\nOriginal: {sql}\nFormatted:\n{formatter.format(sql)}\n"
        assert block in out
    assert out.count("Example ") == len(EXAMPLES)