import io

import pytest
from inline_snapshot import snapshot

from slyce.cli import main


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return feed


def test_slices_json_array(stdin, capsys):
    stdin("[10, 20, 30, 40, 50]")
    assert main(["[-3::-1]"]) == 0
    out = capsys.readouterr()
    assert out.out == "[30, 20, 10]\n"
    assert out.err == ""


def test_elements_of_any_json_type(stdin, capsys):
    stdin('["a", {"b": 1}, null, 2.5]')
    assert main(["[1:]"]) == 0
    assert capsys.readouterr().out == '[{"b": 1}, null, 2.5]\n'


def test_positions_for_length(capsys):
    assert main(["[4:0:-1]", "--len", "5"]) == 0
    assert capsys.readouterr().out == "[4, 3, 2, 1]\n"


def test_negative_length(capsys):
    assert main(["[::]", "--len", "-1"]) == 2
    assert "SE2003" in capsys.readouterr().err


def test_canonical(capsys):
    assert main([" [ 1 : -2 ] ", "--canonical"]) == 0
    assert capsys.readouterr().out == "[1:-2:]\n"


def test_zero_step_warns(capsys):
    assert main(["[::0]", "--len", "5"]) == 1
    out = capsys.readouterr()
    assert out.out == "[]\n"
    assert out.err == snapshot("<expr>: warning [SW0001]: step is zero, the slice selects nothing.\n")


def test_syntax_error(capsys):
    assert main(["[1:x:2]", "--len", "3"]) == 2
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err == snapshot("""\
<expr>:1:4: error [SE1002]: unexpected character 'x'.
  | [1:x:2]
  `    ^
""")


def test_invalid_json(stdin, capsys):
    stdin("[1, 2")
    assert main(["[::]"]) == 2
    assert "SE2001" in capsys.readouterr().err


def test_not_an_array(stdin, capsys):
    stdin('{"a": 1}')
    assert main(["[::]"]) == 2
    assert "input must be a JSON array, got dict" in capsys.readouterr().err


def test_dump_parse(capsys):
    assert main(["[1::]", "--len", "3", "--dump-parse"]) == 0
    assert capsys.readouterr().out == "slice\n  field\t1\n  field\n  field\n[1, 2]\n"


def test_missing_expression(capsys):
    assert main([]) == 2
    assert "slice expression required" in capsys.readouterr().err


def test_version(capsys):
    assert main(["--version"]) == 0
    assert "Slyce" in capsys.readouterr().out
