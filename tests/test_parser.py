import pytest
from inline_snapshot import snapshot

from slyce import Slice, Head, Tail, Default
from slyce.internals.parser import parse_slice, parse_tree, SliceSyntaxError


def test_parse_all_fields():
    s = parse_slice("[1:-2:1]")
    assert s.start == Head(1)
    assert s.end == Tail(2)
    assert s.step == 1


def test_parse_empty_fields():
    s = parse_slice("[:-2:1]")
    assert s.start == Default()
    assert s.end == Tail(2)
    assert s.step == 1
    assert parse_slice("[::]") == Slice()


def test_parse_two_fields():
    assert parse_slice("[1:3]") == Slice(Head(1), Head(3))
    assert parse_slice("[:]") == Slice()


def test_parse_negative_step():
    assert parse_slice("[::-1]") == Slice(step=-1)


def test_negative_zero_is_head_zero():
    assert parse_slice("[-0::]") == Slice(Head(0))


def test_blanks_are_ignored():
    assert parse_slice("  [ 1 : -2 : 3 ] ") == Slice(1, -2, 3)


def test_huge_integers():
    assert parse_slice("[-99999999999999999999999::]") == Slice(Tail(99999999999999999999999))


@pytest.mark.parametrize("s", [
    Slice(),
    Slice(1, -2, 1),
    Slice(Tail(3), step=-1),
    Slice(end=Head(0), step=0),
    Slice(Head(2**70), Tail(2**70), -(2**70)),
])
def test_render_round_trip(s):
    assert parse_slice(str(s)) == s


def test_parse_tree():
    assert parse_tree("[1::-1]").pretty() == snapshot("""\
slice
  field\t1
  field
  field\t-1
""")


def test_dump_parse(capsys):
    parse_slice("[1:2:3]", dump_parse=True)
    assert capsys.readouterr().out.startswith("slice\n")


def test_unexpected_character():
    with pytest.raises(SliceSyntaxError) as exc_info:
        parse_slice("[1:x:2]")
    e = exc_info.value
    assert e.code == "SE1002"
    assert e.details == {"char": "x"}
    assert e.span.col == 4
    assert str(e) == snapshot("SE1002: unexpected character 'x'")


def test_fourth_field():
    with pytest.raises(SliceSyntaxError) as exc_info:
        parse_slice("[1:2:3:4]")
    assert exc_info.value.code == "SE1003"
    assert exc_info.value.details["token"] == ":"
    assert exc_info.value.details["expected"] == "']'"


def test_missing_closing_bracket():
    with pytest.raises(SliceSyntaxError) as exc_info:
        parse_slice("[1:2")
    assert exc_info.value.code == "SE1004"


@pytest.mark.parametrize("text", ["", "[]", "1:2", "[1]", "[1 2:3]", "[--1::]", "[1:2:3]]"])
def test_malformed(text):
    with pytest.raises(SliceSyntaxError) as exc_info:
        parse_slice(text)
    assert exc_info.value.code.startswith("SE1")
    assert exc_info.value.__cause__ is not None


def test_dump_parse_prints_tree_once(capsys):
    parse_slice("[::2]", dump_parse=True)
    assert capsys.readouterr().out == "slice\n  field\n  field\n  field\t2\n"
