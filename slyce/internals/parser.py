"""Lark parser setup for textual slice expressions like ``[1:-2:1]``."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from lark import Lark, Transformer, UnexpectedInput, UnexpectedCharacters, UnexpectedToken

from slyce.index import Index
from slyce.internals.errors import ERR
from slyce.internals.report import Span, span_of
from slyce.slice import Slice

GRAMMAR_PATH = Path(__file__).parent.parent / "grammar.lark"

# Terminal names as Lark reports them, spelled the way a user types them
TERMINAL_NAMES = {
    "LSQB": "'['",
    "RSQB": "']'",
    "COLON": "':'",
    "INT": "an integer",
    "$END": "end of input",
}

_parser: Optional[Lark] = None


class SliceSyntaxError(Exception):
    """Exception raised when a slice expression cannot be parsed."""
    def __init__(self, code: str, span: Optional[Span] = None, **details):
        self.code = code
        self.span = span
        self.details = details
        super().__init__(f"{code}: {ERR[code].render(**details)}")


class SliceBuilder(Transformer):
    """Turn a ``slice`` parse tree into a ``Slice``."""

    def field(self, children) -> Optional[int]:
        return int(children[0]) if children else None

    def slice(self, children) -> Slice:
        start, end, *rest = children
        step = rest[0] if rest else None
        return Slice(Index.of(start), Index.of(end), step)


def get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark.open(
            str(GRAMMAR_PATH),
            parser="lalr",
            lexer="basic",
            propagate_positions=True,
        )
    return _parser


def _expected(names) -> str:
    readable = sorted(TERMINAL_NAMES.get(n, n) for n in names)
    if not readable:
        return "nothing"
    if len(readable) == 1:
        return readable[0]
    return ", ".join(readable[:-1]) + " or " + readable[-1]


def improve_parse_error(e: UnexpectedInput) -> SliceSyntaxError:
    """Translate a Lark error into a coded, positioned syntax error."""
    span = span_of(e)

    if isinstance(e, UnexpectedCharacters):
        return SliceSyntaxError("SE1002", span, char=e.char)

    if isinstance(e, UnexpectedToken):
        expected = _expected(e.accepts or e.expected)
        if e.token.type == "$END":
            return SliceSyntaxError("SE1004", span, expected=expected)
        return SliceSyntaxError("SE1003", span, token=str(e.token), expected=expected)

    expected = getattr(e, "expected", None)
    if expected:
        return SliceSyntaxError("SE1004", span, expected=_expected(expected))

    return SliceSyntaxError("SE1001", span)


def parse_tree(src: str):
    """Parse a slice expression into its raw Lark tree."""
    try:
        return get_parser().parse(src)
    except UnexpectedInput as e:
        raise improve_parse_error(e) from e


def parse_slice(src: str, dump_parse: bool = False) -> Slice:
    """Parse a slice expression such as ``"[::-1]"`` into a ``Slice``.

    Empty fields become ``Default()`` (or a None step); negative integers
    count from the back. Surrounding and inline blanks are ignored.

    Raises:
        SliceSyntaxError: the text is not a bracketed slice expression.
    """
    tree = parse_tree(src)
    if dump_parse:
        print(tree.pretty(), end="")
    return SliceBuilder().transform(tree)
