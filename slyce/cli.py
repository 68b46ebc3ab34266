"""CLI entry point: slice a JSON array from stdin with a slice expression."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, TextIO

from slyce.internals import errors as er
from slyce.internals.report import Reporter
from slyce.slice import Slice


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="slyce",
        description="Apply a Python-style slice expression to a JSON array.",
        epilog="example: echo '[1,2,3]' | slyce '[::-1]'",
    )
    ap.add_argument("expr", nargs="?", help="Slice expression, e.g. '[1:-2:1]'")
    ap.add_argument("--version", action="store_true", help="Show version and exit")
    ap.add_argument(
        "--len",
        dest="length",
        type=int,
        metavar="N",
        help="Print the selected positions of a length-N array instead of reading stdin",
    )
    ap.add_argument("--dump-parse", action="store_true", help="Print raw Lark tree")
    ap.add_argument(
        "--canonical",
        action="store_true",
        help="Print the expression in canonical '[start:end:step]' form and exit",
    )
    return ap


def _read_array(stream: TextIO, reporter: Reporter) -> Optional[list]:
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        er.emit(reporter, er.ERR.SE2001, None, reason=e.msg)
        return None
    if not isinstance(data, list):
        er.emit(reporter, er.ERR.SE2002, None, kind=type(data).__name__)
        return None
    return data


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    from slyce.internals.parser import parse_slice
    from slyce.internals.parse_errors import handle_parse_exception

    expr = args.expr.strip()
    reporter = Reporter(source=expr)

    try:
        s = parse_slice(expr, dump_parse=args.dump_parse)
    except Exception as e:
        if not handle_parse_exception(e, reporter):
            raise
        reporter.print(stderr)
        return reporter.exit_code

    if args.canonical:
        print(s, file=stdout)
        return 0

    if s.step == 0:
        er.emit(reporter, er.ERR.SW0001, None)

    if args.length is not None:
        if args.length < 0:
            er.emit(reporter, er.ERR.SE2003, None, length=args.length)
            reporter.print(stderr)
            return reporter.exit_code
        result = list(s.indices(args.length))
    else:
        array = _read_array(stdin, reporter)
        if array is None:
            reporter.print(stderr)
            return reporter.exit_code
        result = list(s.apply(array))

    reporter.print(stderr)
    print(json.dumps(result), file=stdout)
    return reporter.exit_code


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 1 on success with warnings, 2 on errors.
    """
    args = build_parser().parse_args(argv)

    if args.version:
        from slyce.internals.version import print_banner
        print_banner()
        return 0

    if args.expr is None:
        print("error: slice expression required", file=sys.stderr)
        return 2

    return run(args, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
