"""Shared parse exception handling for the CLI and library callers."""
from __future__ import annotations

from slyce.internals import errors as er
from slyce.internals.parser import SliceSyntaxError
from slyce.internals.report import Reporter


def handle_parse_exception(exc: Exception, reporter: Reporter) -> bool:
    """Handle a parse exception by emitting diagnostics through the reporter.

    Returns:
        True if the exception was handled, False otherwise.
    """
    if isinstance(exc, SliceSyntaxError):
        er.emit(reporter, er.ERR[exc.code], exc.span, **exc.details)
        return True

    return False
