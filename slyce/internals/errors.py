"""Coded diagnostics for slice expressions and CLI input.

Codes by range: IE0xxx internal, SW0xxx warnings, SE1xxx syntax, SE2xxx input.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional

from slyce.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    SYNTAX    = "syntax"
    INPUT     = "input"
    INTERNAL  = "internal"
    GENERAL   = "general"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""

    def render(self, **details) -> str:
        """Fill the text template; every placeholder must be supplied."""
        try:
            return self.text.format(**details)
        except KeyError as e:
            raise KeyError(f"{self.code} needs '{e.args[0]}' to render {self.text!r}") from None


class Catalog:
    """Registry of diagnostics, reachable as ``ERR.SE1002`` or ``ERR["SE1002"]``."""

    def __init__(self) -> None:
        self._messages: Dict[str, ErrorMessage] = {}

    def register(self, msg: ErrorMessage) -> ErrorMessage:
        if msg.code in self._messages:
            raise ValueError(f"error code {msg.code} is already registered")
        self._messages[msg.code] = msg
        return msg

    def __getattr__(self, code: str) -> ErrorMessage:
        if code.startswith("_"):
            raise AttributeError(code)
        try:
            return self._messages[code]
        except KeyError:
            raise AttributeError(f"unknown error code: {code}") from None

    def __getitem__(self, code: str) -> ErrorMessage:
        try:
            return self._messages[code]
        except KeyError:
            raise KeyError(f"unknown error code: {code}") from None

    def __iter__(self) -> Iterator[ErrorMessage]:
        return iter(self._messages.values())


ERR = Catalog()


def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], **details) -> None:
    """Record ``em`` on the reporter as an error or a warning."""
    text = em.render(**details)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, span)
    else:
        r.warn(em.code, text, span)


def raise_internal_error(code: str, **details) -> None:
    """Raise RuntimeError for an IE code; these signal slyce bugs, never bad input."""
    raise RuntimeError(f"{code}: {ERR[code].render(**details)}")


#
# --- Registry population
#

# Internal errors (slyce bugs) - IE0xxx range
ERR.register(ErrorMessage("IE0001", Severity.ERROR,
    "unknown index kind '{kind}'",
    Category.INTERNAL, "Index is not one of Head, Tail or Default."))

# Warnings - SW0xxx range
ERR.register(ErrorMessage("SW0001", Severity.WARNING,
    "step is zero, the slice selects nothing",
    Category.GENERAL, "A zero step yields an empty result instead of an error."))

# Syntax errors - SE1xxx range
ERR.register(ErrorMessage("SE1001", Severity.ERROR,
    "malformed slice expression",
    Category.SYNTAX, "Expected '[start:end:step]' or '[start:end]'."))

ERR.register(ErrorMessage("SE1002", Severity.ERROR,
    "unexpected character '{char}'",
    Category.SYNTAX, "Fields may only hold an optional '-' followed by decimal digits."))

ERR.register(ErrorMessage("SE1003", Severity.ERROR,
    "unexpected '{token}', expected {expected}",
    Category.SYNTAX, "Tokens appear out of order, e.g. a missing ':' or a fourth field."))

ERR.register(ErrorMessage("SE1004", Severity.ERROR,
    "unexpected end of slice expression, expected {expected}",
    Category.SYNTAX, "The expression stops before its closing ']'."))

# Input errors - SE2xxx range
ERR.register(ErrorMessage("SE2001", Severity.ERROR,
    "input is not valid JSON: {reason}",
    Category.INPUT, "The array read from standard input could not be decoded."))

ERR.register(ErrorMessage("SE2002", Severity.ERROR,
    "input must be a JSON array, got {kind}",
    Category.INPUT, "Only arrays can be sliced."))

ERR.register(ErrorMessage("SE2003", Severity.ERROR,
    "array length must be non-negative, got {length}",
    Category.INPUT, "The --len option takes the length of the array to slice."))
