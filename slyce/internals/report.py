from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Any

from lark import Token

class C:
    """ANSI color/style escape codes."""
    RESET = "\x1b[0m"
    BOLD  = "\x1b[1m"
    DIM   = "\x1b[2m"
    RED   = "\x1b[31m"
    YELLOW = "\x1b[33m"
    CYAN  = "\x1b[36m"
    GRAY  = "\x1b[90m"

@dataclass
class Span:
    line: int
    col: int
    end_line: int
    end_col: int

@dataclass
class Diagnostic:
    kind: str
    code: str
    message: str
    span: Optional[Span] = None

def span_of(t: Any) -> Optional[Span]:
    """Span of a Lark tree, token or parse exception, if it carries a position."""
    m = getattr(t, "meta", None)
    if m is not None and not getattr(m, "empty", True):
        return Span(m.line, m.column, m.end_line, m.end_column)
    line = getattr(t, "line", None)
    col = getattr(t, "column", None)
    if line is None or col is None or line < 1 or col < 1:
        return None
    if isinstance(t, Token):
        return Span(line, col, t.end_line or line, t.end_column or col)
    return Span(line, col, line, col + 1)


class Reporter:
    def __init__(self, source: Optional[str] = None, filename: str = "<expr>") -> None:
        self.source = source
        self.filename = filename
        self.items: List[Diagnostic] = []

    def error(self, code: str, msg: str, span: Optional[Span]):
        self.items.append(Diagnostic("error", code, msg, span))

    def warn(self, code: str, msg: str, span: Optional[Span]):
        self.items.append(Diagnostic("warning", code, msg, span))

    @property
    def has_errors(self) -> bool:
        return any(d.kind == "error" for d in self.items)

    @property
    def has_warnings(self) -> bool:
        return any(d.kind == "warning" for d in self.items)

    @property
    def exit_code(self) -> int:
        """0 when clean, 1 with warnings only, 2 with errors."""
        if self.has_errors:
            return 2
        if self.has_warnings:
            return 1
        return 0

    def format(self, use_color: bool = True, use_unicode: bool = True) -> str:
        """Render all diagnostics.

        use_color   → ANSI colorize location/kind/guide/markers
        use_unicode → use │ / ╰ / ╯ guides around the source line
        """
        out: List[str] = []
        src_lines = self.source.splitlines() if self.source else None

        for d in self.items:
            loc = f"{self.filename}:{d.span.line}:{d.span.col}" if d.span else self.filename

            # Ensure message ends with period
            message = d.message if d.message.endswith('.') else f"{d.message}."

            if use_color:
                kind = f"{C.BOLD}{C.RED}error{C.RESET}" if d.kind == "error" else f"{C.BOLD}{C.YELLOW}warning{C.RESET}"
                head = f"{C.CYAN}{loc}{C.RESET}: {kind} [{C.DIM}{d.code}{C.RESET}]: {message}"
            else:
                head = f"{loc}: {d.kind} [{d.code}]: {message}"

            if not d.span:
                out.append(head)
                continue

            line_idx = d.span.line - 1
            if src_lines is not None and 0 <= line_idx < len(src_lines):
                line_text = src_lines[line_idx]
            else:
                line_text = ""

            # 1-based columns
            start = max(1, d.span.col)

            if use_unicode:
                gray = (lambda s: f"{C.GRAY}{s}{C.RESET}") if use_color else (lambda s: s)
                marker_color = C.RED if d.kind == "error" else C.YELLOW
                caret = " " * (start - 1) + "┯"
                if use_color:
                    caret = f"{marker_color}{caret}{C.RESET}"
                out.append(f"{gray('  ╭──┤ ')}{head}")
                out.append(f"{gray('  │')}  {line_text}")
                out.append(f"{gray('  │')}  {caret}")
                out.append(f"{gray('  ╰' + '─' * (start + 1))}{'╯'}")
            else:
                # ASCII fallback: header on top, then source and caret
                out.append(head)
                out.append(f"  | {line_text}")
                out.append(f"  ` {' ' * (start - 1) + '^'}")

        return "\n".join(out)

    def print(self, stream=None, use_color: Optional[bool] = None, use_unicode: Optional[bool] = None) -> None:
        """Print diagnostics to `stream` (default: sys.stderr).

        Color is auto-enabled for TTY unless NO_COLOR or TERM=dumb.
        Unicode guides are auto-enabled for TTY unless NO_UNICODE or TERM=dumb.
        """
        import os, sys
        stream = stream or sys.stderr

        is_tty = getattr(stream, "isatty", lambda: False)()
        dumb = os.getenv("TERM") == "dumb"

        if use_color is None:
            use_color = bool(is_tty and os.getenv("NO_COLOR") is None and not dumb)

        if use_unicode is None:
            use_unicode = bool(is_tty and os.getenv("NO_UNICODE") is None and not dumb)

        text = self.format(use_color=use_color, use_unicode=use_unicode)
        if text:
            print(text, file=stream)
