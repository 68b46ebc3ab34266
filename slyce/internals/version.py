from __future__ import annotations
import sys, platform, datetime

from slyce import __version__ as app_ver, __dev__ as is_dev

def _ensure_utf8_stdout() -> None:
    try:
        sys.stdout.reconfigure(encoding="utf-8")
    except (AttributeError, ValueError, OSError):
        pass

def _get_versions() -> dict[str, str]:

    # lark (best-effort; don't crash if the metadata is missing)
    lark_ver = "unknown"
    try:
        import lark
        lark_ver = getattr(lark, "__version__", "unknown")
    except ImportError:
        pass

    return {
        "app": app_ver,
        "python": platform.python_version(),
        "lark": lark_ver,
    }

def print_banner() -> None:
    _ensure_utf8_stdout()
    v = _get_versions()
    today = datetime.date.today().isoformat()

    # Only use ANSI styling if stdout is a TTY (interactive terminal)
    use_ansi = sys.stdout.isatty()

    if use_ansi:
        BOLD, DIM, RESET = "\x1b[1m", "\x1b[2m", "\x1b[0m"
    else:
        BOLD, DIM, RESET = "", "", ""

    dev_marker = " (dev)" if is_dev else ""
    print(
        f"{BOLD} Slyce slice resolver{RESET} • {v['app']}{dev_marker}\n"
        f"{DIM}Python {v['python']} • lark {v['lark']} • {today}{RESET}"
    )
