"""Slyce - Python-style slice resolution over arrays of known length."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("slyce")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from slyce.index import Index, Head, Tail, Default, clamp
from slyce.ranges import StepRange, span_length
from slyce.slice import Slice

__all__ = [
    'Index',
    'Head',
    'Tail',
    'Default',
    'clamp',
    'StepRange',
    'span_length',
    'Slice',
]
