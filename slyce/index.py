"""Slice bound positions and their resolution against an array length.

An index is one of three variants:

- ``Head(n)``: position ``n`` counted from the front (``Head(0)`` is the first element)
- ``Tail(n)``: position ``len - n`` counted from the back (``Tail(1)`` is the last element)
- ``Default()``: no bound given; the caller picks one from the step direction

Resolution never fails. A position outside the array is clamped to the
nearest legal bound for the iteration direction:

- ascending  (step >= 0): ``[0, len]``, ``len`` being one past the end
- descending (step <  0): ``[-1, len - 1]``, ``-1`` being one before index 0
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Optional


def clamp(position: int, length: int, descending: bool) -> int:
    """Clamp a resolved position into the legal bound range for a direction."""
    if descending:
        low, high = -1, length - 1
    else:
        low, high = 0, length
    return min(max(position, low), high)


def _magnitude(n) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"index magnitude must be non-negative, got {n}")
    return n


@dataclass(frozen=True)
class Index:
    """Base of the slice bound variants; only Head, Tail and Default are built."""

    def __new__(cls, *args, **kwargs):
        if cls is Index:
            raise TypeError("Index cannot be built directly; use Head, Tail or Default")
        return super().__new__(cls)

    @staticmethod
    def of(value: Optional[int]) -> Index:
        """Map an optional signed integer to an index.

        ``None`` becomes ``Default()``, non-negative values ``Head(value)``
        and negative values ``Tail(-value)``.
        """
        if value is None:
            return Default()
        value = operator.index(value)
        if value < 0:
            return Tail(-value)
        return Head(value)

    def resolve(self, length: int, descending: bool) -> Optional[int]:
        """Resolve to a clamped absolute bound, or None for ``Default()``."""
        match self:
            case Head(n):
                position = n
            case Tail(n):
                position = length - n
            case Default():
                return None
            case _:
                from slyce.internals.errors import raise_internal_error
                raise_internal_error("IE0001", kind=type(self).__name__)
        return clamp(position, length, descending)


@dataclass(frozen=True)
class Head(Index):
    n: int

    def __post_init__(self):
        object.__setattr__(self, "n", _magnitude(self.n))

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class Tail(Index):
    n: int

    def __post_init__(self):
        object.__setattr__(self, "n", _magnitude(self.n))

    def __str__(self) -> str:
        return f"-{self.n}"


@dataclass(frozen=True)
class Default(Index):

    def __str__(self) -> str:
        return ""
