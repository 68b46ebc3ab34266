"""Slice descriptor and its resolution into array positions."""
from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple, TypeVar, Union

from slyce.index import Index, Default, Tail
from slyce.ranges import StepRange

T = TypeVar("T")

Bound = Union[Index, int, None]


def _as_index(value: Bound) -> Index:
    if isinstance(value, Index):
        return value
    return Index.of(value)


@dataclass(frozen=True)
class Slice:
    """A ``start:end:step`` triple, independent of any array length.

    ``start`` and ``end`` accept an ``Index``, a signed int or None;
    ``step`` defaults to 1 when None and selects nothing when 0.

    Example:
        >>> list(Slice(-3).apply([10, 20, 30, 40, 50]))
        [30, 40, 50]
        >>> list(Slice(4, 0, -1).indices(5))
        [4, 3, 2, 1]
    """
    start: Index = field(default_factory=Default)
    end: Index = field(default_factory=Default)
    step: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "start", _as_index(self.start))
        object.__setattr__(self, "end", _as_index(self.end))
        if self.step is not None:
            object.__setattr__(self, "step", operator.index(self.step))

    @classmethod
    def from_builtin(cls, s: slice) -> Slice:
        """Build from a Python ``slice`` object (``slice(1, -2)`` -> ``[1:-2:]``)."""
        return cls(s.start, s.stop, s.step)

    @classmethod
    def parse(cls, text: str) -> Slice:
        """Parse a textual slice expression such as ``"[1:-2:1]"``."""
        from slyce.internals.parser import parse_slice
        return parse_slice(text)

    def bounds(self, length: int) -> Tuple[int, int, int]:
        """Resolve to ``(start, end, step)`` for an array of ``length`` elements.

        Ascending bounds lie in ``[0, length]``; descending bounds lie in
        ``[-1, length - 1]`` where an end of -1 means "up to and including 0".
        """
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"array length must be non-negative, got {length}")

        step = 1 if self.step is None else self.step
        descending = step < 0

        if descending:
            default_start = Tail(1).resolve(length, descending)
            default_end = -1
        else:
            default_start = 0
            default_end = length

        start = self.start.resolve(length, descending)
        end = self.end.resolve(length, descending)
        return (
            default_start if start is None else start,
            default_end if end is None else end,
            step,
        )

    def indices(self, length: int) -> StepRange:
        """Lazily yield the selected positions of a ``length``-element array."""
        return StepRange(*self.bounds(length))

    def apply(self, sequence: Sequence[T]) -> Iterator[T]:
        """Lazily yield the selected elements of ``sequence`` in slice order."""
        return map(sequence.__getitem__, self.indices(len(sequence)))

    def __str__(self) -> str:
        step = "" if self.step is None else str(self.step)
        return f"[{self.start}:{self.end}:{step}]"
