"""Step-aware counting iterator over resolved slice bounds."""
from __future__ import annotations


def span_length(start: int, end: int, step: int) -> int:
    """Number of positions ``start, start + step, ...`` strictly before ``end``.

    Equals ``max(0, ceil((end - start) / step))``; a zero step selects nothing.
    """
    if step > 0 and start < end:
        return (end - start - 1) // step + 1
    if step < 0 and start > end:
        return (start - end - 1) // -step + 1
    return 0


class StepRange:
    """Single-pass iterator yielding ``start``, ``start + step``, ... until ``end``.

    ``end`` is exclusive in the direction of travel, so a descending range
    with ``end == -1`` still reaches position 0.
    """

    __slots__ = ("_current", "_end", "_step")

    def __init__(self, start: int, end: int, step: int):
        self._current = start
        self._end = end
        self._step = step

    def __iter__(self) -> StepRange:
        return self

    def __next__(self) -> int:
        current = self._current
        if self._step > 0:
            if current >= self._end:
                raise StopIteration
        elif self._step < 0:
            if current <= self._end:
                raise StopIteration
        else:
            raise StopIteration
        self._current = current + self._step
        return current

    def __len__(self) -> int:
        return span_length(self._current, self._end, self._step)

    def __length_hint__(self) -> int:
        return len(self)

    def __repr__(self) -> str:
        return f"StepRange({self._current}, {self._end}, {self._step})"
