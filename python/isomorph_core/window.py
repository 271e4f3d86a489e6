"""Incremental pattern maintenance for a fixed-length window."""

from __future__ import annotations

from typing import Any, List, Sequence

from .errors import InvalidWindowLengthError, SequenceTooShortError
from .pattern import Pattern, to_pattern


class SlidingWindow:
    """A fixed-length view over a sequence whose pattern is updated per shift.

    The window starts at offset 0. Each :meth:`advance` costs O(length): the
    leading distance is dropped and only the newly included element needs a
    backward scan, since every other position keeps its nearest later partner.
    The sequence is borrowed and must not change while the window is in use.
    """

    def __init__(self, sequence: Sequence[Any], length: int) -> None:
        if length < 2:
            raise InvalidWindowLengthError(
                f"window length must be at least 2, got {length}"
            )
        if len(sequence) < length:
            raise SequenceTooShortError(
                f"sequence of length {len(sequence)} is shorter than window length {length}"
            )
        self._sequence = sequence
        self._length = length
        self._offset = 0
        seed = to_pattern(sequence, 0, length)
        self._distances: List[int] = list(seed.distances)
        self._significance = seed.significance
        self._first_repeated = self._distances[0] != 0
        last = sequence[length - 1]
        self._last_repeated = any(
            sequence[i] == last for i in range(length - 2, -1, -1)
        )

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def length(self) -> int:
        return self._length

    @property
    def significance(self) -> int:
        return self._significance

    @property
    def pattern(self) -> Pattern:
        """Snapshot of the current pattern, independent of later shifts."""
        return Pattern(tuple(self._distances))

    @property
    def first_repeated(self) -> bool:
        return self._first_repeated

    @property
    def last_repeated(self) -> bool:
        return self._last_repeated

    def advance(self) -> bool:
        """Shift the window one position right; False once it touches the end."""

        if self._offset + self._length == len(self._sequence):
            return False
        self._offset += 1
        if self._distances.pop(0):
            self._significance -= 1
        self._distances.append(0)

        end = self._offset + self._length - 1
        value = self._sequence[end]
        self._last_repeated = False
        for diff in range(1, self._length):
            if self._sequence[end - diff] == value:
                self._distances[self._length - 1 - diff] = diff
                self._significance += 1
                self._last_repeated = True
                break
        self._first_repeated = self._distances[0] != 0
        return True

    def is_filled(self) -> bool:
        """True when both the first and the last element recur inside the window.

        Otherwise the repeat structure seen here belongs to a shorter window
        and should not be credited to this length.
        """

        return self._first_repeated and self._last_repeated

    def __repr__(self) -> str:
        return (
            f"SlidingWindow(length={self._length}, offset={self._offset}, "
            f"distances={tuple(self._distances)})"
        )
