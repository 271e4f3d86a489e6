"""Repeat-distance patterns.

A pattern describes a window of a sequence by where its symbols recur, not
by the symbols themselves. ``distances[i] = d`` means the element at
position ``i`` reappears ``d`` positions later inside the same window;
``0`` means it does not reappear. Two windows with different symbols but
the same distances are isomorphs, e.g. ``"xyzx"`` and ``"qrsq"`` both give
``(3, 0, 0, 0)``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

from .errors import MalformedPatternError

LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
TOO_COMPLEX = "<Pattern too complex>"

SortKey = Tuple[int, int, Tuple[int, ...]]


@functools.total_ordering
@dataclass(frozen=True)
class Pattern:
    """Immutable repeat-distance vector of one window.

    Equality and hashing use the distances only. Ordering follows
    :attr:`sort_key`: longer patterns first, then higher significance, then
    the distances in ascending lexicographic order.
    """

    distances: Tuple[int, ...] = ()
    significance: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        raw = tuple(self.distances)
        distances = tuple(int(d) for d in raw)
        if distances != raw:
            raise ValueError(f"pattern distances must be integers, got {raw}")
        if any(d < 0 for d in distances):
            raise ValueError(f"pattern distances must be non-negative, got {distances}")
        object.__setattr__(self, "distances", distances)
        object.__setattr__(self, "significance", sum(1 for d in distances if d))

    def __len__(self) -> int:
        return len(self.distances)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def sort_key(self) -> SortKey:
        return (-len(self.distances), -self.significance, self.distances)

    def canonical_labels(self) -> Tuple[int, ...]:
        """Return one class index per position, numbering classes by first appearance.

        Positions linked by a chain of distances share a class. Raises
        :class:`MalformedPatternError` if a chain steps outside the pattern.
        """

        size = len(self.distances)
        labels: List[int] = [-1] * size
        next_label = 0
        for start in range(size):
            if labels[start] != -1:
                continue
            labels[start] = next_label
            pos = start
            while self.distances[pos]:
                pos += self.distances[pos]
                if pos >= size:
                    raise MalformedPatternError(
                        f"distance chain from position {start} leaves pattern of length {size}"
                    )
                labels[pos] = next_label
            next_label += 1
        return tuple(labels)

    def to_string(self) -> str:
        """Render the canonical form, e.g. ``"ABCA"`` for ``(3, 0, 0, 0)``."""

        labels = self.canonical_labels()
        if labels and max(labels) >= len(LABELS):
            return TOO_COMPLEX
        return "".join(LABELS[label] for label in labels)

    def is_part_of(self, other: Pattern) -> bool:
        """Return True if this pattern appears as a contiguous piece of ``other``.

        At each alignment every distance must match, except that a distance in
        ``other`` which jumps past the end of the aligned piece counts as zero,
        since that repeat is invisible to the shorter window.
        """

        size = len(self.distances)
        if size > len(other.distances):
            return False
        if size == len(other.distances):
            return self.distances == other.distances
        for offset in range(len(other.distances) - size + 1):
            for i, mine in enumerate(self.distances):
                theirs = other.distances[offset + i]
                if mine == theirs:
                    continue
                if mine or i + theirs < size:
                    break
            else:
                return True
        return False


def to_pattern(sequence: Sequence[Any], begin: int = 0, end: int | None = None) -> Pattern:
    """Build the pattern of ``sequence[begin:end]`` from scratch.

    ``end`` defaults to, and is clamped to, the length of the sequence. An
    empty range gives the empty pattern; a negative ``begin`` raises
    ``ValueError``. This is quadratic in the window length; use
    :class:`~isomorph_core.window.SlidingWindow` to move a window along a
    sequence.
    """

    if begin < 0:
        raise ValueError(f"range begin must be non-negative, got {begin}")
    if end is None or end > len(sequence):
        end = len(sequence)
    if begin >= end:
        return Pattern()
    distances = [0] * (end - begin)
    for i in range(begin, end - 1):
        value = sequence[i]
        for j in range(i + 1, end):
            if sequence[j] == value:
                distances[i - begin] = j - i
                break
    return Pattern(tuple(distances))
