"""Isomorph discovery and pattern lookup over a whole sequence."""

from __future__ import annotations

import enum
import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from .pattern import Pattern
from .window import SlidingWindow

logger = logging.getLogger(__name__)

Occurrences = Dict[Pattern, List[int]]


class TiePolicy(str, enum.Enum):
    """What to do with a sub-pattern that occurs exactly as often as its parent.

    ``DROP`` prunes it (a sub-pattern only stands on its own when it occurs
    more often than the longer pattern containing it). ``KEEP`` retains it.
    """

    DROP = "drop"
    KEEP = "keep"


def find_pattern(sequence: Sequence[Any], target: Pattern) -> List[int]:
    """Return every offset at which ``target`` occurs, in ascending order.

    This is an exact lookup: no significance or fill criteria are applied.
    To search for a shape written as a canonical form, build the target with
    ``to_pattern("ABCA")``.
    """

    length = len(target)
    if length == 0 or length > len(sequence):
        return []
    if length == 1:
        # Every single element has the pattern (0,); windows start at 2.
        return list(range(len(sequence))) if target.distances == (0,) else []

    offsets: List[int] = []
    window = SlidingWindow(sequence, length)
    while True:
        if window.significance == target.significance and window.pattern == target:
            offsets.append(window.offset)
        if not window.advance():
            break
    return offsets


def scan_length(
    sequence: Sequence[Any],
    length: int,
    min_significance: int = 2,
) -> Occurrences:
    """Collect the candidate patterns of one window length, unpruned.

    A window is recorded when its significance reaches ``min_significance``
    and it is filled, or when it has no repeats at all (only reachable with
    ``min_significance=0``). Patterns appear in order of first occurrence.
    """

    found: Occurrences = {}
    window = SlidingWindow(sequence, length)
    while True:
        significance = window.significance
        if significance >= min_significance and (window.is_filled() or significance == 0):
            found.setdefault(window.pattern, []).append(window.offset)
        if not window.advance():
            break
    return found


def _scan_length_job(args: Tuple[Sequence[Any], int, int]) -> Tuple[int, Occurrences]:
    sequence, length, min_significance = args
    return length, scan_length(sequence, length, min_significance)


def _is_subsumed(
    pattern: Pattern,
    count: int,
    retained: Mapping[Pattern, List[int]],
    tie_policy: TiePolicy,
) -> bool:
    for parent, parent_offsets in retained.items():
        if len(parent) <= len(pattern):
            continue
        parent_count = len(parent_offsets)
        outnumbered = (
            count <= parent_count if tie_policy is TiePolicy.DROP else count < parent_count
        )
        if outnumbered and pattern.is_part_of(parent):
            return True
    return False


def _prune(
    candidates: Occurrences,
    retained: Occurrences,
    tie_policy: TiePolicy,
) -> Occurrences:
    kept: Occurrences = {}
    for pattern in sorted(candidates):
        offsets = candidates[pattern]
        if len(offsets) < 2:
            continue
        if _is_subsumed(pattern, len(offsets), retained, tie_policy):
            continue
        kept[pattern] = offsets
    return kept


def _resolve_bounds(
    size: int,
    min_length: int,
    max_length: int | None,
    min_significance: int,
) -> Tuple[int, int]:
    if min_length < 0 or min_significance < 0 or (max_length is not None and max_length < 0):
        raise ValueError(
            "min_length, max_length and min_significance must be non-negative, got "
            f"{min_length}, {max_length}, {min_significance}"
        )
    if min_length == 0:
        min_length = min_significance + 1
    if min_length < 2:
        logger.debug("Raising min_length from %d to 2", min_length)
        min_length = 2
    # A pattern longer than half the sequence cannot occur twice.
    if max_length is None or max_length > size // 2:
        max_length = size // 2
    return min_length, max_length


def get_isomorphs(
    sequence: Sequence[Any],
    min_length: int = 3,
    max_length: int | None = None,
    min_significance: int = 2,
    *,
    tie_policy: Union[TiePolicy, str] = TiePolicy.DROP,
    max_workers: int = 1,
) -> Occurrences:
    """Find the repeated patterns of ``sequence`` and where they occur.

    Parameters
    ----------
    sequence
        Any indexable sequence whose elements support ``==``.
    min_length / max_length
        Window lengths to scan. ``max_length`` defaults to, and is clamped
        to, half the sequence length. ``min_length=0`` means
        ``min_significance + 1``.
    min_significance
        Minimum number of repeating positions a window must contain.
    tie_policy
        Whether a sub-pattern occurring as often as a longer pattern that
        contains it is dropped (default) or kept.
    max_workers
        Run the per-length scans in a process pool when greater than 1. The
        result does not depend on this setting.

    Returns
    -------
    dict
        ``{Pattern: [offsets]}`` ordered by descending length, descending
        significance, then ascending distances. Every pattern occurs at two
        or more ascending offsets, and no pattern is contained in a longer
        result pattern that occurs at least as often.
    """

    tie_policy = TiePolicy(tie_policy)
    size = len(sequence)
    min_length, max_length = _resolve_bounds(size, min_length, max_length, min_significance)
    if min_length >= size or max_length < min_length:
        logger.debug(
            "No window length to scan (size=%d, min_length=%d, max_length=%d)",
            size,
            min_length,
            max_length,
        )
        return {}

    lengths = range(max_length, min_length - 1, -1)
    retained: Occurrences = {}
    for length, candidates in _scan_lengths(sequence, lengths, min_significance, max_workers):
        kept = _prune(candidates, retained, tie_policy)
        logger.debug(
            "Window length %d: %d candidate patterns, %d retained",
            length,
            len(candidates),
            len(kept),
        )
        retained.update(kept)

    return {pattern: retained[pattern] for pattern in sorted(retained)}


def _scan_lengths(
    sequence: Sequence[Any],
    lengths: Iterable[int],
    min_significance: int,
    max_workers: int,
) -> Iterable[Tuple[int, Occurrences]]:
    """Yield ``(length, candidates)`` in the order of ``lengths``."""

    if max_workers <= 1:
        for length in lengths:
            yield length, scan_length(sequence, length, min_significance)
        return
    jobs = [(sequence, length, min_significance) for length in lengths]
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        # map() preserves submission order, so pruning still runs longest first.
        yield from executor.map(_scan_length_job, jobs)
