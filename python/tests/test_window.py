"""Tests for the incremental sliding window."""

import pytest

from isomorph_core import (
    InvalidWindowLengthError,
    SequenceTooShortError,
    SlidingWindow,
    to_pattern,
)


PI_DIGITS = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 7, 9]


@pytest.mark.parametrize(
    "sequence, length",
    [
        ("aabaab", 2),
        ("aabaab", 3),
        ("aabaab", 5),
        ("aabaab", 6),
        ("abbaXabbaYbb", 2),
        ("abbaXabbaYbb", 3),
        ("abbaXabbaYbb", 5),
        ("abbaXabbaYbb", 8),
        ("aaaaaaaa", 2),
        ("aaaaaaaa", 5),
        ("aaaaaaaa", 8),
        (PI_DIGITS, 2),
        (PI_DIGITS, 3),
        (PI_DIGITS, 5),
        (PI_DIGITS, 8),
    ],
)
def test_incremental_matches_from_scratch(sequence, length):
    """Every shifted pattern equals the pattern built directly for that range."""
    window = SlidingWindow(sequence, length)
    offsets = []
    while True:
        offset = window.offset
        offsets.append(offset)
        assert window.pattern == to_pattern(sequence, offset, offset + length)
        assert window.significance == window.pattern.significance
        if not window.advance():
            break
    assert offsets == list(range(len(sequence) - length + 1))


@pytest.mark.parametrize("length", [-1, 0, 1])
def test_rejects_short_window(length):
    with pytest.raises(InvalidWindowLengthError):
        SlidingWindow("abcdef", length)


def test_rejects_short_sequence():
    with pytest.raises(SequenceTooShortError):
        SlidingWindow("abc", 4)


def test_errors_are_value_errors():
    """Callers validating lengths can catch the built-in type."""
    with pytest.raises(ValueError):
        SlidingWindow("abc", 1)
    with pytest.raises(ValueError):
        SlidingWindow("abc", 4)


def test_window_covering_whole_sequence_cannot_advance():
    window = SlidingWindow("abca", 4)

    assert window.advance() is False
    assert window.offset == 0
    assert window.pattern == to_pattern("abca")


def test_pattern_snapshot_survives_advance():
    """The pattern handed out is a value, not a view of the live window."""
    window = SlidingWindow("abab", 2)
    first = window.pattern
    window.advance()

    assert first.distances == (0, 0)
    assert window.offset == 1
    assert window.length == 2


def test_two_element_window_sees_first_position():
    """The last element's partner may sit at the very first position."""
    window = SlidingWindow("aab", 2)

    assert window.first_repeated
    assert window.last_repeated
    assert window.is_filled()


def test_fill_state_follows_the_window():
    window = SlidingWindow("aaba", 3)

    # "aab": the trailing b has no partner.
    assert window.first_repeated
    assert not window.last_repeated
    assert not window.is_filled()

    # "aba": both ends repeat.
    assert window.advance()
    assert window.pattern.distances == (2, 0, 0)
    assert window.is_filled()


def test_incremental_matches_from_scratch_on_ciphertext(ciphertext):
    """Long windows over a real ciphertext stay in step with the direct construction."""
    for length in (3, 11, 25):
        window = SlidingWindow(ciphertext, length)
        while window.advance():
            offset = window.offset
            assert window.pattern == to_pattern(ciphertext, offset, offset + length)
