"""Exceptions raised by the isomorph search."""


class IsomorphError(Exception):
    """Base exception for isomorph search errors."""

    pass


class InvalidWindowLengthError(IsomorphError, ValueError):
    """Raised when a sliding window is requested with fewer than two positions."""

    pass


class SequenceTooShortError(IsomorphError, ValueError):
    """Raised when the sequence cannot hold a single window of the requested length."""

    pass


class MalformedPatternError(IsomorphError, RuntimeError):
    """Raised when following a pattern's distances leaves the pattern.

    Patterns built by :func:`~isomorph_core.pattern.to_pattern` or a
    :class:`~isomorph_core.window.SlidingWindow` never trigger this; only a
    hand-constructed ``Pattern`` can.
    """

    pass
