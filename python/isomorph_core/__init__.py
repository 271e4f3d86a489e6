"""Core utilities for isomorph detection in ciphertexts and other symbol sequences."""

from .errors import (
    IsomorphError,
    InvalidWindowLengthError,
    SequenceTooShortError,
    MalformedPatternError,
)
from .pattern import (
    Pattern,
    to_pattern,
)
from .window import SlidingWindow
from .search import (
    TiePolicy,
    find_pattern,
    scan_length,
    get_isomorphs,
)

__all__ = [
    "IsomorphError",
    "InvalidWindowLengthError",
    "SequenceTooShortError",
    "MalformedPatternError",
    "Pattern",
    "to_pattern",
    "SlidingWindow",
    "TiePolicy",
    "find_pattern",
    "scan_length",
    "get_isomorphs",
]
