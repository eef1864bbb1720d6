"""Finder layer - Frequency to note resolution.

- NoteFinder: abstract interface
- ArrayNoteFinder: binary search over the equal-tempered note table
"""

from .base import NoteFinder
from .array import (
    ArrayNoteFinder,
    FrequencyOutOfRangeError,
    semitone_frequency,
)

__all__ = [
    "NoteFinder",
    "ArrayNoteFinder",
    "FrequencyOutOfRangeError",
    "semitone_frequency",
]
