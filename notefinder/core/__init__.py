"""Core types and constants for notefinder."""

from .note import NoteResult
from .constants import (
    NOTE_FREQUENCIES,
    NOTE_NAMES,
    REFERENCE_FREQUENCY,
    REFERENCE_INDEX,
    TWELFTH_ROOT_OF_TWO,
    MIN_FREQUENCY,
    MAX_FREQUENCY,
)

__all__ = [
    "NoteResult",
    "NOTE_FREQUENCIES",
    "NOTE_NAMES",
    "REFERENCE_FREQUENCY",
    "REFERENCE_INDEX",
    "TWELFTH_ROOT_OF_TWO",
    "MIN_FREQUENCY",
    "MAX_FREQUENCY",
]
