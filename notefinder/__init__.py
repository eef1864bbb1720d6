"""notefinder - Frequency to musical note resolution for tuners.

Architecture Layers:
    1. core/     - Note table, reference anchor, NoteResult
    2. finder/   - Frequency to note resolution (binary search)
    3. input/    - Audio loading
    4. analysis/ - f0 detection feeding the finder
"""

__version__ = "0.1.0"

# Core types
from .core import NoteResult

# Finder layer
from .finder import ArrayNoteFinder, NoteFinder, FrequencyOutOfRangeError

# Input layer
from .input import AudioLoader

# Analysis layer
from .analysis import PitchAnalyzer

_default_finder = ArrayNoteFinder()


def resolve(frequency: float) -> NoteResult:
    """Resolve a frequency with the default (non-strict) finder."""
    return _default_finder.resolve(frequency)


__all__ = [
    # Core
    "NoteResult",
    "resolve",
    # Finder
    "NoteFinder",
    "ArrayNoteFinder",
    "FrequencyOutOfRangeError",
    # Input
    "AudioLoader",
    # Analysis
    "PitchAnalyzer",
]
