"""Analysis layer - Pitch detection feeding the note finder."""

from .pitch import PitchAnalyzer

__all__ = ["PitchAnalyzer"]
