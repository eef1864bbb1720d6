"""Base classes for note finding."""

import math
from abc import ABC, abstractmethod
from typing import Iterable, List

from ..core import NoteResult


class NoteFinder(ABC):
    """Abstract base class for frequency-to-note resolution."""

    @abstractmethod
    def resolve(self, frequency: float) -> NoteResult:
        """
        Resolve a frequency to the closest note.

        Args:
            frequency: Frequency in Hz

        Returns:
            NoteResult with note name and percentage deviation
        """
        pass

    def resolve_many(self, frequencies: Iterable[float]) -> List[NoteResult]:
        """
        Resolve a sequence of frequencies, e.g. an f0 track.

        Unvoiced entries (NaN or non-positive) are skipped.

        Args:
            frequencies: Iterable of frequencies in Hz (list or numpy array)

        Returns:
            List of results, one per voiced frequency
        """
        results = []
        for freq in frequencies:
            freq = float(freq)
            if math.isnan(freq) or freq <= 0:
                continue
            results.append(self.resolve(freq))
        return results
