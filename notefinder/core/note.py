"""NoteResult data class - the outcome of resolving one frequency."""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, Union

from .constants import DEFAULT_TOLERANCE, NOTE_FREQUENCIES, TOP_MIDI_PITCH


@dataclass(frozen=True)
class NoteResult:
    """Represents the note closest to a measured frequency."""

    name: str  # Pitch name without octave (e.g. 'A', 'C♯')
    percent_diff: float  # Signed deviation toward the adjacent semitone
    index: int  # Index into NOTE_FREQUENCIES
    frequency: float = 0.0  # Queried frequency in Hz

    def __iter__(self) -> Iterator[Union[str, float]]:
        """Allow `name, percent = result` unpacking."""
        yield self.name
        yield self.percent_diff

    @property
    def reference_frequency(self) -> float:
        """Tabulated frequency of the resolved note."""
        return NOTE_FREQUENCIES[self.index]

    @property
    def midi_pitch(self) -> int:
        """MIDI pitch of the resolved note (A4 = 69)."""
        return TOP_MIDI_PITCH - self.index

    @property
    def octave(self) -> int:
        """Scientific pitch notation octave."""
        return (self.midi_pitch // 12) - 1

    @property
    def pitch_name(self) -> str:
        """Get note name with octave (e.g., 'A4', 'C♯3')."""
        return f"{self.name}{self.octave}"

    @property
    def direction(self) -> str:
        """Reading classified at the default tolerance."""
        return self.classify()

    def classify(self, tolerance: float = DEFAULT_TOLERANCE) -> str:
        """Describe the reading as 'flat', 'sharp', 'in tune' or 'unknown' (NaN)."""
        if math.isnan(self.percent_diff):
            return "unknown"
        if self.is_in_tune(tolerance):
            return "in tune"
        return "flat" if self.percent_diff < 0 else "sharp"

    def is_in_tune(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True when the deviation magnitude is within tolerance percent."""
        return abs(self.percent_diff) <= tolerance

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output (non-finite values become None)."""
        data = asdict(self)
        for key in ("percent_diff", "frequency"):
            if not math.isfinite(data[key]):
                data[key] = None
        data["pitch_name"] = self.pitch_name
        data["reference_frequency"] = self.reference_frequency
        data["direction"] = self.direction
        return data
