"""Array-backed note finder using binary search over the note table.

Resolution is accurate inside the tabulated range (16.3516 Hz to 5587.65 Hz).
Outside it the closest boundary note is still returned, but the deviation can
fall well outside the usual -100..100 band. Non-finite input produces a NaN
deviation. Pass ``strict=True`` to reject such input instead.
"""

import math

from .base import NoteFinder
from ..core import NoteResult
from ..core.constants import (
    NOTE_FREQUENCIES,
    NOTE_NAMES,
    REFERENCE_FREQUENCY,
    REFERENCE_INDEX,
    TWELFTH_ROOT_OF_TWO,
)

TIE_BREAK_RULES = ("nearest", "signed")


class FrequencyOutOfRangeError(ValueError):
    """Raised in strict mode for frequencies the note table cannot resolve."""


class ArrayNoteFinder(NoteFinder):
    """Resolves frequencies against the descending equal-tempered note table."""

    def __init__(
        self,
        tie_break: str = "nearest",
        strict: bool = False,
    ):
        """
        Initialize ArrayNoteFinder.

        Args:
            tie_break: How the final two candidates are compared.
                'nearest' picks the one with the smaller absolute distance.
                'signed' compares the raw differences, which always keeps
                the higher-pitched candidate (legacy behaviour).
            strict: Raise FrequencyOutOfRangeError for out-of-range or
                non-finite frequencies instead of returning a degraded result
        """
        if tie_break not in TIE_BREAK_RULES:
            raise ValueError(
                f"Unknown tie_break: {tie_break}. Supported: {TIE_BREAK_RULES}"
            )
        self.tie_break = tie_break
        self.strict = strict
        self.frequencies = NOTE_FREQUENCIES
        self.names = NOTE_NAMES

    @property
    def min_frequency(self) -> float:
        return self.frequencies[-1]

    @property
    def max_frequency(self) -> float:
        return self.frequencies[0]

    def in_range(self, frequency: float) -> bool:
        """Check whether a frequency lies inside the tabulated range."""
        return self.min_frequency <= frequency <= self.max_frequency

    def resolve(self, frequency: float) -> NoteResult:
        """
        Resolve a frequency to the closest note and its deviation.

        The deviation is a percentage of the distance to the adjacent
        semitone on the side the frequency lies: 0 on the tabulated pitch,
        negative when flat, positive when sharp.

        Args:
            frequency: Frequency in Hz

        Returns:
            NoteResult (unpacks as ``name, percent_diff``)

        Raises:
            FrequencyOutOfRangeError: In strict mode, if the frequency is
                non-finite or outside the table
        """
        frequency = float(frequency)
        if self.strict and not (math.isfinite(frequency) and self.in_range(frequency)):
            raise FrequencyOutOfRangeError(
                f"Frequency {frequency} Hz outside supported range "
                f"{self.min_frequency}-{self.max_frequency} Hz"
            )

        index = self.find_index(frequency)
        name = self.names[index % len(self.names)]

        return NoteResult(
            name=name,
            percent_diff=self._percent_diff(frequency, index),
            frequency=frequency,
            index=index,
        )

    def find_index(self, frequency: float) -> int:
        """
        Binary search for the index of the closest tabulated frequency.

        Returns:
            Index into the note table
        """
        table = self.frequencies

        # Outside the table the boundary note is the closest; NaN goes to the top
        if not frequency < table[0]:
            return 0
        if frequency <= table[-1]:
            return len(table) - 1

        low, high = 0, len(table) - 1

        while high - low > 1:
            mid = (low + high) // 2
            # Table is descending: lower frequencies sit at higher indices
            if frequency < table[mid]:
                low = mid
            else:
                high = mid

        low_diff = frequency - table[low]
        high_diff = frequency - table[high]

        if self.tie_break == "signed":
            return low if low_diff < high_diff else high
        return low if abs(low_diff) < abs(high_diff) else high

    def _percent_diff(self, frequency: float, index: int) -> float:
        """Signed percentage of the way toward the neighbouring semitone."""
        note_freq = self.frequencies[index]
        difference = frequency - note_freq

        # Flat: compare against the semitone below (next index), else above
        neighbour = index + 1 if difference < 0 else index - 1
        neighbour_freq = semitone_frequency(neighbour)

        return (difference * 100) / abs(neighbour_freq - note_freq)


def semitone_frequency(index: int) -> float:
    """
    Equal-tempered frequency of a table index: fn = f0 * a^n.

    Works for indices just outside the table, so boundary notes still have
    a neighbour to measure against.
    """
    n = REFERENCE_INDEX - index
    return REFERENCE_FREQUENCY * TWELFTH_ROOT_OF_TWO ** n
