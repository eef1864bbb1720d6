"""Fundamental frequency estimation feeding the note finder."""

import numpy as np
import librosa
from typing import List, Optional, Tuple

from ..core import NoteResult
from ..core.constants import DEFAULT_FMAX, DEFAULT_FMIN, DEFAULT_HOP_LENGTH, DEFAULT_SR
from ..finder import ArrayNoteFinder, NoteFinder

PITCH_METHODS = ("pyin", "yin")


class PitchAnalyzer:
    """Detects f0 in a signal and resolves it to tuner readings."""

    def __init__(
        self,
        sr: int = DEFAULT_SR,
        hop_length: int = DEFAULT_HOP_LENGTH,
        fmin: float = DEFAULT_FMIN,
        fmax: float = DEFAULT_FMAX,
        finder: Optional[NoteFinder] = None,
    ):
        self.sr = sr
        self.hop_length = hop_length
        self.fmin = fmin
        self.fmax = fmax
        self.finder = finder or ArrayNoteFinder()

    def detect_f0(
        self,
        audio: np.ndarray,
        method: str = "pyin",
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Detect fundamental frequency (f0) over time.

        Args:
            audio: Audio array
            method: Detection method ('pyin', 'yin')

        Returns:
            Tuple of (f0 in Hz, voiced_flag, voiced_prob). Unvoiced
            frames hold NaN in f0.
        """
        if method not in PITCH_METHODS:
            raise ValueError(f"Unknown pitch method: {method}. Supported: {PITCH_METHODS}")

        if method == "pyin":
            f0, voiced_flag, voiced_prob = librosa.pyin(
                audio,
                fmin=self.fmin,
                fmax=self.fmax,
                sr=self.sr,
                hop_length=self.hop_length,
            )
        else:
            # YIN has no voicing decision; treat every finite estimate as voiced
            f0 = librosa.yin(
                audio,
                fmin=self.fmin,
                fmax=self.fmax,
                sr=self.sr,
                hop_length=self.hop_length,
            )
            voiced_flag = np.isfinite(f0)
            voiced_prob = voiced_flag.astype(float)

        return f0, voiced_flag, voiced_prob

    def resolve_f0(self, f0: np.ndarray) -> List[NoteResult]:
        """Resolve every voiced frame of an f0 track."""
        return self.finder.resolve_many(f0)

    def estimate(
        self,
        audio: np.ndarray,
        method: str = "pyin",
    ) -> Optional[NoteResult]:
        """
        Resolve the dominant pitch of a signal.

        Uses the median of the voiced f0 frames, which is robust to
        octave jumps at note onsets.

        Returns:
            NoteResult, or None if no frame is voiced
        """
        f0, voiced, _ = self.detect_f0(audio, method=method)
        voiced_f0 = f0[voiced & np.isfinite(f0)]
        if voiced_f0.size == 0:
            return None
        return self.finder.resolve(float(np.median(voiced_f0)))

    def get_pitch_track(
        self,
        audio: np.ndarray,
        method: str = "pyin",
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Get per-frame times and f0 values.

        Returns:
            Tuple of (times, f0)
        """
        f0, _, _ = self.detect_f0(audio, method=method)
        times = librosa.frames_to_time(
            np.arange(len(f0)),
            sr=self.sr,
            hop_length=self.hop_length,
        )
        return times, f0
