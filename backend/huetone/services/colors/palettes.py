"""
Tonal palettes.

A tonal palette fixes hue and chroma and lets tone vary from 0 (black) to 100
(white). Colors are produced on demand through the HCT gamut solver and cached
per palette instance.
"""

import threading
from typing import Dict, Union

from .hct import Hct
from .utils.math_utils import round_half_away

Tone = Union[int, float]


class TonalPalette:
    """
    Hue and chroma with tone left free.

    Args:
        hue: Hue in degrees
        chroma: Requested chroma; individual tones may reach less
        key_color: The representative color of the palette
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct):
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache: Dict[Tone, int] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_int(cls, argb: int) -> "TonalPalette":
        """Palette with the hue and chroma of an ARGB color."""
        return cls.from_hct(Hct.from_int(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> "TonalPalette":
        """Palette with the hue and chroma of `hct`, which becomes the key color."""
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        """
        Palette for a hue and chroma, searching for a suitable key color.

        Args:
            hue: Hue in degrees
            chroma: Requested chroma

        Returns:
            TonalPalette whose key color is the tone closest to 50 that reaches
            the requested chroma
        """
        key_color = KeyColor(hue, chroma).create()
        return cls(hue, chroma, key_color)

    def tone(self, tone: Tone) -> int:
        """
        ARGB of this palette at the given tone.

        Args:
            tone: Tone in [0, 100]

        Returns:
            Packed ARGB color
        """
        with self._lock:
            color = self._cache.get(tone)
            if color is not None:
                return color

            if tone == 99 and Hct.is_yellow(self.hue):
                # Tone 99 of a yellow hue can come out greener than tone 98.
                color = _average_argb(self.tone(98), self.tone(100))
            else:
                color = Hct.from_hct(self.hue, self.chroma, tone).to_int()
            self._cache[tone] = color
            return color

    def get_hct(self, tone: float) -> Hct:
        """HCT of this palette at the given tone, bypassing the cache."""
        return Hct.from_hct(self.hue, self.chroma, tone)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f}, key={self.key_color})"


def _average_argb(argb1: int, argb2: int) -> int:
    red1 = (argb1 >> 16) & 0xff
    green1 = (argb1 >> 8) & 0xff
    blue1 = argb1 & 0xff
    red2 = (argb2 >> 16) & 0xff
    green2 = (argb2 >> 8) & 0xff
    blue2 = argb2 & 0xff
    red = round_half_away((red1 + red2) / 2.0)
    green = round_half_away((green1 + green2) / 2.0)
    blue = round_half_away((blue1 + blue2) / 2.0)
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


class KeyColor:
    """
    Finds the key color of a palette: the tone closest to 50 whose maximum
    achievable chroma meets the requested chroma.
    """

    MAX_CHROMA_VALUE = 200.0

    def __init__(self, hue: float, requested_chroma: float):
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: Dict[int, float] = {}

    def create(self) -> Hct:
        """Binary search over integer tones for the key color."""
        # Tone 50 has the most chroma available on average.
        pivot_tone = 50
        tone_step_size = 1
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self._max_chroma(mid_tone) < self._max_chroma(mid_tone + tone_step_size)
            sufficient_chroma = self._max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Both halves can hold the answer; keep the one nearer the pivot.
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            else:
                # Walk towards the chroma peak.
                if is_ascending:
                    lower_tone = mid_tone + tone_step_size
                else:
                    upper_tone = mid_tone

        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)

    def _max_chroma(self, tone: int) -> float:
        chroma = self._chroma_cache.get(tone)
        if chroma is None:
            chroma = Hct.from_hct(self.hue, self.MAX_CHROMA_VALUE, tone).chroma
            self._chroma_cache[tone] = chroma
        return chroma
