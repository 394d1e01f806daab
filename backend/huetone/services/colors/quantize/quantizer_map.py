"""
Exact color counting.
"""

from typing import Iterable

from ..utils.color_utils import is_opaque
from .quantizer_result import QuantizerResult


class QuantizerMap:
    """Counts identical opaque pixels. No colors are merged."""

    def quantize(self, pixels: Iterable[int], max_colors: int = 0) -> QuantizerResult:
        """
        Args:
            pixels: ARGB pixels, duplicates allowed
            max_colors: Ignored; every distinct opaque color is kept

        Returns:
            Distinct colors with their counts, in first-seen order
        """
        result = QuantizerResult()
        counts = result.color_to_count
        for pixel in pixels:
            if not is_opaque(pixel):
                continue
            counts[pixel] = counts.get(pixel, 0) + 1
        return result
