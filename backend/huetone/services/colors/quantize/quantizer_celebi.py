"""
Wu-seeded k-means quantization.
"""

from typing import Iterable

from loguru import logger

from ..utils.color_utils import is_opaque
from .quantizer_result import QuantizerResult
from .quantizer_wsmeans import QuantizerWsmeans
from .quantizer_wu import QuantizerWu


class QuantizerCelebi:
    """
    Improves on a plain k-means by starting from Wu's clusters instead of
    random centroids, then refining them with WSMeans.
    """

    def quantize(self, pixels: Iterable[int], max_colors: int) -> QuantizerResult:
        """
        Reduce an image's pixels to a small set of representative colors.

        Args:
            pixels: ARGB pixels; anything not fully opaque is discarded
            max_colors: Upper bound on the number of colors returned

        Returns:
            Up to `max_colors` colors with their pixel weights. Empty input
            gives an empty result.
        """
        opaque = [pixel for pixel in pixels if is_opaque(pixel)]
        if not opaque:
            logger.debug("No opaque pixels to quantize")
            return QuantizerResult()

        wu_result = QuantizerWu().quantize(opaque, max_colors)
        return QuantizerWsmeans().quantize(opaque, max_colors, starting_clusters=wu_result.colors)


def quantize(pixels: Iterable[int], max_colors: int) -> QuantizerResult:
    """Quantize with the default Wu then WSMeans pipeline."""
    return QuantizerCelebi().quantize(pixels, max_colors)
