"""
Lab point provider for the k-means refinement step.
"""

from typing import List, Sequence

from ..utils.color_utils import argb_from_lab, lab_from_argb

Point = List[float]


class PointProviderLab:
    """Converts colors to L*a*b* points and measures distances between them."""

    def from_int(self, argb: int) -> Point:
        return lab_from_argb(argb)

    def to_int(self, point: Sequence[float]) -> int:
        return argb_from_lab(point[0], point[1], point[2])

    def distance(self, one: Sequence[float], two: Sequence[float]) -> float:
        """
        Squared CIE76 delta E.

        The square root is skipped; quantizers only compare distances, and the
        ordering is the same either way.
        """
        d_l = one[0] - two[0]
        d_a = one[1] - two[1]
        d_b = one[2] - two[2]
        return d_l * d_l + d_a * d_a + d_b * d_b
