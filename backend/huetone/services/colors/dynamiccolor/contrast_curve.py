"""
Contrast requirements that scale with the user's contrast level.
"""

from dataclasses import dataclass

from ..utils.math_utils import lerp


@dataclass(frozen=True)
class ContrastCurve:
    """
    Target contrast ratio at contrast levels -1, 0, 0.5 and 1.

    Levels in between are linearly interpolated; levels beyond the ends are
    clamped.
    """
    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        """
        Contrast ratio required at a contrast level.

        Args:
            contrast_level: User contrast preference, nominally in [-1, 1]

        Returns:
            Target ratio in [1, 21]
        """
        if contrast_level <= -1.0:
            return self.low
        elif contrast_level < 0.0:
            return lerp(self.low, self.normal, (contrast_level - -1.0) / 1.0)
        elif contrast_level < 0.5:
            return lerp(self.normal, self.medium, (contrast_level - 0.0) / 0.5)
        elif contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high
