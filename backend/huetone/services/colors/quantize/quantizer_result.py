"""
Quantizer output.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class QuantizerResult:
    """
    Representative colors and how many input pixels each one stands for.

    Attributes:
        color_to_count: ARGB color to pixel weight, in the order the quantizer
            produced the colors
    """

    color_to_count: Dict[int, int] = field(default_factory=dict)

    @property
    def colors(self) -> List[int]:
        return list(self.color_to_count)

    def __len__(self) -> int:
        return len(self.color_to_count)
