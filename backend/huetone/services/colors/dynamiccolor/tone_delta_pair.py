"""
Tone distance constraints between two roles.

Used where two colors have no background/foreground relationship but must
still stay a fixed tonal distance apart, for example a button and its
container.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dynamic_color import DynamicColor


class TonePolarity(str, Enum):
    """
    Which of the two roles is lighter.

    RELATIVE_* polarities follow the surface trend: RELATIVE_LIGHTER means
    lighter in light mode and darker in dark mode.
    """
    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"
    RELATIVE_DARKER = "relative_darker"
    RELATIVE_LIGHTER = "relative_lighter"


class DeltaConstraint(str, Enum):
    """Whether the delta is an exact, maximum or minimum tone distance."""
    EXACT = "exact"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True, eq=False)
class ToneDeltaPair:
    """
    Two roles whose tones must stay `delta` apart.

    Args:
        role_a: First role
        role_b: Second role
        delta: Required tone difference
        polarity: Direction of role_a relative to role_b
        stay_together: Move both roles together out of the 50-60 tone zone
        constraint: How strictly the delta is enforced
    """
    role_a: "DynamicColor"
    role_b: "DynamicColor"
    delta: float
    polarity: TonePolarity
    stay_together: bool = True
    constraint: DeltaConstraint = DeltaConstraint.EXACT
