"""
HCT: hue, chroma, tone.

A perceptual color representation built on CAM16 hue and chroma and CIE L*
tone. Tone is taken from L* rather than CAM16 J so that a tone difference maps
directly onto a contrast ratio.
"""

from ..utils import color_utils
from ..utils.math_utils import round_half_away
from .cam16 import Cam16
from .solver import HctSolver
from .viewing_conditions import ViewingConditions


class Hct:
    """
    Immutable HCT color.

    Construct with `Hct.from_int(argb)` or `Hct.from_hct(hue, chroma, tone)`.
    The stored hue, chroma and tone are those of the resulting sRGB color, so
    a requested chroma that is not displayable comes back reduced.
    """

    __slots__ = ("_hue", "_chroma", "_tone", "_argb")

    def __init__(self, argb: int):
        cam = Cam16.from_int(argb)
        self._argb = argb
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = color_utils.lstar_from_argb(argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """
        Create the closest displayable color to the requested HCT.

        Args:
            hue: Hue in degrees; any value, wrapped to [0, 360)
            chroma: Requested chroma; may be reduced to fit the gamut
            tone: L* in [0, 100]

        Returns:
            Hct of the solved sRGB color
        """
        return cls(HctSolver.solve_to_int(hue, chroma, tone))

    @classmethod
    def from_int(cls, argb: int) -> "Hct":
        return cls(argb)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def tone(self) -> float:
        return self._tone

    @property
    def argb(self) -> int:
        return self._argb

    def to_int(self) -> int:
        return self._argb

    def with_hue(self, hue: float) -> "Hct":
        return Hct.from_hct(hue, self._chroma, self._tone)

    def with_chroma(self, chroma: float) -> "Hct":
        return Hct.from_hct(self._hue, chroma, self._tone)

    def with_tone(self, tone: float) -> "Hct":
        return Hct.from_hct(self._hue, self._chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> "Hct":
        """
        The color that, viewed in the default conditions, matches this color
        viewed in `vc`.
        """
        # 1. XYZ of this color as seen in the given conditions.
        cam16 = Cam16.from_int(self._argb)
        viewed_in_vc = cam16.xyz_in_viewing_conditions(vc)

        # 2. CAM16 of those coordinates in the default conditions.
        recast_in_vc = Cam16.from_xyz_in_viewing_conditions(
            viewed_in_vc[0], viewed_in_vc[1], viewed_in_vc[2], ViewingConditions.DEFAULT
        )

        # 3. Tone comes from Y in the given conditions.
        return Hct.from_hct(
            recast_in_vc.hue,
            recast_in_vc.chroma,
            color_utils.lstar_from_y(viewed_in_vc[1]),
        )

    @staticmethod
    def is_blue(hue: float) -> bool:
        return 250.0 <= hue < 270.0

    @staticmethod
    def is_yellow(hue: float) -> bool:
        return 105.0 <= hue < 125.0

    @staticmethod
    def is_cyan(hue: float) -> bool:
        return 170.0 <= hue < 207.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __repr__(self) -> str:
        return (f"HCT({round_half_away(self._hue)}, {round_half_away(self._chroma)}, "
                f"{round_half_away(self._tone)})")
