"""
CAM16 viewing conditions.

The environment a color is observed in changes how it looks. These values are
pre-computed intermediates of the CAM16 forward and inverse transforms for a
given white point, adapting luminance, background and surround.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..utils import color_utils
from ..utils.math_utils import clamp_double, lerp

XYZ_TO_CAM16RGB = [
    [0.401288, 0.650173, -0.051461],
    [-0.250268, 1.204414, 0.045854],
    [-0.002079, 0.048952, 0.953127],
]

CAM16RGB_TO_XYZ = [
    [1.8620678, -1.0112547, 0.14918678],
    [0.38752654, 0.62144744, -0.00897398],
    [-0.01584150, -0.03412294, 1.0499644],
]


@dataclass(frozen=True)
class ViewingConditions:
    """Pre-computed CAM16 parameters for one viewing environment."""
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    n: float
    rgb_d: Tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(cls, white_point: Sequence[float], adapting_luminance: float,
             background_lstar: float, surround: float,
             discounting_illuminant: bool) -> "ViewingConditions":
        """
        Create viewing conditions from physically measurable inputs.

        Args:
            white_point: XYZ of the white point, Y on 0-100
            adapting_luminance: Luminance of the adapting field in lux
            background_lstar: L* of the background
            surround: 0.0 (dark room) to 2.0 (average surround)
            discounting_illuminant: Whether the eye fully adapts to the light

        Returns:
            ViewingConditions with all derived parameters
        """
        # A pure black background leads to infinities.
        background_lstar = max(0.1, background_lstar)

        matrix = XYZ_TO_CAM16RGB
        xyz = white_point
        r_w = (xyz[0] * matrix[0][0]) + (xyz[1] * matrix[0][1]) + (xyz[2] * matrix[0][2])
        g_w = (xyz[0] * matrix[1][0]) + (xyz[1] * matrix[1][1]) + (xyz[2] * matrix[1][2])
        b_w = (xyz[0] * matrix[2][0]) + (xyz[1] * matrix[2][1]) + (xyz[2] * matrix[2][2])

        f = 0.8 + (surround / 10.0)
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - ((1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0)))
        d = clamp_double(0.0, 1.0, d)
        nc = f
        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4_f = 1.0 - k4
        fl = (k4 * adapting_luminance) + (0.1 * k4_f * k4_f * math.cbrt(5.0 * adapting_luminance))
        n = color_utils.y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n ** 0.2
        ncb = nbb

        rgb_a_factors = [
            (fl * rgb_d[0] * r_w / 100.0) ** 0.42,
            (fl * rgb_d[1] * g_w / 100.0) ** 0.42,
            (fl * rgb_d[2] * b_w / 100.0) ** 0.42,
        ]
        rgb_a = [
            (400.0 * rgb_a_factors[0]) / (rgb_a_factors[0] + 27.13),
            (400.0 * rgb_a_factors[1]) / (rgb_a_factors[1] + 27.13),
            (400.0 * rgb_a_factors[2]) / (rgb_a_factors[2] + 27.13),
        ]
        aw = ((2.0 * rgb_a[0]) + rgb_a[1] + (0.05 * rgb_a[2])) * nbb

        return cls(aw=aw, nbb=nbb, ncb=ncb, c=c, nc=nc, n=n, rgb_d=rgb_d,
                   fl=fl, fl_root=fl ** 0.25, z=z)

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> "ViewingConditions":
        """sRGB-like viewing conditions with a custom background L*."""
        return cls.make(
            color_utils.white_point_d65(),
            200.0 / math.pi * color_utils.y_from_lstar(50.0) / 100.0,
            lstar,
            2.0,
            False,
        )


# sRGB-like conditions: D65, 200/pi lux at L* 50 grey, average surround.
ViewingConditions.DEFAULT = ViewingConditions.default_with_background_lstar(50.0)
