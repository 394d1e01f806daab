"""
CAM16 color appearance model.

Forward transform from XYZ to appearance attributes (hue, chroma, lightness J,
brightness Q, colorfulness M, saturation s) and the CAM16-UCS coordinates
used for perceptual distance, plus the inverse back to XYZ.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from ..utils import color_utils
from ..utils.math_utils import sanitize_degrees_double
from .viewing_conditions import CAM16RGB_TO_XYZ, XYZ_TO_CAM16RGB, ViewingConditions


def _sign(value: float) -> float:
    return math.copysign(1.0, value)


@dataclass(frozen=True)
class Cam16:
    """
    Appearance attributes of a color under fixed viewing conditions.

    Only built through the classmethods below; hue is in degrees [0, 360).
    """
    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    @classmethod
    def from_int(cls, argb: int) -> "Cam16":
        """Appearance of an ARGB color under the default viewing conditions."""
        return cls.from_int_in_viewing_conditions(argb, ViewingConditions.DEFAULT)

    @classmethod
    def from_int_in_viewing_conditions(cls, argb: int,
                                       viewing_conditions: ViewingConditions) -> "Cam16":
        red = (argb & 0x00ff0000) >> 16
        green = (argb & 0x0000ff00) >> 8
        blue = argb & 0x000000ff
        red_l = color_utils.linearized(red)
        green_l = color_utils.linearized(green)
        blue_l = color_utils.linearized(blue)
        x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
        y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
        z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
        return cls.from_xyz_in_viewing_conditions(x, y, z, viewing_conditions)

    @classmethod
    def from_xyz_in_viewing_conditions(cls, x: float, y: float, z: float,
                                       viewing_conditions: ViewingConditions) -> "Cam16":
        """
        Forward CAM16 transform.

        Args:
            x: X tristimulus value
            y: Y tristimulus value (0-100)
            z: Z tristimulus value
            viewing_conditions: Environment the color is seen in

        Returns:
            Cam16 attributes of the color
        """
        vc = viewing_conditions
        matrix = XYZ_TO_CAM16RGB
        r_t = (x * matrix[0][0]) + (y * matrix[0][1]) + (z * matrix[0][2])
        g_t = (x * matrix[1][0]) + (y * matrix[1][1]) + (z * matrix[1][2])
        b_t = (x * matrix[2][0]) + (y * matrix[2][1]) + (z * matrix[2][2])

        # Discount illuminant
        r_d = vc.rgb_d[0] * r_t
        g_d = vc.rgb_d[1] * g_t
        b_d = vc.rgb_d[2] * b_t

        # Chromatic adaptation
        r_a_f = (vc.fl * abs(r_d) / 100.0) ** 0.42
        g_a_f = (vc.fl * abs(g_d) / 100.0) ** 0.42
        b_a_f = (vc.fl * abs(b_d) / 100.0) ** 0.42
        r_a = _sign(r_d) * 400.0 * r_a_f / (r_a_f + 27.13)
        g_a = _sign(g_d) * 400.0 * g_a_f / (g_a_f + 27.13)
        b_a = _sign(b_d) * 400.0 * b_a_f / (b_a_f + 27.13)

        # redness-greenness, yellowness-blueness
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0

        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        hue = sanitize_degrees_double(math.degrees(math.atan2(b, a)))
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb

        j = 100.0 * (ac / vc.aw) ** (vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = (1.64 - 0.29 ** vc.n) ** 0.73 * t ** 0.9

        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)

        return cls(hue, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> "Cam16":
        return cls.from_jch_in_viewing_conditions(j, c, h, ViewingConditions.DEFAULT)

    @classmethod
    def from_jch_in_viewing_conditions(cls, j: float, c: float, h: float,
                                       viewing_conditions: ViewingConditions) -> "Cam16":
        """Build attributes from lightness J, chroma C and hue h."""
        vc = viewing_conditions
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        if j != 0.0:
            alpha = c / math.sqrt(j / 100.0)
        else:
            alpha = math.inf if c != 0.0 else math.nan
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(h, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> "Cam16":
        return cls.from_ucs_in_viewing_conditions(jstar, astar, bstar, ViewingConditions.DEFAULT)

    @classmethod
    def from_ucs_in_viewing_conditions(cls, jstar: float, astar: float, bstar: float,
                                       viewing_conditions: ViewingConditions) -> "Cam16":
        """Build attributes from CAM16-UCS coordinates."""
        m = math.hypot(astar, bstar)
        m2 = math.expm1(m * 0.0228) / 0.0228
        c = m2 / viewing_conditions.fl_root
        h = sanitize_degrees_double(math.degrees(math.atan2(bstar, astar)))
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, viewing_conditions)

    def distance(self, other: "Cam16") -> float:
        """
        CAM16-UCS color difference.

        Args:
            other: Color to compare against

        Returns:
            Perceptual distance; 0 means identical
        """
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_e_prime ** 0.63

    def to_int(self) -> int:
        """ARGB of this color under the default viewing conditions."""
        return self.viewed(ViewingConditions.DEFAULT)

    def viewed(self, viewing_conditions: ViewingConditions) -> int:
        xyz = self.xyz_in_viewing_conditions(viewing_conditions)
        return color_utils.argb_from_xyz(xyz[0], xyz[1], xyz[2])

    def xyz_in_viewing_conditions(self, viewing_conditions: ViewingConditions,
                                  out: Optional[List[float]] = None) -> List[float]:
        """
        Inverse CAM16 transform to XYZ.

        Args:
            viewing_conditions: Environment the color is seen in
            out: Optional list to write the result into

        Returns:
            [X, Y, Z]
        """
        vc = viewing_conditions
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = (alpha / (1.64 - 0.29 ** vc.n) ** 0.73) ** (1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * (self.j / 100.0) ** (1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_c_base = max(0.0, (27.13 * abs(r_a)) / (400.0 - abs(r_a)))
        r_c = _sign(r_a) * (100.0 / vc.fl) * r_c_base ** (1.0 / 0.42)
        g_c_base = max(0.0, (27.13 * abs(g_a)) / (400.0 - abs(g_a)))
        g_c = _sign(g_a) * (100.0 / vc.fl) * g_c_base ** (1.0 / 0.42)
        b_c_base = max(0.0, (27.13 * abs(b_a)) / (400.0 - abs(b_a)))
        b_c = _sign(b_a) * (100.0 / vc.fl) * b_c_base ** (1.0 / 0.42)

        r_f = r_c / vc.rgb_d[0]
        g_f = g_c / vc.rgb_d[1]
        b_f = b_c / vc.rgb_d[2]

        matrix = CAM16RGB_TO_XYZ
        x = (r_f * matrix[0][0]) + (g_f * matrix[0][1]) + (b_f * matrix[0][2])
        y = (r_f * matrix[1][0]) + (g_f * matrix[1][1]) + (b_f * matrix[1][2])
        z = (r_f * matrix[2][0]) + (g_f * matrix[2][1]) + (b_f * matrix[2][2])

        if out is None:
            return [x, y, z]
        out[0] = x
        out[1] = y
        out[2] = z
        return out
