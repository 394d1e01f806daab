"""
Color space conversions for packed ARGB integers.

Covers sRGB transfer functions, sRGB <-> XYZ (D65), CIE L*a*b* and the
L* <-> Y relationship that ties HCT tone to contrast math. Packed colors are
plain Python ints in 0xAARRGGBB layout.
"""

from typing import List, Sequence

from .math_utils import clamp_int, matrix_multiply, round_half_away


SRGB_TO_XYZ = [
    [0.41233895, 0.35762064, 0.18051042],
    [0.2126, 0.7152, 0.0722],
    [0.01932141, 0.11916382, 0.95034478],
]

XYZ_TO_SRGB = [
    [3.2413774792388685, -1.5376652402851851, -0.49885366846268053],
    [-0.9691452513005321, 1.8758853451067872, 0.04156585616912061],
    [0.05562093689691305, -0.20395524564742123, 1.0571799111220335],
]

WHITE_POINT_D65 = [95.047, 100.0, 108.883]

_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque 8-bit channels into an ARGB int."""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def argb_from_linrgb(linrgb: Sequence[float]) -> int:
    """Pack linear RGB components (0-100 scale) into an ARGB int."""
    r = delinearized(linrgb[0])
    g = delinearized(linrgb[1])
    b = delinearized(linrgb[2])
    return argb_from_rgb(r, g, b)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    """Whether the alpha channel is fully opaque."""
    return alpha_from_argb(argb) == 255


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """Convert XYZ (D65, Y on 0-100) to an ARGB int."""
    matrix = XYZ_TO_SRGB
    linear_r = matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z
    linear_g = matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z
    linear_b = matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z
    r = delinearized(linear_r)
    g = delinearized(linear_g)
    b = delinearized(linear_b)
    return argb_from_rgb(r, g, b)


def xyz_from_argb(argb: int) -> List[float]:
    """Convert an ARGB int to XYZ (D65, Y on 0-100)."""
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply([r, g, b], SRGB_TO_XYZ)


def argb_from_lab(l: float, a: float, b: float) -> int:
    """
    Convert CIE L*a*b* to an ARGB int.

    Args:
        l: L* lightness
        a: a* component
        b: b* component

    Returns:
        Packed ARGB color
    """
    white_point = WHITE_POINT_D65
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x_normalized = _lab_inv_f(fx)
    y_normalized = _lab_inv_f(fy)
    z_normalized = _lab_inv_f(fz)
    x = x_normalized * white_point[0]
    y = y_normalized * white_point[1]
    z = z_normalized * white_point[2]
    return argb_from_xyz(x, y, z)


def lab_from_argb(argb: int) -> List[float]:
    """
    Convert an ARGB int to CIE L*a*b*.

    Args:
        argb: Packed ARGB color

    Returns:
        [L*, a*, b*]
    """
    linear_r = linearized(red_from_argb(argb))
    linear_g = linearized(green_from_argb(argb))
    linear_b = linearized(blue_from_argb(argb))
    matrix = SRGB_TO_XYZ
    x = matrix[0][0] * linear_r + matrix[0][1] * linear_g + matrix[0][2] * linear_b
    y = matrix[1][0] * linear_r + matrix[1][1] * linear_g + matrix[1][2] * linear_b
    z = matrix[2][0] * linear_r + matrix[2][1] * linear_g + matrix[2][2] * linear_b
    white_point = WHITE_POINT_D65
    x_normalized = x / white_point[0]
    y_normalized = y / white_point[1]
    z_normalized = z / white_point[2]
    fx = _lab_f(x_normalized)
    fy = _lab_f(y_normalized)
    fz = _lab_f(z_normalized)
    l = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return [l, a, b]


def argb_from_lstar(lstar: float) -> int:
    """Gray ARGB color with the given L*."""
    y = y_from_lstar(lstar)
    component = delinearized(y)
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    """L* of an ARGB color; this is the HCT tone."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    """
    Convert L* to relative luminance Y (0-100).

    L* measures perceived lightness, Y is linear in light intensity; contrast
    ratios are computed on Y.
    """
    return 100.0 * _lab_inv_f((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert relative luminance Y (0-100) to L*."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


def linearized(rgb_component: int) -> float:
    """
    Undo the sRGB transfer function.

    Args:
        rgb_component: 8-bit channel value

    Returns:
        Linear component on a 0-100 scale
    """
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """
    Apply the sRGB transfer function.

    Args:
        rgb_component: Linear component on a 0-100 scale

    Returns:
        8-bit channel value, clamped to [0, 255]
    """
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized_value = normalized * 12.92
    else:
        delinearized_value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round_half_away(delinearized_value * 255.0))


def white_point_d65() -> List[float]:
    """The standard D65 white point, Y normalized to 100."""
    return list(WHITE_POINT_D65)


def _lab_f(t: float) -> float:
    if t > _LAB_E:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_inv_f(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA
