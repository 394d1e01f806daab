"""
Color blending in HCT and CAM16-UCS.
"""

from .hct import Cam16, Hct
from .utils import color_utils
from .utils.math_utils import difference_degrees, rotation_direction, sanitize_degrees_double


def harmonize(design_color: int, source_color: int) -> int:
    """
    Shift a design color's hue towards a source color.

    The hue moves by half the hue distance, at most 15 degrees, so the result
    stays recognizable while sitting better next to the source.

    Args:
        design_color: ARGB of the color to shift
        source_color: ARGB of the color to shift towards

    Returns:
        ARGB of the harmonized color
    """
    from_hct = Hct.from_int(design_color)
    to_hct = Hct.from_int(source_color)
    difference = difference_degrees(from_hct.hue, to_hct.hue)
    rotation = min(difference * 0.5, 15.0)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).to_int()


def hct_hue(from_argb: int, to_argb: int, amount: float) -> int:
    """
    Blend hue only, keeping the chroma and tone of `from_argb`.

    Args:
        from_argb: ARGB at amount 0.0
        to_argb: ARGB at amount 1.0
        amount: Blend factor in [0, 1]
    """
    ucs = cam16_ucs(from_argb, to_argb, amount)
    ucs_cam = Cam16.from_int(ucs)
    from_cam = Cam16.from_int(from_argb)
    blended = Hct.from_hct(ucs_cam.hue, from_cam.chroma, color_utils.lstar_from_argb(from_argb))
    return blended.to_int()


def cam16_ucs(from_argb: int, to_argb: int, amount: float) -> int:
    """Linear interpolation in CAM16-UCS; hue, chroma and tone all change."""
    from_cam = Cam16.from_int(from_argb)
    to_cam = Cam16.from_int(to_argb)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_int()
