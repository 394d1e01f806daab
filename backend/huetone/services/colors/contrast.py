"""
Contrast ratio solver.

Contrast ratios follow the WCAG formula on relative luminance Y (0-100 here):
(lighter + 5) / (darker + 5). Because HCT tone is L*, a contrast ratio between
two tones can be computed, or solved for, without knowing hue or chroma.
"""

from typing import Optional

from .utils import color_utils
from .utils.math_utils import clamp_double

RATIO_MIN = 1.0
RATIO_MAX = 21.0
RATIO_30 = 3.0
RATIO_45 = 4.5
RATIO_70 = 7.0

# Solved ratios may land this far below the request and still count as met.
CONTRAST_RATIO_EPSILON = 0.04

# Tone nudge that absorbs the error introduced when a tone is gamut mapped.
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    """Contrast ratio of two relative luminances on the 0-100 scale."""
    lighter_y = max(y1, y2)
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """
    Contrast ratio of two tones.

    Args:
        tone_a: First tone, clamped to [0, 100]
        tone_b: Second tone, clamped to [0, 100]

    Returns:
        Ratio in [1, 21]
    """
    tone_a = clamp_double(0.0, 100.0, tone_a)
    tone_b = clamp_double(0.0, 100.0, tone_b)
    return ratio_of_ys(color_utils.y_from_lstar(tone_a), color_utils.y_from_lstar(tone_b))


def lighter(tone: float, ratio: float) -> Optional[float]:
    """
    Tone at least `ratio` lighter than `tone`.

    Args:
        tone: Tone in [0, 100]
        ratio: Desired contrast ratio

    Returns:
        The lighter tone, or None if the input is out of range or no tone in
        [0, 100] reaches the ratio
    """
    if not 0.0 <= tone <= 100.0:
        return None

    dark_y = color_utils.y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if not 0.0 <= light_y <= 100.0:
        return None

    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return None

    result = color_utils.lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if not 0.0 <= result <= 100.0:
        return None
    return result


def darker(tone: float, ratio: float) -> Optional[float]:
    """
    Tone at least `ratio` darker than `tone`.

    Args:
        tone: Tone in [0, 100]
        ratio: Desired contrast ratio

    Returns:
        The darker tone, or None if the input is out of range or no tone in
        [0, 100] reaches the ratio
    """
    if not 0.0 <= tone <= 100.0:
        return None

    light_y = color_utils.y_from_lstar(tone)
    dark_y = ((light_y + 5.0) / ratio) - 5.0
    if not 0.0 <= dark_y <= 100.0:
        return None

    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return None

    result = color_utils.lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if not 0.0 <= result <= 100.0:
        return None
    return result


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like `lighter`, but falls back to 100 when the ratio is unreachable."""
    result = lighter(tone, ratio)
    return 100.0 if result is None else result


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like `darker`, but falls back to 0 when the ratio is unreachable."""
    result = darker(tone, ratio)
    return 0.0 if result is None else result
