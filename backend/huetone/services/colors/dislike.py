"""
Dislike analysis.

Dark yellow-greens are widely disliked: they read as bile, mold or rot. Colors
in that region are detected and lightened before they are used as a theme
color.
"""

from .hct import Hct
from .utils.math_utils import round_half_away


def is_disliked(hct: Hct) -> bool:
    """
    Whether a color falls in the disliked dark yellow-green region.

    Args:
        hct: Color to check

    Returns:
        True for hue 90-111, chroma above 16 and tone below 65 (all rounded)
    """
    hue_passes = 90 <= round_half_away(hct.hue) <= 111
    chroma_passes = round_half_away(hct.chroma) > 16
    tone_passes = round_half_away(hct.tone) < 65
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lighten a disliked color to tone 70; other colors pass through."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, 70.0)
    return hct
