"""
Palette construction per variant.

Each variant derives six tonal palettes (primary, secondary, tertiary,
neutral, neutral variant and error) from the source color. The 2021 rules
depend on the variant alone; the 2025 rules also look at dark mode and the
target platform, and fall back to the 2021 rules for variants they do not
redefine.
"""

from typing import Dict, Optional, Sequence

from ..dislike import fix_if_disliked
from ..hct import Hct
from ..palettes import TonalPalette
from ..temperature import TemperatureCache
from ..utils.math_utils import sanitize_degrees_double
from .variant import Platform, SpecVersion, Variant


def get_piecewise_value(source_hue: float, breakpoints: Sequence[float], hues: Sequence[float]) -> float:
    """
    Look up a hue in a piecewise table.

    Args:
        source_hue: Hue in degrees
        breakpoints: Ascending interval bounds, first 0 and last 360
        hues: Value for each interval [breakpoints[i], breakpoints[i + 1])

    Returns:
        The value of the interval containing `source_hue`, or `source_hue`
        itself when no interval matches
    """
    size = min(len(breakpoints) - 1, len(hues))
    for i in range(size):
        if breakpoints[i] <= source_hue < breakpoints[i + 1]:
            return sanitize_degrees_double(hues[i])
    return source_hue


def get_rotated_hue(source_hue: float, breakpoints: Sequence[float], rotations: Sequence[float]) -> float:
    """Rotate a hue by the amount its interval in the table calls for."""
    rotation = get_piecewise_value(source_hue, breakpoints, rotations)
    if min(len(breakpoints) - 1, len(rotations)) <= 0:
        rotation = 0.0
    return sanitize_degrees_double(source_hue + rotation)


_EXPRESSIVE_HUES_2021 = (0, 21, 51, 121, 151, 191, 271, 321, 360)
_EXPRESSIVE_SECONDARY_ROTATIONS_2021 = (45, 95, 45, 20, 45, 90, 45, 45, 45)
_EXPRESSIVE_TERTIARY_ROTATIONS_2021 = (120, 120, 20, 45, 20, 15, 20, 120, 120)

_VIBRANT_HUES_2021 = (0, 41, 61, 101, 131, 181, 251, 301, 360)
_VIBRANT_SECONDARY_ROTATIONS_2021 = (18, 15, 10, 12, 15, 18, 15, 12, 12)
_VIBRANT_TERTIARY_ROTATIONS_2021 = (35, 30, 20, 25, 30, 35, 30, 25, 25)


class PalettesSpec2021:
    """Palettes of the 2021 color system."""

    def get_primary_palette(self, variant: Variant, source: Hct, is_dark: bool,
                            platform: Platform, contrast_level: float) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(source.hue, source.chroma)
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue - 50.0), 48.0)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 240.0), 40.0)
        chroma = {
            Variant.MONOCHROME: 0.0,
            Variant.NEUTRAL: 12.0,
            Variant.RAINBOW: 48.0,
            Variant.TONAL_SPOT: 36.0,
            Variant.VIBRANT: 200.0,
        }[variant]
        return TonalPalette.from_hue_and_chroma(source.hue, chroma)

    def get_secondary_palette(self, variant: Variant, source: Hct, is_dark: bool,
                              platform: Platform, contrast_level: float) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(
                source.hue, max(source.chroma - 32.0, source.chroma * 0.5))
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue - 50.0), 36.0)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(source.hue, _EXPRESSIVE_HUES_2021, _EXPRESSIVE_SECONDARY_ROTATIONS_2021),
                24.0)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(source.hue, _VIBRANT_HUES_2021, _VIBRANT_SECONDARY_ROTATIONS_2021),
                24.0)
        chroma = {
            Variant.MONOCHROME: 0.0,
            Variant.NEUTRAL: 8.0,
            Variant.RAINBOW: 16.0,
            Variant.TONAL_SPOT: 16.0,
        }[variant]
        return TonalPalette.from_hue_and_chroma(source.hue, chroma)

    def get_tertiary_palette(self, variant: Variant, source: Hct, is_dark: bool,
                             platform: Platform, contrast_level: float) -> TonalPalette:
        if variant == Variant.CONTENT:
            analogous = TemperatureCache(source).analogous(3, 6)
            return TonalPalette.from_hct(fix_if_disliked(analogous[2]))
        if variant == Variant.FIDELITY:
            return TonalPalette.from_hct(fix_if_disliked(TemperatureCache(source).complement()))
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(source.hue, 36.0)
        if variant == Variant.MONOCHROME:
            return TonalPalette.from_hue_and_chroma(source.hue, 0.0)
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 16.0)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(source.hue, _EXPRESSIVE_HUES_2021, _EXPRESSIVE_TERTIARY_ROTATIONS_2021),
                32.0)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(source.hue, _VIBRANT_HUES_2021, _VIBRANT_TERTIARY_ROTATIONS_2021),
                32.0)
        # Rainbow and tonal spot
        return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 60.0), 24.0)

    def get_neutral_palette(self, variant: Variant, source: Hct, is_dark: bool,
                            platform: Platform, contrast_level: float) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(source.hue, source.chroma / 8.0)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 15.0), 8.0)
        chroma = {
            Variant.FRUIT_SALAD: 10.0,
            Variant.MONOCHROME: 0.0,
            Variant.NEUTRAL: 2.0,
            Variant.RAINBOW: 0.0,
            Variant.TONAL_SPOT: 6.0,
            Variant.VIBRANT: 10.0,
        }[variant]
        return TonalPalette.from_hue_and_chroma(source.hue, chroma)

    def get_neutral_variant_palette(self, variant: Variant, source: Hct, is_dark: bool,
                                    platform: Platform, contrast_level: float) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(source.hue, source.chroma / 8.0 + 4.0)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 15.0), 12.0)
        chroma = {
            Variant.FRUIT_SALAD: 16.0,
            Variant.MONOCHROME: 0.0,
            Variant.NEUTRAL: 2.0,
            Variant.RAINBOW: 0.0,
            Variant.TONAL_SPOT: 8.0,
            Variant.VIBRANT: 12.0,
        }[variant]
        return TonalPalette.from_hue_and_chroma(source.hue, chroma)

    def get_error_palette(self, variant: Variant, source: Hct, is_dark: bool,
                          platform: Platform, contrast_level: float) -> Optional[TonalPalette]:
        """None means the scheme's default error palette."""
        return None


_EXPRESSIVE_HUES_2025 = (0, 105, 140, 204, 253, 278, 300, 333, 360)
_VIBRANT_HUES_2025 = (0, 38, 105, 140, 333, 360)
_VIBRANT_ROTATIONS_2025 = (-14, 10, -14, 10, -14)


def _expressive_neutral_hue(source: Hct) -> float:
    return get_rotated_hue(source.hue, (0, 71, 124, 253, 278, 300, 360), (10, 0, 10, 0, 10, 0))


def _expressive_neutral_chroma(source: Hct, is_dark: bool, platform: Platform) -> float:
    neutral_hue = _expressive_neutral_hue(source)
    if platform == Platform.PHONE:
        if is_dark:
            return 6.0 if Hct.is_yellow(neutral_hue) else 14.0
        return 18.0
    return 12.0


def _vibrant_neutral_hue(source: Hct) -> float:
    return get_rotated_hue(source.hue, _VIBRANT_HUES_2025, _VIBRANT_ROTATIONS_2025)


def _vibrant_neutral_chroma(source: Hct, platform: Platform) -> float:
    neutral_hue = _vibrant_neutral_hue(source)
    if platform == Platform.PHONE:
        return 28.0
    return 28.0 if Hct.is_blue(neutral_hue) else 20.0


class PalettesSpec2025(PalettesSpec2021):
    """
    Palettes of the 2025 color system.

    Redefines neutral, tonal spot, expressive and vibrant; other variants
    use the 2021 palettes.
    """

    _VARIANTS = (Variant.NEUTRAL, Variant.TONAL_SPOT, Variant.EXPRESSIVE, Variant.VIBRANT)

    def get_primary_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            if phone:
                chroma = 12.0 if Hct.is_blue(source.hue) else 8.0
            else:
                chroma = 16.0 if Hct.is_blue(source.hue) else 12.0
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.TONAL_SPOT:
            chroma = 26.0 if phone and is_dark else 32.0
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.EXPRESSIVE:
            if phone:
                chroma = 36.0 if is_dark else 48.0
            else:
                chroma = 40.0
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(source.hue, 74.0 if phone else 56.0)
        return super().get_primary_palette(variant, source, is_dark, platform, contrast_level)

    def get_secondary_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            if phone:
                chroma = 6.0 if Hct.is_blue(source.hue) else 4.0
            else:
                chroma = 10.0 if Hct.is_blue(source.hue) else 6.0
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 16.0)
        if variant == Variant.EXPRESSIVE:
            hue = get_rotated_hue(
                source.hue, _EXPRESSIVE_HUES_2025, (-160, 155, -100, 96, -96, -156, -165, -160))
            chroma = 16.0 if phone and is_dark else 24.0
            return TonalPalette.from_hue_and_chroma(hue, chroma)
        if variant == Variant.VIBRANT:
            hue = get_rotated_hue(source.hue, _VIBRANT_HUES_2025, _VIBRANT_ROTATIONS_2025)
            return TonalPalette.from_hue_and_chroma(hue, 56.0 if phone else 36.0)
        return super().get_secondary_palette(variant, source, is_dark, platform, contrast_level)

    def get_tertiary_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            hue = get_rotated_hue(
                source.hue, (0, 38, 105, 161, 204, 278, 333, 360), (-32, 26, 10, -39, 24, -15, -32))
            return TonalPalette.from_hue_and_chroma(hue, 20.0 if phone else 36.0)
        if variant == Variant.TONAL_SPOT:
            hue = get_rotated_hue(source.hue, (0, 20, 71, 161, 333, 360), (-40, 48, -32, 40, -32))
            return TonalPalette.from_hue_and_chroma(hue, 28.0 if phone else 32.0)
        if variant == Variant.EXPRESSIVE:
            hue = get_rotated_hue(
                source.hue, _EXPRESSIVE_HUES_2025, (-165, 160, -105, 101, -101, -160, -170, -165))
            return TonalPalette.from_hue_and_chroma(hue, 48.0)
        if variant == Variant.VIBRANT:
            hue = get_rotated_hue(
                source.hue, (0, 38, 71, 105, 140, 161, 253, 333, 360), (-72, 35, 24, -24, 62, 50, 62, -72))
            return TonalPalette.from_hue_and_chroma(hue, 56.0)
        return super().get_tertiary_palette(variant, source, is_dark, platform, contrast_level)

    def get_neutral_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 1.4 if phone else 6.0)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 5.0 if phone else 10.0)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                _expressive_neutral_hue(source), _expressive_neutral_chroma(source, is_dark, platform))
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                _vibrant_neutral_hue(source), _vibrant_neutral_chroma(source, platform))
        return super().get_neutral_palette(variant, source, is_dark, platform, contrast_level)

    def get_neutral_variant_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, (1.4 if phone else 6.0) * 2.2)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, (5.0 if phone else 10.0) * 1.7)
        if variant == Variant.EXPRESSIVE:
            hue = _expressive_neutral_hue(source)
            chroma = _expressive_neutral_chroma(source, is_dark, platform)
            return TonalPalette.from_hue_and_chroma(
                hue, chroma * (1.6 if 105.0 <= hue < 125.0 else 2.3))
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                _vibrant_neutral_hue(source), _vibrant_neutral_chroma(source, platform) * 1.29)
        return super().get_neutral_variant_palette(variant, source, is_dark, platform, contrast_level)

    def get_error_palette(self, variant, source, is_dark, platform, contrast_level):
        if variant not in self._VARIANTS:
            return None
        error_hue = get_piecewise_value(
            source.hue, (0, 3, 13, 23, 33, 43, 153, 273, 360), (12, 22, 32, 12, 22, 32, 22, 12))
        phone = platform == Platform.PHONE
        chroma = {
            Variant.NEUTRAL: 50.0 if phone else 40.0,
            Variant.TONAL_SPOT: 60.0 if phone else 48.0,
            Variant.EXPRESSIVE: 64.0 if phone else 48.0,
            Variant.VIBRANT: 80.0 if phone else 60.0,
        }[variant]
        return TonalPalette.from_hue_and_chroma(error_hue, chroma)


PALETTES_SPECS: Dict[SpecVersion, PalettesSpec2021] = {
    SpecVersion.SPEC_2021: PalettesSpec2021(),
    SpecVersion.SPEC_2025: PalettesSpec2025(),
}
