"""
Tone and color resolution rules for dynamic colors.

Two rule sets exist. The 2021 rules push a role's tone until it meets its
contrast target and keep tone-delta pairs apart by expanding the farther
role. The 2025 rules anchor each pair member on its partner's resolved tone,
support chroma multipliers and avoid a wider band of mid tones for
backgrounds. Callers go through DynamicScheme, which caches results and guards
against cycles; the functions here do no caching of their own.
"""

from typing import TYPE_CHECKING, List, Optional

from .. import contrast
from ..hct import Hct
from ..utils.math_utils import clamp_double
from .dynamic_color import DynamicColor, foreground_tone, tone_prefers_light_foreground
from .tone_delta_pair import DeltaConstraint, ToneDeltaPair, TonePolarity
from .variant import SpecVersion

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme


def get_tone(scheme: "DynamicScheme", color: DynamicColor) -> float:
    """
    Tone of `color` in `scheme` under the scheme's rule set.

    Args:
        scheme: Scheme supplying palettes, dark mode and contrast level
        color: Role to resolve

    Returns:
        Tone in [0, 100]
    """
    if scheme.spec_version == SpecVersion.SPEC_2025:
        return _tone_2025(scheme, color)
    return _tone_2021(scheme, color)


def get_hct(scheme: "DynamicScheme", color: DynamicColor) -> Hct:
    """
    Color of `color` in `scheme` under the scheme's rule set.

    The 2021 rules take the palette color at the resolved tone. The 2025 rules
    scale the palette chroma by the role's chroma multiplier first.
    """
    palette = color.palette(scheme)
    tone = scheme.get_tone(color)
    if scheme.spec_version == SpecVersion.SPEC_2025:
        multiplier = color.chroma_multiplier(scheme) if color.chroma_multiplier else 1.0
        return Hct.from_hct(palette.hue, palette.chroma * multiplier, tone)
    return palette.get_hct(tone)


def _resolve_pair(scheme: "DynamicScheme", color: DynamicColor) -> Optional[ToneDeltaPair]:
    if color.tone_delta_pair is None:
        return None
    return color.tone_delta_pair(scheme)


def _resolve_background(scheme: "DynamicScheme", color: DynamicColor):
    background = color.background(scheme) if color.background else None
    curve = color.contrast_curve(scheme) if color.contrast_curve else None
    return background, curve


def _dual_background_tone(
    scheme: "DynamicScheme",
    background: DynamicColor,
    second_background: DynamicColor,
    answer: float,
    desired_ratio: float,
) -> float:
    """Tone that contrasts with two backgrounds at once, if one exists."""
    bg_tone_1 = background.get_tone(scheme)
    bg_tone_2 = second_background.get_tone(scheme)
    upper = max(bg_tone_1, bg_tone_2)
    lower = min(bg_tone_1, bg_tone_2)

    if (contrast.ratio_of_tones(upper, answer) >= desired_ratio
            and contrast.ratio_of_tones(lower, answer) >= desired_ratio):
        return answer

    # Darkest light tone and lightest dark tone that reach the ratio.
    light_option = contrast.lighter(upper, desired_ratio)
    dark_option = contrast.darker(lower, desired_ratio)

    availables: List[float] = [t for t in (light_option, dark_option) if t is not None]

    prefers_light = (tone_prefers_light_foreground(bg_tone_1)
                     or tone_prefers_light_foreground(bg_tone_2))
    if prefers_light:
        return 100.0 if light_option is None else light_option
    if len(availables) == 1:
        return availables[0]
    return 0.0 if dark_option is None else dark_option


def _tone_2021(scheme: "DynamicScheme", color: DynamicColor) -> float:
    decreasing_contrast = scheme.contrast_level < 0.0
    pair = _resolve_pair(scheme, color)

    if pair is not None:
        a_is_nearer = (
            pair.polarity == TonePolarity.NEARER
            or (pair.polarity == TonePolarity.LIGHTER and not scheme.is_dark)
            or (pair.polarity == TonePolarity.DARKER and scheme.is_dark)
        )
        nearer = pair.role_a if a_is_nearer else pair.role_b
        farther = pair.role_b if a_is_nearer else pair.role_a
        am_nearer = color.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0
        delta = pair.delta

        n_tone = nearer.tone(scheme)
        f_tone = farther.tone(scheme)

        background = color.background(scheme) if color.background else None
        n_curve = nearer.contrast_curve(scheme) if nearer.contrast_curve else None
        f_curve = farther.contrast_curve(scheme) if farther.contrast_curve else None
        if background is not None and n_curve is not None and f_curve is not None:
            n_contrast = n_curve.get(scheme.contrast_level)
            f_contrast = f_curve.get(scheme.contrast_level)
            bg_tone = background.get_tone(scheme)

            # Tones that already reach their target are left alone.
            if contrast.ratio_of_tones(bg_tone, n_tone) < n_contrast:
                n_tone = foreground_tone(bg_tone, n_contrast)
            if contrast.ratio_of_tones(bg_tone, f_tone) < f_contrast:
                f_tone = foreground_tone(bg_tone, f_contrast)

            if decreasing_contrast:
                n_tone = foreground_tone(bg_tone, n_contrast)
                f_tone = foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            # Expand farther, then contract nearer if farther hit a bound.
            f_tone = clamp_double(0.0, 100.0, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = clamp_double(0.0, 100.0, f_tone - delta * expansion_dir)

        # Keep out of the 50-59 zone, where neither light nor dark text works.
        if 50.0 <= n_tone < 60.0:
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        elif 50.0 <= f_tone < 60.0:
            if pair.stay_together:
                if expansion_dir > 0:
                    n_tone = 60.0
                    f_tone = max(f_tone, n_tone + delta * expansion_dir)
                else:
                    n_tone = 49.0
                    f_tone = min(f_tone, n_tone + delta * expansion_dir)
            else:
                f_tone = 60.0 if expansion_dir > 0 else 49.0

        return n_tone if am_nearer else f_tone

    answer = color.tone(scheme)
    background, curve = _resolve_background(scheme, color)
    if background is None or curve is None:
        return answer

    bg_tone = background.get_tone(scheme)
    desired_ratio = curve.get(scheme.contrast_level)

    if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio:
        answer = foreground_tone(bg_tone, desired_ratio)
    if decreasing_contrast:
        answer = foreground_tone(bg_tone, desired_ratio)

    if color.is_background and 50.0 <= answer < 60.0:
        if contrast.ratio_of_tones(49.0, bg_tone) >= desired_ratio:
            answer = 49.0
        else:
            answer = 60.0

    second_background = color.second_background(scheme) if color.second_background else None
    if second_background is not None:
        return _dual_background_tone(scheme, background, second_background, answer, desired_ratio)
    return answer


def _tone_2025(scheme: "DynamicScheme", color: DynamicColor) -> float:
    pair = _resolve_pair(scheme, color)

    if pair is not None:
        polarity = pair.polarity
        if (polarity == TonePolarity.DARKER
                or (polarity == TonePolarity.RELATIVE_LIGHTER and scheme.is_dark)
                or (polarity == TonePolarity.RELATIVE_DARKER and not scheme.is_dark)):
            absolute_delta = -pair.delta
        else:
            absolute_delta = pair.delta

        am_role_a = color.name == pair.role_a.name
        self_role = pair.role_a if am_role_a else pair.role_b
        reference_role = pair.role_b if am_role_a else pair.role_a
        self_tone = self_role.tone(scheme)
        reference_tone = reference_role.get_tone(scheme)
        relative_delta = absolute_delta * (1.0 if am_role_a else -1.0)

        if pair.constraint == DeltaConstraint.EXACT:
            self_tone = clamp_double(0.0, 100.0, reference_tone + relative_delta)
        elif pair.constraint == DeltaConstraint.NEARER:
            if relative_delta > 0:
                self_tone = clamp_double(reference_tone, reference_tone + relative_delta, self_tone)
            else:
                self_tone = clamp_double(reference_tone + relative_delta, reference_tone, self_tone)
            self_tone = clamp_double(0.0, 100.0, self_tone)
        else:
            if relative_delta > 0:
                self_tone = clamp_double(reference_tone + relative_delta, 100.0, self_tone)
            else:
                self_tone = clamp_double(0.0, reference_tone + relative_delta, self_tone)

        background, curve = _resolve_background(scheme, color)
        if background is not None and curve is not None:
            bg_tone = background.get_tone(scheme)
            self_contrast = curve.get(scheme.contrast_level)
            if not (contrast.ratio_of_tones(bg_tone, self_tone) >= self_contrast
                    and scheme.contrast_level >= 0.0):
                self_tone = foreground_tone(bg_tone, self_contrast)

        # Fixed-dim accents keep their tone; other backgrounds skip 50-64.
        if color.is_background and not color.name.endswith("_fixed_dim"):
            if self_tone >= 57.0:
                self_tone = clamp_double(65.0, 100.0, self_tone)
            else:
                self_tone = clamp_double(0.0, 49.0, self_tone)

        return self_tone

    answer = color.tone(scheme)
    background, curve = _resolve_background(scheme, color)
    if background is None or curve is None:
        return answer

    bg_tone = background.get_tone(scheme)
    desired_ratio = curve.get(scheme.contrast_level)

    if not (contrast.ratio_of_tones(bg_tone, answer) >= desired_ratio
            and scheme.contrast_level >= 0.0):
        answer = foreground_tone(bg_tone, desired_ratio)

    if color.is_background and not color.name.endswith("_fixed_dim"):
        if answer >= 57.0:
            answer = clamp_double(65.0, 100.0, answer)
        else:
            answer = clamp_double(0.0, 49.0, answer)

    second_background = color.second_background(scheme) if color.second_background else None
    if second_background is not None:
        return _dual_background_tone(scheme, background, second_background, answer, desired_ratio)
    return answer
