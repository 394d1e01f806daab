"""
Plain-data entry points to the color core.

Every function here validates its inputs up front and raises
ColorValidationError before any algorithm runs, so callers never observe
partial state. Outputs are ints, floats, dicts and lists only.
"""

import math
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from loguru import logger

from huetone.config import config

from .contrast import ratio_of_tones
from .dynamiccolor import DynamicScheme, Platform, SpecVersion, Variant
from .errors import ColorValidationError
from .hct import Hct
from .palettes import TonalPalette
from .quantize import QuantizerCelebi
from .score import ScoredColor, score
from .utils.math_utils import clamp_double
from .utils.string_utils import argb_from_hex

Seed = Union[int, str, Hct, Mapping[str, float], Sequence[float]]
E = TypeVar("E", Variant, Platform, SpecVersion)


def resolve_scheme(
    seed: Seed,
    variant: Union[Variant, str, None] = None,
    contrast_level: Optional[float] = None,
    is_dark: bool = False,
    platform: Union[Platform, str, None] = None,
    spec_version: Union[SpecVersion, str, None] = None,
) -> Dict[str, int]:
    """
    Resolve every color role for a seed color.

    Args:
        seed: Packed ARGB int, hex string, Hct, {"hue", "chroma", "tone"}
            mapping or (hue, chroma, tone) sequence
        variant: Variant or its name; configured default when omitted
        contrast_level: -1 to 1; configured default when omitted
        is_dark: Dark theme when True
        platform: Platform or its name; configured default when omitted
        spec_version: SpecVersion or its name; configured default when omitted

    Returns:
        Role name to packed ARGB, in canonical role order

    Raises:
        ColorValidationError: If any argument is out of range or malformed
    """
    source = parse_seed(seed)
    variant = parse_enum(Variant, config.DEFAULT_VARIANT if variant is None else variant, "variant")
    platform = parse_enum(Platform, config.DEFAULT_PLATFORM if platform is None else platform, "platform")
    spec_version = parse_enum(
        SpecVersion, config.DEFAULT_SPEC_VERSION if spec_version is None else spec_version, "spec_version"
    )
    contrast_level = validate_contrast_level(
        config.DEFAULT_CONTRAST_LEVEL if contrast_level is None else contrast_level
    )
    if not isinstance(is_dark, bool):
        raise ColorValidationError(f"is_dark must be a boolean, got {is_dark!r}", field="is_dark")

    scheme = DynamicScheme.from_variant(
        source,
        variant,
        is_dark,
        contrast_level=contrast_level,
        platform=platform,
        spec_version=spec_version,
    )
    return scheme.resolve_all()


def quantize_and_score(
    pixels: Sequence[int],
    k: Optional[int] = None,
    top_n: Optional[int] = None,
) -> List[ScoredColor]:
    """
    Quantize pixels and rank the clusters as theme seeds.

    Args:
        pixels: Packed ARGB pixels; non-opaque pixels are ignored
        k: Maximum cluster count; configured default when omitted
        top_n: Maximum number of ranked colors; configured default when omitted

    Returns:
        Ranked colors, best first. Empty input gives an empty list.

    Raises:
        ColorValidationError: If k or top_n is not a positive integer, or a
            pixel is not a 32-bit value
    """
    k = config.QUANTIZER_MAX_COLORS if k is None else k
    top_n = config.SCORE_DESIRED if top_n is None else top_n
    if not _is_int(k) or not config.validate_max_colors(k):
        raise ColorValidationError(f"k must be a positive integer, got {k!r}", field="k")
    if not _is_int(top_n) or not config.validate_top_n(top_n):
        raise ColorValidationError(f"top_n must be a positive integer, got {top_n!r}", field="top_n")
    if not config.validate_pixel_count(len(pixels)):
        raise ColorValidationError(
            f"At most {config.MAX_PIXELS} pixels are accepted, got {len(pixels)}", field="pixels"
        )
    for pixel in pixels:
        validate_argb(pixel, "pixels")

    if not pixels:
        return []

    result = QuantizerCelebi().quantize(pixels, k)
    if not result.color_to_count:
        logger.debug("Quantizer found no opaque pixels")
        return []
    ranked = score(result.color_to_count, desired=top_n, fallback_color_argb=config.SCORE_FALLBACK_COLOR)
    logger.debug(f"Ranked {len(ranked)} seed colors from {len(pixels)} pixels (k={k})")
    return ranked


def hct_to_argb(hue: float, chroma: float, tone: float) -> int:
    """
    Closest displayable color to an HCT request.

    Hue wraps, tone is clamped to [0, 100] and negative chroma counts as 0.

    Raises:
        ColorValidationError: If a component is not a finite number
    """
    hue = _finite(hue, "hue")
    chroma = max(0.0, _finite(chroma, "chroma"))
    tone = clamp_double(0.0, 100.0, _finite(tone, "tone"))
    return Hct.from_hct(hue, chroma, tone).to_int()


def argb_to_hct(argb: int) -> Hct:
    """HCT of a packed ARGB color."""
    return Hct.from_int(validate_argb(argb, "argb"))


def contrast_ratio(tone_a: float, tone_b: float) -> float:
    """WCAG contrast ratio of two tones, in [1, 21]."""
    return ratio_of_tones(_finite(tone_a, "tone_a"), _finite(tone_b, "tone_b"))


def tonal_palette_color_at(hue: float, chroma: float, tone: float) -> int:
    """ARGB of a hue/chroma palette at one tone."""
    hue = _finite(hue, "hue")
    chroma = max(0.0, _finite(chroma, "chroma"))
    tone = clamp_double(0.0, 100.0, _finite(tone, "tone"))
    return TonalPalette.from_hue_and_chroma(hue, chroma).tone(tone)


def parse_seed(seed: Any) -> Hct:
    """
    Turn any accepted seed form into an Hct.

    Explicit HCT seeds must have hue in [0, 360], chroma >= 0 and tone in
    [0, 100].
    """
    if isinstance(seed, Hct):
        return seed
    if isinstance(seed, str):
        return Hct.from_int(argb_from_hex(seed))
    if _is_int(seed):
        return Hct.from_int(validate_argb(seed, "seed"))
    if isinstance(seed, Mapping):
        missing = {"hue", "chroma", "tone"} - set(seed)
        if missing:
            raise ColorValidationError(f"HCT seed is missing {sorted(missing)}", field="seed")
        return _hct_seed(seed["hue"], seed["chroma"], seed["tone"])
    if isinstance(seed, Sequence) and len(seed) == 3:
        return _hct_seed(*seed)
    raise ColorValidationError(f"Unsupported seed {seed!r}", field="seed")


def parse_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """Accept an enum member, its value or its name in any case."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        text = value.strip()
        for member in enum_cls:
            if text.lower() in (member.value.lower(), member.name.lower()):
                return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ColorValidationError(f"Unknown {field} {value!r}; expected one of {choices}", field=field)


def validate_contrast_level(contrast_level: Any) -> float:
    if not isinstance(contrast_level, Real) or isinstance(contrast_level, bool):
        raise ColorValidationError(
            f"contrast_level must be a number, got {contrast_level!r}", field="contrast_level"
        )
    contrast_level = float(contrast_level)
    if not config.validate_contrast_level(contrast_level):
        raise ColorValidationError(
            f"contrast_level must be within [-1, 1], got {contrast_level}", field="contrast_level"
        )
    return contrast_level


def validate_argb(argb: Any, field: str) -> int:
    if not _is_int(argb) or not config.validate_argb(argb):
        raise ColorValidationError(f"{field} must be a 32-bit ARGB integer, got {argb!r}", field=field)
    return int(argb)


def _hct_seed(hue: Any, chroma: Any, tone: Any) -> Hct:
    hue = _finite(hue, "hue")
    chroma = _finite(chroma, "chroma")
    tone = _finite(tone, "tone")
    if not 0.0 <= hue <= 360.0:
        raise ColorValidationError(f"Seed hue must be within [0, 360], got {hue}", field="hue")
    if chroma < 0.0:
        raise ColorValidationError(f"Seed chroma must not be negative, got {chroma}", field="chroma")
    if not 0.0 <= tone <= 100.0:
        raise ColorValidationError(f"Seed tone must be within [0, 100], got {tone}", field="tone")
    return Hct.from_hct(hue, chroma, tone)


def _finite(value: Any, field: str) -> float:
    if not isinstance(value, Real) or isinstance(value, bool) or not math.isfinite(value):
        raise ColorValidationError(f"{field} must be a finite number, got {value!r}", field=field)
    return float(value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
