"""
Dynamic colors: named UI roles whose tone depends on the scheme.

A DynamicColor is a declarative record. Each field is a function of the
scheme (palette, tone, background, contrast curve, tone-delta pair, ...) and
the scheme resolves it into a concrete color, caching the result per scheme
instance.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .. import contrast
from ..hct import Hct
from ..palettes import TonalPalette
from ..utils.math_utils import clamp_int, round_half_away
from .contrast_curve import ContrastCurve
from .tone_delta_pair import ToneDeltaPair

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme

SchemeFn = Callable[["DynamicScheme"], float]


@dataclass(frozen=True, eq=False)
class DynamicColor:
    """
    A color role resolved against a DynamicScheme.

    Args:
        name: Role name, unique within a scheme
        palette: Selects the tonal palette the role draws from
        tone: Proposed tone before contrast adjustment; defaults to the
            background's tone, or 50 without a background
        is_background: Whether other roles use this one as a background
        chroma_multiplier: Scales palette chroma (2025 rules only)
        background: Role this color must contrast with
        second_background: Second role it must contrast with
        contrast_curve: Required contrast against the background
        tone_delta_pair: Tone distance constraint with another role
        opacity: Alpha in [0, 1], folded into the resolved ARGB
    """
    name: str
    palette: Callable[["DynamicScheme"], TonalPalette]
    tone: Optional[SchemeFn] = None
    is_background: bool = False
    chroma_multiplier: Optional[SchemeFn] = None
    background: Optional[Callable[["DynamicScheme"], Optional["DynamicColor"]]] = None
    second_background: Optional[Callable[["DynamicScheme"], Optional["DynamicColor"]]] = None
    contrast_curve: Optional[Callable[["DynamicScheme"], Optional[ContrastCurve]]] = None
    tone_delta_pair: Optional[Callable[["DynamicScheme"], Optional[ToneDeltaPair]]] = None
    opacity: Optional[Callable[["DynamicScheme"], Optional[float]]] = None

    def __post_init__(self):
        if self.tone is None:
            object.__setattr__(self, "tone", initial_tone_from_background(self.background))

    def get_tone(self, scheme: "DynamicScheme") -> float:
        """Resolved tone of this role in `scheme`."""
        return scheme.get_tone(self)

    def get_hct(self, scheme: "DynamicScheme") -> Hct:
        """Resolved color of this role in `scheme`."""
        return scheme.get_hct(self)

    def get_argb(self, scheme: "DynamicScheme") -> int:
        """
        Resolved ARGB of this role, with opacity applied to the alpha channel.

        Args:
            scheme: Scheme to resolve against

        Returns:
            Packed ARGB color
        """
        argb = self.get_hct(scheme).to_int()
        if self.opacity is None:
            return argb
        percentage = self.opacity(scheme)
        if percentage is None:
            return argb
        alpha = clamp_int(0, 255, round_half_away(percentage * 255.0))
        return (argb & 0x00ffffff) | (alpha << 24)

    def __repr__(self) -> str:
        return f"DynamicColor(name={self.name!r}, is_background={self.is_background})"


def initial_tone_from_background(
    background: Optional[Callable[["DynamicScheme"], Optional[DynamicColor]]],
) -> SchemeFn:
    """Tone function that starts a role at its background's tone, else 50."""
    if background is None:
        return lambda s: 50.0

    def tone(s: "DynamicScheme") -> float:
        bg = background(s)
        return bg.get_tone(s) if bg is not None else 50.0

    return tone


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """
    Tone that reaches `ratio` against `bg_tone`, lighter or darker.

    Prefers the lighter side for dark backgrounds and the darker side for
    light ones, switching sides when only the other one reaches the ratio.

    Args:
        bg_tone: Background tone
        ratio: Desired contrast ratio

    Returns:
        Foreground tone in [0, 100]
    """
    lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
    darker_tone = contrast.darker_unsafe(bg_tone, ratio)
    lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # Both sides can fall just short of a very high ratio; when they are
        # within 0.1 of each other the light side still wins.
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone

    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


def enable_light_foreground(tone: float) -> float:
    """Darken a tone just enough that a light foreground works on it."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def tone_prefers_light_foreground(tone: float) -> bool:
    """Whether light text reads better than dark text on this tone."""
    return round_half_away(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    """Whether light text reaches its contrast target on this tone."""
    return round_half_away(tone) <= 49
