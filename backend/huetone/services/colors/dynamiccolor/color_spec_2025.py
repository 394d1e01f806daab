"""
Role definitions of the 2025 color system.

Overrides the 2021 roles that changed and adds the *_dim roles. Palette key
colors, shadow, scrim and the Android control colors are inherited as they
were. Several legacy roles are now aliases: background is surface,
surface_variant is surface_container_highest and surface_tint is primary.
"""

from dataclasses import replace
from functools import cached_property

from ..hct import Hct
from ..palettes import TonalPalette
from ..utils.math_utils import clamp_double
from .color_spec_2021 import ColorSpec2021
from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor
from .tone_delta_pair import DeltaConstraint, ToneDeltaPair, TonePolarity
from .variant import Platform, Variant

_CONTRAST_CURVES = {
    1.5: ContrastCurve(1.5, 1.5, 3.0, 4.5),
    3.0: ContrastCurve(3.0, 3.0, 4.5, 7.0),
    4.5: ContrastCurve(4.5, 4.5, 7.0, 11.0),
    6.0: ContrastCurve(6.0, 6.0, 7.0, 11.0),
    7.0: ContrastCurve(7.0, 7.0, 11.0, 21.0),
    9.0: ContrastCurve(9.0, 9.0, 11.0, 21.0),
    11.0: ContrastCurve(11.0, 11.0, 21.0, 21.0),
    21.0: ContrastCurve(21.0, 21.0, 21.0, 21.0),
}


def get_contrast_curve(default_contrast: float) -> ContrastCurve:
    """Standard curve for a role whose normal-contrast target is `default_contrast`."""
    curve = _CONTRAST_CURVES.get(default_contrast)
    if curve is None:
        return ContrastCurve(default_contrast, default_contrast, 7.0, 21.0)
    return curve


def find_best_tone_for_chroma(hue: float, chroma: float, tone: float, by_decreasing_tone: bool) -> float:
    """
    Tone with the most chroma, walking one step at a time from `tone`.

    Stops as soon as the requested chroma is reached or the walk leaves
    [0, 100].
    """
    answer = tone
    best_candidate = Hct.from_hct(hue, chroma, answer)
    while best_candidate.chroma < chroma:
        if tone < 0.0 or tone > 100.0:
            break
        tone += -1.0 if by_decreasing_tone else 1.0
        new_candidate = Hct.from_hct(hue, chroma, tone)
        if best_candidate.chroma < new_candidate.chroma:
            best_candidate = new_candidate
            answer = tone
    return answer


def t_max_c(palette: TonalPalette, lower_bound: float = 0.0, upper_bound: float = 100.0,
            chroma_multiplier: float = 1.0) -> float:
    """Lightest tone at which the palette peaks in chroma, clamped."""
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma * chroma_multiplier, 100.0, True)
    return clamp_double(lower_bound, upper_bound, answer)


def t_min_c(palette: TonalPalette, lower_bound: float = 0.0, upper_bound: float = 100.0) -> float:
    """Darkest tone at which the palette peaks in chroma, clamped."""
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma, 0.0, False)
    return clamp_double(lower_bound, upper_bound, answer)


def _is_phone(s) -> bool:
    return s.platform == Platform.PHONE


def _neutral_is_yellow(s) -> bool:
    return Hct.is_yellow(s.neutral_palette.hue)


def _dim_bright_multiplier(s) -> float:
    if s.variant == Variant.NEUTRAL:
        return 2.5
    if s.variant == Variant.TONAL_SPOT:
        return 1.7
    if s.variant == Variant.EXPRESSIVE:
        return 2.7 if _neutral_is_yellow(s) else 1.75
    if s.variant == Variant.VIBRANT:
        return 1.36
    return 1.0


def _container_multiplier(s, neutral, tonal_spot, expressive_yellow, expressive, vibrant) -> float:
    if s.variant == Variant.NEUTRAL:
        return neutral
    if s.variant == Variant.TONAL_SPOT:
        return tonal_spot
    if s.variant == Variant.EXPRESSIVE:
        return expressive_yellow if _neutral_is_yellow(s) else expressive
    if s.variant == Variant.VIBRANT:
        return vibrant
    return 1.0


def _on_surface_multiplier(s) -> float:
    if not _is_phone(s):
        return 1.0
    if s.variant == Variant.NEUTRAL:
        return 2.2
    if s.variant == Variant.TONAL_SPOT:
        return 1.7
    if s.variant == Variant.EXPRESSIVE:
        if _neutral_is_yellow(s):
            return 3.0 if s.is_dark else 2.3
        return 1.6
    return 1.0


def _phone_or_watch(s, phone: float, watch: float) -> ContrastCurve:
    return get_contrast_curve(phone if _is_phone(s) else watch)


def _container_curve(s):
    if _is_phone(s) and s.contrast_level > 0.0:
        return get_contrast_curve(1.5)
    return None


class ColorSpec2025(ColorSpec2021):
    """Roles of the 2025 color system."""

    def surface_background(self, s) -> DynamicColor:
        """Surface that accents and text sit on for the scheme's platform."""
        if _is_phone(s):
            return self.surface_bright if s.is_dark else self.surface_dim
        return self.surface_container_high

    def _phone_surface(self, s):
        if _is_phone(s):
            return self.surface_bright if s.is_dark else self.surface_dim
        return None

    # Surfaces

    @cached_property
    def background(self) -> DynamicColor:
        return replace(self.surface, name="background")

    @cached_property
    def on_background(self) -> DynamicColor:
        return replace(
            self.on_surface,
            name="on_background",
            tone=lambda s: 100.0 if s.platform == Platform.WATCH else self.on_surface.get_tone(s),
        )

    @cached_property
    def surface(self) -> DynamicColor:
        def tone(s):
            if not _is_phone(s):
                return 0.0
            if s.is_dark:
                return 4.0
            if _neutral_is_yellow(s):
                return 99.0
            return 97.0 if s.variant == Variant.VIBRANT else 98.0

        return DynamicColor(
            name="surface",
            palette=lambda s: s.neutral_palette,
            tone=tone,
            is_background=True,
        )

    @cached_property
    def surface_dim(self) -> DynamicColor:
        def tone(s):
            if s.is_dark:
                return 4.0
            if _neutral_is_yellow(s):
                return 90.0
            return 85.0 if s.variant == Variant.VIBRANT else 87.0

        return DynamicColor(
            name="surface_dim",
            palette=lambda s: s.neutral_palette,
            tone=tone,
            is_background=True,
            chroma_multiplier=lambda s: 1.0 if s.is_dark else _dim_bright_multiplier(s),
        )

    @cached_property
    def surface_bright(self) -> DynamicColor:
        def tone(s):
            if s.is_dark:
                return 18.0
            if _neutral_is_yellow(s):
                return 99.0
            return 97.0 if s.variant == Variant.VIBRANT else 98.0

        return DynamicColor(
            name="surface_bright",
            palette=lambda s: s.neutral_palette,
            tone=tone,
            is_background=True,
            chroma_multiplier=lambda s: _dim_bright_multiplier(s) if s.is_dark else 1.0,
        )

    @cached_property
    def surface_container_lowest(self) -> DynamicColor:
        return DynamicColor(
            name="surface_container_lowest",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 0.0 if s.is_dark else 100.0,
            is_background=True,
        )

    def _surface_container(self, name, dark, yellow, vibrant, light, watch, multipliers) -> DynamicColor:
        def tone(s):
            if not _is_phone(s):
                return watch
            if s.is_dark:
                return dark
            if _neutral_is_yellow(s):
                return yellow
            return vibrant if s.variant == Variant.VIBRANT else light

        def chroma_multiplier(s):
            if not _is_phone(s):
                return 1.0
            return _container_multiplier(s, *multipliers)

        return DynamicColor(
            name=name,
            palette=lambda s: s.neutral_palette,
            tone=tone,
            is_background=True,
            chroma_multiplier=chroma_multiplier,
        )

    @cached_property
    def surface_container_low(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_low", 6.0, 98.0, 95.0, 96.0, 15.0, (1.3, 1.25, 1.3, 1.15, 1.08))

    @cached_property
    def surface_container(self) -> DynamicColor:
        return self._surface_container(
            "surface_container", 9.0, 96.0, 92.0, 94.0, 20.0, (1.6, 1.4, 1.6, 1.3, 1.15))

    @cached_property
    def surface_container_high(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_high", 12.0, 94.0, 90.0, 92.0, 25.0, (1.9, 1.5, 1.95, 1.45, 1.22))

    @cached_property
    def surface_container_highest(self) -> DynamicColor:
        def tone(s):
            if s.is_dark:
                return 15.0
            if _neutral_is_yellow(s):
                return 92.0
            return 88.0 if s.variant == Variant.VIBRANT else 90.0

        return DynamicColor(
            name="surface_container_highest",
            palette=lambda s: s.neutral_palette,
            tone=tone,
            is_background=True,
            chroma_multiplier=lambda s: _container_multiplier(s, 2.2, 1.7, 2.3, 1.6, 1.29),
        )

    @cached_property
    def on_surface(self) -> DynamicColor:
        def tone(s):
            if s.variant == Variant.VIBRANT:
                return t_max_c(s.neutral_palette, 0.0, 100.0, 1.1)
            return self.surface_background(s).get_tone(s)

        return DynamicColor(
            name="on_surface",
            palette=lambda s: s.neutral_palette,
            tone=tone,
            chroma_multiplier=_on_surface_multiplier,
            background=self.surface_background,
            contrast_curve=lambda s: get_contrast_curve(11.0 if s.is_dark and _is_phone(s) else 9.0),
        )

    @cached_property
    def surface_variant(self) -> DynamicColor:
        return replace(self.surface_container_highest, name="surface_variant")

    @cached_property
    def on_surface_variant(self) -> DynamicColor:
        def curve(s):
            if _is_phone(s):
                return get_contrast_curve(6.0 if s.is_dark else 4.5)
            return get_contrast_curve(7.0)

        return DynamicColor(
            name="on_surface_variant",
            palette=lambda s: s.neutral_palette,
            chroma_multiplier=_on_surface_multiplier,
            background=self.surface_background,
            contrast_curve=curve,
        )

    @cached_property
    def inverse_surface(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 98.0 if s.is_dark else 4.0,
            is_background=True,
        )

    @cached_property
    def inverse_on_surface(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_on_surface",
            palette=lambda s: s.neutral_palette,
            background=lambda s: self.inverse_surface,
            contrast_curve=lambda s: get_contrast_curve(7.0),
        )

    @cached_property
    def outline(self) -> DynamicColor:
        return DynamicColor(
            name="outline",
            palette=lambda s: s.neutral_palette,
            chroma_multiplier=_on_surface_multiplier,
            background=self.surface_background,
            contrast_curve=lambda s: _phone_or_watch(s, 3.0, 4.5),
        )

    @cached_property
    def outline_variant(self) -> DynamicColor:
        return DynamicColor(
            name="outline_variant",
            palette=lambda s: s.neutral_palette,
            chroma_multiplier=_on_surface_multiplier,
            background=self.surface_background,
            contrast_curve=lambda s: _phone_or_watch(s, 1.5, 3.0),
        )

    @cached_property
    def surface_tint(self) -> DynamicColor:
        return replace(self.primary, name="surface_tint")

    # Primaries

    @cached_property
    def primary(self) -> DynamicColor:
        def tone(s):
            palette = s.primary_palette
            if s.variant == Variant.NEUTRAL:
                if _is_phone(s):
                    return 80.0 if s.is_dark else 40.0
                return 90.0
            if s.variant == Variant.TONAL_SPOT:
                if _is_phone(s):
                    return 80.0 if s.is_dark else t_max_c(palette)
                return t_max_c(palette, 0.0, 90.0)
            if s.variant == Variant.EXPRESSIVE:
                if Hct.is_yellow(palette.hue):
                    upper = 25.0
                elif Hct.is_cyan(palette.hue):
                    upper = 88.0
                else:
                    upper = 98.0
                return t_max_c(palette, 0.0, upper)
            return t_max_c(palette, 0.0, 88.0 if Hct.is_cyan(palette.hue) else 98.0)

        return DynamicColor(
            name="primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=self.surface_background,
            contrast_curve=lambda s: _phone_or_watch(s, 4.5, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container, self.primary, 5.0, TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.FARTHER,
            ) if _is_phone(s) else None,
        )

    @cached_property
    def primary_dim(self) -> DynamicColor:
        def tone(s):
            if s.variant == Variant.NEUTRAL:
                return 85.0
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(s.primary_palette, 0.0, 90.0)
            return t_max_c(s.primary_palette)

        return DynamicColor(
            name="primary_dim",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high,
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_dim, self.primary, 5.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_primary(self) -> DynamicColor:
        return DynamicColor(
            name="on_primary",
            palette=lambda s: s.primary_palette,
            background=lambda s: self.primary if _is_phone(s) else self.primary_dim,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    @cached_property
    def primary_container(self) -> DynamicColor:
        def tone(s):
            palette = s.primary_palette
            if not _is_phone(s):
                return 30.0
            if s.variant == Variant.NEUTRAL:
                return 30.0 if s.is_dark else 90.0
            if s.variant == Variant.TONAL_SPOT:
                if s.is_dark:
                    return t_min_c(palette, 35.0, 93.0)
                return t_max_c(palette, 0.0, 90.0)
            if s.variant == Variant.EXPRESSIVE:
                if s.is_dark:
                    return t_max_c(palette, 30.0, 93.0)
                return t_max_c(palette, 78.0, 88.0 if Hct.is_cyan(palette.hue) else 90.0)
            if s.is_dark:
                return t_min_c(palette, 66.0, 93.0)
            return t_max_c(palette, 66.0, 88.0 if Hct.is_cyan(palette.hue) else 93.0)

        return DynamicColor(
            name="primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=self._phone_surface,
            contrast_curve=_container_curve,
            tone_delta_pair=lambda s: None if _is_phone(s) else ToneDeltaPair(
                self.primary_container, self.primary_dim, 10.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_primary_container(self) -> DynamicColor:
        return DynamicColor(
            name="on_primary_container",
            palette=lambda s: s.primary_palette,
            background=lambda s: self.primary_container,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    @cached_property
    def inverse_primary(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_primary",
            palette=lambda s: s.primary_palette,
            tone=lambda s: t_max_c(s.primary_palette),
            background=lambda s: self.inverse_surface,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    # Secondaries

    @cached_property
    def secondary(self) -> DynamicColor:
        def tone(s):
            palette = s.secondary_palette
            if not _is_phone(s):
                if s.variant == Variant.NEUTRAL:
                    return 90.0
                return t_max_c(palette, 0.0, 90.0)
            if s.variant == Variant.NEUTRAL:
                return t_min_c(palette, 0.0, 98.0) if s.is_dark else t_max_c(palette)
            return 80.0 if s.is_dark else t_max_c(palette)

        return DynamicColor(
            name="secondary",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=self.surface_background,
            contrast_curve=lambda s: _phone_or_watch(s, 4.5, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container, self.secondary, 5.0, TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.FARTHER,
            ) if _is_phone(s) else None,
        )

    @cached_property
    def secondary_dim(self) -> DynamicColor:
        def tone(s):
            if s.variant == Variant.NEUTRAL:
                return 85.0
            return t_max_c(s.secondary_palette, 0.0, 90.0)

        return DynamicColor(
            name="secondary_dim",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high,
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_dim, self.secondary, 5.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_secondary(self) -> DynamicColor:
        return DynamicColor(
            name="on_secondary",
            palette=lambda s: s.secondary_palette,
            background=lambda s: self.secondary if _is_phone(s) else self.secondary_dim,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    @cached_property
    def secondary_container(self) -> DynamicColor:
        def tone(s):
            palette = s.secondary_palette
            if not _is_phone(s):
                return 30.0
            if s.variant == Variant.VIBRANT:
                if s.is_dark:
                    return t_min_c(palette, 30.0, 40.0)
                return t_max_c(palette, 84.0, 90.0)
            if s.variant == Variant.EXPRESSIVE:
                return 15.0 if s.is_dark else t_max_c(palette, 90.0, 95.0)
            return 25.0 if s.is_dark else 90.0

        return DynamicColor(
            name="secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=self._phone_surface,
            contrast_curve=_container_curve,
            tone_delta_pair=lambda s: None if _is_phone(s) else ToneDeltaPair(
                self.secondary_container, self.secondary_dim, 10.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_secondary_container(self) -> DynamicColor:
        return DynamicColor(
            name="on_secondary_container",
            palette=lambda s: s.secondary_palette,
            background=lambda s: self.secondary_container,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    # Tertiaries

    @cached_property
    def tertiary(self) -> DynamicColor:
        def tone(s):
            palette = s.tertiary_palette
            if not _is_phone(s):
                if s.variant == Variant.TONAL_SPOT:
                    return t_max_c(palette, 0.0, 90.0)
                return t_max_c(palette)
            if s.variant in (Variant.EXPRESSIVE, Variant.VIBRANT):
                if Hct.is_cyan(palette.hue):
                    upper = 88.0
                else:
                    upper = 98.0 if s.is_dark else 100.0
                return t_max_c(palette, 0.0, upper)
            if s.is_dark:
                return t_max_c(palette, 0.0, 98.0)
            return t_max_c(palette)

        return DynamicColor(
            name="tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=self.surface_background,
            contrast_curve=lambda s: _phone_or_watch(s, 4.5, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container, self.tertiary, 5.0, TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.FARTHER,
            ) if _is_phone(s) else None,
        )

    @cached_property
    def tertiary_dim(self) -> DynamicColor:
        def tone(s):
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(s.tertiary_palette, 0.0, 90.0)
            return t_max_c(s.tertiary_palette)

        return DynamicColor(
            name="tertiary_dim",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high,
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_dim, self.tertiary, 5.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_tertiary(self) -> DynamicColor:
        return DynamicColor(
            name="on_tertiary",
            palette=lambda s: s.tertiary_palette,
            background=lambda s: self.tertiary if _is_phone(s) else self.tertiary_dim,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    @cached_property
    def tertiary_container(self) -> DynamicColor:
        def tone(s):
            palette = s.tertiary_palette
            if not _is_phone(s):
                if s.variant == Variant.TONAL_SPOT:
                    return t_max_c(palette, 0.0, 90.0)
                return t_max_c(palette)
            if s.variant == Variant.NEUTRAL:
                return t_max_c(palette, 0.0, 93.0 if s.is_dark else 96.0)
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(palette, 0.0, 93.0 if s.is_dark else 100.0)
            if s.variant == Variant.EXPRESSIVE:
                if Hct.is_cyan(palette.hue):
                    upper = 88.0
                else:
                    upper = 93.0 if s.is_dark else 100.0
                return t_max_c(palette, 75.0, upper)
            if s.is_dark:
                return t_max_c(palette, 0.0, 93.0)
            return t_max_c(palette, 72.0, 100.0)

        return DynamicColor(
            name="tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=self._phone_surface,
            contrast_curve=_container_curve,
            tone_delta_pair=lambda s: None if _is_phone(s) else ToneDeltaPair(
                self.tertiary_container, self.tertiary_dim, 10.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_tertiary_container(self) -> DynamicColor:
        return DynamicColor(
            name="on_tertiary_container",
            palette=lambda s: s.tertiary_palette,
            background=lambda s: self.tertiary_container,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    # Errors

    @cached_property
    def error(self) -> DynamicColor:
        def tone(s):
            if _is_phone(s):
                if s.is_dark:
                    return t_min_c(s.error_palette, 0.0, 98.0)
                return t_max_c(s.error_palette)
            return t_min_c(s.error_palette)

        return DynamicColor(
            name="error",
            palette=lambda s: s.error_palette,
            tone=tone,
            is_background=True,
            background=self.surface_background,
            contrast_curve=lambda s: _phone_or_watch(s, 4.5, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container, self.error, 5.0, TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.FARTHER,
            ) if _is_phone(s) else None,
        )

    @cached_property
    def error_dim(self) -> DynamicColor:
        return DynamicColor(
            name="error_dim",
            palette=lambda s: s.error_palette,
            tone=lambda s: t_min_c(s.error_palette),
            is_background=True,
            background=lambda s: self.surface_container_high,
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_dim, self.error, 5.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_error(self) -> DynamicColor:
        return DynamicColor(
            name="on_error",
            palette=lambda s: s.error_palette,
            background=lambda s: self.error if _is_phone(s) else self.error_dim,
            contrast_curve=lambda s: _phone_or_watch(s, 6.0, 7.0),
        )

    @cached_property
    def error_container(self) -> DynamicColor:
        def tone(s):
            if not _is_phone(s):
                return 30.0
            if s.is_dark:
                return t_min_c(s.error_palette, 30.0, 93.0)
            return t_max_c(s.error_palette, 0.0, 90.0)

        return DynamicColor(
            name="error_container",
            palette=lambda s: s.error_palette,
            tone=tone,
            is_background=True,
            background=self._phone_surface,
            contrast_curve=_container_curve,
            tone_delta_pair=lambda s: None if _is_phone(s) else ToneDeltaPair(
                self.error_container, self.error_dim, 10.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @cached_property
    def on_error_container(self) -> DynamicColor:
        return DynamicColor(
            name="on_error_container",
            palette=lambda s: s.error_palette,
            background=lambda s: self.error_container,
            contrast_curve=lambda s: _phone_or_watch(s, 4.5, 7.0),
        )

    # Fixed colors keep their light-theme, standard-contrast tone in every scheme.

    def _fixed(self, name: str, palette, container_name: str) -> DynamicColor:
        def tone(s):
            light_scheme = s.with_overrides(is_dark=False, contrast_level=0.0)
            return getattr(self, container_name).get_tone(light_scheme)

        return DynamicColor(
            name=name,
            palette=palette,
            tone=tone,
            is_background=True,
            background=self._phone_surface,
            contrast_curve=_container_curve,
        )

    def _fixed_dim(self, name: str, palette, fixed_name: str) -> DynamicColor:
        return DynamicColor(
            name=name,
            palette=palette,
            tone=lambda s: getattr(self, fixed_name).get_tone(s),
            is_background=True,
            tone_delta_pair=lambda s: ToneDeltaPair(
                getattr(self, name), getattr(self, fixed_name), 5.0, TonePolarity.DARKER,
                constraint=DeltaConstraint.EXACT,
            ),
        )

    @cached_property
    def primary_fixed(self) -> DynamicColor:
        return self._fixed("primary_fixed", lambda s: s.primary_palette, "primary_container")

    @cached_property
    def primary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim("primary_fixed_dim", lambda s: s.primary_palette, "primary_fixed")

    @cached_property
    def on_primary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="on_primary_fixed",
            palette=lambda s: s.primary_palette,
            background=lambda s: self.primary_fixed_dim,
            contrast_curve=lambda s: get_contrast_curve(7.0),
        )

    @cached_property
    def on_primary_fixed_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_primary_fixed_variant",
            palette=lambda s: s.primary_palette,
            background=lambda s: self.primary_fixed_dim,
            contrast_curve=lambda s: get_contrast_curve(4.5),
        )

    @cached_property
    def secondary_fixed(self) -> DynamicColor:
        return self._fixed("secondary_fixed", lambda s: s.secondary_palette, "secondary_container")

    @cached_property
    def secondary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim("secondary_fixed_dim", lambda s: s.secondary_palette, "secondary_fixed")

    @cached_property
    def on_secondary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="on_secondary_fixed",
            palette=lambda s: s.secondary_palette,
            background=lambda s: self.secondary_fixed_dim,
            contrast_curve=lambda s: get_contrast_curve(7.0),
        )

    @cached_property
    def on_secondary_fixed_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_secondary_fixed_variant",
            palette=lambda s: s.secondary_palette,
            background=lambda s: self.secondary_fixed_dim,
            contrast_curve=lambda s: get_contrast_curve(4.5),
        )

    @cached_property
    def tertiary_fixed(self) -> DynamicColor:
        return self._fixed("tertiary_fixed", lambda s: s.tertiary_palette, "tertiary_container")

    @cached_property
    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim("tertiary_fixed_dim", lambda s: s.tertiary_palette, "tertiary_fixed")

    @cached_property
    def on_tertiary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="on_tertiary_fixed",
            palette=lambda s: s.tertiary_palette,
            background=lambda s: self.tertiary_fixed_dim,
            contrast_curve=lambda s: get_contrast_curve(7.0),
        )

    @cached_property
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_tertiary_fixed_variant",
            palette=lambda s: s.tertiary_palette,
            background=lambda s: self.tertiary_fixed_dim,
            contrast_curve=lambda s: get_contrast_curve(4.5),
        )
