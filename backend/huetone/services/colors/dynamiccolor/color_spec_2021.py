"""
Role definitions of the 2021 color system.

Every role is built once per spec instance and cached. Roles refer to each
other through lambdas, so a role's background or pair partner is only looked
up when a scheme resolves it.
"""

from functools import cached_property

from ..dislike import fix_if_disliked
from ..hct import Hct
from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor, foreground_tone
from .tone_delta_pair import ToneDeltaPair, TonePolarity
from .variant import Variant


def _is_fidelity(s) -> bool:
    return s.variant in (Variant.FIDELITY, Variant.CONTENT)


def _is_monochrome(s) -> bool:
    return s.variant == Variant.MONOCHROME


def find_desired_chroma_by_tone(hue: float, chroma: float, tone: float, by_decreasing_tone: bool) -> float:
    """
    Walk tone until the palette reaches `chroma`, or stops gaining chroma.

    Args:
        hue: Palette hue
        chroma: Chroma to reach
        tone: Starting tone
        by_decreasing_tone: Walk towards black instead of white

    Returns:
        The tone where the walk stopped
    """
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            potential_solution = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential_solution.chroma:
                break
            if abs(potential_solution.chroma - chroma) < 0.4:
                break

            potential_delta = abs(potential_solution.chroma - chroma)
            current_delta = abs(closest_to_chroma.chroma - chroma)
            if potential_delta < current_delta:
                closest_to_chroma = potential_solution
            chroma_peak = max(chroma_peak, potential_solution.chroma)
    return answer


class ColorSpec2021:
    """Roles of the 2021 color system."""

    def highest_surface(self, s) -> DynamicColor:
        return self.surface_bright if s.is_dark else self.surface_dim

    # Palette key colors

    @cached_property
    def primary_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="primary_palette_key_color",
            palette=lambda s: s.primary_palette,
            tone=lambda s: s.primary_palette.key_color.tone,
        )

    @cached_property
    def secondary_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="secondary_palette_key_color",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: s.secondary_palette.key_color.tone,
        )

    @cached_property
    def tertiary_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="tertiary_palette_key_color",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: s.tertiary_palette.key_color.tone,
        )

    @cached_property
    def neutral_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="neutral_palette_key_color",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: s.neutral_palette.key_color.tone,
        )

    @cached_property
    def neutral_variant_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="neutral_variant_palette_key_color",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: s.neutral_variant_palette.key_color.tone,
        )

    @cached_property
    def error_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="error_palette_key_color",
            palette=lambda s: s.error_palette,
            tone=lambda s: s.error_palette.key_color.tone,
        )

    # Surfaces

    @cached_property
    def background(self) -> DynamicColor:
        return DynamicColor(
            name="background",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6.0 if s.is_dark else 98.0,
            is_background=True,
        )

    @cached_property
    def on_background(self) -> DynamicColor:
        return DynamicColor(
            name="on_background",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 90.0 if s.is_dark else 10.0,
            background=lambda s: self.background,
            contrast_curve=lambda s: ContrastCurve(3.0, 3.0, 4.5, 7.0),
        )

    @cached_property
    def surface(self) -> DynamicColor:
        return DynamicColor(
            name="surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6.0 if s.is_dark else 98.0,
            is_background=True,
        )

    @cached_property
    def surface_dim(self) -> DynamicColor:
        return DynamicColor(
            name="surface_dim",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6.0 if s.is_dark else ContrastCurve(87.0, 87.0, 80.0, 75.0).get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def surface_bright(self) -> DynamicColor:
        return DynamicColor(
            name="surface_bright",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: ContrastCurve(24.0, 24.0, 29.0, 34.0).get(s.contrast_level) if s.is_dark else 98.0,
            is_background=True,
        )

    @cached_property
    def surface_container_lowest(self) -> DynamicColor:
        return DynamicColor(
            name="surface_container_lowest",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: ContrastCurve(4.0, 4.0, 2.0, 0.0).get(s.contrast_level) if s.is_dark else 100.0,
            is_background=True,
        )

    @cached_property
    def surface_container_low(self) -> DynamicColor:
        return DynamicColor(
            name="surface_container_low",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (ContrastCurve(10.0, 10.0, 11.0, 12.0) if s.is_dark
                            else ContrastCurve(96.0, 96.0, 96.0, 95.0)).get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def surface_container(self) -> DynamicColor:
        return DynamicColor(
            name="surface_container",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (ContrastCurve(12.0, 12.0, 16.0, 20.0) if s.is_dark
                            else ContrastCurve(94.0, 94.0, 92.0, 90.0)).get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def surface_container_high(self) -> DynamicColor:
        return DynamicColor(
            name="surface_container_high",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (ContrastCurve(17.0, 17.0, 21.0, 25.0) if s.is_dark
                            else ContrastCurve(92.0, 92.0, 88.0, 85.0)).get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def surface_container_highest(self) -> DynamicColor:
        return DynamicColor(
            name="surface_container_highest",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (ContrastCurve(22.0, 22.0, 26.0, 30.0) if s.is_dark
                            else ContrastCurve(90.0, 90.0, 84.0, 80.0)).get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def on_surface(self) -> DynamicColor:
        return DynamicColor(
            name="on_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 90.0 if s.is_dark else 10.0,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def surface_variant(self) -> DynamicColor:
        return DynamicColor(
            name="surface_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
        )

    @cached_property
    def on_surface_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_surface_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 80.0 if s.is_dark else 30.0,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    @cached_property
    def inverse_surface(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 90.0 if s.is_dark else 20.0,
            is_background=True,
        )

    @cached_property
    def inverse_on_surface(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_on_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 20.0 if s.is_dark else 95.0,
            background=lambda s: self.inverse_surface,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def outline(self) -> DynamicColor:
        return DynamicColor(
            name="outline",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 60.0 if s.is_dark else 50.0,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.5, 3.0, 4.5, 7.0),
        )

    @cached_property
    def outline_variant(self) -> DynamicColor:
        return DynamicColor(
            name="outline_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 30.0 if s.is_dark else 80.0,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
        )

    @cached_property
    def shadow(self) -> DynamicColor:
        return DynamicColor(
            name="shadow",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 0.0,
        )

    @cached_property
    def scrim(self) -> DynamicColor:
        return DynamicColor(
            name="scrim",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 0.0,
        )

    @cached_property
    def surface_tint(self) -> DynamicColor:
        return DynamicColor(
            name="surface_tint",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
        )

    # Primaries

    @cached_property
    def primary(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 100.0 if s.is_dark else 0.0
            return 80.0 if s.is_dark else 40.0

        return DynamicColor(
            name="primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container, self.primary, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_primary(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            name="on_primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            background=lambda s: self.primary,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def primary_container(self) -> DynamicColor:
        def tone(s):
            if _is_fidelity(s):
                return s.source_color_hct.tone
            if _is_monochrome(s):
                return 85.0 if s.is_dark else 25.0
            return 30.0 if s.is_dark else 90.0

        return DynamicColor(
            name="primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container, self.primary, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_primary_container(self) -> DynamicColor:
        def tone(s):
            if _is_fidelity(s):
                return foreground_tone(self.primary_container.tone(s), 4.5)
            if _is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            return 90.0 if s.is_dark else 30.0

        return DynamicColor(
            name="on_primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            background=lambda s: self.primary_container,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    @cached_property
    def inverse_primary(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_primary",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 40.0 if s.is_dark else 80.0,
            background=lambda s: self.inverse_surface,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 7.0),
        )

    # Secondaries

    @cached_property
    def secondary(self) -> DynamicColor:
        return DynamicColor(
            name="secondary",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container, self.secondary, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_secondary(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 100.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            name="on_secondary",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            background=lambda s: self.secondary,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def secondary_container(self) -> DynamicColor:
        def tone(s):
            initial_tone = 30.0 if s.is_dark else 90.0
            if _is_monochrome(s):
                return 30.0 if s.is_dark else 85.0
            if not _is_fidelity(s):
                return initial_tone
            return find_desired_chroma_by_tone(
                s.secondary_palette.hue, s.secondary_palette.chroma, initial_tone, not s.is_dark)

        return DynamicColor(
            name="secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container, self.secondary, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_secondary_container(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 100.0
            if not _is_fidelity(s):
                return 90.0 if s.is_dark else 30.0
            return foreground_tone(self.secondary_container.tone(s), 4.5)

        return DynamicColor(
            name="on_secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            background=lambda s: self.secondary_container,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    # Tertiaries

    @cached_property
    def tertiary(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 90.0 if s.is_dark else 25.0
            return 80.0 if s.is_dark else 40.0

        return DynamicColor(
            name="tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container, self.tertiary, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_tertiary(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 100.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            name="on_tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            background=lambda s: self.tertiary,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def tertiary_container(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 60.0 if s.is_dark else 40.0
            if not _is_fidelity(s):
                return 30.0 if s.is_dark else 90.0
            proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
            return fix_if_disliked(proposed).tone

        return DynamicColor(
            name="tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container, self.tertiary, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_tertiary_container(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            if not _is_fidelity(s):
                return 90.0 if s.is_dark else 30.0
            return foreground_tone(self.tertiary_container.tone(s), 4.5)

        return DynamicColor(
            name="on_tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            background=lambda s: self.tertiary_container,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    # Errors

    @cached_property
    def error(self) -> DynamicColor:
        return DynamicColor(
            name="error",
            palette=lambda s: s.error_palette,
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 7.0),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container, self.error, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_error(self) -> DynamicColor:
        return DynamicColor(
            name="on_error",
            palette=lambda s: s.error_palette,
            tone=lambda s: 20.0 if s.is_dark else 100.0,
            background=lambda s: self.error,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def error_container(self) -> DynamicColor:
        return DynamicColor(
            name="error_container",
            palette=lambda s: s.error_palette,
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container, self.error, 10.0, TonePolarity.NEARER, False),
        )

    @cached_property
    def on_error_container(self) -> DynamicColor:
        def tone(s):
            if _is_monochrome(s):
                return 90.0 if s.is_dark else 10.0
            return 90.0 if s.is_dark else 30.0

        return DynamicColor(
            name="on_error_container",
            palette=lambda s: s.error_palette,
            tone=tone,
            background=lambda s: self.error_container,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    # Primary fixed colors

    @cached_property
    def primary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="primary_fixed",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 40.0 if _is_monochrome(s) else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_fixed, self.primary_fixed_dim, 10.0, TonePolarity.LIGHTER, True),
        )

    @cached_property
    def primary_fixed_dim(self) -> DynamicColor:
        return DynamicColor(
            name="primary_fixed_dim",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 30.0 if _is_monochrome(s) else 80.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_fixed, self.primary_fixed_dim, 10.0, TonePolarity.LIGHTER, True),
        )

    @cached_property
    def on_primary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="on_primary_fixed",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 100.0 if _is_monochrome(s) else 10.0,
            background=lambda s: self.primary_fixed_dim,
            second_background=lambda s: self.primary_fixed,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def on_primary_fixed_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_primary_fixed_variant",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 90.0 if _is_monochrome(s) else 30.0,
            background=lambda s: self.primary_fixed_dim,
            second_background=lambda s: self.primary_fixed,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    # Secondary fixed colors

    @cached_property
    def secondary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="secondary_fixed",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 80.0 if _is_monochrome(s) else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_fixed, self.secondary_fixed_dim, 10.0, TonePolarity.LIGHTER, True),
        )

    @cached_property
    def secondary_fixed_dim(self) -> DynamicColor:
        return DynamicColor(
            name="secondary_fixed_dim",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 70.0 if _is_monochrome(s) else 80.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_fixed, self.secondary_fixed_dim, 10.0, TonePolarity.LIGHTER, True),
        )

    @cached_property
    def on_secondary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="on_secondary_fixed",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 10.0,
            background=lambda s: self.secondary_fixed_dim,
            second_background=lambda s: self.secondary_fixed,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def on_secondary_fixed_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_secondary_fixed_variant",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 25.0 if _is_monochrome(s) else 30.0,
            background=lambda s: self.secondary_fixed_dim,
            second_background=lambda s: self.secondary_fixed,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    # Tertiary fixed colors

    @cached_property
    def tertiary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="tertiary_fixed",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 40.0 if _is_monochrome(s) else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_fixed, self.tertiary_fixed_dim, 10.0, TonePolarity.LIGHTER, True),
        )

    @cached_property
    def tertiary_fixed_dim(self) -> DynamicColor:
        return DynamicColor(
            name="tertiary_fixed_dim",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 30.0 if _is_monochrome(s) else 80.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.0, 1.0, 3.0, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_fixed, self.tertiary_fixed_dim, 10.0, TonePolarity.LIGHTER, True),
        )

    @cached_property
    def on_tertiary_fixed(self) -> DynamicColor:
        return DynamicColor(
            name="on_tertiary_fixed",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 100.0 if _is_monochrome(s) else 10.0,
            background=lambda s: self.tertiary_fixed_dim,
            second_background=lambda s: self.tertiary_fixed,
            contrast_curve=lambda s: ContrastCurve(4.5, 7.0, 11.0, 21.0),
        )

    @cached_property
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return DynamicColor(
            name="on_tertiary_fixed_variant",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 90.0 if _is_monochrome(s) else 30.0,
            background=lambda s: self.tertiary_fixed_dim,
            second_background=lambda s: self.tertiary_fixed,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )

    # Android control colors

    @cached_property
    def control_activated(self) -> DynamicColor:
        return DynamicColor(
            name="control_activated",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
        )

    @cached_property
    def control_normal(self) -> DynamicColor:
        return DynamicColor(
            name="control_normal",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 80.0 if s.is_dark else 30.0,
        )

    @cached_property
    def control_highlight(self) -> DynamicColor:
        return DynamicColor(
            name="control_highlight",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 100.0 if s.is_dark else 0.0,
            opacity=lambda s: 0.20 if s.is_dark else 0.12,
        )

    @cached_property
    def text_primary_inverse(self) -> DynamicColor:
        return DynamicColor(
            name="text_primary_inverse",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 10.0 if s.is_dark else 90.0,
        )

    @cached_property
    def text_secondary_and_tertiary_inverse(self) -> DynamicColor:
        return DynamicColor(
            name="text_secondary_and_tertiary_inverse",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 30.0 if s.is_dark else 80.0,
        )

    @cached_property
    def text_primary_inverse_disable_only(self) -> DynamicColor:
        return DynamicColor(
            name="text_primary_inverse_disable_only",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 10.0 if s.is_dark else 90.0,
        )

    @cached_property
    def text_secondary_and_tertiary_inverse_disabled(self) -> DynamicColor:
        return DynamicColor(
            name="text_secondary_and_tertiary_inverse_disabled",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 10.0 if s.is_dark else 90.0,
        )

    @cached_property
    def text_hint_inverse(self) -> DynamicColor:
        return DynamicColor(
            name="text_hint_inverse",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 10.0 if s.is_dark else 90.0,
        )
