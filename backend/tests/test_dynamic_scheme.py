"""
Unit tests for dynamic scheme resolution.
"""

import pytest

from huetone.services.colors import contrast
from huetone.services.colors.dynamiccolor import (
    ROLE_NAMES,
    DynamicColor,
    DynamicScheme,
    Platform,
    SpecVersion,
    Variant,
    all_dynamic_colors,
    calculation,
)
from huetone.services.colors.dynamiccolor.material_dynamic_colors import DIM_ROLE_NAMES
from huetone.services.colors.errors import RoleCycleError
from huetone.services.colors.hct import Hct
from huetone.services.colors.utils.math_utils import sanitize_degrees_double


class TestPalettes:
    """Test palette derivation."""

    def test_tonal_spot_palettes(self, red_scheme):
        source = red_scheme.source_color_hct
        assert red_scheme.primary_palette.chroma == pytest.approx(36.0)
        assert red_scheme.secondary_palette.chroma == pytest.approx(16.0)
        assert red_scheme.tertiary_palette.chroma == pytest.approx(24.0)
        assert red_scheme.tertiary_palette.hue == pytest.approx(sanitize_degrees_double(source.hue + 60.0))
        assert red_scheme.neutral_palette.chroma == pytest.approx(6.0)
        assert red_scheme.neutral_variant_palette.chroma == pytest.approx(8.0)
        assert red_scheme.error_palette.hue == pytest.approx(25.0)

    def test_overrides_keep_palettes(self, red_scheme):
        dark = red_scheme.with_overrides(is_dark=True, contrast_level=0.5)
        assert dark.is_dark
        assert dark.contrast_level == 0.5
        assert dark.primary_palette is red_scheme.primary_palette

    def test_unknown_override_rejected(self, red_scheme):
        with pytest.raises(TypeError):
            red_scheme.with_overrides(brightness=1.0)


class TestResolution:
    """Test role resolution and caching."""

    def test_red_tonal_spot_primary(self, red_scheme):
        primary = Hct.from_int(red_scheme.primary)
        assert red_scheme.primary >> 24 == 0xff
        assert abs(primary.hue - Hct.from_int(0xffff0000).hue) < 30.0
        assert primary.tone == pytest.approx(40.0, abs=1.0)
        surface_tone = red_scheme.get_tone(red_scheme.color_spec.surface_container_highest)
        assert contrast.ratio_of_tones(primary.tone, surface_tone) >= 3.0

    def test_property_matches_get_role(self, red_scheme):
        for name in ("primary", "on_surface", "outline", "tertiary_container"):
            assert getattr(red_scheme, name) == red_scheme.get_role(name)

    def test_on_primary_contrast(self):
        for variant in (Variant.TONAL_SPOT, Variant.VIBRANT, Variant.CONTENT):
            for is_dark in (False, True):
                scheme = DynamicScheme.from_variant(Hct.from_int(0xff0000ff), variant, is_dark)
                spec = scheme.color_spec
                ratio = contrast.ratio_of_tones(
                    scheme.get_tone(spec.primary), scheme.get_tone(spec.on_primary)
                )
                assert ratio >= 4.5 - contrast.CONTRAST_RATIO_EPSILON, (variant, is_dark)

    def test_tones_are_cached(self, red_scheme, monkeypatch):
        calls = []
        real_get_tone = calculation.get_tone

        def counting(scheme, color):
            calls.append(color.name)
            return real_get_tone(scheme, color)

        monkeypatch.setattr(calculation, "get_tone", counting)
        first = red_scheme.get_tone(red_scheme.color_spec.primary)
        second = red_scheme.get_tone(red_scheme.color_spec.primary)
        assert first == second
        assert calls.count("primary") == 1

    def test_self_reference_raises(self, red_scheme):
        holder = {}
        holder["color"] = DynamicColor(
            name="loop",
            palette=lambda s: s.primary_palette,
            tone=lambda s: s.get_tone(holder["color"]),
        )
        with pytest.raises(RoleCycleError):
            red_scheme.get_tone(holder["color"])

    def test_resolution_is_deterministic(self):
        source = Hct.from_int(0xff6750a4)
        first = DynamicScheme.from_variant(source, Variant.EXPRESSIVE, True).resolve_all()
        second = DynamicScheme.from_variant(source, Variant.EXPRESSIVE, True).resolve_all()
        assert first == second

    @pytest.mark.parametrize("is_dark", [False, True])
    @pytest.mark.parametrize("contrast_level", [-1.0, 0.0, 1.0])
    def test_pairs_keep_their_distance(self, is_dark, contrast_level):
        for seed in (0xffff0000, 0xff0000ff, 0xff00ff00):
            scheme = DynamicScheme.from_variant(
                Hct.from_int(seed), Variant.TONAL_SPOT, is_dark, contrast_level=contrast_level
            )
            for color in all_dynamic_colors(SpecVersion.SPEC_2021):
                if color.tone_delta_pair is None:
                    continue
                pair = color.tone_delta_pair(scheme)
                if pair is None:
                    continue
                gap = abs(scheme.get_tone(pair.role_a) - scheme.get_tone(pair.role_b))
                assert gap >= pair.delta - 1e-6, (seed, color.name)


class TestVersions:
    """Test role sets across color system versions."""

    def test_2021_has_no_dim_roles(self, red_scheme):
        resolved = red_scheme.resolve_all()
        assert len(resolved) == len(ROLE_NAMES) - len(DIM_ROLE_NAMES)
        for name in DIM_ROLE_NAMES:
            assert name not in resolved
            assert getattr(red_scheme, name) is None

    def test_2025_has_every_role(self):
        scheme = DynamicScheme.from_variant(
            Hct.from_int(0xffff0000), Variant.TONAL_SPOT, False, spec_version=SpecVersion.SPEC_2025
        )
        resolved = scheme.resolve_all()
        assert list(resolved) == list(ROLE_NAMES)
        assert scheme.primary_dim is not None

    def test_2025_watch_surfaces_are_black(self):
        scheme = DynamicScheme.from_variant(
            Hct.from_int(0xff0000ff),
            Variant.TONAL_SPOT,
            True,
            platform=Platform.WATCH,
            spec_version=SpecVersion.SPEC_2025,
        )
        assert scheme.surface == 0xff000000
        assert scheme.background == 0xff000000

    @pytest.mark.parametrize("spec_version", [SpecVersion.SPEC_2021, SpecVersion.SPEC_2025])
    @pytest.mark.parametrize("variant", list(Variant))
    def test_every_variant_resolves(self, spec_version, variant):
        for is_dark in (False, True):
            scheme = DynamicScheme.from_variant(
                Hct.from_int(0xff3a7bd5), variant, is_dark, spec_version=spec_version
            )
            resolved = scheme.resolve_all()
            for name, argb in resolved.items():
                assert 0 <= argb <= 0xffffffff, name


class TestReferenceSchemes:
    """Resolved roles pinned to published reference values."""

    def test_blue_tonal_spot_light(self):
        scheme = DynamicScheme.from_variant(Hct.from_int(0xff0000ff), Variant.TONAL_SPOT, False)
        assert scheme.primary == 0xff555992
        assert scheme.primary_container == 0xffe0e0ff

    def test_blue_tonal_spot_dark(self):
        scheme = DynamicScheme.from_variant(Hct.from_int(0xff0000ff), Variant.TONAL_SPOT, True)
        assert scheme.primary == 0xffbec2ff

    def test_red_tonal_spot_light(self, red_scheme):
        assert red_scheme.primary == 0xff904b40

    def test_2025_watch_dark_extremes(self):
        scheme = DynamicScheme.from_variant(
            Hct.from_int(0xff0000ff),
            Variant.TONAL_SPOT,
            True,
            platform=Platform.WATCH,
            spec_version=SpecVersion.SPEC_2025,
        )
        resolved = scheme.resolve_all()
        expected = {
            "background": 0xff000000,
            "surface": 0xff000000,
            "surface_container_lowest": 0xff000000,
            "on_background": 0xffffffff,
            "shadow": 0xff000000,
            "scrim": 0xff000000,
        }
        assert {name: resolved[name] for name in expected} == expected

    def test_2025_phone_light_lowest_container(self):
        scheme = DynamicScheme.from_variant(
            Hct.from_int(0xff0000ff), Variant.TONAL_SPOT, False, spec_version=SpecVersion.SPEC_2025
        )
        assert scheme.surface_container_lowest == 0xffffffff
