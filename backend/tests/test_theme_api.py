"""
Unit tests for the plain-data color entry points.
"""

import math

import pytest

from huetone.services.colors import theme_api
from huetone.services.colors.dynamiccolor import ROLE_NAMES, Variant
from huetone.services.colors.errors import ColorValidationError
from huetone.services.colors.hct import Hct
from huetone.services.colors.score import ScoredColor


class TestResolveScheme:
    """Test scheme resolution from plain inputs."""

    def test_red_seed_primary(self):
        roles = theme_api.resolve_scheme(0xffff0000, variant="tonal_spot", is_dark=False)
        primary = Hct.from_int(roles["primary"])
        assert roles["primary"] >> 24 == 0xff
        assert abs(primary.hue - Hct.from_int(0xffff0000).hue) < 30.0
        assert primary.tone == pytest.approx(40.0, abs=1.0)
        assert theme_api.contrast_ratio(primary.tone, Hct.from_int(roles["surface_container_highest"]).tone) >= 3.0
        assert roles["primary"] == 0xff904b40

    def test_blue_seed_reference_roles(self):
        light = theme_api.resolve_scheme(0xff0000ff, "tonal_spot", 0.0, False, "phone", "2021")
        dark = theme_api.resolve_scheme(0xff0000ff, "tonal_spot", 0.0, True, "phone", "2021")
        assert light["primary"] == 0xff555992
        assert light["primary_container"] == 0xffe0e0ff
        assert dark["primary"] == 0xffbec2ff

    def test_seed_forms_agree(self):
        from_int = theme_api.resolve_scheme(0xff3366cc)
        from_hex = theme_api.resolve_scheme("#3366cc")
        assert from_int == from_hex

    def test_hct_seed(self):
        roles = theme_api.resolve_scheme({"hue": 120.0, "chroma": 40.0, "tone": 50.0}, variant=Variant.VIBRANT)
        same = theme_api.resolve_scheme((120.0, 40.0, 50.0), variant="VIBRANT")
        assert roles == same

    def test_defaults_come_from_config(self):
        assert theme_api.resolve_scheme(0xff3366cc) == theme_api.resolve_scheme(
            0xff3366cc, variant="tonal_spot", contrast_level=0.0, platform="phone", spec_version="2021"
        )

    def test_role_order(self):
        roles = theme_api.resolve_scheme(0xff3366cc, spec_version="2025")
        assert list(roles) == list(ROLE_NAMES)

    @pytest.mark.parametrize("kwargs", [
        {"contrast_level": 1.5},
        {"contrast_level": -1.01},
        {"contrast_level": math.nan},
        {"contrast_level": "high"},
        {"variant": "pastel"},
        {"platform": "tv"},
        {"spec_version": "2030"},
        {"is_dark": "yes"},
    ])
    def test_rejects_bad_settings(self, kwargs):
        with pytest.raises(ColorValidationError):
            theme_api.resolve_scheme(0xff3366cc, **kwargs)

    @pytest.mark.parametrize("seed", [
        -1,
        0x1_0000_0000,
        "#12345",
        "blue",
        {"hue": 400.0, "chroma": 10.0, "tone": 50.0},
        {"hue": 10.0, "chroma": -1.0, "tone": 50.0},
        {"hue": 10.0, "chroma": 10.0, "tone": 101.0},
        {"hue": 10.0, "chroma": 10.0},
        (1.0, 2.0),
        None,
    ])
    def test_rejects_bad_seeds(self, seed):
        with pytest.raises(ColorValidationError):
            theme_api.resolve_scheme(seed)


class TestQuantizeAndScore:
    """Test pixel quantization and seed ranking."""

    def test_empty_pixels(self):
        assert theme_api.quantize_and_score([]) == []

    def test_transparent_pixels(self):
        assert theme_api.quantize_and_score([0x00ff0000] * 10) == []

    def test_primary_colors(self):
        ranked = theme_api.quantize_and_score([0xffff0000, 0xff00ff00, 0xff0000ff] * 20, k=8)
        assert [entry.argb for entry in ranked] == [0xffff0000, 0xff00ff00, 0xff0000ff]

    def test_gray_image_falls_back(self):
        ranked = theme_api.quantize_and_score([0xff808080] * 50)
        assert ranked == [ScoredColor(0xff4285f4, 0.0)]

    def test_top_n_limits_result(self):
        pixels = [0xffff0000, 0xff00ff00, 0xff0000ff, 0xffffff00] * 10
        assert len(theme_api.quantize_and_score(pixels, top_n=1)) == 1

    @pytest.mark.parametrize("kwargs", [{"k": 0}, {"k": -3}, {"k": 2.5}, {"top_n": 0}, {"top_n": True}])
    def test_rejects_bad_limits(self, kwargs):
        with pytest.raises(ColorValidationError):
            theme_api.quantize_and_score([0xffff0000], **kwargs)

    @pytest.mark.parametrize("pixel", [-1, 0x1_0000_0000, 1.5, "0xffff0000"])
    def test_rejects_bad_pixels(self, pixel):
        with pytest.raises(ColorValidationError):
            theme_api.quantize_and_score([0xffff0000, pixel])


class TestConversions:
    """Test HCT, contrast and palette helpers."""

    def test_hct_to_argb_clamps(self):
        assert theme_api.hct_to_argb(0.0, 0.0, 150.0) == 0xffffffff
        assert theme_api.hct_to_argb(0.0, 0.0, -10.0) == 0xff000000
        assert theme_api.hct_to_argb(370.0, 30.0, 50.0) == theme_api.hct_to_argb(10.0, 30.0, 50.0)
        assert theme_api.hct_to_argb(10.0, -5.0, 50.0) == theme_api.hct_to_argb(10.0, 0.0, 50.0)

    @pytest.mark.parametrize("args", [(math.nan, 10.0, 50.0), (10.0, math.inf, 50.0), (10.0, 10.0, "50")])
    def test_hct_to_argb_rejects_non_finite(self, args):
        with pytest.raises(ColorValidationError):
            theme_api.hct_to_argb(*args)

    def test_argb_to_hct(self):
        hct = theme_api.argb_to_hct(0xff0000ff)
        assert hct.hue == pytest.approx(282.788, abs=0.01)
        with pytest.raises(ColorValidationError):
            theme_api.argb_to_hct(-5)

    def test_contrast_ratio(self):
        assert theme_api.contrast_ratio(0.0, 100.0) == pytest.approx(21.0)
        assert theme_api.contrast_ratio(50.0, 50.0) == pytest.approx(1.0)
        with pytest.raises(ColorValidationError):
            theme_api.contrast_ratio(math.nan, 50.0)

    def test_tonal_palette_color_at(self):
        assert theme_api.tonal_palette_color_at(282.0, 36.0, 100.0) == 0xffffffff
        assert theme_api.tonal_palette_color_at(282.0, 36.0, 0.0) == 0xff000000
        tone = Hct.from_int(theme_api.tonal_palette_color_at(282.0, 36.0, 40.0)).tone
        assert tone == pytest.approx(40.0, abs=0.5)

    def test_parse_enum_accepts_names(self):
        assert theme_api.parse_enum(Variant, "FRUIT_SALAD", "variant") is Variant.FRUIT_SALAD
        assert theme_api.parse_enum(Variant, " fruit_salad ", "variant") is Variant.FRUIT_SALAD
        assert theme_api.parse_enum(Variant, Variant.CONTENT, "variant") is Variant.CONTENT

    def test_validation_error_names_field(self):
        with pytest.raises(ColorValidationError) as excinfo:
            theme_api.contrast_ratio(50.0, math.inf)
        assert excinfo.value.field == "tone_b"
        assert ColorValidationError("plain").field is None
