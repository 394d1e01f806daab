"""
Unit tests for the color quantizers.
"""

import tracemalloc

import pytest

from huetone.services.colors.quantize import quantizer_wsmeans
from huetone.services.colors.quantize import (
    PointProviderLab,
    QuantizerCelebi,
    QuantizerMap,
    QuantizerWsmeans,
    QuantizerWu,
    quantize,
)

RED = 0xffff0000
GREEN = 0xff00ff00
BLUE = 0xff0000ff
WHITE = 0xffffffff


class TestQuantizerMap:
    """Test exact color counting."""

    def test_counts_opaque_pixels(self):
        result = QuantizerMap().quantize([RED, RED, BLUE, 0x00ff0000, 0x80ffffff])
        assert result.color_to_count == {RED: 2, BLUE: 1}

    def test_keeps_first_seen_order(self):
        result = QuantizerMap().quantize([BLUE, RED, BLUE, GREEN])
        assert result.colors == [BLUE, RED, GREEN]


class TestQuantizerWu:
    """Test the box-cutting quantizer."""

    def test_single_color(self):
        result = QuantizerWu().quantize([RED] * 100, 128)
        assert result.color_to_count == {RED: 100}

    def test_two_colors_two_boxes(self):
        result = QuantizerWu().quantize([RED, BLUE], 2)
        assert set(result.colors) == {RED, BLUE}

    def test_two_colors_one_box(self):
        result = QuantizerWu().quantize([RED, BLUE], 1)
        assert result.color_to_count == {0xff7f007f: 2}

    def test_never_exceeds_max_colors(self):
        pixels = [0xff000000 | (r << 16) | (g << 8) | b
                  for r in range(0, 256, 51) for g in range(0, 256, 51) for b in range(0, 256, 51)]
        result = QuantizerWu().quantize(pixels, 16)
        assert 0 < len(result) <= 16
        assert sum(result.color_to_count.values()) == len(pixels)

    def test_empty_input(self):
        assert len(QuantizerWu().quantize([], 8)) == 0
        assert len(QuantizerWu().quantize([RED], 0)) == 0


class TestQuantizerWsmeans:
    """Test k-means refinement."""

    def test_exact_starting_clusters_are_kept(self):
        pixels = [RED] * 3 + [GREEN] * 2 + [BLUE]
        result = QuantizerWsmeans().quantize(pixels, 3, starting_clusters=[RED, GREEN, BLUE])
        assert result.color_to_count == {RED: 3, GREEN: 2, BLUE: 1}

    def test_without_starting_clusters(self):
        pixels = [RED] * 5 + [0xfffe0000] * 2 + [BLUE] * 4
        result = QuantizerWsmeans().quantize(pixels, 2)
        assert len(result) == 2
        assert sum(result.color_to_count.values()) == len(pixels)

    def test_respects_max_colors(self):
        pixels = [RED, GREEN, BLUE, WHITE]
        result = QuantizerWsmeans().quantize(pixels, 2)
        assert len(result) <= 2
        assert sum(result.color_to_count.values()) == 4

    def test_empty_input(self):
        assert len(QuantizerWsmeans().quantize([], 4)) == 0

    def test_blocked_distances_match_single_block(self, monkeypatch):
        pixels = [0xff000000 | ((i * 2654435761) & 0xffffff) for i in range(300)]
        starting = pixels[:12]
        whole = QuantizerWsmeans().quantize(pixels, 12, starting_clusters=starting)
        monkeypatch.setattr(quantizer_wsmeans, "CHUNK_SIZE", 7)
        blocked = QuantizerWsmeans().quantize(pixels, 12, starting_clusters=starting)
        assert blocked.color_to_count == whole.color_to_count

    def test_many_distinct_colors_bounded_memory(self):
        """Distance matrices are built in blocks, not for every point at once."""
        pixels = [0xff000000 | ((i * 2654435761) & 0xffffff) for i in range(131072)]
        starting = pixels[::1024]
        tracemalloc.start()
        try:
            result = QuantizerWsmeans().quantize(pixels, 128, starting_clusters=starting)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        assert 0 < len(result) <= 128
        assert sum(result.color_to_count.values()) == len(pixels)
        assert peak < 160 * 1024 * 1024


class TestQuantizerCelebi:
    """Test the Wu then WSMeans pipeline."""

    def test_primary_colors(self):
        result = QuantizerCelebi().quantize([RED, GREEN, BLUE] * 10, 3)
        assert set(result.colors) == {RED, GREEN, BLUE}

    def test_weights_sum_to_opaque_pixels(self):
        pixels = [RED] * 7 + [0xff102030] * 5 + [0x00ffffff] * 4
        result = QuantizerCelebi().quantize(pixels, 8)
        assert sum(result.color_to_count.values()) == 12

    @pytest.mark.parametrize("pixels", [[], [0x00000000, 0x7fff0000]])
    def test_nothing_opaque(self, pixels):
        assert len(quantize(pixels, 8)) == 0

    def test_deterministic(self):
        pixels = [0xff000000 | (i * 2654435761 & 0xffffff) for i in range(500)]
        first = quantize(pixels, 16)
        second = quantize(pixels, 16)
        assert first.color_to_count == second.color_to_count


class TestPointProviderLab:
    """Test the Lab point space."""

    def test_round_trip(self):
        provider = PointProviderLab()
        for argb in (RED, GREEN, BLUE, WHITE, 0xff123456):
            assert provider.to_int(provider.from_int(argb)) == argb

    def test_distance_is_squared(self):
        provider = PointProviderLab()
        assert provider.distance([0.0, 0.0, 0.0], [3.0, 4.0, 0.0]) == pytest.approx(25.0)
