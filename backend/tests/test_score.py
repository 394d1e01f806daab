"""
Unit tests for theme seed scoring.
"""

from huetone.services.colors.score import DEFAULT_FALLBACK_COLOR, ScoredColor, score


def _argbs(ranked):
    return [entry.argb for entry in ranked]


class TestScore:
    """Test ranking of quantized colors."""

    def test_prioritizes_chroma(self):
        ranked = score({0xff000000: 1, 0xffffffff: 1, 0xff0000ff: 1})
        assert _argbs(ranked) == [0xff0000ff]

    def test_prioritizes_chroma_when_proportions_equal(self):
        ranked = score({0xffff0000: 1, 0xff00ff00: 1, 0xff0000ff: 1})
        assert _argbs(ranked) == [0xffff0000, 0xff00ff00, 0xff0000ff]

    def test_generates_fallback_when_nothing_qualifies(self):
        ranked = score({0xff000000: 1})
        assert ranked == [ScoredColor(DEFAULT_FALLBACK_COLOR, 0.0)]

    def test_custom_fallback(self):
        ranked = score({0xff808080: 10}, fallback_color_argb=0xff112233)
        assert _argbs(ranked) == [0xff112233]

    def test_dedupes_nearby_hues(self):
        ranked = score({0xff008772: 1, 0xff318477: 1})
        assert _argbs(ranked) == [0xff008772]

    def test_maximizes_hue_distance(self):
        ranked = score({0xff008772: 1, 0xff008587: 1, 0xff007ebc: 1}, desired=2)
        assert _argbs(ranked) == [0xff007ebc, 0xff008772]

    def test_respects_desired(self):
        colors = {0xffff0000: 5, 0xff00ff00: 4, 0xff0000ff: 3, 0xffffff00: 2}
        assert len(score(colors, desired=2)) == 2

    def test_unfiltered_keeps_gray(self):
        ranked = score({0xff808080: 10}, filter_colors=False)
        assert _argbs(ranked) == [0xff808080]

    def test_scores_are_descending(self):
        colors = {0xffff0000: 50, 0xff00aa00: 20, 0xff0000ff: 30, 0xffaa00aa: 5}
        ranked = score(colors, desired=4)
        scores = [entry.score for entry in ranked]
        assert scores == sorted(scores, reverse=True)
