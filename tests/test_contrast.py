"""
chromalab.core.luminance / difference / contrast
"""
import pytest

from chromalab.core.contrast import (
    analyze_contrast,
    analyze_wcag_compliance,
    contrast_ratio,
    get_wcag_contrast,
)
from chromalab.core.difference import delta_e_76, delta_e_76_lab
from chromalab.core.errors import ColorParseError
from chromalab.core.luminance import relative_luminance


class TestDeltaE:
    @pytest.mark.parametrize("color", ["#000000", "#ffffff", "#3b82f6", "#ef4444"])
    def test_identity(self, color):
        assert delta_e_76(color, color) == 0.0

    def test_symmetric(self):
        assert delta_e_76("#3b82f6", "#ef4444") == pytest.approx(delta_e_76("#ef4444", "#3b82f6"))

    def test_black_white(self):
        assert delta_e_76("#000000", "#ffffff") == pytest.approx(100.0, abs=0.01)

    def test_accepts_rgb_triples(self):
        assert delta_e_76((255, 0, 0), "#ff0000") == 0.0

    def test_lab_form(self):
        assert delta_e_76_lab((50.0, 0.0, 0.0), (53.0, 4.0, 0.0)) == pytest.approx(5.0)


class TestLuminance:
    def test_extremes(self):
        assert relative_luminance("#ffffff") == pytest.approx(1.0, abs=1e-9)
        assert relative_luminance("#000000") == pytest.approx(0.0, abs=1e-9)

    def test_green_dominates(self):
        assert relative_luminance("#00ff00") > relative_luminance("#ff0000") > relative_luminance("#0000ff")


class TestContrastRatio:
    def test_black_on_white_is_exactly_21(self):
        assert contrast_ratio("#000000", "#ffffff") == 21.0

    def test_same_color_is_1(self):
        assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)

    @pytest.mark.parametrize("a, b", [("#3b82f6", "#ffffff"), ("#777777", "#000000"), ("#ef4444", "#10b981")])
    def test_symmetric(self, a, b):
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_bounds(self, sample_colors):
        for a in sample_colors:
            for b in sample_colors:
                assert 1.0 <= contrast_ratio(a, b) <= 21.0

    def test_invalid_raises(self):
        with pytest.raises(ColorParseError):
            contrast_ratio("#000", "#ffffff")


class TestAnalyzeContrast:
    def test_flags(self):
        result = analyze_contrast("#777777", "#FFFFFF")
        assert result.foreground == "#777777"
        assert result.background == "#ffffff"
        assert result.ratio == pytest.approx(4.48, abs=0.01)
        assert not result.passes_aa
        assert not result.passes_aaa
        assert result.passes_aa_large
        assert not result.passes_aaa_large

    def test_all_pass(self):
        result = analyze_contrast("#000000", "#ffffff")
        assert result.passes_aa and result.passes_aaa
        assert result.passes_aa_large and result.passes_aaa_large


class TestWcagCompliance:
    def test_background_major_order(self):
        results = analyze_wcag_compliance(["#000000", "#ffffff"], ["#ffffff", "#000000"])
        assert [(r.foreground, r.background) for r in results] == [
            ("#000000", "#ffffff"),
            ("#ffffff", "#ffffff"),
            ("#000000", "#000000"),
            ("#ffffff", "#000000"),
        ]

    def test_invalid_entries_are_dropped(self):
        results = analyze_wcag_compliance(["#000000", "nope", ""], ["#ffffff", "#12"])
        assert len(results) == 1
        assert results[0].ratio == 21.0

    def test_empty_inputs(self):
        assert analyze_wcag_compliance([], ["#ffffff"]) == []
        assert analyze_wcag_compliance(["#000000"], []) == []

    def test_accepts_generators(self):
        results = analyze_wcag_compliance((c for c in ["#000000"]), iter(["#ffffff"]))
        assert len(results) == 1


class TestWcagAgainstExtremes:
    def test_white(self):
        on_white, on_black = get_wcag_contrast("#ffffff")
        assert on_white.background == "#ffffff"
        assert on_black.background == "#000000"
        assert on_white.ratio == 1.0
        assert on_black.ratio == 21.0
        assert on_black.passes_aaa
        assert not on_white.passes_aa_large

    def test_matches_analyze_contrast(self):
        on_white, on_black = get_wcag_contrast("#767676")
        assert on_white == analyze_contrast("#767676", "#ffffff")
        assert on_black == analyze_contrast("#767676", "#000000")
        assert on_white.passes_aa
