"""
chromalab.core.perceptual
"""
import pytest

from chromalab.core.conversions import hex_to_rgb
from chromalab.core.errors import ColorParseError
from chromalab.core.perceptual import parse_to_perceptual_space, to_hex


class TestPerceptualSpace:
    def test_white_and_black(self):
        white = parse_to_perceptual_space("#ffffff")
        black = parse_to_perceptual_space("#000000")
        assert white.lightness == pytest.approx(1.0, abs=1e-3)
        assert black.lightness == pytest.approx(0.0, abs=1e-3)
        assert white.chroma == 0.0

    def test_ranges(self, sample_colors):
        for color in sample_colors:
            p = parse_to_perceptual_space(color)
            assert 0.0 <= p.lightness <= 1.0
            assert p.chroma >= 0.0
            assert 0.0 <= p.hue < 360.0

    def test_lightness_follows_brightness(self):
        dark = parse_to_perceptual_space("#1d4ed8")
        light = parse_to_perceptual_space("#93c5fd")
        assert light.lightness > dark.lightness

    @pytest.mark.parametrize("color", ["#3b82f6", "#ef4444", "#10b981", "#f59e0b", "#808080", "#ffffff"])
    def test_round_trip(self, color):
        back = hex_to_rgb(to_hex(*parse_to_perceptual_space(color)))
        assert all(abs(a - b) <= 1 for a, b in zip(back, hex_to_rgb(color)))

    def test_out_of_gamut_is_clipped(self):
        result = to_hex(0.7, 0.5, 150.0)
        assert hex_to_rgb(result)

    def test_invalid(self):
        with pytest.raises(ColorParseError):
            parse_to_perceptual_space("#12345")
