"""
chromalab.core.palette
"""
import pytest

from chromalab.core.conversions import hex_to_hsl, hex_to_rgb, hsl_to_hex, normalize_hue
from chromalab.core.errors import DomainError
from chromalab.core.contrast import contrast_ratio
from chromalab.core.palette import (
    detect_harmony,
    generate_accessible_theme,
    generate_color_palette,
    generate_color_system,
    generate_harmonious_palette,
    generate_intelligent_palette,
    generate_theme_colors,
    validate_palette_accessibility,
)
from chromalab.core.types import HarmonyModel, HarmonyType, PaletteOptions, PaletteStyle, ThemeMode


class TestTonalScale:
    def test_ten_steps(self):
        palette = generate_color_palette("#3b82f6", 10)
        assert list(palette) == [str(100 * n) for n in range(1, 11)]
        assert len(set(palette.values())) == 10

    def test_lightness_strictly_decreases_with_label(self):
        palette = generate_color_palette("#3b82f6", 10)
        lightness = [hex_to_hsl(v).l for v in palette.values()]
        assert all(a > b for a, b in zip(lightness, lightness[1:]))

    def test_lightness_spans_range(self):
        palette = generate_color_palette("#3b82f6", 10)
        assert hex_to_hsl(palette["100"]).l == pytest.approx(0.95, abs=0.01)
        assert hex_to_hsl(palette["1000"]).l == pytest.approx(0.05, abs=0.01)

    def test_hue_is_held(self):
        base_hue = hex_to_hsl("#3b82f6").h
        palette = generate_color_palette("#3b82f6", 5)
        for label in ("200", "300", "400"):
            assert hex_to_hsl(palette[label]).h == pytest.approx(base_hue, abs=2.0)

    def test_gray_base(self):
        palette = generate_color_palette("#808080", 4)
        assert all(hex_to_hsl(v).s == 0.0 for v in palette.values())

    def test_single_step(self):
        palette = generate_color_palette("#3b82f6", 1)
        assert list(palette) == ["100"]
        assert hex_to_hsl(palette["100"]).l == pytest.approx(0.5, abs=0.01)

    def test_fresh_dict_per_call(self):
        a = generate_color_palette("#3b82f6")
        a["100"] = "#000000"
        assert generate_color_palette("#3b82f6")["100"] != "#000000"

    @pytest.mark.parametrize("bad", ["", "#12", "blue", None])
    def test_unparseable_base(self, bad):
        assert generate_color_palette(bad, 10) is None

    @pytest.mark.parametrize("size", [0, -3])
    def test_size_below_one(self, size):
        with pytest.raises(DomainError):
            generate_color_palette("#3b82f6", size)


class TestIntelligentPalette:
    base = hsl_to_hex(200.0, 0.5, 0.5)

    def _mid_saturation(self, style):
        palette = generate_intelligent_palette(self.base, PaletteOptions(style=style))
        return hex_to_hsl(palette["500"]).s

    def test_professional_matches_plain_scale(self):
        assert generate_intelligent_palette("#3b82f6", PaletteOptions()) == generate_color_palette("#3b82f6", 10)

    def test_vibrant_is_more_saturated(self):
        assert self._mid_saturation(PaletteStyle.VIBRANT) == pytest.approx(0.7, abs=0.02)
        assert self._mid_saturation(PaletteStyle.PROFESSIONAL) == pytest.approx(0.5, abs=0.02)

    def test_minimal_is_less_saturated(self):
        assert self._mid_saturation(PaletteStyle.MINIMAL) == pytest.approx(0.4, abs=0.02)

    def test_warm_and_cool(self):
        assert self._mid_saturation(PaletteStyle.WARM) == pytest.approx(0.6, abs=0.02)
        assert self._mid_saturation(PaletteStyle.COOL) == pytest.approx(0.55, abs=0.02)

    def test_style_by_name(self):
        by_name = generate_intelligent_palette(self.base, PaletteOptions(style="vibrant"))
        by_enum = generate_intelligent_palette(self.base, PaletteOptions(style=PaletteStyle.VIBRANT))
        assert by_name == by_enum

    def test_vibrant_on_very_light_base_keeps_hue(self):
        palette = generate_intelligent_palette("#f0f8ff", PaletteOptions(style=PaletteStyle.VIBRANT))
        mid = hex_to_hsl(palette["500"])
        assert mid.s > 0.9
        assert mid.h == pytest.approx(208.0, abs=3.0)

    def test_cool_on_very_dark_base_keeps_hue(self):
        base = hsl_to_hex(280.0, 0.9, 0.04)
        palette = generate_intelligent_palette(base, PaletteOptions(style=PaletteStyle.COOL))
        mid = hex_to_hsl(palette["500"])
        assert mid.s == pytest.approx(0.95, abs=0.03)
        assert mid.h == pytest.approx(280.0, abs=3.0)

    def test_saturation_is_clamped(self):
        palette = generate_intelligent_palette("#ff0000", PaletteOptions(style=PaletteStyle.VIBRANT))
        assert hex_to_hsl(palette["500"]).s <= 1.0

    def test_size_option(self):
        palette = generate_intelligent_palette(self.base, PaletteOptions(size=5))
        assert list(palette) == ["100", "200", "300", "400", "500"]

    def test_unparseable_base(self):
        assert generate_intelligent_palette("nope", PaletteOptions()) is None

    def test_bad_size(self):
        with pytest.raises(DomainError):
            generate_intelligent_palette(self.base, PaletteOptions(size=0))


class TestColorSystem:
    def test_scales(self):
        system = generate_color_system("#3b82f6")
        assert list(system.primary) == [str(100 * n) for n in range(1, 11)]
        assert system.secondary == system.primary
        assert system.neutral == generate_color_palette("#6b7280", 10)

    def test_brand_roles(self):
        system = generate_color_system("#3B82F6")
        brand = system.brand
        assert brand.primary == "#3b82f6"
        assert brand.primary_hover == system.primary["600"]
        assert brand.primary_light == system.primary["400"]
        assert brand.primary_dark == system.primary["700"]
        assert brand.secondary == system.primary["700"]

    def test_secondary_color(self):
        system = generate_color_system("#3b82f6", "EF4444")
        assert system.brand.secondary == "#ef4444"
        assert system.secondary == generate_color_palette("#ef4444", 10)

    def test_roles_keep_their_place_on_longer_scales(self):
        system = generate_color_system("#3b82f6", size=19)
        assert system.brand.primary_hover == system.primary["1100"]
        assert system.brand.primary_light == system.primary["700"]
        assert system.brand.primary_dark == system.primary["1300"]

    def test_single_step(self):
        system = generate_color_system("#3b82f6", size=1)
        only = system.primary["100"]
        assert system.brand.primary_hover == only
        assert system.brand.primary_dark == only

    @pytest.mark.parametrize("primary, secondary", [("nope", None), ("#3b82f6", "nope")])
    def test_unparseable(self, primary, secondary):
        assert generate_color_system(primary, secondary) is None

    def test_bad_size(self):
        with pytest.raises(DomainError):
            generate_color_system("#3b82f6", size=0)


class TestAccessibleTheme:
    @pytest.fixture()
    def system(self):
        return generate_color_system("#3b82f6")

    def test_light_roles(self, system):
        light = generate_accessible_theme(system).light
        assert light.background_primary == system.neutral["100"]
        assert light.background_elevated == "#ffffff"
        assert light.text_primary == system.neutral["900"]
        assert light.border_focus == system.primary["500"]

    def test_dark_roles(self, system):
        dark = generate_accessible_theme(system).dark
        assert dark.background_primary == system.neutral["900"]
        assert dark.background_elevated == system.neutral["800"]
        assert dark.text_primary == system.neutral["100"]
        assert dark.border_focus == system.primary["400"]

    def test_body_text_reaches_aaa(self, system):
        theme = generate_accessible_theme(system)
        for roles in theme:
            assert contrast_ratio(roles.text_primary, roles.background_primary) >= 7.0

    def test_single_theme(self, system):
        theme = generate_accessible_theme(system)
        assert generate_theme_colors("dark", system) == theme.dark
        assert generate_theme_colors(ThemeMode.LIGHT, system) == theme.light
        with pytest.raises(DomainError):
            generate_theme_colors("sepia", system)


class TestHarmoniousPalette:
    def test_analogous(self):
        assert generate_harmonious_palette("#ff0000", HarmonyType.ANALOGOUS) == [
            "#ff0000", "#ff8000", "#ff0080", "#ffff00", "#ff00ff",
        ]

    def test_complementary(self):
        assert generate_harmonious_palette("#ff0000", HarmonyType.COMPLEMENTARY) == ["#ff0000", "#00ffff"]

    def test_triadic(self):
        assert generate_harmonious_palette("#ff0000", "triadic") == ["#ff0000", "#00ff00", "#0000ff"]

    def test_monochromatic(self):
        colors = generate_harmonious_palette("#3b82f6", HarmonyType.MONOCHROMATIC)
        assert len(colors) == 5
        assert colors[0] == "#3b82f6"
        l0, l1, l2, l3, l4 = (hex_to_hsl(v).l for v in colors)
        assert l1 > l2 > l0 > l3 > l4

    def test_negative_hue_wraps(self):
        base = "#ff2b00"
        colors = generate_harmonious_palette(base, HarmonyType.ANALOGOUS)
        expected = normalize_hue(hex_to_hsl(base).h - 30)
        assert expected > 300
        assert hex_to_hsl(colors[2]).h == pytest.approx(expected, abs=1.5)

    def test_unparseable_base(self):
        assert generate_harmonious_palette("#xyz", HarmonyType.TRIADIC) == []

    def test_unknown_harmony(self):
        with pytest.raises(DomainError):
            generate_harmonious_palette("#ff0000", "pentadic")

    def test_oklch_model(self):
        colors = generate_harmonious_palette("#3b82f6", HarmonyType.COMPLEMENTARY, HarmonyModel.OKLCH)
        assert len(colors) == 2
        base = hex_to_rgb("#3b82f6")
        assert all(abs(a - b) <= 1 for a, b in zip(hex_to_rgb(colors[0]), base))
        assert colors[1] != colors[0]

    def test_oklch_monochromatic(self):
        colors = generate_harmonious_palette("#3b82f6", "monochromatic", "oklch")
        assert len(colors) == 5


class TestValidatePalette:
    def test_tonal_scale_passes(self):
        assert validate_palette_accessibility(generate_color_palette("#3b82f6"))

    def test_midtones_fail_a_strict_bar(self):
        assert not validate_palette_accessibility(["#808080", "#7f7f7f", "#858585"], min_ratio=7.0)

    def test_extremes_pass_a_strict_bar(self):
        assert validate_palette_accessibility({"100": "#ffffff", "200": "#000000", "300": "#111111"}, min_ratio=7.0)

    def test_seventy_percent_threshold(self):
        passing = ["#000000"] * 7
        failing = ["#808080"] * 3
        assert validate_palette_accessibility(passing + failing, min_ratio=7.0)
        assert not validate_palette_accessibility(["#000000"] * 6 + ["#808080"] * 4, min_ratio=7.0)

    def test_unparseable_entries_fail(self):
        assert not validate_palette_accessibility(["#000000", "bad", "worse"])

    def test_empty(self):
        assert not validate_palette_accessibility({})
        assert not validate_palette_accessibility([])


class TestDetectHarmony:
    def test_complementary(self):
        assert detect_harmony(["#ff0000", "#00ffff"]) is HarmonyType.COMPLEMENTARY

    def test_triadic(self):
        assert detect_harmony(["#ff0000", "#00ff00", "#0000ff"]) is HarmonyType.TRIADIC

    def test_analogous(self):
        assert detect_harmony(["#ff0000", "#ff4000", "#ffbf00"]) is HarmonyType.ANALOGOUS

    def test_monochromatic(self):
        assert detect_harmony(["#3b82f6", "#1d4ed8", "#ffffff"]) is HarmonyType.MONOCHROMATIC

    def test_grays(self):
        assert detect_harmony(["#000000", "#808080"]) is HarmonyType.MONOCHROMATIC

    def test_none(self):
        assert detect_harmony(["#ff0000", "#ffff00", "#00ff00", "#0000ff"]) is None

    def test_too_few(self):
        assert detect_harmony(["#ff0000", "bad"]) is None
