#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/palette.py

"""
Tonal scales and hue harmonies derived from a single base color.

A tonal scale holds hue and saturation fixed and steps HSL lightness
evenly across [0.05, 0.95]. Steps are labelled "100", "200", ... with
"100" the lightest.

A color system bundles primary, secondary and neutral scales with the
brand and light/dark theme roles read from them.
"""

from typing import Iterable, List, Mapping, Optional, Union

from . import config as c
from . import perceptual
from .contrast import get_wcag_contrast
from .conversions import (
    ColorLike,
    filter_valid_colors,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hue,
    to_hex,
)
from .errors import ColorParseError, DomainError
from .types import (
    AccessibleTheme,
    BrandColors,
    ColorPalette,
    ColorSystem,
    HarmonyModel,
    HarmonyType,
    PaletteOptions,
    PaletteStyle,
    ThemeColors,
    ThemeMode,
)
from chromalab.shared.clamping import _clamp01


def _base_hsl(base_color: ColorLike):
    try:
        return hex_to_hsl(to_hex(base_color))
    except ColorParseError:
        return None


def _lightness_steps(size: int) -> List[float]:
    """Evenly spaced lightness values, lightest first."""
    if size == 1:
        return [0.5]
    span = c.PALETTE_MAX_LIGHTNESS - c.PALETTE_MIN_LIGHTNESS
    return [c.PALETTE_MAX_LIGHTNESS - span * i / (size - 1) for i in range(size)]


def _tonal_scale(h: float, s: float, size: int) -> ColorPalette:
    return {
        str(c.PALETTE_LABEL_STEP * (i + 1)): hsl_to_hex(h, s, lightness)
        for i, lightness in enumerate(_lightness_steps(size))
    }


def _check_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise DomainError(f"palette size must be an integer, got {size!r}")
    if size < 1:
        raise DomainError(f"palette size must be at least 1, got {size}")
    return size


def generate_color_palette(base_color: ColorLike, size: int = c.PALETTE_DEFAULT_SIZE) -> Optional[ColorPalette]:
    """
    Build a tonal scale of `size` steps from the hue and saturation of
    `base_color`.

    Returns None when the base color cannot be parsed; raises DomainError
    when `size` is smaller than 1.
    """
    size = _check_size(size)
    hsl = _base_hsl(base_color)
    if hsl is None:
        return None
    return _tonal_scale(hsl.h, hsl.s, size)


def generate_intelligent_palette(
    base_color: ColorLike, options: PaletteOptions = PaletteOptions()
) -> Optional[ColorPalette]:
    """
    Build the tonal scale of `base_color` with the style's saturation delta
    applied. The lightness delta is absorbed by the scale's own steps.
    """
    size = _check_size(options.size)
    style = PaletteStyle.parse(options.style)
    hsl = _base_hsl(base_color)
    if hsl is None:
        return None

    # Float HSL throughout; a hex round trip at L=0 or L=1 drops the hue.
    d_sat, _ = c.STYLE_DELTAS[style.value]
    return _tonal_scale(hsl.h, _clamp01(hsl.s + d_sat), size)


def _step(palette: ColorPalette, label: str) -> str:
    """
    Color at the place `label` holds on a 10-step scale, so role lookups
    keep their meaning on scales of any size.
    """
    labels = list(palette)
    position = int(label) // c.PALETTE_LABEL_STEP - 1
    index = round(position * (len(labels) - 1) / (c.PALETTE_DEFAULT_SIZE - 1))
    return palette[labels[index]]


def generate_color_system(
    primary: ColorLike, secondary: Optional[ColorLike] = None, size: int = c.PALETTE_DEFAULT_SIZE
) -> Optional[ColorSystem]:
    """
    Primary, secondary and neutral tonal scales with the brand roles taken
    from the primary scale (hover 600, light 400, dark 700).

    Without a secondary color the secondary scale repeats the primary one
    and the secondary brand role is the primary's 700 step. Returns None
    when either color cannot be parsed.
    """
    size = _check_size(size)
    primary_scale = generate_color_palette(primary, size)
    if primary_scale is None:
        return None

    if secondary is None:
        secondary_scale = dict(primary_scale)
        secondary_hex = _step(primary_scale, c.BRAND_DARK_STEP)
    else:
        secondary_scale = generate_color_palette(secondary, size)
        if secondary_scale is None:
            return None
        secondary_hex = to_hex(secondary)

    brand = BrandColors(
        primary=to_hex(primary),
        primary_hover=_step(primary_scale, c.BRAND_HOVER_STEP),
        primary_light=_step(primary_scale, c.BRAND_LIGHT_STEP),
        primary_dark=_step(primary_scale, c.BRAND_DARK_STEP),
        secondary=secondary_hex,
    )
    return ColorSystem(
        primary=primary_scale,
        secondary=secondary_scale,
        neutral=generate_color_palette(c.NEUTRAL_BASE_HEX, size),
        brand=brand,
    )


def generate_theme_colors(theme, system: ColorSystem) -> ThemeColors:
    """Background, text and border roles of a light or dark theme."""
    neutral = system.neutral
    if ThemeMode.parse(theme) is ThemeMode.LIGHT:
        return ThemeColors(
            background_primary=_step(neutral, "100"),
            background_secondary=_step(neutral, "200"),
            background_elevated=c.WHITE_HEX,
            text_primary=_step(neutral, "900"),
            text_secondary=_step(neutral, "600"),
            text_disabled=_step(neutral, "400"),
            border_default=_step(neutral, "200"),
            border_focus=_step(system.primary, "500"),
        )
    return ThemeColors(
        background_primary=_step(neutral, "900"),
        background_secondary=_step(neutral, "800"),
        background_elevated=_step(neutral, "800"),
        text_primary=_step(neutral, "100"),
        text_secondary=_step(neutral, "300"),
        text_disabled=_step(neutral, "500"),
        border_default=_step(neutral, "700"),
        border_focus=_step(system.primary, "400"),
    )


def generate_accessible_theme(system: ColorSystem) -> AccessibleTheme:
    return AccessibleTheme(
        light=generate_theme_colors(ThemeMode.LIGHT, system),
        dark=generate_theme_colors(ThemeMode.DARK, system),
    )


def _harmony_hsl(base: str, harmony: HarmonyType) -> List[str]:
    h, s, lightness = hex_to_hsl(base)
    if harmony is HarmonyType.MONOCHROMATIC:
        return [hsl_to_hex(h, s, _clamp01(lightness + shift)) for shift in c.MONOCHROMATIC_SHIFTS]
    return [
        hsl_to_hex(normalize_hue(h + offset), s, lightness)
        for offset in c.HARMONY_OFFSETS[harmony.value]
    ]


def _harmony_oklch(base: str, harmony: HarmonyType) -> List[str]:
    lightness, chroma, h = perceptual.parse_to_perceptual_space(base)
    if harmony is HarmonyType.MONOCHROMATIC:
        return [
            perceptual.to_hex(_clamp01(lightness + shift), chroma, h)
            for shift in c.MONOCHROMATIC_SHIFTS
        ]
    return [
        perceptual.to_hex(lightness, chroma, normalize_hue(h + offset))
        for offset in c.HARMONY_OFFSETS[harmony.value]
    ]


def generate_harmonious_palette(
    base_color: ColorLike, harmony_type, model=HarmonyModel.HSL
) -> List[str]:
    """
    Colors in harmony with `base_color`, base first.

    analogous      base, +30, -30, +60, -60 degrees
    complementary  base, +180
    triadic        base, +120, +240
    monochromatic  base, lightness +0.2, +0.1, -0.1, -0.2

    An unparseable base color gives an empty list. Unknown harmony or model
    names raise DomainError.
    """
    harmony = HarmonyType.parse(harmony_type)
    model = HarmonyModel.parse(model)
    try:
        base = to_hex(base_color)
    except ColorParseError:
        return []

    if model is HarmonyModel.OKLCH:
        return _harmony_oklch(base, harmony)
    return _harmony_hsl(base, harmony)


def _best_contrast(color: str) -> float:
    return max(result.ratio for result in get_wcag_contrast(color))


def validate_palette_accessibility(
    palette: Union[Mapping[str, str], Iterable[ColorLike]], min_ratio: float = c.WCAG_AA_NORMAL
) -> bool:
    """
    True when at least 70% of the palette's colors reach `min_ratio` against
    white or black, whichever contrasts more.

    Accepts a label -> hex mapping or a plain sequence of colors. Entries
    that cannot be parsed count as failing; an empty palette is never valid.
    """
    colors = list(palette.values()) if isinstance(palette, Mapping) else list(palette)
    if not colors:
        return False

    passing = sum(1 for color in filter_valid_colors(colors) if _best_contrast(color) >= min_ratio)
    return passing / len(colors) >= c.PALETTE_PASS_RATIO


def _hue_distance(h1: float, h2: float) -> float:
    d = abs(normalize_hue(h1) - normalize_hue(h2))
    return min(d, c.HUE_MAX - d)


def _hue_spread(hues: List[float]) -> float:
    """Width of the smallest arc of the hue circle that holds every hue."""
    ordered = sorted(normalize_hue(h) for h in hues)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    gaps.append(ordered[0] + c.HUE_MAX - ordered[-1])
    return c.HUE_MAX - max(gaps)


def detect_harmony(colors: Iterable[ColorLike]) -> Optional[HarmonyType]:
    """
    Classify the hue relationship of a small color set.

    Checked in order: monochromatic (every chromatic hue within 10 degrees,
    or no chromatic color at all), complementary (two colors about 180
    degrees apart), triadic (three colors about 120 degrees apart) and
    analogous (all hues inside a 60 degree arc). Returns None when fewer
    than two valid colors are given or nothing matches.
    """
    valid = filter_valid_colors(colors)
    if len(valid) < 2:
        return None

    hsls = [hex_to_hsl(v) for v in valid]
    hues = [hsl.h for hsl in hsls if hsl.s >= c.ACHROMATIC_SATURATION]

    # Grays carry no hue and never break a monochromatic set.
    if not hues or all(_hue_distance(hues[0], h) <= c.HARMONY_MONO_HUE_TOL for h in hues[1:]):
        return HarmonyType.MONOCHROMATIC

    if len(hues) != len(valid):
        return None

    if len(hues) == 2 and abs(_hue_distance(*hues) - 180.0) <= c.HARMONY_HUE_TOL:
        return HarmonyType.COMPLEMENTARY

    if len(hues) == 3:
        ordered = sorted(hues)
        gaps = [ordered[1] - ordered[0], ordered[2] - ordered[1], ordered[0] + c.HUE_MAX - ordered[2]]
        if all(abs(g - 120.0) <= c.HARMONY_HUE_TOL for g in gaps):
            return HarmonyType.TRIADIC

    if _hue_spread(hues) <= c.HARMONY_ANALOGOUS_SPREAD:
        return HarmonyType.ANALOGOUS
    return None
