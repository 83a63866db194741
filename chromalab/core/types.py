#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/types.py

import enum
from typing import Dict, NamedTuple, Tuple

from .errors import DomainError


class _ParsableEnum(enum.Enum):
    """Enum whose members can be looked up by value or name, case-insensitively."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if value is None:
            raise DomainError(f"{cls.__name__} must not be None")
        key = "".join(ch for ch in str(value).lower() if ch.isalnum())
        for member in cls:
            if key in (member.value.lower(), member.name.lower().replace("_", "")):
                return member
        names = ", ".join(m.value for m in cls)
        raise DomainError(f"unknown {cls.__name__} {value!r} (expected one of: {names})")


class WcagLevel(_ParsableEnum):
    AAA = "AAA"
    AA = "AA"
    PARTIAL = "Partial"
    NONE = "None"


class ColorBlindnessType(_ParsableEnum):
    NORMAL = "Normal"
    PROTANOPIA = "Protanopia"
    DEUTERANOPIA = "Deuteranopia"
    TRITANOPIA = "Tritanopia"
    MONOCHROMACY = "Monochromacy"
    PROTANOMALY = "Protanomaly"
    DEUTERANOMALY = "Deuteranomaly"
    TRITANOMALY = "Tritanomaly"


# Partial deficiencies and the full deficiency each one is blended from
ANOMALY_BASE = {
    ColorBlindnessType.PROTANOMALY: ColorBlindnessType.PROTANOPIA,
    ColorBlindnessType.DEUTERANOMALY: ColorBlindnessType.DEUTERANOPIA,
    ColorBlindnessType.TRITANOMALY: ColorBlindnessType.TRITANOPIA,
}

# Deficiencies covered by batch analysis, in reporting order
PRIMARY_DEFICIENCIES = (
    ColorBlindnessType.PROTANOPIA,
    ColorBlindnessType.DEUTERANOPIA,
    ColorBlindnessType.TRITANOPIA,
    ColorBlindnessType.MONOCHROMACY,
)


class PaletteStyle(_ParsableEnum):
    PROFESSIONAL = "Professional"
    VIBRANT = "Vibrant"
    MINIMAL = "Minimal"
    WARM = "Warm"
    COOL = "Cool"


class HarmonyType(_ParsableEnum):
    ANALOGOUS = "Analogous"
    COMPLEMENTARY = "Complementary"
    TRIADIC = "Triadic"
    MONOCHROMATIC = "Monochromatic"


class HarmonyModel(_ParsableEnum):
    HSL = "hsl"
    OKLCH = "oklch"


class ThemeMode(_ParsableEnum):
    LIGHT = "light"
    DARK = "dark"


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class LAB(NamedTuple):
    l: float
    a: float
    b: float


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class PerceptualColor(NamedTuple):
    """OKLCH coordinates: lightness in [0, 1], chroma >= 0, hue in degrees."""
    lightness: float
    chroma: float
    hue: float


class ContrastAnalysis(NamedTuple):
    foreground: str
    background: str
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_aaa_large: bool


class ColorPair(NamedTuple):
    color1: str
    color2: str
    original_distance: float
    perceived_distance: float
    problematic: bool


class AffectedColor(NamedTuple):
    original: str
    perceived: str
    difference: float


class ColorBlindnessSimulation(NamedTuple):
    affected_colors: Tuple[AffectedColor, ...]
    distinction_issues: Tuple[ColorPair, ...]
    severity: float


class AccessibilityAnalysis(NamedTuple):
    overall_score: float
    wcag_compliance: WcagLevel
    color_blindness_score: float
    contrast_issues: Tuple[ContrastAnalysis, ...]
    problematic_pairs: Tuple[ColorPair, ...]


class PaletteOptions(NamedTuple):
    style: PaletteStyle = PaletteStyle.PROFESSIONAL
    accessibility: bool = True
    size: int = 10


class AccessibilityCheck(NamedTuple):
    is_valid: bool
    contrast: float
    required: float


class AccessibleCombination(NamedTuple):
    background: str
    text: str
    contrast: float


# Step label -> hex, lightest step first
ColorPalette = Dict[str, str]


class BrandColors(NamedTuple):
    primary: str
    primary_hover: str
    primary_light: str
    primary_dark: str
    secondary: str


class ColorSystem(NamedTuple):
    """Primary, secondary and neutral tonal scales plus the brand roles read from them."""
    primary: ColorPalette
    secondary: ColorPalette
    neutral: ColorPalette
    brand: BrandColors


class ThemeColors(NamedTuple):
    background_primary: str
    background_secondary: str
    background_elevated: str
    text_primary: str
    text_secondary: str
    text_disabled: str
    border_default: str
    border_focus: str


class AccessibleTheme(NamedTuple):
    light: ThemeColors
    dark: ThemeColors
