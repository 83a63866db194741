#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/__init__.py

"""Color science and accessibility engine. Every function here is pure."""

from .accessibility import (
    analyze_accessibility_comprehensive,
    calculate_accessibility_score,
    generate_accessible_combination,
    validate_accessibility,
)
from .contrast import analyze_contrast, analyze_wcag_compliance, contrast_ratio, get_wcag_contrast
from .conversions import (
    filter_valid_colors,
    hex_to_hsl,
    hex_to_lab,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    normalize_hue,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    to_hex,
    to_rgb,
    xyz_to_lab,
)
from .difference import delta_e_76, delta_e_76_lab
from .errors import ChromalabError, ColorParseError, DomainError
from .luminance import relative_luminance
from .palette import (
    detect_harmony,
    generate_accessible_theme,
    generate_color_palette,
    generate_color_system,
    generate_harmonious_palette,
    generate_intelligent_palette,
    generate_theme_colors,
    validate_palette_accessibility,
)
from .perceptual import parse_to_perceptual_space
from .types import (
    HSL,
    LAB,
    RGB,
    AccessibilityAnalysis,
    AccessibilityCheck,
    AccessibleCombination,
    AccessibleTheme,
    AffectedColor,
    BrandColors,
    ColorBlindnessSimulation,
    ColorBlindnessType,
    ColorPair,
    ColorSystem,
    ContrastAnalysis,
    HarmonyModel,
    HarmonyType,
    PaletteOptions,
    PaletteStyle,
    PerceptualColor,
    ThemeColors,
    ThemeMode,
    WcagLevel,
)
from .vision import (
    analyze_color_blindness,
    analyze_color_blindness_batch,
    are_colors_distinguishable,
    simulate_color_blindness,
)
