#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for hex parsing cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_LINEAR_TH = 0.03928           # WCAG 2.x threshold for the linear segment of the sRGB curve

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
EXP_2 = 2                          # Square power

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # Factor for normalizing/scaling XYZ coordinates

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_POW = 1.0 / 3.0                # Cube root exponent of the CIE f(t) transform
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0     # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS (Source: Björn Ottosson, 2020)
M_OKLAB_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),   # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),   # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),   # Short-wavelength (S) response
)

# LMS' to Lab (Perceptual lightness and opponency)
M_OKLAB_LMS_TO_LAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness
    (1.9779984951, -2.4285922050, 0.4505937099),  # 'a' (green-red)
    (0.0259040371, 0.7827717662, -0.8086757660),  # 'b' (blue-yellow)
)

# OKLab to LMS' (Inverse stage part 1), columns are (L, a, b)
M_OKLAB_LAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS to linear sRGB (Inverse stage part 2)
M_OKLAB_LMS_TO_RGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Color Blindness Simulation Matrices, row-major, applied to channels normalized to [0, 1]
CB_MATRICES = {
    "Protanopia": (
        (0.567, 0.433, 0.000),      # Red-blindness (L-cone absence)
        (0.558, 0.442, 0.000),
        (0.000, 0.242, 0.758),
    ),
    "Deuteranopia": (
        (0.625, 0.375, 0.000),      # Green-blindness (M-cone absence)
        (0.700, 0.300, 0.000),
        (0.000, 0.300, 0.700),
    ),
    "Tritanopia": (
        (0.950, 0.050, 0.000),      # Blue-blindness (S-cone absence)
        (0.000, 0.433, 0.567),
        (0.000, 0.475, 0.525),
    ),
    "Monochromacy": (
        (0.299, 0.587, 0.114),      # Rec. 601 luma on every channel
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
}

ANOMALY_BLEND = 0.5                # Weight of the full simulation in anomaly (partial) variants

# ==========================================
# Accessibility Scoring
# ==========================================

# Pair distinguishability under simulation (Delta-E 76 units)
CB_MIN_ORIGINAL_DISTANCE = 10.0    # Pair must be clearly distinct before simulation
CB_MAX_PERCEIVED_DISTANCE = 5.0    # ...and collapse below this after simulation

# Severity buckets: (max mean difference, max issue count, score).
# Heuristic values kept for compatibility; not derived from accessibility research.
CB_SEVERITY_BUCKETS = (
    (5.0, 0, 100.0),
    (15.0, 2, 75.0),
    (30.0, 5, 50.0),
)
CB_SEVERITY_FLOOR = 25.0

# Base score per WCAG compliance level
WCAG_LEVEL_SCORES = {
    "AAA": 100.0,
    "AA": 85.0,
    "Partial": 60.0,
    "None": 30.0,
}

WCAG_SCORE_WEIGHT = 0.6            # Weight of the WCAG level score in the overall score
CB_SCORE_WEIGHT = 0.4              # Weight of the color blindness score in the overall score
NEUTRAL_SCORE = 50.0               # Reported when there is nothing valid to analyze

DEFAULT_BACKGROUNDS = ("#ffffff", "#000000")
WHITE_HEX = "#ffffff"
BLACK_HEX = "#000000"

# Minimum distances used by are_colors_distinguishable
DISTINGUISHABLE_MIN_DELTA_E = 10.0
DISTINGUISHABLE_MIN_CONTRAST = 1.0

# ==========================================
# Palette Generation
# ==========================================

PALETTE_MIN_LIGHTNESS = 0.05       # Darkest step of a tonal scale
PALETTE_MAX_LIGHTNESS = 0.95       # Lightest step of a tonal scale
PALETTE_DEFAULT_SIZE = 10
PALETTE_LABEL_STEP = 100           # Step labels are "100", "200", ...
PALETTE_PASS_RATIO = 0.7           # Share of colors that must clear the contrast bar

# Color system: neutral gray scale base and the brand role steps
NEUTRAL_BASE_HEX = "#6b7280"
BRAND_HOVER_STEP = "600"
BRAND_LIGHT_STEP = "400"
BRAND_DARK_STEP = "700"

# Style adjustments: (delta saturation, delta lightness)
STYLE_DELTAS = {
    "Professional": (0.0, 0.0),
    "Vibrant": (0.2, 0.1),
    "Minimal": (-0.1, 0.05),
    "Warm": (0.1, 0.05),
    "Cool": (0.05, -0.05),
}

# Harmony hue offsets in degrees, base color first
HARMONY_OFFSETS = {
    "Analogous": (0.0, 30.0, -30.0, 60.0, -60.0),
    "Complementary": (0.0, 180.0),
    "Triadic": (0.0, 120.0, 240.0),
}
# Monochromatic lightness shifts, base color first (two lighter, two darker)
MONOCHROMATIC_SHIFTS = (0.0, 0.2, 0.1, -0.1, -0.2)

# Harmony detection tolerances (degrees)
HARMONY_MONO_HUE_TOL = 10.0
HARMONY_HUE_TOL = 15.0
HARMONY_ANALOGOUS_SPREAD = 60.0
ACHROMATIC_SATURATION = 0.05       # Below this HSL saturation a color has no usable hue

# ==========================================
# CLI UI & Data Structures
# ==========================================

MAX_COUNT = 100                    # Maximum number of colors allowed in batch processing
MAX_PALETTE_SIZE = 20              # Largest tonal scale offered on the command line

SIMULATE_KEYS = [
    'protanopia',
    'deuteranopia',
    'tritanopia',
    'monochromacy',
    'protanomaly',
    'deuteranomaly',
    'tritanomaly',
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
