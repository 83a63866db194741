#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/perceptual.py

"""
OKLCH as the perceptual working space for hue rotation and lightness shifts.

Lightness is in [0, 1], chroma is >= 0 and hue is in degrees [0, 360).
Values that fall outside sRGB are clipped per channel on the way back.
"""

from .conversions import hex_to_oklch, normalize_hue, oklch_to_hex
from .types import PerceptualColor
from chromalab.shared.clamping import _clamp01


def parse_to_perceptual_space(hex_code: str) -> PerceptualColor:
    """Raises ColorParseError on malformed input."""
    lightness, chroma, hue = hex_to_oklch(hex_code)
    # Hue is undefined for neutrals; pin it so round trips stay stable.
    if chroma < 1e-6:
        chroma, hue = 0.0, 0.0
    return PerceptualColor(lightness, chroma, hue)


def to_hex(lightness: float, chroma: float, hue: float) -> str:
    return oklch_to_hex(_clamp01(lightness), max(chroma, 0.0), normalize_hue(hue))
