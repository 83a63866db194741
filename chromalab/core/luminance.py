#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/luminance.py

from . import config as c
from .conversions import ColorLike, to_rgb
from chromalab.shared.clamping import _clamp01


def _wcag_linear(color_comp: int) -> float:
    """Linearize an 8-bit channel with the WCAG 2.x threshold."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.WCAG_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _wcag_linear(r) +
        c.LUMA_G * _wcag_linear(g) +
        c.LUMA_B * _wcag_linear(b)
    )


def relative_luminance(color: ColorLike) -> float:
    """
    WCAG relative luminance of a hex string or RGB triple, in [0, 1].

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    return get_luminance(*to_rgb(color))
