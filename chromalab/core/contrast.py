#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/contrast.py

from typing import Iterable, List, Tuple

from . import config as c
from .conversions import ColorLike, filter_valid_colors, to_hex
from .luminance import relative_luminance
from .types import ContrastAnalysis


def _ratio_from_luminance(y1: float, y2: float) -> float:
    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)
    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Always in [1, 21] and symmetric in its arguments.
    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    return _ratio_from_luminance(relative_luminance(color1), relative_luminance(color2))


def analyze_contrast(foreground: ColorLike, background: ColorLike) -> ContrastAnalysis:
    """Contrast ratio of one foreground/background pair with its WCAG pass flags."""
    ratio = contrast_ratio(foreground, background)
    return ContrastAnalysis(
        foreground=to_hex(foreground),
        background=to_hex(background),
        ratio=ratio,
        passes_aa=ratio >= c.WCAG_AA_NORMAL,
        passes_aaa=ratio >= c.WCAG_AAA_NORMAL,
        passes_aa_large=ratio >= c.WCAG_AA_LARGE,
        passes_aaa_large=ratio >= c.WCAG_AAA_LARGE,
    )


def analyze_wcag_compliance(
    colors: Iterable[ColorLike], backgrounds: Iterable[ColorLike]
) -> List[ContrastAnalysis]:
    """
    Analyze every foreground against every background.

    Results are ordered background-major, foreground-minor. Invalid entries
    in either list are dropped before the cross product is built.
    """
    foregrounds = filter_valid_colors(colors)
    return [
        analyze_contrast(fg, bg)
        for bg in filter_valid_colors(backgrounds)
        for fg in foregrounds
    ]


def get_wcag_contrast(color: ColorLike) -> Tuple[ContrastAnalysis, ContrastAnalysis]:
    """
    Contrast of `color` as text on pure white and on pure black, in that order.

    Source: Web Content Accessibility Guidelines (WCAG) 2.1
    """
    return analyze_contrast(color, c.WHITE_HEX), analyze_contrast(color, c.BLACK_HEX)
