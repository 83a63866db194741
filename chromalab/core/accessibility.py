#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/accessibility.py

"""
Aggregate accessibility scoring.

Combines the WCAG contrast batch with the pooled color vision deficiency
batch into one overall score and compliance level.
"""

from typing import Iterable, Optional, Sequence

from . import config as c
from .contrast import analyze_wcag_compliance, contrast_ratio
from .conversions import ColorLike, filter_valid_colors, to_hex
from .errors import ColorParseError
from .types import (
    AccessibilityAnalysis,
    AccessibilityCheck,
    AccessibleCombination,
    ContrastAnalysis,
    WcagLevel,
)
from .vision import analyze_color_blindness_batch


def _neutral_analysis() -> AccessibilityAnalysis:
    return AccessibilityAnalysis(
        overall_score=c.NEUTRAL_SCORE,
        wcag_compliance=WcagLevel.NONE,
        color_blindness_score=c.NEUTRAL_SCORE,
        contrast_issues=(),
        problematic_pairs=(),
    )


def compliance_level(results: Sequence[ContrastAnalysis]) -> WcagLevel:
    if not results:
        return WcagLevel.NONE
    if all(r.passes_aaa for r in results):
        return WcagLevel.AAA
    if all(r.passes_aa for r in results):
        return WcagLevel.AA
    if any(r.passes_aa for r in results):
        return WcagLevel.PARTIAL
    return WcagLevel.NONE


def analyze_accessibility_comprehensive(
    colors: Iterable[ColorLike], backgrounds: Iterable[ColorLike] = c.DEFAULT_BACKGROUNDS
) -> AccessibilityAnalysis:
    """
    Score a set of colors for contrast and color vision deficiency safety.

    The compliance level is AAA when every color/background pair passes AAA,
    AA when every pair passes AA, Partial when at least one pair passes AA
    and None otherwise. The overall score weights the level score (60%)
    against the pooled deficiency severity (40%).

    With no valid color, or no valid background to test against, the
    neutral result is returned: overall 50, compliance None, deficiency
    score 50 and no issues.
    """
    valid = filter_valid_colors(colors)
    if not valid:
        return _neutral_analysis()

    contrast_results = analyze_wcag_compliance(valid, backgrounds)
    if not contrast_results:
        return _neutral_analysis()

    simulation = analyze_color_blindness_batch(valid)
    level = compliance_level(contrast_results)
    wcag_score = c.WCAG_LEVEL_SCORES[level.value]
    overall = c.WCAG_SCORE_WEIGHT * wcag_score + c.CB_SCORE_WEIGHT * simulation.severity

    return AccessibilityAnalysis(
        overall_score=overall,
        wcag_compliance=level,
        color_blindness_score=simulation.severity,
        contrast_issues=tuple(r for r in contrast_results if not r.passes_aa),
        problematic_pairs=simulation.distinction_issues,
    )


def calculate_accessibility_score(colors: Iterable[ColorLike]) -> float:
    """Overall score of a color set against pure white and pure black."""
    return analyze_accessibility_comprehensive(colors, c.DEFAULT_BACKGROUNDS).overall_score


def required_ratio(level=WcagLevel.AA, large_text: bool = False) -> float:
    level = WcagLevel.parse(level)
    if level is WcagLevel.AAA:
        return c.WCAG_AAA_LARGE if large_text else c.WCAG_AAA_NORMAL
    if level is WcagLevel.AA:
        return c.WCAG_AA_LARGE if large_text else c.WCAG_AA_NORMAL
    # Partial and None carry no threshold of their own.
    return c.WCAG_MIN_RATIO


def validate_accessibility(
    foreground: ColorLike,
    background: ColorLike,
    level=WcagLevel.AA,
    large_text: bool = False,
) -> AccessibilityCheck:
    """
    Check one foreground/background pair against a WCAG level.

    Raises ColorParseError if either color is malformed.
    """
    ratio = contrast_ratio(foreground, background)
    required = required_ratio(level, large_text)
    return AccessibilityCheck(is_valid=ratio >= required, contrast=ratio, required=required)


def generate_accessible_combination(
    background: ColorLike, text: Optional[ColorLike] = None
) -> AccessibleCombination:
    """
    Pick a text color for a background.

    A supplied text color is kept when it already passes AA against the
    background; otherwise black or white is chosen, whichever contrasts more.
    An unparseable text color is treated as absent.
    """
    bg = to_hex(background)

    if text is not None:
        try:
            fg = to_hex(text)
        except ColorParseError:
            fg = None
        if fg is not None:
            ratio = contrast_ratio(fg, bg)
            if ratio >= c.WCAG_AA_NORMAL:
                return AccessibleCombination(background=bg, text=fg, contrast=ratio)

    on_white = contrast_ratio(c.WHITE_HEX, bg)
    on_black = contrast_ratio(c.BLACK_HEX, bg)
    if on_black >= on_white:
        return AccessibleCombination(background=bg, text=c.BLACK_HEX, contrast=on_black)
    return AccessibleCombination(background=bg, text=c.WHITE_HEX, contrast=on_white)
