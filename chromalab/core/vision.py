#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/vision.py

"""
Color vision deficiency simulation and distinguishability analysis.

Each deficiency is a fixed 3x3 matrix applied to the 8-bit channels
normalized to [0, 1]; the result is rescaled to [0, 255], rounded and
clamped. Partial deficiencies (the "-anomaly" types) blend the original
color with the full simulation.
"""

import itertools
from typing import Iterable, List, Sequence, Tuple

from . import config as c
from .contrast import contrast_ratio
from .conversions import ColorLike, filter_valid_colors, rgb_to_hex, to_rgb
from .difference import delta_e_76
from .types import (
    ANOMALY_BASE,
    PRIMARY_DEFICIENCIES,
    RGB,
    AffectedColor,
    ColorBlindnessSimulation,
    ColorBlindnessType,
    ColorPair,
)
from chromalab.shared.clamping import _clamp255


def _apply_matrix(rgb: RGB, matrix) -> Tuple[float, float, float]:
    r_n, g_n, b_n = rgb.r / c.RGB_MAX, rgb.g / c.RGB_MAX, rgb.b / c.RGB_MAX
    return tuple(
        (row[0] * r_n + row[1] * g_n + row[2] * b_n) * c.RGB_MAX
        for row in matrix
    )


def _finalize_rgb_vals(r: float, g: float, b: float) -> RGB:
    return RGB(*(int(round(_clamp255(v))) for v in (r, g, b)))


def simulate_color_blindness(color: ColorLike, deficiency=ColorBlindnessType.PROTANOPIA) -> RGB:
    """
    Simulate how a color is perceived with the given deficiency.

    `deficiency` is a ColorBlindnessType or its name. NORMAL returns the
    color unchanged.
    """
    deficiency = ColorBlindnessType.parse(deficiency)
    rgb = to_rgb(color)

    if deficiency is ColorBlindnessType.NORMAL:
        return rgb

    if deficiency in ANOMALY_BASE:
        full = _apply_matrix(rgb, c.CB_MATRICES[ANOMALY_BASE[deficiency].value])
        f = c.ANOMALY_BLEND
        return _finalize_rgb_vals(*(
            (c.UNIT - f) * orig + f * sim for orig, sim in zip(rgb, full)
        ))

    return _finalize_rgb_vals(*_apply_matrix(rgb, c.CB_MATRICES[deficiency.value]))


def simulate_hex(color: ColorLike, deficiency=ColorBlindnessType.PROTANOPIA) -> str:
    return rgb_to_hex(*simulate_color_blindness(color, deficiency))


def _compare_pair(
    original: Tuple[str, str], perceived: Tuple[str, str]
) -> ColorPair:
    original_distance = delta_e_76(*original)
    perceived_distance = delta_e_76(*perceived)
    return ColorPair(
        color1=original[0],
        color2=original[1],
        original_distance=original_distance,
        perceived_distance=perceived_distance,
        problematic=(
            original_distance > c.CB_MIN_ORIGINAL_DISTANCE
            and perceived_distance < c.CB_MAX_PERCEIVED_DISTANCE
        ),
    )


def _assess_severity(
    affected_colors: Sequence[AffectedColor], distinction_issues: Sequence[ColorPair]
) -> float:
    """
    Map mean simulated difference and issue count onto the four severity
    buckets of config.CB_SEVERITY_BUCKETS (100, 75, 50, else 25).
    """
    if affected_colors:
        mean_difference = sum(a.difference for a in affected_colors) / len(affected_colors)
    else:
        mean_difference = 0.0
    issue_count = len(distinction_issues)

    for max_mean, max_issues, score in c.CB_SEVERITY_BUCKETS:
        if mean_difference < max_mean and issue_count <= max_issues:
            return score
    return c.CB_SEVERITY_FLOOR


def _simulate_valid(colors: List[str], deficiency: ColorBlindnessType):
    perceived = [simulate_hex(color, deficiency) for color in colors]
    affected = tuple(
        AffectedColor(original=o, perceived=p, difference=delta_e_76(o, p))
        for o, p in zip(colors, perceived)
    )
    pairs = (
        _compare_pair((colors[i], colors[j]), (perceived[i], perceived[j]))
        for i, j in itertools.combinations(range(len(colors)), 2)
    )
    issues = tuple(pair for pair in pairs if pair.problematic)
    return affected, issues


def analyze_color_blindness(
    colors: Iterable[ColorLike], deficiency=ColorBlindnessType.PROTANOPIA
) -> ColorBlindnessSimulation:
    """Simulate every valid color under one deficiency and find collapsing pairs."""
    deficiency = ColorBlindnessType.parse(deficiency)
    affected, issues = _simulate_valid(filter_valid_colors(colors), deficiency)
    return ColorBlindnessSimulation(affected, issues, _assess_severity(affected, issues))


def analyze_color_blindness_batch(colors: Iterable[ColorLike]) -> ColorBlindnessSimulation:
    """
    Pool the analysis of protanopia, deuteranopia, tritanopia and monochromacy.

    Affected colors and problematic pairs of all four deficiencies are
    concatenated in that order; severity is assessed over the pooled records.
    """
    valid = filter_valid_colors(colors)
    per_type = [_simulate_valid(valid, d) for d in PRIMARY_DEFICIENCIES]
    affected = tuple(itertools.chain.from_iterable(a for a, _ in per_type))
    issues = tuple(itertools.chain.from_iterable(i for _, i in per_type))
    return ColorBlindnessSimulation(affected, issues, _assess_severity(affected, issues))


def are_colors_distinguishable(
    color1: ColorLike,
    color2: ColorLike,
    min_delta_e: float = c.DISTINGUISHABLE_MIN_DELTA_E,
    min_contrast: float = c.DISTINGUISHABLE_MIN_CONTRAST,
) -> bool:
    """True when two colors are both far enough apart in LAB and in contrast."""
    return (
        delta_e_76(color1, color2) >= min_delta_e
        and contrast_ratio(color1, color2) >= min_contrast
    )
