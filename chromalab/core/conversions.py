#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/conversions.py

import functools
import math
import re
from typing import Iterable, List, Sequence, Tuple, Union

from . import config as c
from .errors import ColorParseError
from .types import HSL, LAB, RGB
from chromalab.shared.clamping import _clamp01

ColorLike = Union[str, RGB, Sequence[int]]

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


def normalize_hex(value: str) -> str:
    """
    Validate a hex color and return its 6 lowercase digits without '#'.

    Accepts an optional leading '#' followed by exactly six hex digits in any
    case. Anything else (shorthand, extra characters, empty or non-string
    input) raises ColorParseError.
    """
    if not isinstance(value, str):
        raise ColorParseError(value, "not a string")
    s = value[1:] if value.startswith("#") else value
    if not s:
        raise ColorParseError(value, "empty string")
    if len(s) != 6:
        raise ColorParseError(value, f"expected 6 hex digits, got {len(s)}")
    if not _HEX_RE.fullmatch(s):
        raise ColorParseError(value, "invalid hex digit")
    return s.lower()


def is_valid_hex(value) -> bool:
    try:
        normalize_hex(value)
    except ColorParseError:
        return False
    return True


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert hex string to RGB tuple. Raises ColorParseError on malformed input."""
    return _digits_to_rgb(normalize_hex(hex_code))


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def _digits_to_rgb(h: str) -> RGB:
    return RGB(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"#{r_clamped:02x}{g_clamped:02x}{b_clamped:02x}"


def to_rgb(color: ColorLike) -> RGB:
    """
    Coerce a color given as hex string or as a 3-sequence of channels to RGB.
    Channel sequences are rounded and clamped to [0, 255].
    """
    if isinstance(color, str):
        return hex_to_rgb(color)
    try:
        channels = [int(round(v)) for v in color]
    except (TypeError, ValueError, OverflowError):
        raise ColorParseError(color, "expected a hex string or an (r, g, b) triple")
    if len(channels) != 3:
        raise ColorParseError(color, "expected a hex string or an (r, g, b) triple")
    return RGB(*(max(0, min(int(c.RGB_MAX), v)) for v in channels))


def to_hex(color: ColorLike) -> str:
    """Canonical lowercase '#rrggbb' form of any accepted color value."""
    return rgb_to_hex(*to_rgb(color))


def filter_valid_colors(colors: Iterable) -> List[str]:
    """Canonical hex of every parseable entry, in input order; others are skipped."""
    valid = []
    for color in colors:
        try:
            valid.append(to_hex(color))
        except ColorParseError:
            continue
    return valid


def normalize_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360), including negative inputs."""
    h = math.fmod(h, c.HUE_MAX)
    if h < 0.0:
        h += c.HUE_MAX
    if h >= c.HUE_MAX:
        h -= c.HUE_MAX
    return h


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB to HSL."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
        h = normalize_hue(h)
    return HSL(h, _clamp01(s), L)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB floats in [0, 255]."""
    h = normalize_hue(h)
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        if 0 <= h < 60:
            r_p, g_p, b_p = chroma, x, 0
        elif 60 <= h < 120:
            r_p, g_p, b_p = x, chroma, 0
        elif 120 <= h < 180:
            r_p, g_p, b_p = 0, chroma, x
        elif 180 <= h < 240:
            r_p, g_p, b_p = 0, x, chroma
        elif 240 <= h < 300:
            r_p, g_p, b_p = x, 0, chroma
        else:
            r_p, g_p, b_p = chroma, 0, x
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ (Y of white = 100)."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> LAB:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return LAB(L, a, b)


def rgb_to_lab(r: int, g: int, b: int) -> LAB:
    """Direct RGB to LAB conversion."""
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_lab(x, y, z)


def _mat_vec(m, v) -> Tuple[float, float, float]:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _signed_cbrt(v: float) -> float:
    return v ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def rgb_to_oklab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    lin = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    lms = _mat_vec(c.M_OKLAB_RGB_TO_LMS, lin)
    return _mat_vec(c.M_OKLAB_LMS_TO_LAB, tuple(_signed_cbrt(v) for v in lms))


def oklab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to RGB floats in [0, 255], clipped to the sRGB gamut."""
    lms_ = _mat_vec(c.M_OKLAB_LAB_TO_LMS, (L, a, b))
    lms = tuple(v ** 3 for v in lms_)
    r_lin, g_lin, b_lin = _mat_vec(c.M_OKLAB_LMS_TO_RGB, lms)
    r = _linear_to_srgb(r_lin)
    g = _linear_to_srgb(g_lin)
    b = _linear_to_srgb(b_lin)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> HSL:
    """Direct Hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    """Direct HSL to Hex."""
    return rgb_to_hex(*hsl_to_rgb(h, s, L))


def hex_to_lab(hex_code: str) -> LAB:
    """Direct Hex to LAB."""
    return rgb_to_lab(*hex_to_rgb(hex_code))


def hex_to_oklch(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to OKLCH."""
    return oklab_to_oklch(*rgb_to_oklab(*hex_to_rgb(hex_code)))


def oklch_to_hex(L: float, chroma: float, hue: float) -> str:
    """Direct OKLCH to Hex."""
    return rgb_to_hex(*oklab_to_rgb(*oklch_to_oklab(L, chroma, hue)))
