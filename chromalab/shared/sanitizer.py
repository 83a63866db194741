#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/sanitizer.py

import argparse
import re

from chromalab.core import config as c
from chromalab.core.conversions import normalize_hex
from chromalab.core.errors import ColorParseError, DomainError
from chromalab.core.types import HarmonyModel, HarmonyType, PaletteStyle, WcagLevel


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)

    is_negative = s.strip().startswith("-")

    # Regex [0-9] extracts only the numeric digits
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    if is_negative:
        val = -val
    return val


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up style, harmony and model names.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    try:
        return f"#{normalize_hex(v.strip())}"
    except (ColorParseError, AttributeError):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., style names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_enum(enum_cls):
    """
    Factory function returning a validator that resolves a CLI string to a
    member of the given chromalab enum.
    """
    def validator(v: str):
        try:
            return enum_cls.parse(handle_string_clean(v))
        except DomainError as exc:
            raise argparse.ArgumentTypeError(str(exc))
    return validator


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that parses a float and clamps
    it into [min_v, max_v].
    """
    def validator(v: str) -> float:
        try:
            val = float(str(v).strip())
        except ValueError:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid number: '{raw}'")
        if val != val:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid number: '{raw}'")
        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "palette_size": handle_int_range(1, c.MAX_PALETTE_SIZE),
    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "style": handle_enum(PaletteStyle),
    "harmony": handle_enum(HarmonyType),
    "harmony_model": handle_enum(HarmonyModel),
    "wcag_level": handle_enum(WcagLevel),
}
