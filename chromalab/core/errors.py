#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/errors.py


class ChromalabError(Exception):
    """Base class for all errors raised by the chromalab engine."""


class ColorParseError(ChromalabError, ValueError):
    """A color string is not an optional '#' followed by exactly six hex digits."""

    def __init__(self, value, reason: str = "expected 6 hex digits"):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid hex color {value!r}: {reason}")


class DomainError(ChromalabError, ValueError):
    """An argument is structurally invalid (bad size, unknown enum name)."""
