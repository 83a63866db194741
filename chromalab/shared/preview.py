#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/preview.py

import re

from chromalab.core.conversions import hex_to_rgb
from chromalab.core import config as c

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    """Print a truecolor swatch of `hex_code` after a padded title."""
    r, g, b = hex_to_rgb(hex_code)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}#{hex_code.lstrip('#').lower()}{c.RESET}", end=end)
