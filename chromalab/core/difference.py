#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/difference.py

import math
from typing import Tuple

from . import config as c
from .conversions import ColorLike, rgb_to_lab, to_rgb


def delta_e_76_lab(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """
    Calculate the CIE76 color difference: Euclidean distance in CIE LAB.
    A coarse proxy for perceived difference; about 2.3 is a just noticeable step.
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    return math.sqrt((L1 - L2) ** c.EXP_2 + (a1 - a2) ** c.EXP_2 + (b1 - b2) ** c.EXP_2)


def delta_e_76(color1: ColorLike, color2: ColorLike) -> float:
    """CIE76 difference between two colors given as hex strings or RGB triples."""
    return delta_e_76_lab(rgb_to_lab(*to_rgb(color1)), rgb_to_lab(*to_rgb(color2)))
