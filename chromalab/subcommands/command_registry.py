#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/command_registry.py

from . import (
    analyze,
    contrast,
    palette,
    vision,
)

SUBCOMMANDS = {
    'analyze': analyze,
    'contrast': contrast,
    'palette': palette,
    'vision': vision,
}
