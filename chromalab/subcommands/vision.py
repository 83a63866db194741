#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/vision.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.types import ColorBlindnessType
from chromalab.core.vision import are_colors_distinguishable, simulate_hex
from chromalab.shared.console import ChromalabArgumentParser, ensure_truecolor, log, paint
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS

SIMULATION_LABELS = {
    'protanopia': "protan",
    'deuteranopia': "deuter",
    'tritanopia': "tritan",
    'monochromacy': "mono",
    'protanomaly': "protan 50%",
    'deuteranomaly': "deuter 50%",
    'tritanomaly': "tritan 50%",
}


def handle_vision_command(args: argparse.Namespace) -> None:
    if args.all_simulates:
        for key in c.SIMULATE_KEYS:
            setattr(args, key, True)

    base_hex = args.hex
    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}base color{c.RESET}")

    selected = [key for key in c.SIMULATE_KEYS if getattr(args, key, False)]
    if not selected:
        log('info', "no simulation selected, showing protanopia (use -all for every type)")
        selected = ['protanopia']
    print()

    for key in selected:
        deficiency = ColorBlindnessType.parse(key)
        sim_hex = simulate_hex(base_hex, deficiency)
        print_color_block(sim_hex, paint(SIMULATION_LABELS[key], "info"))

        if args.compare is not None:
            other = simulate_hex(args.compare, deficiency)
            if not are_colors_distinguishable(sim_hex, other):
                log('warning', f"{key}: {base_hex} and {args.compare} are hard to tell apart")

    print()


def get_vision_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab vision",
        description="chromalab vision: simulate color vision deficiencies",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-H", "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="base hex code"
    )
    parser.add_argument(
        "-c", "--compare",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="second hex code; warn when both collapse under a simulation"
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types"
    )
    simulate_group.add_argument(
        '-p', '--protanopia',
        action="store_true",
        help="simulate protanopia red-blind"
    )
    simulate_group.add_argument(
        '-d', '--deuteranopia',
        action="store_true",
        help="simulate deuteranopia green-blind"
    )
    simulate_group.add_argument(
        '-t', '--tritanopia',
        action="store_true",
        help="simulate tritanopia blue-blind"
    )
    simulate_group.add_argument(
        '-m', '--monochromacy',
        action="store_true",
        help="simulate monochromacy total-blind"
    )
    simulate_group.add_argument(
        '-pa', '--protanomaly',
        action="store_true",
        help="simulate protanomaly red-weak"
    )
    simulate_group.add_argument(
        '-da', '--deuteranomaly',
        action="store_true",
        help="simulate deuteranomaly green-weak"
    )
    simulate_group.add_argument(
        '-ta', '--tritanomaly',
        action="store_true",
        help="simulate tritanomaly blue-weak"
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_vision_command(args)


if __name__ == "__main__":
    main()
