#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/palette.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.palette import (
    generate_accessible_theme,
    generate_color_system,
    generate_harmonious_palette,
    generate_intelligent_palette,
    validate_palette_accessibility,
)
from chromalab.core.types import HarmonyModel, PaletteOptions, PaletteStyle
from chromalab.shared.console import ChromalabArgumentParser, ensure_truecolor, log, paint
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS


def _print_roles(record, heading: str) -> None:
    print(f"   {paint(heading, 'info')}")
    for role, hex_code in record._asdict().items():
        print_color_block(hex_code, role.replace('_', ' '))
    print()


def handle_palette_command(args: argparse.Namespace) -> None:
    options = PaletteOptions(
        style=args.style,
        accessibility=args.accessibility,
        size=args.size,
    )
    palette = generate_intelligent_palette(args.hex, options)
    if palette is None:
        log('error', f"cannot build a palette from '{args.hex}'")
        sys.exit(2)

    print()
    print_color_block(args.hex, f"{c.BOLD_WHITE}base color{c.RESET}")
    print()
    for label, hex_code in palette.items():
        print_color_block(hex_code, f"{options.style.value.lower()} {label:>6}")
    print()

    if args.harmony is not None:
        colors = generate_harmonious_palette(args.hex, args.harmony, args.model)
        for i, hex_code in enumerate(colors):
            title = "base" if i == 0 else f"{args.harmony.value.lower()} {i}"
            print_color_block(hex_code, paint(title, "info"))
        print()

    if args.system:
        system = generate_color_system(args.hex, args.secondary, args.size)
        theme = generate_accessible_theme(system)
        _print_roles(system.brand, "brand")
        _print_roles(theme.light, "light theme")
        _print_roles(theme.dark, "dark theme")

    if options.accessibility:
        if validate_palette_accessibility(palette, args.min_ratio):
            log('success', f"palette clears {args.min_ratio:.1f}:1 against white or black")
        else:
            log('warning', f"fewer than 70% of steps reach {args.min_ratio:.1f}:1 against white or black")


def get_palette_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab palette",
        description="chromalab palette: tonal scales and harmonies from a base color",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-H", "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="base hex code"
    )
    parser.add_argument(
        "-n", "--size",
        type=INPUT_HANDLERS["palette_size"],
        default=c.PALETTE_DEFAULT_SIZE,
        help=f"number of steps: 1 to {c.MAX_PALETTE_SIZE} (default: {c.PALETTE_DEFAULT_SIZE})"
    )
    parser.add_argument(
        "-st", "--style",
        type=INPUT_HANDLERS["style"],
        default=PaletteStyle.PROFESSIONAL,
        help="palette style: professional vibrant minimal warm cool (default: professional)"
    )
    parser.add_argument(
        "-hm", "--harmony",
        type=INPUT_HANDLERS["harmony"],
        default=None,
        help="also show a harmony: analogous complementary triadic monochromatic"
    )
    parser.add_argument(
        "-md", "--model",
        type=INPUT_HANDLERS["harmony_model"],
        default=HarmonyModel.HSL,
        help="harmony model: hsl oklch (default: hsl)"
    )
    parser.add_argument(
        "-sy", "--system",
        action="store_true",
        help="also show brand roles and light/dark theme colors"
    )
    parser.add_argument(
        "-sc", "--secondary",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="secondary brand hex code for --system (default: primary 700 step)"
    )
    parser.add_argument(
        "-na", "--no-accessibility",
        dest="accessibility",
        action="store_false",
        help="skip the palette accessibility check"
    )
    parser.add_argument(
        "-mr", "--min-ratio",
        type=INPUT_HANDLERS["ratio"],
        default=c.WCAG_AA_NORMAL,
        help=f"contrast each step must reach (default: {c.WCAG_AA_NORMAL})"
    )
    return parser


def main() -> None:
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_palette_command(args)


if __name__ == "__main__":
    main()
