#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/contrast.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.accessibility import generate_accessible_combination, validate_accessibility
from chromalab.core.contrast import analyze_contrast
from chromalab.shared.console import ChromalabArgumentParser, ensure_truecolor, log, paint
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS


def _pass_fail(passed: bool) -> str:
    return paint("Pass", "success") if passed else paint("Fail", "error")


def handle_contrast_command(args: argparse.Namespace) -> None:
    result = analyze_contrast(args.foreground, args.background)

    print()
    print_color_block(result.foreground, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(result.background, f"{c.BOLD_WHITE}background{c.RESET}")
    print()
    print(f"   contrast ratio : {result.ratio:.2f}:1")
    print(f"   AA             : {_pass_fail(result.passes_aa)}")
    print(f"   AA large       : {_pass_fail(result.passes_aa_large)}")
    print(f"   AAA            : {_pass_fail(result.passes_aaa)}")
    print(f"   AAA large      : {_pass_fail(result.passes_aaa_large)}")
    print()

    if args.level is not None:
        check = validate_accessibility(
            result.foreground, result.background, args.level, args.large_text
        )
        size = "large" if args.large_text else "normal"
        if check.is_valid:
            log('success', f"{args.level.value} ({size} text) met: {check.contrast:.2f} >= {check.required:.1f}")
        else:
            log('warning', f"{args.level.value} ({size} text) not met: {check.contrast:.2f} < {check.required:.1f}")

    if args.suggest:
        combo = generate_accessible_combination(result.background, result.foreground)
        print_color_block(combo.text, paint("suggested text", "info"))
        print(f"   contrast ratio : {combo.contrast:.2f}:1")
        print()


def get_contrast_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab contrast",
        description="chromalab contrast: WCAG contrast of a text/background pair",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-fg", "--foreground",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="text color hex code"
    )
    parser.add_argument(
        "-bg", "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background color hex code"
    )
    parser.add_argument(
        "-l", "--level",
        type=INPUT_HANDLERS["wcag_level"],
        default=None,
        help="check the pair against a level: AA AAA"
    )
    parser.add_argument(
        "-lt", "--large-text",
        action="store_true",
        help="use the large text thresholds with --level"
    )
    parser.add_argument(
        "-s", "--suggest",
        action="store_true",
        help="suggest a text color that passes AA on the background"
    )
    return parser


def main() -> None:
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_contrast_command(args)


if __name__ == "__main__":
    main()
