#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/analyze.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.core.accessibility import analyze_accessibility_comprehensive
from chromalab.core.palette import detect_harmony
from chromalab.core.types import WcagLevel
from chromalab.shared.console import ChromalabArgumentParser, ensure_truecolor, log, paint
from chromalab.shared.preview import print_color_block
from chromalab.shared.sanitizer import INPUT_HANDLERS

LEVEL_STYLES = {
    WcagLevel.AAA: 'success',
    WcagLevel.AA: 'success',
    WcagLevel.PARTIAL: 'warning',
    WcagLevel.NONE: 'error',
}


def handle_analyze_command(args: argparse.Namespace) -> None:
    if len(args.colors) > c.MAX_COUNT:
        log('error', f"at most {c.MAX_COUNT} colors can be analyzed at once")
        sys.exit(2)

    result = analyze_accessibility_comprehensive(args.colors, args.backgrounds)

    print()
    for i, hex_code in enumerate(args.colors, start=1):
        print_color_block(hex_code, f"{c.BOLD_WHITE}color {i}{c.RESET}")
    print()

    print(f"   overall score        : {result.overall_score:.1f}")
    print(f"   wcag compliance      : {paint(result.wcag_compliance.value, LEVEL_STYLES[result.wcag_compliance])}")
    print(f"   color blindness score: {result.color_blindness_score:.1f}")

    if args.harmony:
        harmony = detect_harmony(args.colors)
        print(f"   harmony              : {harmony.value if harmony else 'none detected'}")
    print()

    if result.contrast_issues:
        log('warning', f"{len(result.contrast_issues)} pair(s) below AA {c.WCAG_AA_NORMAL}:1")
        for issue in result.contrast_issues:
            print(f"   {issue.foreground} on {issue.background}  {issue.ratio:.2f}:1")
        print()

    if result.problematic_pairs:
        log('warning', f"{len(result.problematic_pairs)} pair(s) collapse under color vision deficiency")
        for pair in result.problematic_pairs:
            print(
                f"   {pair.color1} / {pair.color2}  "
                f"dE {pair.original_distance:.1f} -> {pair.perceived_distance:.1f}"
            )
        print()

    if not result.contrast_issues and not result.problematic_pairs:
        log('success', "no contrast or color vision issues found")


def get_analyze_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab analyze",
        description="chromalab analyze: accessibility report for a set of colors",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-c", "--colors",
        nargs="+",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="hex codes to analyze"
    )
    parser.add_argument(
        "-b", "--backgrounds",
        nargs="+",
        type=INPUT_HANDLERS["hex"],
        default=list(c.DEFAULT_BACKGROUNDS),
        help="background hex codes (default: ffffff 000000)"
    )
    parser.add_argument(
        "-hm", "--harmony",
        action="store_true",
        help="also report the detected color harmony"
    )
    return parser


def main() -> None:
    parser = get_analyze_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_analyze_command(args)


if __name__ == "__main__":
    main()
