#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/main.py

import argparse
import sys

from chromalab import __version__
from chromalab.subcommands.command_registry import SUBCOMMANDS
from chromalab.shared.console import ChromalabArgumentParser, ensure_truecolor, log


def get_main_parser() -> argparse.ArgumentParser:
    parser = ChromalabArgumentParser(
        prog="chromalab",
        description=(
            "chromalab: color science and accessibility analysis\n\n"
            "subcommands:\n"
            "  contrast   WCAG contrast of a text/background pair\n"
            "  vision     simulate color vision deficiencies\n"
            "  palette    tonal scales and harmonies from a base color\n"
            "  analyze    accessibility report for a set of colors"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"chromalab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for chromalab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args, parser)


if __name__ == "__main__":
    main()
