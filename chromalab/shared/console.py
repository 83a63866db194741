#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/console.py

import argparse
import os
import sys

from chromalab.core import config as c


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def paint(text: str, level: str, bold: bool = True) -> str:
    """Wrap text in the ANSI style of a message level (info, success, ...)."""
    styles = c.MSG_BOLD_COLORS if bold else c.MSG_COLORS
    return f"{styles.get(level, c.RESET)}{text}{c.RESET}"


def log(level: str, message: str) -> None:
    """
    Print a '[level] message' line. info and success go to stdout,
    everything else to stderr.
    """
    level = str(level).lower()
    stream = sys.stdout if level in ("info", "success") else sys.stderr
    print(f"{paint(f'[{level}]', level)} {paint(message, level, bold=False)}", file=stream)


class ChromalabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(2)
