"""Shared fixtures for the chromalab test suite."""

import sys

import pytest


@pytest.fixture()
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Run the chromalab entry point with the given arguments.

    Returns the exit code (0 when main returns without exiting).
    """
    from chromalab.main import main

    monkeypatch.setenv("COLORTERM", "truecolor")

    def _run(*argv: str) -> int:
        monkeypatch.setattr(sys, "argv", ["chromalab", *argv])
        try:
            main()
        except SystemExit as exc:
            return exc.code if isinstance(exc.code, int) else 1
        return 0

    return _run


@pytest.fixture()
def sample_colors():
    return ["#3b82f6", "#ef4444", "#10b981", "#f59e0b", "#111827"]
