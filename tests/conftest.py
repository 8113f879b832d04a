"""Pytest configuration for the overview printer tests.

Responsibilities:
1. Ensure project root on sys.path.
2. Isolate each test from OVERVIEW_* environment variables and the cached
   PrinterEnv.
"""
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _printer_env_isolation(monkeypatch):  # type: ignore
    for k in list(os.environ):
        if k.startswith("OVERVIEW_"):
            monkeypatch.delenv(k, raising=False)
    from overview.config import load_printer_env
    load_printer_env(force_reload=True)
    yield
    load_printer_env(force_reload=True)


@pytest.fixture()
def printer_env(monkeypatch):
    """Set OVERVIEW_* variables and reload the cached PrinterEnv.

    Usage:
        def test_x(printer_env):
            printer_env(OVERVIEW_EVENTS_LIMIT="2")
    """
    from overview.config import load_printer_env

    def _set(**values: str):
        for k, v in values.items():
            monkeypatch.setenv(k, v)
        return load_printer_env(force_reload=True)

    return _set
