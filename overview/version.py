"""Package version.

get_version() honours an OVERVIEW_VERSION override (e.g., injected by CI)
before falling back to __version__.
"""
from __future__ import annotations

import os

__version__ = "0.1.0"

def get_version() -> str:
    return os.environ.get("OVERVIEW_VERSION", __version__)

__all__ = ["__version__", "get_version"]
