"""Overview printer: builds dashboard view components for cluster objects."""

from .version import __version__

__all__ = ["__version__"]
