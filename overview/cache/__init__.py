"""Object cache read contract and an in-memory implementation."""

from .interface import Cache, CacheKey
from .memory import MemoryCache

__all__ = ["Cache", "CacheKey", "MemoryCache"]
