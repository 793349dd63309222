"""Caching backends."""

from pvsf.infrastructure.cache.memory_cache import MemoryCache

__all__ = ["MemoryCache"]
