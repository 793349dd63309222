"""Core: config, constants, error envelope, and application bootstrap."""

from pvsf.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
