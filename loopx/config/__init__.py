"""Configuration and logging setup."""

from .settings import Settings, build_mirror, configure_logging

__all__ = ["Settings", "build_mirror", "configure_logging"]
