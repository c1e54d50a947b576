"""Utilities Package.

Modules:
    config: Optional YAML configuration with environment resolution
    logger: Rich component logging
"""

from . import config, logger

__all__ = ["config", "logger"]
