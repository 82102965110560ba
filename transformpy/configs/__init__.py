"""
Configuration package for transformpy.
"""

from .config import Config, config

__all__ = ["Config", "config"]
