"""Utility modules for logging."""

from .logger import parse_level, setup_logger

__all__ = ["setup_logger", "parse_level"]
