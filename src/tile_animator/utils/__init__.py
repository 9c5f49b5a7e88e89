"""Utility helpers for tile-animator."""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
