"""Logging micro API for visual-builder."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
