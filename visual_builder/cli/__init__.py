"""Command line interface for visual-builder."""

from .lib import InputError, build_parser, load_components, main

__all__ = ["main", "build_parser", "load_components", "InputError"]
