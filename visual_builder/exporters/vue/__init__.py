"""Vue single-file component renderer."""

from .lib import VueRenderer

__all__ = ["VueRenderer"]
