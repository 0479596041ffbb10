"""Angular component renderer."""

from .lib import AngularRenderer

__all__ = ["AngularRenderer"]
