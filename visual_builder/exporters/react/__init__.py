"""React (JSX) renderer."""

from .lib import ReactRenderer

__all__ = ["ReactRenderer"]
