"""Svelte component renderer."""

from .lib import SvelteRenderer

__all__ = ["SvelteRenderer"]
