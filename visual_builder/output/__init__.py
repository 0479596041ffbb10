"""Output module for builder visualization.

Provides human-readable text representations of component forests.
"""

from .lib import BuilderOutput, OutputGenerator, file_extension_for, format_component_tree

__all__ = [
    "format_component_tree",
    "file_extension_for",
    "BuilderOutput",
    "OutputGenerator",
]
