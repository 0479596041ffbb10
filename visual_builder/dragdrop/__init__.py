"""Drag-and-drop geometry - drop zones, proximity lookup and gestures.

Example usage:
    >>> from visual_builder.dragdrop import find_drop_zone, register_drop_zones
    >>> zones = register_drop_zones(components, layout)
    >>> zone = find_drop_zone(120, 48, zones)
"""

from .lib import (
    DragController,
    DragItem,
    DropZone,
    LayoutMeasurer,
    Rect,
    StaticLayout,
    can_drop,
    find_drop_zone,
    register_drop_zones,
    snap_to_grid,
)

__all__ = [
    "Rect",
    "DropZone",
    "DragItem",
    "LayoutMeasurer",
    "StaticLayout",
    "register_drop_zones",
    "find_drop_zone",
    "can_drop",
    "snap_to_grid",
    "DragController",
]
