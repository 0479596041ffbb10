"""Drop-zone geometry for the visual builder.

Layout measurement is supplied from outside through ``LayoutMeasurer``, so
this module works headless: ``register_drop_zones`` turns a component tree
plus measured rectangles into candidate insertion points, and
``find_drop_zone`` resolves a pointer to the nearest one.

``DragController`` runs one drag gesture at a time and turns a successful
drop into a store action.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from visual_builder.config import EnvVar, get_drop_threshold, get_environment
from visual_builder.mid import ROOT_ID, ComponentNode, contains_node, find_node
from visual_builder.schema import can_accept_child, get_definition
from visual_builder.store import AddComponent, BuilderState, MoveComponent

logger = logging.getLogger(__name__)


# =============================================================================
# Geometry types
# =============================================================================


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas pixels."""

    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)


@dataclass(frozen=True)
class DropZone:
    """Candidate insertion point: ``index`` within ``parent_id``'s children.

    Attributes:
        id: Zone identifier, ``"{parent_id}-{index}"``.
        parent_id: Target parent id, or ROOT_ID for the top level.
        index: Insertion index within the parent's children.
        rect: Measured rectangle used for proximity.
    """

    id: str
    parent_id: str
    index: int
    rect: Rect


@dataclass(frozen=True)
class DragItem:
    """Payload of an active drag.

    Attributes:
        id: Node id when moving an existing node, palette id when new.
        type: Component type tag.
        is_new: True when dragged from the palette.
        source_index: Original index among siblings (existing nodes only).
        parent_id: Original parent id (existing nodes only).
    """

    id: str
    type: str
    is_new: bool
    source_index: int | None = None
    parent_id: str | None = None


class LayoutMeasurer(Protocol):
    """Supplies rendered rectangles for nodes."""

    def measure(self, node_id: str) -> Rect | None:
        """Rectangle of the rendered node, or None if not rendered."""
        ...

    def measure_container(self, node_id: str) -> Rect | None:
        """Rectangle of the node's child container, or None."""
        ...


@dataclass
class StaticLayout:
    """LayoutMeasurer backed by precomputed rectangles."""

    rects: dict[str, Rect] = field(default_factory=dict)
    containers: dict[str, Rect] = field(default_factory=dict)

    def measure(self, node_id: str) -> Rect | None:
        return self.rects.get(node_id)

    def measure_container(self, node_id: str) -> Rect | None:
        return self.containers.get(node_id)


# =============================================================================
# Zone registration and lookup
# =============================================================================


def _zone(parent_id: str, index: int, rect: Rect) -> DropZone:
    return DropZone(id=f"{parent_id}-{index}", parent_id=parent_id, index=index, rect=rect)


def register_drop_zones(
    components: Sequence[ComponentNode], measurer: LayoutMeasurer
) -> list[DropZone]:
    """Compute candidate drop zones for a component forest.

    One zone is added before every measured node. Nodes that accept
    children and expose a measured container get a single zone when empty,
    otherwise their children's zones followed by an after-last zone.

    Args:
        components: Top-level nodes of the forest.
        measurer: Source of rendered rectangles.

    Returns:
        Zones in registration order (document order).
    """
    zones: list[DropZone] = []

    def collect(nodes: Sequence[ComponentNode], parent_id: str) -> None:
        for index, node in enumerate(nodes):
            rect = measurer.measure(node.id)
            if rect is not None:
                zones.append(_zone(parent_id, index, rect))

            definition = get_definition(node.type)
            if definition is None or not definition.accepts_children:
                continue

            container = measurer.measure_container(node.id)
            if container is None:
                continue

            if not node.children:
                zones.append(_zone(node.id, 0, container))
            else:
                collect(node.children, node.id)
                zones.append(_zone(node.id, len(node.children), container))

    collect(components, ROOT_ID)
    return zones


def _distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(bx - ax, by - ay)


def find_drop_zone(
    x: float,
    y: float,
    zones: Sequence[DropZone],
    threshold: float = 50,
) -> DropZone | None:
    """Find the zone whose center is nearest to a point.

    Only zones strictly closer than ``threshold`` qualify. On equal
    distance the earlier registered zone wins.
    """
    closest: DropZone | None = None
    closest_distance = math.inf

    for zone in zones:
        cx, cy = zone.rect.center
        distance = _distance(x, y, cx, cy)
        if distance < closest_distance and distance < threshold:
            closest_distance = distance
            closest = zone

    return closest


def can_drop(
    item: DragItem, zone: DropZone, components: Sequence[ComponentNode]
) -> bool:
    """Check whether ``item`` may be dropped into ``zone``.

    Rejects drops onto the item itself, into its own descendants, and into
    parents that are unknown or do not accept the item's type.
    """
    if item.id == zone.parent_id:
        return False

    if zone.parent_id == ROOT_ID:
        return True

    if not item.is_new:
        dragged = find_node(components, item.id)
        if dragged is not None and contains_node(dragged, zone.parent_id):
            return False

    parent = find_node(components, zone.parent_id)
    if parent is None:
        return False

    return can_accept_child(parent.type, item.type)


def snap_to_grid(x: float, y: float, grid_size: int) -> tuple[float, float]:
    """Round a point to the nearest multiple of ``grid_size``.

    Halves round up.
    """
    if grid_size <= 0:
        return (x, y)
    return (
        math.floor(x / grid_size + 0.5) * grid_size,
        math.floor(y / grid_size + 0.5) * grid_size,
    )


# =============================================================================
# Drag controller
# =============================================================================


class DragController:
    """Stateful drag gesture tracker.

    Example:
        >>> controller = DragController()
        >>> controller.register_drop_zones(components, layout)
        >>> controller.start_drag(DragItem(id="p", type="button", is_new=True), 0, 0)
        >>> controller.update_drag_position(12, 40)
        >>> action = controller.end_drag()

    Args:
        threshold: Max pointer distance to a zone center. Defaults to config.
        snap_to_grid: Snap the pointer before zone lookup. Defaults to config.
        grid_size: Grid size in pixels. Defaults to config.
    """

    def __init__(
        self,
        threshold: float | None = None,
        snap_to_grid: bool | None = None,
        grid_size: int | None = None,
    ):
        self.threshold = get_drop_threshold(threshold)
        self.snap_to_grid = get_environment(EnvVar.BUILDER_SNAP_TO_GRID, snap_to_grid)
        self.grid_size = get_environment(EnvVar.BUILDER_GRID_SIZE, grid_size)

        self._components: list[ComponentNode] = []
        self._zones: list[DropZone] = []
        self._item: DragItem | None = None
        self._position: tuple[float, float] = (0, 0)
        self._active_zone: DropZone | None = None
        self._pending_drop: tuple[str, DropZone] | None = None

    @property
    def is_dragging(self) -> bool:
        return self._item is not None

    @property
    def dragged_item(self) -> DragItem | None:
        return self._item

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @property
    def active_zone(self) -> DropZone | None:
        return self._active_zone

    @property
    def drop_zones(self) -> list[DropZone]:
        return list(self._zones)

    def register_drop_zones(
        self, components: Sequence[ComponentNode], measurer: LayoutMeasurer
    ) -> list[DropZone]:
        """Recompute zones for the current tree."""
        self._components = list(components)
        self._zones = register_drop_zones(components, measurer)
        logger.debug("Registered %d drop zones", len(self._zones))
        return self.drop_zones

    def start_drag(self, item: DragItem, x: float, y: float) -> None:
        """Begin a gesture at pointer position ``(x, y)``."""
        self._item = item
        self._position = (x, y)
        self._active_zone = None
        self._pending_drop = None

    def _snap(self, x: float, y: float) -> tuple[float, float]:
        if self.snap_to_grid and self.grid_size:
            return snap_to_grid(x, y, self.grid_size)
        return (x, y)

    def update_drag_position(self, x: float, y: float) -> DropZone | None:
        """Track the pointer and return the zone under it, if any."""
        if self._item is None:
            return None

        self._position = self._snap(x, y)
        self._active_zone = find_drop_zone(*self._position, self._zones, self.threshold)
        return self._active_zone

    def end_drag(
        self, x: float | None = None, y: float | None = None
    ) -> AddComponent | MoveComponent | None:
        """Finish the gesture.

        Args:
            x: Final pointer x. If omitted, uses the last active zone.
            y: Final pointer y.

        Returns:
            The action to dispatch, or None when nothing should change.
        """
        item = self._item
        if item is None:
            return None

        if x is not None and y is not None:
            zone = find_drop_zone(*self._snap(x, y), self._zones, self.threshold)
        else:
            zone = self._active_zone
        self.cancel()

        if zone is None:
            logger.debug("Drag of '%s' ended outside any drop zone", item.type)
            return None
        if not can_drop(item, zone, self._components):
            logger.debug("Drop of '%s' into %s rejected", item.type, zone.id)
            return None

        if item.is_new:
            self._pending_drop = (item.type, zone)
            return AddComponent(type=item.type, parent_id=zone.parent_id, index=zone.index)

        index = zone.index
        source_parent = item.parent_id or ROOT_ID
        if (
            source_parent == zone.parent_id
            and item.source_index is not None
            and item.source_index < zone.index
        ):
            index -= 1
        return MoveComponent(id=item.id, new_parent_id=zone.parent_id, new_index=index)

    def cancel(self) -> None:
        """Abandon the gesture without producing an action."""
        self._item = None
        self._active_zone = None

    def commit_drop(
        self, components: Sequence[ComponentNode], node_id: str | None
    ) -> DropZone | None:
        """Adopt the tree committed after a drop.

        A freshly dropped node that accepts children gets an empty-container
        zone at index 0 straight away, borrowing the rect of the zone it was
        dropped on until the next ``register_drop_zones``.

        Args:
            components: The forest after the drop's action was applied.
            node_id: Id of the node the drop created.

        Returns:
            The granted zone, or None if no zone was added.
        """
        self._components = list(components)
        pending, self._pending_drop = self._pending_drop, None
        if pending is None or node_id is None:
            return None

        item_type, target = pending
        node = find_node(components, node_id)
        if node is None or node.type != item_type or node.children:
            return None
        definition = get_definition(node.type)
        if definition is None or not definition.accepts_children:
            return None
        if any(zone.parent_id == node_id for zone in self._zones):
            return None

        granted = _zone(node_id, 0, target.rect)
        self._zones.append(granted)
        logger.debug("Granted empty-container zone %s", granted.id)
        return granted

    def on_state_change(self, state: BuilderState) -> None:
        """Store listener: ``store.subscribe(controller.on_state_change)``.

        The add reducer selects the node it creates, so the selection names
        the node produced by a pending drop.
        """
        if self._pending_drop is None:
            self._components = list(state.components)
            return
        self.commit_drop(state.components, state.selected_id)


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
