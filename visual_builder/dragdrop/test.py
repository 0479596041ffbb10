"""Tests for drop-zone geometry and the drag controller."""

import pytest

from visual_builder.mid import ComponentNode, find_node
from visual_builder.store import (
    AddComponent,
    MoveComponent,
    builder_reducer,
    create_initial_state,
)

from .lib import (
    DragController,
    DragItem,
    DropZone,
    Rect,
    StaticLayout,
    can_drop,
    find_drop_zone,
    register_drop_zones,
    snap_to_grid,
)


def point_zone(zone_id: str, x: float, y: float, parent_id: str = "root", index: int = 0):
    return DropZone(id=zone_id, parent_id=parent_id, index=index, rect=Rect(x, y, 0, 0))


class TestRect:
    """Tests for Rect."""

    @pytest.mark.unit
    def test_center(self):
        """Center is the midpoint of the box."""
        assert Rect(10, 20, 100, 40).center == (60, 40)


class TestRegisterDropZones:
    """Tests for register_drop_zones."""

    @pytest.mark.unit
    def test_document_order(self, sample_tree, sample_layout):
        """Zones follow the tree: before each node, then after-last."""
        zones = register_drop_zones(sample_tree, sample_layout)
        assert [z.id for z in zones] == [
            "root-0",
            "page-0",
            "page-1",
            "row-0",
            "row-1",
            "row-2",
            "page-2",
            "root-1",
        ]

    @pytest.mark.unit
    def test_zone_fields(self, sample_tree, sample_layout):
        """Zones carry parent id, index and the measured rect."""
        zones = {z.id: z for z in register_drop_zones(sample_tree, sample_layout)}
        assert zones["row-1"].parent_id == "row"
        assert zones["row-1"].index == 1
        assert zones["row-1"].rect == Rect(120, 60, 100, 40)
        assert zones["row-2"].rect == Rect(0, 60, 400, 80)

    @pytest.mark.unit
    def test_empty_container_single_zone(self):
        """An empty accepting container gets one zone at index 0."""
        box = ComponentNode(id="box", type="container")
        layout = StaticLayout(
            rects={"box": Rect(0, 0, 100, 100)},
            containers={"box": Rect(0, 0, 100, 100)},
        )
        zones = register_drop_zones([box], layout)
        assert [(z.parent_id, z.index) for z in zones] == [("root", 0), ("box", 0)]

    @pytest.mark.unit
    def test_unmeasured_nodes_skipped(self, sample_tree):
        """Nodes without rectangles contribute no zones."""
        assert register_drop_zones(sample_tree, StaticLayout()) == []

    @pytest.mark.unit
    def test_leaf_container_rect_ignored(self):
        """Types that reject children never get inner zones."""
        text = ComponentNode(id="t", type="text")
        layout = StaticLayout(
            rects={"t": Rect(0, 0, 10, 10)},
            containers={"t": Rect(0, 0, 10, 10)},
        )
        assert [z.id for z in register_drop_zones([text], layout)] == ["root-0"]


class TestFindDropZone:
    """Tests for nearest-zone resolution."""

    @pytest.mark.unit
    def test_nearest_within_threshold(self):
        """Pointer near the first zone resolves to it, far away to none."""
        zones = [point_zone("a", 0, 0), point_zone("b", 100, 0)]
        assert find_drop_zone(10, 0, zones, threshold=50).id == "a"
        assert find_drop_zone(200, 0, zones, threshold=50) is None

    @pytest.mark.unit
    def test_threshold_is_strict(self):
        """A zone exactly at the threshold distance does not qualify."""
        zones = [point_zone("a", 0, 0)]
        assert find_drop_zone(50, 0, zones, threshold=50) is None
        assert find_drop_zone(49, 0, zones, threshold=50).id == "a"

    @pytest.mark.unit
    def test_tie_keeps_first_registered(self):
        """Equal distances resolve to the earlier zone."""
        zones = [point_zone("a", 0, 0), point_zone("b", 0, 0)]
        assert find_drop_zone(5, 5, zones).id == "a"

    @pytest.mark.unit
    def test_empty_zones(self):
        """No zones resolves to None."""
        assert find_drop_zone(0, 0, []) is None


class TestCanDrop:
    """Tests for drop acceptance."""

    @pytest.mark.unit
    def test_root_always_accepts(self, sample_tree):
        """Top-level zones accept any item."""
        item = DragItem(id="new", type="heading", is_new=True)
        assert can_drop(item, point_zone("root-0", 0, 0), sample_tree)

    @pytest.mark.unit
    def test_container_accepts(self, sample_tree):
        """Containers accept new components."""
        item = DragItem(id="new", type="heading", is_new=True)
        assert can_drop(item, point_zone("row-0", 0, 0, parent_id="row"), sample_tree)

    @pytest.mark.unit
    def test_self_drop_rejected(self, sample_tree):
        """A node cannot be dropped into itself."""
        item = DragItem(id="row", type="container", is_new=False)
        assert not can_drop(item, point_zone("row-0", 0, 0, parent_id="row"), sample_tree)

    @pytest.mark.unit
    def test_descendant_drop_rejected(self, sample_tree):
        """A node cannot be dropped below its own descendants."""
        item = DragItem(id="page", type="container", is_new=False, source_index=0)
        assert not can_drop(item, point_zone("row-0", 0, 0, parent_id="row"), sample_tree)

    @pytest.mark.unit
    def test_parent_type_checked(self, sample_tree):
        """The parent's type, not its id, decides acceptance."""
        item = DragItem(id="new", type="heading", is_new=True)
        zone = point_zone("footer-0", 0, 0, parent_id="footer")
        assert not can_drop(item, zone, sample_tree)

    @pytest.mark.unit
    def test_unknown_parent_rejected(self, sample_tree):
        """Zones pointing at missing nodes are rejected."""
        item = DragItem(id="new", type="heading", is_new=True)
        assert not can_drop(item, point_zone("x-0", 0, 0, parent_id="missing"), sample_tree)


class TestSnapToGrid:
    """Tests for snap_to_grid."""

    @pytest.mark.unit
    def test_rounds_to_nearest(self):
        """Coordinates round to the nearest grid line, halves up."""
        assert snap_to_grid(13, 4, 8) == (16, 8)
        assert snap_to_grid(11, 3, 8) == (8, 0)

    @pytest.mark.unit
    def test_zero_grid(self):
        """A zero grid leaves the point untouched."""
        assert snap_to_grid(13, 4, 0) == (13, 4)


class TestDragController:
    """Tests for DragController gestures."""

    @pytest.fixture
    def controller(self, sample_tree, sample_layout):
        controller = DragController(threshold=50, snap_to_grid=False)
        controller.register_drop_zones(sample_tree, sample_layout)
        return controller

    @pytest.mark.unit
    def test_defaults_from_config(self):
        """Unset options fall back to configuration."""
        controller = DragController()
        assert controller.threshold == 50
        assert controller.snap_to_grid is True
        assert controller.grid_size == 8

    @pytest.mark.unit
    def test_new_item_produces_add(self, controller):
        """Dropping a palette item yields AddComponent."""
        controller.start_drag(DragItem(id="palette", type="button", is_new=True), 0, 0)
        zone = controller.update_drag_position(50, 80)
        assert zone.id == "row-0"
        assert controller.active_zone is zone
        action = controller.end_drag()
        assert action == AddComponent(type="button", parent_id="row", index=0)
        assert not controller.is_dragging

    @pytest.mark.unit
    def test_same_parent_move_shifts_index(self, controller, sample_tree):
        """Moving forward among siblings accounts for the detach."""
        item = DragItem(id="ok", type="button", is_new=False, source_index=0, parent_id="row")
        controller.start_drag(item, 50, 80)
        action = controller.end_drag(200, 100)
        assert action == MoveComponent(id="ok", new_parent_id="row", new_index=1)

        state = builder_reducer(create_initial_state(sample_tree), action)
        assert [n.id for n in find_node(state.components, "row").children] == ["cancel", "ok"]

    @pytest.mark.unit
    def test_backward_move_keeps_index(self, controller):
        """Moving backward among siblings uses the zone index as is."""
        item = DragItem(id="footer", type="text", is_new=False, source_index=1)
        controller.start_drag(item, 200, 340)
        action = controller.end_drag(200, 150)
        assert action == MoveComponent(id="footer", new_parent_id="root", new_index=0)

    @pytest.mark.unit
    def test_invalid_drop_returns_none(self, controller):
        """Dropping into a descendant produces no action."""
        item = DragItem(id="page", type="container", is_new=False, source_index=0)
        controller.start_drag(item, 200, 150)
        assert controller.end_drag(50, 80) is None

    @pytest.mark.unit
    def test_drop_outside_zones(self, controller):
        """Dropping far from every zone produces no action."""
        controller.start_drag(DragItem(id="p", type="text", is_new=True), 0, 0)
        assert controller.end_drag(1000, 1000) is None
        assert not controller.is_dragging

    @pytest.mark.unit
    def test_end_without_drag(self, controller):
        """Ending with no active gesture is a no-op."""
        assert controller.end_drag(50, 80) is None

    @pytest.mark.unit
    def test_cancel(self, controller):
        """Cancel clears the gesture."""
        controller.start_drag(DragItem(id="p", type="text", is_new=True), 0, 0)
        controller.update_drag_position(50, 80)
        controller.cancel()
        assert controller.dragged_item is None
        assert controller.active_zone is None
        assert controller.end_drag() is None

    @pytest.mark.unit
    def test_position_snaps(self, sample_tree, sample_layout):
        """Reported position snaps to the grid."""
        controller = DragController(snap_to_grid=True, grid_size=8)
        controller.register_drop_zones(sample_tree, sample_layout)
        controller.start_drag(DragItem(id="p", type="text", is_new=True), 0, 0)
        zone = controller.update_drag_position(171, 83)
        assert controller.position == (168, 80)
        assert zone.id == "row-1"

    @pytest.mark.unit
    @pytest.mark.parametrize("snap,expected", [(True, "root-0"), (False, None)])
    def test_zone_lookup_uses_snapped_pointer(self, snap, expected):
        """A pointer snapped into the threshold resolves a zone."""
        layout = StaticLayout(rects={"a": Rect(-20, -20, 40, 40)})
        controller = DragController(threshold=50, snap_to_grid=snap, grid_size=16)
        controller.register_drop_zones([ComponentNode(id="a", type="text")], layout)
        controller.start_drag(DragItem(id="p", type="text", is_new=True), 0, 0)
        zone = controller.update_drag_position(52, 0)
        assert (zone.id if zone else None) == expected
        action = controller.end_drag(52, 0)
        assert (action is not None) == snap

    @pytest.mark.unit
    def test_update_without_drag(self, controller):
        """Pointer moves outside a gesture are ignored."""
        assert controller.update_drag_position(50, 80) is None


class TestDroppedContainerZone:
    """Tests for zones granted to freshly dropped containers."""

    @pytest.fixture
    def controller(self, sample_tree, sample_layout):
        controller = DragController(threshold=50, snap_to_grid=False)
        controller.register_drop_zones(sample_tree, sample_layout)
        return controller

    @pytest.mark.unit
    def test_new_container_gets_empty_zone(self, controller, sample_store):
        """A dropped container is a drop target before zones are re-registered."""
        sample_store.subscribe(controller.on_state_change)
        controller.start_drag(DragItem(id="palette", type="container", is_new=True), 0, 0)
        action = controller.end_drag(200, 340)
        assert action == AddComponent(type="container", parent_id="root", index=1)

        sample_store.dispatch(action)
        new_id = sample_store.state.selected_id
        granted = [zone for zone in controller.drop_zones if zone.parent_id == new_id]
        assert len(granted) == 1
        assert granted[0].index == 0
        assert granted[0].rect == Rect(0, 320, 400, 40)

        button = DragItem(id="palette", type="button", is_new=True)
        assert can_drop(button, granted[0], sample_store.components)

    @pytest.mark.unit
    def test_leaf_drop_grants_nothing(self, controller, sample_store):
        """Dropping a type without children leaves the zones unchanged."""
        before = controller.drop_zones
        sample_store.subscribe(controller.on_state_change)
        controller.start_drag(DragItem(id="palette", type="text", is_new=True), 0, 0)
        sample_store.dispatch(controller.end_drag(200, 340))
        assert controller.drop_zones == before

    @pytest.mark.unit
    def test_commit_drop_without_pending_drop(self, controller, sample_tree):
        """Committing a tree with no pending drop grants nothing."""
        assert controller.commit_drop(sample_tree, "page") is None
