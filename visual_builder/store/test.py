"""Tests for the builder reducer, history and store.

Tests cover:
- Structural actions (add, update, delete, move, duplicate)
- Rejected actions returning the identical state
- Bounded undo/redo history
- UI-only actions and settings
- BuilderStore dispatch and subscriptions
"""

import pytest

from visual_builder.mid import (
    ROOT_ID,
    ComponentNode,
    collect_ids,
    count_descendants,
    find_node,
    find_parent_id,
    iter_nodes,
)
from visual_builder.schema import get_definition, list_component_types

from .lib import (
    AddComponent,
    BuilderStore,
    ClearCanvas,
    ClearSelection,
    DeleteComponent,
    DuplicateComponent,
    EndDrag,
    HoverComponent,
    ImportComponents,
    LoadTemplate,
    MoveComponent,
    Redo,
    SelectComponent,
    StartDrag,
    Undo,
    UpdateComponent,
    UpdateSettings,
    builder_reducer,
    create_initial_state,
    insert_node,
    remove_node,
)

LEAF_TYPES = [t for t in list_component_types() if not get_definition(t).accepts_children]


def child_ids(components, parent_id):
    if parent_id == ROOT_ID:
        return [n.id for n in components]
    return [n.id for n in find_node(components, parent_id).children]


# =============================================================================
# Initial state
# =============================================================================


class TestInitialState:
    """Tests for create_initial_state."""

    @pytest.mark.unit
    def test_empty_defaults(self):
        """Fresh state has no components and an empty history."""
        state = create_initial_state()
        assert state.components == []
        assert state.selected_id is None
        assert state.history.past == ()
        assert state.history.limit == 50
        assert state.settings.framework == "react"
        assert state.settings.grid_size == 8

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        """Settings and history limit come from the environment."""
        monkeypatch.setenv("BUILDER_FRAMEWORK", "svelte")
        monkeypatch.setenv("BUILDER_HISTORY_LIMIT", "5")
        state = create_initial_state()
        assert state.settings.framework == "svelte"
        assert state.history.limit == 5

    @pytest.mark.unit
    def test_initial_components_are_present(self, sample_tree):
        """Initial forest becomes the history present."""
        state = create_initial_state(sample_tree)
        assert state.history.present is state.components


# =============================================================================
# Tree edit helpers
# =============================================================================


class TestTreeEdits:
    """Tests for the pure insert/remove helpers."""

    @pytest.mark.unit
    def test_insert_does_not_mutate(self, sample_tree):
        """Inserting returns a new forest and leaves the input alone."""
        node = ComponentNode(id="new", type="text")
        forest = insert_node(sample_tree, node, "row", 0)
        assert child_ids(forest, "row") == ["new", "ok", "cancel"]
        assert child_ids(sample_tree, "row") == ["ok", "cancel"]

    @pytest.mark.unit
    def test_insert_unknown_parent(self, sample_tree):
        """Missing parent yields None."""
        node = ComponentNode(id="new", type="text")
        assert insert_node(sample_tree, node, "missing") is None

    @pytest.mark.unit
    def test_untouched_subtrees_are_shared(self, sample_tree):
        """Edits only copy the path to the changed node."""
        forest, removed = remove_node(sample_tree, "ok")
        assert removed.id == "ok"
        assert forest[1] is sample_tree[1]
        assert forest[0].children[0] is sample_tree[0].children[0]


# =============================================================================
# Add
# =============================================================================


class TestAddComponent:
    """Tests for AddComponent."""

    @pytest.mark.unit
    def test_add_same_type_twice(self):
        """Two adds give identical props and distinct ids."""
        state = create_initial_state()
        state = builder_reducer(state, AddComponent(type="button"))
        state = builder_reducer(state, AddComponent(type="button"))
        first, second = state.components
        assert first.props == second.props
        assert first.id != second.id

    @pytest.mark.unit
    def test_add_selects_new_node(self):
        """The added node becomes the selection."""
        state = builder_reducer(create_initial_state(), AddComponent(type="heading"))
        assert state.selected_id == state.components[0].id

    @pytest.mark.unit
    def test_add_into_container(self, sample_tree):
        """Adding with a parent id inserts at the given index."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, AddComponent(type="text", parent_id="row", index=1))
        ids = child_ids(state.components, "row")
        assert ids[0] == "ok" and ids[2] == "cancel"
        assert find_node(state.components, ids[1]).type == "text"

    @pytest.mark.unit
    def test_add_index_is_clamped(self, sample_tree):
        """Out-of-range indexes are clamped to the sibling list."""
        state = create_initial_state(sample_tree)
        after = builder_reducer(state, AddComponent(type="text", index=99))
        assert len(after.components) == 3
        assert after.components[-1].type == "text"
        before = builder_reducer(state, AddComponent(type="text", index=-5))
        assert before.components[0].type == "text"

    @pytest.mark.unit
    def test_add_unknown_type_is_noop(self):
        """Unknown types leave the state object untouched."""
        state = create_initial_state()
        assert builder_reducer(state, AddComponent(type="hologram")) is state

    @pytest.mark.unit
    def test_add_unknown_parent_is_noop(self, sample_tree):
        """Missing parents leave the state object untouched."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, AddComponent(type="text", parent_id="missing")) is state

    @pytest.mark.unit
    @pytest.mark.parametrize("leaf_type", LEAF_TYPES)
    @pytest.mark.parametrize("child_type", list_component_types())
    def test_non_accepting_parent_never_gains_child(self, leaf_type, child_type):
        """No add or move can place a child under a leaf type."""
        leaf = ComponentNode(id="leaf", type=leaf_type)
        mover = ComponentNode(id="mover", type=child_type)
        state = create_initial_state([leaf, mover])
        assert builder_reducer(state, AddComponent(type=child_type, parent_id="leaf")) is state
        assert builder_reducer(state, MoveComponent(id="mover", new_parent_id="leaf")) is state

    @pytest.mark.unit
    def test_card_only_accepts_listed_children(self):
        """Card takes buttons but not inputs."""
        state = builder_reducer(create_initial_state(), AddComponent(type="card"))
        card_id = state.components[0].id
        assert builder_reducer(state, AddComponent(type="input", parent_id=card_id)) is state
        state = builder_reducer(state, AddComponent(type="button", parent_id=card_id))
        assert state.components[0].children[0].type == "button"


# =============================================================================
# Update / Delete
# =============================================================================


class TestUpdateComponent:
    """Tests for UpdateComponent."""

    @pytest.mark.unit
    def test_shallow_merge(self, sample_tree):
        """Given props override, others are kept."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, UpdateComponent(id="ok", props={"text": "Go"}))
        node = find_node(state.components, "ok")
        assert node.props == {"text": "Go", "variant": "primary"}
        assert node.name == "OK"

    @pytest.mark.unit
    def test_rename(self, sample_tree):
        """Name is changed only when given."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, UpdateComponent(id="ok", name="Submit"))
        assert find_node(state.components, "ok").name == "Submit"

    @pytest.mark.unit
    def test_original_tree_untouched(self, sample_tree):
        """Updating never mutates the previous tree."""
        state = create_initial_state(sample_tree)
        builder_reducer(state, UpdateComponent(id="ok", props={"text": "Go"}))
        assert find_node(sample_tree, "ok").props["text"] == "OK"

    @pytest.mark.unit
    def test_unknown_id_is_noop(self, sample_tree):
        """Unknown ids leave the state object untouched."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, UpdateComponent(id="missing", props={"a": 1})) is state


class TestDeleteComponent:
    """Tests for DeleteComponent."""

    @pytest.mark.unit
    def test_removes_subtree(self, sample_tree):
        """Deleting a container removes its descendants too."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, DeleteComponent(id="row"))
        ids = collect_ids(state.components)
        assert "row" not in ids
        assert "ok" not in ids
        assert "cancel" not in ids

    @pytest.mark.unit
    def test_clears_selection_inside_subtree(self, sample_tree):
        """Selection and hover pointing into the subtree are cleared."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, SelectComponent(id="ok"))
        state = builder_reducer(state, HoverComponent(id="cancel"))
        state = builder_reducer(state, DeleteComponent(id="row"))
        assert state.selected_id is None
        assert state.hovered_id is None

    @pytest.mark.unit
    def test_keeps_unrelated_selection(self, sample_tree):
        """Selection outside the deleted subtree survives."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, SelectComponent(id="footer"))
        state = builder_reducer(state, DeleteComponent(id="row"))
        assert state.selected_id == "footer"

    @pytest.mark.unit
    def test_unknown_id_is_noop(self, sample_tree):
        """Unknown ids leave the state object untouched."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, DeleteComponent(id="missing")) is state


# =============================================================================
# Move
# =============================================================================


class TestMoveComponent:
    """Tests for MoveComponent."""

    @pytest.mark.unit
    def test_move_to_other_parent(self, sample_tree):
        """Node is detached and reinserted under the new parent."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, MoveComponent(id="ok", new_parent_id="page", new_index=0))
        assert child_ids(state.components, "page") == ["ok", "title", "row"]
        assert child_ids(state.components, "row") == ["cancel"]

    @pytest.mark.unit
    def test_index_is_post_detach(self, sample_tree):
        """Same-parent index refers to the list without the moved node."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, MoveComponent(id="ok", new_parent_id="row", new_index=1))
        assert child_ids(state.components, "row") == ["cancel", "ok"]

    @pytest.mark.unit
    def test_move_to_root(self, sample_tree):
        """A None parent moves the node to the top level."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, MoveComponent(id="title", new_parent_id=None))
        assert child_ids(state.components, ROOT_ID) == ["page", "footer", "title"]
        assert find_parent_id(state.components, "title") == ROOT_ID

    @pytest.mark.unit
    def test_move_preserves_subtree(self, sample_tree):
        """Moved containers keep their children."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, MoveComponent(id="row", new_parent_id=ROOT_ID, new_index=0))
        assert child_ids(state.components, ROOT_ID) == ["row", "page", "footer"]
        assert child_ids(state.components, "row") == ["ok", "cancel"]

    @pytest.mark.unit
    def test_move_into_self_rejected(self, sample_tree):
        """A node cannot become its own parent."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, MoveComponent(id="row", new_parent_id="row")) is state

    @pytest.mark.unit
    def test_move_into_descendant_rejected(self, sample_tree):
        """A node cannot move below its own descendants."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, MoveComponent(id="page", new_parent_id="row")) is state

    @pytest.mark.unit
    def test_move_to_unknown_parent_rejected(self, sample_tree):
        """Unknown destination leaves the tree unchanged."""
        state = create_initial_state(sample_tree)
        action = MoveComponent(id="ok", new_parent_id="missing", new_index=0)
        assert builder_reducer(state, action) is state

    @pytest.mark.unit
    def test_move_into_leaf_rejected(self, sample_tree):
        """Destinations that do not accept the type are rejected."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, MoveComponent(id="title", new_parent_id="footer")) is state

    @pytest.mark.unit
    def test_move_unknown_id_rejected(self, sample_tree):
        """Unknown ids leave the state object untouched."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, MoveComponent(id="missing", new_parent_id=None)) is state

    @pytest.mark.unit
    def test_node_count_preserved(self, sample_tree):
        """A move never creates or drops nodes."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, MoveComponent(id="cancel", new_parent_id="page"))
        assert sorted(collect_ids(state.components)) == sorted(collect_ids(sample_tree))


# =============================================================================
# Duplicate
# =============================================================================


class TestDuplicateComponent:
    """Tests for DuplicateComponent."""

    @pytest.mark.unit
    def test_duplicate_subtree(self, sample_tree):
        """Clone sits after the original with fresh ids and equal shape."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, DuplicateComponent(id="page"))
        original, clone = state.components[0], state.components[1]
        assert original.id == "page"
        assert clone.name == "Page Copy"
        assert count_descendants(clone) == count_descendants(original)
        assert not set(collect_ids([clone])) & set(collect_ids(sample_tree))
        assert state.selected_id == clone.id

    @pytest.mark.unit
    def test_duplicate_nested(self, sample_tree):
        """Nested duplicates stay among the same siblings."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, DuplicateComponent(id="ok"))
        ids = child_ids(state.components, "row")
        assert len(ids) == 3
        assert ids[0] == "ok" and ids[2] == "cancel"

    @pytest.mark.unit
    def test_all_ids_unique(self, sample_tree):
        """Tree ids stay unique after duplicating."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, DuplicateComponent(id="row"))
        ids = collect_ids(state.components)
        assert len(ids) == len(set(ids))

    @pytest.mark.unit
    def test_unknown_id_is_noop(self, sample_tree):
        """Unknown ids leave the state object untouched."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, DuplicateComponent(id="missing")) is state


# =============================================================================
# History
# =============================================================================


class TestHistory:
    """Tests for undo/redo and the history bound."""

    @pytest.mark.unit
    def test_history_is_bounded(self):
        """Sixty mutations keep at most fifty past snapshots."""
        state = create_initial_state()
        for _ in range(60):
            state = builder_reducer(state, AddComponent(type="text"))
        assert len(state.history.past) <= 50
        assert len(state.components) == 60

    @pytest.mark.unit
    def test_custom_limit(self):
        """History limit can be overridden."""
        state = create_initial_state(history_limit=3)
        for _ in range(10):
            state = builder_reducer(state, AddComponent(type="text"))
        assert len(state.history.past) == 3

    @pytest.mark.unit
    def test_undo_redo_inverse_of_add(self, sample_tree):
        """Undo restores the prior tree and redo restores the add."""
        state = create_initial_state(sample_tree)
        added = builder_reducer(state, AddComponent(type="heading"))
        undone = builder_reducer(added, Undo())
        assert undone.components == state.components
        redone = builder_reducer(undone, Redo())
        assert redone.components == added.components

    @pytest.mark.unit
    def test_undo_clears_stale_selection(self):
        """Selection on a node that no longer exists is cleared."""
        state = builder_reducer(create_initial_state(), AddComponent(type="heading"))
        assert state.selected_id is not None
        state = builder_reducer(state, Undo())
        assert state.selected_id is None

    @pytest.mark.unit
    def test_boundaries_are_noops(self):
        """Undo and redo at the ends of history change nothing."""
        state = create_initial_state()
        assert builder_reducer(state, Undo()) is state
        assert builder_reducer(state, Redo()) is state

    @pytest.mark.unit
    def test_new_mutation_clears_future(self):
        """Committing after undo discards the redo stack."""
        state = builder_reducer(create_initial_state(), AddComponent(type="text"))
        state = builder_reducer(state, Undo())
        assert state.history.can_redo
        state = builder_reducer(state, AddComponent(type="button"))
        assert not state.history.can_redo

    @pytest.mark.unit
    def test_ui_actions_not_historied(self, sample_tree):
        """Selection, hover, drag and settings never touch history."""
        state = create_initial_state(sample_tree)
        history = state.history
        for action in (
            SelectComponent(id="ok"),
            HoverComponent(id="row"),
            ClearSelection(),
            UpdateSettings(changes={"dark_mode": True}),
            EndDrag(),
        ):
            state = builder_reducer(state, action)
        assert state.history is history


# =============================================================================
# UI state and whole-tree actions
# =============================================================================


class TestUiActions:
    """Tests for selection, hover, drag and settings actions."""

    @pytest.mark.unit
    def test_select_unknown_is_noop(self, sample_tree):
        """Selecting a missing node changes nothing."""
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, SelectComponent(id="missing")) is state

    @pytest.mark.unit
    def test_hover_none_clears(self, sample_tree):
        """Hovering None clears the hover state."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, HoverComponent(id="ok"))
        assert state.hovered_id == "ok"
        state = builder_reducer(state, HoverComponent(id=None))
        assert state.hovered_id is None

    @pytest.mark.unit
    def test_drag_lifecycle(self):
        """Start and end drag set and clear the dragged item."""
        from visual_builder.dragdrop import DragItem

        item = DragItem(id="new", type="button", is_new=True)
        state = builder_reducer(create_initial_state(), StartDrag(item=item))
        assert state.dragged_item == item
        state = builder_reducer(state, EndDrag())
        assert state.dragged_item is None

    @pytest.mark.unit
    def test_update_settings(self):
        """Known settings are replaced, unknown keys are ignored."""
        state = create_initial_state()
        state = builder_reducer(state, UpdateSettings(changes={"framework": "vue", "bogus": 1}))
        assert state.settings.framework == "vue"
        assert builder_reducer(state, UpdateSettings(changes={"bogus": 1})) is state


class TestWholeTreeActions:
    """Tests for template loading, import and clearing."""

    @pytest.mark.unit
    def test_load_template(self, sample_tree):
        """Loading replaces the tree, clears selection and is undoable."""
        state = builder_reducer(create_initial_state(), AddComponent(type="text"))
        state = builder_reducer(state, LoadTemplate(components=sample_tree))
        assert state.components == sample_tree
        assert state.selected_id is None
        state = builder_reducer(state, Undo())
        assert state.components[0].type == "text"

    @pytest.mark.unit
    def test_import_components(self, sample_tree):
        """Import replaces the tree."""
        state = builder_reducer(create_initial_state(), ImportComponents(components=sample_tree))
        assert [n.id for n in iter_nodes(state.components)] == [
            n.id for n in iter_nodes(sample_tree)
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize("action_type", [LoadTemplate, ImportComponents])
    def test_replace_refuses_duplicate_ids(self, sample_tree, action_type):
        """A forest with repeated ids leaves the state untouched."""
        clash = ComponentNode(id="ok", type="text", props={"text": "again"})
        state = create_initial_state(sample_tree)
        assert builder_reducer(state, action_type(components=[*sample_tree, clash])) is state

    @pytest.mark.unit
    def test_clear_canvas(self, sample_tree):
        """Clearing empties the tree and is undoable."""
        state = create_initial_state(sample_tree)
        state = builder_reducer(state, SelectComponent(id="ok"))
        state = builder_reducer(state, ClearCanvas())
        assert state.components == []
        assert state.selected_id is None
        state = builder_reducer(state, Undo())
        assert state.components == sample_tree


# =============================================================================
# Store
# =============================================================================


class TestBuilderStore:
    """Tests for the stateful store wrapper."""

    @pytest.mark.unit
    def test_dispatch_updates_state(self):
        """Dispatch runs the reducer."""
        store = BuilderStore()
        store.dispatch(AddComponent(type="heading"))
        assert store.components[0].type == "heading"
        assert store.can_undo
        assert not store.can_redo

    @pytest.mark.unit
    def test_subscribers_notified_on_change(self, sample_store):
        """Listeners see changes but not no-ops."""
        seen = []
        sample_store.subscribe(seen.append)
        sample_store.dispatch(DeleteComponent(id="missing"))
        assert seen == []
        sample_store.dispatch(DeleteComponent(id="footer"))
        assert len(seen) == 1
        assert seen[0] is sample_store.state

    @pytest.mark.unit
    def test_unsubscribe(self, sample_store):
        """Unsubscribed listeners are no longer called."""
        seen = []
        unsubscribe = sample_store.subscribe(seen.append)
        unsubscribe()
        sample_store.dispatch(DeleteComponent(id="footer"))
        assert seen == []

    @pytest.mark.unit
    def test_end_to_end_edit_session(self):
        """Add, update, undo and redo through the store."""
        store = BuilderStore()
        store.dispatch(AddComponent(type="heading"))
        store.dispatch(AddComponent(type="button"))
        heading_id = store.components[0].id
        store.dispatch(UpdateComponent(id=heading_id, props={"text": "Hi"}))
        assert store.components[0].props["text"] == "Hi"
        store.dispatch(Undo())
        assert store.components[0].props["text"] == "Heading"
        store.dispatch(Redo())
        assert store.components[0].props["text"] == "Hi"
