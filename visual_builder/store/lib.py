"""Builder state, actions and the tree mutation reducer.

``builder_reducer(state, action)`` is a pure function: it never mutates its
input and returns the *same* state object whenever an action is a no-op
(unknown id, unknown type, rejected move, history boundary). Structural
actions record the previous tree in a bounded linear history.

``BuilderStore`` wraps the reducer for callers that want a mutable handle
with change notification.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Sequence

from visual_builder.config import EnvVar, get_environment, get_history_limit
from visual_builder.mid import (
    ROOT_ID,
    ComponentNode,
    clone_subtree,
    collect_ids,
    contains_node,
    create_node,
    find_node,
    find_parent_id,
)
from visual_builder.schema import can_accept_child

if TYPE_CHECKING:
    from visual_builder.dragdrop import DragItem, DropZone

logger = logging.getLogger(__name__)

Forest = list[ComponentNode]


# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class History:
    """Linear undo/redo history of whole-tree snapshots.

    Attributes:
        past: Older snapshots, oldest first (at most ``limit`` entries).
        present: The latest committed tree.
        future: Undone snapshots, next redo first.
        limit: Maximum number of past snapshots kept.
    """

    past: tuple[Forest, ...] = ()
    present: Forest = field(default_factory=list)
    future: tuple[Forest, ...] = ()
    limit: int = 50

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def push(self, components: Forest) -> History:
        """Commit a new tree, dropping the oldest entries beyond the limit."""
        past = (*self.past, self.present)[-self.limit :]
        return replace(self, past=past, present=components, future=())


@dataclass(frozen=True)
class BuilderSettings:
    """Editor preferences (not historied)."""

    framework: str = "react"
    styling: str = "tailwind"
    device_preview: str = "desktop"
    show_grid: bool = True
    grid_size: int = 8
    snap_to_grid: bool = True
    auto_save: bool = True
    dark_mode: bool = False


@dataclass(frozen=True)
class BuilderState:
    """Complete state of one builder session."""

    components: Forest = field(default_factory=list)
    selected_id: str | None = None
    hovered_id: str | None = None
    dragged_item: DragItem | None = None
    drop_zones: tuple[DropZone, ...] = ()
    history: History = field(default_factory=History)
    settings: BuilderSettings = field(default_factory=BuilderSettings)


def create_initial_state(
    components: Sequence[ComponentNode] | None = None,
    history_limit: int | None = None,
) -> BuilderState:
    """Create a fresh builder state using configured defaults.

    Args:
        components: Optional initial forest (becomes the history present).
        history_limit: Optional override for the undo cap.

    Returns:
        A new BuilderState.
    """
    forest = list(components or [])
    settings = BuilderSettings(
        framework=get_environment(EnvVar.BUILDER_FRAMEWORK),
        styling=get_environment(EnvVar.BUILDER_STYLING),
        grid_size=get_environment(EnvVar.BUILDER_GRID_SIZE),
        snap_to_grid=get_environment(EnvVar.BUILDER_SNAP_TO_GRID),
    )
    return BuilderState(
        components=forest,
        history=History(present=forest, limit=get_history_limit(history_limit)),
        settings=settings,
    )


# =============================================================================
# Actions
# =============================================================================


@dataclass(frozen=True)
class AddComponent:
    """Insert a new node of ``type`` under ``parent_id`` (None/"root" = top)."""

    type: str
    parent_id: str | None = None
    index: int | None = None


@dataclass(frozen=True)
class UpdateComponent:
    """Shallow-merge ``props`` into a node, optionally renaming it."""

    id: str
    props: dict[str, Any] = field(default_factory=dict)
    name: str | None = None


@dataclass(frozen=True)
class DeleteComponent:
    id: str


@dataclass(frozen=True)
class MoveComponent:
    """Detach a subtree and reinsert it at ``new_index`` under ``new_parent_id``.

    ``new_index`` refers to the destination sibling list *after* the node has
    been detached.
    """

    id: str
    new_parent_id: str | None
    new_index: int | None = None


@dataclass(frozen=True)
class DuplicateComponent:
    id: str


@dataclass(frozen=True)
class SelectComponent:
    id: str


@dataclass(frozen=True)
class ClearSelection:
    pass


@dataclass(frozen=True)
class HoverComponent:
    id: str | None


@dataclass(frozen=True)
class StartDrag:
    item: DragItem


@dataclass(frozen=True)
class EndDrag:
    pass


@dataclass(frozen=True)
class UpdateDropZones:
    zones: tuple[DropZone, ...]


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class UpdateSettings:
    changes: dict[str, Any]


@dataclass(frozen=True)
class LoadTemplate:
    components: Forest


@dataclass(frozen=True)
class ImportComponents:
    components: Forest


@dataclass(frozen=True)
class ClearCanvas:
    pass


BuilderAction = (
    AddComponent
    | UpdateComponent
    | DeleteComponent
    | MoveComponent
    | DuplicateComponent
    | SelectComponent
    | ClearSelection
    | HoverComponent
    | StartDrag
    | EndDrag
    | UpdateDropZones
    | Undo
    | Redo
    | UpdateSettings
    | LoadTemplate
    | ImportComponents
    | ClearCanvas
)


# =============================================================================
# Pure tree edits
# =============================================================================


def _is_root(parent_id: str | None) -> bool:
    return parent_id is None or parent_id == ROOT_ID


def _clamp(index: int | None, length: int) -> int:
    if index is None:
        return length
    return max(0, min(index, length))


def insert_node(
    components: Sequence[ComponentNode],
    node: ComponentNode,
    parent_id: str | None,
    index: int | None = None,
) -> Forest | None:
    """Return a new forest with ``node`` inserted, or None if the parent is missing."""
    if _is_root(parent_id):
        forest = list(components)
        forest.insert(_clamp(index, len(forest)), node)
        return forest

    inserted = False

    def visit(nodes: Sequence[ComponentNode]) -> Forest:
        nonlocal inserted
        result: Forest = []
        for current in nodes:
            if current.id == parent_id:
                children = list(current.children)
                children.insert(_clamp(index, len(children)), node)
                current = current.model_copy(update={"children": children})
                inserted = True
            elif current.children and not inserted:
                current = current.model_copy(update={"children": visit(current.children)})
            result.append(current)
        return result

    forest = visit(components)
    return forest if inserted else None


def remove_node(
    components: Sequence[ComponentNode], node_id: str
) -> tuple[Forest, ComponentNode | None]:
    """Return a new forest without ``node_id`` and the detached subtree."""
    removed: ComponentNode | None = None

    def visit(nodes: Sequence[ComponentNode]) -> Forest:
        nonlocal removed
        result: Forest = []
        for current in nodes:
            if removed is None and current.id == node_id:
                removed = current
                continue
            if current.children and removed is None:
                children = visit(current.children)
                if removed is not None:
                    current = current.model_copy(update={"children": children})
            result.append(current)
        return result

    forest = visit(components)
    return forest, removed


def update_node(
    components: Sequence[ComponentNode],
    node_id: str,
    props: dict[str, Any],
    name: str | None = None,
) -> Forest:
    """Return a new forest with ``props`` merged into the matching node."""
    result: Forest = []
    for current in components:
        if current.id == node_id:
            update: dict[str, Any] = {"props": {**current.props, **props}}
            if name is not None:
                update["name"] = name
            current = current.model_copy(update=update)
        elif current.children:
            current = current.model_copy(
                update={"children": update_node(current.children, node_id, props, name)}
            )
        result.append(current)
    return result


def _parent_type(components: Sequence[ComponentNode], parent_id: str | None) -> str | None:
    if _is_root(parent_id):
        return None
    parent = find_node(components, parent_id)
    return None if parent is None else parent.type


# =============================================================================
# Reducer
# =============================================================================


def _commit(state: BuilderState, components: Forest, **changes: Any) -> BuilderState:
    """Apply a structural change and record it in history."""
    return replace(
        state,
        components=components,
        history=state.history.push(components),
        **changes,
    )


def _reduce_add(state: BuilderState, action: AddComponent) -> BuilderState:
    node = create_node(action.type)
    if node is None:
        logger.debug("Ignoring add of unknown component type %r", action.type)
        return state

    if not _is_root(action.parent_id):
        parent_type = _parent_type(state.components, action.parent_id)
        if parent_type is None:
            logger.debug("Ignoring add under unknown parent %r", action.parent_id)
            return state
        if not can_accept_child(parent_type, action.type):
            logger.debug("'%s' does not accept '%s' children", parent_type, action.type)
            return state

    forest = insert_node(state.components, node, action.parent_id, action.index)
    if forest is None:
        return state
    return _commit(state, forest, selected_id=node.id)


def _reduce_update(state: BuilderState, action: UpdateComponent) -> BuilderState:
    if find_node(state.components, action.id) is None:
        logger.debug("Ignoring update of unknown component %r", action.id)
        return state
    forest = update_node(state.components, action.id, action.props, action.name)
    return _commit(state, forest)


def _reduce_delete(state: BuilderState, action: DeleteComponent) -> BuilderState:
    forest, removed = remove_node(state.components, action.id)
    if removed is None:
        logger.debug("Ignoring delete of unknown component %r", action.id)
        return state

    def survives(node_id: str | None) -> str | None:
        if node_id is not None and contains_node(removed, node_id):
            return None
        return node_id

    return _commit(
        state,
        forest,
        selected_id=survives(state.selected_id),
        hovered_id=survives(state.hovered_id),
    )


def _reduce_move(state: BuilderState, action: MoveComponent) -> BuilderState:
    node = find_node(state.components, action.id)
    if node is None:
        logger.debug("Ignoring move of unknown component %r", action.id)
        return state

    if not _is_root(action.new_parent_id):
        if contains_node(node, action.new_parent_id):
            logger.debug("Refusing to move %r into its own subtree", action.id)
            return state
        parent_type = _parent_type(state.components, action.new_parent_id)
        if parent_type is None:
            logger.debug("Rejecting move to unknown parent %r", action.new_parent_id)
            return state
        if not can_accept_child(parent_type, node.type):
            logger.debug("'%s' does not accept '%s' children", parent_type, node.type)
            return state

    detached, removed = remove_node(state.components, action.id)
    forest = insert_node(detached, removed, action.new_parent_id, action.new_index)
    if forest is None:
        return state
    return _commit(state, forest)


def _reduce_duplicate(state: BuilderState, action: DuplicateComponent) -> BuilderState:
    node = find_node(state.components, action.id)
    if node is None:
        logger.debug("Ignoring duplicate of unknown component %r", action.id)
        return state

    parent_id = find_parent_id(state.components, action.id)
    siblings = (
        state.components if _is_root(parent_id) else find_node(state.components, parent_id).children
    )
    index = next(i for i, sibling in enumerate(siblings) if sibling.id == action.id) + 1

    duplicate = clone_subtree(node)
    forest = insert_node(state.components, duplicate, parent_id, index)
    return _commit(state, forest, selected_id=duplicate.id)


def _reduce_select(state: BuilderState, action: SelectComponent) -> BuilderState:
    if find_node(state.components, action.id) is None:
        return state
    return replace(state, selected_id=action.id)


def _reduce_hover(state: BuilderState, action: HoverComponent) -> BuilderState:
    if action.id is not None and find_node(state.components, action.id) is None:
        return state
    return replace(state, hovered_id=action.id)


def _restore(state: BuilderState, components: Forest, history: History) -> BuilderState:
    """Swap in a snapshot, dropping selection/hover that no longer resolve."""

    def resolves(node_id: str | None) -> str | None:
        if node_id is None or find_node(components, node_id) is None:
            return None
        return node_id

    return replace(
        state,
        components=components,
        history=history,
        selected_id=resolves(state.selected_id),
        hovered_id=resolves(state.hovered_id),
    )


def _reduce_undo(state: BuilderState, action: Undo) -> BuilderState:
    history = state.history
    if not history.past:
        return state
    previous = history.past[-1]
    return _restore(
        state,
        previous,
        replace(
            history,
            past=history.past[:-1],
            present=previous,
            future=(history.present, *history.future),
        ),
    )


def _reduce_redo(state: BuilderState, action: Redo) -> BuilderState:
    history = state.history
    if not history.future:
        return state
    following = history.future[0]
    return _restore(
        state,
        following,
        replace(
            history,
            past=(*history.past, history.present)[-history.limit :],
            present=following,
            future=history.future[1:],
        ),
    )


def _reduce_settings(state: BuilderState, action: UpdateSettings) -> BuilderState:
    known = {k: v for k, v in action.changes.items() if hasattr(state.settings, k)}
    if not known:
        return state
    return replace(state, settings=replace(state.settings, **known))


def _reduce_replace_tree(
    state: BuilderState, action: LoadTemplate | ImportComponents
) -> BuilderState:
    ids = collect_ids(action.components)
    if len(ids) != len(set(ids)):
        logger.debug("Refusing to load a forest with duplicate ids")
        return state
    return _commit(state, list(action.components), selected_id=None, hovered_id=None)


_REDUCERS: dict[type, Callable[[BuilderState, Any], BuilderState]] = {
    AddComponent: _reduce_add,
    UpdateComponent: _reduce_update,
    DeleteComponent: _reduce_delete,
    MoveComponent: _reduce_move,
    DuplicateComponent: _reduce_duplicate,
    SelectComponent: _reduce_select,
    ClearSelection: lambda state, _: replace(state, selected_id=None),
    HoverComponent: _reduce_hover,
    StartDrag: lambda state, action: replace(state, dragged_item=action.item),
    EndDrag: lambda state, _: replace(state, dragged_item=None),
    UpdateDropZones: lambda state, action: replace(state, drop_zones=tuple(action.zones)),
    Undo: _reduce_undo,
    Redo: _reduce_redo,
    UpdateSettings: _reduce_settings,
    LoadTemplate: _reduce_replace_tree,
    ImportComponents: _reduce_replace_tree,
    ClearCanvas: lambda state, _: _commit(state, [], selected_id=None, hovered_id=None),
}


def builder_reducer(state: BuilderState, action: BuilderAction) -> BuilderState:
    """Apply an action to the builder state.

    Args:
        state: Current state (never mutated).
        action: One of the builder action dataclasses.

    Returns:
        The next state, or ``state`` itself when the action is a no-op.
    """
    handler = _REDUCERS.get(type(action))
    if handler is None:
        logger.debug("Ignoring unknown action %r", action)
        return state
    return handler(state, action)


# =============================================================================
# Store
# =============================================================================


class BuilderStore:
    """Mutable handle around the pure reducer.

    Example:
        >>> store = BuilderStore()
        >>> store.dispatch(AddComponent(type="heading"))
        >>> store.components[0].type
        'heading'

    Args:
        state: Initial state. If None, uses ``create_initial_state()``.
    """

    def __init__(self, state: BuilderState | None = None):
        self._state = state or create_initial_state()
        self._listeners: list[Callable[[BuilderState], None]] = []

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def components(self) -> Forest:
        return self._state.components

    @property
    def can_undo(self) -> bool:
        return self._state.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._state.history.can_redo

    def dispatch(self, action: BuilderAction) -> BuilderState:
        """Run an action through the reducer and notify on change."""
        next_state = builder_reducer(self._state, action)
        if next_state is self._state:
            logger.debug("%s left the state unchanged", type(action).__name__)
            return next_state

        self._state = next_state
        for listener in list(self._listeners):
            listener(next_state)
        return next_state

    def subscribe(self, listener: Callable[[BuilderState], None]) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


__all__ = [
    # State
    "History",
    "BuilderSettings",
    "BuilderState",
    "create_initial_state",
    # Actions
    "AddComponent",
    "UpdateComponent",
    "DeleteComponent",
    "MoveComponent",
    "DuplicateComponent",
    "SelectComponent",
    "ClearSelection",
    "HoverComponent",
    "StartDrag",
    "EndDrag",
    "UpdateDropZones",
    "Undo",
    "Redo",
    "UpdateSettings",
    "LoadTemplate",
    "ImportComponents",
    "ClearCanvas",
    "BuilderAction",
    # Tree edits
    "insert_node",
    "remove_node",
    "update_node",
    # Reducer
    "builder_reducer",
    "BuilderStore",
]
