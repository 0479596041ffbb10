"""Builder state store - reducer, actions and undo/redo history.

Example usage:
    >>> from visual_builder.store import AddComponent, BuilderStore, Undo
    >>> store = BuilderStore()
    >>> store.dispatch(AddComponent(type="container"))
    >>> store.dispatch(Undo())
"""

from .lib import (
    AddComponent,
    BuilderAction,
    BuilderSettings,
    BuilderState,
    BuilderStore,
    ClearCanvas,
    ClearSelection,
    DeleteComponent,
    DuplicateComponent,
    EndDrag,
    History,
    HoverComponent,
    ImportComponents,
    LoadTemplate,
    MoveComponent,
    Redo,
    SelectComponent,
    StartDrag,
    Undo,
    UpdateComponent,
    UpdateDropZones,
    UpdateSettings,
    builder_reducer,
    create_initial_state,
    insert_node,
    remove_node,
    update_node,
)

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
