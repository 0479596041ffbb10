"""Metadata-Intermediate-Definition (MID) layer for the visual builder.

The MID layer is the **Source of Truth** for the builder's component tree.
It defines the structural model (ComponentNode), pure tree queries, the node
factory, and validation rules shared by the reducer, the drop resolver and
the exporters.

Nodes are frozen: every edit produces new node objects, so history
snapshots can share untouched subtrees.

Component type definitions are delegated to the registry (visual_builder.schema).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from visual_builder.schema import (
    can_accept_child,
    get_default_props,
    get_definition,
)

# Parent id used for top-level nodes
ROOT_ID = "root"


def generate_id() -> str:
    """Generate a process-unique node identifier."""
    return uuid4().hex


class Position(BaseModel):
    """Canvas position of a node (presentation state only)."""

    model_config = ConfigDict(frozen=True)

    x: float = 0
    y: float = 0


class Size(BaseModel):
    """Canvas size of a node (presentation state only)."""

    model_config = ConfigDict(frozen=True)

    width: float = 0
    height: float = 0


class ComponentNode(BaseModel):
    """Recursive node definition for the builder's component tree.

    Attributes:
        id: Unique identifier within the tree.
        type: Registry type tag (open vocabulary, unknown tags allowed).
        name: Human-readable label, independent of type.
        props: Open key-value bag of content and style attributes.
        children: Ordered child nodes (rendering order).
        position: Optional canvas position, ignored by exporters.
        size: Optional canvas size, ignored by exporters.
        locked: Optional editor lock flag.
        visible: Optional editor visibility flag.
        selected: Optional editor selection flag.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    id: str = Field(default_factory=generate_id, description="Unique node id")
    type: str = Field(..., description="Component type tag from the registry")
    name: str = Field("", description="Human-readable label")

    # Content
    props: dict[str, Any] = Field(
        default_factory=dict,
        description="Open key-value map of style and content attributes",
    )

    # Structure
    children: list["ComponentNode"] = Field(
        default_factory=list,
        description="Ordered child nodes",
    )

    # Presentation state
    position: Position | None = None
    size: Size | None = None
    locked: bool | None = None
    visible: bool | None = None
    selected: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the node to its persisted JSON shape.

        The five structural fields are always present; presentation
        state is included only when set.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "props": dict(self.props),
            "children": [child.to_dict() for child in self.children],
        }
        if self.position is not None:
            data["position"] = self.position.model_dump()
        if self.size is not None:
            data["size"] = self.size.model_dump()
        for flag in ("locked", "visible", "selected"):
            value = getattr(self, flag)
            if value is not None:
                data[flag] = value
        return data


# =============================================================================
# Node factory
# =============================================================================


def create_node(
    component_type: str,
    name: str | None = None,
    props: dict[str, Any] | None = None,
) -> ComponentNode | None:
    """Create a new node from registry defaults.

    Args:
        component_type: Registry type tag.
        name: Optional label (defaults to the registry display name).
        props: Optional props merged over the registry defaults.

    Returns:
        The new node, or None if the type is not registered.
    """
    definition = get_definition(component_type)
    if definition is None:
        return None

    merged = get_default_props(component_type)
    if props:
        merged.update(props)

    return ComponentNode(
        type=component_type,
        name=name if name is not None else definition.name,
        props=merged,
    )


def clone_subtree(node: ComponentNode, rename: bool = True) -> ComponentNode:
    """Deep-clone a subtree with fresh ids throughout.

    Args:
        node: Root of the subtree to clone.
        rename: Append " Copy" to the clone root's name.

    Returns:
        The cloned subtree.
    """
    return node.model_copy(
        update={
            "id": generate_id(),
            "name": f"{node.name} Copy" if rename else node.name,
            "props": _deep_copy_value(node.props),
            "children": [clone_subtree(child, rename=False) for child in node.children],
        }
    )


def _deep_copy_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _deep_copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_deep_copy_value(v) for v in value]
    return value


def regenerate_ids(components: Sequence[ComponentNode]) -> list[ComponentNode]:
    """Return a copy of a forest with every id replaced by a fresh one."""
    return [clone_subtree(node, rename=False) for node in components]


# =============================================================================
# Tree queries
# =============================================================================


def iter_nodes(components: Sequence[ComponentNode]) -> Iterator[ComponentNode]:
    """Iterate over every node in a forest, depth-first pre-order."""
    for node in components:
        yield node
        yield from iter_nodes(node.children)


def find_node(components: Sequence[ComponentNode], node_id: str) -> ComponentNode | None:
    """Find a node anywhere in the forest by id."""
    for node in iter_nodes(components):
        if node.id == node_id:
            return node
    return None


def find_parent_id(
    components: Sequence[ComponentNode],
    node_id: str,
    parent_id: str = ROOT_ID,
) -> str | None:
    """Find the id of a node's parent.

    Returns:
        The parent id, ROOT_ID for top-level nodes, or None if absent.
    """
    for node in components:
        if node.id == node_id:
            return parent_id
        found = find_parent_id(node.children, node_id, node.id)
        if found is not None:
            return found
    return None


def find_index(components: Sequence[ComponentNode], node_id: str) -> int:
    """Find a node's position among its siblings (-1 if absent)."""
    parent_id = find_parent_id(components, node_id)
    if parent_id is None:
        return -1
    siblings = get_children(components, parent_id)
    if siblings is None:
        return -1
    return next(i for i, node in enumerate(siblings) if node.id == node_id)


def get_children(
    components: Sequence[ComponentNode], parent_id: str | None
) -> list[ComponentNode] | None:
    """Get the child list for a parent id (None/ROOT_ID = top level)."""
    if parent_id is None or parent_id == ROOT_ID:
        return list(components)
    parent = find_node(components, parent_id)
    return None if parent is None else parent.children


def collect_ids(components: Sequence[ComponentNode]) -> list[str]:
    """Collect every id in the forest, depth-first."""
    return [node.id for node in iter_nodes(components)]


def contains_node(node: ComponentNode, node_id: str) -> bool:
    """Check whether ``node_id`` is ``node`` itself or one of its descendants."""
    return find_node([node], node_id) is not None


def count_descendants(node: ComponentNode) -> int:
    """Count every node below ``node`` (excluding itself)."""
    return sum(1 for _ in iter_nodes(node.children))


def build_type_index(components: Sequence[ComponentNode]) -> dict[str, str]:
    """Map every node id in the forest to its type tag."""
    return {node.id: node.type for node in iter_nodes(components)}


# =============================================================================
# Validation
# =============================================================================


@dataclass
class ValidationError:
    """Represents a validation error in a component tree.

    Attributes:
        node_id: ID of the node where the error occurred.
        message: Human-readable error description.
        error_type: Machine-readable error classification.
    """

    node_id: str
    message: str
    error_type: str


def validate_tree(
    components: Sequence[ComponentNode], strict_types: bool = False
) -> list[ValidationError]:
    """Validate a component forest for structural issues.

    Checks for:
    - Duplicate IDs within the forest
    - Children under types that do not accept children
    - Child types missing from a parent's allow-list
    - Unknown component types (only when ``strict_types`` is set, since
      unknown types degrade to a placeholder at render time)

    Args:
        components: Top-level nodes of the forest.
        strict_types: Report unregistered types as errors.

    Returns:
        List of ValidationError objects. Empty list if valid.
    """
    errors: list[ValidationError] = []
    id_counts: dict[str, int] = {}

    for node in iter_nodes(components):
        id_counts[node.id] = id_counts.get(node.id, 0) + 1
        definition = get_definition(node.type)

        if definition is None:
            if strict_types:
                errors.append(
                    ValidationError(
                        node_id=node.id,
                        message=f"Unknown component type '{node.type}'",
                        error_type="unknown_type",
                    )
                )
            continue

        if node.children and not definition.accepts_children:
            errors.append(
                ValidationError(
                    node_id=node.id,
                    message=(
                        f"Component '{node.type}' cannot have children "
                        f"(found {len(node.children)})"
                    ),
                    error_type="constraint_violation",
                )
            )
            continue

        for child in node.children:
            if not can_accept_child(node.type, child.type):
                errors.append(
                    ValidationError(
                        node_id=node.id,
                        message=(
                            f"Component '{node.type}' cannot contain "
                            f"child type '{child.type}'"
                        ),
                        error_type="constraint_violation",
                    )
                )

    for node_id, count in id_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    node_id=node_id,
                    message=f"Duplicate ID '{node_id}' appears {count} times",
                    error_type="duplicate_id",
                )
            )

    return errors


def is_valid(components: Sequence[ComponentNode], strict_types: bool = False) -> bool:
    """Check if a component forest is valid.

    Args:
        components: Top-level nodes of the forest.
        strict_types: Treat unknown component types as invalid.

    Returns:
        True if valid, False if any validation errors exist.
    """
    return not validate_tree(components, strict_types=strict_types)


def export_json_schema() -> dict[str, Any]:
    """Export the ComponentNode JSON Schema.

    Returns:
        JSON Schema dict describing the persisted node shape.
    """
    return ComponentNode.model_json_schema()


__all__ = [
    "ROOT_ID",
    "generate_id",
    # Core model
    "Position",
    "Size",
    "ComponentNode",
    # Factory
    "create_node",
    "clone_subtree",
    "regenerate_ids",
    # Queries
    "iter_nodes",
    "find_node",
    "find_parent_id",
    "find_index",
    "get_children",
    "collect_ids",
    "contains_node",
    "count_descendants",
    "build_type_index",
    # Validation
    "ValidationError",
    "validate_tree",
    "is_valid",
    "export_json_schema",
]
