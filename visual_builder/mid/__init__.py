"""MID layer - the builder's component tree model.

This module provides the ComponentNode model, pure tree queries, the node
factory and structural validation. Component type definitions are delegated
to the registry in visual_builder.schema.

Example usage:
    >>> from visual_builder.mid import create_node, validate_tree
    >>> node = create_node("container")
    >>> errors = validate_tree([node])
"""

from .lib import (
    ROOT_ID,
    ComponentNode,
    Position,
    Size,
    ValidationError,
    build_type_index,
    clone_subtree,
    collect_ids,
    contains_node,
    count_descendants,
    create_node,
    export_json_schema,
    find_index,
    find_node,
    find_parent_id,
    generate_id,
    get_children,
    is_valid,
    iter_nodes,
    regenerate_ids,
    validate_tree,
)

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
