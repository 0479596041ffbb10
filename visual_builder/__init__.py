"""visual-builder: component tree editor and multi-framework code exporter."""

from visual_builder.exporters import (
    ExportError,
    ExportOptions,
    export_components,
    get_renderer,
    import_components,
    list_frameworks,
)
from visual_builder.mid import ComponentNode, create_node, is_valid, validate_tree
from visual_builder.schema import get_definition, list_component_types
from visual_builder.store import BuilderStore, builder_reducer, create_initial_state
from visual_builder.templates import instantiate_template, list_templates

__all__ = [
    # Tree model
    "ComponentNode",
    "create_node",
    "validate_tree",
    "is_valid",
    # Registry
    "get_definition",
    "list_component_types",
    # Editor state
    "BuilderStore",
    "builder_reducer",
    "create_initial_state",
    # Export
    "ExportOptions",
    "ExportError",
    "export_components",
    "import_components",
    "get_renderer",
    "list_frameworks",
    # Templates
    "list_templates",
    "instantiate_template",
]
