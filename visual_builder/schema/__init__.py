"""Schema module - the component registry.

This module provides:
- Component type definitions with default props and editable-property schema
- Child-acceptance rules used by the tree reducer and drop resolver
- Prop validation for the property-editing boundary

Example usage:
    >>> from visual_builder.schema import get_definition, can_accept_child
    >>> get_definition("heading").default_props["level"]
    2
    >>> can_accept_child("card", "button")
    True
"""

from .lib import (
    COMPONENT_REGISTRY,
    ComponentCategory,
    ComponentDefinition,
    PropDescriptor,
    PropKind,
    PropOption,
    PropValidationError,
    can_accept_child,
    get_categories,
    get_default_props,
    get_definition,
    list_by_category,
    list_component_types,
    validate_props,
    visible_props,
)

__all__ = [
    # Enums
    "ComponentCategory",
    "PropKind",
    # Definitions
    "PropOption",
    "PropDescriptor",
    "ComponentDefinition",
    "COMPONENT_REGISTRY",
    # Lookup functions
    "get_definition",
    "can_accept_child",
    "list_by_category",
    "get_categories",
    "list_component_types",
    "get_default_props",
    "visible_props",
    # Validation
    "PropValidationError",
    "validate_props",
]
