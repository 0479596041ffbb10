"""Authoritative component registry for the visual builder.

This module is the single source of truth for what a component *type* means.
It provides:
- Rich component definitions (name, category, icon, default props)
- Editable-property schema used by property panels
- Child-acceptance rules consulted by the tree reducer and drop resolver
- Prop validation for the UI edit boundary

Registry misses never raise: lookups return None (or False for predicates)
so callers can fall back to a generic placeholder node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping


class ComponentCategory(str, Enum):
    """High-level palette groupings."""

    LAYOUT = "Layout"
    TEXT = "Text"
    FORM = "Form"
    MEDIA = "Media"
    DATA_DISPLAY = "Data Display"


class PropKind(str, Enum):
    """Value kinds understood by the property editor."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SELECT = "select"
    MULTISELECT = "multiselect"
    COLOR = "color"
    SPACING = "spacing"
    ICON = "icon"
    IMAGE = "image"
    ACTION = "action"


@dataclass(frozen=True)
class PropOption:
    """A single choice for select-style properties."""

    label: str
    value: Any


@dataclass(frozen=True)
class PropDescriptor:
    """Editable-property descriptor for a component type.

    Attributes:
        name: Key in the node's props bag.
        label: Label shown in the property panel.
        kind: Value kind driving the editor widget and validation.
        default: Default value (None when the prop is optional).
        min: Inclusive lower bound for numbers.
        max: Inclusive upper bound for numbers.
        step: Editor increment for numbers.
        options: Allowed choices for select/multiselect kinds.
        placeholder: Editor placeholder text.
        category: Property panel section.
        condition: Visibility predicate evaluated against sibling props.
    """

    name: str
    label: str
    kind: PropKind
    default: Any = None
    min: float | None = None
    max: float | None = None
    step: float | None = None
    options: tuple[PropOption, ...] = ()
    placeholder: str | None = None
    category: str = "General"
    condition: Callable[[Mapping[str, Any]], bool] | None = field(
        default=None, compare=False
    )

    def is_visible(self, props: Mapping[str, Any]) -> bool:
        """Check whether this property should be shown for the given props."""
        return self.condition is None or bool(self.condition(props))

    def option_values(self) -> tuple[Any, ...]:
        return tuple(option.value for option in self.options)


@dataclass(frozen=True)
class ComponentDefinition:
    """Registry entry describing one component type.

    Attributes:
        type: Tag string stored on ComponentNode.type.
        name: Display name, used as the default node name.
        category: Palette grouping.
        icon: Palette icon glyph.
        description: Short human-readable description.
        default_props: Props assigned to freshly created nodes.
        prop_schema: Ordered editable-property descriptors.
        accepts_children: Whether nodes of this type may hold children.
        child_types: Optional allow-list of child types (None = any).
    """

    type: str
    name: str
    category: ComponentCategory
    icon: str
    description: str
    default_props: Mapping[str, Any] = field(default_factory=dict)
    prop_schema: tuple[PropDescriptor, ...] = ()
    accepts_children: bool = False
    child_types: tuple[str, ...] | None = None

    def get_prop(self, name: str) -> PropDescriptor | None:
        """Look up a property descriptor by name."""
        for descriptor in self.prop_schema:
            if descriptor.name == name:
                return descriptor
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert the definition to a plain dict for listing/export."""
        return {
            "type": self.type,
            "name": self.name,
            "category": self.category.value,
            "icon": self.icon,
            "description": self.description,
            "default_props": _copy_props(self.default_props),
            "props": [
                {
                    "name": d.name,
                    "label": d.label,
                    "kind": d.kind.value,
                    "default": d.default,
                }
                for d in self.prop_schema
            ],
            "accepts_children": self.accepts_children,
            "child_types": list(self.child_types) if self.child_types else None,
        }


def _copy_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a props mapping, duplicating list values so callers can't alias."""
    return {k: list(v) if isinstance(v, list) else v for k, v in props.items()}


def _options(*pairs: tuple[str, Any]) -> tuple[PropOption, ...]:
    return tuple(PropOption(label=label, value=value) for label, value in pairs)


# Shared descriptors
_PADDING = PropDescriptor(
    "padding", "Padding", PropKind.SPACING, "16px", category="Spacing"
)
_GAP = PropDescriptor("gap", "Gap", PropKind.SPACING, "16px", category="Layout")
_COLOR = PropDescriptor("color", "Color", PropKind.COLOR, "#000000", category="Style")
_REQUIRED = PropDescriptor(
    "required", "Required", PropKind.BOOLEAN, False, category="Validation"
)
_DISABLED = PropDescriptor(
    "disabled", "Disabled", PropKind.BOOLEAN, False, category="State"
)
_ALIGNMENT = _options(("Left", "left"), ("Center", "center"), ("Right", "right"))


COMPONENT_REGISTRY: dict[str, ComponentDefinition] = {
    # === LAYOUT ===
    "container": ComponentDefinition(
        type="container",
        name="Container",
        category=ComponentCategory.LAYOUT,
        icon="📦",
        description="A flexible container for grouping components",
        default_props={
            "padding": "16px",
            "margin": "0px",
            "display": "flex",
            "flexDirection": "column",
            "gap": "16px",
            "backgroundColor": "transparent",
            "borderRadius": "0px",
        },
        prop_schema=(
            PropDescriptor(
                "display",
                "Display",
                PropKind.SELECT,
                "flex",
                options=_options(("Flex", "flex"), ("Grid", "grid"), ("Block", "block")),
                category="Layout",
            ),
            PropDescriptor(
                "flexDirection",
                "Direction",
                PropKind.SELECT,
                "column",
                options=_options(("Row", "row"), ("Column", "column")),
                category="Layout",
                condition=lambda props: props.get("display") == "flex",
            ),
            _GAP,
            _PADDING,
            PropDescriptor("margin", "Margin", PropKind.SPACING, "0px", category="Spacing"),
            PropDescriptor(
                "backgroundColor",
                "Background",
                PropKind.COLOR,
                "transparent",
                category="Appearance",
            ),
            PropDescriptor(
                "borderRadius",
                "Border Radius",
                PropKind.SPACING,
                "0px",
                category="Appearance",
            ),
        ),
        accepts_children=True,
    ),
    "grid": ComponentDefinition(
        type="grid",
        name="Grid",
        category=ComponentCategory.LAYOUT,
        icon="⚏",
        description="CSS Grid container for complex layouts",
        default_props={"columns": 3, "rows": "auto", "gap": "16px", "padding": "0px"},
        prop_schema=(
            PropDescriptor(
                "columns", "Columns", PropKind.NUMBER, 3, min=1, max=12, category="Grid"
            ),
            PropDescriptor(
                "rows",
                "Rows",
                PropKind.STRING,
                "auto",
                placeholder="auto, 1fr 2fr, etc.",
                category="Grid",
            ),
            PropDescriptor("gap", "Gap", PropKind.SPACING, "16px", category="Grid"),
            PropDescriptor(
                "padding", "Padding", PropKind.SPACING, "0px", category="Spacing"
            ),
        ),
        accepts_children=True,
    ),
    "divider": ComponentDefinition(
        type="divider",
        name="Divider",
        category=ComponentCategory.LAYOUT,
        icon="➖",
        description="Horizontal divider",
        default_props={"margin": "16px 0", "borderColor": "#e5e7eb", "borderWidth": "1px"},
        prop_schema=(
            PropDescriptor(
                "margin", "Margin", PropKind.SPACING, "16px 0", category="Spacing"
            ),
            PropDescriptor(
                "borderColor", "Color", PropKind.COLOR, "#e5e7eb", category="Style"
            ),
            PropDescriptor("text", "Text (optional)", PropKind.STRING, category="Content"),
        ),
    ),
    "navigation": ComponentDefinition(
        type="navigation",
        name="Navigation",
        category=ComponentCategory.LAYOUT,
        icon="🧭",
        description="Navigation container",
        default_props={"display": "flex", "gap": "24px", "alignItems": "center"},
        prop_schema=(
            PropDescriptor(
                "display",
                "Display",
                PropKind.SELECT,
                "flex",
                options=_options(("Flex", "flex"), ("Block", "block")),
                category="Layout",
            ),
            PropDescriptor("gap", "Gap", PropKind.SPACING, "24px", category="Layout"),
        ),
        accepts_children=True,
    ),
    # === TEXT ===
    "heading": ComponentDefinition(
        type="heading",
        name="Heading",
        category=ComponentCategory.TEXT,
        icon="📝",
        description="Text heading (H1-H6)",
        default_props={
            "text": "Heading",
            "level": 2,
            "color": "#000000",
            "fontSize": "24px",
            "fontWeight": "bold",
            "textAlign": "left",
        },
        prop_schema=(
            PropDescriptor("text", "Text", PropKind.STRING, "Heading", category="Content"),
            PropDescriptor(
                "level",
                "Level",
                PropKind.SELECT,
                2,
                options=_options(*((f"H{n}", n) for n in range(1, 7))),
                category="Content",
            ),
            _COLOR,
            PropDescriptor(
                "fontSize", "Font Size", PropKind.SPACING, "24px", category="Style"
            ),
            PropDescriptor(
                "fontWeight",
                "Font Weight",
                PropKind.SELECT,
                "bold",
                options=_options(("Normal", "normal"), ("Bold", "bold"), ("Light", "300")),
                category="Style",
            ),
            PropDescriptor(
                "textAlign",
                "Alignment",
                PropKind.SELECT,
                "left",
                options=_ALIGNMENT,
                category="Style",
            ),
        ),
    ),
    "text": ComponentDefinition(
        type="text",
        name="Text",
        category=ComponentCategory.TEXT,
        icon="📄",
        description="Paragraph text",
        default_props={
            "text": "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            "color": "#333333",
            "fontSize": "16px",
            "lineHeight": "1.5",
        },
        prop_schema=(
            PropDescriptor(
                "text", "Text", PropKind.STRING, "Lorem ipsum...", category="Content"
            ),
            PropDescriptor("color", "Color", PropKind.COLOR, "#333333", category="Style"),
            PropDescriptor(
                "fontSize", "Font Size", PropKind.SPACING, "16px", category="Style"
            ),
            PropDescriptor(
                "lineHeight",
                "Line Height",
                PropKind.NUMBER,
                1.5,
                min=1,
                max=3,
                step=0.1,
                category="Style",
            ),
        ),
    ),
    "link": ComponentDefinition(
        type="link",
        name="Link",
        category=ComponentCategory.TEXT,
        icon="🔗",
        description="Hyperlink",
        default_props={
            "text": "Click here",
            "href": "#",
            "color": "#3b82f6",
            "textDecoration": "underline",
        },
        prop_schema=(
            PropDescriptor("text", "Text", PropKind.STRING, "Click here", category="Content"),
            PropDescriptor("href", "URL", PropKind.STRING, "#", category="Content"),
            PropDescriptor("color", "Color", PropKind.COLOR, "#3b82f6", category="Style"),
            PropDescriptor(
                "target",
                "Target",
                PropKind.SELECT,
                "_self",
                options=_options(("Same Window", "_self"), ("New Window", "_blank")),
                category="Behavior",
            ),
        ),
    ),
    # === FORM ===
    "button": ComponentDefinition(
        type="button",
        name="Button",
        category=ComponentCategory.FORM,
        icon="🔘",
        description="Interactive button",
        default_props={
            "text": "Click me",
            "variant": "primary",
            "size": "medium",
            "fullWidth": False,
            "disabled": False,
        },
        prop_schema=(
            PropDescriptor("text", "Text", PropKind.STRING, "Click me", category="Content"),
            PropDescriptor(
                "variant",
                "Variant",
                PropKind.SELECT,
                "primary",
                options=_options(
                    ("Primary", "primary"),
                    ("Secondary", "secondary"),
                    ("Outline", "outline"),
                    ("Ghost", "ghost"),
                ),
                category="Appearance",
            ),
            PropDescriptor(
                "size",
                "Size",
                PropKind.SELECT,
                "medium",
                options=_options(("Small", "small"), ("Medium", "medium"), ("Large", "large")),
                category="Appearance",
            ),
            PropDescriptor(
                "fullWidth", "Full Width", PropKind.BOOLEAN, False, category="Layout"
            ),
            _DISABLED,
            PropDescriptor("onClick", "Click Action", PropKind.ACTION, category="Events"),
        ),
    ),
    "input": ComponentDefinition(
        type="input",
        name="Input",
        category=ComponentCategory.FORM,
        icon="📝",
        description="Text input field",
        default_props={
            "placeholder": "Enter text...",
            "label": "Label",
            "type": "text",
            "required": False,
            "disabled": False,
        },
        prop_schema=(
            PropDescriptor("label", "Label", PropKind.STRING, "Label", category="Content"),
            PropDescriptor(
                "placeholder",
                "Placeholder",
                PropKind.STRING,
                "Enter text...",
                category="Content",
            ),
            PropDescriptor(
                "type",
                "Type",
                PropKind.SELECT,
                "text",
                options=_options(
                    ("Text", "text"),
                    ("Email", "email"),
                    ("Password", "password"),
                    ("Number", "number"),
                    ("Tel", "tel"),
                ),
                category="Type",
            ),
            _REQUIRED,
            _DISABLED,
        ),
    ),
    "textarea": ComponentDefinition(
        type="textarea",
        name="Textarea",
        category=ComponentCategory.FORM,
        icon="📝",
        description="Multi-line text input",
        default_props={"placeholder": "Enter text...", "rows": 4, "required": False},
        prop_schema=(
            PropDescriptor("label", "Label", PropKind.STRING, category="Content"),
            PropDescriptor(
                "placeholder",
                "Placeholder",
                PropKind.STRING,
                "Enter text...",
                category="Content",
            ),
            PropDescriptor(
                "rows", "Rows", PropKind.NUMBER, 4, min=2, max=20, category="Size"
            ),
            _REQUIRED,
        ),
    ),
    "form": ComponentDefinition(
        type="form",
        name="Form",
        category=ComponentCategory.FORM,
        icon="📋",
        description="Form container",
        default_props={"display": "flex", "flexDirection": "column", "gap": "16px"},
        prop_schema=(
            PropDescriptor("action", "Action URL", PropKind.STRING, category="Form"),
            PropDescriptor(
                "method",
                "Method",
                PropKind.SELECT,
                "POST",
                options=_options(("GET", "GET"), ("POST", "POST")),
                category="Form",
            ),
            PropDescriptor(
                "gap", "Field Spacing", PropKind.SPACING, "16px", category="Layout"
            ),
        ),
        accepts_children=True,
    ),
    "checkbox": ComponentDefinition(
        type="checkbox",
        name="Checkbox",
        category=ComponentCategory.FORM,
        icon="☑️",
        description="Checkbox input",
        default_props={"label": "Checkbox", "checked": False, "required": False},
        prop_schema=(
            PropDescriptor("label", "Label", PropKind.STRING, "Checkbox", category="Content"),
            PropDescriptor("checked", "Checked", PropKind.BOOLEAN, False, category="State"),
            _REQUIRED,
        ),
    ),
    "select": ComponentDefinition(
        type="select",
        name="Select",
        category=ComponentCategory.FORM,
        icon="📑",
        description="Dropdown select",
        default_props={
            "label": "Select",
            "placeholder": "Choose...",
            "options": ["Option 1", "Option 2", "Option 3"],
            "required": False,
        },
        prop_schema=(
            PropDescriptor("label", "Label", PropKind.STRING, "Select", category="Content"),
            PropDescriptor(
                "placeholder",
                "Placeholder",
                PropKind.STRING,
                "Choose...",
                category="Content",
            ),
            PropDescriptor(
                "options",
                "Options",
                PropKind.MULTISELECT,
                ["Option 1", "Option 2", "Option 3"],
                category="Content",
            ),
            _REQUIRED,
        ),
    ),
    # === MEDIA ===
    "image": ComponentDefinition(
        type="image",
        name="Image",
        category=ComponentCategory.MEDIA,
        icon="🖼️",
        description="Image component",
        default_props={
            "src": "https://via.placeholder.com/300x200",
            "alt": "Placeholder image",
            "width": "100%",
            "height": "auto",
            "objectFit": "cover",
        },
        prop_schema=(
            PropDescriptor(
                "src",
                "Source",
                PropKind.IMAGE,
                "https://via.placeholder.com/300x200",
                category="Content",
            ),
            PropDescriptor(
                "alt", "Alt Text", PropKind.STRING, "Placeholder image", category="Content"
            ),
            PropDescriptor("width", "Width", PropKind.SPACING, "100%", category="Size"),
            PropDescriptor("height", "Height", PropKind.SPACING, "auto", category="Size"),
            PropDescriptor(
                "objectFit",
                "Object Fit",
                PropKind.SELECT,
                "cover",
                options=_options(
                    ("Cover", "cover"),
                    ("Contain", "contain"),
                    ("Fill", "fill"),
                    ("None", "none"),
                ),
                category="Size",
            ),
        ),
    ),
    "icon": ComponentDefinition(
        type="icon",
        name="Icon",
        category=ComponentCategory.MEDIA,
        icon="🎨",
        description="Icon element",
        default_props={"icon": "⭐", "size": "24px", "color": "#000000"},
        prop_schema=(
            PropDescriptor("icon", "Icon", PropKind.ICON, "⭐", category="Content"),
            PropDescriptor("size", "Size", PropKind.SPACING, "24px", category="Size"),
            _COLOR,
        ),
    ),
    # === DATA DISPLAY ===
    "card": ComponentDefinition(
        type="card",
        name="Card",
        category=ComponentCategory.DATA_DISPLAY,
        icon="🗂️",
        description="Content card with header, body, and footer",
        default_props={
            "title": "Card Title",
            "description": "Card description goes here",
            "shadow": True,
            "padding": "16px",
            "borderRadius": "8px",
        },
        prop_schema=(
            PropDescriptor("title", "Title", PropKind.STRING, "Card Title", category="Content"),
            PropDescriptor(
                "description",
                "Description",
                PropKind.STRING,
                "Card description",
                category="Content",
            ),
            PropDescriptor("shadow", "Shadow", PropKind.BOOLEAN, True, category="Appearance"),
            _PADDING,
            PropDescriptor(
                "borderRadius",
                "Border Radius",
                PropKind.SPACING,
                "8px",
                category="Appearance",
            ),
        ),
        accepts_children=True,
        child_types=("button", "text", "image"),
    ),
    "list": ComponentDefinition(
        type="list",
        name="List",
        category=ComponentCategory.DATA_DISPLAY,
        icon="📋",
        description="Ordered or unordered list",
        default_props={
            "items": ["Item 1", "Item 2", "Item 3"],
            "ordered": False,
            "spacing": "8px",
        },
        prop_schema=(
            PropDescriptor(
                "items",
                "Items",
                PropKind.MULTISELECT,
                ["Item 1", "Item 2", "Item 3"],
                category="Content",
            ),
            PropDescriptor("ordered", "Ordered", PropKind.BOOLEAN, False, category="Type"),
            PropDescriptor(
                "spacing", "Item Spacing", PropKind.SPACING, "8px", category="Layout"
            ),
        ),
    ),
    "badge": ComponentDefinition(
        type="badge",
        name="Badge",
        category=ComponentCategory.DATA_DISPLAY,
        icon="🏷️",
        description="Status badge or label",
        default_props={
            "text": "New",
            "backgroundColor": "#e5e7eb",
            "color": "#374151",
            "fontSize": "12px",
            "padding": "2px 8px",
            "borderRadius": "4px",
        },
        prop_schema=(
            PropDescriptor("text", "Text", PropKind.STRING, "New", category="Content"),
            PropDescriptor(
                "backgroundColor", "Background", PropKind.COLOR, "#e5e7eb", category="Style"
            ),
            PropDescriptor(
                "color", "Text Color", PropKind.COLOR, "#374151", category="Style"
            ),
            PropDescriptor(
                "fontSize", "Font Size", PropKind.SPACING, "12px", category="Style"
            ),
        ),
    ),
}


# === LOOKUP ===


def get_definition(component_type: str) -> ComponentDefinition | None:
    """Get the registry definition for a component type.

    Args:
        component_type: Type tag to look up.

    Returns:
        The ComponentDefinition, or None for unknown types.
    """
    return COMPONENT_REGISTRY.get(component_type)


def can_accept_child(parent_type: str, child_type: str) -> bool:
    """Check whether a parent type may hold a child of the given type.

    Unknown parent types, and parents that do not accept children, reject.
    A parent with an empty or missing allow-list accepts any child type.
    """
    parent = get_definition(parent_type)
    if parent is None or not parent.accepts_children:
        return False
    if not parent.child_types:
        return True
    return child_type in parent.child_types


def list_by_category(category: ComponentCategory | str) -> list[ComponentDefinition]:
    """Get all definitions in a palette category, in registry order."""
    value = category.value if isinstance(category, ComponentCategory) else category
    return [d for d in COMPONENT_REGISTRY.values() if d.category.value == value]


def get_categories() -> list[str]:
    """Get the distinct category names, in first-seen registry order."""
    return list(dict.fromkeys(d.category.value for d in COMPONENT_REGISTRY.values()))


def list_component_types() -> list[str]:
    """Get all registered type tags."""
    return list(COMPONENT_REGISTRY)


def get_default_props(component_type: str) -> dict[str, Any]:
    """Get a fresh copy of a type's default props ({} for unknown types)."""
    definition = get_definition(component_type)
    if definition is None:
        return {}
    return _copy_props(definition.default_props)


def visible_props(component_type: str, props: Mapping[str, Any]) -> list[PropDescriptor]:
    """Get the descriptors whose visibility condition holds for ``props``."""
    definition = get_definition(component_type)
    if definition is None:
        return []
    return [d for d in definition.prop_schema if d.is_visible(props)]


# === VALIDATION ===


@dataclass
class PropValidationError:
    """A property value rejected by the registry schema.

    Attributes:
        prop: Name of the offending property.
        message: Human-readable error description.
        value: The rejected value.
    """

    prop: str
    message: str
    value: Any = None


_STRING_KINDS = frozenset(
    {
        PropKind.STRING,
        PropKind.COLOR,
        PropKind.ICON,
        PropKind.IMAGE,
        PropKind.ACTION,
    }
)


def _check_value(descriptor: PropDescriptor, value: Any) -> str | None:
    """Return an error message if ``value`` does not fit ``descriptor``."""
    kind = descriptor.kind

    if kind in _STRING_KINDS:
        if not isinstance(value, str):
            return f"expected a string, got {type(value).__name__}"
        return None

    if kind is PropKind.SPACING:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return f"expected a spacing value, got {type(value).__name__}"
        return None

    if kind is PropKind.BOOLEAN:
        if not isinstance(value, bool):
            return f"expected a boolean, got {type(value).__name__}"
        return None

    if kind is PropKind.NUMBER:
        if isinstance(value, bool):
            return "expected a number, got bool"
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return f"expected a number, got {value!r}"
        if not isinstance(value, (int, float)):
            return f"expected a number, got {type(value).__name__}"
        if descriptor.min is not None and value < descriptor.min:
            return f"{value} is below the minimum {descriptor.min}"
        if descriptor.max is not None and value > descriptor.max:
            return f"{value} is above the maximum {descriptor.max}"
        return None

    if kind is PropKind.SELECT:
        allowed = descriptor.option_values()
        if allowed and value not in allowed:
            return f"{value!r} is not one of {list(allowed)}"
        return None

    if kind is PropKind.MULTISELECT:
        if not isinstance(value, list):
            return f"expected a list, got {type(value).__name__}"
        allowed = descriptor.option_values()
        if allowed:
            unknown = [v for v in value if v not in allowed]
            if unknown:
                return f"{unknown!r} not in {list(allowed)}"
        return None

    return None


def validate_props(
    component_type: str, props: Mapping[str, Any]
) -> list[PropValidationError]:
    """Validate prop values against a type's declared schema.

    Only declared properties are checked. Unknown types and undeclared
    props are accepted.

    Args:
        component_type: Type tag whose schema applies.
        props: Props to check (a partial update is fine).

    Returns:
        List of PropValidationError. Empty if valid.
    """
    definition = get_definition(component_type)
    if definition is None:
        return []

    errors: list[PropValidationError] = []
    for name, value in props.items():
        descriptor = definition.get_prop(name)
        if descriptor is None or value is None:
            continue
        message = _check_value(descriptor, value)
        if message:
            errors.append(
                PropValidationError(prop=name, message=message, value=value)
            )
    return errors


__all__ = [
    "ComponentCategory",
    "PropKind",
    "PropOption",
    "PropDescriptor",
    "ComponentDefinition",
    "COMPONENT_REGISTRY",
    "get_definition",
    "can_accept_child",
    "list_by_category",
    "get_categories",
    "list_component_types",
    "get_default_props",
    "visible_props",
    "PropValidationError",
    "validate_props",
]
