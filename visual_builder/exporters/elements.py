"""Framework-neutral markup elements built from component nodes.

Every framework renderer consumes the same Element tree, so the mapping
from component type to HTML tag, attributes and text lives here once.
Unknown component types degrade to a ``div`` carrying a comment marker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from visual_builder.mid import ComponentNode
from visual_builder.schema import get_default_props, get_definition

from .styles import button_classes, props_to_style, props_to_tailwind_classes

logger = logging.getLogger(__name__)


@dataclass
class Element:
    """One markup element (or a bare text/comment line when ``tag`` is None).

    Attributes:
        tag: HTML tag name. None for text and comment nodes.
        attrs: Attributes. Strings render literally, True renders as a
            bare attribute, False/None are omitted and other values are
            rendered as framework bindings.
        classes: Class names.
        style: Inline style declarations (camelCase keys).
        text: Inline text content.
        comment: Comment text (comment nodes only).
        children: Nested elements.
        void: Render as a self-closing tag.
    """

    tag: str | None
    attrs: dict[str, Any] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    style: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    comment: str | None = None
    children: list[Element] = field(default_factory=list)
    void: bool = False


def text_node(text: str) -> Element:
    return Element(tag=None, text=text)


def comment_node(text: str) -> Element:
    return Element(tag=None, comment=text)


def _styled(tag: str, props: dict[str, Any], tailwind: bool, **kwargs: Any) -> Element:
    element = Element(tag=tag, **kwargs)
    if tailwind:
        element.classes = props_to_tailwind_classes(props)
    else:
        element.style = props_to_style(props)
    return element


def _text(props: dict[str, Any], key: str = "text") -> str | None:
    value = props.get(key)
    return None if value is None else str(value)


# =============================================================================
# Per-type builders
# =============================================================================

Builder = Callable[[ComponentNode, dict[str, Any], bool], Element]


def _box(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled("div", props, tailwind)


def _grid(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    columns = props.get("columns") or 1
    element = _styled("div", props, tailwind)
    if tailwind:
        element.classes = ["grid", f"grid-cols-{columns}", *element.classes]
    else:
        element.style = {
            "display": "grid",
            "gridTemplateColumns": f"repeat({columns}, 1fr)",
            **element.style,
        }
    return element


def _card(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    element = _styled("div", props, tailwind)
    if props.get("shadow"):
        if tailwind:
            element.classes.append("shadow-md")
        else:
            element.style["boxShadow"] = "0 4px 6px rgba(0, 0, 0, 0.1)"
    if title := _text(props, "title"):
        element.children.append(Element(tag="h3", text=title))
    if description := _text(props, "description"):
        element.children.append(Element(tag="p", text=description))
    return element


def _heading(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    level = props.get("level") or 2
    try:
        level = min(max(int(level), 1), 6)
    except (TypeError, ValueError):
        level = 2
    return _styled(f"h{level}", props, tailwind, text=_text(props))


def _paragraph(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled("p", props, tailwind, text=_text(props))


def _link(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled("a", props, tailwind, attrs={"href": props.get("href", "#")}, text=_text(props))


def _button(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    element = Element(
        tag="button",
        attrs={"type": "button", "disabled": bool(props.get("disabled"))},
        text=_text(props),
    )
    if tailwind:
        element.classes = button_classes(props)
    else:
        element.style = props_to_style(props)
    return element


def _input(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    field_element = _styled(
        "input",
        props,
        tailwind,
        attrs={
            "type": props.get("type", "text"),
            "placeholder": props.get("placeholder"),
            "required": bool(props.get("required")),
            "disabled": bool(props.get("disabled")),
        },
        void=True,
    )
    label = _text(props, "label")
    if not label:
        return field_element
    return Element(tag="label", children=[text_node(label), field_element])


def _textarea(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled(
        "textarea",
        props,
        tailwind,
        attrs={
            "placeholder": props.get("placeholder"),
            "rows": props.get("rows"),
            "required": bool(props.get("required")),
        },
        text="",
    )


def _form(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled("form", props, tailwind)


def _navigation(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled("nav", props, tailwind)


def _checkbox(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    box = Element(
        tag="input",
        attrs={
            "type": "checkbox",
            "checked": bool(props.get("checked")),
            "required": bool(props.get("required")),
        },
        void=True,
    )
    children = [box]
    if label := _text(props, "label"):
        children.append(text_node(label))
    return _styled("label", props, tailwind, children=children)


def _select(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    options: list[Element] = []
    if placeholder := _text(props, "placeholder"):
        options.append(Element(tag="option", attrs={"value": ""}, text=placeholder))
    for option in props.get("options") or []:
        options.append(Element(tag="option", attrs={"value": str(option)}, text=str(option)))
    select = _styled(
        "select",
        props,
        tailwind,
        attrs={"required": bool(props.get("required"))},
        children=options,
    )
    if label := _text(props, "label"):
        return Element(tag="label", children=[text_node(label), select])
    return select


def _image(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled(
        "img",
        props,
        tailwind,
        attrs={"src": props.get("src", ""), "alt": props.get("alt", "")},
        void=True,
    )


def _list(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    tag = "ol" if props.get("ordered") else "ul"
    items = [Element(tag="li", text=str(item)) for item in props.get("items") or []]
    return _styled(tag, props, tailwind, children=items)


def _span(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    key = "icon" if node.type == "icon" else "text"
    return _styled("span", props, tailwind, text=_text(props, key))


def _divider(node: ComponentNode, props: dict[str, Any], tailwind: bool) -> Element:
    return _styled("hr", props, tailwind, void=True)


_BUILDERS: dict[str, Builder] = {
    "container": _box,
    "grid": _grid,
    "card": _card,
    "heading": _heading,
    "text": _paragraph,
    "link": _link,
    "button": _button,
    "input": _input,
    "textarea": _textarea,
    "form": _form,
    "navigation": _navigation,
    "checkbox": _checkbox,
    "select": _select,
    "image": _image,
    "list": _list,
    "badge": _span,
    "icon": _span,
    "divider": _divider,
}


def build_element(node: ComponentNode, styling: str) -> Element:
    """Map a component subtree to an Element tree.

    Args:
        node: Component to map.
        styling: Styling system value ("tailwind" emits classes, anything
            else inline styles).

    Returns:
        Element for the node, with children mapped recursively.
    """
    tailwind = styling == "tailwind"
    builder = _BUILDERS.get(node.type)

    if builder is None or get_definition(node.type) is None:
        logger.warning("No element mapping for '%s', rendering a placeholder div", node.type)
        element = Element(tag="div", children=[comment_node(f"Unknown component: {node.type}")])
    else:
        props = {**get_default_props(node.type), **node.props}
        element = builder(node, props, tailwind)

    for child in node.children:
        element.children.append(build_element(child, styling))
    return element


__all__ = ["Element", "text_node", "comment_node", "build_element"]
