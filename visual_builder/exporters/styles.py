"""Style translation from component props.

Props are translated either to inline style declarations (css, scss and
plain styling) or to Tailwind utility classes. Tailwind translation
buckets pixel values; the bucket boundaries are part of the export
contract and must stay stable.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

# Props that translate to CSS declarations, in output order
STYLE_PROPS: tuple[str, ...] = (
    "display",
    "flexDirection",
    "alignItems",
    "justifyContent",
    "gap",
    "padding",
    "margin",
    "width",
    "height",
    "objectFit",
    "backgroundColor",
    "color",
    "fontSize",
    "fontWeight",
    "lineHeight",
    "textAlign",
    "textDecoration",
    "borderColor",
    "borderWidth",
    "borderRadius",
)

_NUMBER_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


def parse_px(value: Any) -> int | None:
    """Parse the leading integer of a CSS length ("7px" -> 7, "2px 8px" -> 2)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = _NUMBER_RE.match(value)
        if match:
            return int(float(match.group(1)))
    return None


def kebab_case(name: str) -> str:
    """Convert a camelCase prop name to a CSS property name."""
    return re.sub(r"(?<!^)([A-Z])", r"-\1", name).lower()


def props_to_style(props: Mapping[str, Any]) -> dict[str, str]:
    """Collect style declarations from props.

    Returns:
        Ordered mapping of camelCase property to string value. Empty and
        None values are skipped.
    """
    style: dict[str, str] = {}
    for name in STYLE_PROPS:
        value = props.get(name)
        if value is None or value == "" or isinstance(value, bool):
            continue
        style[name] = str(value)
    return style


def css_declarations(style: Mapping[str, str]) -> str:
    """Format a style mapping as a CSS declaration list."""
    return "; ".join(f"{kebab_case(name)}: {value}" for name, value in style.items())


# =============================================================================
# Tailwind buckets
# =============================================================================


def padding_class(value: Any) -> str | None:
    px = parse_px(value)
    if px is None:
        return None
    if px == 0:
        return "p-0"
    if px <= 4:
        return "p-1"
    if px <= 8:
        return "p-2"
    if px <= 16:
        return "p-4"
    if px <= 32:
        return "p-8"
    return "p-16"


def gap_class(value: Any) -> str | None:
    px = parse_px(value)
    if px is None:
        return None
    if px <= 8:
        return "gap-2"
    if px <= 16:
        return "gap-4"
    return "gap-8"


def radius_class(value: Any) -> str | None:
    px = parse_px(value)
    if px is None or px <= 0:
        return None
    if px <= 4:
        return "rounded"
    if px <= 8:
        return "rounded-lg"
    return "rounded-xl"


def font_size_class(value: Any) -> str | None:
    px = parse_px(value)
    if px is None:
        return None
    if px <= 12:
        return "text-xs"
    if px <= 14:
        return "text-sm"
    if px <= 16:
        return "text-base"
    if px <= 18:
        return "text-lg"
    if px <= 20:
        return "text-xl"
    if px <= 24:
        return "text-2xl"
    if px <= 30:
        return "text-3xl"
    return "text-4xl"


_FONT_WEIGHTS = {
    "normal": "font-normal",
    "400": "font-normal",
    "medium": "font-medium",
    "500": "font-medium",
    "semibold": "font-semibold",
    "600": "font-semibold",
    "bold": "font-bold",
    "700": "font-bold",
}

_ALIGN_ITEMS = {
    "flex-start": "items-start",
    "start": "items-start",
    "center": "items-center",
    "flex-end": "items-end",
    "end": "items-end",
    "stretch": "items-stretch",
}

_JUSTIFY = {
    "flex-start": "justify-start",
    "start": "justify-start",
    "center": "justify-center",
    "flex-end": "justify-end",
    "end": "justify-end",
    "space-between": "justify-between",
    "space-around": "justify-around",
}


def _arbitrary(prefix: str, value: Any) -> str | None:
    if not isinstance(value, str) or not value or value == "transparent":
        return None
    return f"{prefix}-[{value.replace(' ', '_')}]"


def props_to_tailwind_classes(props: Mapping[str, Any]) -> list[str]:
    """Translate style props to Tailwind utility classes."""
    classes: list[str] = []

    display = props.get("display")
    if display in ("flex", "grid", "block", "inline-block"):
        classes.append(display)
    if display == "flex":
        direction = props.get("flexDirection")
        if direction == "column":
            classes.append("flex-col")
        elif direction == "row":
            classes.append("flex-row")
    if align := _ALIGN_ITEMS.get(str(props.get("alignItems"))):
        classes.append(align)
    if justify := _JUSTIFY.get(str(props.get("justifyContent"))):
        classes.append(justify)

    bucketed = (
        (padding_class, "padding"),
        (gap_class, "gap"),
        (font_size_class, "fontSize"),
        (radius_class, "borderRadius"),
    )
    for mapper, name in bucketed:
        if name in props and (cls := mapper(props[name])):
            classes.append(cls)

    if weight := _FONT_WEIGHTS.get(str(props.get("fontWeight"))):
        classes.append(weight)
    if props.get("textAlign") in ("left", "center", "right", "justify"):
        classes.append(f"text-{props['textAlign']}")
    if props.get("width") == "100%":
        classes.append("w-full")
    if props.get("textDecoration") == "underline":
        classes.append("underline")

    for prefix, name in (("bg", "backgroundColor"), ("text", "color")):
        if cls := _arbitrary(prefix, props.get(name)):
            classes.append(cls)

    return classes


_BUTTON_SIZES = {
    "small": "px-3 py-1.5 text-sm",
    "medium": "px-4 py-2",
    "large": "px-6 py-3 text-lg",
}

_BUTTON_VARIANTS = {
    "primary": "bg-purple-600 text-white hover:bg-purple-700",
    "secondary": "bg-gray-200 text-gray-900 hover:bg-gray-300",
    "outline": "border-2 border-purple-600 text-purple-600 hover:bg-purple-50",
    "ghost": "text-gray-600 hover:bg-gray-100",
}


def button_classes(props: Mapping[str, Any]) -> list[str]:
    """Tailwind classes for a button's variant, size and state."""
    classes = ["font-medium", "rounded-lg", "transition-colors"]
    classes.extend(_BUTTON_SIZES.get(props.get("size"), _BUTTON_SIZES["medium"]).split())
    classes.extend(
        _BUTTON_VARIANTS.get(props.get("variant"), _BUTTON_VARIANTS["primary"]).split()
    )
    if props.get("fullWidth"):
        classes.append("w-full")
    if props.get("disabled"):
        classes.extend(["opacity-50", "cursor-not-allowed"])
    return classes


__all__ = [
    "STYLE_PROPS",
    "parse_px",
    "kebab_case",
    "props_to_style",
    "css_declarations",
    "padding_class",
    "gap_class",
    "radius_class",
    "font_size_class",
    "props_to_tailwind_classes",
    "button_classes",
]
