"""Output formatting for builder visualization.

Generates human-readable text representations of component forests
for terminal feedback and review.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from visual_builder.exporters import (
    ExportFormat,
    ExportOptions,
    export_components,
    get_renderer,
)
from visual_builder.mid import ComponentNode

# Props shown as the node's key attribute, in priority order
_KEY_PROPS = ("text", "title", "label", "placeholder", "src")
_MAX_LABEL = 32


@dataclass
class BuilderOutput:
    """Complete output for user feedback.

    Attributes:
        text_tree: Human-readable tree representation.
        code: Exported source text.
        components: Original forest.
        framework: Target framework used for code export.
        file_extension: Suggested extension for the exported file.
    """

    text_tree: str
    code: str
    components: list[ComponentNode]
    framework: str
    file_extension: str


def _quote(value: Any) -> str:
    text = str(value)
    if len(text) > _MAX_LABEL:
        text = text[: _MAX_LABEL - 3] + "..."
    return f'"{text}"'


def _key_attributes(node: ComponentNode) -> list[str]:
    props = node.props
    attrs: list[str] = []
    if node.type == "grid" and props.get("columns"):
        attrs.append(f"{props['columns']} cols")
    if props.get("flexDirection") == "row":
        attrs.append("row")
    if node.type == "heading" and props.get("level"):
        attrs.append(f"h{props['level']}")
    for key in _KEY_PROPS:
        value = props.get(key)
        if value not in (None, ""):
            attrs.append(_quote(value))
            break
    return attrs


def format_component_tree(components: Sequence[ComponentNode]) -> str:
    """Format a component forest as a human-readable tree.

    Example output:
        Page [container]
        ├── Title [heading, h1, "Welcome"]
        └── Actions [container, row]
            ├── OK [button, "OK"]
            └── Cancel [button, "Cancel"]
        Footer [text, "Copyright"]

    Args:
        components: Top-level nodes to format.

    Returns:
        Formatted tree string, or "(empty)" for an empty forest.
    """
    if not components:
        return "(empty)"
    lines: list[str] = []
    for node in components:
        _format_node(node, lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_node(
    node: ComponentNode,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format a node and its children."""
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    label = node.name or node.id
    attrs = [node.type, *_key_attributes(node)]
    lines.append(f"{prefix}{connector}{label} [{', '.join(attrs)}]")

    for i, child in enumerate(node.children):
        _format_node(child, lines, child_prefix, i == len(node.children) - 1)


def file_extension_for(options: ExportOptions) -> str:
    """Suggested file extension for an export."""
    if options.format == ExportFormat.JSON.value:
        return ".json"
    if options.format == ExportFormat.FACTORY.value:
        return ".ts" if options.typescript else ".js"
    return get_renderer(options.framework).file_extension(options.typescript)


class OutputGenerator:
    """Generates complete output for user feedback.

    Produces both the human-readable tree and the exported code for a
    component forest.
    """

    def __init__(self, default_options: ExportOptions | None = None):
        """Initialize generator.

        Args:
            default_options: Export options used when ``generate`` gets none.
        """
        self._default_options = default_options

    def generate(
        self,
        components: Sequence[ComponentNode],
        options: ExportOptions | None = None,
    ) -> BuilderOutput:
        """Generate output from a component forest.

        Args:
            components: Forest to visualize and export.
            options: Export options override.

        Returns:
            BuilderOutput with text tree and exported code.

        Raises:
            ExportError: If the options name an unknown format, framework
                or styling system.
        """
        options = options or self._default_options or ExportOptions()
        code = export_components(components, options)
        return BuilderOutput(
            text_tree=format_component_tree(components),
            code=code,
            components=list(components),
            framework=options.framework,
            file_extension=file_extension_for(options),
        )


__all__ = [
    "format_component_tree",
    "file_extension_for",
    "BuilderOutput",
    "OutputGenerator",
]
