"""Exporter abstraction and registry.

This module turns a component forest into text: a factory configuration
literal, a JSON document, or framework-native component code. Framework
renderers subclass ``FrameworkRenderer`` and register themselves by name;
``export_components`` is the single entry point.
"""

from __future__ import annotations

import html
import importlib
import json
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from visual_builder.config import EnvVar, get_environment
from visual_builder.mid import ComponentNode, validate_tree
from visual_builder.mid import regenerate_ids as fresh_ids
from visual_builder.schema import get_default_props

from .elements import Element, build_element
from .styles import css_declarations

logger = logging.getLogger(__name__)

INDENT = "  "
FACTORY_PACKAGE = "@revolutionary/ui-factory"


class ExportFormat(str, Enum):
    """Export output kinds."""

    FACTORY = "factory"
    CODE = "code"
    JSON = "json"


class Styling(str, Enum):
    """Styling systems for code export."""

    CSS = "css"
    SCSS = "scss"
    PLAIN = "plain"
    TAILWIND = "tailwind"


class ExportError(ValueError):
    """Raised for invalid export configuration (unknown framework or format)."""


class ComponentImportError(ValueError):
    """Raised when a JSON document cannot be imported as a component forest."""


class ExportOptions(BaseModel):
    """Options controlling an export.

    Attributes:
        format: Output kind (factory, code, json).
        framework: Target framework name from the renderer registry.
        styling: Styling system (css, scss, plain, tailwind).
        typescript: Emit TypeScript flavoured code.
        include_imports: Emit the framework's import lines.
        prettier: Normalise whitespace in the output.
        component_name: Name of the generated component.
    """

    model_config = ConfigDict(frozen=True)

    format: str = Field(default=ExportFormat.CODE.value, description="Output kind")
    framework: str = Field(
        default_factory=lambda: get_environment(EnvVar.BUILDER_FRAMEWORK),
        description="Target framework",
    )
    styling: str = Field(
        default_factory=lambda: get_environment(EnvVar.BUILDER_STYLING),
        description="Styling system",
    )
    typescript: bool = Field(default_factory=lambda: get_environment(EnvVar.BUILDER_TYPESCRIPT))
    include_imports: bool = True
    prettier: bool = False
    component_name: str = "GeneratedComponent"

    @field_validator("format", "framework", "styling", mode="before")
    @classmethod
    def _normalise_choice(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("component_name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"component_name must be an identifier, got {value!r}")
        return value


def _escape_braces(text: str) -> str:
    return text.replace("{", "&#123;").replace("}", "&#125;")


def _choice(enum_cls: type[Enum], value: str, label: str) -> Enum:
    try:
        return enum_cls(value)
    except ValueError:
        available = ", ".join(member.value for member in enum_cls)
        raise ExportError(f"Unknown {label} '{value}'. Available: {available}") from None


# =============================================================================
# Renderer base
# =============================================================================


class FrameworkRenderer(ABC):
    """Abstract base class for framework code renderers.

    The base class walks the shared Element tree; subclasses supply the
    framework's binding syntax and the file scaffolding around the markup.

    Subclasses must implement:
        - name: Framework identifier string
        - file_extension: Output extension for JS or TS
        - import_lines: Fixed import statements
        - bind: Attribute binding syntax for non-string values
        - render: Full file for a component forest
    """

    class_attribute = "class"

    @property
    @abstractmethod
    def name(self) -> str:
        """Framework identifier string."""
        ...

    @abstractmethod
    def file_extension(self, typescript: bool = False) -> str:
        """Output file extension (e.g., '.tsx', '.vue')."""
        ...

    @abstractmethod
    def import_lines(self, options: ExportOptions) -> list[str]:
        """Import statements emitted when ``include_imports`` is set."""
        ...

    @abstractmethod
    def bind(self, name: str, expression: str) -> str:
        """Render an attribute bound to a script expression."""
        ...

    @abstractmethod
    def render(self, components: Sequence[ComponentNode], options: ExportOptions) -> str:
        """Render a complete component file.

        Args:
            components: Top-level nodes of the forest.
            options: Export options (styling, typescript, imports, name).

        Returns:
            str: Component source code.
        """
        ...

    def render_style(self, style: dict[str, str]) -> str:
        """Render inline style declarations as an attribute."""
        return f'style="{html.escape(css_declarations(style))}"'

    def render_comment(self, text: str) -> str:
        return f"<!-- {text} -->"

    def escape_text(self, text: str) -> str:
        return _escape_braces(html.escape(text, quote=False))

    def attribute_name(self, name: str) -> str:
        return name

    def render_markup(
        self, components: Sequence[ComponentNode], styling: str, depth: int
    ) -> list[str]:
        """Render a forest to markup lines starting at ``depth``."""
        lines: list[str] = []
        for node in components:
            self._render_element(build_element(node, styling), depth, lines)
        return lines

    def _render_element(self, element: Element, depth: int, lines: list[str]) -> None:
        prefix = INDENT * depth

        if element.tag is None:
            if element.comment is not None:
                lines.append(prefix + self.render_comment(element.comment))
            elif element.text:
                lines.append(prefix + self.escape_text(element.text))
            return

        attributes = self._render_attributes(element)
        opening = f"<{element.tag}{' ' + attributes if attributes else ''}"

        if element.void:
            lines.append(f"{prefix}{opening} />")
            return

        text = self.escape_text(element.text) if element.text else ""
        if not element.children:
            lines.append(f"{prefix}{opening}>{text}</{element.tag}>")
            return

        lines.append(f"{prefix}{opening}>")
        if text:
            lines.append(f"{prefix}{INDENT}{text}")
        for child in element.children:
            self._render_element(child, depth + 1, lines)
        lines.append(f"{prefix}</{element.tag}>")

    def _render_attributes(self, element: Element) -> str:
        parts: list[str] = []
        if element.classes:
            parts.append(f'{self.class_attribute}="{" ".join(element.classes)}"')
        if element.style:
            parts.append(self.render_style(element.style))
        for key, value in element.attrs.items():
            if value is None or value is False:
                continue
            key = self.attribute_name(key)
            if value is True:
                parts.append(key)
            elif isinstance(value, str):
                parts.append(f'{key}="{_escape_braces(html.escape(value))}"')
            else:
                parts.append(self.bind(key, to_js_literal(value)))
        return " ".join(parts)


# Renderer registry - populated by framework modules on import
_registry: dict[str, type[FrameworkRenderer]] = {}

_FRAMEWORK_MODULES = ("react", "vue", "angular", "svelte")


def register_renderer(renderer_cls: type[FrameworkRenderer]) -> type[FrameworkRenderer]:
    """Register a renderer class in the registry.

    Uses a temporary instance to retrieve the framework name.

    Example:
        >>> @register_renderer
        ... class SolidRenderer(FrameworkRenderer):
        ...     name = "solid"
        ...     ...
    """
    _registry[renderer_cls().name] = renderer_cls
    return renderer_cls


def _import_renderers() -> None:
    """Import framework modules to trigger registration."""
    for module_name in _FRAMEWORK_MODULES:
        importlib.import_module(f"visual_builder.exporters.{module_name}")


def get_renderer(name: str) -> FrameworkRenderer:
    """Get a renderer instance by framework name.

    Raises:
        ExportError: If no renderer with the given name is registered.
    """
    key = name.strip().lower()
    if key not in _registry:
        _import_renderers()
        if key not in _registry:
            available = ", ".join(_registry.keys()) or "(none)"
            raise ExportError(f"Unknown framework '{name}'. Available: {available}")
    return _registry[key]()


def list_frameworks() -> list[str]:
    """List all registered framework names.

    Example:
        >>> list_frameworks()
        ['react', 'vue', 'angular', 'svelte']
    """
    _import_renderers()
    return list(_registry.keys())


# =============================================================================
# Text helpers
# =============================================================================

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _js_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def _js_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else _js_string(key)


def to_js_literal(value: Any, depth: int = 0) -> str:
    """Serialize a JSON-like value as a JavaScript literal.

    Objects and arrays are expanded one entry per line with trailing
    commas; strings use single quotes.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return _js_string(value)

    prefix = INDENT * (depth + 1)
    closing = INDENT * depth
    if isinstance(value, dict):
        if not value:
            return "{}"
        entries = [
            f"{prefix}{_js_key(str(k))}: {to_js_literal(v, depth + 1)},"
            for k, v in value.items()
        ]
        return "{\n" + "\n".join(entries) + f"\n{closing}}}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        entries = [f"{prefix}{to_js_literal(v, depth + 1)}," for v in value]
        return "[\n" + "\n".join(entries) + f"\n{closing}]"
    return _js_string(str(value))


def normalize_whitespace(code: str) -> str:
    """Strip trailing spaces, collapse blank runs, end with one newline."""
    lines = [line.rstrip() for line in code.splitlines()]
    result: list[str] = []
    for line in lines:
        if not line and (not result or not result[-1]):
            continue
        result.append(line)
    while result and not result[-1]:
        result.pop()
    return "\n".join(result) + "\n"


def pascal_case(name: str) -> str:
    """Convert a display name to a PascalCase identifier."""
    words = re.findall(r"[A-Za-z0-9]+", name)
    result = "".join(word[:1].upper() + word[1:] for word in words)
    if not result or not result[0].isalpha():
        result = "Component" + result
    return result


def kebab_name(name: str) -> str:
    """Convert a PascalCase identifier to kebab-case."""
    return re.sub(r"(?<!^)([A-Z])", r"-\1", name).lower()


# =============================================================================
# Factory / JSON export
# =============================================================================


def resolve_props(node: ComponentNode) -> dict[str, Any]:
    """Registry defaults overlaid with the node's own props."""
    return {**get_default_props(node.type), **node.props}


def _factory_entry(node: ComponentNode) -> dict[str, Any]:
    return {
        "type": node.type,
        "name": node.name,
        "props": resolve_props(node),
        "children": [_factory_entry(child) for child in node.children],
    }


def export_factory(components: Sequence[ComponentNode], options: ExportOptions) -> str:
    """Export a factory configuration module.

    The module declares ``componentConfig`` and feeds it to a
    ``UniversalFactory`` instance.
    """
    config = {
        "framework": options.framework,
        "styling": options.styling,
        "components": [_factory_entry(node) for node in components],
    }

    lines: list[str] = []
    if options.include_imports:
        lines.extend(get_renderer(options.framework).import_lines(options))
    if options.typescript:
        lines.append(
            f"import {{ UniversalFactory, type ComponentConfig }} from '{FACTORY_PACKAGE}';"
        )
        declaration = "const componentConfig: ComponentConfig ="
    else:
        lines.append(f"import {{ UniversalFactory }} from '{FACTORY_PACKAGE}';")
        declaration = "const componentConfig ="
    lines.append("")
    lines.append(f"{declaration} {to_js_literal(config)};")
    lines.append("")
    lines.append("const factory = new UniversalFactory();")
    lines.append("const generatedComponent = factory.generateFromConfig(componentConfig);")
    lines.append("")
    lines.append("export default generatedComponent;")
    return "\n".join(lines) + "\n"


def export_json(components: Sequence[ComponentNode]) -> str:
    """Export the persisted JSON shape of a forest."""
    data = [node.to_dict() for node in components]
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def import_components(text: str, regenerate_ids: bool = False) -> list[ComponentNode]:
    """Parse a JSON export back into a component forest.

    Args:
        text: JSON array of nodes (a single node object is also accepted).
        regenerate_ids: Replace every id with a fresh one.

    Returns:
        The imported forest.

    Raises:
        ComponentImportError: If the text is not valid JSON, a node does
            not match the ComponentNode shape, or an id repeats (unless
            ``regenerate_ids`` is set).
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ComponentImportError(f"Invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ComponentImportError(
            f"Expected a list of components, got {type(data).__name__}"
        )

    try:
        forest = [ComponentNode.model_validate(item) for item in data]
    except ValidationError as e:
        raise ComponentImportError(f"Invalid component data: {e}") from e

    logger.debug("Imported %d top-level components", len(forest))
    if regenerate_ids:
        return fresh_ids(forest)

    duplicates = [e.node_id for e in validate_tree(forest) if e.error_type == "duplicate_id"]
    if duplicates:
        raise ComponentImportError(f"Duplicate component ids: {', '.join(duplicates)}")
    return forest


# =============================================================================
# Entry point
# =============================================================================


def export_components(
    components: Sequence[ComponentNode], options: ExportOptions | None = None
) -> str:
    """Export a component forest.

    Args:
        components: Top-level nodes of the forest.
        options: Export options. If None, uses ``ExportOptions()``.

    Returns:
        str: Generated source text. Deterministic for equal inputs.

    Raises:
        ExportError: For an unknown format, framework or styling.

    Example:
        >>> code = export_components(forest, ExportOptions(framework="vue"))
    """
    options = options or ExportOptions()
    export_format = _choice(ExportFormat, options.format, "format")

    if export_format == ExportFormat.JSON:
        output = export_json(components)
    else:
        _choice(Styling, options.styling, "styling")
        renderer = get_renderer(options.framework)
        if export_format == ExportFormat.FACTORY:
            output = export_factory(components, options)
        else:
            output = renderer.render(components, options)

    logger.debug(
        "Exported %d components as %s (%s)",
        len(components),
        export_format.value,
        options.framework,
    )
    if options.prettier:
        output = normalize_whitespace(output)
    return output


__all__ = [
    "ExportFormat",
    "Styling",
    "ExportOptions",
    "ExportError",
    "ComponentImportError",
    "FrameworkRenderer",
    "register_renderer",
    "get_renderer",
    "list_frameworks",
    "to_js_literal",
    "normalize_whitespace",
    "pascal_case",
    "kebab_name",
    "resolve_props",
    "export_factory",
    "export_json",
    "import_components",
    "export_components",
]
