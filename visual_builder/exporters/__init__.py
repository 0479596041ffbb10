"""Multi-target exporter - factory config, JSON and framework code.

Example usage:
    >>> from visual_builder.exporters import ExportOptions, export_components
    >>> code = export_components(forest, ExportOptions(framework="react", styling="css"))
    >>> print(code)
"""

from .elements import Element, build_element
from .lib import (
    ComponentImportError,
    ExportError,
    ExportFormat,
    ExportOptions,
    FrameworkRenderer,
    Styling,
    export_components,
    export_factory,
    export_json,
    get_renderer,
    import_components,
    list_frameworks,
    normalize_whitespace,
    pascal_case,
    register_renderer,
    resolve_props,
    to_js_literal,
)
from .styles import (
    button_classes,
    css_declarations,
    props_to_style,
    props_to_tailwind_classes,
)

__all__ = [
    # Options and errors
    "ExportFormat",
    "Styling",
    "ExportOptions",
    "ExportError",
    "ComponentImportError",
    # Renderers
    "FrameworkRenderer",
    "register_renderer",
    "get_renderer",
    "list_frameworks",
    # Export / import
    "export_components",
    "export_factory",
    "export_json",
    "import_components",
    "resolve_props",
    "to_js_literal",
    "normalize_whitespace",
    "pascal_case",
    # Markup and styles
    "Element",
    "build_element",
    "props_to_style",
    "props_to_tailwind_classes",
    "button_classes",
    "css_declarations",
]
