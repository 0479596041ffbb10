"""React renderer producing a JSX function component.

Example output:
    ```jsx
    import React from 'react';

    export const GeneratedComponent = () => {
      return (
        <div className="flex flex-col p-4">
          <h2 className="text-2xl">Title</h2>
        </div>
      );
    };

    export default GeneratedComponent;
    ```
"""

from typing import Sequence

from visual_builder.exporters.lib import (
    INDENT,
    ExportOptions,
    FrameworkRenderer,
    register_renderer,
    to_js_literal,
)
from visual_builder.mid import ComponentNode

# DOM attribute names that differ in JSX
_JSX_ATTRIBUTES = {
    "checked": "defaultChecked",
    "readonly": "readOnly",
    "tabindex": "tabIndex",
}


@register_renderer
class ReactRenderer(FrameworkRenderer):
    """Renders a component forest as a React function component.

    JSX features used:
        - ``className`` for classes
        - ``style={{...}}`` object literals for inline styles
        - ``{expr}`` bindings for non-string attributes
        - A fragment when the forest has several roots
    """

    class_attribute = "className"

    @property
    def name(self) -> str:
        return "react"

    def file_extension(self, typescript: bool = False) -> str:
        return ".tsx" if typescript else ".jsx"

    def import_lines(self, options: ExportOptions) -> list[str]:
        return ["import React from 'react';"]

    def bind(self, name: str, expression: str) -> str:
        return f"{name}={{{expression}}}"

    def attribute_name(self, name: str) -> str:
        return _JSX_ATTRIBUTES.get(name, name)

    def render_style(self, style: dict[str, str]) -> str:
        entries = ", ".join(f"{key}: {to_js_literal(value)}" for key, value in style.items())
        return f"style={{{{ {entries} }}}}"

    def render_comment(self, text: str) -> str:
        return f"{{/* {text} */}}"

    def render(self, components: Sequence[ComponentNode], options: ExportOptions) -> str:
        name = options.component_name
        lines: list[str] = []

        if options.include_imports:
            lines.extend(self.import_lines(options))
            lines.append("")

        if options.typescript:
            lines.append(f"export const {name}: React.FC = () => {{")
        else:
            lines.append(f"export const {name} = () => {{")
        lines.append(f"{INDENT}return (")

        if not components:
            lines.append(f"{INDENT * 2}<></>")
        elif len(components) == 1:
            lines.extend(self.render_markup(components, options.styling, depth=2))
        else:
            lines.append(f"{INDENT * 2}<>")
            lines.extend(self.render_markup(components, options.styling, depth=3))
            lines.append(f"{INDENT * 2}</>")

        lines.append(f"{INDENT});")
        lines.append("};")
        lines.append("")
        lines.append(f"export default {name};")
        return "\n".join(lines) + "\n"
