"""Angular renderer producing a standalone component class.

The markup is embedded as an inline template literal, so backticks and
``${`` sequences are escaped.
"""

from typing import Sequence

from visual_builder.exporters.lib import (
    INDENT,
    ExportOptions,
    FrameworkRenderer,
    kebab_name,
    register_renderer,
)
from visual_builder.mid import ComponentNode


def _escape_template(line: str) -> str:
    return line.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


@register_renderer
class AngularRenderer(FrameworkRenderer):
    """Renders a component forest as an Angular component.

    Non-string attributes use ``[attr]="expr"`` property bindings.
    """

    @property
    def name(self) -> str:
        return "angular"

    def file_extension(self, typescript: bool = False) -> str:
        return ".ts"

    def import_lines(self, options: ExportOptions) -> list[str]:
        return ["import { Component } from '@angular/core';"]

    def bind(self, name: str, expression: str) -> str:
        return f'[{name}]="{expression}"'

    def class_name(self, component_name: str) -> str:
        if component_name.endswith("Component"):
            return component_name
        return f"{component_name}Component"

    def selector(self, component_name: str) -> str:
        base = component_name.removesuffix("Component") or component_name
        return f"app-{kebab_name(base)}"

    def render(self, components: Sequence[ComponentNode], options: ExportOptions) -> str:
        name = options.component_name
        lines: list[str] = []

        if options.include_imports:
            lines.extend(self.import_lines(options))
            lines.append("")

        lines.append("@Component({")
        lines.append(f"{INDENT}selector: '{self.selector(name)}',")
        lines.append(f"{INDENT}standalone: true,")
        lines.append(f"{INDENT}template: `")
        markup = self.render_markup(components, options.styling, depth=2)
        lines.extend(_escape_template(line) for line in markup)
        lines.append(f"{INDENT}`,")
        lines.append("})")
        lines.append(f"export class {self.class_name(name)} {{}}")
        return "\n".join(lines) + "\n"
