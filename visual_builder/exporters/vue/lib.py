"""Vue renderer producing a single-file component.

Imports are placed at the top of the ``<script>`` block.
"""

from typing import Sequence

from visual_builder.exporters.lib import (
    INDENT,
    ExportOptions,
    FrameworkRenderer,
    register_renderer,
)
from visual_builder.mid import ComponentNode


@register_renderer
class VueRenderer(FrameworkRenderer):
    """Renders a component forest as a Vue SFC.

    Non-string attributes use ``:attr="expr"`` bindings.
    """

    @property
    def name(self) -> str:
        return "vue"

    def file_extension(self, typescript: bool = False) -> str:
        return ".vue"

    def import_lines(self, options: ExportOptions) -> list[str]:
        return ["import { defineComponent } from 'vue';"]

    def bind(self, name: str, expression: str) -> str:
        return f':{name}="{expression}"'

    def render(self, components: Sequence[ComponentNode], options: ExportOptions) -> str:
        lines = ["<template>"]
        lines.extend(self.render_markup(components, options.styling, depth=1))
        lines.append("</template>")
        lines.append("")

        lines.append('<script lang="ts">' if options.typescript else "<script>")
        if options.include_imports:
            lines.extend(self.import_lines(options))
            lines.append("")
            lines.append("export default defineComponent({")
            lines.append(f"{INDENT}name: '{options.component_name}',")
            lines.append("});")
        else:
            lines.append("export default {")
            lines.append(f"{INDENT}name: '{options.component_name}',")
            lines.append("};")
        lines.append("</script>")
        return "\n".join(lines) + "\n"
