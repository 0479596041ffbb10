"""Svelte renderer producing a single-file component.

Imports are placed at the top of the ``<script>`` block, which is only
emitted when it has content or a ``lang`` marker.
"""

from typing import Sequence

from visual_builder.exporters.lib import ExportOptions, FrameworkRenderer, register_renderer
from visual_builder.mid import ComponentNode


@register_renderer
class SvelteRenderer(FrameworkRenderer):
    """Renders a component forest as a Svelte component.

    Non-string attributes use ``attr={expr}`` bindings.
    """

    @property
    def name(self) -> str:
        return "svelte"

    def file_extension(self, typescript: bool = False) -> str:
        return ".svelte"

    def import_lines(self, options: ExportOptions) -> list[str]:
        return ["import { onMount } from 'svelte';"]

    def bind(self, name: str, expression: str) -> str:
        return f"{name}={{{expression}}}"

    def render(self, components: Sequence[ComponentNode], options: ExportOptions) -> str:
        lines: list[str] = []

        if options.include_imports or options.typescript:
            lines.append('<script lang="ts">' if options.typescript else "<script>")
            if options.include_imports:
                lines.extend(self.import_lines(options))
            lines.append("</script>")
            lines.append("")

        lines.extend(self.render_markup(components, options.styling, depth=0))
        return "\n".join(lines) + "\n"
