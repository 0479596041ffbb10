"""Unit tests for the Svelte renderer."""

import pytest

from visual_builder.exporters.lib import ExportOptions
from visual_builder.mid import ComponentNode

from .lib import SvelteRenderer


@pytest.fixture
def renderer():
    """Create a SvelteRenderer instance."""
    return SvelteRenderer()


class TestSvelteRenderer:
    """Tests for SvelteRenderer."""

    @pytest.mark.unit
    def test_renderer_name(self, renderer):
        """Renderer has correct name and extension."""
        assert renderer.name == "svelte"
        assert renderer.file_extension() == ".svelte"

    @pytest.mark.unit
    def test_imports_in_script(self, renderer):
        """Imports sit at the top of the script block."""
        node = ComponentNode(type="divider")
        output = renderer.render([node], ExportOptions(framework="svelte", styling="tailwind"))
        assert output.startswith("<script>\nimport { onMount } from 'svelte';\n</script>\n\n")
        assert output.rstrip().endswith("/>")

    @pytest.mark.unit
    def test_no_script_without_imports(self, renderer):
        """Markup starts the file when there is nothing to import."""
        node = ComponentNode(type="text", props={"text": "Hello"})
        options = ExportOptions(framework="svelte", styling="css", include_imports=False)
        output = renderer.render([node], options)
        assert output.startswith("<p ")

    @pytest.mark.unit
    def test_typescript_script(self, renderer):
        """TypeScript keeps a lang-marked script block."""
        options = ExportOptions(framework="svelte", include_imports=False, typescript=True)
        assert renderer.render([], options).startswith('<script lang="ts">\n</script>')

    @pytest.mark.unit
    def test_bindings(self, renderer):
        """Non-string attributes use brace bindings."""
        node = ComponentNode(type="textarea", props={"rows": 6})
        output = renderer.render([node], ExportOptions(framework="svelte", styling="css"))
        assert "rows={6}" in output

    @pytest.mark.unit
    def test_text_braces_escaped(self, renderer):
        """Braces in text never become expressions."""
        node = ComponentNode(type="text", props={"text": "{x}"})
        output = renderer.render([node], ExportOptions(framework="svelte", styling="css"))
        assert "&#123;x&#125;" in output
