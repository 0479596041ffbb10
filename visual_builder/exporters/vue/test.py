"""Unit tests for the Vue renderer."""

import pytest

from visual_builder.exporters.lib import ExportOptions
from visual_builder.mid import ComponentNode

from .lib import VueRenderer


@pytest.fixture
def renderer():
    """Create a VueRenderer instance."""
    return VueRenderer()


class TestVueRenderer:
    """Tests for VueRenderer."""

    @pytest.mark.unit
    def test_renderer_name(self, renderer):
        """Renderer has correct name and extension."""
        assert renderer.name == "vue"
        assert renderer.file_extension(typescript=True) == ".vue"

    @pytest.mark.unit
    def test_template_block(self, renderer):
        """Markup sits in the template block at one indent level."""
        node = ComponentNode(type="text", props={"text": "Hello"})
        output = renderer.render([node], ExportOptions(framework="vue", styling="tailwind"))
        lines = output.splitlines()
        assert lines[0] == "<template>"
        assert lines[1].startswith("  <p class=")
        assert lines[1].endswith(">Hello</p>")
        assert lines[2] == "</template>"

    @pytest.mark.unit
    def test_imports_in_script(self, renderer):
        """Imports open the script block."""
        output = renderer.render([], ExportOptions(framework="vue"))
        assert "<script>\nimport { defineComponent } from 'vue';\n" in output
        assert "export default defineComponent({\n  name: 'GeneratedComponent',\n});" in output

    @pytest.mark.unit
    def test_without_imports(self, renderer):
        """Without imports a plain options object is exported."""
        output = renderer.render([], ExportOptions(framework="vue", include_imports=False))
        assert "import" not in output
        assert "export default {" in output

    @pytest.mark.unit
    def test_typescript_lang(self, renderer):
        """TypeScript marks the script block."""
        output = renderer.render([], ExportOptions(framework="vue", typescript=True))
        assert '<script lang="ts">' in output

    @pytest.mark.unit
    def test_bindings(self, renderer):
        """Non-string attributes use colon bindings."""
        node = ComponentNode(type="textarea", props={"rows": 6})
        output = renderer.render([node], ExportOptions(framework="vue", styling="css"))
        assert ':rows="6"' in output

    @pytest.mark.unit
    def test_inline_style(self, renderer):
        """CSS styling renders a style attribute."""
        node = ComponentNode(type="container", props={"padding": "8px"})
        output = renderer.render([node], ExportOptions(framework="vue", styling="css"))
        assert "padding: 8px" in output
        assert 'style="display: flex; flex-direction: column;' in output
