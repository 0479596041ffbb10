"""Unit tests for the React renderer."""

import pytest

from visual_builder.exporters.lib import ExportOptions
from visual_builder.mid import ComponentNode

from .lib import ReactRenderer


@pytest.fixture
def renderer():
    """Create a ReactRenderer instance."""
    return ReactRenderer()


def css_options(**kwargs):
    return ExportOptions(framework="react", styling="css", include_imports=False, **kwargs)


class TestReactRenderer:
    """Tests for ReactRenderer."""

    @pytest.mark.unit
    def test_renderer_name(self, renderer):
        """Renderer has correct name."""
        assert renderer.name == "react"

    @pytest.mark.unit
    def test_file_extension(self, renderer):
        """Extension follows the typescript flag."""
        assert renderer.file_extension() == ".jsx"
        assert renderer.file_extension(typescript=True) == ".tsx"

    @pytest.mark.unit
    def test_single_root(self, renderer):
        """A single heading renders inside the return block."""
        node = ComponentNode(type="heading", props={"text": "Hi"})
        assert renderer.render([node], css_options()) == (
            "export const GeneratedComponent = () => {\n"
            "  return (\n"
            "    <h2 style={{ color: '#000000', fontSize: '24px', fontWeight: 'bold', "
            "textAlign: 'left' }}>Hi</h2>\n"
            "  );\n"
            "};\n"
            "\n"
            "export default GeneratedComponent;\n"
        )

    @pytest.mark.unit
    def test_imports_prepended(self, renderer):
        """Import lines open the file."""
        options = ExportOptions(framework="react", include_imports=True)
        output = renderer.render([], options)
        assert output.startswith("import React from 'react';\n\n")

    @pytest.mark.unit
    def test_typescript_signature(self, renderer):
        """TypeScript output types the component."""
        output = renderer.render([], css_options(typescript=True))
        assert "export const GeneratedComponent: React.FC = () => {" in output

    @pytest.mark.unit
    def test_empty_forest(self, renderer):
        """No components renders an empty fragment."""
        assert "    <></>\n" in renderer.render([], css_options())

    @pytest.mark.unit
    def test_multiple_roots_use_fragment(self, renderer, sample_tree):
        """Several roots are wrapped in a fragment."""
        lines = renderer.render(sample_tree, css_options()).splitlines()
        assert lines[2] == "    <>"
        assert lines[3].startswith("      <div")
        assert "    </>" in lines

    @pytest.mark.unit
    def test_tailwind_class_name(self, renderer):
        """Tailwind styling uses className."""
        node = ComponentNode(type="container")
        output = renderer.render([node], ExportOptions(framework="react", styling="tailwind"))
        assert '<div className="flex flex-col p-4 gap-4"></div>' in output

    @pytest.mark.unit
    def test_nesting_indent(self, renderer, sample_tree):
        """Each level indents by two spaces."""
        output = renderer.render(sample_tree[:1], css_options())
        assert "\n      <h1 " in output
        assert "\n        <button " in output

    @pytest.mark.unit
    def test_bindings(self, renderer):
        """Non-string attributes use expression bindings."""
        node = ComponentNode(type="textarea", props={"rows": 6})
        assert "rows={6}" in renderer.render([node], css_options())

    @pytest.mark.unit
    def test_jsx_attribute_names(self, renderer):
        """Checked checkboxes use defaultChecked."""
        node = ComponentNode(type="checkbox", props={"checked": True})
        output = renderer.render([node], css_options())
        assert "defaultChecked" in output
        assert " checked" not in output

    @pytest.mark.unit
    def test_text_escaping(self, renderer):
        """Braces and angle brackets in text are escaped."""
        node = ComponentNode(type="text", props={"text": "a {b} <c>"})
        assert "a &#123;b&#125; &lt;c&gt;" in renderer.render([node], css_options())

    @pytest.mark.unit
    def test_unknown_component_comment(self, renderer):
        """Unknown types render a JSX comment inside a div."""
        node = ComponentNode(type="hologram")
        output = renderer.render([node], css_options())
        assert "{/* Unknown component: hologram */}" in output
