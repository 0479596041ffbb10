"""Unit tests for the Angular renderer."""

import pytest

from visual_builder.exporters.lib import ExportOptions
from visual_builder.mid import ComponentNode

from .lib import AngularRenderer


@pytest.fixture
def renderer():
    """Create an AngularRenderer instance."""
    return AngularRenderer()


class TestAngularRenderer:
    """Tests for AngularRenderer."""

    @pytest.mark.unit
    def test_renderer_name(self, renderer):
        """Renderer has correct name and extension."""
        assert renderer.name == "angular"
        assert renderer.file_extension() == ".ts"

    @pytest.mark.unit
    def test_component_scaffold(self, renderer):
        """Decorator, selector and class wrap the template."""
        output = renderer.render([], ExportOptions(framework="angular"))
        lines = output.splitlines()
        assert lines[0] == "import { Component } from '@angular/core';"
        assert "@Component({" in lines
        assert "  selector: 'app-generated'," in lines
        assert "  template: `" in lines
        assert lines[-1] == "export class GeneratedComponent {}"

    @pytest.mark.unit
    def test_class_and_selector_names(self, renderer):
        """Names without the suffix gain it."""
        assert renderer.class_name("HeroSection") == "HeroSectionComponent"
        assert renderer.selector("HeroSection") == "app-hero-section"

    @pytest.mark.unit
    def test_template_indent(self, renderer):
        """Markup is indented two levels inside the template literal."""
        node = ComponentNode(type="heading", props={"text": "Hi"})
        output = renderer.render([node], ExportOptions(framework="angular", styling="tailwind"))
        assert "\n    <h2 class=" in output

    @pytest.mark.unit
    def test_bindings(self, renderer):
        """Non-string attributes use property bindings."""
        node = ComponentNode(type="textarea", props={"rows": 6})
        output = renderer.render([node], ExportOptions(framework="angular", styling="css"))
        assert '[rows]="6"' in output

    @pytest.mark.unit
    def test_backticks_escaped(self, renderer):
        """Backticks cannot terminate the template literal."""
        node = ComponentNode(type="text", props={"text": "a`b"})
        output = renderer.render([node], ExportOptions(framework="angular", styling="css"))
        assert "a\\`b" in output
