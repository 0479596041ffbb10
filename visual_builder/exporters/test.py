"""Tests for the exporter core, style translation and element mapping."""

import json
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from visual_builder.mid import ComponentNode, collect_ids, create_node
from visual_builder.store import AddComponent, BuilderStore, UpdateComponent

from .elements import build_element
from .lib import (
    ComponentImportError,
    ExportError,
    ExportFormat,
    ExportOptions,
    export_components,
    get_renderer,
    import_components,
    list_frameworks,
    normalize_whitespace,
    pascal_case,
    resolve_props,
    to_js_literal,
)
from .styles import (
    button_classes,
    css_declarations,
    font_size_class,
    gap_class,
    padding_class,
    parse_px,
    props_to_style,
    props_to_tailwind_classes,
    radius_class,
)


def strip_ids(nodes):
    return [
        {"type": n.type, "props": n.props, "children": strip_ids(n.children)} for n in nodes
    ]


# =============================================================================
# Styles
# =============================================================================


class TestTailwindBuckets:
    """Tests for the pixel bucket mapping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0px", "p-0"),
            ("4px", "p-1"),
            ("7px", "p-2"),
            ("8px", "p-2"),
            ("16px", "p-4"),
            ("32px", "p-8"),
            ("33px", "p-16"),
            ("2px 8px", "p-1"),
            (12, "p-4"),
        ],
    )
    def test_padding(self, value, expected):
        """Padding maps to the bucket containing its leading pixel value."""
        assert padding_class(value) == expected

    @pytest.mark.unit
    def test_neighbouring_paddings_share_class(self):
        """7px and 8px land in the same bucket."""
        assert padding_class("7px") == padding_class("8px") == "p-2"

    @pytest.mark.unit
    def test_gap(self):
        """Gap uses three buckets."""
        assert gap_class("8px") == "gap-2"
        assert gap_class("9px") == "gap-4"
        assert gap_class("16px") == "gap-4"
        assert gap_class("17px") == "gap-8"

    @pytest.mark.unit
    def test_radius(self):
        """Zero radius yields no class."""
        assert radius_class("0px") is None
        assert radius_class("4px") == "rounded"
        assert radius_class("8px") == "rounded-lg"
        assert radius_class("12px") == "rounded-xl"

    @pytest.mark.unit
    def test_font_size(self):
        """Font sizes map to text scale classes."""
        assert font_size_class("12px") == "text-xs"
        assert font_size_class("16px") == "text-base"
        assert font_size_class("24px") == "text-2xl"
        assert font_size_class("48px") == "text-4xl"

    @pytest.mark.unit
    def test_unparseable_values(self):
        """Non-numeric values produce no class."""
        assert parse_px("auto") is None
        assert padding_class("auto") is None
        assert parse_px(True) is None


class TestStyleTranslation:
    """Tests for props to style/class translation."""

    @pytest.mark.unit
    def test_container_defaults_to_tailwind(self):
        """Container defaults become flex utilities."""
        classes = props_to_tailwind_classes(resolve_props(ComponentNode(type="container")))
        assert classes == ["flex", "flex-col", "p-4", "gap-4"]

    @pytest.mark.unit
    def test_colors_use_arbitrary_values(self):
        """Colors map to arbitrary value classes; transparent is skipped."""
        classes = props_to_tailwind_classes(
            {"color": "#333333", "backgroundColor": "transparent"}
        )
        assert classes == ["text-[#333333]"]

    @pytest.mark.unit
    def test_props_to_style(self):
        """Only style props with values are kept, in a fixed order."""
        style = props_to_style({"text": "x", "fontSize": "24px", "color": "red", "margin": None})
        assert style == {"color": "red", "fontSize": "24px"}

    @pytest.mark.unit
    def test_css_declarations(self):
        """Declarations use kebab-case property names."""
        assert css_declarations({"fontSize": "24px", "color": "red"}) == (
            "font-size: 24px; color: red"
        )

    @pytest.mark.unit
    def test_button_classes(self):
        """Variant, size and state map to button classes."""
        classes = button_classes({"variant": "secondary", "size": "small", "disabled": True})
        assert "bg-gray-200" in classes
        assert "text-sm" in classes
        assert "opacity-50" in classes
        assert "bg-purple-600" in button_classes({})


# =============================================================================
# Element mapping
# =============================================================================


class TestBuildElement:
    """Tests for component to element mapping."""

    @pytest.mark.unit
    def test_heading_level(self):
        """Heading level selects the tag."""
        element = build_element(ComponentNode(type="heading", props={"level": 3}), "css")
        assert element.tag == "h3"
        assert element.text == "Heading"

    @pytest.mark.unit
    def test_list_ordered(self):
        """Ordered lists use ol with one li per item."""
        node = ComponentNode(type="list", props={"ordered": True, "items": ["a", "b"]})
        element = build_element(node, "css")
        assert element.tag == "ol"
        assert [child.text for child in element.children] == ["a", "b"]

    @pytest.mark.unit
    def test_input_wrapped_in_label(self):
        """Labelled inputs are wrapped with a label element."""
        element = build_element(create_node("input"), "css")
        assert element.tag == "label"
        assert element.children[1].tag == "input"
        assert element.children[1].void

    @pytest.mark.unit
    def test_input_without_label(self):
        """Unlabelled inputs render alone."""
        element = build_element(ComponentNode(type="input", props={"label": ""}), "css")
        assert element.tag == "input"

    @pytest.mark.unit
    def test_checkbox(self):
        """Checkbox is a label wrapping a checkbox input."""
        element = build_element(create_node("checkbox"), "css")
        assert element.tag == "label"
        assert element.children[0].attrs["type"] == "checkbox"

    @pytest.mark.unit
    def test_select_options(self):
        """Select gets a placeholder option plus one per option."""
        element = build_element(create_node("select"), "css")
        select = element.children[1]
        assert select.tag == "select"
        assert len(select.children) == 4

    @pytest.mark.unit
    def test_simple_mappings(self):
        """Leaf types map to their HTML tags."""
        expected = {
            "text": "p",
            "button": "button",
            "image": "img",
            "link": "a",
            "textarea": "textarea",
            "form": "form",
            "navigation": "nav",
            "badge": "span",
            "icon": "span",
            "divider": "hr",
            "container": "div",
            "grid": "div",
            "card": "div",
        }
        for component_type, tag in expected.items():
            assert build_element(create_node(component_type), "css").tag == tag

    @pytest.mark.unit
    def test_unknown_type_fallback(self, caplog):
        """Unknown types become a div with a comment and log a warning."""
        node = ComponentNode(type="hologram", children=[ComponentNode(type="text")])
        with caplog.at_level(logging.WARNING):
            element = build_element(node, "tailwind")
        assert element.tag == "div"
        assert element.children[0].comment == "Unknown component: hologram"
        assert element.children[1].tag == "p"
        assert "hologram" in caplog.text

    @pytest.mark.unit
    def test_tailwind_vs_inline(self):
        """Styling decides between classes and inline styles."""
        node = ComponentNode(type="container", props={"padding": "8px"})
        assert "p-2" in build_element(node, "tailwind").classes
        assert build_element(node, "css").style["padding"] == "8px"


# =============================================================================
# Options and registry
# =============================================================================


class TestExportOptions:
    """Tests for ExportOptions."""

    @pytest.mark.unit
    def test_defaults(self):
        """Defaults come from configuration."""
        options = ExportOptions()
        assert options.format == "code"
        assert options.framework == "react"
        assert options.styling == "tailwind"
        assert options.typescript is False
        assert options.include_imports is True
        assert options.component_name == "GeneratedComponent"

    @pytest.mark.unit
    def test_env_defaults(self, monkeypatch):
        """Environment overrides the default framework."""
        monkeypatch.setenv("BUILDER_FRAMEWORK", "vue")
        monkeypatch.setenv("BUILDER_TYPESCRIPT", "yes")
        options = ExportOptions()
        assert options.framework == "vue"
        assert options.typescript is True

    @pytest.mark.unit
    def test_enum_and_case_normalised(self):
        """Enum members and mixed case are normalised to values."""
        options = ExportOptions(format=ExportFormat.JSON, framework="React", styling="CSS")
        assert options.format == "json"
        assert options.framework == "react"
        assert options.styling == "css"

    @pytest.mark.unit
    def test_component_name_must_be_identifier(self):
        """Invalid component names are rejected."""
        with pytest.raises(PydanticValidationError):
            ExportOptions(component_name="my component")


class TestRendererRegistry:
    """Tests for renderer registration."""

    @pytest.mark.unit
    def test_list_frameworks(self):
        """All built-in frameworks are registered."""
        assert set(list_frameworks()) >= {"react", "vue", "angular", "svelte"}

    @pytest.mark.unit
    def test_get_renderer(self):
        """Renderers are looked up case-insensitively."""
        assert get_renderer("VUE").name == "vue"

    @pytest.mark.unit
    def test_unknown_framework(self):
        """Unknown frameworks raise ExportError listing choices."""
        with pytest.raises(ExportError, match="Available: .*react"):
            get_renderer("ember")

    @pytest.mark.unit
    def test_export_unknown_framework(self, sample_tree):
        """Export raises for unknown frameworks."""
        with pytest.raises(ExportError):
            export_components(sample_tree, ExportOptions(framework="ember"))

    @pytest.mark.unit
    def test_factory_export_unknown_framework(self, sample_tree):
        """Factory export raises for unknown frameworks even without imports."""
        options = ExportOptions(format="factory", framework="qwik", include_imports=False)
        with pytest.raises(ExportError, match="qwik"):
            export_components(sample_tree, options)

    @pytest.mark.unit
    def test_export_unknown_format(self, sample_tree):
        """Export raises for unknown formats."""
        with pytest.raises(ExportError, match="factory, code, json"):
            export_components(sample_tree, ExportOptions(format="yaml"))

    @pytest.mark.unit
    def test_export_unknown_styling(self, sample_tree):
        """Export raises for unknown styling systems."""
        with pytest.raises(ValueError):
            export_components(sample_tree, ExportOptions(styling="less"))


# =============================================================================
# Factory and JSON
# =============================================================================


class TestJsLiteral:
    """Tests for the JavaScript literal serializer."""

    @pytest.mark.unit
    def test_nested(self):
        """Objects and arrays expand one entry per line."""
        literal = to_js_literal({"a": 1, "b-c": "x'y", "d": [True, None]})
        assert literal == "{\n  a: 1,\n  'b-c': 'x\\'y',\n  d: [\n    true,\n    null,\n  ],\n}"

    @pytest.mark.unit
    def test_empty(self):
        """Empty containers stay on one line."""
        assert to_js_literal({}) == "{}"
        assert to_js_literal([]) == "[]"


class TestFactoryExport:
    """Tests for factory configuration export."""

    @pytest.fixture
    def options(self):
        return ExportOptions(format="factory", framework="react", styling="css")

    @pytest.mark.unit
    def test_config_shape(self, options):
        """Config names framework and styling and lists components."""
        node = ComponentNode(type="heading", name="Title", props={"text": "Hi"})
        output = export_components([node], options)
        assert "const componentConfig = {" in output
        assert "framework: 'react'," in output
        assert "styling: 'css'," in output
        assert "type: 'heading'," in output
        assert "name: 'Title'," in output
        assert "children: []," in output

    @pytest.mark.unit
    def test_props_are_resolved(self, options):
        """Registry defaults are merged under the node's props."""
        node = ComponentNode(type="heading", props={"text": "Hi"})
        output = export_components([node], options)
        assert "text: 'Hi'," in output
        assert "fontSize: '24px'," in output

    @pytest.mark.unit
    def test_prologue(self, options):
        """Factory usage follows the config."""
        output = export_components([], options)
        lines = output.splitlines()
        assert lines[0] == "import React from 'react';"
        assert "import { UniversalFactory } from '@revolutionary/ui-factory';" in lines
        assert "const factory = new UniversalFactory();" in lines
        assert "export default generatedComponent;" in lines

    @pytest.mark.unit
    def test_typescript(self):
        """TypeScript output annotates the config."""
        options = ExportOptions(format="factory", typescript=True, include_imports=False)
        output = export_components([], options)
        assert output.startswith("import { UniversalFactory, type ComponentConfig }")
        assert "const componentConfig: ComponentConfig = {" in output

    @pytest.mark.unit
    def test_deterministic(self, options, sample_tree):
        """Equal inputs give byte-identical output."""
        assert export_components(sample_tree, options) == export_components(sample_tree, options)


class TestJsonExport:
    """Tests for JSON export and import."""

    @pytest.mark.unit
    def test_round_trip(self, sample_tree):
        """Export then import preserves type, props and children."""
        text = export_components(sample_tree, ExportOptions(format="json"))
        imported = import_components(text)
        assert strip_ids(imported) == strip_ids(sample_tree)
        assert [n.to_dict() for n in imported] == [n.to_dict() for n in sample_tree]

    @pytest.mark.unit
    def test_regenerate_ids(self, sample_tree):
        """Imported ids can be refreshed."""
        text = export_components(sample_tree, ExportOptions(format="json"))
        imported = import_components(text, regenerate_ids=True)
        assert strip_ids(imported) == strip_ids(sample_tree)
        assert not set(collect_ids(imported)) & set(collect_ids(sample_tree))

    @pytest.mark.unit
    def test_single_object(self):
        """A single node object is accepted."""
        imported = import_components('{"id": "a", "type": "text"}')
        assert [n.id for n in imported] == ["a"]

    @pytest.mark.unit
    def test_duplicate_ids_rejected(self):
        """Repeated ids anywhere in the document are refused."""
        text = json.dumps(
            [
                {"id": "a", "type": "text"},
                {"id": "box", "type": "container", "children": [{"id": "a", "type": "text"}]},
            ]
        )
        with pytest.raises(ComponentImportError, match="a"):
            import_components(text)

    @pytest.mark.unit
    def test_duplicate_ids_regenerated(self):
        """Regenerating ids makes a repeated-id document importable."""
        text = json.dumps([{"id": "a", "type": "text"}, {"id": "a", "type": "text"}])
        imported = import_components(text, regenerate_ids=True)
        ids = collect_ids(imported)
        assert len(set(ids)) == 2

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        ["not json", "42", '[{"id": "a"}]', '[{"type": "text", "children": "nope"}]'],
    )
    def test_malformed_input(self, text):
        """Malformed documents raise ComponentImportError."""
        with pytest.raises(ComponentImportError):
            import_components(text)


# =============================================================================
# Whitespace and end to end
# =============================================================================


class TestNormalizeWhitespace:
    """Tests for the prettier whitespace pass."""

    @pytest.mark.unit
    def test_normalise(self):
        """Trailing spaces go, blank runs collapse, one final newline."""
        assert normalize_whitespace("a  \n\n\n\nb\n\n\n") == "a\n\nb\n"

    @pytest.mark.unit
    def test_prettier_flag(self, sample_tree):
        """Prettier output has no trailing spaces or blank runs."""
        output = export_components(sample_tree, ExportOptions(framework="vue", prettier=True))
        assert "\n\n\n" not in output
        assert all(line == line.rstrip() for line in output.splitlines())
        assert output.endswith("\n") and not output.endswith("\n\n")


class TestPascalCase:
    """Tests for pascal_case."""

    @pytest.mark.unit
    def test_pascal_case(self):
        """Display names become identifiers."""
        assert pascal_case("hero section") == "HeroSection"
        assert pascal_case("3 cards") == "Component3Cards"


class TestEndToEnd:
    """Tests spanning the store and the exporter."""

    @pytest.mark.unit
    def test_heading_then_button_react_css(self):
        """Edits made through the store appear in order in the export."""
        store = BuilderStore()
        store.dispatch(AddComponent(type="heading"))
        store.dispatch(AddComponent(type="button"))
        heading_id = store.components[0].id
        store.dispatch(UpdateComponent(id=heading_id, props={"text": "Hi"}))

        output = export_components(
            store.components, ExportOptions(framework="react", styling="css")
        )
        assert output.index("<h2") < output.index("Hi") < output.index("<button")

    @pytest.mark.unit
    def test_tailwind_padding_bucket_in_output(self):
        """7px and 8px padding export the same class."""
        options = ExportOptions(framework="react", styling="tailwind")
        seven = export_components(
            [ComponentNode(type="container", props={"padding": "7px"})], options
        )
        eight = export_components(
            [ComponentNode(type="container", props={"padding": "8px"})], options
        )
        assert 'className="flex flex-col p-2 gap-4"' in seven
        assert seven == eight
