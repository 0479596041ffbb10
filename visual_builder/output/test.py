"""Tests for output module."""

import pytest

from visual_builder.exporters import ExportError, ExportOptions
from visual_builder.mid import ComponentNode

from .lib import BuilderOutput, OutputGenerator, file_extension_for, format_component_tree


class TestFormatComponentTree:
    """Tests for format_component_tree function."""

    @pytest.mark.unit
    def test_full_tree(self, sample_tree):
        """Forest renders with box-drawing connectors."""
        assert format_component_tree(sample_tree) == "\n".join(
            [
                "Page [container]",
                '├── Title [heading, h1, "Welcome"]',
                "└── Actions [container, row]",
                '    ├── OK [button, "OK"]',
                '    └── Cancel [button, "Cancel"]',
                'Footer [text, "Copyright"]',
            ]
        )

    @pytest.mark.unit
    def test_empty_forest(self):
        """An empty forest has a placeholder line."""
        assert format_component_tree([]) == "(empty)"

    @pytest.mark.unit
    def test_id_when_unnamed(self):
        """Unnamed nodes fall back to their id."""
        node = ComponentNode(id="n1", type="divider")
        assert format_component_tree([node]) == "n1 [divider]"

    @pytest.mark.unit
    def test_grid_columns(self):
        """Grids show their column count."""
        node = ComponentNode(id="g", type="grid", name="Grid", props={"columns": 3})
        assert format_component_tree([node]) == "Grid [grid, 3 cols]"

    @pytest.mark.unit
    def test_long_text_truncated(self):
        """Long key props are shortened."""
        node = ComponentNode(id="t", type="text", name="Body", props={"text": "x" * 80})
        line = format_component_tree([node])
        assert line.endswith('..."]')
        assert len(line) < 60

    @pytest.mark.unit
    def test_nested_prefix(self):
        """Deeper levels keep the vertical guide for non-last siblings."""
        leaf = ComponentNode(id="leaf", type="text", name="Leaf", props={"text": "a"})
        inner = ComponentNode(id="inner", type="container", name="Inner", children=[leaf])
        tail = ComponentNode(id="tail", type="divider", name="Tail")
        root = ComponentNode(id="root", type="container", name="Root", children=[inner, tail])
        lines = format_component_tree([root]).splitlines()
        assert lines[2] == '│   └── Leaf [text, "a"]'
        assert lines[3] == "└── Tail [divider]"


class TestFileExtension:
    """Tests for file_extension_for."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({"format": "json"}, ".json"),
            ({"format": "factory"}, ".js"),
            ({"format": "factory", "typescript": True}, ".ts"),
            ({"framework": "react", "typescript": True}, ".tsx"),
            ({"framework": "vue"}, ".vue"),
            ({"framework": "angular"}, ".ts"),
            ({"framework": "svelte"}, ".svelte"),
        ],
    )
    def test_extensions(self, kwargs, expected):
        """Extensions follow format, framework and TypeScript flag."""
        assert file_extension_for(ExportOptions(**kwargs)) == expected


class TestOutputGenerator:
    """Tests for OutputGenerator class."""

    @pytest.mark.unit
    def test_generate_react(self, sample_tree):
        """Generating returns both tree and code."""
        gen = OutputGenerator(ExportOptions(framework="react", styling="tailwind"))
        output = gen.generate(sample_tree)
        assert isinstance(output, BuilderOutput)
        assert output.text_tree.startswith("Page [container]")
        assert "export const GeneratedComponent" in output.code
        assert output.framework == "react"
        assert output.file_extension == ".jsx"
        assert output.components == sample_tree

    @pytest.mark.unit
    def test_options_override(self, sample_tree):
        """Per-call options win over the defaults."""
        gen = OutputGenerator(ExportOptions(framework="react"))
        output = gen.generate(sample_tree, ExportOptions(framework="vue"))
        assert output.code.startswith("<template>")
        assert output.file_extension == ".vue"

    @pytest.mark.unit
    def test_unknown_framework(self, sample_tree):
        """Unknown frameworks raise ExportError."""
        with pytest.raises(ExportError):
            OutputGenerator().generate(sample_tree, ExportOptions(framework="ember"))
