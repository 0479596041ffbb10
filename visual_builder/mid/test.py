"""Unit tests for the MID layer."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from visual_builder.mid import (
    ROOT_ID,
    ComponentNode,
    Position,
    build_type_index,
    clone_subtree,
    collect_ids,
    contains_node,
    count_descendants,
    create_node,
    export_json_schema,
    find_index,
    find_node,
    find_parent_id,
    get_children,
    is_valid,
    iter_nodes,
    regenerate_ids,
    validate_tree,
)


class TestComponentNode:
    """Tests for the ComponentNode model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Minimal node gets an id, empty props and no children."""
        node = ComponentNode(type="container")
        assert node.id
        assert node.props == {}
        assert node.children == []
        assert node.position is None

    @pytest.mark.unit
    def test_ids_are_unique(self):
        """Generated ids differ between nodes."""
        ids = {ComponentNode(type="text").id for _ in range(100)}
        assert len(ids) == 100

    @pytest.mark.unit
    def test_frozen(self):
        """Nodes cannot be reassigned in place."""
        node = ComponentNode(type="text")
        with pytest.raises(PydanticValidationError):
            node.name = "changed"

    @pytest.mark.unit
    def test_type_is_open(self):
        """Unknown types are accepted by the model."""
        node = ComponentNode(type="hologram")
        assert node.type == "hologram"

    @pytest.mark.unit
    def test_to_dict_shape(self, sample_tree):
        """Persisted shape carries the structural fields only."""
        data = sample_tree[0].to_dict()
        assert set(data) == {"id", "type", "name", "props", "children"}
        assert data["children"][0]["type"] == "heading"

    @pytest.mark.unit
    def test_to_dict_includes_presentation_when_set(self):
        """Presentation state is emitted when present."""
        node = ComponentNode(type="text", position=Position(x=1, y=2), locked=True)
        data = node.to_dict()
        assert data["position"] == {"x": 1, "y": 2}
        assert data["locked"] is True
        assert "visible" not in data


class TestFactory:
    """Tests for node creation and cloning."""

    @pytest.mark.unit
    def test_create_node_uses_defaults(self):
        """New node copies the registry defaults and name."""
        node = create_node("heading")
        assert node.name == "Heading"
        assert node.props["level"] == 2
        assert node.children == []

    @pytest.mark.unit
    def test_create_node_overrides(self):
        """Explicit props merge over defaults."""
        node = create_node("heading", name="Title", props={"level": 1})
        assert node.name == "Title"
        assert node.props["level"] == 1
        assert node.props["text"] == "Heading"

    @pytest.mark.unit
    def test_create_node_unknown_type(self):
        """Unknown type yields None."""
        assert create_node("hologram") is None

    @pytest.mark.unit
    def test_clone_subtree(self, sample_tree):
        """Clone keeps structure, renames the root and refreshes every id."""
        original = sample_tree[0]
        clone = clone_subtree(original)

        assert clone.name == f"{original.name} Copy"
        assert clone.children[0].name == original.children[0].name
        assert count_descendants(clone) == count_descendants(original)
        assert not set(collect_ids([clone])) & set(collect_ids([original]))

    @pytest.mark.unit
    def test_clone_does_not_alias_props(self):
        """Cloned list props are independent copies."""
        original = create_node("list")
        clone = clone_subtree(original)
        clone.props["items"].append("Item 4")
        assert original.props["items"] == ["Item 1", "Item 2", "Item 3"]

    @pytest.mark.unit
    def test_regenerate_ids(self, sample_tree):
        """Regenerated forest keeps names and changes ids."""
        fresh = regenerate_ids(sample_tree)
        assert [n.name for n in iter_nodes(fresh)] == [
            n.name for n in iter_nodes(sample_tree)
        ]
        assert not set(collect_ids(fresh)) & set(collect_ids(sample_tree))


class TestQueries:
    """Tests for tree query helpers."""

    @pytest.mark.unit
    def test_iter_nodes_preorder(self, sample_tree):
        """Depth-first pre-order traversal."""
        assert [n.id for n in iter_nodes(sample_tree)] == [
            "page",
            "title",
            "row",
            "ok",
            "cancel",
            "footer",
        ]

    @pytest.mark.unit
    def test_find_node(self, sample_tree):
        """Finds nested nodes and misses cleanly."""
        assert find_node(sample_tree, "cancel").type == "button"
        assert find_node(sample_tree, "missing") is None

    @pytest.mark.unit
    def test_find_parent_id(self, sample_tree):
        """Parent lookup distinguishes root from absent."""
        assert find_parent_id(sample_tree, "page") == ROOT_ID
        assert find_parent_id(sample_tree, "ok") == "row"
        assert find_parent_id(sample_tree, "missing") is None

    @pytest.mark.unit
    def test_find_index(self, sample_tree):
        """Sibling index lookup."""
        assert find_index(sample_tree, "page") == 0
        assert find_index(sample_tree, "footer") == 1
        assert find_index(sample_tree, "cancel") == 1
        assert find_index(sample_tree, "missing") == -1

    @pytest.mark.unit
    def test_get_children(self, sample_tree):
        """Child lists for root, nodes and unknown parents."""
        assert [n.id for n in get_children(sample_tree, None)] == ["page", "footer"]
        assert [n.id for n in get_children(sample_tree, "row")] == ["ok", "cancel"]
        assert get_children(sample_tree, "missing") is None

    @pytest.mark.unit
    def test_contains_node(self, sample_tree):
        """Descendant test includes the node itself."""
        page = sample_tree[0]
        assert contains_node(page, "page")
        assert contains_node(page, "ok")
        assert not contains_node(page, "footer")

    @pytest.mark.unit
    def test_build_type_index(self, sample_tree):
        """Id to type map covers the whole forest."""
        index = build_type_index(sample_tree)
        assert index["row"] == "container"
        assert len(index) == 6


class TestValidateTree:
    """Tests for structural validation."""

    @pytest.mark.unit
    def test_valid_tree(self, sample_tree):
        """Well-formed tree has no errors."""
        assert validate_tree(sample_tree) == []
        assert is_valid(sample_tree)

    @pytest.mark.unit
    def test_duplicate_ids(self):
        """Duplicate ids are reported once per id."""
        forest = [
            ComponentNode(id="a", type="text"),
            ComponentNode(id="a", type="text"),
        ]
        errors = validate_tree(forest)
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"

    @pytest.mark.unit
    def test_leaf_with_children(self):
        """Children under a non-accepting type are flagged."""
        node = ComponentNode(
            id="btn", type="button", children=[ComponentNode(type="text")]
        )
        errors = validate_tree([node])
        assert errors[0].error_type == "constraint_violation"
        assert errors[0].node_id == "btn"

    @pytest.mark.unit
    def test_disallowed_child_type(self):
        """Card rejects children outside its allow-list."""
        node = ComponentNode(
            id="card",
            type="card",
            children=[ComponentNode(type="text"), ComponentNode(type="container")],
        )
        errors = validate_tree([node])
        assert len(errors) == 1
        assert "container" in errors[0].message

    @pytest.mark.unit
    def test_unknown_type_lenient_by_default(self):
        """Unknown types only fail in strict mode."""
        forest = [ComponentNode(id="x", type="hologram")]
        assert is_valid(forest)
        errors = validate_tree(forest, strict_types=True)
        assert errors[0].error_type == "unknown_type"


class TestJsonSchema:
    """Tests for schema export."""

    @pytest.mark.unit
    def test_schema_has_structural_fields(self):
        """Schema declares the persisted fields."""
        schema = export_json_schema()
        for field_name in ("id", "type", "name", "props", "children"):
            assert field_name in schema["properties"]
        assert "type" in schema["required"]
