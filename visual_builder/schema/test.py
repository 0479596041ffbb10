"""Unit tests for the component registry."""

import pytest

from .lib import (
    COMPONENT_REGISTRY,
    ComponentCategory,
    ComponentDefinition,
    PropKind,
    can_accept_child,
    get_categories,
    get_default_props,
    get_definition,
    list_by_category,
    list_component_types,
    validate_props,
    visible_props,
)


class TestRegistryCompleteness:
    """Every registered definition is well formed."""

    @pytest.mark.unit
    def test_keys_match_types(self):
        """Registry keys equal their definition's type tag."""
        for key, definition in COMPONENT_REGISTRY.items():
            assert key == definition.type

    @pytest.mark.unit
    def test_expected_types_registered(self):
        """Core palette types are present."""
        for component_type in (
            "container",
            "grid",
            "heading",
            "text",
            "button",
            "input",
            "image",
            "card",
            "list",
        ):
            assert component_type in COMPONENT_REGISTRY

    @pytest.mark.unit
    def test_descriptor_names_unique(self):
        """No definition declares the same prop twice."""
        for definition in COMPONENT_REGISTRY.values():
            names = [d.name for d in definition.prop_schema]
            assert len(names) == len(set(names)), definition.type

    @pytest.mark.unit
    def test_defaults_pass_own_schema(self):
        """Default props validate against their own schema."""
        for definition in COMPONENT_REGISTRY.values():
            assert validate_props(definition.type, definition.default_props) == []

    @pytest.mark.unit
    def test_child_types_reference_registered_types(self):
        """Child allow-lists only name registered types."""
        for definition in COMPONENT_REGISTRY.values():
            for child_type in definition.child_types or ():
                assert child_type in COMPONENT_REGISTRY


class TestLookup:
    """Tests for registry lookup functions."""

    @pytest.mark.unit
    def test_get_definition(self):
        """Known type returns its definition."""
        definition = get_definition("button")
        assert isinstance(definition, ComponentDefinition)
        assert definition.name == "Button"
        assert definition.category == ComponentCategory.FORM

    @pytest.mark.unit
    def test_get_definition_unknown_returns_none(self):
        """Unknown type is a miss, not an error."""
        assert get_definition("hologram") is None

    @pytest.mark.unit
    def test_list_by_category(self):
        """Category filter accepts enum or string."""
        layout = [d.type for d in list_by_category(ComponentCategory.LAYOUT)]
        assert "container" in layout
        assert "grid" in layout
        assert [d.type for d in list_by_category("Layout")] == layout
        assert list_by_category("Nonexistent") == []

    @pytest.mark.unit
    def test_get_categories_distinct(self):
        """Categories are distinct and cover every definition."""
        categories = get_categories()
        assert len(categories) == len(set(categories))
        assert {d.category.value for d in COMPONENT_REGISTRY.values()} == set(
            categories
        )

    @pytest.mark.unit
    def test_list_component_types(self):
        """All registered tags are listed."""
        assert list_component_types() == list(COMPONENT_REGISTRY)

    @pytest.mark.unit
    def test_default_props_are_copies(self):
        """Mutating returned defaults never touches the registry."""
        props = get_default_props("list")
        props["items"].append("Item 4")
        props["ordered"] = True
        fresh = get_default_props("list")
        assert fresh["items"] == ["Item 1", "Item 2", "Item 3"]
        assert fresh["ordered"] is False

    @pytest.mark.unit
    def test_default_props_unknown(self):
        """Unknown type has no defaults."""
        assert get_default_props("hologram") == {}


class TestChildRules:
    """Tests for child-acceptance predicates."""

    @pytest.mark.unit
    def test_container_accepts_anything(self):
        """Container without allow-list accepts any child."""
        assert can_accept_child("container", "heading")
        assert can_accept_child("container", "container")
        assert can_accept_child("container", "hologram")

    @pytest.mark.unit
    def test_leaf_rejects_children(self):
        """Non-container types reject all children."""
        assert not can_accept_child("button", "text")
        assert not can_accept_child("heading", "text")

    @pytest.mark.unit
    def test_card_allow_list(self):
        """Card only accepts its declared child types."""
        assert can_accept_child("card", "button")
        assert can_accept_child("card", "text")
        assert can_accept_child("card", "image")
        assert not can_accept_child("card", "container")

    @pytest.mark.unit
    def test_unknown_parent_rejects(self):
        """Unknown parent type rejects."""
        assert not can_accept_child("hologram", "text")


class TestPropSchema:
    """Tests for descriptors, visibility and validation."""

    @pytest.mark.unit
    def test_condition_hides_direction(self):
        """flexDirection is only visible for flex containers."""
        flex = [d.name for d in visible_props("container", {"display": "flex"})]
        grid = [d.name for d in visible_props("container", {"display": "grid"})]
        assert "flexDirection" in flex
        assert "flexDirection" not in grid

    @pytest.mark.unit
    def test_visible_props_unknown_type(self):
        """Unknown type has no editable props."""
        assert visible_props("hologram", {}) == []

    @pytest.mark.unit
    def test_get_prop(self):
        """Descriptor lookup by name."""
        descriptor = get_definition("grid").get_prop("columns")
        assert descriptor.kind == PropKind.NUMBER
        assert descriptor.min == 1
        assert descriptor.max == 12
        assert get_definition("grid").get_prop("nope") is None

    @pytest.mark.unit
    def test_number_bounds(self):
        """Numbers outside min/max are rejected."""
        errors = validate_props("grid", {"columns": 13})
        assert [e.prop for e in errors] == ["columns"]
        assert validate_props("grid", {"columns": 12}) == []

    @pytest.mark.unit
    def test_select_options(self):
        """Select values must be one of the options."""
        assert validate_props("button", {"variant": "ghost"}) == []
        errors = validate_props("button", {"variant": "neon"})
        assert errors[0].prop == "variant"
        assert errors[0].value == "neon"

    @pytest.mark.unit
    def test_boolean_kind(self):
        """Boolean props reject strings."""
        assert validate_props("button", {"disabled": "yes"})[0].prop == "disabled"

    @pytest.mark.unit
    def test_open_props_accepted(self):
        """Undeclared props and unknown types are not validated."""
        assert validate_props("button", {"dataTestId": 5}) == []
        assert validate_props("hologram", {"anything": object()}) == []

    @pytest.mark.unit
    def test_to_dict(self):
        """Definition exports to a plain dict."""
        data = get_definition("card").to_dict()
        assert data["type"] == "card"
        assert data["category"] == "Data Display"
        assert data["child_types"] == ["button", "text", "image"]
        assert set(data) >= {"type", "accepts_children", "child_types"}
        assert "parent_types" not in data
        assert {"name": "title", "label": "Title", "kind": "string"}.items() <= (
            data["props"][0].items()
        )
