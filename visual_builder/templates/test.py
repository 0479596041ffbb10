"""Tests for the built-in template library."""

import pytest

from visual_builder.mid import collect_ids, count_descendants, validate_tree
from visual_builder.store import BuilderStore, LoadTemplate, create_initial_state

from .lib import (
    get_template,
    get_template_categories,
    get_template_tags,
    get_templates_by_category,
    instantiate_template,
    list_templates,
    search_templates,
)

BUILT_IN = ["hero-section", "feature-grid", "contact-form", "login-form", "stats-cards", "navbar"]


class TestLookup:
    """Tests for template lookup."""

    @pytest.mark.unit
    def test_library_order(self):
        """All built-in templates are listed in library order."""
        assert [t.id for t in list_templates()] == BUILT_IN

    @pytest.mark.unit
    def test_get_template(self):
        """Known ids resolve, unknown ids return None."""
        assert get_template("navbar").name == "Navigation Bar"
        assert get_template("missing") is None

    @pytest.mark.unit
    def test_categories(self):
        """Categories are distinct, in first-seen order."""
        assert get_template_categories() == ["Landing Page", "Forms", "Dashboard", "Navigation"]

    @pytest.mark.unit
    def test_by_category(self):
        """Category filter matches exactly; "all" returns everything."""
        assert [t.id for t in get_templates_by_category("Forms")] == [
            "contact-form",
            "login-form",
        ]
        assert len(get_templates_by_category("all")) == len(BUILT_IN)
        assert get_templates_by_category("Nope") == []

    @pytest.mark.unit
    def test_tags(self):
        """Tags are collected without duplicates."""
        tags = get_template_tags()
        assert "form" in tags
        assert len(tags) == len(set(tags))


class TestSearch:
    """Tests for search_templates."""

    @pytest.mark.unit
    def test_name_case_insensitive(self):
        """Names match regardless of case."""
        assert [t.id for t in search_templates("LOGIN")] == ["login-form"]

    @pytest.mark.unit
    def test_description(self):
        """Descriptions are searched."""
        assert [t.id for t in search_templates("password")] == ["login-form"]

    @pytest.mark.unit
    def test_tags(self):
        """Tags are searched."""
        assert [t.id for t in search_templates("analytics")] == ["stats-cards"]

    @pytest.mark.unit
    def test_no_match(self):
        """Unmatched queries return an empty list."""
        assert search_templates("spaceship") == []


class TestInstantiate:
    """Tests for instantiate_template."""

    @pytest.mark.unit
    @pytest.mark.parametrize("template_id", BUILT_IN)
    def test_every_template_is_valid(self, template_id):
        """Instantiated forests pass structural validation."""
        components = instantiate_template(template_id)
        assert components
        assert validate_tree(components, strict_types=True) == []

    @pytest.mark.unit
    def test_fresh_ids_per_call(self):
        """Two instantiations share no ids."""
        first = collect_ids(instantiate_template("contact-form"))
        second = collect_ids(instantiate_template("contact-form"))
        assert not set(first) & set(second)

    @pytest.mark.unit
    def test_structure(self):
        """The blueprint shape is preserved."""
        (grid,) = instantiate_template(get_template("stats-cards"))
        assert grid.type == "grid"
        assert count_descendants(grid) == 4
        assert grid.children[1].props["title"] == "Revenue"

    @pytest.mark.unit
    def test_props_not_shared(self):
        """Instances never alias blueprint props."""
        (hero,) = instantiate_template("hero-section")
        hero.props["padding"] = "0px"
        assert get_template("hero-section").components[0].props["padding"] == "64px"

    @pytest.mark.unit
    def test_unknown_id(self):
        """Unknown ids instantiate to an empty forest."""
        assert instantiate_template("missing") == []

    @pytest.mark.integration
    def test_load_into_store(self):
        """A template forest loads into the builder as an undoable step."""
        store = BuilderStore(create_initial_state())
        store.dispatch(LoadTemplate(components=instantiate_template("navbar")))
        assert store.components[0].name == "Navbar"
        assert store.can_undo
