"""Built-in layout template library.

Templates hold id-less blueprints. Every call to ``instantiate_template``
builds a new component forest with fresh ids, so the same template can
be loaded into a canvas any number of times.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from visual_builder.mid import ComponentNode, generate_id


@dataclass(frozen=True)
class Blueprint:
    """An id-less component description.

    Attributes:
        type: Registry type tag.
        name: Node label.
        props: Props assigned to the instantiated node.
        children: Nested blueprints, in rendering order.
    """

    type: str
    name: str
    props: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Blueprint, ...] = ()

    def instantiate(self) -> ComponentNode:
        """Build a ComponentNode subtree with fresh ids."""
        return ComponentNode(
            id=generate_id(),
            type=self.type,
            name=self.name,
            props={k: list(v) if isinstance(v, list) else v for k, v in self.props.items()},
            children=[child.instantiate() for child in self.children],
        )


def _bp(type_: str, name: str, props: Mapping[str, Any] | None = None, *children: Blueprint):
    return Blueprint(type=type_, name=name, props=dict(props or {}), children=children)


@dataclass(frozen=True)
class LayoutTemplate:
    """A named, categorised component forest ready to load.

    Attributes:
        id: Stable template identifier.
        name: Display name.
        description: Short description shown in the gallery.
        category: Gallery category.
        icon: Gallery icon glyph.
        tags: Search keywords.
        components: Top-level blueprints.
    """

    id: str
    name: str
    description: str
    category: str
    icon: str
    tags: tuple[str, ...] = ()
    components: tuple[Blueprint, ...] = ()

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over name, description and tags."""
        needle = query.lower()
        return (
            needle in self.name.lower()
            or needle in self.description.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the template metadata to a plain dict for listing."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "icon": self.icon,
            "tags": list(self.tags),
        }


# =============================================================================
# Built-in templates
# =============================================================================

_HERO_SECTION = LayoutTemplate(
    id="hero-section",
    name="Hero Section",
    description="Classic hero section with heading, description, and CTA",
    category="Landing Page",
    icon="🏔️",
    tags=("hero", "landing", "cta", "marketing"),
    components=(
        _bp(
            "container",
            "Hero Container",
            {
                "padding": "64px",
                "backgroundColor": "#f3f4f6",
                "display": "flex",
                "flexDirection": "column",
                "gap": "32px",
                "textAlign": "center",
            },
            _bp(
                "heading",
                "Hero Title",
                {
                    "text": "Welcome to Revolutionary UI",
                    "level": 1,
                    "fontSize": "48px",
                    "fontWeight": "bold",
                    "color": "#111827",
                },
            ),
            _bp(
                "text",
                "Hero Description",
                {
                    "text": (
                        "Build amazing UI components with 60-95% less code. "
                        "Start creating beautiful interfaces today."
                    ),
                    "fontSize": "20px",
                    "color": "#6b7280",
                    "lineHeight": 1.6,
                },
            ),
            _bp(
                "container",
                "Button Group",
                {
                    "display": "flex",
                    "flexDirection": "row",
                    "gap": "16px",
                    "justifyContent": "center",
                },
                _bp(
                    "button",
                    "Get Started",
                    {"text": "Get Started", "variant": "primary", "size": "large"},
                ),
                _bp(
                    "button",
                    "Learn More",
                    {"text": "Learn More", "variant": "outline", "size": "large"},
                ),
            ),
        ),
    ),
)


def _feature_card(name: str, title: str, description: str) -> Blueprint:
    return _bp(
        "card",
        name,
        {"title": title, "description": description, "shadow": True, "padding": "24px"},
    )


_FEATURE_GRID = LayoutTemplate(
    id="feature-grid",
    name="Feature Grid",
    description="3-column feature grid with icons",
    category="Landing Page",
    icon="⚡",
    tags=("features", "grid", "marketing", "showcase"),
    components=(
        _bp(
            "container",
            "Features Section",
            {"padding": "64px", "backgroundColor": "transparent"},
            _bp(
                "heading",
                "Features Title",
                {
                    "text": "Features",
                    "level": 2,
                    "fontSize": "36px",
                    "fontWeight": "bold",
                    "textAlign": "center",
                    "color": "#111827",
                },
            ),
            _bp(
                "grid",
                "Feature Grid",
                {"columns": 3, "gap": "32px", "padding": "32px 0"},
                _feature_card(
                    "Feature 1",
                    "Fast Development",
                    "Build components 60-95% faster with our factory system",
                ),
                _feature_card(
                    "Feature 2",
                    "Framework Agnostic",
                    "Works with React, Vue, Angular, and more",
                ),
                _feature_card(
                    "Feature 3",
                    "AI Powered",
                    "Generate components from natural language",
                ),
            ),
        ),
    ),
)


def _field(name: str, label: str, placeholder: str, input_type: str) -> Blueprint:
    return _bp(
        "input",
        name,
        {"label": label, "placeholder": placeholder, "type": input_type, "required": True},
    )


def _form_panel(name: str, max_width: str, title: Blueprint, fields: Blueprint, submit: Blueprint):
    return _bp(
        "container",
        name,
        {
            "padding": "32px",
            "backgroundColor": "#ffffff",
            "borderRadius": "8px",
            "shadow": True,
            "maxWidth": max_width,
            "margin": "0 auto",
        },
        title,
        fields,
        submit,
    )


_CONTACT_FORM = LayoutTemplate(
    id="contact-form",
    name="Contact Form",
    description="Simple contact form with name, email, and message",
    category="Forms",
    icon="📧",
    tags=("form", "contact", "email", "validation"),
    components=(
        _form_panel(
            "Form Container",
            "500px",
            _bp(
                "heading",
                "Form Title",
                {
                    "text": "Contact Us",
                    "level": 2,
                    "fontSize": "24px",
                    "fontWeight": "bold",
                    "color": "#111827",
                },
            ),
            _bp(
                "container",
                "Form Fields",
                {"display": "flex", "flexDirection": "column", "gap": "16px", "padding": "16px 0"},
                _field("Name Input", "Name", "Your name", "text"),
                _field("Email Input", "Email", "your@email.com", "email"),
                _field("Message Input", "Message", "Your message...", "text"),
            ),
            _bp(
                "button",
                "Submit Button",
                {"text": "Send Message", "variant": "primary", "size": "medium", "fullWidth": True},
            ),
        ),
    ),
)

_LOGIN_FORM = LayoutTemplate(
    id="login-form",
    name="Login Form",
    description="User login form with email and password",
    category="Forms",
    icon="🔐",
    tags=("form", "login", "authentication", "auth"),
    components=(
        _form_panel(
            "Login Container",
            "400px",
            _bp(
                "heading",
                "Login Title",
                {
                    "text": "Sign In",
                    "level": 2,
                    "fontSize": "24px",
                    "fontWeight": "bold",
                    "textAlign": "center",
                    "color": "#111827",
                },
            ),
            _bp(
                "container",
                "Form Fields",
                {"display": "flex", "flexDirection": "column", "gap": "16px", "padding": "24px 0"},
                _field("Email Input", "Email", "your@email.com", "email"),
                _field("Password Input", "Password", "••••••••", "password"),
            ),
            _bp(
                "button",
                "Login Button",
                {"text": "Sign In", "variant": "primary", "size": "medium", "fullWidth": True},
            ),
        ),
    ),
)


def _stat_card(index: int, title: str, value: str) -> Blueprint:
    return _bp(
        "card",
        f"Stat Card {index}",
        {
            "title": title,
            "description": value,
            "shadow": True,
            "padding": "24px",
            "borderRadius": "8px",
        },
    )


_STATS_CARDS = LayoutTemplate(
    id="stats-cards",
    name="Stats Cards",
    description="Dashboard statistics cards",
    category="Dashboard",
    icon="📊",
    tags=("dashboard", "stats", "metrics", "analytics"),
    components=(
        _bp(
            "grid",
            "Stats Grid",
            {"columns": 4, "gap": "24px", "padding": "0"},
            _stat_card(1, "Total Users", "12,345"),
            _stat_card(2, "Revenue", "$54,321"),
            _stat_card(3, "Growth", "+23.5%"),
            _stat_card(4, "Active Now", "1,234"),
        ),
    ),
)


def _nav_link(text: str) -> Blueprint:
    return _bp("text", f"{text} Link", {"text": text, "fontSize": "16px", "color": "#374151"})


_NAVBAR = LayoutTemplate(
    id="navbar",
    name="Navigation Bar",
    description="Horizontal navigation with logo and links",
    category="Navigation",
    icon="🧭",
    tags=("navigation", "navbar", "header", "menu"),
    components=(
        _bp(
            "container",
            "Navbar",
            {
                "padding": "16px 32px",
                "backgroundColor": "#ffffff",
                "borderBottom": "1px solid #e5e7eb",
                "display": "flex",
                "flexDirection": "row",
                "justifyContent": "space-between",
                "alignItems": "center",
            },
            _bp(
                "heading",
                "Logo",
                {
                    "text": "Your Logo",
                    "level": 3,
                    "fontSize": "20px",
                    "fontWeight": "bold",
                    "color": "#111827",
                },
            ),
            _bp(
                "container",
                "Nav Links",
                {"display": "flex", "flexDirection": "row", "gap": "32px", "alignItems": "center"},
                _nav_link("Home"),
                _nav_link("About"),
                _nav_link("Contact"),
                _bp(
                    "button",
                    "CTA Button",
                    {"text": "Get Started", "variant": "primary", "size": "small"},
                ),
            ),
        ),
    ),
)


TEMPLATES: dict[str, LayoutTemplate] = {
    template.id: template
    for template in (
        _HERO_SECTION,
        _FEATURE_GRID,
        _CONTACT_FORM,
        _LOGIN_FORM,
        _STATS_CARDS,
        _NAVBAR,
    )
}


# =============================================================================
# Lookup
# =============================================================================


def list_templates() -> list[LayoutTemplate]:
    """All built-in templates, in library order."""
    return list(TEMPLATES.values())


def get_template(template_id: str) -> LayoutTemplate | None:
    return TEMPLATES.get(template_id)


def get_templates_by_category(category: str) -> list[LayoutTemplate]:
    """Templates in a category; ``"all"`` returns every template."""
    if category.lower() == "all":
        return list_templates()
    return [t for t in TEMPLATES.values() if t.category == category]


def get_template_categories() -> list[str]:
    """Distinct categories, in first-seen order."""
    return list(dict.fromkeys(t.category for t in TEMPLATES.values()))


def get_template_tags() -> list[str]:
    """Distinct tags across the library, sorted."""
    return sorted({tag for t in TEMPLATES.values() for tag in t.tags})


def search_templates(query: str) -> list[LayoutTemplate]:
    """Templates whose name, description or tags contain ``query``.

    An empty query matches every template.
    """
    return [t for t in TEMPLATES.values() if t.matches(query.strip())]


def instantiate_template(template: LayoutTemplate | str) -> list[ComponentNode]:
    """Build a fresh component forest from a template or template id.

    Args:
        template: A LayoutTemplate, or the id of a built-in one.

    Returns:
        Top-level nodes with newly generated ids, or an empty list when
        the id is unknown.
    """
    if isinstance(template, str):
        resolved = get_template(template)
        if resolved is None:
            return []
        template = resolved
    return [blueprint.instantiate() for blueprint in template.components]


__all__ = [
    "Blueprint",
    "LayoutTemplate",
    "TEMPLATES",
    "list_templates",
    "get_template",
    "get_templates_by_category",
    "get_template_categories",
    "get_template_tags",
    "search_templates",
    "instantiate_template",
]
