"""Built-in layout templates for the visual builder."""

from .lib import (
    TEMPLATES,
    Blueprint,
    LayoutTemplate,
    get_template,
    get_template_categories,
    get_template_tags,
    get_templates_by_category,
    instantiate_template,
    list_templates,
    search_templates,
)

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
