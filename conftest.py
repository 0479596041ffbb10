"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env, strips BUILDER_* overrides)
- Shared component tree fixtures
- Store and layout fixtures for reducer and drag-drop tests
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from visual_builder.dragdrop import StaticLayout
    from visual_builder.mid import ComponentNode
    from visual_builder.store import BuilderStore

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_builder_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove BUILDER_* variables so tests see configured defaults."""
    for name in list(os.environ):
        if name.startswith("BUILDER_"):
            monkeypatch.delenv(name, raising=False)


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def sample_tree() -> list[ComponentNode]:
    """Create a small page forest for testing.

    Returns:
        [page(container: title, row(container: ok, cancel)), footer(text)]
    """
    from visual_builder.mid import ComponentNode

    return [
        ComponentNode(
            id="page",
            type="container",
            name="Page",
            props={"padding": "16px", "gap": "8px"},
            children=[
                ComponentNode(
                    id="title",
                    type="heading",
                    name="Title",
                    props={"text": "Welcome", "level": 1},
                ),
                ComponentNode(
                    id="row",
                    type="container",
                    name="Actions",
                    props={"flexDirection": "row"},
                    children=[
                        ComponentNode(
                            id="ok",
                            type="button",
                            name="OK",
                            props={"text": "OK", "variant": "primary"},
                        ),
                        ComponentNode(
                            id="cancel",
                            type="button",
                            name="Cancel",
                            props={"text": "Cancel", "variant": "secondary"},
                        ),
                    ],
                ),
            ],
        ),
        ComponentNode(
            id="footer",
            type="text",
            name="Footer",
            props={"text": "Copyright"},
        ),
    ]


@pytest.fixture
def sample_store(sample_tree: list[ComponentNode]) -> BuilderStore:
    """Create a store whose present tree is ``sample_tree``."""
    from visual_builder.store import BuilderStore, create_initial_state

    return BuilderStore(create_initial_state(sample_tree))


@pytest.fixture
def sample_layout() -> StaticLayout:
    """Create measured rects for ``sample_tree``.

    The page is laid out top to bottom. The buttons sit side by side in
    the row and the containers report a content box.
    """
    from visual_builder.dragdrop import Rect, StaticLayout

    return StaticLayout(
        rects={
            "page": Rect(0, 0, 400, 300),
            "title": Rect(0, 0, 400, 40),
            "row": Rect(0, 60, 400, 60),
            "ok": Rect(0, 60, 100, 40),
            "cancel": Rect(120, 60, 100, 40),
            "footer": Rect(0, 320, 400, 40),
        },
        containers={
            "page": Rect(0, 0, 400, 320),
            "row": Rect(0, 60, 400, 80),
        },
    )
