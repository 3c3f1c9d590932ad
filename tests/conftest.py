"""Shared test fixtures for boxlayout."""

import pytest

from boxlayout.core.box import Box, Direction


@pytest.fixture
def editor_tree():
    """A typical editor screen: status bar on top, sidebar + main, command line."""
    return Box.row(
        Box.view("status", size=1),
        Box.column(
            Box.view("sidebar", size=20),
            Box.view("main", weight=1),
            weight=1,
        ),
        Box.view("command", size=1),
    )


@pytest.fixture
def responsive_tree():
    """Side-by-side panes when wide, stacked when narrow."""
    return Box.conditional(
        lambda width, height: Direction.ROW if width < 40 else Direction.COLUMN,
        [Box.view("left", weight=1), Box.view("right", weight=1)],
    )
