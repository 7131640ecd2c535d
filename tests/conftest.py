"""
Shared pytest fixtures for dockspace tests.
"""

import pytest
from pubsub import pub

from dockspace import topics
from dockspace.controller import LayoutController
from dockspace.layouts.geometry import Area
from dockspace.objects import (
    SLOT_ORDER,
    DockArea,
    DockSlot,
    SplitNode,
    Tab,
    TabGroupNode,
    WorkspaceLayout,
)
from dockspace.layouts.tree import collect_groups, iter_nodes

AREA_SIZES = {
    DockSlot.LEFT: 260,
    DockSlot.CENTER: 0,
    DockSlot.RIGHT: 300,
    DockSlot.BOTTOM: 220,
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop every bus listener a test left behind."""
    yield
    pub.unsubAll()


@pytest.fixture
def make_tab():
    """Factory fixture for creating tabs."""

    def _make(tab_id, content_type="file", **kwargs):
        return Tab(id=tab_id, title=f"{tab_id}.yaml", content_type=content_type, **kwargs)

    return _make


@pytest.fixture
def make_group():
    """Factory fixture for tab groups; the first tab is active by default."""

    def _make(group_id, *tabs, active=None):
        if active is None and tabs:
            active = tabs[0].id
        return TabGroupNode(id=group_id, tabs=tabs, active_tab_id=active)

    return _make


@pytest.fixture
def make_layout():
    """Factory fixture for a layout with the given area roots.

    Keyword arguments are slot names mapped to tree roots; other areas are
    empty. ``hidden`` lists slots to create invisible.
    """

    def _make(hidden=(), **roots):
        return WorkspaceLayout(
            areas=tuple(
                DockArea(
                    slot=slot,
                    size=AREA_SIZES[slot],
                    visible=slot.value not in hidden,
                    root=roots.get(slot.value),
                )
                for slot in SLOT_ORDER
            )
        )

    return _make


@pytest.fixture
def make_controller(make_layout):
    """Factory fixture for controllers on the global publisher."""

    def _make(layout=None, **kwargs):
        return LayoutController(layout=layout or make_layout(), **kwargs)

    return _make


@pytest.fixture
def layout_events():
    """Record (reason, layout) of every LAYOUT_CHANGED event."""
    events = []

    def listener(reason, layout):
        events.append((reason, layout))

    pub.subscribe(listener, topics.LAYOUT_CHANGED)
    yield events
    pub.unsubscribe(listener, topics.LAYOUT_CHANGED)


@pytest.fixture
def standard_area():
    """Standard 1920x1080 screen."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def small_area():
    """Small 1000x600 area for tree geometry tests."""
    return Area(0, 0, 1000, 600)


@pytest.fixture
def check_tree():
    """Return a checker for structural invariants of every area tree."""
    return _check_tree


def _check_tree(areas):
    seen = set()
    for area in areas:
        for node in iter_nodes(area.root):
            assert node.id not in seen, f"duplicate node id {node.id}"
            seen.add(node.id)
            if isinstance(node, SplitNode):
                assert node.first is not None and node.second is not None
                assert 0 <= node.split_ratio <= 1
        for group in collect_groups(area.root):
            assert group.tabs, f"empty group {group.id} left in the tree"
            assert group.active_tab_id is None or group.has_tab(group.active_tab_id)
            ids = [t.id for t in group.tabs]
            assert len(ids) == len(set(ids))
