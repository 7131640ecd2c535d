"""
Unit tests for tab group operations.
"""

import pytest
from dockspace.layouts.tabs import (
    add_tab_to_group,
    remove_tab_from_group,
    set_group_active_tab,
    set_tab_dirty,
)


@pytest.fixture
def abc(make_tab, make_group):
    """Group with tabs a, b, c and b active."""
    return make_group("g1", make_tab("a"), make_tab("b"), make_tab("c"), active="b")


@pytest.mark.unit
class TestAddTab:
    """Test adding tabs to a group."""

    def test_add_appends_and_activates(self, abc, make_tab):
        """New tabs go last and become active."""
        result = add_tab_to_group(abc, make_tab("d"))

        assert [t.id for t in result.tabs] == ["a", "b", "c", "d"]
        assert result.active_tab_id == "d"
        assert len(abc.tabs) == 3

    def test_add_existing_only_activates(self, abc, make_tab):
        """Adding a tab id twice never duplicates it."""
        result = add_tab_to_group(abc, make_tab("a"))

        assert [t.id for t in result.tabs] == ["a", "b", "c"]
        assert result.active_tab_id == "a"

    def test_add_active_is_noop(self, abc, make_tab):
        """Re-adding the active tab changes nothing."""
        assert add_tab_to_group(abc, make_tab("b")) is abc


@pytest.mark.unit
class TestRemoveTab:
    """Test removing tabs from a group."""

    def test_remove_active_selects_same_index(self, abc):
        """The tab sliding into the removed index becomes active."""
        result = remove_tab_from_group(abc, "b")

        assert [t.id for t in result.tabs] == ["a", "c"]
        assert result.active_tab_id == "c"

    def test_remove_last_active_selects_new_last(self, abc):
        """Removing the active last tab activates the new last tab."""
        group = set_group_active_tab(abc, "c")

        result = remove_tab_from_group(group, "c")

        assert result.active_tab_id == "b"

    def test_remove_inactive_keeps_active(self, abc):
        """Removing another tab does not move the selection."""
        result = remove_tab_from_group(abc, "a")

        assert result.active_tab_id == "b"

    def test_remove_only_tab(self, make_tab, make_group):
        """A group losing its only tab is empty with no active tab."""
        group = make_group("g1", make_tab("a"))

        result = remove_tab_from_group(group, "a")

        assert result.is_empty
        assert result.active_tab_id is None

    def test_remove_unknown_tab(self, abc):
        """Unknown tab ids leave the group as-is."""
        assert remove_tab_from_group(abc, "zz") is abc


@pytest.mark.unit
class TestTabState:
    """Test active and dirty state changes."""

    def test_set_active(self, abc):
        assert set_group_active_tab(abc, "c").active_tab_id == "c"

    def test_set_active_unknown_ignored(self, abc):
        """Activating a tab outside the group is ignored."""
        assert set_group_active_tab(abc, "zz") is abc

    def test_set_dirty(self, abc):
        """Only the addressed tab changes."""
        result = set_tab_dirty(abc, "a", True)

        assert result.get_tab("a").is_dirty is True
        assert result.get_tab("b").is_dirty is None
        assert set_tab_dirty(result, "a", True) is result
        assert set_tab_dirty(abc, "zz", True) is abc
