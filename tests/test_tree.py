"""
Unit tests for layout tree primitives.
"""

import pytest
from dockspace.layouts.tree import (
    collect_groups,
    find_group,
    find_group_location,
    find_split,
    find_tab_location,
    map_groups,
    remove_group,
    remove_group_from_areas,
    replace_node,
    set_split_ratio_in_tree,
    update_group_in_areas,
)
from dockspace.layouts.tabs import set_tab_dirty
from dockspace.objects import DockSlot, SplitDirection, SplitNode


def split(node_id, first, second, direction=SplitDirection.HORIZONTAL, ratio=0.5):
    return SplitNode(node_id, direction, ratio, first, second)


@pytest.fixture
def groups(make_tab, make_group):
    """Three single-tab groups a, b and c."""
    return (
        make_group("g-a", make_tab("a")),
        make_group("g-b", make_tab("b")),
        make_group("g-c", make_tab("c")),
    )


@pytest.mark.unit
class TestFind:
    """Test lookups in a tree."""

    def test_find_in_empty_tree(self):
        """An empty tree holds nothing."""
        assert find_group(None, "g-a") is None
        assert collect_groups(None) == []

    def test_find_nested_group(self, groups):
        """Groups are found at any depth."""
        a, b, c = groups
        root = split("s1", a, split("s2", b, c, SplitDirection.VERTICAL))

        assert find_group(root, "g-c") is c
        assert find_group(root, "s2") is None
        assert find_group(root, "missing") is None
        assert find_split(root, "s2").direction == SplitDirection.VERTICAL
        assert find_split(root, "g-a") is None

    def test_collect_groups_depth_first(self, groups):
        """Groups come back left to right."""
        a, b, c = groups
        root = split("s1", split("s2", a, b), c)

        assert [g.id for g in collect_groups(root)] == ["g-a", "g-b", "g-c"]


@pytest.mark.unit
class TestReplaceNode:
    """Test copy-on-path replacement."""

    def test_replace_nested_group(self, groups, make_tab, make_group):
        """Only the path to the replaced node is copied."""
        a, b, c = groups
        inner = split("s2", b, c)
        root = split("s1", a, inner)
        new_c = make_group("g-c2", make_tab("c2"))

        result = replace_node(root, "g-c", new_c)

        assert result is not root
        assert result.first is a
        assert result.second.first is b
        assert result.second.second is new_c
        assert result.id == "s1"
        # Input is left untouched
        assert root.second.second is c

    def test_replace_missing_returns_input(self, groups):
        """An unknown id gives back the very same tree."""
        a, b, _ = groups
        root = split("s1", a, b)

        assert replace_node(root, "missing", a) is root

    def test_replace_root(self, groups):
        """Replacing the root returns the replacement."""
        a, b, _ = groups
        assert replace_node(a, "g-a", b) is b


@pytest.mark.unit
class TestRemoveGroup:
    """Test removal with split collapse."""

    def test_remove_only_group(self, groups):
        """Removing the sole leaf empties the tree."""
        a, _, _ = groups
        assert remove_group(a, "g-a") is None

    def test_remove_collapses_split(self, groups):
        """A split left with one child is replaced by that child."""
        a, b, _ = groups
        root = split("s1", a, b)

        assert remove_group(root, "g-a") is b
        assert remove_group(root, "g-b") is a

    def test_remove_nested_collapses_inner_split(self, groups):
        """The outer split survives and adopts the inner survivor."""
        a, b, c = groups
        root = split("s1", a, split("s2", b, c))

        result = remove_group(root, "g-b")

        assert isinstance(result, SplitNode)
        assert result.id == "s1"
        assert result.first is a
        assert result.second is c

    def test_remove_sibling_of_split(self, groups):
        """Removing a leaf next to a split promotes the split intact."""
        a, b, c = groups
        inner = split("s2", b, c)
        root = split("s1", a, inner)

        assert remove_group(root, "g-a") is inner

    def test_remove_missing_keeps_tree(self, groups):
        """An unknown id leaves the tree as-is."""
        a, b, _ = groups
        root = split("s1", a, b)

        assert remove_group(root, "missing") is root


@pytest.mark.unit
class TestRewrites:
    """Test map and ratio rewrites."""

    def test_map_groups_identity(self, groups):
        """A mapper that changes nothing keeps the tree."""
        a, b, _ = groups
        root = split("s1", a, b)

        assert map_groups(root, lambda g: g) is root

    def test_map_groups_rewrites_leaves(self, groups):
        """Every leaf passes through the mapper."""
        a, b, _ = groups
        root = split("s1", a, b)

        result = map_groups(root, lambda g: set_tab_dirty(g, "b", True))

        assert result.first is a
        assert result.second.get_tab("b").is_dirty is True
        assert result.id == "s1"

    def test_set_split_ratio(self, groups):
        """Only the addressed split changes."""
        a, b, c = groups
        inner = split("s2", b, c)
        root = split("s1", a, inner)

        result = set_split_ratio_in_tree(root, "s2", 0.25)

        assert result.split_ratio == 0.5
        assert result.second.split_ratio == 0.25
        assert result.first is a
        assert set_split_ratio_in_tree(root, "s2", 0.5) is root
        assert set_split_ratio_in_tree(root, "missing", 0.1) is root


@pytest.mark.unit
class TestAreaHelpers:
    """Test lookups and rewrites across the four areas."""

    def test_find_tab_location(self, groups, make_layout):
        """Tabs and groups are located with their owning area."""
        a, b, c = groups
        layout = make_layout(left=a, center=split("s1", b, c))

        area, group = find_tab_location(layout.areas, "c")
        assert area.slot == DockSlot.CENTER
        assert group is c

        area, group = find_group_location(layout.areas, "g-a")
        assert area.slot == DockSlot.LEFT
        assert group is a

        assert find_tab_location(layout.areas, "missing") is None
        assert find_group_location(layout.areas, "missing") is None

    def test_update_group_keeps_other_areas(self, groups, make_tab, make_group, make_layout):
        """Areas not holding the group are shared."""
        a, b, _ = groups
        layout = make_layout(left=a, center=b)
        replacement = make_group("g-b", make_tab("b"), make_tab("b2"), active="b2")

        areas = update_group_in_areas(layout.areas, "g-b", lambda g: replacement)

        assert areas[0] is layout.areas[0]
        assert areas[1].root is replacement
        assert areas[2] is layout.areas[2]

    def test_remove_group_from_area(self, groups, make_layout):
        """The area becomes empty when its last group goes."""
        a, _, _ = groups
        layout = make_layout(left=a)

        areas = remove_group_from_areas(layout.areas, DockSlot.LEFT, "g-a")

        assert areas[0].root is None
        assert areas[1:] == layout.areas[1:]
