"""
Layout Tree Primitives

Pure functions over the split/tab-group tree. Every rewrite returns a new
tree that shares all untouched subtrees with the input; only the nodes on
the path from the root to the changed node are copied.
"""

from __future__ import annotations
import dataclasses
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ..objects import DockArea, DockSlot, LayoutNode, SplitNode, TabGroupNode

GroupLocation = Tuple[DockArea, TabGroupNode]


def iter_nodes(root: Optional[LayoutNode]) -> Iterator[LayoutNode]:
    """Yield every node of the tree, depth first, parents before children."""
    if root is None:
        return
    yield root
    if isinstance(root, SplitNode):
        yield from iter_nodes(root.first)
        yield from iter_nodes(root.second)


def find_group(root: Optional[LayoutNode], group_id: str) -> Optional[TabGroupNode]:
    """Find a tab group by id anywhere in the tree."""
    if root is None:
        return None
    if isinstance(root, TabGroupNode):
        return root if root.id == group_id else None
    return find_group(root.first, group_id) or find_group(root.second, group_id)


def find_split(root: Optional[LayoutNode], split_id: str) -> Optional[SplitNode]:
    """Find a split node by id anywhere in the tree."""
    for node in iter_nodes(root):
        if isinstance(node, SplitNode) and node.id == split_id:
            return node
    return None


def replace_node(
    root: LayoutNode, target_id: str, replacement: LayoutNode
) -> LayoutNode:
    """Return a tree with the node ``target_id`` substituted by ``replacement``.

    The input is returned as-is when the id is not found.
    """
    if root.id == target_id:
        return replacement
    if isinstance(root, TabGroupNode):
        return root

    first = replace_node(root.first, target_id, replacement)
    second = replace_node(root.second, target_id, replacement)
    if first is root.first and second is root.second:
        return root
    return dataclasses.replace(root, first=first, second=second)


def remove_group(root: LayoutNode, group_id: str) -> Optional[LayoutNode]:
    """Remove a tab group leaf, collapsing splits left with a single child.

    A split that loses one child is replaced by the surviving child; a split
    that loses both becomes None. Returns None if the tree becomes empty.
    """
    if isinstance(root, TabGroupNode):
        return None if root.id == group_id else root

    first = remove_group(root.first, group_id)
    second = remove_group(root.second, group_id)
    if first is None and second is None:
        return None
    if first is None:
        return second
    if second is None:
        return first
    if first is root.first and second is root.second:
        return root
    return dataclasses.replace(root, first=first, second=second)


def collect_groups(root: Optional[LayoutNode]) -> List[TabGroupNode]:
    """All tab groups in left-to-right, depth-first order."""
    return [node for node in iter_nodes(root) if isinstance(node, TabGroupNode)]


def map_groups(
    root: LayoutNode, fn: Callable[[TabGroupNode], TabGroupNode]
) -> LayoutNode:
    """Apply ``fn`` to every tab group, keeping nodes ``fn`` leaves alone."""
    if isinstance(root, TabGroupNode):
        return fn(root)
    first = map_groups(root.first, fn)
    second = map_groups(root.second, fn)
    if first is root.first and second is root.second:
        return root
    return dataclasses.replace(root, first=first, second=second)


def set_split_ratio_in_tree(
    root: LayoutNode, split_id: str, ratio: float
) -> LayoutNode:
    """Return a tree where the split ``split_id`` has the given ratio."""
    if isinstance(root, TabGroupNode):
        return root
    if root.id == split_id:
        if root.split_ratio == ratio:
            return root
        return dataclasses.replace(root, split_ratio=ratio)
    first = set_split_ratio_in_tree(root.first, split_id, ratio)
    second = set_split_ratio_in_tree(root.second, split_id, ratio)
    if first is root.first and second is root.second:
        return root
    return dataclasses.replace(root, first=first, second=second)


# Area helpers


def update_area(
    areas: Iterable[DockArea], slot: DockSlot, updater: Callable[[DockArea], DockArea]
) -> Tuple[DockArea, ...]:
    """Apply ``updater`` to the area for ``slot``."""
    return tuple(updater(a) if a.slot == slot else a for a in areas)


def update_group_in_areas(
    areas: Iterable[DockArea],
    group_id: str,
    updater: Callable[[TabGroupNode], TabGroupNode],
) -> Tuple[DockArea, ...]:
    """Rewrite the tab group ``group_id`` wherever it lives."""
    result = []
    for area in areas:
        group = find_group(area.root, group_id)
        if group is None:
            result.append(area)
            continue
        updated = updater(group)
        if updated is group:
            result.append(area)
        else:
            root = replace_node(area.root, group_id, updated)
            result.append(dataclasses.replace(area, root=root))
    return tuple(result)


def remove_group_from_areas(
    areas: Iterable[DockArea], slot: DockSlot, group_id: str
) -> Tuple[DockArea, ...]:
    """Remove a tab group from the tree of one area."""

    def _remove(area: DockArea) -> DockArea:
        if area.root is None:
            return area
        return dataclasses.replace(area, root=remove_group(area.root, group_id))

    return update_area(areas, slot, _remove)


def find_tab_location(
    areas: Iterable[DockArea], tab_id: str
) -> Optional[GroupLocation]:
    """Find the area and tab group that own a tab."""
    for area in areas:
        for group in collect_groups(area.root):
            if group.has_tab(tab_id):
                return area, group
    return None


def find_group_location(
    areas: Iterable[DockArea], group_id: str
) -> Optional[GroupLocation]:
    """Find the area owning a tab group, together with the group."""
    for area in areas:
        group = find_group(area.root, group_id)
        if group is not None:
            return area, group
    return None
