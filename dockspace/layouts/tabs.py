"""
Tab Group Operations

Add and remove tabs while keeping the active tab pointing at a live tab.
"""

from __future__ import annotations
import dataclasses

from ..objects import Tab, TabGroupNode


def add_tab_to_group(group: TabGroupNode, tab: Tab) -> TabGroupNode:
    """Append ``tab`` and make it active.

    A tab whose id is already in the group is only re-activated.
    """
    if group.has_tab(tab.id):
        if group.active_tab_id == tab.id:
            return group
        return dataclasses.replace(group, active_tab_id=tab.id)
    return dataclasses.replace(group, tabs=group.tabs + (tab,), active_tab_id=tab.id)


def remove_tab_from_group(group: TabGroupNode, tab_id: str) -> TabGroupNode:
    """Remove a tab, moving the active selection if it pointed at it.

    The new active tab is the one now at the removed tab's index, clamped to
    the shorter sequence, or None when the group is empty.
    """
    idx = group.index_of(tab_id)
    if idx < 0:
        return group

    tabs = group.tabs[:idx] + group.tabs[idx + 1 :]
    active_tab_id = group.active_tab_id
    if active_tab_id == tab_id:
        active_tab_id = tabs[min(idx, len(tabs) - 1)].id if tabs else None
    return dataclasses.replace(group, tabs=tabs, active_tab_id=active_tab_id)


def set_group_active_tab(group: TabGroupNode, tab_id: str) -> TabGroupNode:
    """Activate a tab of the group. Unknown tab ids leave the group as-is."""
    if group.active_tab_id == tab_id or not group.has_tab(tab_id):
        return group
    return dataclasses.replace(group, active_tab_id=tab_id)


def set_tab_dirty(group: TabGroupNode, tab_id: str, dirty: bool) -> TabGroupNode:
    """Set the dirty flag of one tab in the group."""
    tab = group.get_tab(tab_id)
    if tab is None or tab.is_dirty == dirty:
        return group
    tabs = tuple(
        dataclasses.replace(t, is_dirty=dirty) if t.id == tab_id else t
        for t in group.tabs
    )
    return dataclasses.replace(group, tabs=tabs)
