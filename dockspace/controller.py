"""
Layout Controller

Session state of the dock workspace: the four dock areas plus the drag
state, and every operation that rewrites them.
"""

from __future__ import annotations
import dataclasses
import logging
from typing import Any, Mapping, Optional, Tuple, Union

from . import topics
from .config import DockConfig
from .defaults import DEFAULT_LAYOUT
from .drag_manager import DragManager
from .layouts import (
    add_tab_to_group,
    collect_groups,
    drop_position_to_split,
    find_group_location,
    find_split,
    find_tab_location,
    ratio_from_delta,
    remove_group_from_areas,
    remove_tab_from_group,
    replace_node,
    resized_area_size,
    set_group_active_tab,
    set_split_ratio_in_tree,
    set_tab_dirty,
    split_group_node,
    update_area,
    update_group_in_areas,
)
from .layouts.geometry import clamp
from .objects import (
    LAYOUT_VERSION,
    DockArea,
    DockSlot,
    DragState,
    DropPosition,
    Tab,
    TabGroupNode,
    WorkspaceLayout,
    gen_id,
)
from .serialization import LayoutFormatError, layout_from_dict, layout_to_dict

logger = logging.getLogger(__name__)

SlotLike = Union[DockSlot, str]


class LayoutController:
    """
    Owns the dock areas for one application session.

    The controller is the only writer of the layout trees. Every operation
    runs to completion synchronously and replaces the areas with a new
    snapshot; readers only ever see committed snapshots.

    Operations addressed at a missing tab, group or split are no-ops. Each
    operation returns True when it changed the areas, in which case
    LAYOUT_CHANGED is published with the new snapshot.

    This component subscribes to the layout command events:
    - CMD_OPEN_TAB: Open or activate a tab
    - CMD_CLOSE_TAB: Close a tab
    - CMD_SET_AREA_VISIBLE / CMD_TOGGLE_AREA: Show or hide a dock area
    - CMD_OPEN_PANEL: Show an area and open a panel tab in it
    - CMD_RESET_LAYOUT: Reinstall the default layout
    """

    def __init__(
        self,
        bus=None,
        config: Optional[DockConfig] = None,
        layout: Optional[WorkspaceLayout] = None,
        subscribe_commands: bool = True,
    ):
        """Initialize layout controller.

        Args:
            bus: Event bus instance (Pypubsub), defaults to the global publisher
            config: Engine configuration
            layout: Initial layout, defaults to DEFAULT_LAYOUT
            subscribe_commands: Whether to handle cmd.* topics
        """
        if bus is None:
            from pubsub import pub

            bus = pub
        self.bus = bus
        self.config = config or DockConfig()
        if layout is None:
            self._areas: Tuple[DockArea, ...] = DEFAULT_LAYOUT.areas
        else:
            self._areas = layout_from_dict(layout_to_dict(layout)).areas
        self.drag = DragManager(bus=bus)
        self._subscribed = False

        if subscribe_commands:
            self._setup_subscriptions()

    def _command_handlers(self):
        return (
            (self._on_open_tab, topics.CMD_OPEN_TAB),
            (self._on_close_tab, topics.CMD_CLOSE_TAB),
            (self._on_set_area_visible, topics.CMD_SET_AREA_VISIBLE),
            (self._on_toggle_area, topics.CMD_TOGGLE_AREA),
            (self._on_open_panel, topics.CMD_OPEN_PANEL),
            (self._on_reset_layout, topics.CMD_RESET_LAYOUT),
        )

    def _setup_subscriptions(self):
        """Subscribe to command events the controller handles."""
        for handler, topic in self._command_handlers():
            self.bus.subscribe(handler, topic)
        self._subscribed = True

    def unsubscribe_commands(self):
        """Stop handling command events."""
        if not self._subscribed:
            return
        for handler, topic in self._command_handlers():
            self.bus.unsubscribe(handler, topic)
        self._subscribed = False

    # Queries

    @property
    def areas(self) -> Tuple[DockArea, ...]:
        """Current dock areas, in slot order."""
        return self._areas

    @property
    def drag_state(self) -> DragState:
        return self.drag.state

    def area(self, slot: SlotLike) -> DockArea:
        slot = DockSlot(slot)
        for area in self._areas:
            if area.slot == slot:
                return area
        raise KeyError(slot)

    def find_tab(self, tab_id: str) -> Optional[Tab]:
        loc = find_tab_location(self._areas, tab_id)
        return loc[1].get_tab(tab_id) if loc else None

    def find_group(self, group_id: str) -> Optional[TabGroupNode]:
        loc = find_group_location(self._areas, group_id)
        return loc[1] if loc else None

    def tab_count(self) -> int:
        """Number of live tabs across all areas."""
        return sum(
            len(group.tabs) for area in self._areas for group in collect_groups(area.root)
        )

    # Commit

    def _commit(self, areas: Tuple[DockArea, ...], reason: str) -> bool:
        """Install a new snapshot and notify subscribers if anything changed."""
        if areas == self._areas:
            logger.debug("%s: no change", reason)
            return False
        self._areas = areas
        self.bus.sendMessage(
            topics.LAYOUT_CHANGED, reason=reason, layout=self.serialize_layout()
        )
        return True

    @staticmethod
    def _detach(
        areas: Tuple[DockArea, ...], area: DockArea, group: TabGroupNode, tab_id: str
    ) -> Tuple[DockArea, ...]:
        """Remove a tab from its group, dropping the group once it is empty."""
        updated = remove_tab_from_group(group, tab_id)
        if updated.is_empty:
            return remove_group_from_areas(areas, area.slot, group.id)
        return update_group_in_areas(areas, group.id, lambda g: updated)

    # Tab actions

    def open_tab(self, tab: Tab, prefer_slot: Optional[SlotLike] = None) -> bool:
        """
        Open a tab, or activate it if a tab with its id is already open.

        A new tab goes into the first tab group of ``prefer_slot``. If that
        area is empty, a new group holding only this tab becomes its root
        and the area is made visible.
        """
        slot = DockSlot(prefer_slot) if prefer_slot is not None else self.config.default_slot

        existing = find_tab_location(self._areas, tab.id)
        if existing is not None:
            _, group = existing
            areas = update_group_in_areas(
                self._areas, group.id, lambda g: set_group_active_tab(g, tab.id)
            )
            return self._commit(areas, "open_tab")

        groups = collect_groups(self.area(slot).root)
        if groups:
            target = groups[0]
            areas = update_group_in_areas(
                self._areas, target.id, lambda g: add_tab_to_group(g, tab)
            )
            group_id = target.id
        else:
            new_group = TabGroupNode(id=gen_id("tg"), tabs=(tab,), active_tab_id=tab.id)
            areas = update_area(
                self._areas,
                slot,
                lambda a: dataclasses.replace(a, root=new_group, visible=True),
            )
            group_id = new_group.id

        changed = self._commit(areas, "open_tab")
        self.bus.sendMessage(topics.TAB_OPENED, tab=tab, group_id=group_id, slot=slot)
        return changed

    def close_tab(self, tab_id: str) -> bool:
        """Close a tab. Its group is removed from the tree once empty."""
        loc = find_tab_location(self._areas, tab_id)
        if loc is None:
            logger.debug("close_tab: no tab %s", tab_id)
            return False
        area, group = loc
        tab = group.get_tab(tab_id)

        changed = self._commit(self._detach(self._areas, area, group, tab_id), "close_tab")
        self.bus.sendMessage(topics.TAB_CLOSED, tab=tab)
        return changed

    def set_active_tab(self, group_id: str, tab_id: str) -> bool:
        """Activate a tab of a group. Tabs not in the group are ignored."""
        areas = update_group_in_areas(
            self._areas, group_id, lambda g: set_group_active_tab(g, tab_id)
        )
        return self._commit(areas, "set_active_tab")

    def mark_tab_dirty(self, tab_id: str, dirty: bool) -> bool:
        """Set the unsaved-changes flag of a tab."""
        loc = find_tab_location(self._areas, tab_id)
        if loc is None:
            return False
        _, group = loc
        areas = update_group_in_areas(
            self._areas, group.id, lambda g: set_tab_dirty(g, tab_id, dirty)
        )
        return self._commit(areas, "mark_tab_dirty")

    # Move / split / dock

    def move_tab(self, tab_id: str, target_group_id: str) -> bool:
        """Move a tab into another group, appending and activating it there.

        Nothing happens if the tab already lives in the target group or the
        target group does not exist.
        """
        loc = find_tab_location(self._areas, tab_id)
        if loc is None:
            return False
        area, source = loc
        if source.id == target_group_id:
            return False
        if find_group_location(self._areas, target_group_id) is None:
            logger.debug("move_tab: target group %s is gone", target_group_id)
            return False

        tab = source.get_tab(tab_id)
        areas = self._detach(self._areas, area, source, tab_id)
        areas = update_group_in_areas(
            areas, target_group_id, lambda g: add_tab_to_group(g, tab)
        )
        return self._commit(areas, "move_tab")

    def drop_tab(
        self, tab_id: str, target_group_id: str, position: Union[DropPosition, str]
    ) -> bool:
        """
        Drop a tab onto a group.

        ``center`` merges the tab into the target group. The other positions
        split the target group and put the tab in a new group on that side.
        If the target group is gone once the tab has left its source group,
        the drop is abandoned and the tab stays where it was.
        """
        placement = drop_position_to_split(position)
        if placement is None:
            return self.move_tab(tab_id, target_group_id)

        loc = find_tab_location(self._areas, tab_id)
        if loc is None:
            return False
        area, source = loc
        tab = source.get_tab(tab_id)

        areas = self._detach(self._areas, area, source, tab_id)
        target = find_group_location(areas, target_group_id)
        if target is None:
            logger.debug(
                "drop_tab: target group %s is gone, keeping %s in %s",
                target_group_id,
                tab_id,
                source.id,
            )
            return False
        target_area, target_group = target

        split = split_group_node(
            target_group, placement.direction, placement.new_group_first, tab
        )
        areas = update_area(
            areas,
            target_area.slot,
            lambda a: dataclasses.replace(
                a, root=replace_node(a.root, target_group_id, split)
            ),
        )
        return self._commit(areas, "drop_tab")

    # Area resize

    def set_area_size(self, slot: SlotLike, size: float) -> bool:
        """Set the width (left/right) or height (bottom) of an area.

        Negative sizes are clamped to 0.
        """
        size = max(0, size)
        areas = update_area(
            self._areas, DockSlot(slot), lambda a: dataclasses.replace(a, size=size)
        )
        return self._commit(areas, "set_area_size")

    def set_area_visible(self, slot: SlotLike, visible: bool) -> bool:
        areas = update_area(
            self._areas, DockSlot(slot), lambda a: dataclasses.replace(a, visible=visible)
        )
        return self._commit(areas, "set_area_visible")

    def toggle_area(self, slot: SlotLike) -> bool:
        return self.set_area_visible(slot, not self.area(slot).visible)

    def resize_area(self, slot: SlotLike, delta: float) -> bool:
        """Apply a resizer drag of ``delta`` pixels, within the slot's limits."""
        slot = DockSlot(slot)
        size = resized_area_size(
            slot, self.area(slot).size, delta, self.config.limits_for(slot)
        )
        return self.set_area_size(slot, size)

    def set_split_ratio(self, node_id: str, ratio: float) -> bool:
        """Set the ratio of the split ``node_id``, clamped into [0, 1]."""
        ratio = clamp(ratio, 0.0, 1.0)

        def _update(area: DockArea) -> DockArea:
            if area.root is None:
                return area
            root = set_split_ratio_in_tree(area.root, node_id, ratio)
            return area if root is area.root else dataclasses.replace(area, root=root)

        return self._commit(tuple(_update(a) for a in self._areas), "set_split_ratio")

    def resize_split(
        self,
        node_id: str,
        delta: float,
        extent: float,
        start_ratio: Optional[float] = None,
    ) -> bool:
        """Apply a split resizer drag of ``delta`` pixels over ``extent`` pixels.

        ``start_ratio`` is the ratio when the drag began, defaulting to the
        split's current ratio.
        """
        if start_ratio is None:
            split = next(
                (s for s in (find_split(a.root, node_id) for a in self._areas) if s),
                None,
            )
            if split is None:
                return False
            start_ratio = split.split_ratio
        ratio = ratio_from_delta(start_ratio, delta, extent, self.config.split_ratio_range)
        return self.set_split_ratio(node_id, ratio)

    def open_panel(
        self,
        slot: SlotLike,
        content_type: str,
        title: str,
        icon: Optional[str] = None,
    ) -> bool:
        """Show a dock area and open the panel tab ``tab-<content_type>`` in it."""
        shown = self.set_area_visible(slot, True)
        tab = Tab(id=f"tab-{content_type}", title=title, content_type=content_type, icon=icon)
        opened = self.open_tab(tab, slot)
        return shown or opened

    # Drag

    def start_drag(self, tab: Tab, source_group_id: str):
        self.drag.start_drag(tab, source_group_id)

    def update_drag_pos(self, x: float, y: float) -> bool:
        return self.drag.update_drag_pos(x, y)

    def end_drag(self) -> Optional[Tab]:
        return self.drag.end_drag()

    def complete_drop(
        self, target_group_id: str, position: Union[DropPosition, str]
    ) -> bool:
        """Drop the dragged tab onto a group, then end the drag.

        An unknown position ends the drag without dropping.
        """
        if not self.drag.is_active():
            return False
        tab = self.drag.tab
        try:
            try:
                position = DropPosition(position)
            except ValueError:
                logger.debug("complete_drop: unknown drop position %r", position)
                return False
            if (
                position == DropPosition.CENTER
                and target_group_id == self.drag.source_group_id
            ):
                return False
            return self.drop_tab(tab.id, target_group_id, position)
        finally:
            self.drag.end_drag()

    # Serialization

    def serialize_layout(self) -> WorkspaceLayout:
        """Snapshot of the four dock areas."""
        return WorkspaceLayout(version=LAYOUT_VERSION, areas=self._areas)

    def restore_layout(self, layout: Union[WorkspaceLayout, Mapping[str, Any]]) -> bool:
        """
        Replace the areas with a persisted layout.

        The layout is validated as a whole first. An unknown version or a
        malformed document is rejected and the current areas stay untouched.
        """
        data = layout_to_dict(layout) if isinstance(layout, WorkspaceLayout) else layout
        try:
            restored = layout_from_dict(data)
        except LayoutFormatError as e:
            logger.warning("Rejected layout: %s", e)
            return False
        return self._commit(restored.areas, "restore_layout")

    def reset_layout(self) -> bool:
        """Reinstall the default layout."""
        return self._commit(DEFAULT_LAYOUT.areas, "reset_layout")

    # Command event handlers

    def _on_open_tab(self, tab, slot):
        """Handle CMD_OPEN_TAB command."""
        self.open_tab(tab, slot)

    def _on_close_tab(self, tab_id):
        """Handle CMD_CLOSE_TAB command."""
        self.close_tab(tab_id)

    def _on_set_area_visible(self, slot, visible):
        """Handle CMD_SET_AREA_VISIBLE command."""
        self.set_area_visible(slot, visible)

    def _on_toggle_area(self, slot):
        """Handle CMD_TOGGLE_AREA command."""
        self.toggle_area(slot)

    def _on_open_panel(self, slot, content_type, title, icon):
        """Handle CMD_OPEN_PANEL command."""
        self.open_panel(slot, content_type, title, icon)

    def _on_reset_layout(self):
        """Handle CMD_RESET_LAYOUT command."""
        self.reset_layout()
