"""
Drag Manager

Tracks the transient state of a tab being dragged between tab groups.
"""

from __future__ import annotations
import logging
from typing import Optional

from . import topics
from .objects import IDLE_DRAG, DragState, Tab

logger = logging.getLogger(__name__)


class DragManager:
    """Drag state machine: Idle -> Dragging -> Idle.

    A drag is a bounded sequence of one ``start_drag``, any number of
    ``update_drag_pos`` calls and exactly one ``end_drag``. Completing a drop
    is the controller's job and must happen before ``end_drag``.
    """

    def __init__(self, bus=None):
        """Initialize drag manager.

        Args:
            bus: Event bus instance (Pypubsub), defaults to the global publisher
        """
        if bus is None:
            from pubsub import pub

            bus = pub
        self.bus = bus
        self.state: DragState = IDLE_DRAG

    def is_active(self) -> bool:
        """Check if a drag is in progress."""
        return self.state.is_dragging

    @property
    def tab(self) -> Optional[Tab]:
        return self.state.tab

    @property
    def source_group_id(self) -> Optional[str]:
        return self.state.source_group_id

    def start_drag(self, tab: Tab, source_group_id: str):
        """Start dragging ``tab`` out of the group ``source_group_id``.

        Starting while a drag is active replaces the captured tab.
        """
        if self.state.is_dragging:
            logger.debug(
                "Drag of %s replaced by drag of %s", self.state.tab.id, tab.id
            )
        self.state = DragState(
            is_dragging=True, tab=tab, source_group_id=source_group_id, x=0, y=0
        )
        self.bus.sendMessage(
            topics.DRAG_STARTED, tab=tab, source_group_id=source_group_id
        )

    def update_drag_pos(self, x: float, y: float) -> bool:
        """Update the live pointer position. Ignored while idle."""
        if not self.state.is_dragging:
            return False
        self.state = DragState(
            is_dragging=True,
            tab=self.state.tab,
            source_group_id=self.state.source_group_id,
            x=x,
            y=y,
        )
        return True

    def end_drag(self) -> Optional[Tab]:
        """Return to idle, whether or not a drop happened.

        Returns:
            The tab that was being dragged, or None if no drag was active
        """
        if not self.state.is_dragging:
            return None
        tab = self.state.tab
        self.state = IDLE_DRAG
        self.bus.sendMessage(topics.DRAG_ENDED, tab=tab)
        return tab
