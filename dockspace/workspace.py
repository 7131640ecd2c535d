"""
Dock Workspace

The application-shell object owning the layout controller for one session.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

from pubsub import pub

from .commands import run_command
from .config import DockConfig
from .controller import LayoutController
from .layouts.geometry import (
    Area,
    LayoutGeometry,
    calculate_tree,
    calculate_workspace,
    drop_position_at,
)
from .objects import DockSlot, DropPosition, WorkspaceLayout

logger = logging.getLogger(__name__)


class DockWorkspace:
    """
    Dockable panel workspace.

    Architecture:
    1. Event bus (Pypubsub) carries commands in and notifications out
    2. LayoutController self-subscribes to command events
    3. Hosts render from ``controller.areas`` and ``geometry()``, and persist
       by subscribing to ``topics.LAYOUT_CHANGED``
    """

    def __init__(
        self,
        config: Optional[DockConfig] = None,
        layout: Optional[WorkspaceLayout] = None,
    ):
        self.config = config or DockConfig()
        self.bus = pub

        # Setup debug event logging if enabled
        if self.config.debug:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self.controller = LayoutController(bus=pub, config=self.config, layout=layout)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        topic_name = topic.getName()
        # A full layout snapshot is too noisy for one log line
        data_str = ", ".join(
            f"{k}={v}" for k, v in kwargs.items() if k not in ("topic", "layout")
        )
        logger.debug("EVENT: %s | %s", topic_name, data_str)

    def close(self):
        """Stop handling commands and logging events."""
        if self.config.debug:
            self.bus.unsubscribe(self.debug_event_logger, pub.ALL_TOPICS)
        self.controller.unsubscribe_commands()

    def run_command(self, command: str) -> List[Dict]:
        """Execute a text command (see ``commands.run_command``)."""
        return run_command(command, bus=self.bus)

    def area_geometry(self, screen: Area) -> Dict[DockSlot, Area]:
        """Rectangle of each shown dock area."""
        return calculate_workspace(self.controller.areas, screen, self.config.gap)

    def geometry(self, screen: Area) -> Dict[str, LayoutGeometry]:
        """Rectangle of every tab group in every shown dock area."""
        result: Dict[str, LayoutGeometry] = {}
        for slot, rect in self.area_geometry(screen).items():
            area = self.controller.area(slot)
            if area.visible:
                result.update(calculate_tree(area.root, rect, self.config.gap))
        return result

    def drop_target_at(
        self, screen: Area, x: float, y: float
    ) -> Optional[Tuple[str, DropPosition]]:
        """Tab group and drop position under the pointer, if any."""
        for group_id, geom in self.geometry(screen).items():
            rect = Area(geom.x, geom.y, geom.width, geom.height)
            if rect.contains(x, y):
                position = drop_position_at(rect, x, y)
                return (group_id, position) if position is not None else None
        return None
