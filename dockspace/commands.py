"""
Dockspace Commands

Builders for tabs with deterministic ids, and a small text command language
that publishes command events for the layout controller.

Collaborators that want a panel visible build a tab here and open it. The
same logical document always maps to the same tab id, so reopening it
activates the existing tab instead of duplicating it.
"""

from __future__ import annotations
import logging
import posixpath
import shlex
from typing import Any, Dict, List, Optional

from . import topics
from .defaults import DIFF_TAB, EXPLORER_TAB, LOGS_TAB
from .objects import DockSlot, Tab

logger = logging.getLogger(__name__)


def file_tab(path: str, icon: Optional[str] = None) -> Tab:
    """Tab for an editor on ``path``."""
    if icon is None:
        icon = "helmRelease" if "Chart.yaml" in path else "fileYaml"
    return Tab(
        id=f"file-{path}",
        title=posixpath.basename(path) or path,
        content_type="file",
        file_path=path,
        icon=icon,
    )


def placeholder_file_tab(node_id: str, label: str) -> Tab:
    """Editor tab for a resource that has no file yet."""
    return Tab(
        id=f"file-placeholder-{node_id}",
        title=f"{label}.yaml",
        content_type="file",
        icon="fileYaml",
    )


def panel_tab(content_type: str, title: str, icon: Optional[str] = None) -> Tab:
    """Singleton tab for a tool panel (explorer, inspector, logs, ...)."""
    return Tab(id=f"tab-{content_type}", title=title, content_type=content_type, icon=icon)


def _show_panel(tab: Tab, slot: DockSlot) -> List[tuple]:
    return [
        (topics.CMD_OPEN_TAB, {"tab": tab, "slot": slot}),
        (topics.CMD_SET_AREA_VISIBLE, {"slot": slot, "visible": True}),
    ]


# Commands that take no arguments: name -> [(topic, event data), ...]
COMMAND_MAP: Dict[str, List[tuple]] = {
    "reset-layout": [(topics.CMD_RESET_LAYOUT, {})],
    "logs": _show_panel(LOGS_TAB, DockSlot.BOTTOM),
    "diff": _show_panel(DIFF_TAB, DockSlot.BOTTOM),
    "explorer": _show_panel(EXPLORER_TAB, DockSlot.LEFT),
    "properties": _show_panel(
        Tab(id="tab-inspector", title="Properties", content_type="inspector", icon="inspector"),
        DockSlot.RIGHT,
    ),
}


def _fail(error: str) -> List[Dict[str, Any]]:
    return [{"success": False, "error": error}]


def run_command(command: str, bus=None) -> List[Dict[str, Any]]:
    """Execute a command by publishing it to the event bus.

    Commands:
        open-file <path> [slot]
        close-tab <tab-id>
        show|hide|toggle <slot>
        open-panel <slot> <content-type> <title...>
        reset-layout | logs | diff | explorer | properties

    Args:
        command: Command string to execute
        bus: Event bus instance (Pypubsub), defaults to the global publisher

    Returns:
        List with command result
    """
    if bus is None:
        from pubsub import pub

        bus = pub

    try:
        parts = shlex.split(command)
    except ValueError as e:
        return _fail(f"Cannot parse command: {e}")
    if not parts:
        return _fail("Empty command")

    name, args = parts[0], parts[1:]

    if name in COMMAND_MAP and not args:
        for topic, data in COMMAND_MAP[name]:
            logger.debug("Publishing %s for command: %s", topic, command)
            bus.sendMessage(topic, **data)
        return [{"success": True}]

    try:
        if name == "open-file" and 1 <= len(args) <= 2:
            slot = DockSlot(args[1]) if len(args) == 2 else DockSlot.CENTER
            bus.sendMessage(topics.CMD_OPEN_TAB, tab=file_tab(args[0]), slot=slot)
        elif name == "close-tab" and len(args) == 1:
            bus.sendMessage(topics.CMD_CLOSE_TAB, tab_id=args[0])
        elif name in ("show", "hide") and len(args) == 1:
            bus.sendMessage(
                topics.CMD_SET_AREA_VISIBLE,
                slot=DockSlot(args[0]),
                visible=name == "show",
            )
        elif name == "toggle" and len(args) == 1:
            bus.sendMessage(topics.CMD_TOGGLE_AREA, slot=DockSlot(args[0]))
        elif name == "open-panel" and len(args) >= 3:
            bus.sendMessage(
                topics.CMD_OPEN_PANEL,
                slot=DockSlot(args[0]),
                content_type=args[1],
                title=" ".join(args[2:]),
                icon=None,
            )
        else:
            return _fail(f"Unknown command: {command}")
    except ValueError as e:
        return _fail(str(e))

    return [{"success": True}]
