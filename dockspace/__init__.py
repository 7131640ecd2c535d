"""
dockspace - dockable panel layout engine

Layout engine for an IDE-style workspace: four dock areas (left, center,
right, bottom), each holding a tree of resizable splits and tab groups.

This package provides:
- Immutable layout tree values and pure tree operations
- Tab open/close/move and drag-and-drop splitting of tab groups
- A layout controller publishing changes on a Pypubsub event bus
- Versioned snapshot and restore of the whole arrangement as JSON
- Geometry for dock areas, tab groups and drop zones

Example usage:
    from dockspace import DockWorkspace, dumps, file_tab, topics
    from pubsub import pub

    workspace = DockWorkspace()
    workspace.controller.open_tab(file_tab("/infra/apps/auth.yaml"), "center")

    def save(reason, layout):
        with open("layout.json", "w") as f:
            f.write(dumps(layout))

    pub.subscribe(save, topics.LAYOUT_CHANGED)

Or from the command line:
    python -m dockspace "toggle left" "open-file /infra/apps/auth.yaml"
"""

__version__ = "0.1.0"

from .objects import (
    LAYOUT_VERSION,
    SLOT_ORDER,
    SplitDirection,
    DockSlot,
    DropPosition,
    Tab,
    TabGroupNode,
    SplitNode,
    LayoutNode,
    DockArea,
    WorkspaceLayout,
    DragState,
    gen_id,
)

from .layouts import (
    Area,
    LayoutGeometry,
    find_group,
    replace_node,
    remove_group,
    collect_groups,
    find_tab_location,
    find_group_location,
    add_tab_to_group,
    remove_tab_from_group,
    drop_position_to_split,
    split_group_node,
    calculate_tree,
    calculate_workspace,
    drop_position_at,
)

from .config import DockConfig
from .defaults import DEFAULT_LAYOUT
from .drag_manager import DragManager
from .controller import LayoutController
from .serialization import (
    LayoutFormatError,
    UnsupportedLayoutVersion,
    layout_to_dict,
    layout_from_dict,
    dumps,
    loads,
)
from .commands import file_tab, placeholder_file_tab, panel_tab, run_command
from .workspace import DockWorkspace

from . import topics

__all__ = [
    # Version
    "__version__",
    # Objects
    "LAYOUT_VERSION",
    "SLOT_ORDER",
    "SplitDirection",
    "DockSlot",
    "DropPosition",
    "Tab",
    "TabGroupNode",
    "SplitNode",
    "LayoutNode",
    "DockArea",
    "WorkspaceLayout",
    "DragState",
    "gen_id",
    # Layouts
    "Area",
    "LayoutGeometry",
    "find_group",
    "replace_node",
    "remove_group",
    "collect_groups",
    "find_tab_location",
    "find_group_location",
    "add_tab_to_group",
    "remove_tab_from_group",
    "drop_position_to_split",
    "split_group_node",
    "calculate_tree",
    "calculate_workspace",
    "drop_position_at",
    # Engine
    "DockConfig",
    "DEFAULT_LAYOUT",
    "DragManager",
    "LayoutController",
    "DockWorkspace",
    # Serialization
    "LayoutFormatError",
    "UnsupportedLayoutVersion",
    "layout_to_dict",
    "layout_from_dict",
    "dumps",
    "loads",
    # Commands
    "file_tab",
    "placeholder_file_tab",
    "panel_tab",
    "run_command",
    # Event topics
    "topics",
]
