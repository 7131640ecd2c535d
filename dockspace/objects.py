"""
Dock Layout Objects

Value types for the dockable panel workspace: tabs, the layout tree
(split and tab group nodes), the four dock areas and the persisted
workspace layout.

All tree values are immutable. Rewrites build new nodes along the path to
the changed node and share every untouched subtree.
"""

from __future__ import annotations
import itertools
import time
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

LAYOUT_VERSION = 1


class SplitDirection(Enum):
    """Axis a split divides its space along."""

    HORIZONTAL = "horizontal"  # first | second, side by side
    VERTICAL = "vertical"  # first above second


class DockSlot(Enum):
    """The four fixed dock regions."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTTOM = "bottom"


# Display and persistence order of the dock areas
SLOT_ORDER = (DockSlot.LEFT, DockSlot.CENTER, DockSlot.RIGHT, DockSlot.BOTTOM)


class DropPosition(Enum):
    """Where a dragged tab is released relative to a tab group."""

    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


_id_counter = itertools.count(1)


def gen_id(prefix: str = "id") -> str:
    """Mint a new node id. Ids are never reused within a process."""
    return f"{prefix}_{int(time.time() * 1000)}_{next(_id_counter)}"


@dataclass(frozen=True)
class Tab:
    """A leaf content reference rendered by an external panel.

    ``content_type`` is opaque to the engine; the host UI uses it to pick a
    renderer. ``id`` must be deterministic for the same logical document so
    that reopening activates instead of duplicating.
    """

    id: str
    title: str
    content_type: str
    file_path: Optional[str] = None
    graph_id: Optional[str] = None
    icon: Optional[str] = None
    is_dirty: Optional[bool] = None


@dataclass(frozen=True)
class TabGroupNode:
    """Tree leaf holding an ordered set of tabs and the active one."""

    type: ClassVar[str] = "tabgroup"

    id: str
    tabs: Tuple[Tab, ...] = ()
    active_tab_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.tabs, tuple):
            object.__setattr__(self, "tabs", tuple(self.tabs))

    def get_tab(self, tab_id: str) -> Optional[Tab]:
        for tab in self.tabs:
            if tab.id == tab_id:
                return tab
        return None

    def has_tab(self, tab_id: str) -> bool:
        return self.get_tab(tab_id) is not None

    def index_of(self, tab_id: str) -> int:
        """Position of a tab in display order, or -1."""
        for i, tab in enumerate(self.tabs):
            if tab.id == tab_id:
                return i
        return -1

    @property
    def active_tab(self) -> Optional[Tab]:
        if self.active_tab_id is None:
            return None
        return self.get_tab(self.active_tab_id)

    @property
    def is_empty(self) -> bool:
        return not self.tabs


@dataclass(frozen=True)
class SplitNode:
    """Internal tree node dividing space between exactly two children.

    ``split_ratio`` is the fraction of the space given to ``first``.
    """

    type: ClassVar[str] = "split"

    id: str
    direction: SplitDirection
    split_ratio: float
    first: "LayoutNode"
    second: "LayoutNode"

    @property
    def children(self) -> Tuple["LayoutNode", "LayoutNode"]:
        return (self.first, self.second)


LayoutNode = Union[SplitNode, TabGroupNode]


@dataclass(frozen=True)
class DockArea:
    """One of the four dock regions, optionally holding a layout tree.

    ``size`` is the width for left/right and the height for bottom. It is
    ignored while the area is hidden. A ``root`` of None means the area is
    empty.
    """

    slot: DockSlot
    size: float
    visible: bool = True
    root: Optional[LayoutNode] = None

    @property
    def is_empty(self) -> bool:
        return self.root is None


@dataclass(frozen=True)
class WorkspaceLayout:
    """Versioned, persistable snapshot of all four dock areas."""

    version: int = LAYOUT_VERSION
    areas: Tuple[DockArea, ...] = ()

    def __post_init__(self):
        if not isinstance(self.areas, tuple):
            object.__setattr__(self, "areas", tuple(self.areas))

    def area(self, slot: Union[DockSlot, str]) -> Optional[DockArea]:
        slot = DockSlot(slot)
        for area in self.areas:
            if area.slot == slot:
                return area
        return None


@dataclass(frozen=True)
class DragState:
    """Transient tab drag state. Never persisted."""

    is_dragging: bool = False
    tab: Optional[Tab] = None
    source_group_id: Optional[str] = None
    x: float = 0
    y: float = 0


IDLE_DRAG = DragState()
