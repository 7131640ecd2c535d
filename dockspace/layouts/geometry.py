"""
Dock Layout Geometry

Calculates rectangles for the dock areas and the tab groups inside them,
hit-tests drop zones and converts pointer deltas into sizes and ratios.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntFlag
from typing import Dict, Iterable, Optional, Tuple

from ..objects import DockArea, DockSlot, DropPosition, LayoutNode, SplitDirection, SplitNode

# Thickness of the resizer handle between neighbouring panes
RESIZER_SIZE = 4

# Drop zone extents, as fractions of the target group's rectangle
DROP_EDGE_BAND = 0.28
DROP_EDGE_SPAN = (0.2, 0.8)
DROP_CENTER_BOX = (0.3, 0.7)


class Edges(IntFlag):
    """Edges of a pane that touch the boundary of its dock area."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    ALL = TOP | BOTTOM | LEFT | RIGHT


@dataclass
class Area:
    """Rectangle with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x <= x < self.x + self.width and self.y <= y < self.y + self.height
        )


@dataclass
class LayoutGeometry:
    """Calculated geometry for a tab group."""

    x: int
    y: int
    width: int
    height: int
    tiled_edges: Edges = Edges.NONE


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def calculate_tree(
    root: Optional[LayoutNode],
    area: Area,
    gap: int = RESIZER_SIZE,
    edges: Edges = Edges.ALL,
) -> Dict[str, LayoutGeometry]:
    """
    Calculate the rectangle of every tab group in a layout tree.

    Args:
        root: Tree to lay out (None yields an empty result)
        area: Rectangle available to the tree
        gap: Space taken by the resizer between the two sides of a split
        edges: Edges of ``area`` that touch the dock area boundary

    Returns:
        Dictionary mapping tab group ids to their geometry
    """
    result: Dict[str, LayoutGeometry] = {}
    if root is None:
        return result

    if not isinstance(root, SplitNode):
        result[root.id] = LayoutGeometry(area.x, area.y, area.width, area.height, edges)
        return result

    if root.direction == SplitDirection.HORIZONTAL:
        usable = max(0, area.width - gap)
        first_width = int(usable * root.split_ratio)
        first = Area(area.x, area.y, first_width, area.height)
        second = Area(
            area.x + first_width + gap, area.y, usable - first_width, area.height
        )
        first_edges = edges & ~Edges.RIGHT
        second_edges = edges & ~Edges.LEFT
    else:  # VERTICAL
        usable = max(0, area.height - gap)
        first_height = int(usable * root.split_ratio)
        first = Area(area.x, area.y, area.width, first_height)
        second = Area(
            area.x, area.y + first_height + gap, area.width, usable - first_height
        )
        first_edges = edges & ~Edges.BOTTOM
        second_edges = edges & ~Edges.TOP

    result.update(calculate_tree(root.first, first, gap, first_edges))
    result.update(calculate_tree(root.second, second, gap, second_edges))
    return result


def _shown(area: Optional[DockArea]) -> bool:
    return area is not None and area.visible and not area.is_empty


def calculate_workspace(
    areas: Iterable[DockArea], screen: Area, gap: int = RESIZER_SIZE
) -> Dict[DockSlot, Area]:
    """
    Calculate the rectangle of each dock area.

    The body is ``left | (center over bottom) | right``. Side areas only take
    space while visible and holding a tree; the center fills the rest.

    Returns:
        Dictionary mapping slots to rectangles. Hidden or empty side areas
        are absent; the center is always present.
    """
    by_slot = {a.slot: a for a in areas}
    left = by_slot.get(DockSlot.LEFT)
    right = by_slot.get(DockSlot.RIGHT)
    bottom = by_slot.get(DockSlot.BOTTOM)

    result: Dict[DockSlot, Area] = {}
    x0 = screen.x
    x1 = screen.x + screen.width

    if _shown(left):
        width = int(clamp(left.size, 0, screen.width))
        result[DockSlot.LEFT] = Area(x0, screen.y, width, screen.height)
        x0 += width + gap

    if _shown(right):
        width = int(clamp(right.size, 0, max(0, x1 - x0)))
        result[DockSlot.RIGHT] = Area(x1 - width, screen.y, width, screen.height)
        x1 -= width + gap

    column_width = max(0, x1 - x0)
    center_height = screen.height
    if _shown(bottom):
        height = int(clamp(bottom.size, 0, screen.height))
        result[DockSlot.BOTTOM] = Area(
            x0, screen.y + screen.height - height, column_width, height
        )
        center_height = max(0, screen.height - height - gap)

    result[DockSlot.CENTER] = Area(x0, screen.y, column_width, center_height)
    return result


def drop_position_at(area: Area, x: float, y: float) -> Optional[DropPosition]:
    """
    Hit-test the drop zones of a tab group rectangle.

    Side bands are checked before top/bottom bands, so the corners where they
    overlap belong to the side bands. Points outside every zone give None.
    """
    if area.width <= 0 or area.height <= 0 or not area.contains(x, y):
        return None

    fx = (x - area.x) / area.width
    fy = (y - area.y) / area.height
    lo, hi = DROP_EDGE_SPAN
    c_lo, c_hi = DROP_CENTER_BOX

    if fx >= 1 - DROP_EDGE_BAND and lo <= fy <= hi:
        return DropPosition.RIGHT
    if fx <= DROP_EDGE_BAND and lo <= fy <= hi:
        return DropPosition.LEFT
    if fy >= 1 - DROP_EDGE_BAND and lo <= fx <= hi:
        return DropPosition.BOTTOM
    if fy <= DROP_EDGE_BAND and lo <= fx <= hi:
        return DropPosition.TOP
    if c_lo <= fx <= c_hi and c_lo <= fy <= c_hi:
        return DropPosition.CENTER
    return None


def resized_area_size(
    slot: DockSlot, size: float, delta: float, limits: Tuple[float, float]
) -> float:
    """New size of a dock area after its resizer moved by ``delta`` pixels.

    The left area grows with a positive delta; right and bottom shrink,
    since their resizer sits on their leading edge.
    """
    if slot == DockSlot.LEFT:
        new_size = size + delta
    else:
        new_size = size - delta
    return clamp(new_size, *limits)


def ratio_from_delta(
    start_ratio: float,
    delta: float,
    extent: float,
    ratio_range: Tuple[float, float],
) -> float:
    """Split ratio after dragging a split resizer ``delta`` pixels."""
    if extent <= 0:
        return clamp(start_ratio, *ratio_range)
    return clamp(start_ratio + delta / extent, *ratio_range)
