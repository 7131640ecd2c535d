"""
Split / Dock Algorithm

Turns a directional drop gesture into a split of the target tab group.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from ..objects import (
    DropPosition,
    SplitDirection,
    SplitNode,
    Tab,
    TabGroupNode,
    gen_id,
)

DEFAULT_SPLIT_RATIO = 0.5


@dataclass(frozen=True)
class SplitPlacement:
    """Split axis plus the side that receives the new content."""

    direction: SplitDirection
    new_group_first: bool


_PLACEMENTS = {
    DropPosition.TOP: SplitPlacement(SplitDirection.VERTICAL, True),
    DropPosition.BOTTOM: SplitPlacement(SplitDirection.VERTICAL, False),
    DropPosition.LEFT: SplitPlacement(SplitDirection.HORIZONTAL, True),
    DropPosition.RIGHT: SplitPlacement(SplitDirection.HORIZONTAL, False),
}


def drop_position_to_split(
    position: Union[DropPosition, str]
) -> Optional[SplitPlacement]:
    """Map a drop position to a split placement.

    Returns None for ``center``, which merges into the target group instead
    of splitting it.
    """
    return _PLACEMENTS.get(DropPosition(position))


def split_group_node(
    group: TabGroupNode,
    direction: SplitDirection,
    new_group_first: bool,
    new_tab: Optional[Tab] = None,
) -> SplitNode:
    """Wrap ``group`` and a fresh tab group into a new even split.

    The new group holds ``new_tab`` (active) when given, else nothing. The
    existing group keeps its identity.
    """
    new_group = TabGroupNode(
        id=gen_id("tg"),
        tabs=(new_tab,) if new_tab is not None else (),
        active_tab_id=new_tab.id if new_tab is not None else None,
    )
    return SplitNode(
        id=gen_id("split"),
        direction=direction,
        split_ratio=DEFAULT_SPLIT_RATIO,
        first=new_group if new_group_first else group,
        second=group if new_group_first else new_group,
    )
