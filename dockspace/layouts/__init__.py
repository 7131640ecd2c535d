"""
Layout System

Tree primitives, tab group operations, the split algorithm and geometry
for the dockable panel workspace.
"""

from .tree import (
    iter_nodes,
    find_group,
    find_split,
    replace_node,
    remove_group,
    collect_groups,
    map_groups,
    set_split_ratio_in_tree,
    update_area,
    update_group_in_areas,
    remove_group_from_areas,
    find_tab_location,
    find_group_location,
)
from .tabs import (
    add_tab_to_group,
    remove_tab_from_group,
    set_group_active_tab,
    set_tab_dirty,
)
from .split import (
    DEFAULT_SPLIT_RATIO,
    SplitPlacement,
    drop_position_to_split,
    split_group_node,
)
from .geometry import (
    Area,
    Edges,
    LayoutGeometry,
    RESIZER_SIZE,
    calculate_tree,
    calculate_workspace,
    drop_position_at,
    ratio_from_delta,
    resized_area_size,
)

__all__ = [
    # Tree primitives
    "iter_nodes",
    "find_group",
    "find_split",
    "replace_node",
    "remove_group",
    "collect_groups",
    "map_groups",
    "set_split_ratio_in_tree",
    "update_area",
    "update_group_in_areas",
    "remove_group_from_areas",
    "find_tab_location",
    "find_group_location",
    # Tab operations
    "add_tab_to_group",
    "remove_tab_from_group",
    "set_group_active_tab",
    "set_tab_dirty",
    # Split algorithm
    "DEFAULT_SPLIT_RATIO",
    "SplitPlacement",
    "drop_position_to_split",
    "split_group_node",
    # Geometry
    "Area",
    "Edges",
    "LayoutGeometry",
    "RESIZER_SIZE",
    "calculate_tree",
    "calculate_workspace",
    "drop_position_at",
    "ratio_from_delta",
    "resized_area_size",
]
