"""
Workspace Layout Serialization

Converts a WorkspaceLayout to and from the JSON-compatible structure it is
persisted as:

    {"version": 1, "areas": [{"slot": ..., "size": ..., "visible": ...,
                              "root": <node or null>}, ...]}

Nodes are tagged with ``"type": "tabgroup"`` or ``"type": "split"``.
Loading validates the whole document before anything is built, so a
rejected document never yields a partial layout.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Mapping, Optional, Set

from .objects import (
    LAYOUT_VERSION,
    SLOT_ORDER,
    DockArea,
    DockSlot,
    LayoutNode,
    SplitDirection,
    SplitNode,
    Tab,
    TabGroupNode,
    WorkspaceLayout,
)

# Optional tab attributes and their persisted keys
_OPTIONAL_TAB_KEYS = (
    ("file_path", "filePath"),
    ("graph_id", "graphId"),
    ("icon", "icon"),
    ("is_dirty", "isDirty"),
)


class LayoutFormatError(ValueError):
    """A persisted layout is malformed."""


class UnsupportedLayoutVersion(LayoutFormatError):
    """A persisted layout carries a version this engine cannot read."""

    def __init__(self, version: Any):
        super().__init__(
            f"Unsupported layout version: {version!r} (expected {LAYOUT_VERSION})"
        )
        self.version = version


# Writing


def tab_to_dict(tab: Tab) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": tab.id,
        "title": tab.title,
        "contentType": tab.content_type,
    }
    for attr, key in _OPTIONAL_TAB_KEYS:
        value = getattr(tab, attr)
        if value is not None:
            data[key] = value
    return data


def node_to_dict(node: LayoutNode) -> Dict[str, Any]:
    if isinstance(node, SplitNode):
        return {
            "type": SplitNode.type,
            "id": node.id,
            "direction": node.direction.value,
            "splitRatio": node.split_ratio,
            "first": node_to_dict(node.first),
            "second": node_to_dict(node.second),
        }
    return {
        "type": TabGroupNode.type,
        "id": node.id,
        "tabs": [tab_to_dict(t) for t in node.tabs],
        "activeTabId": node.active_tab_id,
    }


def area_to_dict(area: DockArea) -> Dict[str, Any]:
    return {
        "slot": area.slot.value,
        "size": area.size,
        "visible": area.visible,
        "root": node_to_dict(area.root) if area.root is not None else None,
    }


def layout_to_dict(layout: WorkspaceLayout) -> Dict[str, Any]:
    """Convert a layout to its JSON-compatible form."""
    return {
        "version": layout.version,
        "areas": [area_to_dict(a) for a in layout.areas],
    }


def dumps(layout: WorkspaceLayout, **kwargs) -> str:
    """Encode a layout as JSON text. Keyword arguments go to json.dumps."""
    return json.dumps(layout_to_dict(layout), **kwargs)


# Reading


def _expect(data: Mapping[str, Any], key: str, types, where: str) -> Any:
    if key not in data:
        raise LayoutFormatError(f"{where}: missing '{key}'")
    value = data[key]
    if not isinstance(types, tuple):
        types = (types,)
    # bool is an int subclass; never accept it for numeric fields
    if isinstance(value, bool) and bool not in types:
        raise LayoutFormatError(f"{where}: '{key}' has invalid value {value!r}")
    if not isinstance(value, types):
        raise LayoutFormatError(f"{where}: '{key}' has invalid value {value!r}")
    return value


def _optional(data: Mapping[str, Any], key: str, types, where: str) -> Any:
    if data.get(key) is None:
        return None
    return _expect(data, key, types, where)


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise LayoutFormatError(f"{where}: expected an object, got {value!r}")
    return value


def _claim_id(node_id: str, seen: Set[str], where: str):
    if node_id in seen:
        raise LayoutFormatError(f"{where}: duplicate node id '{node_id}'")
    seen.add(node_id)


def tab_from_dict(data: Any, where: str = "tab") -> Tab:
    data = _mapping(data, where)
    return Tab(
        id=_expect(data, "id", str, where),
        title=_expect(data, "title", str, where),
        content_type=_expect(data, "contentType", str, where),
        file_path=_optional(data, "filePath", str, where),
        graph_id=_optional(data, "graphId", str, where),
        icon=_optional(data, "icon", str, where),
        is_dirty=_optional(data, "isDirty", bool, where),
    )


def node_from_dict(
    data: Any,
    seen_ids: Optional[Set[str]] = None,
    where: str = "node",
    seen_tab_ids: Optional[Set[str]] = None,
) -> LayoutNode:
    """Build a layout node, checking tree invariants on the way.

    ``seen_ids`` and ``seen_tab_ids`` collect node and tab ids across calls,
    so ids stay unique over a whole layout.
    """
    if seen_ids is None:
        seen_ids = set()
    if seen_tab_ids is None:
        seen_tab_ids = set()
    data = _mapping(data, where)
    node_type = data.get("type")
    node_id = _expect(data, "id", str, where)
    where = f"{where} '{node_id}'"

    if node_type == TabGroupNode.type:
        raw_tabs = _expect(data, "tabs", list, where)
        tabs = tuple(tab_from_dict(t, f"{where} tab") for t in raw_tabs)
        tab_ids = [t.id for t in tabs]
        if len(set(tab_ids)) != len(tab_ids):
            raise LayoutFormatError(f"{where}: duplicate tab ids")
        active_tab_id = _optional(data, "activeTabId", str, where)
        if active_tab_id is not None and active_tab_id not in tab_ids:
            raise LayoutFormatError(
                f"{where}: active tab '{active_tab_id}' is not in the group"
            )
        for tab_id in tab_ids:
            if tab_id in seen_tab_ids:
                raise LayoutFormatError(f"{where}: duplicate tab id '{tab_id}'")
            seen_tab_ids.add(tab_id)
        _claim_id(node_id, seen_ids, where)
        return TabGroupNode(id=node_id, tabs=tabs, active_tab_id=active_tab_id)

    if node_type == SplitNode.type:
        raw_direction = _expect(data, "direction", str, where)
        try:
            direction = SplitDirection(raw_direction)
        except ValueError:
            raise LayoutFormatError(
                f"{where}: unknown split direction {raw_direction!r}"
            ) from None
        ratio = _expect(data, "splitRatio", (int, float), where)
        if not 0 <= ratio <= 1:
            raise LayoutFormatError(f"{where}: split ratio {ratio} outside [0, 1]")
        if data.get("first") is None or data.get("second") is None:
            raise LayoutFormatError(f"{where}: a split needs two children")
        _claim_id(node_id, seen_ids, where)
        return SplitNode(
            id=node_id,
            direction=direction,
            split_ratio=float(ratio),
            first=node_from_dict(
                data["first"], seen_ids, f"{where} first", seen_tab_ids
            ),
            second=node_from_dict(
                data["second"], seen_ids, f"{where} second", seen_tab_ids
            ),
        )

    raise LayoutFormatError(f"{where}: unknown node type {node_type!r}")


def area_from_dict(
    data: Any,
    seen_ids: Optional[Set[str]] = None,
    where: str = "area",
    seen_tab_ids: Optional[Set[str]] = None,
) -> DockArea:
    data = _mapping(data, where)
    raw_slot = _expect(data, "slot", str, where)
    try:
        slot = DockSlot(raw_slot)
    except ValueError:
        raise LayoutFormatError(f"{where}: unknown slot {raw_slot!r}") from None
    where = f"area '{slot.value}'"

    size = _expect(data, "size", (int, float), where)
    if size < 0:
        raise LayoutFormatError(f"{where}: negative size {size}")
    visible = _expect(data, "visible", bool, where)
    root = data.get("root")
    return DockArea(
        slot=slot,
        size=size,
        visible=visible,
        root=(
            node_from_dict(root, seen_ids, f"{where} root", seen_tab_ids)
            if root is not None
            else None
        ),
    )


def layout_from_dict(data: Any) -> WorkspaceLayout:
    """
    Build a WorkspaceLayout from its JSON-compatible form.

    Raises:
        UnsupportedLayoutVersion: The version is not the current one
        LayoutFormatError: The document is malformed
    """
    data = _mapping(data, "layout")
    version = data.get("version")
    if isinstance(version, bool) or version != LAYOUT_VERSION:
        raise UnsupportedLayoutVersion(version)

    raw_areas: List[Any] = _expect(data, "areas", list, "layout")
    seen_ids: Set[str] = set()
    seen_tab_ids: Set[str] = set()
    by_slot: Dict[DockSlot, DockArea] = {}
    for raw in raw_areas:
        area = area_from_dict(raw, seen_ids, seen_tab_ids=seen_tab_ids)
        if area.slot in by_slot:
            raise LayoutFormatError(f"layout: duplicate area '{area.slot.value}'")
        by_slot[area.slot] = area

    missing = [s.value for s in SLOT_ORDER if s not in by_slot]
    if missing:
        raise LayoutFormatError(f"layout: missing areas {', '.join(missing)}")

    return WorkspaceLayout(
        version=LAYOUT_VERSION, areas=tuple(by_slot[s] for s in SLOT_ORDER)
    )


def loads(text: str) -> WorkspaceLayout:
    """Decode a layout from JSON text."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise LayoutFormatError(f"layout: invalid JSON: {e}") from e
    return layout_from_dict(data)
