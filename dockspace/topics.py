"""
Event Topics for the dockspace layout engine

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Each topic is always published with the same keyword arguments, since
Pypubsub fixes a topic's message signature on first use.
"""

# Layout notifications
LAYOUT_CHANGED = "layout.changed"
"""Published after every committed change to the dock areas.
Params: reason (operation name), layout (WorkspaceLayout snapshot)"""

# Tab lifecycle events
TAB_OPENED = "tab.opened"
"""Published when a tab is inserted into a group.
Params: tab, group_id, slot"""

TAB_CLOSED = "tab.closed"
"""Published when a tab is removed by close_tab. Params: tab"""

# Drag events
DRAG_STARTED = "drag.started"
"""Published when a tab drag begins. Params: tab, source_group_id"""

DRAG_ENDED = "drag.ended"
"""Published when a tab drag ends, dropped or not. Params: tab"""

# Command events (imperative - tell the controller to do something)
# These are triggered by menus, panels or text commands

CMD_OPEN_TAB = "cmd.open_tab"
"""Command: Open or activate a tab. Params: tab, slot"""

CMD_CLOSE_TAB = "cmd.close_tab"
"""Command: Close a tab. Params: tab_id"""

CMD_SET_AREA_VISIBLE = "cmd.set_area_visible"
"""Command: Show or hide a dock area. Params: slot, visible"""

CMD_TOGGLE_AREA = "cmd.toggle_area"
"""Command: Toggle a dock area's visibility. Params: slot"""

CMD_OPEN_PANEL = "cmd.open_panel"
"""Command: Show a dock area and open a panel tab in it.
Params: slot, content_type, title, icon"""

CMD_RESET_LAYOUT = "cmd.reset_layout"
"""Command: Reinstall the default layout."""
