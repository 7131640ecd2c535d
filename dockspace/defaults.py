"""
Default Workspace Layouts
"""

from .objects import DockArea, DockSlot, Tab, TabGroupNode, WorkspaceLayout

EXPLORER_TAB = Tab(id="tab-explorer", title="Explorer", content_type="explorer", icon="explorer")
WELCOME_TAB = Tab(id="tab-welcome", title="Welcome", content_type="welcome", icon="welcome")
GRAPH_TAB = Tab(id="tab-graph", title="Graph", content_type="graph", icon="graph")
INSPECTOR_TAB = Tab(id="tab-inspector", title="Inspector", content_type="inspector", icon="inspector")
DIFF_TAB = Tab(id="tab-diff", title="Cluster Diff", content_type="clusterDiff", icon="clusterDiff")
LOGS_TAB = Tab(id="tab-logs", title="Logs", content_type="clusterLogs", icon="clusterLogs")

DEFAULT_LAYOUT = WorkspaceLayout(
    version=1,
    areas=(
        DockArea(
            slot=DockSlot.LEFT,
            size=260,
            visible=True,
            root=TabGroupNode("tg-explorer", (EXPLORER_TAB,), "tab-explorer"),
        ),
        DockArea(
            slot=DockSlot.CENTER,
            size=0,  # fills remaining space
            visible=True,
            root=TabGroupNode("tg-center", (WELCOME_TAB, GRAPH_TAB), "tab-graph"),
        ),
        DockArea(
            slot=DockSlot.RIGHT,
            size=300,
            visible=True,
            root=TabGroupNode("tg-inspector", (INSPECTOR_TAB,), "tab-inspector"),
        ),
        DockArea(
            slot=DockSlot.BOTTOM,
            size=220,
            visible=True,
            root=TabGroupNode("tg-bottom", (DIFF_TAB, LOGS_TAB), "tab-diff"),
        ),
    ),
)

# Serialized form of a layout with a split center area (for docs and tests)
EXAMPLE_LAYOUT_JSON = {
    "version": 1,
    "areas": [
        {
            "slot": "left",
            "size": 260,
            "visible": True,
            "root": {
                "type": "tabgroup",
                "id": "tg-explorer",
                "tabs": [{"id": "tab-explorer", "title": "Explorer", "contentType": "explorer"}],
                "activeTabId": "tab-explorer",
            },
        },
        {
            "slot": "center",
            "size": 0,
            "visible": True,
            "root": {
                "type": "split",
                "id": "split-center-1",
                "direction": "horizontal",
                "splitRatio": 0.55,
                "first": {
                    "type": "tabgroup",
                    "id": "tg-center-editor",
                    "tabs": [
                        {
                            "id": "tab-file-1",
                            "title": "auth-deployment.yaml",
                            "contentType": "file",
                            "filePath": "/infra/apps/auth-deployment.yaml",
                        },
                        {
                            "id": "tab-file-2",
                            "title": "postgres-statefulset.yaml",
                            "contentType": "file",
                            "filePath": "/infra/databases/postgres-statefulset.yaml",
                        },
                    ],
                    "activeTabId": "tab-file-1",
                },
                "second": {
                    "type": "tabgroup",
                    "id": "tg-center-graph",
                    "tabs": [{"id": "tab-graph", "title": "Graph", "contentType": "graph"}],
                    "activeTabId": "tab-graph",
                },
            },
        },
        {
            "slot": "right",
            "size": 300,
            "visible": True,
            "root": {
                "type": "tabgroup",
                "id": "tg-inspector",
                "tabs": [{"id": "tab-inspector", "title": "Inspector", "contentType": "inspector"}],
                "activeTabId": "tab-inspector",
            },
        },
        {
            "slot": "bottom",
            "size": 220,
            "visible": True,
            "root": {
                "type": "tabgroup",
                "id": "tg-bottom",
                "tabs": [
                    {"id": "tab-diff", "title": "Cluster Diff", "contentType": "clusterDiff"},
                    {"id": "tab-logs", "title": "Logs", "contentType": "clusterLogs"},
                ],
                "activeTabId": "tab-diff",
            },
        },
    ],
}
