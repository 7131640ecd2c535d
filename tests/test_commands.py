"""
Unit tests for tab builders and text commands.
"""

import pytest
from dockspace.commands import file_tab, panel_tab, placeholder_file_tab, run_command
from dockspace.controller import LayoutController


@pytest.mark.unit
class TestTabBuilders:
    """Test deterministic tab construction."""

    def test_file_tab(self):
        tab = file_tab("/infra/apps/auth-deployment.yaml")

        assert tab.id == "file-/infra/apps/auth-deployment.yaml"
        assert tab.title == "auth-deployment.yaml"
        assert tab.content_type == "file"
        assert tab.file_path == "/infra/apps/auth-deployment.yaml"
        assert tab.icon == "fileYaml"

    def test_chart_icon(self):
        assert file_tab("/charts/auth/Chart.yaml").icon == "helmRelease"

    def test_same_path_same_id(self):
        """Reopening a file must address the same tab."""
        assert file_tab("/a/b.yaml") == file_tab("/a/b.yaml")

    def test_placeholder_tab(self):
        tab = placeholder_file_tab("node-7", "redis")

        assert tab.id == "file-placeholder-node-7"
        assert tab.title == "redis.yaml"
        assert tab.file_path is None

    def test_panel_tab(self):
        tab = panel_tab("clusterLogs", "Logs")

        assert tab.id == "tab-clusterLogs"
        assert tab.content_type == "clusterLogs"


@pytest.mark.unit
class TestRunCommand:
    """Test the text command language against a live controller."""

    @pytest.fixture
    def controller(self):
        return LayoutController()

    def test_open_file(self, controller):
        result = run_command("open-file /infra/apps/auth.yaml")

        assert result == [{"success": True}]
        tab = controller.find_tab("file-/infra/apps/auth.yaml")
        assert tab.title == "auth.yaml"
        assert controller.find_group("tg-center").active_tab_id == tab.id

    def test_open_file_in_slot(self, controller):
        """Quoted paths may contain spaces."""
        run_command("open-file '/my charts/Chart.yaml' bottom")

        assert controller.find_group("tg-bottom").active_tab_id == "file-/my charts/Chart.yaml"

    def test_area_visibility(self, controller):
        run_command("hide left")
        assert controller.area("left").visible is False

        run_command("show left")
        assert controller.area("left").visible is True

        run_command("toggle right")
        assert controller.area("right").visible is False

    def test_close_tab(self, controller):
        run_command("close-tab tab-explorer")

        assert controller.area("left").root is None

    def test_open_panel(self, controller):
        run_command("open-panel right graphSettings Graph Settings")

        tab = controller.find_tab("tab-graphSettings")
        assert tab.title == "Graph Settings"
        assert controller.find_group("tg-inspector").active_tab_id == tab.id

    def test_logs_shows_existing_tab(self, controller):
        """Panel shortcuts activate the default tab instead of adding one."""
        controller.set_area_visible("bottom", False)

        assert run_command("logs") == [{"success": True}]

        assert controller.area("bottom").visible is True
        assert controller.find_group("tg-bottom").active_tab_id == "tab-logs"
        assert controller.tab_count() == 6

    def test_properties_after_close(self, controller):
        controller.close_tab("tab-inspector")

        run_command("properties")

        tab = controller.find_tab("tab-inspector")
        assert tab.title == "Properties"
        assert controller.area("right").root.tabs == (tab,)

    def test_reset_layout(self, controller):
        run_command("close-tab tab-graph")

        run_command("reset-layout")

        assert controller.find_tab("tab-graph") is not None

    @pytest.mark.parametrize(
        "command,error",
        [
            ("", "Empty command"),
            ("frobnicate", "Unknown command"),
            ("logs now", "Unknown command"),
            ("close-tab", "Unknown command"),
            ("open-file 'unterminated", "Cannot parse"),
            ("show top", "top"),
        ],
    )
    def test_failures(self, controller, command, error):
        before = controller.areas

        result = run_command(command)

        assert result[0]["success"] is False
        assert error in result[0]["error"]
        assert controller.areas is before
