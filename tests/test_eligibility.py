"""Tests for eligibility.py"""

import pytest

from sway_autotile.eligibility import focused_workspace_num, is_eligible, is_fullscreen
from sway_autotile.settings import AutotileConfig
from trees import con, workspaces


class TestIsEligible:
    def test_plain_window(self):
        assert is_eligible(con(focused=True), [], AutotileConfig())

    def test_workspace_not_in_allow_list(self):
        config = AutotileConfig(workspaces={2, 4})
        assert not is_eligible(con(focused=True), workspaces(3, 2, 3, 4), config)

    def test_workspace_in_allow_list(self):
        config = AutotileConfig(workspaces={2, 4})
        assert is_eligible(con(focused=True), workspaces(4, 2, 3, 4), config)

    def test_no_focused_workspace(self):
        config = AutotileConfig(workspaces={1})
        assert not is_eligible(con(focused=True), workspaces(None, 1, 2), config)

    def test_empty_allow_list_ignores_workspaces(self):
        assert is_eligible(con(focused=True), workspaces(None, 1), AutotileConfig())

    def test_floating(self):
        node = con(focused=True, type="floating_con")
        assert not is_eligible(node, [], AutotileConfig())

    @pytest.mark.parametrize("layout", ["stacked", "tabbed"])
    def test_manual_layouts(self, layout):
        assert not is_eligible(con(focused=True, layout=layout), [], AutotileConfig())

    def test_fullscreen_percent(self):
        node = con(focused=True, percent=1.5, width=1080, height=1920)
        assert not is_eligible(node, [], AutotileConfig())

    def test_fullscreen_mode(self):
        node = con(focused=True, fullscreen_mode=1)
        assert not is_eligible(node, [], AutotileConfig())


class TestHelpers:
    def test_focused_workspace_num(self):
        assert focused_workspace_num(workspaces(2, 1, 2)) == 2
        assert focused_workspace_num(workspaces(None, 1, 2)) is None

    def test_missing_percent_is_not_fullscreen(self):
        assert not is_fullscreen(con(percent=None))
        assert not is_fullscreen(con(percent=1.0))
