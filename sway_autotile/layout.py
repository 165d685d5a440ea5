"""
The decision engine: pure functions of a tree snapshot, the workspace list and
the configuration. Nothing in here talks to the window manager.
"""

import logging

from sway_autotile.commands import LayoutCommand, ResizeTo
from sway_autotile.data_types import Workspace
from sway_autotile.eligibility import is_eligible
from sway_autotile.geometry import aspect_ratio, desired_orientation
from sway_autotile.settings import AutotileConfig
from sway_autotile.utilities import Node, find_workspace, locate_focus

logger = logging.getLogger(__name__)

split_layouts = {LayoutCommand.SPLITH.value, LayoutCommand.SPLITV.value}


def application_class(node: Node) -> str | None:
    """app_id for wayland native windows, the X11 class otherwise"""
    if app_id := node.get("app_id"):
        return app_id
    return node.get("window_properties", {}).get("class")


def decide(
    tree: Node, workspaces: list[Workspace], config: AutotileConfig
) -> LayoutCommand:
    if (located := locate_focus(tree)) is None:
        logger.debug("Nothing focused, or the focus has no parent")
        return LayoutCommand.NOOP
    focused, parent = located

    if not is_eligible(focused, workspaces, config):
        return LayoutCommand.NOOP

    ratio = aspect_ratio(parent["rect"])
    new_layout = desired_orientation(ratio)
    if parent.get("layout") == new_layout.value:
        logger.debug("Parent %s is already %s", parent["id"], new_layout.value)
        return LayoutCommand.NOOP

    workspace = find_workspace(tree, parent) or {}
    logger.debug(
        "Parent %s on workspace %s has ratio %.2f and layout %s, switching to %s",
        parent["id"],
        workspace.get("name"),
        ratio,
        parent.get("layout"),
        new_layout.value,
    )
    return new_layout


def decide_master(
    tree: Node, workspaces: list[Workspace], config: AutotileConfig
) -> ResizeTo | None:
    """
    Size the focused window to its configured master fraction when its
    application class is a master class and it shares its parent with at least
    one other tiled window.
    """
    if not config.masters:
        return None

    if (located := locate_focus(tree)) is None:
        return None
    focused, parent = located

    app = application_class(focused)
    if app is None or (fraction := config.masters.get(app)) is None:
        return None

    if not is_eligible(focused, workspaces, config):
        return None

    if parent.get("layout") not in split_layouts or len(parent.get("nodes", [])) < 2:
        logger.debug("Master %s has nothing to share its parent with", app)
        return None

    # the axis is the one the master already shares with its siblings; a split
    # run for this event only decides where the next window goes
    return ResizeTo(focused["id"], fraction, LayoutCommand(parent["layout"]))
