import logging

from sway_autotile.data_types import Workspace
from sway_autotile.settings import AutotileConfig
from sway_autotile.utilities import Node

logger = logging.getLogger(__name__)

manual_layouts = {"stacked", "tabbed"}


def focused_workspace_num(workspaces: list[Workspace]) -> int | None:
    return next((w["num"] for w in workspaces if w["focused"]), None)


def is_fullscreen(node: Node) -> bool:
    percent = node.get("percent")
    return (percent if percent is not None else 1.0) > 1.0 or bool(
        node.get("fullscreen_mode")
    )


def is_eligible(
    focused: Node, workspaces: list[Workspace], config: AutotileConfig
) -> bool:
    if config.workspaces:
        num = focused_workspace_num(workspaces)
        if num is None or num not in config.workspaces:
            logger.debug("Workspace %s is not autotiled", num)
            return False

    if focused.get("type") == "floating_con":
        logger.debug("Node %s is floating", focused["id"])
        return False

    if focused.get("layout") in manual_layouts:
        logger.debug("Node %s is %s", focused["id"], focused["layout"])
        return False

    if is_fullscreen(focused):
        logger.debug("Node %s is fullscreen", focused["id"])
        return False

    return True
