from sway_autotile.commands import LayoutCommand
from sway_autotile.data_types import Rectangle


def aspect_ratio(rect: Rectangle) -> float:
    """width / height, and 1.0 for a rectangle without height"""
    if rect["height"] == 0:
        return 1.0
    return rect["width"] / rect["height"]


def desired_orientation(ratio: float) -> LayoutCommand:
    """
    The split that keeps children of a container of the given aspect ratio close
    to square: side by side in a wide (or square) container, stacked on top of
    each other in a tall one.
    """
    return LayoutCommand.SPLITH if ratio >= 1.0 else LayoutCommand.SPLITV
