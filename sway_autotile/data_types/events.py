from typing import TypedDict

from sway_autotile.data_types.container import Container


class WindowEvent(TypedDict):
    """
    Payload of a window event. The container geometry is a snapshot from before
    the change was applied and must not be used for layout decisions.
    """

    change: str
    container: Container
