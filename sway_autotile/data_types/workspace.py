from typing import TypedDict

from sway_autotile.data_types.common import Rectangle


class Workspace(TypedDict):
    """An entry of the GET_WORKSPACES reply, not the workspace node of the tree"""

    id: int
    num: int
    name: str
    focused: bool
    visible: bool
    urgent: bool
    output: str
    rect: Rectangle
