from typing import Literal, TypedDict

from sway_autotile.data_types.common import Rectangle
from sway_autotile.data_types.container import Container


class Tree(TypedDict):
    id: int
    type: Literal["root"]
    percent: Literal[None]
    focused: bool
    layout: Literal["splith"]
    rect: Rectangle
    name: Literal["root"]
    nodes: list[Container]
    floating_nodes: list[Container]
    fullscreen_mode: Literal[0]
