from typing import Literal, NotRequired, Optional, TypedDict

from sway_autotile.data_types.common import Rectangle

NodeType = (
    Literal["root"]
    | Literal["output"]
    | Literal["workspace"]
    | Literal["con"]
    | Literal["floating_con"]
)

Layout = (
    Literal["splith"]
    | Literal["splitv"]
    | Literal["stacked"]
    | Literal["tabbed"]
    | Literal["output"]
    | Literal["none"]
)


# only present on i3 and Xwayland windows; "class" is a keyword, hence the
# functional form
WindowProperties = TypedDict(
    "WindowProperties",
    {
        "class": str,
        "instance": str,
        "title": str,
        "window_role": str,
        "window_type": str,
    },
    total=False,
)


class ApplicationContainer(TypedDict):
    id: int
    type: NodeType
    percent: Optional[float]
    focused: bool
    layout: Layout
    rect: Rectangle
    name: str
    nodes: list["Container"]
    floating_nodes: list["Container"]
    fullscreen_mode: int
    pid: int
    app_id: Optional[str]
    visible: bool
    window_properties: NotRequired[WindowProperties]


class NodeContainer(TypedDict):
    id: int
    type: NodeType
    percent: Optional[float]
    focused: bool
    layout: Layout
    rect: Rectangle
    name: Optional[str]
    nodes: list["Container"]
    floating_nodes: list["Container"]
    fullscreen_mode: int


Container = NodeContainer | ApplicationContainer
