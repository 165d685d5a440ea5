from sway_autotile.data_types.common import Rectangle
from sway_autotile.data_types.container import (
    ApplicationContainer,
    Container,
    Layout,
    NodeContainer,
    NodeType,
)
from sway_autotile.data_types.events import WindowEvent
from sway_autotile.data_types.tree import Tree
from sway_autotile.data_types.workspace import Workspace

__all__ = [
    "ApplicationContainer",
    "Container",
    "Layout",
    "NodeContainer",
    "NodeType",
    "Rectangle",
    "Tree",
    "WindowEvent",
    "Workspace",
]
