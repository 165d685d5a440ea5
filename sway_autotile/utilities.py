from typing import Callable, TypeVar

from sway_autotile.data_types import Container, Tree

T = TypeVar("T")

Node = Tree | Container


def children(node: Node) -> list[Container]:
    return [*node.get("floating_nodes", []), *node.get("nodes", [])]


def rec_parse_tree(node: Node | list, func: Callable[[Node], T | None]) -> list[T]:
    """
    Depth first collection of `func(n)` over the tree. When `func` returns something
    for a node, its subtree is not descended into.
    """
    if isinstance(node, list):
        return [item for elem in node for item in rec_parse_tree(elem, func)]

    if (result := func(node)) is not None:
        return [result]

    return rec_parse_tree(children(node), func)


def focused_node(n: Node) -> Node | None:
    if n.get("focused") is True:
        return n


def find_focused(tree: Node) -> Node | None:
    return next(iter(rec_parse_tree(tree, focused_node)), None)


def find_parent(tree: Node, node: Node) -> Node | None:
    def parent_of(n: Node) -> Node | None:
        if any(child["id"] == node["id"] for child in children(n)):
            return n

    return next(iter(rec_parse_tree(tree, parent_of)), None)


def find_workspace(tree: Node, node: Node) -> Node | None:
    def workspace_holding(n: Node) -> Node | None:
        if n.get("type") == "workspace" and (
            n["id"] == node["id"]
            or rec_parse_tree(children(n), lambda c: c if c["id"] == node["id"] else None)
        ):
            return n

    return next(iter(rec_parse_tree(tree, workspace_holding)), None)


def locate_focus(tree: Node) -> tuple[Node, Node] | None:
    """
    Returns the focused node and the container holding it, both from the same
    snapshot. None when nothing has focus or the root itself is focused.
    """
    if (focused := find_focused(tree)) is None:
        return None
    if (parent := find_parent(tree, focused)) is None:
        return None
    return focused, parent
