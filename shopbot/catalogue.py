"""
Immutable catalogue tree and address-based navigation.

A node is either a Leaf (opaque item payload) or a Group (a label/payload plus
an ordered tuple of child nodes). The tree is built once by the loader and is
never mutated, so a single instance can be shared by any number of readers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .address import Address

ItemT = TypeVar("ItemT")
GroupT = TypeVar("GroupT")


@dataclass(frozen=True)
class Leaf(Generic[ItemT]):
    item: ItemT


@dataclass(frozen=True)
class Group(Generic[ItemT, GroupT]):
    data: GroupT
    children: Tuple["Catalogue[ItemT, GroupT]", ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence but store a tuple so the node stays immutable
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Catalogue = Union[Leaf[ItemT], Group[ItemT, GroupT]]

Page = List[Tuple[int, Catalogue[Any, Any]]]


@dataclass(frozen=True)
class NodeContext:
    """A node together with where it sits in the tree."""
    node: Catalogue[Any, Any]
    address: Address
    path_labels: Tuple[str, ...]  # labels from root to this node, inclusive


def is_group(node: Catalogue[Any, Any]) -> bool:
    return isinstance(node, Group)


def is_leaf(node: Catalogue[Any, Any]) -> bool:
    return isinstance(node, Leaf)


def children_of(node: Catalogue[ItemT, GroupT]) -> Tuple[Catalogue[ItemT, GroupT], ...]:
    if isinstance(node, Group):
        return node.children
    return ()


def node_label(node: Catalogue[Any, Any]) -> str:
    """
    Display text for a node: the group's label, or the item's title
    (falling back to str(item) for payloads without one).
    """
    if isinstance(node, Group):
        return str(node.data)
    title = getattr(node.item, "title", None)
    if isinstance(title, str) and title:
        return title
    return str(node.item)


def resolve(root: Catalogue[ItemT, GroupT], address: Address) -> Optional[Catalogue[ItemT, GroupT]]:
    """
    Return the node named by `address`, or None.

    Each segment indexes into the current group's children. A leaf cannot be
    descended into and an out-of-range index names nothing; both give None.
    The empty address resolves to `root`.
    """
    node = root
    for segment in address.segments:
        if not isinstance(node, Group):
            return None
        if segment >= len(node.children):
            return None
        node = node.children[segment]
    return node


def resolve_path(root: Catalogue[ItemT, GroupT], address: Address) -> Optional[List[Catalogue[ItemT, GroupT]]]:
    """Like resolve, but return every node from root to target (inclusive)."""
    node = root
    path = [root]
    for segment in address.segments:
        if not isinstance(node, Group) or segment >= len(node.children):
            return None
        node = node.children[segment]
        path.append(node)
    return path


def paginate(node: Catalogue[ItemT, GroupT], page_size: int) -> List[Page]:
    """
    Split a group's children into consecutive pages of at most `page_size`.

    Every element is (local_index, child) where local_index is the child's
    position in the full child sequence, i.e. the segment to `join` onto the
    group's address. Leaves have no children and yield no pages.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    if not isinstance(node, Group):
        return []

    indexed = list(enumerate(node.children))
    return [indexed[start : start + page_size] for start in range(0, len(indexed), page_size)]


def iter_nodes(root: Catalogue[Any, Any]) -> Iterator[NodeContext]:
    """
    Depth-first, left-to-right traversal over the tree.

    Yields a NodeContext for every node, including the root.
    """
    # Stack: (node, address, path_labels)
    stack = [(root, Address.root(), ())]

    while stack:
        node, address, parent_labels = stack.pop()
        path_labels = parent_labels + (node_label(node),)

        yield NodeContext(node=node, address=address, path_labels=path_labels)

        if isinstance(node, Group):
            # Push children in reverse so they pop left-to-right
            for local_index in range(len(node.children) - 1, -1, -1):
                stack.append((node.children[local_index], address.join(local_index), path_labels))


def count_nodes(root: Catalogue[Any, Any]) -> Dict[str, int]:
    """
    Counts useful for sanity checks:
    - total_nodes
    - groups
    - leaves
    - max_depth (root is depth 0)
    """
    total = groups = leaves = max_depth = 0
    for ctx in iter_nodes(root):
        total += 1
        if isinstance(ctx.node, Group):
            groups += 1
        else:
            leaves += 1
        max_depth = max(max_depth, ctx.address.depth)

    return {
        "total_nodes": total,
        "groups": groups,
        "leaves": leaves,
        "max_depth": max_depth,
    }
