"""Tree traversal helpers."""

from collections.abc import Iterator

from domain.schemas import CategoryNode


def walk_post_order(root: CategoryNode) -> Iterator[CategoryNode]:
    """
    Yield every node of the subtree, children before their parent.

    Children are visited in insertion order. Iterative, so arbitrarily deep
    category paths do not hit the recursion limit.
    """
    stack: list[tuple[CategoryNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(node.children.values()):
            stack.append((child, False))
