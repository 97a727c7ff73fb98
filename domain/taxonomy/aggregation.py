"""Bottom-up aggregation of item sets."""

from domain.schemas import CategoryNode
from domain.taxonomy.stats import compute_node_stats
from domain.taxonomy.traversal import walk_post_order


def aggregate_node(node: CategoryNode) -> None:
    """
    Set ``node.aggregated_items`` from its children and its own items.

    Children's aggregated lists come first (in child order), then the node's
    own items. Duplicates are dropped by identity, keeping the first
    occurrence: an item filed under two siblings counts once here.
    """
    seen: set[int] = set()
    merged = []
    sources = [*(child.aggregated_items for child in node.children.values()), node.own_items]
    for source in sources:
        for item in source:
            if id(item) not in seen:
                seen.add(id(item))
                merged.append(item)
    node.aggregated_items = merged


def aggregate_tree(root: CategoryNode) -> None:
    for node in walk_post_order(root):
        aggregate_node(node)


def rollup_tree(root: CategoryNode, timestamp_field: str) -> None:
    """
    Aggregate items and compute stats in a single post-order pass.

    Stats only depend on counts and maxima, which later sorting does not change.
    """
    for node in walk_post_order(root):
        aggregate_node(node)
        compute_node_stats(node, timestamp_field)
