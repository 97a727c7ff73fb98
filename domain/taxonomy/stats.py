"""Per-node statistics."""

from collections.abc import Iterable
from typing import Any

from domain.schemas import CategoryNode
from domain.taxonomy.resolver import get_field
from domain.taxonomy.timestamps import as_comparable
from domain.taxonomy.traversal import walk_post_order


def latest(values: Iterable[Any]) -> Any | None:
    """Maximum of the non-None values, or None when there are none. The value is returned as given."""
    present = [v for v in values if v is not None]
    return max(present, key=as_comparable) if present else None


def compute_node_stats(node: CategoryNode, timestamp_field: str) -> None:
    """
    Fill ``node.stats`` from its item lists and its children's stats.

    Children must already have their stats computed, and ``aggregated_items``
    must already be populated.
    """
    stats = node.stats
    stats.own_count = len(node.own_items)
    stats.aggregated_count = len(node.aggregated_items)
    stats.own_last_timestamp = latest(get_field(item, timestamp_field) for item in node.own_items)
    stats.aggregated_last_timestamp = latest(
        [stats.own_last_timestamp, *(c.stats.aggregated_last_timestamp for c in node.children.values())]
    )


def compute_tree_stats(root: CategoryNode, timestamp_field: str) -> None:
    """Compute stats for a whole subtree in one post-order pass."""
    for node in walk_post_order(root):
        compute_node_stats(node, timestamp_field)
