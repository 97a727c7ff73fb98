"""Item ordering."""

from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import Any

from domain.config import Comparator, ConfigurationError
from domain.schemas import CategoryNode
from domain.taxonomy.resolver import get_field
from domain.taxonomy.timestamps import as_comparable
from domain.taxonomy.traversal import walk_post_order


def make_sort_key(sort_by: str | Comparator) -> Callable[[Any], Any]:
    """
    Build a ``sorted`` key from a field name or a two-argument comparator.

    With a field name, items missing the field (or holding None) sort first,
    the rest ascending by value. Dates and datetimes compare together.
    """
    if callable(sort_by):
        return cmp_to_key(sort_by)
    if not isinstance(sort_by, str):
        raise ConfigurationError(f"sort_by must be a field name or a comparator, got {type(sort_by).__name__}")

    def _key(item: Any) -> tuple:
        value = get_field(item, sort_by)
        return (0,) if value is None else (1, as_comparable(value))

    return _key


def sort_items(items: Sequence[Any], key: Callable[[Any], Any], reverse: bool) -> list[Any]:
    """
    Stable sort, then reverse the whole result if requested.

    Reversing afterwards means equal-key items come out in reverse input order.
    """
    ordered = sorted(items, key=key)
    if reverse:
        ordered.reverse()
    return ordered


def sort_tree(
    root: CategoryNode,
    sort_by: str | Comparator,
    *,
    reverse: bool,
    sort_aggregated: bool = True,
) -> None:
    """Sort every node's own items (and aggregated items, if asked) independently."""
    key = make_sort_key(sort_by)
    for node in walk_post_order(root):
        node.own_items = sort_items(node.own_items, key, reverse)
        if sort_aggregated:
            node.aggregated_items = sort_items(node.aggregated_items, key, reverse)
