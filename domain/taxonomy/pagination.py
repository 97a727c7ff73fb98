"""Chunking of ordered item lists into pages."""

from collections.abc import Sequence
from typing import Any

from domain.config import ConfigurationError, PageSource
from domain.schemas import CategoryNode
from domain.taxonomy.traversal import walk_post_order


def iter_pages(n_items: int, page_size: int) -> list[tuple[int, int]]:
    """
    Return (start, end) index pairs covering a list of length n_items.

    Raises:
        ConfigurationError: If page_size is not positive
    """
    if page_size <= 0:
        raise ConfigurationError(f"page_size must be a positive integer, got {page_size}")

    segments: list[tuple[int, int]] = []
    start = 0
    while start < n_items:
        end = min(start + page_size, n_items)
        segments.append((start, end))
        start = end
    return segments


def paginate(items: Sequence[Any], page_size: int, page_limit: int | None = None) -> list[list[Any]]:
    """Split ``items`` into contiguous pages of at most ``page_size`` items, in order."""
    pages = [list(items[start:end]) for start, end in iter_pages(len(items), page_size)]
    if page_limit is not None:
        pages = pages[:page_limit]
    return pages


def paginate_tree(
    root: CategoryNode,
    page_size: int,
    *,
    source: PageSource = PageSource.AGGREGATED,
    page_limit: int | None = None,
) -> None:
    for node in walk_post_order(root):
        items = node.own_items if source is PageSource.OWN else node.aggregated_items
        node.pages = paginate(items, page_size, page_limit)
