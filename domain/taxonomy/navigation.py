"""Previous/next back-references between items of a category listing."""

from collections.abc import MutableMapping
from itertools import chain
from typing import Any

from domain.schemas import TaxonomyTree
from domain.taxonomy.traversal import walk_post_order

NAVIGATION_KEY = "collection_navigation"


def _navigation_slot(item: Any) -> dict[str, Any]:
    if isinstance(item, MutableMapping):
        return item.setdefault(NAVIGATION_KEY, {})
    slot = getattr(item, NAVIGATION_KEY, None)
    if slot is None:
        slot = {}
        setattr(item, NAVIGATION_KEY, slot)
    return slot


def link_navigation(tree: TaxonomyTree) -> None:
    """
    Attach ``previous``/``next`` links to every item of every node listing.

    Links follow the pages of each node, so items on pages dropped by
    ``page_limit`` get none. They are stored as
    ``item[collection_navigation][taxonomy_id][node_path]``; the root
    listing uses the empty path. This is the only write made to items.
    """
    for node in walk_post_order(tree.root):
        listing = list(chain.from_iterable(node.pages))
        last = len(listing) - 1
        for i, item in enumerate(listing):
            links = _navigation_slot(item).setdefault(tree.id, {})
            links[node.path] = {
                "previous": listing[i - 1] if i > 0 else None,
                "next": listing[i + 1] if i < last else None,
            }
