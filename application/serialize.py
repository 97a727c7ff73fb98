"""Taxonomy tree serialization utilities."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from application.constants import CATEGORIES_KEY, TAXONOMY_ID_KEY
from domain.schemas import CategoryNode, TaxonomyTree
from domain.taxonomy import walk_post_order
from infrastructure.io import write_json

logger = logging.getLogger(__name__)


def _item_index(items: Mapping[str, Any]) -> dict[int, str]:
    # Items are not hashable in general (dicts); index them by identity
    return {id(item): key for key, item in items.items()}


def serialize_node(node: CategoryNode, index: Mapping[int, str]) -> dict[str, Any]:
    """
    Render one node (and its subtree) as a JSON-friendly dict.

    Items are referenced by their item key; unknown items render as None.
    Children are rendered before their parent, so depth is not limited by
    the interpreter's recursion limit.
    """

    def keys(seq: list[Any]) -> list[str | None]:
        return [index.get(id(item)) for item in seq]

    rendered: dict[int, dict[str, Any]] = {}
    for current in walk_post_order(node):
        rendered[id(current)] = {
            "id": current.id,
            "name": current.display_name,
            "path": current.path,
            "stats": current.stats.model_dump(mode="json"),
            "own_items": keys(current.own_items),
            "aggregated_items": keys(current.aggregated_items),
            "pages": [keys(page) for page in current.pages],
            CATEGORIES_KEY: [rendered.pop(id(child)) for child in current.children.values()],
        }
    return rendered[id(node)]


def serialize_collections(trees: list[TaxonomyTree], items: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Render every taxonomy tree; the root node's fields sit at taxonomy level."""
    index = _item_index(items)
    records: list[dict[str, Any]] = []
    for tree in trees:
        record = serialize_node(tree.root, index)
        record.pop("name")
        record.pop("path")
        record[TAXONOMY_ID_KEY] = tree.id
        record["config"] = dict(tree.metadata)
        records.append(record)
    return records


def save_collections_json(
    trees: list[TaxonomyTree],
    items: Mapping[str, Any],
    output_path: Path,
) -> Path:
    """Serialize trees and write them as JSON."""
    write_json(output_path, serialize_collections(trees, items))
    logger.info("Saved collections JSON: %s", output_path)
    return output_path
