"""Taxonomy tree construction."""

import logging
from typing import Any

from domain.config import TaxonomyConfig
from domain.schemas import CategoryNode, TaxonomyTree
from domain.taxonomy.normalizer import category_slug, split_category_path

logger = logging.getLogger(__name__)

ROOT_PATH = ""
ROOT_KEY: tuple[str, ...] = ()


class TaxonomyTreeBuilder:
    """
    Builds one taxonomy tree from (category path, item) pairs.

    Nodes live in an arena keyed by their tuple of slugs, so the same segment
    at the same position always lands on the same node, regardless of the
    order items arrive in. The joined ``path`` string is for display only:
    slugs may contain the separator, the tuple never collides.
    """

    def __init__(self, config: TaxonomyConfig) -> None:
        self.config = config
        self.root = CategoryNode(id=config.id, display_name=config.id, path=ROOT_PATH, key=ROOT_KEY)
        self.nodes: dict[tuple[str, ...], CategoryNode] = {ROOT_KEY: self.root}
        # (id(node), id(item)) pairs already filed
        self._members: set[tuple[int, int]] = set()

    def _child(self, parent: CategoryNode, display_name: str) -> CategoryNode:
        slug = category_slug(display_name)
        node = parent.children.get(slug)
        if node is None:
            key = (*parent.key, slug)
            node = CategoryNode(
                id=slug,
                display_name=display_name,
                path=self.config.separator.join(key),
                key=key,
                depth=parent.depth + 1,
            )
            parent.children[slug] = node
            self.nodes[key] = node
            logger.debug("Created category %r (taxonomy=%s)", node.path, self.config.id)
        return node

    def add(self, category_path: str, item: Any) -> CategoryNode:
        """
        File ``item`` under ``category_path``, creating missing nodes on the way.

        A path without any non-empty segment files the item on the root.

        Returns:
            The node the item was filed on
        """
        node = self.root
        for segment in split_category_path(category_path, self.config.separator):
            node = self._child(node, segment)

        membership = (id(node), id(item))
        if membership not in self._members:
            self._members.add(membership)
            node.own_items.append(item)
        return node

    def build(self) -> TaxonomyTree:
        return TaxonomyTree(id=self.config.id, config=self.config, root=self.root, nodes=self.nodes)
