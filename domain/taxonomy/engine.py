"""Taxonomy build pipeline: resolve -> build -> aggregate/stats -> sort -> paginate."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from domain.config import TaxonomyConfig
from domain.schemas import TaxonomyTree
from domain.taxonomy.aggregation import rollup_tree
from domain.taxonomy.builder import TaxonomyTreeBuilder
from domain.taxonomy.loader import validate_taxonomy_configs
from domain.taxonomy.navigation import link_navigation
from domain.taxonomy.pagination import paginate_tree
from domain.taxonomy.resolver import strategy_for
from domain.taxonomy.sorting import sort_tree

logger = logging.getLogger(__name__)


def build_taxonomy(items: Mapping[str, Any], config: TaxonomyConfig) -> TaxonomyTree:
    """
    Build one taxonomy tree from an item mapping.

    Items are visited in mapping order; callback and comparator errors propagate.

    Args:
        items: item key -> item record (already filtered by the caller)
        config: Validated taxonomy configuration

    Returns:
        Fully populated TaxonomyTree (membership, aggregates, stats, order, pages)
    """
    strategy = strategy_for(config)
    builder = TaxonomyTreeBuilder(config)

    filed = 0
    for key, item in items.items():
        for category_path in strategy.resolve(item, key):
            builder.add(category_path, item)
            filed += 1
    tree = builder.build()
    logger.debug("Taxonomy %s: %d nodes, %d item placements", config.id, len(tree.nodes), filed)

    rollup_tree(tree.root, config.timestamp_field)
    sort_tree(tree.root, config.sort_by, reverse=config.reverse, sort_aggregated=config.sort_aggregated)
    paginate_tree(tree.root, config.page_size, source=config.page_source, page_limit=config.page_limit)
    if config.navigation:
        link_navigation(tree)

    logger.info(
        "Built taxonomy %s: %d categories, %d items",
        config.id,
        len(tree.nodes) - 1,
        tree.stats.aggregated_count,
    )
    return tree


def build_taxonomies(
    items: Mapping[str, Any],
    configs: Sequence[TaxonomyConfig | Mapping[str, Any]],
) -> list[TaxonomyTree]:
    """
    Build every configured taxonomy, in configuration order.

    All configurations are validated before any item is touched.

    Raises:
        ConfigurationError: If any configuration is invalid
    """
    resolved = validate_taxonomy_configs(configs)
    return [build_taxonomy(items, cfg) for cfg in resolved]
