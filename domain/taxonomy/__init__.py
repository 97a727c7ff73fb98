"""
Taxonomy engine: category resolution, tree building, aggregation and paging.

Turns a flat item mapping into one category tree per configured taxonomy.
All functions in this module are pure (no file I/O); the only write to
items is the optional navigation linking.
"""

from domain.taxonomy.aggregation import aggregate_tree, rollup_tree
from domain.taxonomy.builder import TaxonomyTreeBuilder
from domain.taxonomy.engine import build_taxonomies, build_taxonomy
from domain.taxonomy.loader import parse_taxonomy_config, validate_taxonomy_configs
from domain.taxonomy.navigation import link_navigation
from domain.taxonomy.normalizer import category_slug, normalize_category_names
from domain.taxonomy.pagination import paginate, paginate_tree
from domain.taxonomy.resolver import CallbackStrategy, CategorizationStrategy, StaticFieldStrategy, strategy_for
from domain.taxonomy.sorting import make_sort_key, sort_items, sort_tree
from domain.taxonomy.stats import compute_tree_stats
from domain.taxonomy.traversal import walk_post_order

__all__ = [
    # Entry points
    "build_taxonomy",
    "build_taxonomies",
    "parse_taxonomy_config",
    "validate_taxonomy_configs",
    # Resolution
    "CategorizationStrategy",
    "StaticFieldStrategy",
    "CallbackStrategy",
    "strategy_for",
    "normalize_category_names",
    "category_slug",
    # Phases
    "TaxonomyTreeBuilder",
    "aggregate_tree",
    "compute_tree_stats",
    "rollup_tree",
    "make_sort_key",
    "sort_items",
    "sort_tree",
    "paginate",
    "paginate_tree",
    "link_navigation",
    "walk_post_order",
]
