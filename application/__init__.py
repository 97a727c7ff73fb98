"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the collections build workflow and its outputs.
"""

from application.report import compute_category_stats_table, compute_category_stats_table_and_save
from application.selection import matches_pattern, select_items
from application.serialize import save_collections_json, serialize_collections
from application.workflow import build_collections, publish_collections

__all__ = [
    # Main workflow
    "build_collections",
    "publish_collections",
    # Item selection
    "select_items",
    "matches_pattern",
    # Outputs
    "serialize_collections",
    "save_collections_json",
    "compute_category_stats_table",
    "compute_category_stats_table_and_save",
]
