"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- config: Pydantic taxonomy configuration and ConfigurationError
- schemas: Pydantic models for category nodes and taxonomy trees
- taxonomy: Category resolution, tree building, aggregation, sorting, paging
"""

from domain.config import ConfigurationError, PageSource, TaxonomyConfig
from domain.schemas import CategoryNode, CategoryStats, TaxonomyTree

__all__ = [
    "TaxonomyConfig",
    "PageSource",
    "ConfigurationError",
    "CategoryNode",
    "CategoryStats",
    "TaxonomyTree",
]
