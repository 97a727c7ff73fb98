"""
Configuration management: models, loading, and validation.

Handles:
- SiteConfig: Main build configuration
- Taxonomy entries (delegated to domain.taxonomy.loader)
- Dotted-path callables for categorize / sort_by

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_site_config,
    parse_site_config,
    resolve_callable,
)
from infrastructure.config.models import SiteConfig

__all__ = [
    # Main config (most commonly used)
    "SiteConfig",
    "load_site_config",
    # Loaders
    "parse_site_config",
    "resolve_callable",
]
