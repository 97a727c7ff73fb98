"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, dotted callables)
- Item manifests (YAML, JSON)
- Observability (logging context)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import SiteConfig, load_site_config
from infrastructure.io import read_items

__all__ = [
    # Configuration (most commonly used)
    "load_site_config",
    "SiteConfig",
    # Items
    "read_items",
]
