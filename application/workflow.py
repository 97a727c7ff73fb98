"""Collections workflow: select items, build every taxonomy, publish the result."""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from opik import track

from application.constants import COLLECTIONS_KEY
from application.selection import select_items
from domain.schemas import TaxonomyTree
from domain.taxonomy import build_taxonomy, validate_taxonomy_configs
from infrastructure.config.models import SiteConfig
from infrastructure.observability import clear_taxonomy_context, set_log_context

logger = logging.getLogger(__name__)


@track(
    name="Collections.build",
    type="general",
    metadata={"task": "taxonomy_collections"},
    capture_input=False,
    capture_output=False,
)
def build_collections(items: Mapping[str, Any], cfg: SiteConfig) -> list[TaxonomyTree]:
    """
    Build the ordered list of taxonomy trees for one invocation.

    All taxonomy configurations are validated before items are selected or
    categorized; an invalid one fails the whole build.

    Args:
        items: item key -> item record (full, unfiltered set)
        cfg: SiteConfig instance

    Returns:
        One TaxonomyTree per configured taxonomy, in configuration order
    """
    taxonomies = validate_taxonomy_configs(cfg.taxonomies)
    selected = select_items(items, cfg.source_pattern)

    trees: list[TaxonomyTree] = []
    try:
        for tax_cfg in taxonomies:
            set_log_context(taxonomy_id=tax_cfg.id)
            trees.append(build_taxonomy(selected, tax_cfg))
    finally:
        clear_taxonomy_context()

    return trees


def publish_collections(
    metadata: MutableMapping[str, Any],
    trees: list[TaxonomyTree],
) -> MutableMapping[str, Any]:
    """
    Expose built trees to later build stages under the ``collections`` key.

    Any previous value is replaced.
    """
    if COLLECTIONS_KEY in metadata:
        logger.debug("Replacing existing '%s' metadata entry", COLLECTIONS_KEY)
    metadata[COLLECTIONS_KEY] = list(trees)
    return metadata
