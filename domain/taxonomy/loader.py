"""Parse taxonomy configuration from a plain dict."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from domain.config import ConfigurationError, PageSource, TaxonomyConfig


def parse_taxonomy_config(data: Mapping[str, Any]) -> TaxonomyConfig:
    """
    Parse a pre-loaded dict into a TaxonomyConfig.

    This is a pure function - it does NOT perform file I/O or imports.
    Callables referenced by dotted path are resolved in infrastructure.config.loader.

    Args:
        data: Taxonomy mapping (e.g. one entry of ``taxonomies`` in site.yaml)

    Returns:
        Validated TaxonomyConfig

    Raises:
        ConfigurationError: If required keys are missing or have wrong types
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"taxonomy config must be a mapping, got {type(data).__name__}")

    taxonomy_id = data.get("id")
    if not isinstance(taxonomy_id, str) or not taxonomy_id.strip():
        raise ConfigurationError("taxonomy config missing required key: id")

    categorize = data.get("categorize")
    if categorize is not None and not callable(categorize):
        raise ConfigurationError(f"taxonomy '{taxonomy_id}': categorize must be callable")

    sort_by = data.get("sort_by", "date")
    if not (isinstance(sort_by, str) or callable(sort_by)):
        raise ConfigurationError(f"taxonomy '{taxonomy_id}': sort_by must be a field name or a comparator")

    page_source = data.get("page_source", PageSource.AGGREGATED)
    try:
        PageSource(page_source)
    except ValueError as e:
        raise ConfigurationError(f"taxonomy '{taxonomy_id}': invalid page_source {page_source!r}") from e

    try:
        return TaxonomyConfig(**dict(data))
    except ValidationError as e:
        raise ConfigurationError(f"taxonomy '{taxonomy_id}': {e}") from e


def validate_taxonomy_configs(
    configs: Sequence[TaxonomyConfig | Mapping[str, Any]],
) -> list[TaxonomyConfig]:
    """
    Turn a list of configs into validated TaxonomyConfig objects, failing fast.

    Raises:
        ConfigurationError: On any invalid entry or duplicate taxonomy id
    """
    # Instances are re-checked too; model_construct() skips validation
    resolved = [
        parse_taxonomy_config(cfg.model_dump() if isinstance(cfg, TaxonomyConfig) else cfg) for cfg in configs
    ]

    seen: set[str] = set()
    for cfg in resolved:
        if cfg.id in seen:
            raise ConfigurationError(f"duplicate taxonomy id: {cfg.id}")
        seen.add(cfg.id)
    return resolved
