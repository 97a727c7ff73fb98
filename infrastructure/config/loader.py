"""Configuration loading from YAML files."""

import importlib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from domain.config import ConfigurationError, TaxonomyConfig
from domain.taxonomy.loader import validate_taxonomy_configs
from infrastructure.config.models import SiteConfig
from infrastructure.constants import DEFAULT_SOURCE_PATTERN, ITEMS_FILE

# Keys of a taxonomy entry that may name a callable as "package.module:function"
CALLABLE_KEYS = ("categorize", "sort_by")


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def resolve_callable(ref: str) -> Callable[..., Any]:
    """
    Import a callable referenced as ``"package.module:attribute"``.

    Raises:
        ConfigurationError: If the module or attribute cannot be found, or is not callable
    """
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"Expected 'package.module:function', got {ref!r}")

    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        raise ConfigurationError(f"Cannot import module {module_name!r} for {ref!r}") from e

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr!r}") from e

    if not callable(obj):
        raise ConfigurationError(f"{ref!r} does not reference a callable")
    return obj


def _resolve_taxonomy_entry(entry: Any) -> Any:
    """Replace dotted callable references of a taxonomy entry with the callables themselves."""
    if not isinstance(entry, dict):
        return entry

    resolved = dict(entry)
    categorize = resolved.get("categorize")
    if isinstance(categorize, str):
        resolved["categorize"] = resolve_callable(categorize)

    # A plain sort_by string is a field name; only "module:function" is imported
    sort_by = resolved.get("sort_by")
    if isinstance(sort_by, str) and ":" in sort_by:
        resolved["sort_by"] = resolve_callable(sort_by)

    return resolved


def parse_site_config(data: dict[str, Any]) -> SiteConfig:
    """
    Build a SiteConfig from a pre-loaded dict.

    Taxonomies are validated (and their callables imported) before the
    SiteConfig is constructed, so a bad entry fails the whole load.
    """
    taxonomies_raw = data.get("taxonomies") or []
    if not isinstance(taxonomies_raw, list):
        raise ConfigurationError("taxonomies must be a list")

    taxonomies: list[TaxonomyConfig] = validate_taxonomy_configs(
        [_resolve_taxonomy_entry(entry) for entry in taxonomies_raw]
    )

    return SiteConfig(
        source_pattern=str(data.get("source_pattern") or DEFAULT_SOURCE_PATTERN),
        items_file=Path(data.get("items_file") or ITEMS_FILE),
        output_root=Path(data.get("output_root") or "outputs"),
        taxonomies=taxonomies,
    )


def load_site_config(path: Path) -> SiteConfig:
    """
    Load site.yaml into a fully-resolved SiteConfig.

    This function handles file I/O, then delegates taxonomy parsing to the domain layer.
    """
    return parse_site_config(_load_yaml(path))
