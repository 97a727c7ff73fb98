"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.config import TaxonomyConfig
from infrastructure.constants import DEFAULT_SOURCE_PATTERN, ITEMS_FILE


class SiteConfig(BaseModel):
    """
    Build configuration.
    - Loaded from site.yaml
    - Taxonomy entries resolved (dotted callables imported) by the configuration loader
    - Consumed by the collections workflow and the CLI
    """

    source_pattern: str = Field(
        default=DEFAULT_SOURCE_PATTERN,
        description="Glob over item keys selecting which items get categorized.",
    )
    items_file: Path = Field(
        default_factory=lambda: ITEMS_FILE,
        description="YAML or JSON manifest mapping item key -> item record.",
    )
    output_root: Path = Field(
        default_factory=lambda: Path("outputs"),
        description="Directory under which per-run output folders are created.",
    )
    taxonomies: list[TaxonomyConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate(self) -> "SiteConfig":
        if not self.source_pattern.strip():
            raise ValueError("source_pattern must be a non-empty glob")

        ids = [t.id for t in self.taxonomies]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate taxonomy ids in site config: {duplicates}")

        return self
