"""Per-taxonomy configuration model."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

Comparator = Callable[[Any, Any], int]
CategorizeFn = Callable[[Any, str], Any]


class ConfigurationError(ValueError):
    """Raised when a taxonomy configuration cannot be used for a build."""


class PageSource(str, Enum):
    """Which per-node item list gets chunked into pages."""

    OWN = "own"
    AGGREGATED = "aggregated"


class TaxonomyConfig(BaseModel):
    """
    Configuration of a single taxonomy ("collection").

    Defaults match the original plugin behavior: "/" separated paths,
    10 items per page, newest first by the ``date`` field.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str = Field(..., description="Taxonomy id; also the item field holding static category declarations.")
    separator: str = Field(default="/", description="Separator between category path segments.")
    page_size: int = Field(default=10, description="Maximum number of items per page.")
    page_limit: int | None = Field(default=None, description="Optional cap on the number of pages per node.")
    page_source: PageSource = Field(
        default=PageSource.AGGREGATED,
        description="Paginate each node's own items or its aggregated items.",
    )
    sort_by: str | Comparator = Field(
        default="date",
        description="Item field name to sort by, or a two-argument comparator returning <0, 0 or >0.",
    )
    reverse: bool = Field(default=True, description="Reverse the fully sorted sequence.")
    sort_aggregated: bool = Field(default=True, description="Also sort aggregated item lists.")
    timestamp_field: str = Field(default="date", description="Item field used for last-timestamp stats.")
    categorize: CategorizeFn | None = Field(
        default=None,
        description="Optional callback (item, item_key) -> category declaration; overrides the static field.",
    )
    navigation: bool = Field(default=False, description="Attach previous/next links to items.")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque presentation settings passed through to the built tree.",
    )

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        if not value.strip():
            raise ConfigurationError("taxonomy id must be a non-empty string")
        return value

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if not value:
            raise ConfigurationError("separator must be a non-empty string")
        return value

    @field_validator("page_size")
    @classmethod
    def _check_page_size(cls, value: int) -> int:
        if value <= 0:
            raise ConfigurationError(f"page_size must be a positive integer, got {value}")
        return value

    @field_validator("page_limit")
    @classmethod
    def _check_page_limit(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ConfigurationError(f"page_limit must be a positive integer or None, got {value}")
        return value
