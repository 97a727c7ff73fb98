"""Pydantic models for the built taxonomy trees."""

from typing import Any

from pydantic import BaseModel, Field

from domain.config import TaxonomyConfig


class CategoryStats(BaseModel):
    """Counts and most recent timestamps of a node and its subtree."""

    own_count: int = 0
    aggregated_count: int = 0
    own_last_timestamp: Any | None = None
    aggregated_last_timestamp: Any | None = None


class CategoryNode(BaseModel):
    """
    One category in a taxonomy tree.

    Items are held by reference; nothing here copies or rebuilds them.
    """

    id: str = Field(..., description="Slug of the display name, unique among siblings.")
    display_name: str = Field(..., description="Label segment as first declared.")
    path: str = Field(..., description="Separator-joined slug path from the taxonomy root ('' for the root).")
    key: tuple[str, ...] = Field(default=(), description="Slug of every node from the root down; the arena key.")
    depth: int = 0
    children: dict[str, "CategoryNode"] = Field(default_factory=dict)
    own_items: list[Any] = Field(default_factory=list)
    aggregated_items: list[Any] = Field(default_factory=list)
    stats: CategoryStats = Field(default_factory=CategoryStats)
    pages: list[list[Any]] = Field(default_factory=list)

    @property
    def categories(self) -> list["CategoryNode"]:
        return list(self.children.values())


class TaxonomyTree(BaseModel):
    """A built taxonomy: root node, node arena and the configuration it was built with."""

    id: str
    config: TaxonomyConfig
    root: CategoryNode
    # slug tuple -> node, including the root under ()
    nodes: dict[tuple[str, ...], CategoryNode] = Field(default_factory=dict)

    @property
    def categories(self) -> list[CategoryNode]:
        return self.root.categories

    @property
    def stats(self) -> CategoryStats:
        return self.root.stats

    @property
    def metadata(self) -> dict[str, Any]:
        return self.config.metadata

    def get(self, path: str | tuple[str, ...]) -> CategoryNode | None:
        """
        Look up a node by its slug path.

        A string is split on the taxonomy separator. When slugs can contain
        the separator, pass the slug tuple to reach a node unambiguously.
        """
        if isinstance(path, str):
            path = tuple(path.split(self.config.separator)) if path else ()
        return self.nodes.get(path)
