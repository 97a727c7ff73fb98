"""Category path resolution: how an item declares its categories."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from domain.config import CategorizeFn, ConfigurationError, TaxonomyConfig
from domain.taxonomy.normalizer import normalize_category_names


def get_field(item: Any, name: str) -> Any:
    """Read a field from a mapping-like or attribute-based item; None if absent."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


class CategorizationStrategy(ABC):
    """
    Source of an item's raw category declaration.

    Concrete strategies only fetch the raw value; normalization is shared.
    """

    @abstractmethod
    def declared(self, item: Any, item_key: str) -> object:
        """Return the raw declaration for one item."""

    def resolve(self, item: Any, item_key: str) -> list[str]:
        return normalize_category_names(self.declared(item, item_key))


class StaticFieldStrategy(CategorizationStrategy):
    """Read the declaration from the item field named after the taxonomy."""

    def __init__(self, field: str) -> None:
        self.field = field

    def declared(self, item: Any, item_key: str) -> object:
        return get_field(item, self.field)


class CallbackStrategy(CategorizationStrategy):
    """Ask a caller-supplied function; its answer replaces the static field."""

    def __init__(self, fn: CategorizeFn) -> None:
        if not callable(fn):
            raise ConfigurationError(f"categorize must be callable, got {type(fn).__name__}")
        self.fn = fn

    def declared(self, item: Any, item_key: str) -> object:
        return self.fn(item, item_key)


def strategy_for(config: TaxonomyConfig) -> CategorizationStrategy:
    """Pick the categorization strategy of a taxonomy (once, before iterating items)."""
    if config.categorize is not None:
        return CallbackStrategy(config.categorize)
    return StaticFieldStrategy(config.id)
