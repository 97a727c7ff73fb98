import pytest

from domain.config import ConfigurationError, PageSource, TaxonomyConfig
from domain.taxonomy import build_taxonomies, parse_taxonomy_config


def test_defaults_match_original_plugin() -> None:
    cfg = TaxonomyConfig(id="categories")

    assert cfg.separator == "/"
    assert cfg.page_size == 10
    assert cfg.sort_by == "date"
    assert cfg.reverse is True
    assert cfg.categorize is None
    assert cfg.page_source is PageSource.AGGREGATED


@pytest.mark.parametrize("page_size", [0, -3])
def test_non_positive_page_size_is_rejected(page_size: int) -> None:
    with pytest.raises(ValueError, match="page_size"):
        TaxonomyConfig(id="tags", page_size=page_size)


def test_page_size_assignment_is_validated() -> None:
    cfg = TaxonomyConfig(id="tags")
    with pytest.raises(ValueError):
        cfg.page_size = 0


def test_non_callable_categorize_is_rejected() -> None:
    with pytest.raises(ValueError):
        TaxonomyConfig(id="tags", categorize="not a function")


def test_sort_by_accepts_comparator() -> None:
    def by_title(a, b):
        return (a["title"] > b["title"]) - (a["title"] < b["title"])

    cfg = TaxonomyConfig(id="tags", sort_by=by_title)
    assert cfg.sort_by is by_title


def test_parse_taxonomy_config_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="categorize"):
        parse_taxonomy_config({"id": "tags", "categorize": 42})

    with pytest.raises(ConfigurationError, match="page_source"):
        parse_taxonomy_config({"id": "tags", "page_source": "everything"})

    with pytest.raises(ConfigurationError, match="id"):
        parse_taxonomy_config({"page_size": 3})

    with pytest.raises(ConfigurationError):
        parse_taxonomy_config({"id": "tags", "page_size": 0})


def test_invalid_config_fails_before_any_item_is_categorized() -> None:
    calls: list[str] = []

    def categorize(item, key):
        calls.append(key)
        return "a"

    items = {"a.md": {"date": 1}}
    configs = [
        {"id": "first", "categorize": categorize},
        {"id": "second", "page_size": -1},
    ]

    with pytest.raises(ConfigurationError):
        build_taxonomies(items, configs)
    assert calls == []


def test_duplicate_taxonomy_ids_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="duplicate"):
        build_taxonomies({}, [TaxonomyConfig(id="tags"), {"id": "tags"}])


def test_unknown_keys_are_rejected() -> None:
    # A misspelled page_size must not fall back to the default
    with pytest.raises(ConfigurationError, match="pagesize"):
        parse_taxonomy_config({"id": "tags", "pagesize": 0})
