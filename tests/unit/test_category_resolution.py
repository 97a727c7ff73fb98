from types import SimpleNamespace

import pytest

from domain.config import TaxonomyConfig
from domain.taxonomy import (
    CallbackStrategy,
    StaticFieldStrategy,
    category_slug,
    normalize_category_names,
    strategy_for,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("news/tech", ["news/tech"]),
        (["tag1", "tag1", "tag2"], ["tag1", "tag2"]),
        (["b", 3, None, {"x": 1}, "a", "b"], ["b", "a"]),
        (("x", "y"), ["x", "y"]),
        (None, []),
        (42, []),
        ({"news": True}, []),
    ],
)
def test_normalize_category_names(raw: object, expected: list[str]) -> None:
    assert normalize_category_names(raw) == expected


def test_static_field_strategy_reads_taxonomy_field() -> None:
    strategy = strategy_for(TaxonomyConfig(id="tags"))
    assert isinstance(strategy, StaticFieldStrategy)

    assert strategy.resolve({"tags": ["a", "a"]}, "x.md") == ["a"]
    assert strategy.resolve(SimpleNamespace(tags="b"), "y.md") == ["b"]
    assert strategy.resolve({"title": "untagged"}, "z.md") == []


def test_callback_strategy_overrides_static_field() -> None:
    seen: list[str] = []

    def categorize(item, key):
        seen.append(key)
        return key.split("/")[0]

    strategy = strategy_for(TaxonomyConfig(id="tags", categorize=categorize))
    assert isinstance(strategy, CallbackStrategy)

    assert strategy.resolve({"tags": "ignored"}, "guides/setup.md") == ["guides"]
    assert seen == ["guides/setup.md"]


def test_callback_returning_none_yields_no_categories() -> None:
    strategy = strategy_for(TaxonomyConfig(id="tags", categorize=lambda item, key: None))
    assert strategy.resolve({"tags": "a"}, "a.md") == []


def test_callback_errors_propagate() -> None:
    def categorize(item, key):
        raise RuntimeError("boom")

    strategy = strategy_for(TaxonomyConfig(id="tags", categorize=categorize))
    with pytest.raises(RuntimeError, match="boom"):
        strategy.resolve({}, "a.md")


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("News", "news"),
        ("Web Development", "web-development"),
        ("  Web   Development ", "web-development"),
        ("Café Culture", "cafe-culture"),
        ("C++", "c"),
    ],
)
def test_category_slug(name: str, slug: str) -> None:
    assert category_slug(name) == slug


def test_category_slug_is_idempotent() -> None:
    assert category_slug(category_slug("Machine Learning")) == category_slug("Machine Learning")
