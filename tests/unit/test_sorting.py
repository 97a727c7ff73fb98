from datetime import date, datetime
from types import SimpleNamespace

import pytest

from domain.config import ConfigurationError, TaxonomyConfig
from domain.taxonomy import TaxonomyTreeBuilder, make_sort_key, rollup_tree, sort_items, sort_tree


def test_field_sort_puts_missing_values_first() -> None:
    undated, none_dated = {"title": "u"}, {"date": None}
    early, late = {"date": 1}, {"date": 9}

    ordered = sort_items([late, undated, early, none_dated], make_sort_key("date"), reverse=False)

    assert ordered == [undated, none_dated, early, late]


def test_reverse_flips_the_whole_sorted_sequence() -> None:
    undated = {"title": "u"}
    first_tie, second_tie = {"date": 5, "n": 1}, {"date": 5, "n": 2}
    early = {"date": 1}

    ordered = sort_items([first_tie, undated, early, second_tie], make_sort_key("date"), reverse=True)

    # Ties end up in reverse input order; missing values end up last
    assert ordered == [second_tie, first_tie, early, undated]


def test_attribute_items_are_sortable() -> None:
    a, b = SimpleNamespace(date=2), SimpleNamespace(date=1)

    assert sort_items([a, b], make_sort_key("date"), reverse=False) == [b, a]


def test_comparator_sort() -> None:
    def by_title_length(x, y):
        return len(x["title"]) - len(y["title"])

    items = [{"title": "ccc"}, {"title": "a"}, {"title": "bb"}]

    ordered = sort_items(items, make_sort_key(by_title_length), reverse=False)

    assert [i["title"] for i in ordered] == ["a", "bb", "ccc"]


def test_comparator_errors_propagate() -> None:
    def broken(x, y):
        raise TypeError("cannot compare")

    with pytest.raises(TypeError, match="cannot compare"):
        sort_items([{"n": 1}, {"n": 2}], make_sort_key(broken), reverse=False)


def test_invalid_sort_by_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        make_sort_key(42)  # type: ignore[arg-type]


def test_sort_tree_sorts_each_node_independently() -> None:
    p1, p2, p3, p4 = ({"date": d} for d in (1, 2, 3, 4))
    builder = TaxonomyTreeBuilder(TaxonomyConfig(id="categories"))
    for path, item in [("a", p1), ("a", p3), ("b", p4), ("b", p2)]:
        builder.add(path, item)
    tree = builder.build()
    rollup_tree(tree.root, "date")

    sort_tree(tree.root, "date", reverse=True)

    assert tree.get("a").own_items == [p3, p1]
    assert tree.get("b").own_items == [p4, p2]
    assert tree.root.aggregated_items == [p4, p3, p2, p1]


def test_sort_tree_can_leave_aggregated_order_alone() -> None:
    p1, p2 = {"date": 1}, {"date": 2}
    builder = TaxonomyTreeBuilder(TaxonomyConfig(id="categories"))
    builder.add("a", p1)
    builder.add("b", p2)
    tree = builder.build()
    rollup_tree(tree.root, "date")

    sort_tree(tree.root, "date", reverse=True, sort_aggregated=False)

    assert tree.root.aggregated_items == [p1, p2]


def test_field_sort_orders_dates_against_datetimes() -> None:
    day, noon, midnight = {"date": date(2024, 3, 2)}, {"date": datetime(2024, 3, 1, 12)}, {"date": date(2024, 3, 1)}

    assert sort_items([day, noon, midnight], make_sort_key("date"), reverse=False) == [midnight, noon, day]
