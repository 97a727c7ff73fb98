from domain.config import TaxonomyConfig
from domain.taxonomy import TaxonomyTreeBuilder


def _builder(**overrides) -> TaxonomyTreeBuilder:
    return TaxonomyTreeBuilder(TaxonomyConfig(id="categories", **overrides))


def test_path_creates_nested_nodes_lazily() -> None:
    builder = _builder()
    post = {"title": "p"}

    leaf = builder.add("News/Tech/AI", post)

    assert leaf.path == "news/tech/ai"
    assert leaf.depth == 3
    assert leaf.own_items == [post]
    assert list(builder.nodes) == [(), ("news",), ("news", "tech"), ("news", "tech", "ai")]
    # Intermediate nodes are created but hold no own items
    assert builder.nodes[("news",)].own_items == []
    assert builder.nodes[("news",)].display_name == "News"


def test_same_segment_reuses_node() -> None:
    builder = _builder()
    a, b = {"n": 1}, {"n": 2}

    builder.add("news/tech", a)
    builder.add("news/sports", b)

    news = builder.root.children["news"]
    assert list(news.children) == ["tech", "sports"]
    assert news.children["tech"].own_items == [a]
    assert news.children["sports"].own_items == [b]


def test_slug_collision_merges_silently_and_keeps_first_name() -> None:
    builder = _builder()
    a, b = {"n": 1}, {"n": 2}

    builder.add("Web Dev", a)
    builder.add("web   dev", b)

    assert list(builder.root.children) == ["web-dev"]
    node = builder.root.children["web-dev"]
    assert node.display_name == "Web Dev"
    assert node.own_items == [a, b]


def test_item_is_filed_once_per_node() -> None:
    builder = _builder()
    post = {"n": 1}

    builder.add("News", post)
    builder.add("news", post)

    assert builder.root.children["news"].own_items == [post]


def test_custom_separator() -> None:
    builder = _builder(separator=" > ")
    post = {"n": 1}

    leaf = builder.add("Guides > Python", post)

    assert leaf.path == "guides > python"
    assert builder.root.children["guides"].children["python"] is leaf


def test_empty_path_files_item_on_root() -> None:
    builder = _builder()
    post = {"n": 1}

    node = builder.add(" / ", post)

    assert node is builder.root
    assert builder.root.own_items == [post]
    assert builder.root.children == {}


def test_build_exposes_arena_and_root() -> None:
    builder = _builder(metadata={"title": "Categories"})
    builder.add("a/b", {"n": 1})

    tree = builder.build()

    assert tree.id == "categories"
    assert tree.root is builder.root
    assert tree.get("a/b") is builder.nodes[("a", "b")]
    assert tree.metadata == {"title": "Categories"}
    assert [c.id for c in tree.categories] == ["a"]


def test_separator_inside_slug_keeps_nodes_apart() -> None:
    builder = _builder(separator="-")
    flat, nested = {"n": 1}, {"n": 2}

    top = builder.add("a b", flat)
    leaf = builder.add("a-b", nested)

    # Both display as "a-b", but they are different nodes
    assert top.path == leaf.path == "a-b"
    assert top is not leaf
    assert len(builder.nodes) == 4
    assert builder.nodes[("a-b",)] is top
    assert builder.nodes[("a", "b")] is leaf

    tree = builder.build()
    assert tree.get(("a-b",)).own_items == [flat]
    assert tree.get("a-b") is leaf
