"""Category name normalization utilities."""

import re
from unicodedata import normalize

from pymdownx.slugs import slugify as _md_slugify

_slugify_lower = _md_slugify(case="lower")


def normalize_category_names(raw: object) -> list[str]:
    """
    Normalize a raw category declaration into a list of category paths.

    Examples:
        >>> normalize_category_names("news/tech")
        ['news/tech']
        >>> normalize_category_names(["tag1", "tag1", 3, "tag2"])
        ['tag1', 'tag2']
        >>> normalize_category_names(None)
        []

    Args:
        raw: Declared value (string, list/tuple of strings, or anything else)

    Returns:
        Deduplicated category paths in first-seen order; empty for unusable input
    """
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, (list, tuple)):
        # dict.fromkeys keeps first-seen order
        return list(dict.fromkeys(v for v in raw if isinstance(v, str)))
    return []


def clean_segment(segment: str) -> str:
    """Strip a path segment and collapse inner whitespace."""
    return re.sub(r"\s+", " ", segment).strip()


def split_category_path(path: str, separator: str) -> list[str]:
    """Split a category path into cleaned, non-empty display segments."""
    segments = (clean_segment(s) for s in path.split(separator))
    return [s for s in segments if s]


def category_slug(display_name: str) -> str:
    """
    Derive a node id from a display name.

    Examples:
        >>> category_slug("Web Development")
        'web-development'
        >>> category_slug("Café Culture")
        'cafe-culture'

    Different names may collapse to the same slug ("Web Dev" and "web dev");
    such categories share a node.
    """
    text = clean_segment(display_name)
    folded = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = _slugify_lower(folded, sep="-")
    # Names made only of punctuation or non-latin script fold to nothing
    return slug or text.lower()
