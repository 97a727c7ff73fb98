"""Item selection by glob pattern over item keys."""

import fnmatch
import logging
import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any

logger = logging.getLogger(__name__)

GLOBSTAR = "**"

_BRACES = re.compile(r"\{([^{}]*,[^{}]*)\}")


def _expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives (innermost first) into plain globs."""
    expanded: list[str] = []
    pending = [pattern]
    while pending:
        current = pending.pop()
        match = _BRACES.search(current)
        if match is None:
            expanded.append(current)
            continue
        head, tail = current[: match.start()], current[match.end() :]
        pending.extend(f"{head}{option}{tail}" for option in reversed(match.group(1).split(",")))
    return expanded


@lru_cache(maxsize=64)
def _compile_glob(pattern: str) -> tuple[tuple[str, ...], ...]:
    """Split a glob into one tuple of '/' segments per brace alternative."""
    return tuple(tuple(p for p in alt.split("/") if p) for alt in _expand_braces(pattern))


def _match_segments(parts: Sequence[str], segments: Sequence[str]) -> bool:
    """
    Match path parts against glob segments.

    ``**`` spans zero or more parts; any other segment matches exactly one
    part with ``fnmatch`` rules (``*``, ``?``, ``[...]``), so it never
    crosses a '/'.
    """

    def closure(states: set[int]) -> set[int]:
        pending = list(states)
        while pending:
            i = pending.pop()
            if i < len(segments) and segments[i] == GLOBSTAR and i + 1 not in states:
                states.add(i + 1)
                pending.append(i + 1)
        return states

    states = closure({0})
    for part in parts:
        advanced: set[int] = set()
        for i in states:
            if i == len(segments):
                continue
            if segments[i] == GLOBSTAR:
                advanced.add(i)
            elif fnmatch.fnmatchcase(part, segments[i]):
                advanced.add(i + 1)
        if not advanced:
            return False
        states = closure(advanced)
    return len(segments) in states


def matches_pattern(key: str, pattern: str) -> bool:
    """Return True if an item key (a '/' separated relative path) matches the glob."""
    parts = [p for p in key.replace("\\", "/").split("/") if p]
    return any(_match_segments(parts, segments) for segments in _compile_glob(pattern))


def select_items(items: Mapping[str, Any], pattern: str) -> dict[str, Any]:
    """
    Keep the items whose key matches ``pattern``, preserving mapping order.

    Args:
        items: item key -> item record
        pattern: Glob such as ``**/*.md``

    Returns:
        Filtered mapping (same item objects, no copies)
    """
    selected = {key: item for key, item in items.items() if matches_pattern(key, pattern)}
    logger.info("Selected %d of %d items matching %s", len(selected), len(items), pattern)
    return selected
