"""I/O utilities: filesystem operations and item manifest loading."""

from infrastructure.io.fs import ensure_exists, write_json
from infrastructure.io.items import read_items

__all__ = [
    "ensure_exists",
    "write_json",
    "read_items",
]
