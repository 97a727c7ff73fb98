"""Item manifest loading."""

import json
from pathlib import Path
from typing import Any

import yaml


def read_items(path: Path) -> dict[str, Any]:
    """
    Read an item manifest (item key -> item record) based on file extension.

    Supported formats:
    - YAML: .yaml, .yml (dates become datetime.date / datetime.datetime)
    - JSON: .json

    Args:
        path: Path to manifest file

    Returns:
        Mapping of item key to record, in file order

    Raises:
        ValueError: If the format is not supported or the file is not a mapping
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Items file not found: {path}")

    suffix = path.suffix.lower()

    with path.open("r", encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .yaml, .yml, .json")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of item key -> record in {path}, got {type(data)}")

    return {str(key): record for key, record in data.items()}
