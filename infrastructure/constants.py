from pathlib import Path

# Repo-root conventional directories/files (overrideable via site.yaml / CLI)
CONFIG_DIR = Path("configs")
SITE_FILE = CONFIG_DIR / "site.yaml"

CONTENT_DIR = Path("content")
ITEMS_FILE = CONTENT_DIR / "items.yaml"

DEFAULT_SOURCE_PATTERN = "**/*.md"
