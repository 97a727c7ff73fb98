"""Application-level constants."""

from pathlib import Path

# Metadata key the finished taxonomy list is published under
COLLECTIONS_KEY = "collections"

# Keys for serialization
ITEM_KEY = "key"
TAXONOMY_ID_KEY = "id"
CATEGORIES_KEY = "categories"

# Output filenames
COLLECTIONS_FILENAME = "collections.json"
CATEGORY_STATS_FILENAME = "category_stats.csv"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "run.log"
