"""
CLI entrypoint for the taxonomy collections build.

This script performs the following steps:
- loads .env (if present) and configs/site.yaml
- creates a per-run output folder under outputs/
- reads the item manifest and selects items by glob
- builds one category tree per configured taxonomy
- writes the trees as JSON and a per-category stats table as CSV
- logs a human-readable summary of the result
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from opik import track

from application import (
    build_collections,
    compute_category_stats_table_and_save,
    publish_collections,
    save_collections_json,
)
from application.constants import (
    CATEGORY_STATS_FILENAME,
    COLLECTIONS_FILENAME,
    COLLECTIONS_KEY,
    CONFIG_SNAPSHOT_FILENAME,
    LOG_FILENAME,
)
from infrastructure.config import load_site_config
from infrastructure.constants import SITE_FILE
from infrastructure.io import ensure_exists, read_items, write_json
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build category trees for content taxonomies")
    p.add_argument(
        "--config",
        type=str,
        default=str(SITE_FILE),
        help="Path to site.yaml (default: configs/site.yaml)",
    )
    p.add_argument(
        "--items",
        type=str,
        default=None,
        help="Item manifest (YAML or JSON); overrides items_file from site.yaml",
    )
    p.add_argument(
        "--output-root",
        type=str,
        default=None,
        help="Directory for run outputs; overrides output_root from site.yaml",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded if it exists (default: .env)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args(argv)


@track(
    name="Collections.cli",
    type="general",
    metadata={"task": "taxonomy_collections"},
    capture_input=False,
    capture_output=False,
    flush=True,
)
def main(argv: list[str] | None = None) -> Path:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "site.yaml")
    cfg = load_site_config(config_path)

    items_path = Path(args.items) if args.items else cfg.items_file
    output_root = Path(args.output_root) if args.output_root else cfg.output_root

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{items_path.stem}_tax{len(cfg.taxonomies)}"
    run_dir = output_root / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    # Snapshot of the resolved config; callables render by repr
    write_json(run_dir / CONFIG_SNAPSHOT_FILENAME, cfg.model_dump(mode="python"))

    logger.info("Loading items from %s...", items_path)
    items = read_items(items_path)
    logger.info("Items loaded: %d", len(items))

    trees = build_collections(items, cfg)
    metadata = publish_collections({}, trees)

    collections_path = save_collections_json(metadata[COLLECTIONS_KEY], items, run_dir / COLLECTIONS_FILENAME)
    stats_path = compute_category_stats_table_and_save(trees, run_dir, CATEGORY_STATS_FILENAME)
    logger.info("Saved category stats table to %s", stats_path)

    logger.info("=== Build Summary ===")
    for tree in trees:
        logger.info(
            "%s: %d top-level categories, %d categorized items, last item at %s",
            tree.id,
            len(tree.categories),
            tree.stats.aggregated_count,
            tree.stats.aggregated_last_timestamp,
        )
    logger.info("Collections: %s", collections_path)
    logger.info("Detailed log: %s", log_path)

    return run_dir


if __name__ == "__main__":
    main()
