"""Per-category statistics table."""

from pathlib import Path

import pandas as pd

from domain.schemas import TaxonomyTree
from domain.taxonomy import walk_post_order

STATS_COLUMNS = [
    "Taxonomy",
    "Path",
    "Category",
    "Depth",
    "Own count",
    "Aggregated count",
    "Own last",
    "Aggregated last",
    "Pages",
]


def compute_category_stats_table(trees: list[TaxonomyTree]) -> pd.DataFrame:
    """
    Flatten every node of every taxonomy into one row of stats.

    Columns in the result:
      - Taxonomy: taxonomy id
      - Path: slug path of the node ('' for the taxonomy root)
      - Category: display name
      - Depth: 0 for the root, 1 for top-level categories, ...
      - Own count / Aggregated count
      - Own last / Aggregated last: most recent timestamps (may be empty)
      - Pages: number of pages produced for the node

    Rows keep taxonomy order, then are sorted by path within a taxonomy.
    """
    rows: list[dict[str, object]] = []
    for order, tree in enumerate(trees):
        for node in walk_post_order(tree.root):
            rows.append(
                {
                    "TaxonomyOrder": order,
                    "Taxonomy": tree.id,
                    "Path": node.path,
                    "Category": node.display_name,
                    "Depth": node.depth,
                    "Own count": node.stats.own_count,
                    "Aggregated count": node.stats.aggregated_count,
                    "Own last": node.stats.own_last_timestamp,
                    "Aggregated last": node.stats.aggregated_last_timestamp,
                    "Pages": len(node.pages),
                }
            )

    if not rows:
        return pd.DataFrame(columns=STATS_COLUMNS)

    result = pd.DataFrame(rows)
    result = result.sort_values(["TaxonomyOrder", "Path"], kind="stable").reset_index(drop=True)

    # Drop the helper column before returning
    return result.drop(columns=["TaxonomyOrder"])


def compute_category_stats_table_and_save(trees: list[TaxonomyTree], output_dir: Path, filename: str) -> Path:
    """
    Convenience wrapper: compute the category stats table and save it as CSV.

    Returns:
        Path to the saved CSV file
    """
    table_df = compute_category_stats_table(trees)
    out_path = output_dir / filename
    table_df.to_csv(out_path, index=False)
    return out_path
