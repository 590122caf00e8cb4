"""
Region-level summaries of zone tabulations.
"""

import pandas as pd

from taz_access.config import REGION_COL, ZONE_ID_COL


def summarize_by_region(zones, tabs, region_col=REGION_COL, id_col=ZONE_ID_COL):
    """
    One row per (region, tabulation): zones in the register, zones with at
    least one destination, their share, and total destinations.

    Only zones present in a tabulation's register are counted for it.
    """
    if region_col not in zones.columns:
        raise ValueError(f"Zone layer has no '{region_col}' column")
    if not isinstance(tabs, (list, tuple)):
        tabs = [tabs]

    regions = zones[[id_col, region_col]].drop_duplicates(subset=id_col)

    summary = []
    for tab in tabs:
        df = regions.merge(
            tab.rename_axis(id_col).reset_index(),
            on=id_col,
            how='inner'
        )
        for region, group in df.groupby(region_col, sort=True):
            n_zones = len(group)
            with_access = int((group[tab.name] > 0).sum())
            summary.append({
                region_col: region,
                'tabulation': tab.name,
                'zones': n_zones,
                'zones_with_access': with_access,
                'pct_zones_with_access': (with_access / n_zones * 100) if n_zones > 0 else 0,
                'total': int(group[tab.name].sum()),
            })

    return pd.DataFrame(summary)


def print_summary(summary_df):
    """Print a region summary the way the analysis scripts report tables."""
    if len(summary_df) == 0:
        print("  Warning: Empty summary")
        return
    print(summary_df.to_string(index=False))
