"""
Flat-table export of zone tabulations and join back to zone geometry.
"""

from pathlib import Path

from taz_access.config import ZONE_ID_COL


def to_table(tab, id_col=ZONE_ID_COL):
    """Two-column DataFrame (id_col, value) sorted by zone id."""
    table = tab.sort_index().rename_axis(id_col).reset_index()
    return table


def export_tabulation(tab, path, id_col=ZONE_ID_COL):
    """Write a tabulation as CSV. Output is byte-identical for identical input."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_table(tab, id_col=id_col).to_csv(path, index=False, lineterminator="\n")
    print(f"  Saved: {path}")
    return path


def join_to_zones(zones, tabs, id_col=ZONE_ID_COL):
    """
    Left-join one or more tabulations onto the zone layer for inspection.

    Zones outside a tabulation's register (e.g. filtered out by region) stay
    null; register zones keep their tabulated value.
    """
    if not isinstance(tabs, (list, tuple)):
        tabs = [tabs]

    joined = zones.copy()
    for tab in tabs:
        col = tab.name
        if col in joined.columns:
            joined = joined.drop(columns=[col])
        joined = joined.merge(to_table(tab, id_col=id_col), on=id_col, how='left')
        joined[col] = joined[col].astype('Int64')
    return joined
