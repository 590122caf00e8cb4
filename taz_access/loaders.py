"""
Readers for the zone layer and destination layers.
"""

from pathlib import Path

import geopandas as gpd
import pandas as pd

from taz_access.config import LAT_COL, LON_COL, ZONE_ID_COL


def load_zones(path, id_col=ZONE_ID_COL, region_col=None):
    """Load the TAZ polygon layer with an integer id column."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Zone layer not found: {path}")

    zones = gpd.read_file(path)
    if id_col not in zones.columns:
        raise ValueError(f"Zone layer {path.name} has no '{id_col}' column")
    if region_col is not None and region_col not in zones.columns:
        raise ValueError(f"Zone layer {path.name} has no '{region_col}' column")

    zones[id_col] = zones[id_col].astype('int64')
    print(f"Loaded {len(zones)} zones from {path.name}")
    return zones


def load_feature_layer(path):
    """Load a point or polygon destination layer."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Feature layer not found: {path}")

    features = gpd.read_file(path)
    print(f"Loaded {len(features)} features from {path.name}")
    return features


def load_lonlat_table(path, lon_col=LON_COL, lat_col=LAT_COL):
    """Load a CSV of destinations with raw longitude/latitude columns."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Coordinate table not found: {path}")

    table = pd.read_csv(path, low_memory=False)
    missing = [c for c in (lon_col, lat_col) if c not in table.columns]
    if missing:
        raise ValueError(f"{path.name} is missing coordinate columns {missing}")

    print(f"Loaded {len(table)} rows from {path.name}")
    return table


def load_tabulation(path, id_col=ZONE_ID_COL):
    """Read an exported two-column tabulation back into a zone-indexed Series."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Tabulation not found: {path}")

    table = pd.read_csv(path)
    value_cols = [c for c in table.columns if c != id_col]
    if id_col not in table.columns or len(value_cols) != 1:
        raise ValueError(f"{path.name} is not a ({id_col}, value) table: {list(table.columns)}")

    return table.set_index(id_col)[value_cols[0]].astype('int64')
