"""
Spatial aggregation of destination features to zones.

Both tabulations share one intersection step (geopandas.sjoin with the
'intersects' predicate) and are always reindexed against the zone register,
so zones without any destination appear with 0.
"""

import geopandas as gpd
import numpy as np
import pandas as pd

from taz_access.config import (BOUNDARY_POLICIES, COUNT_COL, DEFAULT_BOUNDARY,
                               PRESENCE_COL, ZONE_ID_COL)
from taz_access import coords
from taz_access.errors import (CoordinateReferenceMismatch, GeometryError,
                               ZoneNotFoundError, ZoneRegisterError)
from taz_access.zones import all_zone_ids, select_zones

ZONE_GEOM_TYPES = {'Polygon', 'MultiPolygon'}
FEATURE_GEOM_TYPES = {'Point', 'MultiPoint', 'Polygon', 'MultiPolygon'}


# ============================================================================
# 1. INPUT CHECKS
# ============================================================================

def check_geometries(gdf, layer_name, allowed_types):
    """Raise GeometryError for null, empty, invalid or disallowed geometries."""
    geoms = gdf.geometry

    n_null = int(geoms.isna().sum())
    if n_null:
        raise GeometryError(f"{layer_name}: {n_null} null geometries")

    n_empty = int(geoms.is_empty.sum())
    if n_empty:
        raise GeometryError(f"{layer_name}: {n_empty} empty geometries")

    bad_types = sorted(set(geoms.geom_type) - allowed_types)
    if bad_types:
        raise GeometryError(
            f"{layer_name}: unsupported geometry types {bad_types} "
            f"(expected {sorted(allowed_types)})"
        )

    n_invalid = int((~geoms.is_valid).sum())
    if n_invalid:
        raise GeometryError(f"{layer_name}: {n_invalid} invalid geometries")


def check_crs(zones, features, reproject=False):
    """
    Make sure features are in the zone CRS before intersecting.

    With reproject the features are moved to the zone CRS (the explicit
    transform), otherwise any difference is an error.
    """
    if zones.crs is None or features.crs is None:
        which = "Zone" if zones.crs is None else "Feature"
        raise CoordinateReferenceMismatch(f"{which} layer has no CRS")

    if features.crs == zones.crs:
        return features
    if reproject:
        return coords.to_zone_crs(features, zones)
    raise CoordinateReferenceMismatch(
        f"Feature CRS {features.crs.to_string()} does not match zone CRS "
        f"{zones.crs.to_string()}; reproject first or pass to_zone_crs=True"
    )


def check_tabulation(tab, register):
    """
    Every tabulation key is a register id and every register id appears once.
    """
    keys = pd.Index(tab.index)
    unknown = keys.difference(register)
    if len(unknown) > 0:
        shown = ", ".join(str(v) for v in list(unknown)[:10])
        raise ZoneNotFoundError(f"Tabulation references zones not in register: {shown}")
    if keys.has_duplicates:
        raise ZoneRegisterError("Tabulation has duplicate zone ids")
    if len(keys) != len(register):
        missing = register.difference(keys)
        raise ZoneRegisterError(f"Tabulation is missing {len(missing)} register zones")


# ============================================================================
# 2. INTERSECTION
# ============================================================================

def intersect_features(zones, features, region_filter=None,
                       boundary=DEFAULT_BOUNDARY, to_zone_crs=False,
                       id_col=ZONE_ID_COL):
    """
    One row per (zone, feature) match.

    A feature overlapping several zones yields one row per zone. Under the
    "both" boundary policy a point on a shared boundary matches every zone it
    touches; under "interior" boundary-only contact is dropped.

    Returns:
        DataFrame with columns [id_col, 'feature_key'], feature_key being the
        feature's position in the input layer
    """
    if boundary not in BOUNDARY_POLICIES:
        raise ValueError(f"boundary must be one of {BOUNDARY_POLICIES}, got {boundary!r}")

    zones = select_zones(zones, region_filter)
    check_geometries(zones, "zones", ZONE_GEOM_TYPES)
    check_geometries(features, "features", FEATURE_GEOM_TYPES)
    features = check_crs(zones, features, reproject=to_zone_crs)

    left = gpd.GeoDataFrame(
        {id_col: zones[id_col].astype('int64').to_numpy()},
        geometry=zones.geometry.to_numpy(),
        crs=zones.crs
    )
    right = gpd.GeoDataFrame(
        {'feature_key': np.arange(len(features))},
        geometry=features.geometry.to_numpy(),
        crs=features.crs
    )

    joined = gpd.sjoin(left, right, how='inner', predicate='intersects').reset_index(drop=True)

    if boundary == 'interior' and len(joined) > 0:
        feature_geoms = right.geometry.iloc[joined['feature_key'].to_numpy()]
        touching = joined.geometry.touches(
            gpd.GeoSeries(feature_geoms.to_numpy(), index=joined.index, crs=right.crs)
        )
        joined = joined[~touching]

    pairs = pd.DataFrame({
        id_col: joined[id_col].to_numpy(dtype='int64'),
        'feature_key': joined['feature_key'].to_numpy(dtype='int64'),
    })

    n_matched = pairs['feature_key'].nunique()
    if n_matched < len(features):
        print(f"  Warning: {len(features) - n_matched} of {len(features)} features "
              f"fall outside the selected zones")
    return pairs


# ============================================================================
# 3. TABULATIONS
# ============================================================================

def count_by_zone(zones, features, region_filter=None,
                  boundary=DEFAULT_BOUNDARY, to_zone_crs=False,
                  id_col=ZONE_ID_COL, name=COUNT_COL):
    """
    Number of intersecting features per zone, 0 for zones with none.

    Returns:
        int64 Series indexed by the zone register
    """
    register = all_zone_ids(zones, region_filter, id_col=id_col)
    pairs = intersect_features(zones, features, region_filter=region_filter,
                               boundary=boundary, to_zone_crs=to_zone_crs,
                               id_col=id_col)

    counts = pairs.groupby(id_col).size()
    unknown = counts.index.difference(register)
    if len(unknown) > 0:
        raise ZoneNotFoundError(f"Matched zones not in register: {list(unknown)[:10]}")

    tab = counts.reindex(register, fill_value=0).astype('int64').rename(name)
    check_tabulation(tab, register)

    print(f"  {name}: {int(tab.sum())} matches across {int((tab > 0).sum())} "
          f"of {len(register)} zones")
    return tab


def presence_by_zone(zones, features, region_filter=None,
                     boundary=DEFAULT_BOUNDARY, to_zone_crs=False,
                     id_col=ZONE_ID_COL, name=PRESENCE_COL):
    """
    1 if at least one feature intersects the zone, else 0.

    Returns:
        int64 Series of 0/1 indexed by the zone register
    """
    register = all_zone_ids(zones, region_filter, id_col=id_col)
    pairs = intersect_features(zones, features, region_filter=region_filter,
                               boundary=boundary, to_zone_crs=to_zone_crs,
                               id_col=id_col)

    matched = pd.Index(pairs[id_col].unique())
    unknown = matched.difference(register)
    if len(unknown) > 0:
        raise ZoneNotFoundError(f"Matched zones not in register: {list(unknown)[:10]}")

    tab = pd.Series(register.isin(matched).astype('int64'), index=register, name=name)
    check_tabulation(tab, register)

    print(f"  {name}: {int(tab.sum())} of {len(register)} zones have a destination")
    return tab
