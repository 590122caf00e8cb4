"""
Coordinate normalization for destinations that arrive as raw lon/lat pairs.

The order matters: build points from (longitude, latitude), tag them with the
source CRS, then reproject to the zone layer's CRS. Intersecting untagged or
unprojected points against projected zones does not fail, it just matches
nothing, so every step here is checked explicitly.
"""

import geopandas as gpd

from taz_access.config import LAT_COL, LON_COL, SOURCE_CRS
from taz_access.errors import CoordinateReferenceMismatch, GeometryError


def points_from_lonlat(table, lon_col=LON_COL, lat_col=LAT_COL,
                       source_crs=SOURCE_CRS, target_crs=None):
    """
    Build a point GeoDataFrame from longitude/latitude columns.

    Args:
        table: DataFrame with lon/lat columns (other columns are kept)
        source_crs: CRS the raw coordinates are expressed in
        target_crs: if given, reproject the points to this CRS

    Returns:
        GeoDataFrame tagged with source_crs, or reprojected to target_crs
    """
    missing = [c for c in (lon_col, lat_col) if c not in table.columns]
    if missing:
        raise ValueError(f"Coordinate columns not found: {missing}")

    lon = table[lon_col]
    lat = table[lat_col]
    null_rows = lon.isna() | lat.isna()
    if null_rows.any():
        raise GeometryError(f"{int(null_rows.sum())} rows have missing coordinates")

    # Geographic bounds; also trips on most swapped lon/lat columns
    if ((lon < -180) | (lon > 180)).any() or ((lat < -90) | (lat > 90)).any():
        raise GeometryError(
            f"Coordinates outside lon [-180, 180] / lat [-90, 90]; "
            f"check that '{lon_col}' and '{lat_col}' are not swapped"
        )

    points = gpd.GeoDataFrame(
        table.copy(),
        geometry=gpd.points_from_xy(lon, lat),
        crs=source_crs
    )

    if target_crs is not None:
        points = points.to_crs(target_crs)
    return points


def to_zone_crs(features, zones):
    """Reproject a feature layer to the zone layer's CRS."""
    if zones.crs is None:
        raise CoordinateReferenceMismatch("Zone layer has no CRS")
    if features.crs is None:
        raise CoordinateReferenceMismatch(
            "Feature layer has no CRS; tag it with its source CRS before reprojecting"
        )
    if features.crs == zones.crs:
        return features
    return features.to_crs(zones.crs)


def normalize_to_zones(table, zones, lon_col=LON_COL, lat_col=LAT_COL,
                       source_crs=SOURCE_CRS):
    """Lon/lat table -> points in the zone layer's CRS."""
    if zones.crs is None:
        raise CoordinateReferenceMismatch("Zone layer has no CRS")

    points = points_from_lonlat(table, lon_col=lon_col, lat_col=lat_col,
                                source_crs=source_crs, target_crs=zones.crs)
    print(f"  Normalized {len(points)} lon/lat points to {zones.crs.to_string()}")
    return points
