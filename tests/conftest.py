import geopandas as gpd
import pytest
from shapely.geometry import Point, box

CRS = "EPSG:3310"


def make_points(coords, crs=CRS):
    return gpd.GeoDataFrame(
        {'feature_id': list(range(len(coords)))},
        geometry=[Point(x, y) for x, y in coords],
        crs=crs
    )


def make_polygons(boxes, crs=CRS):
    return gpd.GeoDataFrame(
        {'feature_id': list(range(len(boxes)))},
        geometry=[box(*b) for b in boxes],
        crs=crs
    )


@pytest.fixture
def zones():
    """Three 1km squares side by side; only zone 2 is in the metro area."""
    return gpd.GeoDataFrame(
        {
            'taz_id': [1, 2, 3],
            'in_metro': [0, 1, 0],
        },
        geometry=[
            box(0, 0, 1000, 1000),
            box(1000, 0, 2000, 1000),
            box(2000, 0, 3000, 1000),
        ],
        crs=CRS
    )


@pytest.fixture
def point_in_zone_2():
    return make_points([(1500, 500)])
