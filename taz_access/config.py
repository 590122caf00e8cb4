"""
Project paths, column names and destination layer definitions.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = PROJECT_ROOT / "outputs"

# Zone layer
ZONES_PATH = DATA_DIR / "taz.gpkg"
ZONE_ID_COL = "taz_id"
REGION_COL = "in_metro"
METRO_FILTER = {REGION_COL: 1}

# Raw facility coordinates are WGS84 lon/lat
SOURCE_CRS = "EPSG:4326"
LON_COL = "longitude"
LAT_COL = "latitude"

# "both": a feature on a shared boundary counts for every zone it touches
# "interior": boundary-only contact is dropped
DEFAULT_BOUNDARY = "both"
BOUNDARY_POLICIES = ("both", "interior")

COUNT_COL = "n"
PRESENCE_COL = "present"

DESTINATION_LAYERS = {
    'parks': {
        'path': DATA_DIR / "park_access_points.gpkg",
        'format': 'vector',
        'to_zone_crs': True,
        'kinds': ('count',),
    },
    'essential_places': {
        'path': DATA_DIR / "essential_places.gpkg",
        'format': 'vector',
        'to_zone_crs': True,
        'kinds': ('presence',),
    },
    'healthcare': {
        'path': DATA_DIR / "healthcare_facilities.csv",
        'format': 'lonlat',
        'lon_col': LON_COL,
        'lat_col': LAT_COL,
        'kinds': ('count', 'presence'),
    },
}
