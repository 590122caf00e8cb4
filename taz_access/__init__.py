"""
Tabulate destinations (parks, essential places, healthcare) to TAZs.
"""

from taz_access.aggregate import count_by_zone, intersect_features, presence_by_zone
from taz_access.coords import normalize_to_zones, points_from_lonlat
from taz_access.errors import (CoordinateReferenceMismatch, GeometryError,
                               TazAccessError, ZoneNotFoundError, ZoneRegisterError)
from taz_access.export import export_tabulation, join_to_zones, to_table
from taz_access.zones import all_zone_ids, select_zones

__version__ = "0.1.0"
