"""
Zone register: the sorted set of TAZ identifiers every tabulation is
reindexed against.
"""

from collections.abc import Mapping

import numpy as np
import pandas as pd

from taz_access.config import ZONE_ID_COL
from taz_access.errors import ZoneRegisterError


def region_mask(zones, region_filter):
    """
    Boolean mask over zones for a region filter.

    region_filter is either a mapping {column: value or collection of values}
    (conditions are ANDed) or a callable taking the zones GeoDataFrame and
    returning a boolean mask aligned to it.
    """
    if callable(region_filter):
        mask = pd.Series(region_filter(zones), index=zones.index)
        return mask.fillna(False).astype(bool)

    if not isinstance(region_filter, Mapping):
        raise ZoneRegisterError(
            f"Region filter must be a mapping or callable, got {type(region_filter).__name__}"
        )

    mask = pd.Series(True, index=zones.index)
    for col, wanted in region_filter.items():
        if col not in zones.columns:
            raise ZoneRegisterError(f"Region filter column '{col}' not in zone layer")
        if isinstance(wanted, (list, tuple, set, frozenset, np.ndarray, pd.Index)):
            mask &= zones[col].isin(list(wanted))
        else:
            mask &= zones[col] == wanted
    return mask


def select_zones(zones, region_filter=None):
    """Zones retained by the region filter (all zones when no filter)."""
    if len(zones) == 0:
        raise ZoneRegisterError("Zone layer has no zones")
    if region_filter is None:
        return zones

    selected = zones[region_mask(zones, region_filter)].copy()
    if len(selected) == 0:
        raise ZoneRegisterError("Region filter matched no zones")
    return selected


def all_zone_ids(zones, region_filter=None, id_col=ZONE_ID_COL):
    """
    Sorted, unique zone identifiers for the (optionally filtered) zone layer.

    Raises ZoneRegisterError on null, non-integer or duplicate identifiers.
    """
    zones = select_zones(zones, region_filter)
    if id_col not in zones.columns:
        raise ZoneRegisterError(f"Zone layer has no '{id_col}' column")

    ids = zones[id_col]
    if ids.isna().any():
        raise ZoneRegisterError(f"{int(ids.isna().sum())} zones have a null {id_col}")

    numeric = pd.to_numeric(ids, errors='coerce')
    if numeric.isna().any() or (numeric != numeric.round()).any():
        raise ZoneRegisterError(f"Non-integer {id_col} values in zone layer")
    ids = numeric.astype('int64')

    dupes = ids[ids.duplicated()].unique()
    if len(dupes) > 0:
        shown = ", ".join(str(v) for v in sorted(dupes)[:10])
        raise ZoneRegisterError(f"Duplicate {id_col} values: {shown}")

    return pd.Index(np.sort(ids.to_numpy()), name=id_col)
