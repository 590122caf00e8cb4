"""
Destination access by TAZ: load each destination layer, tabulate it against
the zone register, export one table per tabulation.
"""

from pathlib import Path

from taz_access.aggregate import count_by_zone, presence_by_zone
from taz_access.config import (DEFAULT_BOUNDARY, DESTINATION_LAYERS, LAT_COL,
                               LON_COL, SOURCE_CRS, ZONE_ID_COL)
from taz_access.coords import normalize_to_zones
from taz_access.export import export_tabulation
from taz_access.loaders import load_feature_layer, load_lonlat_table
from taz_access.maps import plot_tabulation

TABULATORS = {
    'count': count_by_zone,
    'presence': presence_by_zone,
}


def load_destination_layers(zones, layer_config=None):
    """
    Load every configured destination layer.

    Lon/lat tables are normalized to the zone CRS on the way in.

    Returns:
        dict of layer name -> {'features': GeoDataFrame, 'kinds': tuple, 'to_zone_crs': bool}
    """
    if layer_config is None:
        layer_config = DESTINATION_LAYERS

    layers = {}
    for name, cfg in layer_config.items():
        print(f"\nLoading {name}...")
        if cfg.get('format') == 'lonlat':
            lon_col = cfg.get('lon_col', LON_COL)
            lat_col = cfg.get('lat_col', LAT_COL)
            table = load_lonlat_table(cfg['path'], lon_col=lon_col, lat_col=lat_col)
            features = normalize_to_zones(table, zones, lon_col=lon_col, lat_col=lat_col,
                                          source_crs=cfg.get('source_crs', SOURCE_CRS))
        else:
            features = load_feature_layer(cfg['path'])
        layers[name] = {
            'features': features,
            'kinds': tuple(cfg['kinds']),
            'to_zone_crs': cfg.get('to_zone_crs', False),
        }
    return layers


def run_destination_access(zones, layers, output_dir, region_filter=None,
                           boundary=DEFAULT_BOUNDARY, make_maps=False,
                           id_col=ZONE_ID_COL):
    """
    Tabulate every layer and write taz_<layer>_<kind>.csv to output_dir.

    Args:
        zones: zone GeoDataFrame
        layers: dict of layer name -> {'features': GeoDataFrame, 'kinds': ('count', ...)};
            an optional 'to_zone_crs' reprojects that layer to the zone CRS
        region_filter: optional region filter, applied to every tabulation
        make_maps: also write an inspection PNG per tabulation

    Returns:
        dict of (layer, kind) -> tabulation Series
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    results = {}
    for name, layer in layers.items():
        print("\n" + "=" * 70)
        print(f"TABULATING {name.upper()}")
        print("=" * 70)

        for kind in layer['kinds']:
            if kind not in TABULATORS:
                raise ValueError(f"Unknown tabulation kind '{kind}' for layer '{name}'")

            tab = TABULATORS[kind](zones, layer['features'],
                                   region_filter=region_filter,
                                   boundary=boundary,
                                   to_zone_crs=layer.get('to_zone_crs', False),
                                   id_col=id_col)
            export_tabulation(tab, output_dir / f"taz_{name}_{kind}.csv", id_col=id_col)

            if make_maps:
                plot_tabulation(zones, tab, output_dir / f"taz_{name}_{kind}.png",
                                title=f"{name.replace('_', ' ').title()} ({kind}) by TAZ",
                                kind=kind, id_col=id_col)

            results[(name, kind)] = tab

    return results
