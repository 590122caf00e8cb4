"""
Destination Access by TAZ
Tabulates park access points, essential places and healthcare facilities
to every transportation analysis zone for the transportation-equity analysis.
"""

import warnings
warnings.filterwarnings('ignore')

import matplotlib
matplotlib.use('Agg')

from taz_access.config import (DEFAULT_BOUNDARY, DESTINATION_LAYERS, METRO_FILTER,
                               OUTPUT_DIR, REGION_COL, ZONES_PATH)
from taz_access.loaders import load_zones
from taz_access.pipeline import load_destination_layers, run_destination_access
from taz_access.zones import all_zone_ids

# Run settings
METRO_ONLY = False
MAKE_MAPS = True


def main():
    """Main execution function."""
    print("=" * 70)
    print("DESTINATION ACCESS BY TAZ")
    print("=" * 70)

    # Load zones
    print("\n1. Loading zones...")
    zones = load_zones(ZONES_PATH, region_col=REGION_COL)
    region_filter = METRO_FILTER if METRO_ONLY else None
    register = all_zone_ids(zones, region_filter)
    print(f"  Zone register: {len(register)} zones "
          f"({'metro only' if region_filter else 'all regions'})")

    # Load destinations
    print("\n2. Loading destination layers...")
    layers = load_destination_layers(zones, DESTINATION_LAYERS)

    # Tabulate
    print("\n3. Tabulating destinations...")
    results = run_destination_access(zones, layers, OUTPUT_DIR,
                                     region_filter=region_filter,
                                     boundary=DEFAULT_BOUNDARY,
                                     make_maps=MAKE_MAPS)

    print("\n" + "=" * 70)
    print("DESTINATION ACCESS COMPLETE")
    print("=" * 70)
    for (name, kind), tab in results.items():
        print(f"  {name} ({kind}): {int((tab > 0).sum())} of {len(tab)} zones with access")
    print(f"\nTables written to {OUTPUT_DIR}")
    print("Run access_summary.py for the region breakdown.")


if __name__ == "__main__":
    main()
