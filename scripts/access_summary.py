"""
Destination Access Summary
Region breakdown of the TAZ destination tables written by
destination_access_by_taz.py.
"""

import warnings
warnings.filterwarnings('ignore')

from taz_access.config import DESTINATION_LAYERS, OUTPUT_DIR, REGION_COL, ZONES_PATH
from taz_access.loaders import load_tabulation, load_zones
from taz_access.summary import print_summary, summarize_by_region


def load_exported_tables():
    """Read every taz_<layer>_<kind>.csv produced by the tabulation run."""
    tabs = []
    for name, cfg in DESTINATION_LAYERS.items():
        for kind in cfg['kinds']:
            path = OUTPUT_DIR / f"taz_{name}_{kind}.csv"
            if not path.exists():
                print(f"  Warning: {path.name} not found, skipping")
                continue
            tabs.append(load_tabulation(path).rename(f"{name}_{kind}"))
    return tabs


def main():
    """Main execution function."""
    print("=" * 70)
    print("DESTINATION ACCESS SUMMARY")
    print("=" * 70)

    print("\n1. Loading zones and tables...")
    zones = load_zones(ZONES_PATH, region_col=REGION_COL)
    tabs = load_exported_tables()
    if not tabs:
        print("Error: No destination tables found.")
        print("Please run destination_access_by_taz.py first.")
        return

    print("\n2. Summarizing by region...")
    summary_df = summarize_by_region(zones, tabs, region_col=REGION_COL)
    print_summary(summary_df)

    summary_path = OUTPUT_DIR / "destination_access_region_summary.csv"
    summary_df.to_csv(summary_path, index=False)
    print(f"\n  Saved: {summary_path}")

    print("\n" + "=" * 70)
    print("SUMMARY COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
