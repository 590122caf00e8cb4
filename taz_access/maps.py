"""
Inspection maps for zone tabulations.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from taz_access.config import ZONE_ID_COL
from taz_access.export import join_to_zones


def plot_tabulation(zones, tab, output_path, title, kind='count', id_col=ZONE_ID_COL):
    """Choropleth of one tabulation over the zone layer."""
    zones_vis = join_to_zones(zones, tab, id_col=id_col).to_crs("EPSG:4326")
    col = tab.name
    is_flag = kind == 'presence'
    # zones outside the register (region filter) are null and drawn gray
    zones_vis[col] = zones_vis[col].astype('float64')
    outside = zones_vis[zones_vis[col].isna()]

    fig, ax = plt.subplots(figsize=(14, 12))

    if is_flag:
        if len(outside) > 0:
            outside.plot(ax=ax, color='lightgray', edgecolor='gray', linewidth=0.1)
        colors = {0: '#e74c3c', 1: '#2ecc71'}
        labels = {0: 'No destination', 1: 'Has destination'}
        for value, color in colors.items():
            subset = zones_vis[zones_vis[col] == value]
            if len(subset) > 0:
                subset.plot(ax=ax, color=color, edgecolor='gray', linewidth=0.1,
                            label=labels[value])
        handles = [plt.Rectangle((0, 0), 1, 1, facecolor=c) for c in colors.values()]
        legend_labels = list(labels.values())
        if len(outside) > 0:
            handles.append(plt.Rectangle((0, 0), 1, 1, facecolor='lightgray'))
            legend_labels.append('Not in register')
        ax.legend(handles, legend_labels, loc='upper right', frameon=True, fontsize=10)
    else:
        zones_vis.plot(
            ax=ax,
            column=col,
            cmap='YlGn',
            legend=True,
            legend_kwds={
                'label': f'Destinations per zone ({col})',
                'shrink': 0.8,
                'orientation': 'vertical',
                'pad': 0.02
            },
            edgecolor='gray',
            linewidth=0.1,
            missing_kwds={'color': 'lightgray', 'label': 'Not in register'}
        )

    ax.set_title(title, fontsize=16, fontweight='bold', pad=20)
    ax.axis('off')
    ax.text(0.02, 0.02, f'Zones: {len(tab)}\nWith destination: {int((tab > 0).sum())}',
            transform=ax.transAxes, fontsize=10,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8))

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"  Saved: {output_path}")
    return output_path
