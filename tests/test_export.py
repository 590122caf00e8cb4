import geopandas as gpd

from taz_access.aggregate import count_by_zone, presence_by_zone
from taz_access.export import export_tabulation, join_to_zones, to_table


def test_to_table_is_two_sorted_columns(zones, point_in_zone_2):
    table = to_table(count_by_zone(zones.iloc[::-1], point_in_zone_2))
    assert list(table.columns) == ['taz_id', 'n']
    assert table['taz_id'].tolist() == [1, 2, 3]
    assert table['n'].tolist() == [0, 1, 0]


def test_export_contents(tmp_path, zones, point_in_zone_2):
    path = export_tabulation(presence_by_zone(zones, point_in_zone_2), tmp_path / "out" / "p.csv")
    assert path.read_text() == "taz_id,present\n1,0\n2,1\n3,0\n"


def test_export_is_byte_identical_across_runs(tmp_path, zones, point_in_zone_2):
    first = export_tabulation(count_by_zone(zones, point_in_zone_2), tmp_path / "a.csv")
    second = export_tabulation(count_by_zone(zones, point_in_zone_2), tmp_path / "b.csv")
    assert first.read_bytes() == second.read_bytes()


def test_join_to_zones_leaves_filtered_zones_null(zones, point_in_zone_2):
    metro = count_by_zone(zones, point_in_zone_2, region_filter={'in_metro': 1})
    joined = join_to_zones(zones, metro).set_index('taz_id')
    assert isinstance(joined, gpd.GeoDataFrame)
    assert joined.crs == zones.crs
    assert joined.loc[2, 'n'] == 1
    assert joined.loc[[1, 3], 'n'].isna().all()


def test_join_to_zones_keeps_register_zeros(zones, point_in_zone_2):
    joined = join_to_zones(zones, count_by_zone(zones, point_in_zone_2))
    assert joined['n'].notna().all()
    assert dict(zip(joined['taz_id'], joined['n'].astype(int))) == {1: 0, 2: 1, 3: 0}


def test_join_to_zones_multiple(zones, point_in_zone_2):
    counts = count_by_zone(zones, point_in_zone_2).rename('parks')
    presence = presence_by_zone(zones, point_in_zone_2).rename('clinic')
    joined = join_to_zones(zones, [counts, presence])
    assert len(joined) == 3
    assert joined[['parks', 'clinic']].sum().tolist() == [1, 1]
