import pytest

from firstbreak.shotpoints import (
    ShotPointTable,
    save_not_found,
    swath_file_name,
    swath_from_file_name,
)
from firstbreak.spp import ShotPoint, ShotPointError, read_shot_points, write_shot_points


def _table(tmp_path, stations, limit=10000):
    path = tmp_path / "SWATH1.SPP"
    write_shot_points(path, [ShotPoint(station=s, xzb=1.5, yzb=2.5) for s in stations])
    table = ShotPointTable(path, limit)
    table.load()
    return table


def test_swath_file_name_is_upper_case():
    assert swath_file_name(3) == "SWATH3.SPP"


@pytest.mark.parametrize("swath", [0, 1, 42, 99])
def test_swath_name_round_trip(swath):
    assert swath_from_file_name(swath_file_name(swath)) == swath
    assert swath_from_file_name(swath_file_name(swath).lower()) == swath


def test_swath_outside_range_or_unknown():
    assert swath_from_file_name(swath_file_name(100)) is None
    assert swath_from_file_name("other.spp") is None


def test_table_knows_its_swath(tmp_path):
    table = ShotPointTable(tmp_path / "swath7.spp")
    assert table.swath == 7


def test_load_sorts_by_station(tmp_path):
    table = _table(tmp_path, [30, 10, 20])
    assert [p.station for p in table.points] == [10, 20, 30]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ShotPointTable(tmp_path / "missing.spp").load()


def test_load_over_limit(tmp_path):
    with pytest.raises(ShotPointError):
        _table(tmp_path, [1, 2, 3], limit=2)


def test_save_load_round_trip(tmp_path):
    table = _table(tmp_path, [5, 6])
    table.points[0].file_number = 11
    table.save()
    assert read_shot_points(table.path) == table.points


def test_find(tmp_path):
    table = _table(tmp_path, [5, 6, 7])
    assert table.find(6) == 1
    assert table.find(8) is None


def test_sort(tmp_path):
    table = ShotPointTable(tmp_path / "x.spp")
    table.points = [ShotPoint(station=3), ShotPoint(station=1), ShotPoint(station=2)]
    table.sort()
    assert [p.station for p in table.points] == [1, 2, 3]


def test_add_stations_keeps_order_and_other_fields(tmp_path):
    table = _table(tmp_path, [1, 2])
    (tmp_path / "s.ph").write_text("300\n100\n200\n")
    assert table.add_stations_from_file(tmp_path / "s.ph") == 3
    assert [p.station for p in table.points] == [300, 100, 200]
    assert table.points[0].xzb == 1.5
    assert table.points[2].xzb == 0.0


def test_add_stations_over_limit(tmp_path):
    table = ShotPointTable(tmp_path / "x.spp", limit=1)
    (tmp_path / "s.ph").write_text("1\n2\n")
    with pytest.raises(ShotPointError):
        table.add_stations_from_file(tmp_path / "s.ph")


def test_apply_file_numbers(tmp_path):
    table = _table(tmp_path, [1, 2])
    (tmp_path / "fn.txt").write_text("1 101\n9 109\n2 102\n")
    assert table.apply_file_numbers(tmp_path / "fn.txt") == [9]
    assert [p.file_number for p in table.points] == [101, 102]


def test_apply_skipped_shots(tmp_path):
    table = _table(tmp_path, [1, 2])
    (tmp_path / "kf.txt").write_text("2\n")
    assert table.apply_skipped_shots(tmp_path / "kf.txt") == []
    assert [p.file_number for p in table.points] == [0, -1]


def test_apply_offsets(tmp_path):
    table = _table(tmp_path, [1])
    (tmp_path / "o.off").write_text("1 7 8\n4 0 0\n")
    assert table.apply_offsets(tmp_path / "o.off") == [4]
    assert (table.points[0].zp, table.points[0].hp) == (7, 8)


def test_apply_traces(tmp_path):
    table = _table(tmp_path, [1])
    (tmp_path / "t.rn").write_text("1 1 240 120 121\n")
    assert table.apply_traces(tmp_path / "t.rn") == []
    p = table.points[0]
    assert (p.begin_trace, p.end_trace, p.begin_gap_trace, p.end_gap_trace) == (1, 240, 120, 121)


def test_apply_incomplete_row(tmp_path):
    table = _table(tmp_path, [1])
    (tmp_path / "o.off").write_text("1 7\n")
    with pytest.raises(ShotPointError):
        table.apply_offsets(tmp_path / "o.off")


def test_apply_malformed_number(tmp_path):
    table = _table(tmp_path, [1])
    (tmp_path / "fn.txt").write_text("1 abc\n")
    with pytest.raises(ShotPointError):
        table.apply_file_numbers(tmp_path / "fn.txt")


def test_save_not_found(tmp_path):
    path = tmp_path / "notfound.txt"
    assert save_not_found([5, 3], path) is True
    assert path.read_text().split() == ["5", "3"]


def test_save_not_found_empty(tmp_path):
    path = tmp_path / "notfound.txt"
    assert save_not_found([], path) is False
    assert not path.exists()