import pytest

from firstbreak.spp import (
    MAX_STATION,
    ShotPoint,
    ShotPointError,
    count_shot_points,
    find_shot_point,
    parse_shot_point,
    read_shot_points,
    sort_shot_points,
    write_shot_points,
)


def _sample():
    return [
        ShotPoint(300, 3, 1, 2, 1, 120, 60, 61, 1000.5, 2000.5),
        ShotPoint(100, 1, 0, 0, 1, 120, 0, 0, 1234.5, 6789.0),
        ShotPoint(200, -1, -5, 7, 2, 240, 0, 0, 10.0, 20.0),
    ]


def test_format_field_widths():
    line = ShotPoint(100, 5, 0, 0, 1, 120, 0, 0, 1234.5, 6789.0).format()
    assert line == "100 5 0 0 1 120 0 0    1234.5     6789.0\n"


def test_default_is_all_zero():
    assert ShotPoint() == ShotPoint(0, 0, 0, 0, 0, 0, 0, 0, 0.0, 0.0)


def test_parse_round_trip():
    point = ShotPoint(200, -1, -5, 7, 2, 240, 0, 0, 10.0, 20.0)
    assert parse_shot_point(point.format()) == point


def test_parse_wrong_field_count():
    with pytest.raises(ShotPointError):
        parse_shot_point("1 2 3")


def test_parse_non_number():
    with pytest.raises(ShotPointError):
        parse_shot_point("1 2 3 4 5 6 7 x 1.0 2.0")


@pytest.mark.parametrize("station", [MAX_STATION + 1, -1])
def test_parse_station_out_of_range(station):
    with pytest.raises(ShotPointError):
        parse_shot_point(f"{station} 0 0 0 0 0 0 0 0.0 0.0")


def test_parse_max_station_allowed():
    assert parse_shot_point(f"{MAX_STATION} 0 0 0 0 0 0 0 0.0 0.0").station == MAX_STATION


def test_write_read_round_trip_sorted(tmp_path):
    path = tmp_path / "SWATH1.SPP"
    points = _sample()
    write_shot_points(path, points)
    loaded = read_shot_points(path)
    assert loaded == sort_shot_points(points)
    assert [p.station for p in loaded] == [100, 200, 300]


def test_count_shot_points(tmp_path):
    path = tmp_path / "s.spp"
    write_shot_points(path, _sample())
    assert count_shot_points(path) == 3


def test_read_bad_file(tmp_path):
    path = tmp_path / "bad.spp"
    path.write_text("100 1 0 0 1 120 0 0 1.0 2.0\n-4 1 0 0 1 120 0 0 1.0 2.0\n")
    with pytest.raises(ShotPointError):
        read_shot_points(path)
    with pytest.raises(ShotPointError):
        count_shot_points(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_shot_points(tmp_path / "none.spp")


def test_sort_is_stable():
    a = ShotPoint(5, file_number=1)
    b = ShotPoint(5, file_number=2)
    c = ShotPoint(1)
    result = sort_shot_points([a, b, c])
    assert result == [c, a, b]


def test_find_shot_point():
    points = _sample()
    assert find_shot_point(points, 200) == 2
    assert find_shot_point(points, 999) is None
    assert find_shot_point([], 100) is None