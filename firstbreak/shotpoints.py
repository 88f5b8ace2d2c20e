"""Editable table of the shot-point parameters of one swath."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from firstbreak.spp import (
    ShotPoint,
    ShotPointError,
    find_shot_point,
    read_shot_points,
    sort_shot_points,
    write_shot_points,
)

DEFAULT_LIMIT = 10000
MAX_SWATH = 100


def swath_file_name(swath: int) -> str:
    """Standard shot-point parameter file name of a swath, e.g. ``SWATH3.SPP``."""
    return f"Swath{swath}.SPP".upper()


def swath_from_file_name(name) -> Optional[int]:
    """Swath number whose standard file name matches ``name``, or None.

    Only swaths 0 to 99 are recognised; the comparison ignores case.
    """
    wanted = Path(name).name.upper()
    return next((s for s in range(MAX_SWATH) if swath_file_name(s) == wanted), None)


def _read_rows(path, width: int) -> list[list[int]]:
    """Whitespace-separated integers of ``path`` grouped ``width`` at a time."""
    tokens = Path(path).read_text().split()
    if len(tokens) % width:
        raise ShotPointError(f"{path}: incomplete record at end of file")
    try:
        numbers = [int(t) for t in tokens]
    except ValueError:
        raise ShotPointError(f"{path}: malformed number") from None
    return [numbers[start:start + width] for start in range(0, len(numbers), width)]


def save_not_found(stations: Iterable[int], path) -> bool:
    """Write stations one per line; return False without writing if there are none."""
    stations = list(stations)
    if not stations:
        return False
    Path(path).write_text("".join(f"{s:d}\n" for s in stations))
    return True


class ShotPointTable:
    """The shot points of one swath, bound to their parameter file.

    Every physical station counts as a shot; skipped shots carry file
    number -1.
    """

    def __init__(self, path, limit: int = DEFAULT_LIMIT) -> None:
        self.path = Path(path)
        self.limit = limit
        self.swath = swath_from_file_name(self.path.name)
        self.points: list[ShotPoint] = []

    def __len__(self) -> int:
        return len(self.points)

    def _check_limit(self, count: int) -> None:
        if count > self.limit:
            raise ShotPointError(f"{count} shot points exceed the limit of {self.limit}")

    def load(self) -> None:
        """Read the parameter file, sorted by station."""
        points = read_shot_points(self.path)
        self._check_limit(len(points))
        self.points = points

    def save(self) -> None:
        """Write the table to its parameter file."""
        write_shot_points(self.path, self.points)

    def find(self, station: int) -> Optional[int]:
        """Index of the first shot point for ``station``, or None."""
        return find_shot_point(self.points, station)

    def sort(self) -> None:
        """Order the shot points by station."""
        self.points = sort_shot_points(self.points)

    def add_stations_from_file(self, path) -> int:
        """Set the station numbers from a file of one station per line.

        The table takes as many rows as the file holds stations; rows already
        present keep their other parameters.  Returns the new row count.
        """
        stations = [row[0] for row in _read_rows(path, 1)]
        self._check_limit(len(stations))
        points = []
        for index, station in enumerate(stations):
            point = self.points[index] if index < len(self.points) else ShotPoint()
            point.station = station
            points.append(point)
        self.points = points
        return len(points)

    def _apply(self, path, width: int, update) -> list[int]:
        not_found = []
        for row in _read_rows(path, width):
            index = self.find(row[0])
            if index is None:
                not_found.append(row[0])
                continue
            update(self.points[index], row[1:])
        return not_found

    def apply_file_numbers(self, path) -> list[int]:
        """Set file numbers from ``station file_number`` pairs; return unknown stations."""

        def update(point: ShotPoint, values: list[int]) -> None:
            point.file_number = values[0]

        return self._apply(path, 2, update)

    def apply_skipped_shots(self, path) -> list[int]:
        """Mark the listed stations as skipped (file number -1); return unknown stations."""

        def update(point: ShotPoint, values: list[int]) -> None:
            point.file_number = -1

        return self._apply(path, 1, update)

    def apply_offsets(self, path) -> list[int]:
        """Set offsets from ``station zp hp`` rows; return unknown stations."""

        def update(point: ShotPoint, values: list[int]) -> None:
            point.zp, point.hp = values

        return self._apply(path, 3, update)

    def apply_traces(self, path) -> list[int]:
        """Set trace ranges from ``station begin end begin_gap end_gap`` rows.

        Returns the stations that are not in the table.
        """

        def update(point: ShotPoint, values: list[int]) -> None:
            point.begin_trace, point.end_trace, point.begin_gap_trace, point.end_gap_trace = values

        return self._apply(path, 5, update)