"""Shot-point parameter records of one swath and their text file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

MAX_STATION = 9999999
FIELDS_PER_RECORD = 10


class ShotPointError(ValueError):
    """A shot-point parameter record or file is malformed."""


@dataclass
class ShotPoint:
    """Parameters of one shot station.

    A skipped shot carries file number -1.  ``xzb`` and ``yzb`` are the
    coordinates written last on each line.
    """

    station: int = 0
    file_number: int = 0
    zp: int = 0
    hp: int = 0
    begin_trace: int = 0
    end_trace: int = 0
    begin_gap_trace: int = 0
    end_gap_trace: int = 0
    xzb: float = 0.0
    yzb: float = 0.0

    def format(self) -> str:
        """The record as one line of a shot-point parameter file."""
        integers = " ".join(
            str(v)
            for v in (
                self.station,
                self.file_number,
                self.zp,
                self.hp,
                self.begin_trace,
                self.end_trace,
                self.begin_gap_trace,
                self.end_gap_trace,
            )
        )
        return f"{integers} {self.xzb:9.1f} {self.yzb:10.1f}\n"


def parse_shot_point(line: str) -> ShotPoint:
    """Parse one line of eight integers followed by two coordinates.

    Raises ShotPointError if the line is malformed or the station lies
    outside 0..MAX_STATION.
    """
    tokens = line.split()
    if len(tokens) != FIELDS_PER_RECORD:
        raise ShotPointError(f"expected {FIELDS_PER_RECORD} fields, found {len(tokens)}: {line.strip()!r}")
    try:
        integers = [int(t) for t in tokens[:8]]
        xzb, yzb = float(tokens[8]), float(tokens[9])
    except ValueError:
        raise ShotPointError(f"malformed shot-point record: {line.strip()!r}") from None
    point = ShotPoint(*integers, xzb, yzb)
    if not 0 <= point.station <= MAX_STATION:
        raise ShotPointError(f"station {point.station} out of range in shot-point file")
    return point


def _parse_file(path) -> list[ShotPoint]:
    points = []
    for number, line in enumerate(Path(path).read_text().splitlines(), start=1):
        if not line.strip():
            continue
        try:
            points.append(parse_shot_point(line))
        except ShotPointError as error:
            raise ShotPointError(f"{path}:{number}: {error}") from None
    return points


def read_shot_points(path) -> list[ShotPoint]:
    """Read a shot-point parameter file, sorted by station.

    Raises FileNotFoundError if the file is missing and ShotPointError if
    any record is malformed.
    """
    return sort_shot_points(_parse_file(path))


def count_shot_points(path) -> int:
    """Number of records in a shot-point parameter file, validating each one."""
    return len(_parse_file(path))


def write_shot_points(path, points: Iterable[ShotPoint]) -> None:
    """Write the records one per line."""
    Path(path).write_text("".join(point.format() for point in points))


def sort_shot_points(points: Iterable[ShotPoint]) -> list[ShotPoint]:
    """The records ordered by station, equal stations keeping their order."""
    return sorted(points, key=lambda p: p.station)


def find_shot_point(points: Sequence[ShotPoint], station: int) -> Optional[int]:
    """Index of the first record for ``station``, or None."""
    return next((i for i, p in enumerate(points) if p.station == station), None)