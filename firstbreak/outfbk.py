"""Shot and receiver first-break value files (station, east, north, value)."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Optional

FIELDS_PER_RECORD = 4


@dataclass
class StationValue:
    """A station number with its coordinates and one value (a time or a static)."""

    station: int = 0
    east: float = 0.0
    north: float = 0.0
    value: float = 0.0

    def format(self) -> str:
        return f"{self.station:d} {self.east:1.1f} {self.north:1.1f} {self.value:1.1f}\n"


def read_records(path) -> list[StationValue]:
    """Read whitespace-separated records of station, east, north and value.

    Raises FileNotFoundError if the file is missing and ValueError if a record
    is incomplete or holds something that is not a number.
    """
    tokens = Path(path).read_text().split()
    if len(tokens) % FIELDS_PER_RECORD:
        raise ValueError(f"{path}: incomplete record at end of file")
    records = []
    for start in range(0, len(tokens), FIELDS_PER_RECORD):
        station, east, north, value = tokens[start:start + FIELDS_PER_RECORD]
        try:
            records.append(StationValue(int(station), float(east), float(north), float(value)))
        except ValueError:
            raise ValueError(f"{path}: malformed record {' '.join(tokens[start:start + FIELDS_PER_RECORD])!r}") from None
    return records


def write_records(path, records: Iterable[StationValue]) -> None:
    """Write records one per line, coordinates and value with one decimal."""
    Path(path).write_text("".join(record.format() for record in records))


def _find(records: list[StationValue], station: int) -> Optional[int]:
    index = bisect.bisect_left(records, station, key=lambda r: r.station)
    if index < len(records) and records[index].station == station:
        return index
    return None


class FirstBreakFile:
    """Shot and receiver value tables, kept sorted by station after reading."""

    def __init__(self) -> None:
        self.shots: list[StationValue] = []
        self.receivers: list[StationValue] = []

    def read_shots(self, path) -> None:
        """Replace the shot table with the records of ``path``, sorted by station."""
        self.shots = read_records(path)
        self.sort_shots()

    def read_receivers(self, path) -> None:
        """Replace the receiver table with the records of ``path``, sorted by station."""
        self.receivers = read_records(path)
        self.sort_receivers()

    def write_shots(self, path) -> None:
        write_records(path, self.shots)

    def write_receivers(self, path) -> None:
        write_records(path, self.receivers)

    def set_shots(self, records: Iterable[StationValue]) -> None:
        """Replace the shot table with copies of ``records``."""
        self.shots = [replace(r) for r in records]

    def set_receivers(self, records: Iterable[StationValue]) -> None:
        """Replace the receiver table with copies of ``records``."""
        self.receivers = [replace(r) for r in records]

    def resize_shots(self, count: int) -> None:
        """Replace the shot table with ``count`` zeroed records."""
        if count < 0:
            raise ValueError("record count cannot be negative")
        self.shots = [StationValue() for _ in range(count)]

    def resize_receivers(self, count: int) -> None:
        """Replace the receiver table with ``count`` zeroed records."""
        if count < 0:
            raise ValueError("record count cannot be negative")
        self.receivers = [StationValue() for _ in range(count)]

    def find_shot(self, station: int) -> Optional[int]:
        """Index of ``station`` in the sorted shot table, or None."""
        return _find(self.shots, station)

    def find_receiver(self, station: int) -> Optional[int]:
        """Index of ``station`` in the sorted receiver table, or None."""
        return _find(self.receivers, station)

    def sort_shots(self) -> None:
        self.shots.sort(key=lambda r: r.station)

    def sort_receivers(self) -> None:
        self.receivers.sort(key=lambda r: r.station)