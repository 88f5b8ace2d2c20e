"""Shot and receiver positions with the receiver spread of each shot."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

MAX_RECEIVER_LINES = 100

_T = TypeVar("_T")


@dataclass
class ShotPhysical:
    """Physical parameters of one shot station."""

    station: int = 0
    east: float = 0.0
    north: float = 0.0
    gd: float = 0.0
    h: float = 0.0
    st: int = 0


@dataclass
class ReceiverPhysical:
    """Physical parameters of one receiver station."""

    station: int = 0
    east: float = 0.0
    north: float = 0.0
    gd: float = 0.0
    h: float = 0.0
    rt: int = 0


@dataclass
class ReceiverRange:
    """An inclusive run of receiver stations on one receiver line."""

    start: int = 0
    end: int = 0


@dataclass
class ShotReceiverRelation:
    """The receiver lines live for one shot."""

    shot_station: int = 0
    file_number: int = 0
    ranges: list[ReceiverRange] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.ranges) > MAX_RECEIVER_LINES:
            raise ValueError(
                f"a shot can have at most {MAX_RECEIVER_LINES} receiver lines, got {len(self.ranges)}"
            )


@dataclass
class Point:
    """A map point: ``x`` is north, ``y`` is east."""

    x: float = 0.0
    y: float = 0.0


_MISSING_POINT = Point(-1.0, -1.0)


def _search(items: Sequence[_T], value: int, key: Callable[[_T], int]) -> Optional[int]:
    index = bisect.bisect_left(items, value, key=key)
    if index < len(items) and key(items[index]) == value:
        return index
    return None


@dataclass
class P190Survey:
    """Shots, receivers and shot-receiver relations of a survey.

    Shots and receivers must be sorted by station before searching; the
    relations are expected in ascending shot station order.
    """

    shots: list[ShotPhysical] = field(default_factory=list)
    receivers: list[ReceiverPhysical] = field(default_factory=list)
    relations: list[ShotReceiverRelation] = field(default_factory=list)

    def sort_shots(self) -> None:
        self.shots.sort(key=lambda s: s.station)

    def sort_receivers(self) -> None:
        self.receivers.sort(key=lambda r: r.station)

    def find_shot(self, station: int) -> Optional[int]:
        """Index of ``station`` in the sorted shot list, or None."""
        return _search(self.shots, station, lambda s: s.station)

    def find_receiver(self, station: int) -> Optional[int]:
        """Index of ``station`` in the sorted receiver list, or None."""
        return _search(self.receivers, station, lambda r: r.station)

    def find_relation(self, shot_station: int) -> Optional[int]:
        """Index of the relation for ``shot_station``, or None."""
        return _search(self.relations, shot_station, lambda r: r.shot_station)

    def shot_position(self, station: int) -> Optional[Point]:
        """Position of a shot station, or None if it is unknown."""
        index = self.find_shot(station)
        if index is None:
            return None
        shot = self.shots[index]
        return Point(shot.north, shot.east)

    def receiver_positions(self, shot_station: int, start_point: int = 0, end_point: int = 0) -> list[Point]:
        """Positions of the receivers recording a shot.

        On each receiver line the stations from ``start + start_point`` up to
        ``start + end_point`` are taken (to the end of the line when
        ``end_point`` is 0), never beyond the end of the line.  Raises
        KeyError if the shot or one of its receivers is unknown.
        """
        start_point = max(start_point, 0)
        end_point = max(end_point, 0)

        index = self.find_relation(shot_station)
        if index is None:
            raise KeyError(f"shot station {shot_station} has no receiver relation")

        points = []
        for line in self.relations[index].ranges:
            first = min(line.start + start_point, line.end)
            last = line.end if end_point == 0 else line.start + end_point
            last = min(last, line.end)
            for station in range(first, last + 1):
                receiver_index = self.find_receiver(station)
                if receiver_index is None:
                    raise KeyError(f"receiver station {station} not found in the parameters")
                receiver = self.receivers[receiver_index]
                points.append(Point(receiver.north, receiver.east))
        return points

    def write_shot_parameters(self, path) -> None:
        """Write one shot-point parameter line per relation.

        Offsets and trace numbers are written as zero; coordinates are east
        then north, -1 for a shot without a position.
        """
        lines = []
        for relation in self.relations:
            point = self.shot_position(relation.shot_station) or _MISSING_POINT
            zeros = " ".join(["0"] * 6)
            lines.append(
                f"{relation.shot_station:d} {relation.file_number:d} {zeros} {point.y:1.1f} {point.x:1.1f}\n"
            )
        Path(path).write_text("".join(lines))