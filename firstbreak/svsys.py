"""Survey-system parameters: layout of receiver lines and shot points."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import accumulate
from pathlib import Path

BOX_COUNT = 50
COMMON_FILE = "svsys1.par"
INTERVAL_FILE = "svsys2.par"
VALUES_PER_LINE = 10

_COMMON_NUMBERS = (
    "group_interval",
    "receive_line_number",
    "shot_point_number",
    "shot_line_interval",
    "group_number_of_small_number",
    "group_number_of_big_number",
    "gap_of_small_number",
    "gap_of_big_number",
    "first_shot_point_position",
)


def _zeros(count: int) -> list[int]:
    return [0] * count


@dataclass
class SurveySystem:
    """Common survey parameters plus receiver-line and shot-point intervals."""

    area: str = ""
    crew: str = ""
    group_interval: int = 0
    receive_line_number: int = 0
    shot_point_number: int = 0
    shot_line_interval: int = 0
    group_number_of_small_number: int = 0
    group_number_of_big_number: int = 0
    gap_of_small_number: int = 0
    gap_of_big_number: int = 0
    first_shot_point_position: int = 0

    width_of_shot_point: int = 0
    width_of_receive_point: int = 0
    receive_line_intervals: list[int] = field(default_factory=lambda: _zeros(BOX_COUNT))
    shot_point_intervals: list[int] = field(default_factory=lambda: _zeros(BOX_COUNT))
    receive_line_positions: list[int] = field(default_factory=lambda: _zeros(BOX_COUNT + 1))
    shot_point_positions: list[int] = field(default_factory=lambda: _zeros(BOX_COUNT + 1))
    left_plus_square_length: int = 0
    right_plus_square_length: int = 0
    data_ok: bool = False

    def read_common(self, path) -> None:
        """Read area, crew and the nine common numbers from ``path``.

        Raises FileNotFoundError if missing and ValueError if malformed.
        """
        tokens = Path(path).read_text().split()
        needed = 2 + len(_COMMON_NUMBERS)
        if len(tokens) < needed:
            raise ValueError(f"{path}: expected {needed} values, found {len(tokens)}")
        self.area, self.crew = tokens[0], tokens[1]
        try:
            numbers = [int(t) for t in tokens[2:needed]]
        except ValueError:
            raise ValueError(f"{path}: malformed common parameter") from None
        for name, number in zip(_COMMON_NUMBERS, numbers):
            setattr(self, name, number)

    def read_intervals(self, path) -> None:
        """Read the receiver-line intervals then the shot-point intervals."""
        tokens = Path(path).read_text().split()
        if len(tokens) < 2 * BOX_COUNT:
            raise ValueError(f"{path}: expected {2 * BOX_COUNT} intervals, found {len(tokens)}")
        try:
            numbers = [int(t) for t in tokens[:2 * BOX_COUNT]]
        except ValueError:
            raise ValueError(f"{path}: malformed interval") from None
        self.receive_line_intervals = numbers[:BOX_COUNT]
        self.shot_point_intervals = numbers[BOX_COUNT:]

    def write_common(self, path) -> None:
        """Write area, crew and the common numbers, one per line."""
        lines = [self.area, self.crew] + [str(getattr(self, name)) for name in _COMMON_NUMBERS]
        Path(path).write_text("".join(f"{line}\n" for line in lines))

    def write_intervals(self, path) -> None:
        """Write both interval tables, ten values per line."""
        values = list(self.receive_line_intervals) + list(self.shot_point_intervals)
        rows = (
            " ".join(str(v) for v in values[start:start + VALUES_PER_LINE])
            for start in range(0, len(values), VALUES_PER_LINE)
        )
        Path(path).write_text("".join(f"{row}\n" for row in rows))

    def calculate(self) -> None:
        """Derive line and shot positions and total widths from the intervals."""
        self.receive_line_positions = list(accumulate(self.receive_line_intervals, initial=0))
        self.shot_point_positions = list(
            accumulate(self.shot_point_intervals, initial=self.first_shot_point_position)
        )
        self.width_of_shot_point = sum(self.shot_point_intervals)
        self.width_of_receive_point = sum(self.receive_line_intervals)
        self.data_ok = True

    def load(self, directory=".") -> None:
        """Read both parameter files from ``directory`` and calculate."""
        base = Path(directory)
        self.read_common(base / COMMON_FILE)
        self.read_intervals(base / INTERVAL_FILE)
        self.calculate()

    def reset(self) -> None:
        """Return every parameter to its empty state."""
        fresh = SurveySystem()
        for name, value in vars(fresh).items():
            setattr(self, name, value)