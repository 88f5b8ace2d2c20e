"""First-break picking by correlating a trace with a model wavelet."""

from __future__ import annotations

from typing import Sequence

_START_SUM = 999999999999.0


def _normalized(values: Sequence[float]) -> list[float]:
    biggest = max((abs(v) for v in values), default=0.0)
    if biggest == 0:
        raise ValueError("cannot normalize an all-zero series")
    return [v / biggest for v in values]


class Correlator:
    """Slides a normalized model wavelet along a trace."""

    def __init__(self) -> None:
        self.group: list[float] = []
        self.model: list[float] = []

    def set_group(self, group: Sequence[float]) -> None:
        """Set the trace to be searched."""
        self.group = [float(v) for v in group]

    def set_model(self, model: Sequence[float]) -> None:
        """Set the model wavelet, scaled so its largest magnitude is 1."""
        self.model = _normalized([float(v) for v in model])

    def calculate(self) -> int:
        """Index of the first break: centre of the window with the smallest product sum.

        Returns 0 when the model is not shorter than the trace.
        """
        moves = len(self.group) - len(self.model)
        if moves <= 0:
            return 0
        self.group = _normalized(self.group)

        half = len(self.model) // 2
        best_sum = _START_SUM
        best = 0
        for start in range(moves):
            window = self.group[start:start + len(self.model)]
            total = sum(m * g for m, g in zip(self.model, window))
            if total < best_sum:
                best_sum = total
                best = start + half
        return best


def pick_first_break(group: Sequence[float], model: Sequence[float]) -> int:
    """Pick the first break of ``group`` using ``model`` as the wavelet."""
    correlator = Correlator()
    correlator.set_group(group)
    correlator.set_model(model)
    return correlator.calculate()