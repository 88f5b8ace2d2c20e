"""Back-propagation network that picks the first break on a seismic trace."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional, Sequence

from firstbreak.weights import NetworkWeights

DEFAULT_WEIGHT_FILE = "neunet.txt"

INPUT_NODES = 3
HIDDEN_NODES = 16
OUTPUT_NODES = 1

HALF_WINDOW = 15
MINIMUM_NOISE_POINTS = 5
LEARN_ERROR_LIMIT = 0.00001
MAX_LEARN_PASSES = 1000

_ALPHA_ZERO = 0.2
_ETA_ZERO = 0.3
_BETA_ZERO = 0.3
_NO_ERROR = 100000000.0


def _sigmoid(t: float) -> float:
    if t >= 0:
        return 1.0 / (1.0 + math.exp(-t))
    e = math.exp(t)
    return e / (1.0 + e)


def _ratio(numerator: float, denominator: float) -> float:
    """Quotient with IEEE results for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _window_ratio(values: Sequence[float], left: int, point: int, right: int) -> float:
    """Mean of ``values`` before ``point`` divided by the mean from ``point`` on."""
    before = sum(values[left:point]) / (point - left)
    after = sum(values[point:right]) / (right - point)
    return _ratio(before, after)


class NeuNet:
    """A 3-16-1 network fed with amplitude ratios around each sample."""

    def __init__(self, path=DEFAULT_WEIGHT_FILE, seed=None) -> None:
        self.path = Path(path)
        try:
            self.weights = NetworkWeights.load(self.path, INPUT_NODES, HIDDEN_NODES, OUTPUT_NODES)
        except OSError:
            self.weights = NetworkWeights.random(INPUT_NODES, HIDDEN_NODES, OUTPUT_NODES, seed)

        self.data: list[float] = []
        self.abs_values: list[float] = []
        self.squares: list[float] = []
        self.quads: list[float] = []
        self.errors: dict[int, float] = {}
        self.peaks: list[int] = []
        self.peak_angles: list[float] = []
        self.chosen_point = 0

        self.input_values = [0.0] * INPUT_NODES
        self.hidden_values = [0.0] * HIDDEN_NODES
        self.output_values = [0.0] * OUTPUT_NODES
        self.expected = [1.0] * OUTPUT_NODES

    def set_data(self, data: Sequence[float], chosen_point: int = 0, first_break: bool = True) -> None:
        """Load a trace.

        ``chosen_point`` 0 lets :meth:`think` search the whole trace; any other
        value evaluates that sample only.  Leading zero samples are replaced by
        the first non-zero sample.
        """
        values = [float(v) for v in data]
        first = next((i for i, v in enumerate(values) if v != 0), None)
        if first is None:
            raise ValueError("trace holds no non-zero sample")
        if chosen_point and not 0 < chosen_point < len(values):
            raise ValueError(f"chosen point {chosen_point} outside trace of {len(values)} samples")

        values[:first] = [values[first]] * first
        self.data = values
        self.abs_values = [abs(v) for v in values]
        self.squares = [v * v for v in values]
        self.quads = [s * s for s in self.squares]
        self.chosen_point = chosen_point
        self.peaks = []
        self.peak_angles = []
        self.errors = {}
        self.expected = [1.0 if first_break else 0.0] * OUTPUT_NODES

    def _forward(self) -> None:
        w = self.weights
        self.hidden_values = [
            _sigmoid(
                sum(w.to_hidden[j * INPUT_NODES + k] * x for k, x in enumerate(self.input_values))
                - w.hidden_thresholds[j]
            )
            for j in range(HIDDEN_NODES)
        ]
        self.output_values = [
            _sigmoid(
                sum(w.to_output[j * HIDDEN_NODES + k] * h for k, h in enumerate(self.hidden_values))
                - w.output_thresholds[j]
            )
            for j in range(OUTPUT_NODES)
        ]

    def think(self) -> int:
        """Run the network and return the sample with the smallest output."""
        if not self.data:
            raise RuntimeError("no trace has been set")
        count = len(self.data)
        if self.chosen_point == 0:
            begin, end = MINIMUM_NOISE_POINTS + 1, count - MINIMUM_NOISE_POINTS
        else:
            begin = end = self.chosen_point

        self.errors = {}
        for i in range(begin, end + 1):
            left = max(i - HALF_WINDOW, 0)
            right = min(i + HALF_WINDOW, count)
            self.input_values = [
                math.sqrt(_window_ratio(self.squares, left, i, right)),
                _window_ratio(self.abs_values, left, i, right),
                math.sqrt(_window_ratio(self.quads, left, i, right)),
            ]
            self._forward()
            self.errors[i] = sum(abs(v) for v in self.output_values)

        best_error = _NO_ERROR
        best = 0
        for i, error in self.errors.items():
            if error < best_error:
                best_error = error
                best = i
        return best

    def learn(self) -> int:
        """Adjust the weights until they settle, save them and return the pass count."""
        w = self.weights
        passes = 0
        while True:
            self.think()

            delta_e = math.sqrt(sum((o - e) ** 2 for o, e in zip(self.output_values, self.expected)))
            eta = _ETA_ZERO + _BETA_ZERO * delta_e
            alpha = _ALPHA_ZERO + _BETA_ZERO * eta / _ETA_ZERO

            delta_out = [o * (1 - o) * (e - o) for o, e in zip(self.output_values, self.expected)]
            for j, delta in enumerate(delta_out):
                for k, hidden in enumerate(self.hidden_values):
                    n = j * HIDDEN_NODES + k
                    change = w.to_output[n] - w.to_output_last[n]
                    w.to_output_last[n] = w.to_output[n]
                    w.to_output[n] += eta * delta * hidden + alpha * change

            for j, hidden in enumerate(self.hidden_values):
                error_sum = sum(
                    delta * w.to_output_last[k * HIDDEN_NODES + j] for k, delta in enumerate(delta_out)
                )
                delta_hidden = error_sum * hidden * (1 - hidden)
                for k, x in enumerate(self.input_values):
                    n = j * INPUT_NODES + k
                    change = w.to_hidden[n] - w.to_hidden_last[n]
                    w.to_hidden_last[n] = w.to_hidden[n]
                    w.to_hidden[n] += eta * delta_hidden * x + alpha * change

            passes += 1
            if passes > MAX_LEARN_PASSES or self.is_learned():
                break

        self.save_weights()
        return passes

    def is_learned(self) -> bool:
        """True when the last weight update moved the weights less than the limit."""
        return self.weights.weight_change() <= LEARN_ERROR_LIMIT

    def calculate_peaks(self) -> list[int]:
        """Find negative troughs and the envelope slope in front of each one."""
        self.peaks = []
        data = self.data
        i = 1
        while i < len(data) - 1:
            a, b, c = data[i - 1], data[i], data[i + 1]
            if a > b and c > b and b < 0:
                self.peaks.append(i)
                i += 1
            i += 1

        self.peak_angles = [0.0] * len(self.peaks)
        for i in range(1, len(self.peaks)):
            distance = self.peaks[i] - self.peaks[i - 1]
            height = data[self.peaks[i]] - data[self.peaks[i - 1]]
            self.peak_angles[i] = abs(height / distance)
        return list(self.peaks)

    def nearest_peak(self, index: int) -> Optional[int]:
        """Position in :attr:`peaks` of the trough nearest ``index``, or None."""
        for i in range(1, len(self.peaks)):
            before, after = self.peaks[i - 1], self.peaks[i]
            if before < index < after:
                return i if abs(before - index) > abs(after - index) else i - 1
        return None

    def save_weights(self) -> None:
        """Write the current weights to the network's weight file."""
        self.weights.save(self.path)