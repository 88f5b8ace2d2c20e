"""Weights and thresholds of the three-layer first-break network."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

HIDDEN_THRESHOLD = 0.3


def _format_value(value: float) -> str:
    return f"{value:10.8f}"


@dataclass
class NetworkWeights:
    """Thresholds plus current and previous link weights of the network.

    ``to_hidden`` holds ``hidden * inputs`` weights, the weight from input ``k``
    to hidden node ``j`` at index ``j * inputs + k``.  ``to_output`` holds
    ``outputs * hidden`` weights laid out the same way.
    """

    inputs: int
    hidden: int
    outputs: int
    hidden_thresholds: list[float] = field(default_factory=list)
    output_thresholds: list[float] = field(default_factory=list)
    to_hidden: list[float] = field(default_factory=list)
    to_output: list[float] = field(default_factory=list)
    to_hidden_last: list[float] = field(default_factory=list)
    to_output_last: list[float] = field(default_factory=list)

    @property
    def hidden_link_count(self) -> int:
        return self.inputs * self.hidden

    @property
    def output_link_count(self) -> int:
        return self.hidden * self.outputs

    @classmethod
    def random(cls, inputs: int, hidden: int, outputs: int, seed=None) -> "NetworkWeights":
        """Fresh weights drawn uniformly from [0, 1] with fixed thresholds."""
        rng = _random.Random(seed)
        to_hidden = [rng.random() for _ in range(inputs * hidden)]
        to_output = [rng.random() for _ in range(hidden * outputs)]
        return cls(
            inputs=inputs,
            hidden=hidden,
            outputs=outputs,
            hidden_thresholds=[HIDDEN_THRESHOLD] * hidden,
            output_thresholds=[hidden / 2.0] * outputs,
            to_hidden=to_hidden,
            to_output=to_output,
            to_hidden_last=list(to_hidden),
            to_output_last=list(to_output),
        )

    @classmethod
    def load(cls, path, inputs: int, hidden: int, outputs: int) -> "NetworkWeights":
        """Read weights written by :meth:`save`.

        Raises FileNotFoundError if the file is missing and ValueError if it
        holds too few or malformed numbers.
        """
        text = Path(path).read_text()
        values: Iterator[float] = iter(float(token) for token in text.split())

        def take(count: int) -> list[float]:
            chunk = []
            for _ in range(count):
                try:
                    chunk.append(next(values))
                except StopIteration:
                    raise ValueError(f"{path}: too few values in weight file") from None
            return chunk

        n_hidden_links = inputs * hidden
        n_output_links = hidden * outputs
        return cls(
            inputs=inputs,
            hidden=hidden,
            outputs=outputs,
            hidden_thresholds=take(hidden),
            output_thresholds=take(outputs),
            to_hidden=take(n_hidden_links),
            to_output=take(n_output_links),
            to_hidden_last=take(n_hidden_links),
            to_output_last=take(n_output_links),
        )

    def save(self, path) -> None:
        """Write thresholds, current weights and previous weights, one per line."""
        lines = [_format_value(v) + "\n" for v in self.hidden_thresholds]
        lines += [_format_value(v) + "\n" for v in self.output_thresholds]
        lines += [_format_value(v) + "\n" for v in self.to_hidden]
        lines += [_format_value(v) + "\n" for v in self.to_output]
        lines += [_format_value(v) + "\n  " for v in self.to_hidden_last]
        lines += [_format_value(v) + "\n  " for v in self.to_output_last]
        Path(path).write_text("".join(lines))

    def weight_change(self) -> float:
        """Total absolute difference between current and previous weights."""
        hidden_change = sum(abs(last - now) for last, now in zip(self.to_hidden_last, self.to_hidden))
        output_change = sum(abs(last - now) for last, now in zip(self.to_output_last, self.to_output))
        return hidden_change + output_change