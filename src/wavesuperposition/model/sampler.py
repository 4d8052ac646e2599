"""
Wave Sampling & Axis Scaling
============================
Pure functions that turn waves into plottable curves.

All curves share one grid: `n` points spread evenly over the sample domain,
both endpoints included, so the previews and the superposition plot line up.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Iterator, NamedTuple, TYPE_CHECKING

import numpy as np

from wavesuperposition import config
from wavesuperposition.model.waves import Wave, WaveProperty

if TYPE_CHECKING:
    import numpy.typing as npt


class CurvePoint(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class SampleDomain:
    x_min: float = config.X_MIN
    x_max: float = config.X_MAX


DEFAULT_DOMAIN = SampleDomain()


@dataclass(frozen=True, eq=False)
class Curve:
    """
    A sampled curve backed by numpy arrays.

    Iterating yields CurvePoints lazily; every `iter()` starts over. Two curves
    are equal when their x and y samples are.
    """
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return bool(np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y))

    def __hash__(self) -> int:
        return hash((self.x.tobytes(), self.y.tobytes()))

    def __iter__(self) -> Iterator[CurvePoint]:
        for x, y in zip(self.x, self.y):
            yield CurvePoint(float(x), float(y))

    def points(self) -> list[CurvePoint]:
        return list(self)


def x_grid(domain: SampleDomain, n: int) -> npt.NDArray[np.float64]:
    """
    n evenly spaced x values over [x_min, x_max], endpoints included.

    Step is (x_max - x_min) / (n - 1).
    """
    if n < 0:
        raise ValueError(f"Sample count must be non-negative, got {n}")
    return np.linspace(domain.x_min, domain.x_max, n, dtype=np.float64)


def _evaluate(wave: Wave, x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    return wave.amplitude * np.sin(wave.frequency * x + wave.phase)


def sample_wave(wave: Wave, domain: SampleDomain = DEFAULT_DOMAIN, n: int = config.PREVIEW_POINTS) -> Curve:
    """Sample a single wave: y = amplitude * sin(frequency * x + phase)."""
    x = x_grid(domain, n)
    return Curve(x=x, y=_evaluate(wave, x))


def sample_sum(waves: Iterable[Wave], domain: SampleDomain = DEFAULT_DOMAIN, n: int = config.POINTS) -> Curve:
    """Sample the superposition of waves; all zeros for no waves."""
    x = x_grid(domain, n)
    y = np.zeros_like(x)
    for wave in waves:
        y = y + _evaluate(wave, x)
    return Curve(x=x, y=y)


def compute_y_range(curve: Curve) -> float:
    """
    Half-range of a symmetric y axis that fits the curve.

    Never smaller than the floor (2), padded by 10% so peaks don't touch the
    frame.
    """
    y_max_abs = float(np.max(np.abs(curve.y))) if len(curve) else 0.0
    if not y_max_abs:
        y_max_abs = config.Y_EMPTY_FALLBACK
    return max(y_max_abs, config.Y_RANGE_FLOOR) * config.Y_RANGE_PAD


def format_pi(value: float, decimals: int = 1) -> str:
    """Format value as a multiple of π, e.g. 1.5707 -> '0.5π'."""
    return f"{value / math.pi:.{decimals}f}{config.PI_SYM}"


def pi_ticks(domain: SampleDomain = DEFAULT_DOMAIN, step: float = config.TICK_STEP) -> list[tuple[float, str]]:
    """
    Labeled x-axis ticks at multiples of `step` covering the domain.

    Returned as (value, label) pairs, ready for pyqtgraph's AxisItem.setTicks.
    """
    # Integer multiples of step; the tolerance keeps endpoints that sit on a
    # multiple (0, 4π) despite float error
    first = math.ceil(domain.x_min / step - 1e-9)
    last = math.floor(domain.x_max / step + 1e-9)
    values = np.arange(first, last + 1) * step
    return [(float(v), format_pi(v)) for v in values]


def format_property(prop: WaveProperty, value: float) -> str:
    """Read-out text of a slider value."""
    if prop == WaveProperty.PHASE:
        return format_pi(value, decimals=2)
    return f"{value:.2f}"


def superposition_title(count: int) -> str:
    return f"Superposition of {count} wave{'' if count == 1 else 's'}"
