"""
Wave Model (Data Model)
=======================
This module defines the ordered collection of waves being superposed.

Why is this file needed?
------------------------
1. State Management: It holds the waves and the id counter in one object that
   is owned by the running session (see `app.state.Store`).
2. Constraints: All property writes are clamped here, so the sampler never
   sees values outside the slider ranges.

Classes:
    WaveProperty: Closed set of editable wave properties.
    WaveParams: Immutable amplitude/frequency/phase triple.
    Wave: A single wave with identity and display color.
    WaveModel: The ordered container.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Iterable, Iterator, Optional

from wavesuperposition import config

logger = logging.getLogger(__name__)


class WaveProperty(StrEnum):
    """Editable properties of a wave."""
    AMPLITUDE = "amplitude"
    FREQUENCY = "frequency"
    PHASE = "phase"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return min(max(value, low), high)


@dataclass(frozen=True)
class WaveParams:
    amplitude: float = config.DEFAULT_AMPLITUDE
    frequency: float = config.DEFAULT_FREQUENCY
    phase: float = config.DEFAULT_PHASE


@dataclass(eq=False)
class Wave:
    """
    One sinusoid y = amplitude * sin(frequency * x + phase).

    Instances are edited in place through `WaveModel.set_property`; compared
    by identity.
    """
    id: int
    color: str
    amplitude: float = config.DEFAULT_AMPLITUDE
    frequency: float = config.DEFAULT_FREQUENCY
    phase: float = config.DEFAULT_PHASE

    def get(self, prop: WaveProperty) -> float:
        match prop:
            case WaveProperty.AMPLITUDE:
                return self.amplitude
            case WaveProperty.FREQUENCY:
                return self.frequency
            case WaveProperty.PHASE:
                return self.phase
        raise ValueError(f"Unknown wave property: {prop!r}")

    @property
    def label(self) -> str:
        return f"Wave {self.id}"


class WaveModel:
    """
    Ordered sequence of waves with monotonic id assignment.

    Ids start at 1 and grow with every add. The counter only goes back to 1
    once the model becomes empty, so colors restart from the first palette
    entry after the last wave is removed.
    """

    def __init__(self, palette: tuple[str, ...] = config.PALETTE) -> None:
        if not palette:
            raise ValueError("Palette must contain at least one color.")
        self._palette = palette
        self._waves: list[Wave] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._waves)

    def __iter__(self) -> Iterator[Wave]:
        return iter(tuple(self._waves))

    @property
    def next_id(self) -> int:
        """The id the next `add_wave` call will assign."""
        return self._next_id

    def waves(self) -> tuple[Wave, ...]:
        """Snapshot of the current order. The Wave objects are live."""
        return tuple(self._waves)

    def get_wave(self, wave_id: int) -> Optional[Wave]:
        for wave in self._waves:
            if wave.id == wave_id:
                return wave
        return None

    def color_for(self, wave_id: int) -> str:
        return self._palette[(wave_id - 1) % len(self._palette)]

    def add_wave(self, params: Optional[WaveParams] = None) -> Wave:
        """Append a wave with the next id; default parameters if none given."""
        if params is None:
            params = WaveParams()
        wave_id = self._next_id
        self._next_id += 1

        wave = Wave(
            id=wave_id,
            color=self.color_for(wave_id),
            amplitude=params.amplitude,
            frequency=params.frequency,
            phase=params.phase,
        )
        self._waves.append(wave)
        logger.debug(f"Added {wave}")
        return wave

    def remove_wave(self, wave_id: int) -> bool:
        """
        Remove the wave with the given id.

        Returns False (and changes nothing) if no such wave exists.
        """
        wave = self.get_wave(wave_id)
        if wave is None:
            logger.debug(f"remove_wave: no wave with id {wave_id}")
            return False

        self._waves.remove(wave)
        if not self._waves:
            self._next_id = 1
        logger.debug(f"Removed wave {wave_id}, {len(self._waves)} left")
        return True

    def clear(self) -> None:
        self._waves.clear()
        self._next_id = 1

    def load_preset(self, params_list: Iterable[WaveParams]) -> list[Wave]:
        """Replace all waves with fresh ones built from params_list."""
        self.clear()
        added = [self.add_wave(params) for params in params_list]
        logger.info(f"Loaded {len(added)} waves")
        return added

    def set_property(self, wave_id: int, prop: WaveProperty, value: float) -> Optional[Wave]:
        """
        Write one property of a wave, clamped to its allowed range.

        A phase slightly above 2π (slider step accumulation) is stored as
        exactly 2π. Returns the edited wave, or None for an unknown id.
        """
        wave = self.get_wave(wave_id)
        if wave is None:
            logger.debug(f"set_property: no wave with id {wave_id}")
            return None

        value = float(value)
        match WaveProperty(prop):
            case WaveProperty.AMPLITUDE:
                wave.amplitude = clamp(value, *config.AMPLITUDE_RANGE)
            case WaveProperty.FREQUENCY:
                wave.frequency = clamp(value, *config.FREQUENCY_RANGE)
            case WaveProperty.PHASE:
                wave.phase = clamp(value, *config.PHASE_RANGE)
        return wave
