"""Predefined waveform presets (Fourier partial sums)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math

from wavesuperposition.model.waves import WaveParams


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class PresetKey(StrEnum):
    """Keys for the preset dropdown."""
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


CUSTOM_KEY = "custom"

# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Preset:
    key: PresetKey
    name: str
    waves: tuple[WaveParams, ...]


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
PRESETS: dict[PresetKey, Preset] = {
    PresetKey.SQUARE: Preset(
        key=PresetKey.SQUARE,
        name="Square Wave",
        # Odd harmonics, 1/n amplitude
        waves=(
            WaveParams(amplitude=1.0, frequency=1.0, phase=0.0),
            WaveParams(amplitude=1 / 3, frequency=3.0, phase=0.0),
            WaveParams(amplitude=1 / 5, frequency=5.0, phase=0.0),
            WaveParams(amplitude=1 / 7, frequency=7.0, phase=0.0),
        ),
    ),
    PresetKey.SAWTOOTH: Preset(
        key=PresetKey.SAWTOOTH,
        name="Sawtooth Wave",
        # All harmonics, 1/n amplitude
        waves=(
            WaveParams(amplitude=1.0, frequency=1.0, phase=0.0),
            WaveParams(amplitude=0.5, frequency=2.0, phase=0.0),
            WaveParams(amplitude=0.33, frequency=3.0, phase=0.0),
            WaveParams(amplitude=0.25, frequency=4.0, phase=0.0),
        ),
    ),
    PresetKey.TRIANGLE: Preset(
        key=PresetKey.TRIANGLE,
        name="Triangle Wave",
        # Odd harmonics, 1/n^2 amplitude, alternating sign via phase π
        waves=(
            WaveParams(amplitude=1.0, frequency=1.0, phase=0.0),
            WaveParams(amplitude=1 / 9, frequency=3.0, phase=math.pi),
            WaveParams(amplitude=1 / 25, frequency=5.0, phase=0.0),
            WaveParams(amplitude=1 / 49, frequency=7.0, phase=math.pi),
        ),
    ),
}


def get_preset(key: PresetKey | str) -> Preset:
    """Look up a preset by key. Raises KeyError for unknown keys."""
    try:
        return PRESETS[PresetKey(key)]
    except ValueError:
        raise KeyError(f"No preset registered for key '{key}'") from None
