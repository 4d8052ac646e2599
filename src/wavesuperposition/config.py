"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (domain bounds, sample counts,
   slider limits) scattered throughout the model and the UI.
2. Consistency: The model clamps to the same limits the sliders offer, and
   previews/main plot share the same sample domain.

Exports:
    X_MIN, X_MAX (float): Bounds of the sample domain.
    POINTS (int): Sample count of the superposition plot.
    PREVIEW_POINTS (int): Sample count of the per-wave previews.
    PALETTE (tuple[str, ...]): Cyclic wave color palette.
"""
import logging
import math
import os

# Sample domain
X_MIN: float = 0.0
X_MAX: float = 4 * math.pi
POINTS: int = 300
PREVIEW_POINTS: int = 200

# Wave colors, assigned by (id - 1) % len(PALETTE)
PALETTE: tuple[str, ...] = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A",
    "#98FB98", "#DDA0DD", "#F0E68C", "#87CEFA",
)

# Property limits (inclusive) and slider steps
AMPLITUDE_RANGE: tuple[float, float] = (0.0, 5.0)
FREQUENCY_RANGE: tuple[float, float] = (0.1, 10.0)
PHASE_RANGE: tuple[float, float] = (0.0, 2 * math.pi)

AMPLITUDE_STEP: float = 0.01
FREQUENCY_STEP: float = 0.1
PHASE_STEP: float = math.pi / 100

# Default wave parameters
DEFAULT_AMPLITUDE: float = 1.0
DEFAULT_FREQUENCY: float = 1.0
DEFAULT_PHASE: float = 0.0

# Axis scaling
Y_RANGE_FLOOR: float = 2.0
Y_RANGE_PAD: float = 1.1
Y_EMPTY_FALLBACK: float = 0.1
PREVIEW_Y_RANGE: tuple[float, float] = (-5.0, 5.0)
TICK_STEP: float = math.pi / 2

PI_SYM: str = "π"

# Logging
LOG_LEVEL_ENV: str = "WAVESUPERPOSITION_LOG_LEVEL"


def get_log_level() -> int:
    """
    Resolve the log level from the environment, falling back to INFO.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level
