"""pyqtgraph plot widgets for the superposition and the per-wave previews."""
from __future__ import annotations

import logging
from typing import Iterable

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from wavesuperposition import config
from wavesuperposition.model.sampler import (
    DEFAULT_DOMAIN, SampleDomain, compute_y_range, pi_ticks, sample_sum, sample_wave, superposition_title,
)
from wavesuperposition.model.waves import Wave

logger = logging.getLogger(__name__)


class SuperpositionPlot(pg.PlotWidget):
    """Main plot: the summed waveform on a symmetric, auto-scaled y axis."""

    def __init__(self, domain: SampleDomain = DEFAULT_DOMAIN, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.domain = domain

        self.showGrid(x=True, y=True, alpha=0.2)
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self.setMenuEnabled(False)
        self.getAxis('bottom').setTicks([pi_ticks(domain)])
        self.setXRange(domain.x_min, domain.x_max, padding=0)

        self._curve = self.plot([], [], pen=pg.mkPen(color='w', width=3))

    def refresh(self, waves: Iterable[Wave]) -> None:
        waves = tuple(waves)
        curve = sample_sum(waves, self.domain, config.POINTS)
        half = compute_y_range(curve)

        self._curve.setData(curve.x, curve.y)
        self.setYRange(-half, half, padding=0)
        self.setTitle(superposition_title(len(waves)), color='#888888', size='12pt')
        logger.debug(f"Superposition redrawn: {len(waves)} waves, y range ±{half:.2f}")


class WavePreview(pg.PlotWidget):
    """Small fixed-scale plot of a single wave."""

    def __init__(self, wave: Wave, domain: SampleDomain = DEFAULT_DOMAIN, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.wave = wave
        self.domain = domain

        self.setFixedHeight(80)
        self.hideAxis('bottom')
        self.hideAxis('left')
        self.hideButtons()
        self.setMenuEnabled(False)
        self.setMouseEnabled(x=False, y=False)
        self.setXRange(domain.x_min, domain.x_max, padding=0.02)
        self.setYRange(*config.PREVIEW_Y_RANGE, padding=0)

        self._curve = self.plot([], [], pen=pg.mkPen(color=wave.color, width=2))
        self.refresh()

    def refresh(self) -> None:
        curve = sample_wave(self.wave, self.domain, config.PREVIEW_POINTS)
        self._curve.setData(curve.x, curve.y)
