from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from wavesuperposition.model.presets import CUSTOM_KEY, PresetKey, get_preset
from wavesuperposition.model.waves import Wave, WaveModel, WaveParams, WaveProperty

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store. Owns the WaveModel and announces every mutation.

    Views read `store.model`; all writes go through the methods below so that
    the signals stay in sync with the data.
    """
    wave_added = Signal(object)
    wave_removed = Signal(int)
    wave_changed = Signal(object)
    waves_reset = Signal()
    waves_changed = Signal()
    preset_changed = Signal(str)

    def __init__(self, model: Optional[WaveModel] = None) -> None:
        super().__init__()
        self.model = model if model is not None else WaveModel()
        self._preset: str = CUSTOM_KEY

    @property
    def preset(self) -> str:
        """Key of the preset the waves came from, or 'custom' once edited."""
        return self._preset

    def waves(self) -> tuple[Wave, ...]:
        return self.model.waves()

    def _set_preset(self, key: str) -> None:
        if key != self._preset:
            self._preset = key
            self.preset_changed.emit(key)

    def add_wave(self, params: Optional[WaveParams] = None) -> Wave:
        wave = self.model.add_wave(params)
        self.wave_added.emit(wave)
        self._set_preset(CUSTOM_KEY)
        self.waves_changed.emit()
        return wave

    def remove_wave(self, wave_id: int) -> bool:
        if not self.model.remove_wave(wave_id):
            return False
        self.wave_removed.emit(wave_id)
        self._set_preset(CUSTOM_KEY)
        self.waves_changed.emit()
        return True

    def set_property(self, wave_id: int, prop: WaveProperty, value: float) -> Optional[Wave]:
        wave = self.model.set_property(wave_id, prop, value)
        if wave is None:
            return None
        self.wave_changed.emit(wave)
        self._set_preset(CUSTOM_KEY)
        self.waves_changed.emit()
        return wave

    def load_preset(self, key: PresetKey | str) -> list[Wave]:
        """Replace all waves with the given preset. 'custom' is ignored."""
        if key == CUSTOM_KEY:
            return []
        preset = get_preset(key)
        waves = self.model.load_preset(preset.waves)
        logger.info(f"Preset '{preset.name}' loaded")
        self.waves_reset.emit()
        self._set_preset(preset.key.value)
        self.waves_changed.emit()
        return waves
