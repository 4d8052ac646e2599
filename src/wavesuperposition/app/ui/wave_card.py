from __future__ import annotations

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QSlider, QVBoxLayout, QWidget,
)

from wavesuperposition import config
from wavesuperposition.app.ui.plots import WavePreview
from wavesuperposition.model.sampler import format_property
from wavesuperposition.model.waves import Wave, WaveProperty

# label, (min, max), step
SLIDER_SPECS: dict[WaveProperty, tuple[str, tuple[float, float], float]] = {
    WaveProperty.AMPLITUDE: ("Amplitude", config.AMPLITUDE_RANGE, config.AMPLITUDE_STEP),
    WaveProperty.FREQUENCY: ("Frequency", config.FREQUENCY_RANGE, config.FREQUENCY_STEP),
    WaveProperty.PHASE: ("Phase", config.PHASE_RANGE, config.PHASE_STEP),
}


class StepSlider(QSlider):
    """Horizontal QSlider over a float range with a fixed step."""
    value_changed = Signal(float)

    def __init__(self, low: float, high: float, step: float, parent: QWidget | None = None) -> None:
        super().__init__(Qt.Orientation.Horizontal, parent)
        self._low = low
        self._step = step
        # round() so 2π/(π/100) lands on 200 steps; the last step may overshoot
        # the float max slightly and is clamped by the model
        self.setRange(0, round((high - low) / step))
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.valueChanged.connect(self._relay)

    def set_float(self, value: float) -> None:
        self.blockSignals(True)
        self.setValue(round((value - self._low) / self._step))
        self.blockSignals(False)

    @Slot(int)
    def _relay(self, index: int) -> None:
        self.value_changed.emit(self._low + index * self._step)


class WaveCard(QFrame):
    """
    Editor for one wave: header with remove button, one slider per property
    and a preview plot.
    """
    property_edited = Signal(int, object, float)  # wave id, WaveProperty, value
    remove_requested = Signal(int)

    def __init__(self, wave: Wave, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.wave = wave
        self.setObjectName(f"wave-{wave.id}")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setStyleSheet(f"#wave-{wave.id} {{ border-left: 4px solid {wave.color}; }}")

        root = QVBoxLayout(self)

        header = QHBoxLayout()
        indicator = QLabel(self)
        indicator.setFixedSize(12, 12)
        indicator.setStyleSheet(f"background-color: {wave.color}; border-radius: 6px;")
        header.addWidget(indicator)
        header.addWidget(QLabel(f"<b>{wave.label}</b>", self))
        header.addStretch()
        remove_btn = QPushButton("×", self)
        remove_btn.setFixedWidth(28)
        remove_btn.setToolTip(self.tr("Remove wave"))
        remove_btn.clicked.connect(lambda *_: self.remove_requested.emit(self.wave.id))
        header.addWidget(remove_btn)
        root.addLayout(header)

        self.grid = QGridLayout()
        root.addLayout(self.grid)
        self._value_labels: dict[WaveProperty, QLabel] = {}
        self._sliders: dict[WaveProperty, StepSlider] = {}
        for row, (prop, (label, (low, high), step)) in enumerate(SLIDER_SPECS.items()):
            self._add_slider(row, prop, label, low, high, step)

        self.preview = WavePreview(wave, parent=self)
        root.addWidget(self.preview)

    def _add_slider(self, row: int, prop: WaveProperty, label: str, low: float, high: float, step: float) -> None:
        self.grid.addWidget(QLabel(self.tr(label), self), row, 0)
        slider = StepSlider(low, high, step, self)
        slider.set_float(self.wave.get(prop))
        slider.value_changed.connect(lambda v, p=prop: self.property_edited.emit(self.wave.id, p, v))
        self.grid.addWidget(slider, row, 1)
        value_label = QLabel(format_property(prop, self.wave.get(prop)), self)
        value_label.setMinimumWidth(48)
        value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.grid.addWidget(value_label, row, 2)
        self._sliders[prop] = slider
        self._value_labels[prop] = value_label

    def refresh(self) -> None:
        """Sync labels and preview with the (already mutated) wave."""
        for prop, value_label in self._value_labels.items():
            value_label.setText(format_property(prop, self.wave.get(prop)))
        self.preview.refresh()
