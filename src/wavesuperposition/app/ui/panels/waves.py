from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QComboBox, QGridLayout, QGroupBox, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget,
)

from wavesuperposition.app.state import Store
from wavesuperposition.app.ui.wave_card import WaveCard
from wavesuperposition.model.presets import CUSTOM_KEY, PRESETS
from wavesuperposition.model.waves import Wave, WaveProperty

logger = logging.getLogger(__name__)


class WavesPanel(QWidget):
    """
    Left-side panel.

    Top: "Add Wave" button and preset selector.
    Below: one WaveCard per wave, in model order. Cards forward slider edits
    to the store and redraw themselves when the store reports a change.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        root = QVBoxLayout(self)

        self.group_controls = QGroupBox("", self)
        root.addWidget(self.group_controls, 0)
        controls = QGridLayout(self.group_controls)

        self.add_button = QPushButton(self.tr("Add Wave"), self.group_controls)
        controls.addWidget(self.add_button, 0, 0, 1, 2)

        controls.addWidget(QLabel(self.tr("Preset:"), self.group_controls), 1, 0)
        self.combo_box = QComboBox(self.group_controls)
        self.combo_box.addItem(self.tr("Custom"), userData=CUSTOM_KEY)
        for key, preset in PRESETS.items():
            self.combo_box.addItem(self.tr(preset.name), userData=key.value)
        controls.addWidget(self.combo_box, 1, 1)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        content = QWidget()
        self.card_layout = QVBoxLayout(content)
        self.card_layout.addStretch()
        scroll.setWidget(content)
        root.addWidget(scroll, 1)

        self._cards: dict[int, WaveCard] = {}

        # wiring
        self.add_button.clicked.connect(self._on_add_clicked)
        self.combo_box.activated.connect(self._on_preset_activated)
        self.store.wave_added.connect(self._on_wave_added)
        self.store.wave_removed.connect(self._on_wave_removed)
        self.store.wave_changed.connect(self._on_wave_changed)
        self.store.waves_reset.connect(self._rebuild_cards)
        self.store.preset_changed.connect(self._on_preset_changed)

        self._rebuild_cards()

    @Slot()
    def _on_add_clicked(self) -> None:
        self.store.add_wave()

    @Slot(int)
    def _on_preset_activated(self, index: int) -> None:
        key = self.combo_box.itemData(index)
        if key != CUSTOM_KEY:
            self.store.load_preset(key)

    @Slot(str)
    def _on_preset_changed(self, key: str) -> None:
        index = self.combo_box.findData(key)
        if index >= 0:
            self.combo_box.setCurrentIndex(index)

    def _on_property_edited(self, wave_id: int, prop: WaveProperty, value: float) -> None:
        self.store.set_property(wave_id, prop, value)

    def _add_card(self, wave: Wave) -> None:
        card = WaveCard(wave, parent=self)
        card.property_edited.connect(self._on_property_edited)
        card.remove_requested.connect(self.store.remove_wave)
        # keep the trailing stretch last
        self.card_layout.insertWidget(self.card_layout.count() - 1, card)
        self._cards[wave.id] = card

    @Slot(object)
    def _on_wave_added(self, wave: Wave) -> None:
        self._add_card(wave)

    @Slot(int)
    def _on_wave_removed(self, wave_id: int) -> None:
        card = self._cards.pop(wave_id, None)
        if card is not None:
            card.deleteLater()

    @Slot(object)
    def _on_wave_changed(self, wave: Wave) -> None:
        card = self._cards.get(wave.id)
        if card is not None:
            card.refresh()

    @Slot()
    def _rebuild_cards(self) -> None:
        for card in self._cards.values():
            card.deleteLater()
        self._cards.clear()
        for wave in self.store.waves():
            self._add_card(wave)
        logger.debug(f"Rebuilt {len(self._cards)} wave cards")
