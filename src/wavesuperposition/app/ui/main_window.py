from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QMainWindow, QSplitter, QWidget, QVBoxLayout

from wavesuperposition.app.application import VISIBLE_APP_NAME
from wavesuperposition.app.state import Store
from wavesuperposition.app.ui.panels.waves import WavesPanel
from wavesuperposition.app.ui.plots import SuperpositionPlot


class MainWindow(QMainWindow):
    """Splitter with the waves panel on the left and the superposition plot on the right."""
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        self.store = store

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        split = QSplitter(Qt.Orientation.Horizontal, central)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.panel = WavesPanel(self.store, parent=split)
        self.panel.setMinimumWidth(320)
        self.plot = SuperpositionPlot(parent=split)

        split.addWidget(self.panel)
        split.addWidget(self.plot)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)

        self.setCentralWidget(central)

        self.store.waves_changed.connect(self._redraw)

        if not self.store.waves():
            self.store.add_wave()
        self._redraw()

    @Slot()
    def _redraw(self) -> None:
        self.plot.refresh(self.store.waves())
