"""Pytest configuration.

The Store is a QObject and the slider/panel tests build real widgets, so the
session needs a QApplication. No window is ever shown; the offscreen platform
keeps Qt from looking for a display.
"""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
