from __future__ import annotations

import math

import pytest

from wavesuperposition.app.state import Store
from wavesuperposition.model.presets import CUSTOM_KEY, PresetKey
from wavesuperposition.model.waves import WaveProperty


class Recorder:
    """Collects signal emissions as (name, args) tuples."""

    def __init__(self, store: Store) -> None:
        self.events: list[tuple] = []
        for name in ("wave_added", "wave_removed", "wave_changed", "waves_reset", "waves_changed", "preset_changed"):
            getattr(store, name).connect(lambda *args, n=name: self.events.append((n, *args)))

    def names(self) -> list[str]:
        return [e[0] for e in self.events]


@pytest.fixture
def store(qt_app):
    return Store()


def test_add_wave_emits_added_and_changed(store):
    rec = Recorder(store)
    wave = store.add_wave()

    assert ("wave_added", wave) in rec.events
    assert rec.names().count("waves_changed") == 1
    assert store.waves() == (wave,)


def test_set_property_emits_and_marks_custom(store):
    store.load_preset(PresetKey.SQUARE)
    rec = Recorder(store)

    wave = store.set_property(2, WaveProperty.PHASE, 2 * math.pi + 0.001)

    assert wave.phase == 2 * math.pi
    assert ("wave_changed", wave) in rec.events
    assert ("preset_changed", CUSTOM_KEY) in rec.events
    assert store.preset == CUSTOM_KEY
    assert rec.names().count("waves_changed") == 1


def test_noop_calls_emit_nothing(store):
    store.add_wave()
    rec = Recorder(store)

    assert store.remove_wave(7) is False
    assert store.set_property(7, WaveProperty.AMPLITUDE, 2.0) is None
    assert store.load_preset(CUSTOM_KEY) == []
    assert rec.events == []


def test_load_preset_resets_and_reports_key(store):
    store.add_wave()
    store.add_wave()
    rec = Recorder(store)

    waves = store.load_preset("sawtooth")

    assert [w.id for w in waves] == [1, 2, 3, 4]
    assert rec.names() == ["waves_reset", "preset_changed", "waves_changed"]
    assert ("preset_changed", "sawtooth") in rec.events
    assert store.preset == "sawtooth"


def test_remove_last_wave_restarts_numbering(store):
    wave = store.add_wave()
    rec = Recorder(store)

    assert store.remove_wave(wave.id)
    assert ("wave_removed", wave.id) in rec.events
    assert store.add_wave().id == 1
