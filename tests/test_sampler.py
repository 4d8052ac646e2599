from __future__ import annotations

import math

import numpy as np
import pytest

from wavesuperposition.model.sampler import (
    DEFAULT_DOMAIN, Curve, CurvePoint, SampleDomain, compute_y_range, format_property, pi_ticks,
    sample_sum, sample_wave, superposition_title,
)
from wavesuperposition.model.waves import WaveModel, WaveParams, WaveProperty


def _model(*params: WaveParams) -> WaveModel:
    model = WaveModel()
    for p in params:
        model.add_wave(p)
    return model


@pytest.mark.parametrize("n", [2, 3, 5, 200, 300])
@pytest.mark.parametrize("domain", [DEFAULT_DOMAIN, SampleDomain(-1.0, 2.5)])
def test_grid_includes_both_endpoints(n, domain):
    wave = _model(WaveParams()).waves()[0]
    curve = sample_wave(wave, domain, n)

    assert len(curve) == n
    assert curve.x[0] == domain.x_min
    assert curve.x[-1] == domain.x_max
    assert np.all(np.diff(curve.x) > 0)
    np.testing.assert_allclose(np.diff(curve.x), (domain.x_max - domain.x_min) / (n - 1))


def test_sample_wave_values():
    wave = _model(WaveParams(amplitude=2.0, frequency=0.5, phase=math.pi / 4)).waves()[0]
    curve = sample_wave(wave, DEFAULT_DOMAIN, 50)

    np.testing.assert_allclose(curve.y, 2.0 * np.sin(0.5 * curve.x + math.pi / 4))


def test_curve_iteration_is_restartable():
    wave = _model(WaveParams()).waves()[0]
    curve = sample_wave(wave, DEFAULT_DOMAIN, 10)

    first = list(curve)
    second = list(curve)

    assert first == second
    assert len(first) == 10
    assert first[0] == CurvePoint(0.0, 0.0)
    assert curve.points() == first


def test_sample_sum_is_pointwise_sum_of_waves():
    model = _model(
        WaveParams(amplitude=1.0, frequency=1.0, phase=0.0),
        WaveParams(amplitude=0.5, frequency=3.0, phase=1.0),
        WaveParams(amplitude=2.0, frequency=0.2, phase=5.0),
    )
    total = sample_sum(model.waves(), DEFAULT_DOMAIN, 120)

    expected = np.zeros(120)
    for wave in model.waves():
        expected = expected + sample_wave(wave, DEFAULT_DOMAIN, 120).y

    np.testing.assert_allclose(total.y, expected)
    np.testing.assert_array_equal(total.x, sample_wave(model.waves()[0], DEFAULT_DOMAIN, 120).x)


def test_sample_sum_of_no_waves_is_zero():
    curve = sample_sum([], DEFAULT_DOMAIN, 30)

    assert len(curve) == 30
    assert not np.any(curve.y)


def test_default_wave_vanishes_at_multiples_of_pi():
    model = _model(WaveParams())
    curve = sample_sum(model.waves(), DEFAULT_DOMAIN, 5)

    np.testing.assert_allclose(curve.x, [0, math.pi, 2 * math.pi, 3 * math.pi, 4 * math.pi])
    np.testing.assert_allclose(curve.y, 0.0, atol=1e-12)


def test_y_range_has_floor_for_silent_curve():
    assert compute_y_range(sample_sum([], DEFAULT_DOMAIN, 10)) == pytest.approx(2.2)


def test_y_range_for_empty_curve():
    curve = Curve(x=np.array([]), y=np.array([]))

    assert compute_y_range(curve) == pytest.approx(2.2)


def test_y_range_pads_peak():
    curve = Curve(x=np.array([0.0, 1.0, 2.0]), y=np.array([1.0, -5.0, 3.0]))

    assert compute_y_range(curve) == pytest.approx(5.5)


def test_y_range_for_small_peak_uses_floor():
    curve = Curve(x=np.array([0.0, 1.0]), y=np.array([0.3, -0.7]))

    assert compute_y_range(curve) == pytest.approx(2.2)


def test_pi_ticks_cover_domain():
    ticks = pi_ticks()

    assert len(ticks) == 9
    assert ticks[0] == (0.0, "0.0π")
    assert ticks[1][1] == "0.5π"
    assert ticks[-1][0] == pytest.approx(4 * math.pi)
    assert ticks[-1][1] == "4.0π"


def test_format_property():
    assert format_property(WaveProperty.PHASE, math.pi) == "1.00π"
    assert format_property(WaveProperty.PHASE, 2 * math.pi) == "2.00π"
    assert format_property(WaveProperty.AMPLITUDE, 1) == "1.00"
    assert format_property(WaveProperty.FREQUENCY, 0.1) == "0.10"


def test_superposition_title():
    assert superposition_title(0) == "Superposition of 0 waves"
    assert superposition_title(1) == "Superposition of 1 wave"
    assert superposition_title(4) == "Superposition of 4 waves"


def test_curves_sampled_from_same_wave_are_equal():
    wave = _model(WaveParams(amplitude=1.5, frequency=2.0)).waves()[0]

    first = sample_wave(wave, DEFAULT_DOMAIN, 10)
    second = sample_wave(wave, DEFAULT_DOMAIN, 10)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_curves_differ_when_samples_differ():
    wave = _model(WaveParams()).waves()[0]

    assert sample_wave(wave, DEFAULT_DOMAIN, 10) != sample_wave(wave, DEFAULT_DOMAIN, 11)
    assert sample_wave(wave, DEFAULT_DOMAIN, 10) != sample_sum([], DEFAULT_DOMAIN, 10)
    assert sample_wave(wave, DEFAULT_DOMAIN, 10) != "curve"


def test_pi_ticks_snap_to_multiples_for_offset_domain():
    ticks = pi_ticks(SampleDomain(1.0, 2 * math.pi))

    assert [label for _, label in ticks] == ["0.5π", "1.0π", "1.5π", "2.0π"]
    np.testing.assert_allclose([v for v, _ in ticks], [math.pi / 2, math.pi, 1.5 * math.pi, 2 * math.pi])


def test_pi_ticks_stay_inside_domain():
    ticks = pi_ticks(SampleDomain(-math.pi, 3.0))

    assert [label for _, label in ticks] == ["-1.0π", "-0.5π", "0.0π", "0.5π"]
    assert all(-math.pi <= v <= 3.0 for v, _ in ticks)
