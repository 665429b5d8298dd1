"""
Mystic -- Vertical Sine Wave Tests
Grouping modes, path shape, Hermite interpolation and per-frame waves.

Run with: pytest tests/test_sine_waves.py -v
"""

import os
import sys
from collections import namedtuple

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.sine_waves import (
    SEGMENTS_PER_INTERVAL, renderable_sine_waves, sine_wave_groups,
    sine_wave_path,
)
from effects.chakra_mandala import ChakraMandalaSettings

Pt = namedtuple("Pt", "x y")

SEVEN = [Pt(0.5, 0.9 - i * 0.13) for i in range(7)]


def _resolved_settings(**overrides):
    settings = ChakraMandalaSettings(**overrides)
    for name in ("sine_wave_opacity_algorithm", "sine_wave_blur_algorithm",
                 "sine_wave_accent_algorithm", "sine_wave_amplitude_algorithm"):
        setattr(settings, name, "sinusoidal")
    return settings


# ---------------------------------------------------------------------------
# GROUPS
# ---------------------------------------------------------------------------

class TestGroups:

    def test_sequential_wraps(self):
        groups = sine_wave_groups(SEVEN, "sequential", 3)
        assert [g.indices for g in groups] == [(0, 1, 2), (3, 4, 5), (6, 0, 1)]

    def test_sequential_drops_repeats(self):
        groups = sine_wave_groups(SEVEN[:4], "sequential", 3)
        # (3, 0, 1) is distinct, so two groups survive
        assert [g.indices for g in groups] == [(0, 1, 2), (3, 0, 1)]
        assert sine_wave_groups(SEVEN[:2], "sequential", 3) == []

    def test_overlapping_is_rolling(self):
        groups = sine_wave_groups(SEVEN, "overlapping", 3)
        assert len(groups) == 5
        assert groups[1].indices == (1, 2, 3)

    def test_unknown_progression(self):
        assert sine_wave_groups(SEVEN, "spiral", 3) == []

    def test_group_indices_are_sequential(self):
        groups = sine_wave_groups(SEVEN, "overlapping", 4)
        assert [g.group_index for g in groups] == list(range(len(groups)))

    def test_empty_points(self):
        assert sine_wave_groups([], "sequential", 3) == []


# ---------------------------------------------------------------------------
# PATHS
# ---------------------------------------------------------------------------

class TestPath:

    def test_too_few_points(self):
        with pytest.raises(ValueError):
            sine_wave_path(SEVEN[:2], 15, 2.5, 60, 0)

    def test_segment_count_and_ends(self):
        path = sine_wave_path(SEVEN[:3], 15, 2.5, 60, 0)
        assert len(path) == 2 * SEGMENTS_PER_INTERVAL + 1
        assert path[0].y == pytest.approx(SEVEN[0].y)
        assert path[-1].y == pytest.approx(SEVEN[2].y)

    def test_amplitude_in_thousandths(self):
        path = sine_wave_path(SEVEN[:3], 100, 2.5, 60, 0)
        assert max(abs(p.x - 0.5) for p in path) <= 0.1 + 1e-9

    def test_phase_moves_with_frame(self):
        a = sine_wave_path(SEVEN[:3], 15, 2.5, 60, 0)
        b = sine_wave_path(SEVEN[:3], 15, 2.5, 60, 7)
        assert a[5].x != b[5].x


# ---------------------------------------------------------------------------
# PER-FRAME WAVES
# ---------------------------------------------------------------------------

class TestRenderableWaves:

    def test_disabled(self):
        settings = _resolved_settings(enable_vertical_sine_waves=False)
        assert renderable_sine_waves(settings, SEVEN, 60, 0) == []

    def test_count_limits_groups(self):
        settings = _resolved_settings(sine_wave_progression="overlapping", sine_wave_count=2)
        assert len(renderable_sine_waves(settings, SEVEN, 60, 0)) == 2

    def test_harmonic_ratios_cycle(self):
        settings = _resolved_settings(sine_wave_progression="overlapping",
                                      sine_wave_harmonic_ratios=[1, 2])
        waves = renderable_sine_waves(settings, SEVEN, 60, 0)
        assert [w.harmonic_ratio for w in waves] == [1, 2, 1, 2, 1]
        assert waves[1].harmonic_frequency == pytest.approx(settings.sine_wave_frequency * 2)

    def test_oscillated_attributes_in_range(self):
        settings = _resolved_settings()
        for frame in range(0, 60, 5):
            for wave in renderable_sine_waves(settings, SEVEN, 60, frame):
                assert 0.3 - 1e-9 <= wave.opacity <= 1.0 + 1e-9
                assert 2 <= wave.blur <= 8
                assert 0.5 - 1e-9 <= wave.accent <= 2.5 + 1e-9

    def test_amplitude_override(self):
        settings = _resolved_settings(enable_sine_wave_amplitude_oscillation=False)
        wave = renderable_sine_waves(settings, SEVEN, 60, 0, amplitude=0)[0]
        assert all(p.x == pytest.approx(0.5) for p in wave.path)
