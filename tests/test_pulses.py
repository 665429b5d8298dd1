"""
Mystic -- Energy Pulse Tests
Validation, wave/breath/aura/tracer math and the combined node pulse.

Run with: pytest tests/test_pulses.py -v
"""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.pulses import PHASE_WEIGHTS, SPIRAL_POINTS, EnergyPulseEngine, PulseSettings
from core.safety import ConfigError


@pytest.fixture
def engine():
    return EnergyPulseEngine()


# ---------------------------------------------------------------------------
# CONSTRUCTION
# ---------------------------------------------------------------------------

class TestConstruction:

    def test_defaults(self, engine):
        assert engine.settings == PulseSettings()

    def test_from_dict(self):
        e = EnergyPulseEngine({"pulse_tracer_count": 3, "unrelated": 1})
        assert e.settings.pulse_tracer_count == 3

    def test_from_settings_object(self, tree_settings):
        e = EnergyPulseEngine(tree_settings)
        assert e.settings.pulse_breath_speed == tree_settings.pulse_breath_speed

    @pytest.mark.parametrize("field,value", [
        ("pulse_wave_speed", -1.0),
        ("pulse_aura_width", 0.0),
        ("pulse_tracer_count", 0),
        ("pulse_spiral_radius", float("nan")),
        ("pulse_breath_speed", "fast"),
    ])
    def test_invalid_settings_raise(self, field, value):
        with pytest.raises(ConfigError, match=field):
            EnergyPulseEngine({field: value})


# ---------------------------------------------------------------------------
# PULSE SHAPES
# ---------------------------------------------------------------------------

class TestWavePulse:

    def test_no_paths(self, engine):
        assert engine.wave_pulse(0.3, 1, 0).intensity == 0.0

    def test_far_paths_are_dark(self, engine):
        # progress 0 puts the wave on path 1
        assert engine.wave_pulse(0.0, 20, 22).intensity == 0.0

    def test_intensity_bounded(self, engine):
        for i in range(100):
            pulse = engine.wave_pulse(i / 100, 5, 22)
            assert 0.0 <= pulse.intensity <= 1.0


class TestNodePulses:

    def test_breathing_range(self, engine):
        amp = engine.settings.pulse_breath_intensity
        for i in range(50):
            b = engine.breathing_pulse(i / 50, 3)
            assert 1.0 - amp - 1e-9 <= b.scale <= 1.0 + amp + 1e-9
            assert 0.0 <= b.glow_pulse <= 0.5

    def test_spiral_point_count(self, engine):
        points = engine.spiral_vortex(0.25, 100.0, 100.0, 4)
        assert len(points) == SPIRAL_POINTS
        radius = engine.settings.pulse_spiral_radius
        for p in points:
            assert math.hypot(p.x - 100.0, p.y - 100.0) <= radius * 5

    def test_multi_layer_non_negative(self, engine):
        pulse = engine.multi_layer_pulse(0.6, 2)
        assert all(v >= 0 for v in pulse.layers.values())
        assert pulse.combined >= 0

    def test_aura_peaks_at_front(self, engine):
        speed = engine.settings.pulse_aura_speed
        progress = 0.5 / speed
        assert engine.aura_wave(progress, 0.5).intensity == pytest.approx(0.6)
        assert engine.aura_wave(progress, 1.5).intensity == 0.0

    def test_tracers(self, engine):
        tracers = engine.path_tracers(0.4)
        assert len(tracers) == engine.settings.pulse_tracer_count
        assert all(0.0 <= t.position < 1.0 for t in tracers)
        assert all(0.0 <= t.brightness <= 1.0 for t in tracers)

    def test_harmonic_frequency(self, engine):
        assert engine.harmonic_resonance(0.1, 3).frequency == pytest.approx(6.0)


class TestCombinedPulse:

    def test_phase_weights(self):
        assert EnergyPulseEngine.phase_weights("radiance") == PHASE_WEIGHTS["radiance"]
        assert EnergyPulseEngine.phase_weights("nope") == PHASE_WEIGHTS["awakening"]

    def test_weights_are_copies(self):
        EnergyPulseEngine.phase_weights("descent")["aura"] = 99
        assert PHASE_WEIGHTS["descent"]["aura"] == 0.2

    def test_combined_is_deterministic(self, engine):
        a = engine.combined_node_pulse(0.37, 6, 0.4, engine.phase_weights("ascension"))
        b = engine.combined_node_pulse(0.37, 6, 0.4, engine.phase_weights("ascension"))
        assert a == b

    def test_combined_scale_near_one(self, engine):
        for i in range(40):
            pulse = engine.combined_node_pulse(i / 40, 1, 0.2)
            assert 0.5 < pulse.scale < 1.5
            assert pulse.glow >= 0
