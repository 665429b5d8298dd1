"""
Mystic -- Chakra Mandala Tests
Settings defaults, the generate step, phase focus, individual render
layers and full-frame rendering.

Run with: pytest tests/test_chakra_mandala.py -v
"""

import json
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.canvas import Canvas
from core.selection import ColorPicker
from effects.chakra_geometry import CHAKRA_NAMES
from effects.chakra_mandala import (
    MAX_RENDERING_SCALE, MIN_RENDERING_SCALE, RENDER_ORDER, ChakraMandalaSettings,
    chakra_mandala, generate, render_beads, render_explosions, render_sine_waves,
)


def _ctx(width=96, height=96, progress=0.5, phase="ascension", frame_index=30, total_frames=60):
    return {
        "progress": progress,
        "frame_index": frame_index,
        "total_frames": total_frames,
        "phase": phase,
        "alpha": 1.0,
        "intensity": 1.0,
        "cx": width / 2,
        "cy": height / 2,
        "scale": min(width, height) * 0.35,
    }


# ---------------------------------------------------------------------------
# SETTINGS
# ---------------------------------------------------------------------------

class TestSettings:

    def test_rendering_scale_clamped(self):
        assert ChakraMandalaSettings(rendering_scale=10).rendering_scale == MAX_RENDERING_SCALE
        assert ChakraMandalaSettings(rendering_scale=0).rendering_scale == MIN_RENDERING_SCALE
        assert ChakraMandalaSettings(rendering_scale="big").rendering_scale == 1.0

    def test_scaled_sizes(self):
        settings = ChakraMandalaSettings(rendering_scale=2.0, energy_bead_radius=5)
        assert settings.scaled("energy_bead_radius") == pytest.approx(10.0)

    def test_focus_for_phase(self):
        settings = ChakraMandalaSettings(descent_chakra_focus="ajna")
        assert settings.focus_for_phase("descent") == "ajna"

    def test_from_dict_ignores_unknown(self):
        settings = ChakraMandalaSettings.from_dict({"mandala_symmetry": 8, "bogus": 1})
        assert settings.mandala_symmetry == 8

    def test_animation_dict_is_parsed(self):
        settings = ChakraMandalaSettings(animation={"transition_zone_width": 0.1})
        assert settings.animation.transition_zone_width == 0.1


# ---------------------------------------------------------------------------
# GENERATE STEP
# ---------------------------------------------------------------------------

class TestGenerate:

    def test_everything_resolved(self, chakra_settings):
        s = chakra_settings
        assert s.animation.is_resolved
        assert s.layer_blend_mode in ("screen", "overlay", "lighten", "color-dodge", "color-burn")
        assert s.explosion_color_scheme in ("chakraColor", "rainbow", "white")
        for phase in ("awakening", "ascension", "radiance", "descent"):
            assert s.focus_for_phase(phase) in CHAKRA_NAMES
        for name in ("sine_wave_opacity_algorithm", "sine_wave_blur_algorithm",
                     "sine_wave_accent_algorithm", "sine_wave_amplitude_algorithm"):
            assert getattr(s, name) in ("sinusoidal", "square", "sawtooth")

    def test_colors_are_hex(self, chakra_settings):
        for name in ("sine_wave_color", "sine_wave_fuzz_color", "explosion_fuzz_color",
                     "energy_bead_color", "chakra_color_override", "chakra_glow_color_override"):
            assert getattr(chakra_settings, name).startswith("#")

    def test_particle_seed_set(self, chakra_settings):
        assert isinstance(chakra_settings.explosion_particle_seed, int)

    def test_explicit_particle_seed_kept(self):
        settings = generate(ChakraMandalaSettings(explosion_particle_seed=99), rng=1)
        assert settings.explosion_particle_seed == 99

    def test_picker_is_used(self):
        settings = generate(ChakraMandalaSettings(energy_bead_color={"picker": "pastel"}),
                            rng=2, picker=ColorPicker(2))
        assert settings.energy_bead_color in ColorPicker.BUCKETS["pastel"]

    def test_invalid_sine_grouping_disables_waves(self, caplog):
        settings = generate(ChakraMandalaSettings(sine_wave_chakra_grouping=2), rng=1)
        assert settings.enable_vertical_sine_waves is False
        assert "Vertical sine waves disabled" in caplog.text

    def test_seed_reproducible(self):
        a = generate(ChakraMandalaSettings(), rng=8).to_dict()
        b = generate(ChakraMandalaSettings(), rng=8).to_dict()
        assert a == b

    def test_generated_settings_are_json_safe(self, chakra_settings):
        data = json.loads(json.dumps(chakra_settings.to_dict()))
        assert ChakraMandalaSettings.from_dict(data).to_dict() == chakra_settings.to_dict()


# ---------------------------------------------------------------------------
# RENDER LAYERS
# ---------------------------------------------------------------------------

class TestLayers:

    def test_render_order_is_complete(self):
        assert len(RENDER_ORDER) == 12
        assert RENDER_ORDER[0] is render_explosions
        assert RENDER_ORDER[-1] is render_beads

    @pytest.mark.parametrize("step", RENDER_ORDER, ids=lambda f: f.__name__)
    def test_each_layer_draws_within_bounds(self, step, chakra_settings):
        canvas = Canvas(96, 96)
        step(canvas, chakra_settings, _ctx())
        assert canvas.alpha.min() >= 0.0
        assert canvas.alpha.max() <= 1.0 + 1e-5

    def test_disabled_explosions_draw_nothing(self, chakra_settings):
        chakra_settings.enable_chakra_explosions = False
        canvas = Canvas(96, 96)
        render_explosions(canvas, chakra_settings, _ctx())
        assert canvas.is_empty

    def test_random_particles_are_seeded(self, chakra_settings):
        chakra_settings.explosion_even_particle_distribution = False
        a, b = Canvas(96, 96), Canvas(96, 96)
        render_explosions(a, chakra_settings, _ctx(progress=0.3))
        render_explosions(b, chakra_settings, _ctx(progress=0.3))
        assert np.array_equal(a.alpha, b.alpha)

    def test_sine_waves_drawn(self, chakra_settings):
        chakra_settings.enable_vertical_sine_waves = True
        canvas = Canvas(96, 96)
        render_sine_waves(canvas, chakra_settings, _ctx())
        assert not canvas.is_empty

    def test_beads_on_all_three_rings(self, chakra_settings):
        one, three = Canvas(96, 96), Canvas(96, 96)
        render_beads(one, chakra_settings, _ctx())
        chakra_settings.energy_bead_ring_layer = -1
        render_beads(three, chakra_settings, _ctx())
        assert (three.alpha > 0).sum() > (one.alpha > 0).sum()


# ---------------------------------------------------------------------------
# FULL FRAME
# ---------------------------------------------------------------------------

class TestRender:

    def test_output_shape(self, black_frame, chakra_settings):
        out = chakra_mandala(black_frame, chakra_settings, 15, 60)
        assert out.shape == black_frame.shape
        assert out.dtype == np.uint8

    def test_changes_frame(self, test_frame, chakra_settings):
        out = chakra_mandala(test_frame, chakra_settings, 30, 60)
        assert not np.array_equal(out, test_frame)

    def test_deterministic(self, black_frame, chakra_settings):
        a = chakra_mandala(black_frame, chakra_settings, 21, 60)
        b = chakra_mandala(black_frame, chakra_settings, 21, 60)
        assert np.array_equal(a, b)

    def test_dict_settings_match_object(self, black_frame, chakra_settings):
        as_dict = json.loads(json.dumps(chakra_settings.to_dict()))
        a = chakra_mandala(black_frame, chakra_settings, 40, 60)
        b = chakra_mandala(black_frame, as_dict, 40, 60)
        assert np.array_equal(a, b)

    def test_non_square_frame(self, chakra_settings):
        frame = np.zeros((72, 128, 3), dtype=np.uint8)
        assert chakra_mandala(frame, chakra_settings, 5, 20).shape == (72, 128, 3)

    def test_single_frame_job(self, black_frame, chakra_settings):
        assert chakra_mandala(black_frame, chakra_settings, 0, 1).shape == black_frame.shape

    def test_default_settings(self, black_frame):
        assert chakra_mandala(black_frame).shape == black_frame.shape
