"""
Mystic -- Safety & Validation Tests
Animation config checks, render limits and recipe preflight.

Run with: pytest tests/test_safety.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.animation import AnimationConfig
from core.safety import (
    MAX_DIMENSION, MAX_FRAMES, MAX_RECIPE_KB, ConfigError, check_animation, preflight_recipe,
    validate_animation, validate_render_request,
)


# ---------------------------------------------------------------------------
# ANIMATION CONFIG
# ---------------------------------------------------------------------------

class TestValidateAnimation:

    def test_default_is_valid(self, animation_config):
        assert validate_animation(animation_config) == []

    def test_resolved_is_valid(self, animation_config):
        animation_config.resolve_choices(0)
        check_animation(animation_config)

    def test_bad_boundaries(self):
        config = AnimationConfig.from_dict({
            "phase_boundaries": {"ascension_start": 0.7, "radiance_start": 0.5},
        })
        errors = validate_animation(config)
        assert any("monotonic" in e for e in errors)

    def test_wide_transition_zone(self):
        config = AnimationConfig.from_dict({"transition_zone_width": 0.6})
        assert any("transition_zone_width" in e for e in validate_animation(config))

    def test_negative_transition_zone(self):
        config = AnimationConfig.from_dict({"transition_zone_width": -0.1})
        assert validate_animation(config)

    def test_unknown_easing(self):
        config = AnimationConfig.from_dict({"phases": {"radiance": {"easing": "wobble"}}})
        errors = validate_animation(config)
        assert errors == ["radiance: unknown easing 'wobble'"]

    def test_unknown_candidate(self):
        config = AnimationConfig.from_dict({
            "phases": {"descent": {"easing": ["easeOutQuart", "bogus"]}},
        })
        assert any("bogus" in e for e in validate_animation(config))

    def test_alpha_out_of_range(self):
        config = AnimationConfig.from_dict({
            "phases": {"radiance": {"scalars": {"node_alpha": 1.5}}},
        })
        assert any("node_alpha" in e for e in validate_animation(config))

    def test_negative_glow(self):
        config = AnimationConfig.from_dict({
            "phases": {"radiance": {"scalars": {"kether_glow": -1}}},
        })
        assert any("kether_glow" in e for e in validate_animation(config))

    def test_check_raises_with_every_error(self):
        config = AnimationConfig.from_dict({
            "transition_zone_width": 0.9,
            "phases": {"radiance": {"easing": "wobble"}},
        })
        with pytest.raises(ConfigError) as exc:
            check_animation(config)
        assert "transition_zone_width" in str(exc.value)
        assert "wobble" in str(exc.value)


# ---------------------------------------------------------------------------
# RENDER LIMITS
# ---------------------------------------------------------------------------

class TestRenderRequest:

    def test_valid(self):
        validate_render_request(640, 480, 120)

    def test_at_limits(self):
        validate_render_request(MAX_DIMENSION, MAX_DIMENSION, MAX_FRAMES)

    @pytest.mark.parametrize("width,height,frames", [
        (0, 480, 10), (640, -1, 10), (640, 480, 0),
        (MAX_DIMENSION + 1, 480, 10), (640, 480, MAX_FRAMES + 1),
    ])
    def test_rejected(self, width, height, frames):
        with pytest.raises(ConfigError):
            validate_render_request(width, height, frames)

    @pytest.mark.parametrize("value", [64.0, "64", True, None])
    def test_non_integer(self, value):
        with pytest.raises(ConfigError, match="integer"):
            validate_render_request(value, 64, 10)


# ---------------------------------------------------------------------------
# RECIPE PREFLIGHT
# ---------------------------------------------------------------------------

class TestPreflightRecipe:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            preflight_recipe(tmp_path / "nope.json")

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "recipe.yaml"
        path.write_text("{}")
        with pytest.raises(ConfigError, match=".json"):
            preflight_recipe(path)

    def test_too_large(self, tmp_path):
        path = tmp_path / "big.json"
        path.write_text(" " * (MAX_RECIPE_KB * 1024 + 2048))
        with pytest.raises(ConfigError, match="exceeds"):
            preflight_recipe(path)

    def test_valid_returns_resolved_path(self, tmp_path):
        path = tmp_path / "ok.json"
        path.write_text("{}")
        assert preflight_recipe(path) == path.resolve()
