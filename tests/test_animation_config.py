"""
Mystic -- Animation Config Tests
Defaults, partial dicts, easing resolution and JSON serialization.

Run with: pytest tests/test_animation_config.py -v
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.animation import GLOBAL_DEFAULTS, AnimationConfig, PhaseSettings, ScalarRange
from core.phases import PHASES
from core.selection import Fixed, RandomChoice


# ---------------------------------------------------------------------------
# SCALAR RANGES
# ---------------------------------------------------------------------------

class TestScalarRange:

    def test_number_is_constant(self):
        assert ScalarRange.coerce(1.5) == ScalarRange(1.5, 1.5)

    def test_dict(self):
        assert ScalarRange.coerce({"start": 0.1, "end": 0.5}) == ScalarRange(0.1, 0.5)

    def test_pair(self):
        assert ScalarRange.coerce([0.0, 1.0]) == ScalarRange(0.0, 1.0)

    def test_constant_serializes_as_number(self):
        assert ScalarRange(2.0, 2.0).to_plain() == 2.0
        assert ScalarRange(0.0, 1.0).to_plain() == {"start": 0.0, "end": 1.0}

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            ScalarRange.coerce("bright")


# ---------------------------------------------------------------------------
# DEFAULTS
# ---------------------------------------------------------------------------

class TestDefaults:

    def test_all_phases_present(self, animation_config):
        assert set(animation_config.phases) == set(PHASES)

    def test_defaults_are_unresolved(self, animation_config):
        assert not animation_config.is_resolved
        assert isinstance(animation_config.phases["awakening"].easing, RandomChoice)

    def test_awakening_ranges(self, animation_config):
        scalars = animation_config.phases["awakening"].scalars
        assert scalars["node_alpha"] == ScalarRange(0.1, 0.5)
        assert scalars["path_anim_speed"] == ScalarRange(0.5, 0.5)

    def test_global_defaults(self, animation_config):
        assert animation_config.default_for("kether_glow") == GLOBAL_DEFAULTS["kether_glow"]
        assert animation_config.default_for("never_declared") == 0.0

    def test_scalar_names_include_phase_extras(self):
        config = AnimationConfig.from_dict({
            "phases": {"radiance": {"scalars": {"halo": 3.0}}},
        })
        assert "halo" in config.scalar_names()
        assert "node_alpha" in config.scalar_names()


# ---------------------------------------------------------------------------
# PARTIAL DICTS
# ---------------------------------------------------------------------------

class TestFromDict:

    def test_empty_dict_is_default(self):
        assert AnimationConfig.from_dict({}).to_dict() == AnimationConfig().to_dict()

    def test_partial_phase_keeps_other_scalars(self):
        config = AnimationConfig.from_dict({
            "phases": {"ascension": {"scalars": {"node_alpha": 0.8}}},
        })
        scalars = config.phases["ascension"].scalars
        assert scalars["node_alpha"] == ScalarRange(0.8, 0.8)
        assert scalars["path_anim_speed"] == ScalarRange(2.0, 2.0)

    def test_partial_phase_keeps_easing_candidates(self):
        config = AnimationConfig.from_dict({"phases": {"descent": {"scalars": {}}}})
        assert isinstance(config.phases["descent"].easing, RandomChoice)

    def test_bad_width_is_default(self):
        assert AnimationConfig.from_dict({"transition_zone_width": "wide"}).transition_zone_width == 0.05
        assert AnimationConfig.from_dict({"transition_zone_width": float("nan")}).transition_zone_width == 0.05

    def test_boundaries_from_dict(self):
        config = AnimationConfig.from_dict({"phase_boundaries": {"descent_start": 0.9}})
        assert config.boundaries.descent_start == 0.9

    def test_phase_settings_instance_kept(self):
        settings = PhaseSettings(easing="linear")
        config = AnimationConfig(phases={"radiance": settings})
        assert config.phases["radiance"] is settings


# ---------------------------------------------------------------------------
# RESOLUTION
# ---------------------------------------------------------------------------

class TestResolveChoices:

    def test_resolves_every_phase(self, animation_config):
        animation_config.resolve_choices(1)
        assert animation_config.is_resolved
        for phase in PHASES:
            assert isinstance(animation_config.phases[phase].easing, Fixed)

    def test_pick_is_a_candidate(self):
        base = AnimationConfig()
        candidates = base.phases["ascension"].easing.options
        for seed in range(10):
            config = AnimationConfig().resolve_choices(seed)
            assert config.phases["ascension"].easing.value in candidates

    def test_seed_is_reproducible(self):
        a = AnimationConfig().resolve_choices(77).to_dict()
        b = AnimationConfig().resolve_choices(77).to_dict()
        assert a == b

    def test_resolved_config_round_trips(self, animation_config):
        animation_config.resolve_choices(4)
        data = json.loads(animation_config.to_json())
        assert all(isinstance(data["phases"][p]["easing"], str) for p in PHASES)
        restored = AnimationConfig.from_dict(data)
        assert restored.is_resolved
        assert restored.to_dict() == animation_config.to_dict()


# ---------------------------------------------------------------------------
# SERIALIZATION
# ---------------------------------------------------------------------------

class TestSerialization:

    def test_keys(self, animation_config):
        data = animation_config.to_dict()
        assert set(data) == {
            "phase_boundaries", "transition_zone_width", "loop_transition", "phases", "defaults",
        }

    def test_unresolved_serializes_as_list(self, animation_config):
        data = animation_config.to_dict()
        assert isinstance(data["phases"]["awakening"]["easing"], list)

    def test_json_is_plain(self, linear_config):
        text = linear_config.to_json(indent=2)
        assert json.loads(text)["phases"]["radiance"]["easing"] == "linear"
