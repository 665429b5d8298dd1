"""
Mystic -- Preset & Registry Tests
Built-in presets load cleanly into their effect's settings, and the
effects registry exposes what the CLI needs.

Run with: pytest tests/test_presets.py -v
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.safety import validate_animation
from effects import (
    CATEGORIES, EFFECTS, apply_effect, generate_settings, get_effect, list_categories,
    list_effects, new_settings,
)
from presets import (
    BUILT_IN_PRESETS, get_preset, get_presets_by_category, get_presets_for_effect,
    list_categories as list_preset_categories, list_preset_names,
)


# ---------------------------------------------------------------------------
# PRESETS
# ---------------------------------------------------------------------------

class TestPresets:

    def test_names_unique(self):
        names = list_preset_names()
        assert len(names) == len(set(names))

    def test_required_keys(self):
        for preset in BUILT_IN_PRESETS:
            for key in ("name", "effect", "description", "category", "settings", "tags"):
                assert key in preset, f"{preset.get('name')} missing {key}"

    def test_every_preset_targets_a_known_effect(self):
        for preset in BUILT_IN_PRESETS:
            assert preset["effect"] in EFFECTS

    def test_lookup_is_case_insensitive(self):
        assert get_preset("ethereal")["name"] == "Ethereal"
        assert get_preset("does not exist") is None

    def test_filters(self):
        assert {p["name"] for p in get_presets_for_effect("treeoflife")} >= {
            "Tree of Life", "Ethereal", "Minimalist", "Cinematic",
        }
        assert [p["name"] for p in get_presets_by_category("diagnostic")] == [
            "Diagnostic All Features",
        ]

    def test_categories(self):
        assert "Default" in list_preset_categories()

    @pytest.mark.parametrize("preset", BUILT_IN_PRESETS, ids=lambda p: p["name"])
    def test_preset_settings_are_known_fields(self, preset):
        cls = EFFECTS[preset["effect"]]["settings"]
        fields = set(cls.__dataclass_fields__)
        assert set(preset["settings"]) <= fields

    @pytest.mark.parametrize("preset", BUILT_IN_PRESETS, ids=lambda p: p["name"])
    def test_preset_animation_is_valid(self, preset):
        settings = new_settings(preset["effect"], preset["settings"])
        assert validate_animation(settings.animation) == []

    @pytest.mark.parametrize("preset", BUILT_IN_PRESETS, ids=lambda p: p["name"])
    def test_preset_renders(self, preset, black_frame):
        settings = generate_settings(preset["effect"],
                                     new_settings(preset["effect"], preset["settings"]), rng=1)
        out = apply_effect(black_frame, preset["effect"], 25, 60, settings)
        assert out.shape == black_frame.shape

    def test_ethereal_overrides_survive(self):
        settings = new_settings("treeoflife", get_preset("Ethereal")["settings"])
        assert settings.branch_color == "#DDA0DD"
        assert settings.animation.boundaries.ascension_start == 0.25
        assert settings.animation.phases["radiance"].scalars["kether_glow"].start == 2.2

    def test_tree_presets_complete(self):
        assert {p["name"] for p in get_presets_for_effect("treeoflife")} == {
            "Tree of Life", "Ethereal", "Minimalist", "Cinematic", "Hermetic Ascent",
            "Chakra Spin", "Alchemical Transmutation", "Geometric", "Quantum",
            "Operator Overload",
        }

    def test_chakra_journeys_complete(self):
        names = [p["name"] for p in get_presets_by_category("meditation")]
        assert names == [
            "Kundalini Awakening", "Heart Centered Healing", "Third Eye Activation",
            "Grounding Stability", "Full Spectrum Resonance", "Crown Enlightenment",
            "Creative Flow", "Throat Truth Expression", "Solar Power Will", "Celestial Void",
        ]
        assert all(p["effect"] == "chakramandala" for p in get_presets_by_category("meditation"))

    def test_detail_overrides_survive(self):
        settings = new_settings("treeoflife", get_preset("Geometric")["settings"])
        assert settings.crosshatch_intensity == 0.7
        assert settings.node_orbital_elements is False
        assert settings.node_crystalline_effect is True
        assert settings.layer_blend_mode == "overlay"

    def test_journey_sets_node_alpha_only(self):
        settings = new_settings("chakramandala", get_preset("Kundalini Awakening")["settings"])
        ascension = settings.animation.phases["ascension"]
        assert ascension.scalars["node_alpha"].start == 0.5
        assert ascension.scalars["path_anim_speed"].start == 2.0
        assert settings.animation.boundaries.radiance_start == 0.70

    def test_partial_animation_override_keeps_rest(self):
        settings = new_settings("chakramandala", get_preset("Diagnostic All Features")["settings"])
        assert settings.animation.boundaries.ascension_start == 0.25
        assert settings.animation.boundaries.radiance_start == 0.60


# ---------------------------------------------------------------------------
# REGISTRY
# ---------------------------------------------------------------------------

class TestRegistry:

    def test_effects_registered(self):
        assert set(EFFECTS) == {"chakramandala", "treeoflife"}

    def test_unknown_effect(self):
        with pytest.raises(ValueError, match="Unknown effect"):
            get_effect("flower_of_life")

    def test_list_effects_has_geometry(self):
        by_name = {e["name"]: e for e in list_effects()}
        assert by_name["treeoflife"]["geometry"]["node_count"] == 10
        assert by_name["chakramandala"]["geometry"]["node_count"] == 7

    def test_category_filter(self):
        assert len(list_effects("sacred")) == 2
        assert list_effects("glitch") == []
        assert list_categories() == list(CATEGORIES)

    def test_new_settings_copies(self):
        a = new_settings("treeoflife")
        b = new_settings("treeoflife", {"node_size": 40})
        assert a.node_size == 20
        assert b.node_size == 40

    def test_generate_from_dict(self):
        settings = generate_settings("treeoflife", {"node_size": 12}, rng=3)
        assert settings.node_size == 12
        assert settings.animation.is_resolved


class TestApplyEffect:

    def test_rgba_keeps_alpha(self, tree_settings):
        frame = np.zeros((48, 48, 4), dtype=np.uint8)
        frame[:, :, 3] = 77
        out = apply_effect(frame, "treeoflife", 10, 30, tree_settings)
        assert out.shape == (48, 48, 4)
        assert (out[:, :, 3] == 77).all()

    def test_zero_mix_is_dry(self, test_frame, tree_settings):
        out = apply_effect(test_frame, "treeoflife", 10, 30, tree_settings, mix=0.0)
        assert np.array_equal(out, test_frame)

    def test_dict_settings(self, test_frame, chakra_settings):
        a = apply_effect(test_frame, "chakramandala", 5, 30, chakra_settings)
        b = apply_effect(test_frame, "chakramandala", 5, 30, chakra_settings.to_dict())
        assert np.array_equal(a, b)
