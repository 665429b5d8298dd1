"""
Mystic -- Resolve-Once Selection Tests
Candidate lists, seeded picking, color specs and the palette picker.

Run with: pytest tests/test_selection.py -v
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.selection import (
    ColorPicker, Fixed, PickerRef, RandomChoice, SolidColor, as_choice, as_color_spec,
    choice_to_plain, is_unresolved, make_rng, pick_once, resolve_color,
)


# ---------------------------------------------------------------------------
# CHOICES
# ---------------------------------------------------------------------------

class TestChoices:

    def test_list_is_random_choice(self):
        assert as_choice(["a", "b"]) == RandomChoice(("a", "b"))

    def test_scalar_is_fixed(self):
        assert as_choice("linear") == Fixed("linear")
        assert as_choice(3) == Fixed(3)

    def test_already_wrapped_passes_through(self):
        choice = Fixed("x")
        assert as_choice(choice) is choice

    def test_plain_round_trip(self):
        assert choice_to_plain(as_choice(["a", "b"])) == ["a", "b"]
        assert choice_to_plain(as_choice("a")) == "a"

    def test_is_unresolved(self):
        assert is_unresolved(["a"])
        assert is_unresolved(RandomChoice(("a",)))
        assert not is_unresolved("a")
        assert not is_unresolved(Fixed("a"))


# ---------------------------------------------------------------------------
# PICK ONCE
# ---------------------------------------------------------------------------

class TestPickOnce:

    def test_pick_is_a_candidate(self):
        options = ["easeInCubic", "easeInQuart", "easeInQuint"]
        for seed in range(20):
            assert pick_once(options, seed) in options

    def test_same_seed_same_pick(self):
        options = list(range(50))
        assert pick_once(options, 9) == pick_once(options, 9)

    def test_fixed_unwraps(self):
        assert pick_once(Fixed("linear")) == "linear"

    def test_plain_value_passes(self):
        assert pick_once(0.5) == 0.5

    def test_empty_list_warns(self, caplog):
        assert pick_once([], 1) is None
        assert "Empty candidate list" in caplog.text

    def test_shared_rng_advances(self):
        rng = make_rng(3)
        picks = [pick_once(list(range(1000)), rng) for _ in range(5)]
        assert len(set(picks)) > 1

    def test_make_rng_passes_through(self):
        rng = np.random.RandomState(1)
        assert make_rng(rng) is rng


# ---------------------------------------------------------------------------
# COLOR SPECS
# ---------------------------------------------------------------------------

class TestColorSpecs:

    def test_hex_is_solid(self):
        assert as_color_spec("#FF0000") == SolidColor("#FF0000")

    def test_picker_dict(self):
        assert as_color_spec({"picker": "neon"}) == PickerRef("neon")

    def test_none_is_default_bucket(self):
        assert as_color_spec(None) == PickerRef("colorBucket")

    def test_unsupported_raises(self):
        with pytest.raises(TypeError):
            as_color_spec(42)


class TestResolveColor:

    def test_solid_needs_no_picker(self):
        assert resolve_color("#123456") == "#123456"

    def test_picker_draws_from_bucket(self):
        picker = ColorPicker(seed=5)
        assert resolve_color({"picker": "neon"}, picker) in ColorPicker.BUCKETS["neon"]

    def test_missing_picker_falls_back(self, caplog):
        assert resolve_color(None, None, fallback="#ABCDEF") == "#ABCDEF"
        assert "No color picker" in caplog.text

    def test_bad_spec_falls_back(self):
        assert resolve_color(3.5, ColorPicker(1), fallback="#000000") == "#000000"

    def test_unknown_bucket_uses_default(self):
        picker = ColorPicker(seed=2)
        assert picker.pick("nope") in ColorPicker.BUCKETS["colorBucket"]

    def test_broken_picker_falls_back(self):
        picker = ColorPicker(seed=1, buckets={"colorBucket": [], "empty": []})
        assert resolve_color({"picker": "empty"}, picker, fallback="#111111") == "#111111"

    def test_seeded_picker_is_reproducible(self):
        a = [ColorPicker(11).pick("mystic") for _ in range(3)]
        b = [ColorPicker(11).pick("mystic") for _ in range(3)]
        assert a == b
