"""
Mystic -- Phase Boundary & Transition Tests
Phase detection, frame progress, next-phase ordering and blend zones.

Run with: pytest tests/test_phases.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.phases import (
    PHASES, PhaseBoundaries, frame_progress, next_phase, resolve_phase, transition_info,
)


# ---------------------------------------------------------------------------
# BOUNDARIES
# ---------------------------------------------------------------------------

class TestBoundaries:

    def test_defaults(self):
        b = PhaseBoundaries()
        assert b.starts() == (0.0, 0.20, 0.60, 0.85)

    def test_spans(self):
        b = PhaseBoundaries()
        assert b.span("awakening") == (0.0, 0.20)
        assert b.span("descent") == (0.85, 1.0)

    def test_valid_has_no_errors(self):
        assert PhaseBoundaries().errors() == []

    def test_non_monotonic(self):
        errors = PhaseBoundaries(ascension_start=0.7, radiance_start=0.6).errors()
        assert any("monotonic" in e for e in errors)

    def test_out_of_range(self):
        errors = PhaseBoundaries(descent_start=1.2).errors()
        assert any("descent_start" in e for e in errors)

    def test_non_numeric(self):
        errors = PhaseBoundaries(radiance_start="late").errors()
        assert errors and "radiance_start" in errors[0]

    def test_dict_round_trip(self):
        b = PhaseBoundaries(ascension_start=0.25)
        assert PhaseBoundaries.from_dict(b.to_dict()) == b

    def test_partial_dict_keeps_defaults(self):
        b = PhaseBoundaries.from_dict({"radiance_start": 0.65})
        assert b.radiance_start == 0.65
        assert b.ascension_start == 0.20


# ---------------------------------------------------------------------------
# FRAME PROGRESS
# ---------------------------------------------------------------------------

class TestFrameProgress:

    def test_first_and_last_frame(self):
        assert frame_progress(0, 100) == 0.0
        assert frame_progress(99, 100) == 1.0

    def test_midpoint(self):
        assert frame_progress(50, 101) == pytest.approx(0.5)

    def test_single_frame_is_static(self):
        assert frame_progress(0, 1) == 0.0
        assert frame_progress(3, 0) == 0.0

    def test_bad_total(self):
        assert frame_progress(5, None) == 0.0
        assert frame_progress(5, "many") == 0.0

    def test_clamped(self):
        assert frame_progress(150, 100) == 1.0
        assert frame_progress(-3, 100) == 0.0


# ---------------------------------------------------------------------------
# PHASE RESOLUTION
# ---------------------------------------------------------------------------

class TestResolvePhase:

    @pytest.mark.parametrize("progress,phase", [
        (0.0, "awakening"), (0.19, "awakening"), (0.20, "ascension"),
        (0.59, "ascension"), (0.60, "radiance"), (0.85, "descent"), (1.0, "descent"),
    ])
    def test_phase_at_progress(self, progress, phase):
        assert resolve_phase(progress).phase == phase

    def test_phase_progress(self):
        pos = resolve_phase(0.40)
        assert pos.phase == "ascension"
        assert pos.phase_progress == pytest.approx(0.5)

    def test_descent_reaches_one(self):
        assert resolve_phase(1.0).phase_progress == pytest.approx(1.0)

    def test_nan_and_garbage_are_zero(self):
        assert resolve_phase(float("nan")) == resolve_phase(0.0)
        assert resolve_phase("soon").phase == "awakening"

    def test_out_of_range_is_clamped(self):
        assert resolve_phase(-0.5).phase_progress == 0.0
        assert resolve_phase(4.0).phase == "descent"

    def test_zero_width_phase(self):
        b = PhaseBoundaries(ascension_start=0.3, radiance_start=0.3, descent_start=0.8)
        assert resolve_phase(0.3, b).phase == "radiance"


# ---------------------------------------------------------------------------
# NEXT PHASE
# ---------------------------------------------------------------------------

class TestNextPhase:

    def test_cycle_order(self):
        assert [next_phase(p) for p in PHASES] == [
            "ascension", "radiance", "descent", "awakening",
        ]

    def test_no_wrap(self):
        assert next_phase("descent", wrap=False) is None

    def test_skips_zero_width(self):
        b = PhaseBoundaries(ascension_start=0.3, radiance_start=0.3, descent_start=0.8)
        assert next_phase("awakening", b) == "radiance"


# ---------------------------------------------------------------------------
# TRANSITION ZONES
# ---------------------------------------------------------------------------

class TestTransitionInfo:

    def test_outside_zone(self):
        info = transition_info(0.10)
        assert not info.in_transition
        assert info.blend_amount == 0.0
        assert info.next_phase is None

    def test_early_in_zone(self):
        info = transition_info(0.16)
        assert info.in_transition
        assert info.blend_amount == pytest.approx(0.2)
        assert info.next_phase == "ascension"

    def test_halfway(self):
        info = transition_info(0.175)
        assert info.blend_amount == pytest.approx(0.5)
        assert info.current_phase == "awakening"

    def test_boundary_belongs_to_next_phase(self):
        info = transition_info(0.20)
        assert info.current_phase == "ascension"
        assert not info.in_transition

    def test_descent_wraps_to_awakening(self):
        info = transition_info(0.97)
        assert info.next_phase == "awakening"
        assert info.blend_amount == pytest.approx(0.4)

    def test_end_of_loop_fully_blended(self):
        info = transition_info(1.0)
        assert info.in_transition
        assert info.blend_amount == pytest.approx(1.0)

    def test_no_wrap_means_no_final_zone(self):
        assert not transition_info(0.99, wrap=False).in_transition

    def test_zero_width_disables(self):
        assert not transition_info(0.199, width=0).in_transition
        assert not transition_info(0.199, width=-1).in_transition

    def test_blend_is_monotonic(self):
        blends = [transition_info(0.55 + i * 0.001).blend_amount for i in range(50)]
        assert blends == sorted(blends)

    def test_wide_zone_is_capped_at_phase_span(self):
        # descent spans 0.15 and awakening 0.20, both narrower than the zone
        assert transition_info(0.0, width=0.3).blend_amount == 0.0
        assert transition_info(0.85, width=0.3).blend_amount == 0.0
        assert transition_info(0.925, width=0.3).blend_amount == pytest.approx(0.5)
        assert transition_info(1.0, width=0.3).blend_amount == pytest.approx(1.0)

    def test_narrow_zone_unchanged_by_cap(self):
        assert transition_info(0.95, width=0.1).blend_amount == pytest.approx(0.5)


# ---------------------------------------------------------------------------
# PROGRESSION
# ---------------------------------------------------------------------------

class TestProgression:

    @pytest.mark.parametrize("boundaries", [
        PhaseBoundaries(),
        PhaseBoundaries(ascension_start=0.25, radiance_start=0.5, descent_start=0.9),
        PhaseBoundaries(ascension_start=0.3, radiance_start=0.3, descent_start=0.8),
    ])
    def test_phase_index_never_decreases(self, boundaries):
        indices = [PHASES.index(resolve_phase(i / 1000, boundaries).phase)
                   for i in range(1001)]
        assert indices == sorted(indices)
        assert indices[0] == 0
        assert indices[-1] == 3

    def test_phase_progress_rises_within_phase(self):
        previous = resolve_phase(0.0)
        for i in range(1, 1001):
            current = resolve_phase(i / 1000)
            if current.phase == previous.phase:
                assert current.phase_progress >= previous.phase_progress
            previous = current


# ---------------------------------------------------------------------------
# MALFORMED BOUNDARIES
# ---------------------------------------------------------------------------

class TestMalformedBoundaries:

    def test_numeric_string_is_parsed(self):
        b = PhaseBoundaries.from_dict({"ascension_start": "0.25"})
        assert b.ascension_start == 0.25

    def test_garbage_keeps_default(self, caplog):
        b = PhaseBoundaries.from_dict({"radiance_start": "late", "descent_start": None})
        assert b.radiance_start == 0.60
        assert b.descent_start == 0.85
        assert "radiance_start" in caplog.text

    def test_non_finite_and_bool_keep_default(self):
        b = PhaseBoundaries.from_dict({"ascension_start": float("nan"), "radiance_start": True})
        assert b.ascension_start == 0.20
        assert b.radiance_start == 0.60

    def test_non_dict_is_defaults(self):
        assert PhaseBoundaries.from_dict(["0.2"]) == PhaseBoundaries()

    def test_parsed_boundaries_resolve(self):
        b = PhaseBoundaries.from_dict({"ascension_start": "0.2", "radiance_start": "x"})
        assert resolve_phase(0.5, b).phase == "ascension"
        assert transition_info(0.59, b).next_phase == "radiance"
