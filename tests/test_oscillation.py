"""
Mystic -- Oscillation Tests
Algorithms, frame-convention boundary behavior, fades and range parsing.

Run with: pytest tests/test_oscillation.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.oscillation import (
    OSCILLATION_ALGORITHMS, oscillate, oscillate_progress, oscillation_wave,
    range_bounds,
)


# ---------------------------------------------------------------------------
# ALGORITHMS
# ---------------------------------------------------------------------------

class TestAlgorithms:

    def test_names(self):
        assert OSCILLATION_ALGORITHMS == ("sinusoidal", "square", "sawtooth")

    def test_sinusoidal_starts_at_midpoint(self):
        assert oscillate(0, 10, 1, 100, 0) == pytest.approx(5.0)

    def test_sinusoidal_quarter_cycle_is_upper(self):
        assert oscillate(0, 10, 1, 100, 25) == pytest.approx(10.0)

    def test_square(self):
        assert oscillate(2, 8, 1, 100, 10, "square") == 8
        assert oscillate(2, 8, 1, 100, 60, "square") == 2

    def test_sawtooth_ramps(self):
        assert oscillate(0, 1, 1, 100, 25, "sawtooth") == pytest.approx(0.25)
        assert oscillate(0, 1, 2, 100, 75, "sawtooth") == pytest.approx(0.5)

    def test_unknown_algorithm_is_sinusoidal(self):
        assert oscillate(0, 10, 1, 100, 25, "triangle") == pytest.approx(10.0)

    @pytest.mark.parametrize("algorithm", OSCILLATION_ALGORITHMS)
    def test_unit_wave_bounds(self, algorithm):
        for i in range(50):
            assert 0.0 <= oscillation_wave(i * 0.37, algorithm) <= 1.0


# ---------------------------------------------------------------------------
# FRAME CONVENTION
# ---------------------------------------------------------------------------

class TestFrameConvention:

    @pytest.mark.parametrize("algorithm", ["sinusoidal", "sawtooth"])
    def test_integer_cycles_repeat_at_total_frames(self, algorithm):
        total = 60
        first = oscillate(0.2, 0.9, 3, total, 0, algorithm)
        assert oscillate(0.2, 0.9, 3, total, total, algorithm) == pytest.approx(first, abs=1e-9)

    def test_last_rendered_frame_is_one_step_short(self):
        total = 60
        first = oscillate(0, 1, 1, total, 0)
        last = oscillate(0, 1, 1, total, total - 1)
        assert last != pytest.approx(first, abs=1e-6)

    def test_progress_form_matches_first_and_last(self):
        assert oscillate_progress(0, 1, 2, 0.0) == pytest.approx(oscillate_progress(0, 1, 2, 1.0))

    def test_bad_total_is_one(self):
        assert oscillate(0, 10, 1, 0, 0.25) == pytest.approx(10.0)
        assert oscillate(0, 10, 1, -5, 0.25) == pytest.approx(10.0)
        assert oscillate(0, 10, 1, None, 0.25) == pytest.approx(10.0)

    def test_bad_frame_is_zero(self):
        assert oscillate(0, 10, 1, 100, "x") == pytest.approx(5.0)


# ---------------------------------------------------------------------------
# RANGES
# ---------------------------------------------------------------------------

class TestRangeBounds:

    def test_dict(self):
        assert range_bounds({"lower": 0.3, "upper": 0.9}) == (0.3, 0.9)

    def test_number_is_constant(self):
        assert range_bounds(2) == (2.0, 2.0)

    def test_missing_is_default(self):
        assert range_bounds(None, (1.0, 2.0)) == (1.0, 2.0)
        assert range_bounds({"lower": 0.5}) == (0.5, 1.0)


# ---------------------------------------------------------------------------
# OUTPUT RANGE
# ---------------------------------------------------------------------------

class TestOutputRange:

    @pytest.mark.parametrize("algorithm", OSCILLATION_ALGORITHMS)
    @pytest.mark.parametrize("cycles", [0.5, 1, 3, 7.3])
    def test_stays_within_bounds(self, algorithm, cycles):
        lower, upper, total = 0.25, 4.0, 90
        for frame in range(total + 1):
            value = oscillate(lower, upper, cycles, total, frame, algorithm)
            assert lower - 1e-9 <= value <= upper + 1e-9

    @pytest.mark.parametrize("algorithm", OSCILLATION_ALGORITHMS)
    def test_progress_form_within_bounds(self, algorithm):
        for i in range(101):
            value = oscillate_progress(-2.0, 3.0, 4, i / 100, algorithm)
            assert -2.0 - 1e-9 <= value <= 3.0 + 1e-9
