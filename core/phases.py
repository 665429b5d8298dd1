"""
Mystic — Phase Boundaries & Transitions

Maps overall animation progress (0-1) onto the four-phase cycle:

    awakening → ascension → radiance → descent → (next loop's awakening)

and detects the transition zones in which two phases are cross-blended.
Everything here is a pure function of its arguments.
"""

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PHASES = ("awakening", "ascension", "radiance", "descent")


def _boundary_value(d: dict, key: str, default: float) -> float:
    """Read one boundary as a finite float; anything else keeps the default."""
    raw = d.get(key, default)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Phase boundary %s=%r is not a number, using %s", key, raw, default)
        return default
    if isinstance(raw, bool) or not math.isfinite(value):
        logger.warning("Phase boundary %s=%r is not a number, using %s", key, raw, default)
        return default
    return value


@dataclass
class PhaseBoundaries:
    """Start fractions of each phase. Descent implicitly ends at 1.0."""
    awakening_start: float = 0.0
    ascension_start: float = 0.20
    radiance_start: float = 0.60
    descent_start: float = 0.85

    def starts(self) -> tuple[float, float, float, float]:
        return (self.awakening_start, self.ascension_start,
                self.radiance_start, self.descent_start)

    def span(self, phase: str) -> tuple[float, float]:
        """(start, end) of a phase."""
        starts = self.starts()
        idx = PHASES.index(phase)
        end = starts[idx + 1] if idx + 1 < len(PHASES) else 1.0
        return starts[idx], end

    def errors(self) -> list[str]:
        """Describe every violated boundary invariant (empty when valid)."""
        errors = []
        starts = self.starts()
        for name, value in zip(PHASES, starts):
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                errors.append(f"{name}_start must be a number, got {value!r}")
        if errors:
            return errors
        for name, value in zip(PHASES, starts):
            if not 0.0 <= value < 1.0:
                errors.append(f"{name}_start must be in [0, 1), got {value}")
        if not all(a < b for a, b in zip(starts, starts[1:])):
            errors.append(
                "Phase timing must be monotonic: awakening < ascension < radiance < descent"
            )
        return errors

    def to_dict(self) -> dict:
        return {
            "awakening_start": self.awakening_start,
            "ascension_start": self.ascension_start,
            "radiance_start": self.radiance_start,
            "descent_start": self.descent_start,
        }

    @classmethod
    def from_dict(cls, d: dict | None) -> "PhaseBoundaries":
        d = d if isinstance(d, dict) else {}
        defaults = cls()
        return cls(
            awakening_start=_boundary_value(d, "awakening_start", defaults.awakening_start),
            ascension_start=_boundary_value(d, "ascension_start", defaults.ascension_start),
            radiance_start=_boundary_value(d, "radiance_start", defaults.radiance_start),
            descent_start=_boundary_value(d, "descent_start", defaults.descent_start),
        )


@dataclass(frozen=True)
class PhasePosition:
    phase: str
    phase_progress: float


@dataclass(frozen=True)
class TransitionInfo:
    """Where progress sits relative to the end of its phase.

    blend_amount rises 0→1 across the zone; next_phase is None outside a zone.
    """
    in_transition: bool
    blend_amount: float
    current_phase: str
    next_phase: str | None


def clamp_progress(progress) -> float:
    """Coerce progress to a float in [0, 1]. Non-numeric and NaN become 0."""
    try:
        value = float(progress)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def frame_progress(frame_number, total_frames) -> float:
    """Overall progress for a frame: frame / (total - 1), clamped to [0, 1].

    Frame 0 lands on 0.0 and frame total-1 on 1.0, which is what makes the
    cycle loop. A single-frame (or negative/absent) total is static: 0.0.
    """
    try:
        total = int(total_frames)
    except (TypeError, ValueError):
        total = 1
    if total <= 1:
        return 0.0
    try:
        frame = float(frame_number)
    except (TypeError, ValueError):
        frame = 0.0
    return clamp_progress(frame / (total - 1))


def phase_at(progress: float, boundaries: PhaseBoundaries) -> str:
    if progress < boundaries.ascension_start:
        return "awakening"
    if progress < boundaries.radiance_start:
        return "ascension"
    if progress < boundaries.descent_start:
        return "radiance"
    return "descent"


def resolve_phase(progress, boundaries: PhaseBoundaries | None = None) -> PhasePosition:
    """Which phase progress falls in, and how far through that phase it is.

    A zero-width phase reports phase_progress 0 instead of dividing by zero.
    """
    boundaries = boundaries or PhaseBoundaries()
    p = clamp_progress(progress)
    phase = phase_at(p, boundaries)
    start, end = boundaries.span(phase)
    if end == start:
        return PhasePosition(phase, 0.0)
    local = (p - start) / (end - start)
    return PhasePosition(phase, max(0.0, min(1.0, local)))


def next_phase(phase: str, boundaries: PhaseBoundaries | None = None,
               wrap: bool = True) -> str | None:
    """The phase that follows `phase` in the cycle.

    Zero-width phases are skipped. Descent wraps to awakening unless
    wrap is False, in which case it has no successor.
    """
    boundaries = boundaries or PhaseBoundaries()
    idx = PHASES.index(phase)
    for step in range(1, len(PHASES)):
        j = idx + step
        if j >= len(PHASES):
            if not wrap:
                return None
            j -= len(PHASES)
        start, end = boundaries.span(PHASES[j])
        if end > start:
            return PHASES[j]
    return None


def transition_info(progress, boundaries: PhaseBoundaries | None = None,
                    width: float = 0.05, wrap: bool = True) -> TransitionInfo:
    """Detect whether progress lies in the blend zone at the end of its phase.

    The zone is [end - w, end) where w is width capped at the phase's own
    span, so a phase never starts part-way into its blend. For descent the
    end is 1.0 and, when wrapping, the zone is closed so progress 1.0 is
    fully blended into the next loop's awakening. width <= 0 disables
    blending.
    """
    boundaries = boundaries or PhaseBoundaries()
    p = clamp_progress(progress)
    current = phase_at(p, boundaries)

    try:
        width = float(width)
    except (TypeError, ValueError):
        width = 0.0
    if not width > 0:
        return TransitionInfo(False, 0.0, current, None)

    nxt = next_phase(current, boundaries, wrap=wrap)
    if nxt is None:
        return TransitionInfo(False, 0.0, current, None)

    start, end = boundaries.span(current)
    effective = min(width, end - start)
    if not effective > 0:
        return TransitionInfo(False, 0.0, current, None)
    zone_start = end - effective
    closes_loop = current == "descent"
    inside = zone_start <= p < end or (closes_loop and p == end)
    if not inside:
        return TransitionInfo(False, 0.0, current, None)

    blend = 1.0 - (end - p) / effective
    return TransitionInfo(True, max(0.0, min(1.0, blend)), current, nxt)
