"""
Mystic — Oscillation Engine

Frame-driven scalar oscillators used for sine-wave opacity/blur/accent
cycling, amplitude breathing and bead pulsing.

Frame convention: oscillators normalize with current_frame / total_frames,
while overall animation progress uses frame / (total_frames - 1). With an
integer cycle count the oscillator therefore lines up with frame
total_frames (the first frame of the next loop), not with the last rendered
frame. The last rendered frame is one 1/total_frames step short of a full
cycle. Callers that need the last frame to match the first exactly should
drive oscillate_progress() with the animation progress instead.
"""

import logging
import math

logger = logging.getLogger(__name__)

OSCILLATION_ALGORITHMS = ("sinusoidal", "square", "sawtooth")

TWO_PI = 2.0 * math.pi


def oscillation_wave(phase_value: float, algorithm: str) -> float:
    """Unit oscillation (0.0 to 1.0) for a phase angle in radians.

    Args:
        phase_value: Angle in radians (any range).
        algorithm: "sinusoidal", "square" or "sawtooth". Unknown names
            behave as sinusoidal.

    Returns:
        float between 0.0 and 1.0
    """
    if algorithm == "square":
        return 1.0 if math.sin(phase_value) > 0 else 0.0
    elif algorithm == "sawtooth":
        return (phase_value / TWO_PI) % 1.0
    elif algorithm != "sinusoidal":
        logger.debug("Unknown oscillation algorithm %r, using sinusoidal", algorithm)
    return 0.5 + 0.5 * math.sin(phase_value)


def oscillate(lower: float, upper: float, cycles: float, total_frames,
              current_frame, algorithm: str = "sinusoidal") -> float:
    """Value between lower and upper that cycles `cycles` times per animation.

    total_frames <= 0 (or anything non-numeric) is treated as 1.
    """
    total = _coerce_total(total_frames)
    try:
        current = float(current_frame)
    except (TypeError, ValueError):
        current = 0.0
    if current != current:
        current = 0.0

    phase_value = (current / total) * cycles * TWO_PI
    return lower + (upper - lower) * oscillation_wave(phase_value, algorithm)


def oscillate_progress(lower: float, upper: float, cycles: float, progress: float,
                       algorithm: str = "sinusoidal") -> float:
    """oscillate() on an already-normalized progress value."""
    return oscillate(lower, upper, cycles, 1, progress, algorithm)


def range_bounds(raw, default=(0.0, 1.0)) -> tuple[float, float]:
    """(lower, upper) from a {"lower", "upper"} range dict."""
    if isinstance(raw, dict):
        lower = float(raw.get("lower", default[0]))
        upper = float(raw.get("upper", default[1]))
        return lower, upper
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw), float(raw)
    return default


def _coerce_total(total_frames) -> float:
    try:
        total = float(total_frames)
    except (TypeError, ValueError):
        return 1.0
    if total != total or total <= 0:
        return 1.0
    return total
