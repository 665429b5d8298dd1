"""
Mystic — Easing Library

Pure curves mapping t in [0, 1] to eased t. Configs refer to curves by
their camelCase name ("easeInOutCubic"), so the registry is keyed that way.

Elastic and back curves overshoot the unit interval on purpose; they are
listed in OVERSHOOT_EASINGS and stay within OVERSHOOT_TOLERANCE of it.
"""

import logging
import math

logger = logging.getLogger(__name__)

OVERSHOOT_TOLERANCE = 0.4


# ─── Curves ──────────────────────────────────────────────────────────

def _linear(t):
    return t


def _ease_in_cubic(t):
    return t * t * t


def _ease_out_cubic(t):
    return 1.0 - (1.0 - t) ** 3


def _ease_in_out_cubic(t):
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def _smoothstep(t):
    return t * t * (3.0 - 2.0 * t)


def _smootherstep(t):
    return t * t * t * (t * (6.0 * t - 15.0) + 10.0)


def _ease_in_quart(t):
    return t ** 4


def _ease_out_quart(t):
    return 1.0 - (1.0 - t) ** 4


def _ease_in_out_quart(t):
    if t < 0.5:
        return 8.0 * t ** 4
    return 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


def _ease_in_quint(t):
    return t ** 5


def _ease_out_quint(t):
    return 1.0 - (1.0 - t) ** 5


def _ease_in_out_quint(t):
    if t < 0.5:
        return 16.0 * t ** 5
    return 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


def _ease_in_expo(t):
    if t == 0:
        return 0.0
    return 2.0 ** (10.0 * t - 10.0)


def _ease_out_expo(t):
    if t == 1:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def _ease_out_elastic(t):
    if t == 0 or t == 1:
        return float(t)
    c4 = (2.0 * math.pi) / 3.0
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * c4) + 1.0


def _ease_in_out_elastic(t):
    if t == 0 or t == 1:
        return float(t)
    c5 = (2.0 * math.pi) / 4.5
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * math.sin((20.0 * t - 11.125) * c5)) / 2.0
    return (2.0 ** (-20.0 * t + 10.0) * math.sin((20.0 * t - 11.125) * c5)) / 2.0 + 1.0


def _ease_in_out_back(t):
    c1 = 1.70158
    c2 = c1 * 1.525
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((c2 + 1.0) * 2.0 * t - c2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((c2 + 1.0) * (t * 2.0 - 2.0) + c2) + 2.0) / 2.0


EASINGS = {
    "linear": _linear,
    "easeInCubic": _ease_in_cubic,
    "easeOutCubic": _ease_out_cubic,
    "easeInOutCubic": _ease_in_out_cubic,
    "smoothstep": _smoothstep,
    "smootherstep": _smootherstep,
    "easeInQuart": _ease_in_quart,
    "easeOutQuart": _ease_out_quart,
    "easeInOutQuart": _ease_in_out_quart,
    "easeInQuint": _ease_in_quint,
    "easeOutQuint": _ease_out_quint,
    "easeInOutQuint": _ease_in_out_quint,
    "easeInExpo": _ease_in_expo,
    "easeOutExpo": _ease_out_expo,
    "easeOutElastic": _ease_out_elastic,
    "easeInOutElastic": _ease_in_out_elastic,
    "easeInOutBack": _ease_in_out_back,
}

OVERSHOOT_EASINGS = frozenset({"easeOutElastic", "easeInOutElastic", "easeInOutBack"})


def list_easings() -> list[str]:
    """Return all registered easing names."""
    return list(EASINGS)


def get_easing(name):
    """Look up an easing curve by name.

    Unknown names (and non-strings such as an unresolved candidate list)
    fall back to linear with a warning. Never raises.
    """
    if isinstance(name, str):
        fn = EASINGS.get(name)
        if fn is not None:
            return fn
    logger.warning("Unknown easing %r, using linear", name)
    return _linear


def ease(name, t: float) -> float:
    """Apply the named easing to t (t is clamped to [0, 1])."""
    return get_easing(name)(_clamp01(t))


def smoothstep(t: float) -> float:
    return _smoothstep(_clamp01(t))


def lerp(a: float, b: float, t: float, easing="linear") -> float:
    """Interpolate a→b with an eased, clamped t."""
    return a + (b - a) * ease(easing, t)


def _clamp01(t):
    if t != t:  # NaN
        return 0.0
    return max(0.0, min(1.0, float(t)))
