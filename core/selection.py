"""
Mystic — Resolve-Once Selection

Config fields may hold either a concrete value or a list of candidates.
A candidate list is collapsed to one concrete value exactly once, at the
generate step, and the result is written back into the config so that it
survives JSON round trips between the generate step and per-frame workers.

Color fields follow the same discipline: a ColorSpec is either a literal
color or a reference to a palette picker, and is resolved to a plain
"#RRGGBB" string before it crosses a serialization boundary.
"""

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


# ─── Choice values ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Fixed:
    value: Any


@dataclass(frozen=True)
class RandomChoice:
    options: tuple


def as_choice(raw):
    """Wrap a raw config value: lists and tuples are candidates, anything else is fixed."""
    if isinstance(raw, (Fixed, RandomChoice)):
        return raw
    if isinstance(raw, (list, tuple)):
        return RandomChoice(tuple(raw))
    return Fixed(raw)


def choice_to_plain(choice):
    """Collapse a choice back to JSON-safe data."""
    if isinstance(choice, RandomChoice):
        return list(choice.options)
    if isinstance(choice, Fixed):
        return choice.value
    return choice


def is_unresolved(value) -> bool:
    return isinstance(value, (list, tuple, RandomChoice))


def make_rng(seed=None) -> np.random.RandomState:
    if isinstance(seed, np.random.RandomState):
        return seed
    return np.random.RandomState(seed)


def pick_once(value, rng=None):
    """Resolve a candidate list to one element, uniformly at random.

    Call only at the generate step. Fixed values pass through unwrapped,
    plain scalars pass through unchanged.
    """
    if isinstance(value, Fixed):
        return value.value
    if isinstance(value, RandomChoice):
        options = value.options
    elif isinstance(value, (list, tuple)):
        options = value
    else:
        return value

    if len(options) == 0:
        logger.warning("Empty candidate list, nothing to pick")
        return None
    rng = make_rng(rng)
    return options[rng.randint(len(options))]


# ─── Color specs ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class SolidColor:
    value: str


@dataclass(frozen=True)
class PickerRef:
    token: str


DEFAULT_PICKER_TOKEN = "colorBucket"


def as_color_spec(raw):
    """Interpret a raw color field.

    "#hex" → SolidColor, {"picker": token} → PickerRef, None → the default
    palette bucket.
    """
    if isinstance(raw, (SolidColor, PickerRef)):
        return raw
    if raw is None:
        return PickerRef(DEFAULT_PICKER_TOKEN)
    if isinstance(raw, dict) and "picker" in raw:
        return PickerRef(str(raw["picker"]))
    if isinstance(raw, str):
        return SolidColor(raw)
    raise TypeError(f"Unsupported color spec: {raw!r}")


class ColorPicker:
    """Named palettes that a PickerRef can draw from."""

    BUCKETS = {
        "colorBucket": [
            "#E74C3C", "#F39C12", "#F1C40F", "#2ECC71",
            "#3498DB", "#9B59B6", "#E91E63", "#1ABC9C",
        ],
        "neon": ["#FF00FF", "#00FFFF", "#39FF14", "#FF073A", "#FFFF33"],
        "pastel": ["#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF"],
        "mystic": ["#9B59B6", "#C8A2E0", "#FFD700", "#64C8FF", "#DDA0DD"],
    }

    def __init__(self, seed=None, buckets: dict | None = None):
        self.rng = make_rng(seed)
        self.buckets = dict(buckets) if buckets else dict(self.BUCKETS)

    def pick(self, token: str) -> str:
        bucket = self.buckets.get(token)
        if not bucket:
            logger.debug("Unknown palette %r, using %s", token, DEFAULT_PICKER_TOKEN)
            bucket = self.buckets[DEFAULT_PICKER_TOKEN]
        return bucket[self.rng.randint(len(bucket))]


def resolve_color(spec, picker: ColorPicker | None = None, fallback: str = "#FFFFFF") -> str:
    """Resolve a color spec to a plain color string.

    A picker reference without a picker, or a picker that fails, falls back
    with a warning instead of failing the job.
    """
    try:
        spec = as_color_spec(spec)
    except TypeError as e:
        logger.warning("%s; using %s", e, fallback)
        return fallback

    if isinstance(spec, SolidColor):
        return spec.value
    if picker is None:
        logger.warning("No color picker for %r; using %s", spec.token, fallback)
        return fallback
    try:
        return picker.pick(spec.token)
    except (KeyError, IndexError, ValueError) as e:
        logger.warning("Color picker failed for %r (%s); using %s", spec.token, e, fallback)
        return fallback
