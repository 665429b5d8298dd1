"""
Mystic — Animation Config

The complete parameter set for one effect's animation cycle: phase
boundaries, the transition zone, and per-phase scalar ranges with an easing
curve for each phase.

Easing fields may hold a candidate list until the generate step resolves
them (resolve_choices). The config always serializes to plain JSON: a
resolved easing is a string, an unresolved one is a list.
"""

import json
import logging
import math
from dataclasses import dataclass, field

from core.phases import PHASES, PhaseBoundaries
from core.selection import as_choice, choice_to_plain, make_rng, pick_once, Fixed, RandomChoice

logger = logging.getLogger(__name__)

# Scalars every effect can rely on, and their values when a phase omits them.
GLOBAL_DEFAULTS = {
    "node_alpha": 1.0,
    "path_intensity": 1.0,
    "path_anim_speed": 1.0,
    "kether_glow": 1.0,
}


@dataclass
class ScalarRange:
    """start → end over a phase. A constant has start == end."""
    start: float
    end: float

    @classmethod
    def coerce(cls, raw) -> "ScalarRange":
        if isinstance(raw, ScalarRange):
            return raw
        if isinstance(raw, dict):
            start = float(raw.get("start", raw.get("end", 0.0)))
            end = float(raw.get("end", start))
            return cls(start, end)
        if isinstance(raw, (list, tuple)) and len(raw) == 2:
            return cls(float(raw[0]), float(raw[1]))
        value = float(raw)
        return cls(value, value)

    def to_plain(self):
        if self.start == self.end:
            return self.start
        return {"start": self.start, "end": self.end}


def _coerce_scalars(raw_scalars: dict, into: dict) -> dict:
    """Merge raw scalar entries into `into`, dropping any that do not parse.

    A dropped scalar is simply absent from the phase, so it holds the
    global default like any other missing scalar.
    """
    for name, raw in raw_scalars.items():
        try:
            rng = ScalarRange.coerce(raw)
        except (TypeError, ValueError):
            logger.warning("Scalar %s=%r is not a number or range, ignoring it", name, raw)
            into.pop(name, None)
            continue
        if not (math.isfinite(rng.start) and math.isfinite(rng.end)):
            logger.warning("Scalar %s=%r is not finite, ignoring it", name, raw)
            into.pop(name, None)
            continue
        into[name] = rng
    return into


@dataclass
class PhaseSettings:
    easing: Fixed | RandomChoice = field(default_factory=lambda: Fixed("linear"))
    scalars: dict = field(default_factory=dict)

    def __post_init__(self):
        self.easing = as_choice(self.easing)
        self.scalars = _coerce_scalars(self.scalars, {})

    def to_dict(self) -> dict:
        return {
            "easing": choice_to_plain(self.easing),
            "scalars": {name: r.to_plain() for name, r in self.scalars.items()},
        }

    @classmethod
    def from_dict(cls, d: dict | None, base: "PhaseSettings | None" = None) -> "PhaseSettings":
        d = d or {}
        base = base or cls()
        scalars = {name: ScalarRange(r.start, r.end) for name, r in base.scalars.items()}
        raw_scalars = d.get("scalars") or {}
        if not isinstance(raw_scalars, dict):
            logger.warning("Phase scalars must be an object, got %r", raw_scalars)
            raw_scalars = {}
        _coerce_scalars(raw_scalars, scalars)
        easing = d.get("easing", choice_to_plain(base.easing))
        return cls(easing=easing, scalars=scalars)


def default_phases() -> dict:
    return {
        "awakening": PhaseSettings(
            easing=["easeInCubic", "easeInQuart", "easeInQuint", "easeInExpo"],
            scalars={
                "node_alpha": {"start": 0.1, "end": 0.5},
                "path_intensity": {"start": 0.0, "end": 0.4},
                "path_anim_speed": 0.5,
            },
        ),
        "ascension": PhaseSettings(
            easing=["easeInOutCubic", "easeInOutQuart", "easeInOutQuint", "easeInOutElastic"],
            scalars={
                "node_alpha": {"start": 0.5, "end": 1.0},
                "path_intensity": {"start": 0.4, "end": 1.0},
                "path_anim_speed": 2.0,
            },
        ),
        "radiance": PhaseSettings(
            easing=["smoothstep", "easeOutCubic", "easeOutQuart", "linear"],
            scalars={
                "node_alpha": 1.0,
                "path_intensity": 1.0,
                "path_anim_speed": 1.5,
            },
        ),
        "descent": PhaseSettings(
            easing=["easeOutQuart", "easeOutQuint", "easeOutExpo", "easeInOutBack"],
            scalars={
                "node_alpha": {"start": 1.0, "end": 0.1},
                "path_intensity": {"start": 1.0, "end": 0.0},
                "path_anim_speed": 1.0,
            },
        ),
    }


@dataclass
class AnimationConfig:
    boundaries: PhaseBoundaries = field(default_factory=PhaseBoundaries)
    transition_zone_width: float = 0.05
    loop_transition: bool = True
    phases: dict = field(default_factory=default_phases)
    defaults: dict = field(default_factory=lambda: dict(GLOBAL_DEFAULTS))

    def __post_init__(self):
        if isinstance(self.boundaries, dict):
            self.boundaries = PhaseBoundaries.from_dict(self.boundaries)
        base = default_phases()
        phases = {}
        for name in PHASES:
            raw = self.phases.get(name)
            if isinstance(raw, PhaseSettings):
                phases[name] = raw
            elif raw is not None and not isinstance(raw, dict):
                logger.warning("Settings for phase %s must be an object, using defaults", name)
                phases[name] = base[name]
            else:
                phases[name] = PhaseSettings.from_dict(raw, base=base[name])
        self.phases = phases

    # ─── Generate step ───

    def resolve_choices(self, rng=None) -> "AnimationConfig":
        """Collapse every candidate easing to one name, in place."""
        rng = make_rng(rng)
        for name in PHASES:
            settings = self.phases[name]
            settings.easing = Fixed(pick_once(settings.easing, rng))
        return self

    @property
    def is_resolved(self) -> bool:
        return all(isinstance(p.easing, Fixed) for p in self.phases.values())

    def scalar_names(self) -> list[str]:
        names = list(self.defaults)
        for settings in self.phases.values():
            for name in settings.scalars:
                if name not in names:
                    names.append(name)
        return names

    def default_for(self, name: str) -> float:
        return float(self.defaults.get(name, GLOBAL_DEFAULTS.get(name, 0.0)))

    # ─── Serialization ───

    def to_dict(self) -> dict:
        return {
            "phase_boundaries": self.boundaries.to_dict(),
            "transition_zone_width": self.transition_zone_width,
            "loop_transition": self.loop_transition,
            "phases": {name: self.phases[name].to_dict() for name in PHASES},
            "defaults": dict(self.defaults),
        }

    @classmethod
    def from_dict(cls, d: dict | None) -> "AnimationConfig":
        """Build from plain data. Unknown keys are ignored; missing ones take defaults."""
        d = d if isinstance(d, dict) else {}
        width = d.get("transition_zone_width", 0.05)
        try:
            width = float(width)
        except (TypeError, ValueError):
            width = 0.05
        if math.isnan(width):
            width = 0.05
        defaults = dict(GLOBAL_DEFAULTS)
        raw_defaults = d.get("defaults")
        for name, raw in (raw_defaults if isinstance(raw_defaults, dict) else {}).items():
            try:
                value = float(raw)
            except (TypeError, ValueError):
                logger.warning("Default %s=%r is not a number, ignoring it", name, raw)
                continue
            if math.isfinite(value):
                defaults[name] = value
        return cls(
            boundaries=PhaseBoundaries.from_dict(d.get("phase_boundaries")),
            transition_zone_width=width,
            loop_transition=bool(d.get("loop_transition", True)),
            phases=d["phases"] if isinstance(d.get("phases"), dict) else {},
            defaults=defaults,
        )

    def to_json(self, indent=None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "AnimationConfig":
        return cls.from_dict(json.loads(text))
