"""
Mystic — Phase Animation Engine

synthesize(config, progress) → FrameState

A referentially transparent function of its two inputs: no caches, no
randomness, no state carried between frames. Any worker process can
rebuild a frame from the serialized config and the frame index alone.
"""

import logging
from dataclasses import dataclass, field

from core.animation import AnimationConfig
from core.easing import EASINGS, lerp, smoothstep
from core.phases import (
    TransitionInfo, clamp_progress, frame_progress, resolve_phase, transition_info,
)
from core.selection import Fixed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameState:
    phase: str
    phase_progress: float
    progress: float
    scalars: dict = field(default_factory=dict)
    transition: TransitionInfo | None = None

    def get(self, name: str, default: float = 0.0) -> float:
        return self.scalars.get(name, default)

    @property
    def in_transition(self) -> bool:
        return self.transition is not None and self.transition.in_transition


def phase_easing(config: AnimationConfig, phase: str) -> str:
    """The easing name for a phase, or "linear" when it is unusable."""
    easing = config.phases[phase].easing
    if not isinstance(easing, Fixed):
        logger.warning("Easing for %s is unresolved (%r), using linear", phase, easing)
        return "linear"
    if easing.value not in EASINGS:
        logger.warning("Unknown easing %r for %s, using linear", easing.value, phase)
        return "linear"
    return easing.value


def phase_scalar(config: AnimationConfig, phase: str, name: str, local_progress: float,
                 easing: str) -> float:
    """One scalar interpolated within one phase.

    A phase without a definition for the scalar holds the global default.
    """
    scalar = config.phases[phase].scalars.get(name)
    if scalar is None:
        return config.default_for(name)
    return lerp(scalar.start, scalar.end, local_progress, easing)


def synthesize(config: AnimationConfig, progress) -> FrameState:
    """Resolve every animated scalar for one point in the cycle.

    Inside a transition zone each scalar is cross-faded toward the next
    phase's value at its own local progress 0, with a smoothstep weight.
    """
    position = resolve_phase(progress, config.boundaries)
    p = clamp_progress(progress)
    phase = position.phase
    easing = phase_easing(config, phase)

    scalars = {
        name: phase_scalar(config, phase, name, position.phase_progress, easing)
        for name in config.scalar_names()
    }

    info = transition_info(p, config.boundaries, config.transition_zone_width,
                           wrap=config.loop_transition)
    if info.in_transition and info.next_phase:
        nxt = info.next_phase
        next_easing = phase_easing(config, nxt)
        weight = smoothstep(info.blend_amount)
        for name, current in scalars.items():
            target = phase_scalar(config, nxt, name, 0.0, next_easing)
            scalars[name] = current + (target - current) * weight

    return FrameState(
        phase=phase,
        phase_progress=position.phase_progress,
        progress=p,
        scalars=scalars,
        transition=info,
    )


def synthesize_frame(config: AnimationConfig, frame_number, total_frames) -> FrameState:
    return synthesize(config, frame_progress(frame_number, total_frames))
