"""
Mystic — Energy Pulse Engine

Pulse patterns layered over node and path geometry:

1. Wave pulses travelling along paths in their animation order
2. Breathing expansion/contraction per node
3. Spiral vortices rotating around nodes
4. Multi-layer pulses at three speeds
5. Aura waves expanding from the center
6. Path tracers: particles flowing along each path
7. Harmonic resonance: per-node vibration offsets

Every method is a pure function of progress and node/path identity.
"""

import math
from dataclasses import dataclass, fields

from core.phases import PHASES
from core.safety import ConfigError


@dataclass
class PulseSettings:
    pulse_wave_speed: float = 2.0
    pulse_breath_speed: float = 1.5
    pulse_breath_intensity: float = 0.4
    pulse_spiral_speed: float = 3.0
    pulse_spiral_radius: float = 50.0
    pulse_aura_speed: float = 2.5
    pulse_aura_width: float = 0.15
    pulse_tracer_speed: float = 3.0
    pulse_tracer_count: int = 5

    @classmethod
    def from_object(cls, source) -> "PulseSettings":
        """Pick the pulse_* fields out of a dict or a settings dataclass."""
        values = {}
        for f in fields(cls):
            if isinstance(source, dict):
                if f.name in source:
                    values[f.name] = source[f.name]
            elif hasattr(source, f.name):
                values[f.name] = getattr(source, f.name)
        return cls(**values)


@dataclass(frozen=True)
class WavePulse:
    intensity: float
    position: float


@dataclass(frozen=True)
class BreathingPulse:
    scale: float
    glow_pulse: float


@dataclass(frozen=True)
class SpiralPoint:
    x: float
    y: float
    intensity: float


@dataclass(frozen=True)
class MultiLayerPulse:
    layers: dict
    combined: float


@dataclass(frozen=True)
class AuraWave:
    intensity: float
    wave_pos: float


@dataclass(frozen=True)
class Tracer:
    position: float
    brightness: float
    particle_id: int


@dataclass(frozen=True)
class HarmonicResonance:
    offset_x: float
    offset_y: float
    frequency: float
    amplitude: float


@dataclass(frozen=True)
class NodePulse:
    scale: float
    glow: float
    offset_x: float
    offset_y: float


PHASE_WEIGHTS = {
    "awakening": {"breathing": 0.5, "multi_layer": 0.2, "aura": 0.2, "harmonic": 0.1},
    "ascension": {"breathing": 0.3, "multi_layer": 0.4, "aura": 0.2, "harmonic": 0.1},
    "radiance": {"breathing": 0.2, "multi_layer": 0.3, "aura": 0.4, "harmonic": 0.1},
    "descent": {"breathing": 0.4, "multi_layer": 0.2, "aura": 0.2, "harmonic": 0.2},
}

WAVE_WIDTH = 3
SPIRAL_POINTS = 12


class EnergyPulseEngine:
    """Pulse calculator for one job.

    Raises:
        ConfigError: If a pulse parameter is not a finite number, a speed or
            size is negative, or the tracer count is below 1.
    """

    def __init__(self, settings=None):
        if settings is None:
            settings = PulseSettings()
        elif not isinstance(settings, PulseSettings):
            settings = PulseSettings.from_object(settings)
        self._validate(settings)
        self.settings = settings

    @staticmethod
    def _validate(settings: PulseSettings) -> None:
        for f in fields(settings):
            value = getattr(settings, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or not math.isfinite(value):
                raise ConfigError(f"{f.name} must be a finite number, got {value!r}")
            if value < 0:
                raise ConfigError(f"{f.name} must be >= 0, got {value}")
        if settings.pulse_aura_width <= 0:
            raise ConfigError("pulse_aura_width must be > 0")
        if int(settings.pulse_tracer_count) < 1:
            raise ConfigError("pulse_tracer_count must be at least 1")

    def wave_pulse(self, progress: float, path_order: int, total_paths: int) -> WavePulse:
        """Glow of a wave travelling through the paths in order (1-based)."""
        if total_paths <= 0:
            return WavePulse(0.0, 0.0)
        travel = (progress * self.settings.pulse_wave_speed) % 1.0
        path_position = (travel * total_paths) % total_paths
        current = math.floor(path_position)
        path_progress = path_position - current
        distance = abs(path_order - current - 1)
        if distance < WAVE_WIDTH:
            intensity = math.exp(-(distance ** 2) / 2.0) * math.sin(path_progress * math.pi)
            return WavePulse(max(0.0, intensity), path_progress)
        return WavePulse(0.0, 0.0)

    def breathing_pulse(self, progress: float, node_id: int) -> BreathingPulse:
        node_phase = (node_id * 0.1) % (2 * math.pi)
        cycle = math.sin(progress * self.settings.pulse_breath_speed * 2 * math.pi + node_phase)
        scale = 1.0 + cycle * self.settings.pulse_breath_intensity
        return BreathingPulse(scale, abs(cycle) * 0.5)

    def spiral_vortex(self, progress: float, x: float, y: float, node_id: int) -> list[SpiralPoint]:
        speed = self.settings.pulse_spiral_speed
        radius = self.settings.pulse_spiral_radius
        angle = progress * speed * 2 * math.pi + node_id * 0.5
        points = []
        for i in range(SPIRAL_POINTS):
            t = i / SPIRAL_POINTS + progress * speed
            a = angle + t * 4 * math.pi
            r = radius * (0.3 + t * 0.7)
            points.append(SpiralPoint(
                x + math.cos(a) * r,
                y + math.sin(a) * r,
                max(0.0, math.sin(t * math.pi) * 0.8),
            ))
        return points

    def multi_layer_pulse(self, progress: float, node_id: int) -> MultiLayerPulse:
        fast = math.sin(progress * 6.0 * math.pi + node_id * 0.3) * 0.3
        medium = math.sin(progress * 4.0 * math.pi + node_id * 0.4) * 0.4
        slow = math.sin(progress * 2.0 * math.pi + node_id * 0.5) * 0.3
        layers = {
            "fast": max(0.0, fast),
            "medium": max(0.0, medium),
            "slow": max(0.0, slow),
        }
        return MultiLayerPulse(layers, max(0.0, (fast + medium + slow) / 3.0))

    def aura_wave(self, progress: float, node_distance: float) -> AuraWave:
        """Ring expanding outward from the center; node_distance is normalized to ~1."""
        wave_pos = (progress * self.settings.pulse_aura_speed) % 2.0
        front = abs(wave_pos - node_distance)
        intensity = max(0.0, 1.0 - front / self.settings.pulse_aura_width) * 0.6
        return AuraWave(intensity, wave_pos)

    def path_tracers(self, progress: float) -> list[Tracer]:
        count = int(self.settings.pulse_tracer_count)
        tracers = []
        for i in range(count):
            position = (progress * self.settings.pulse_tracer_speed + i / count) % 1.0
            brightness = math.sin((progress * 4.0 + i * 0.5) * math.pi) * 0.5 + 0.5
            tracers.append(Tracer(position, brightness, i))
        return tracers

    def harmonic_resonance(self, progress: float, node_id: int) -> HarmonicResonance:
        frequency = ((node_id % 10) + 1) * 1.5
        vx = math.sin(progress * frequency * 2 * math.pi) * 3
        vy = math.cos(progress * frequency * 2 * math.pi + node_id * 0.5) * 3
        amplitude = math.sin(progress * math.pi) * 0.6 + 0.2
        return HarmonicResonance(vx * amplitude, vy * amplitude, frequency, amplitude)

    def combined_node_pulse(self, progress: float, node_id: int, node_distance: float,
                            weights: dict | None = None) -> NodePulse:
        """Weighted merge of breathing, multi-layer and aura pulses plus harmonic offset."""
        weights = weights or self.phase_weights("awakening")
        breathing = self.breathing_pulse(progress, node_id)
        multi = self.multi_layer_pulse(progress, node_id)
        aura = self.aura_wave(progress, node_distance)
        harmonic = self.harmonic_resonance(progress, node_id)

        wb = weights.get("breathing", 0.3)
        wm = weights.get("multi_layer", 0.3)
        wa = weights.get("aura", 0.2)
        scale = (1.0 + (breathing.scale - 1.0) * wb
                 + (multi.combined * 0.3) * wm
                 + (aura.intensity * 0.2) * wa)
        glow = breathing.glow_pulse * wb + multi.combined * wm + aura.intensity * wa
        return NodePulse(scale, glow, harmonic.offset_x, harmonic.offset_y)

    @staticmethod
    def phase_weights(phase: str) -> dict:
        """Per-phase emphasis. Unknown phases use awakening's weights."""
        return dict(PHASE_WEIGHTS.get(phase, PHASE_WEIGHTS[PHASES[0]]))
