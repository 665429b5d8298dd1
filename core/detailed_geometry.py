"""
Mystic — Detailed Geometry Engine

Decoration layered over the Tree of Life's nodes and paths:

1. Node layers: crystalline hexagons, Fibonacci spirals, harmonic rings
   at golden-ratio radii, orbital elements and an inner mandala
2. Path ribbons: parallel offset lines with a wave and twist
3. Harmonic subdivisions at Fibonacci fractions of each path
4. Thickness variation following a golden-ratio resonance
5. Crosshatch marks across each path
6. Flowing shapes (diamond, triangle, hexagon) travelling along paths

Like the pulse engine, every method is a pure function of progress and
node/path identity. Rotations are in degrees.
"""

import math
from dataclasses import dataclass, fields

from core.safety import ConfigError

GOLDEN_RATIO = 1.618033988749895
GOLDEN_ANGLE = 2.39996  # radians
FIBONACCI = (1, 1, 2, 3, 5, 8, 13)

PHASE_INTENSITY = {
    "awakening": 0.3,
    "ascension": 0.7,
    "radiance": 1.0,
    "descent": 0.4,
}
DEFAULT_PHASE_INTENSITY = 0.5

# Center, crown and foundation carry the most decoration.
NODE_COMPLEXITY = {1: 0.9, 2: 0.7, 3: 0.7, 4: 0.6, 5: 0.6,
                   6: 1.0, 7: 0.6, 8: 0.6, 9: 0.8, 10: 0.85}
DEFAULT_NODE_COMPLEXITY = 0.5

RIBBON_LINES = 4
THICKNESS_POINTS = 8
FLOW_POINTS = 6
FLOW_SHAPES = (("diamond", 4), ("triangle", 3), ("hexagon", 6))
SPIRAL_POINTS = 12


@dataclass
class DetailSettings:
    node_layer_complexity: float = 0.8
    path_ribbon_effect: float = 0.6
    harmonic_subdivisions: float = 0.7
    crosshatch_intensity: float = 0.4

    @classmethod
    def from_object(cls, source) -> "DetailSettings":
        values = {}
        for f in fields(cls):
            if isinstance(source, dict):
                if f.name in source:
                    values[f.name] = source[f.name]
            elif hasattr(source, f.name):
                values[f.name] = getattr(source, f.name)
        return cls(**values)


@dataclass(frozen=True)
class NodeLayer:
    """One decoration ring around a node.

    radius is a multiple of the node size. count is the number of spirals,
    rings, orbitals or petals, depending on the kind.
    """
    kind: str
    radius: float
    rotation: float
    intensity: float
    color: str
    count: int = 0
    thickness: float = 0.0


@dataclass(frozen=True)
class Ribbon:
    wave_offset: float
    twist: float
    lines: int
    intensity: float


@dataclass(frozen=True)
class Subdivision:
    position: float
    thickness: float
    offset: float
    intensity: float


@dataclass(frozen=True)
class ThicknessPoint:
    position: float
    thickness: float
    intensity: float


@dataclass(frozen=True)
class Hatch:
    position: float
    angle: float
    length: float
    thickness: float
    intensity: float
    offset: float


@dataclass(frozen=True)
class FlowPoint:
    position: float
    wobble: float
    scale: float
    rotation: float
    intensity: float
    shape: str
    sides: int


@dataclass(frozen=True)
class PathEnhancements:
    ribbon: Ribbon
    subdivisions: list
    thickness: list
    crosshatch: list
    flow: list


class DetailedGeometryEngine:
    """Detail calculator for one job.

    Raises:
        ConfigError: If a detail amount is not a finite number or is negative.
    """

    def __init__(self, settings=None):
        if settings is None:
            settings = DetailSettings()
        elif not isinstance(settings, DetailSettings):
            settings = DetailSettings.from_object(settings)
        self._validate(settings)
        self.settings = settings

    @staticmethod
    def _validate(settings: DetailSettings) -> None:
        for f in fields(settings):
            value = getattr(settings, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or not math.isfinite(value):
                raise ConfigError(f"{f.name} must be a finite number, got {value!r}")
            if value < 0:
                raise ConfigError(f"{f.name} must be >= 0, got {value}")

    # ─── Nodes ───

    @staticmethod
    def phase_intensity(phase: str) -> float:
        return PHASE_INTENSITY.get(phase, DEFAULT_PHASE_INTENSITY)

    @staticmethod
    def node_complexity(node_id) -> float:
        return NODE_COMPLEXITY.get(node_id, DEFAULT_NODE_COMPLEXITY)

    def node_layers(self, node_id: int, progress: float, phase: str) -> list[NodeLayer]:
        """The five decoration layers of a node, outermost first."""
        ph = self.phase_intensity(phase)
        turn = progress * 360
        return [
            NodeLayer("crystalline", 1.4, (turn * 0.5 + node_id * 30) % 360, ph * 0.3, "glow"),
            NodeLayer("fibonacci", 1.2, (turn * 0.3 + node_id * 45) % 360, ph * 0.25, "accent",
                      count=3, thickness=0.3),
            NodeLayer("harmonic_rings", 0.9, 0.0, ph * 0.2, "glow", count=4),
            NodeLayer("orbital", 1.6, turn * (0.4 + node_id * 0.05), ph * 0.15, "accent",
                      count=node_id % 3 + 3),
            NodeLayer("mandala", 0.6, (turn * 0.25 + node_id * 60) % 360, ph * 0.35, "glow",
                      count=node_id % 7 + 4),
        ]

    @staticmethod
    def fibonacci_spiral(cx: float, cy: float, max_radius: float, progress: float,
                         rotation: float, offset: float) -> list[tuple[float, float]]:
        """Points of one golden-angle spiral arm growing out from (cx, cy)."""
        points = []
        for i in range(SPIRAL_POINTS):
            angle = i * GOLDEN_ANGLE + math.radians(rotation) + offset + progress * 2 * math.pi
            radius = i / SPIRAL_POINTS * max_radius
            points.append((cx + math.cos(angle) * radius, cy + math.sin(angle) * radius))
        return points

    # ─── Paths ───

    def path_enhancements(self, path_index: int, start, end, progress: float) -> PathEnhancements:
        """Everything decorating one path between two canvas points."""
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        return PathEnhancements(
            ribbon=self.ribbon(path_index, progress),
            subdivisions=self.harmonic_subdivisions(),
            thickness=self.thickness_variation(progress),
            crosshatch=self.crosshatch(path_index, math.hypot(dx, dy), math.atan2(dy, dx), progress),
            flow=self.flow(path_index, progress),
        )

    @staticmethod
    def ribbon(path_index: int, progress: float) -> Ribbon:
        return Ribbon(
            wave_offset=math.sin(progress * 2 * math.pi + path_index * 0.5) * 0.3,
            twist=math.cos(progress * math.pi + path_index * 0.3) * 0.25,
            lines=RIBBON_LINES,
            intensity=0.4,
        )

    @staticmethod
    def harmonic_subdivisions() -> list[Subdivision]:
        top = FIBONACCI[-1]
        return [
            Subdivision(
                position=FIBONACCI[i] / top,
                thickness=0.5 - i * 0.1,
                offset=math.sin(i * math.pi / 3) * 2,
                intensity=0.3 * (1 - i / len(FIBONACCI)),
            )
            for i in range(1, len(FIBONACCI) - 1)
        ]

    @staticmethod
    def thickness_variation(progress: float) -> list[ThicknessPoint]:
        points = []
        for i in range(THICKNESS_POINTS):
            position = i / THICKNESS_POINTS
            harmonic = math.sin(position * 3 * math.pi + progress * 2 * math.pi) * 0.5 + 0.5
            resonance = math.sin(GOLDEN_RATIO * position * 2 * math.pi) * 0.3 + 0.3
            points.append(ThicknessPoint(position, harmonic * resonance, 0.5))
        return points

    @staticmethod
    def crosshatch(path_index: int, length: float, angle: float, progress: float) -> list[Hatch]:
        count = 5 + path_index % 3
        spacing = 1.0 / (count + 1)
        hatches = []
        for i in range(1, count + 1):
            phase = (progress * 2 + i * 0.3) % 1
            hatches.append(Hatch(
                position=spacing * i,
                angle=angle + math.pi / 2 + math.sin(progress * math.pi + i) * 0.3,
                length=length * 0.15,
                thickness=0.3,
                intensity=math.sin(phase * math.pi) * 0.2,
                offset=math.cos(progress * 2 * math.pi + i * 0.5) * 2,
            ))
        return hatches

    @staticmethod
    def flow(path_index: int, progress: float) -> list[FlowPoint]:
        speed = 1.5 + (path_index % 3) * 0.3
        points = []
        for i in range(FLOW_POINTS):
            position = (i / FLOW_POINTS + progress * speed) % 1
            scale = math.sin(position * math.pi) * 0.5 + 0.5
            shape, sides = FLOW_SHAPES[i % len(FLOW_SHAPES)]
            points.append(FlowPoint(
                position=position,
                wobble=math.sin(position * 4 * math.pi) * 0.1,
                scale=scale,
                rotation=progress * 720 + i * 60,
                intensity=scale * 0.6,
                shape=shape,
                sides=sides,
            ))
        return points
