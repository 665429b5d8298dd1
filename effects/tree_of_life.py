"""
Mystic — Animated Tree of Life

The ten sephiroth and 22 paths animated through the four phases.
Layers, back to front:
  1. Atmospheric fuzz particles
  2. Detailed path enhancements (ribbons, harmonic subdivisions,
     thickness variation, crosshatch, flowing shapes)
  3. Paths in animation order, with wave pulses and tracers
  4. Parallel subdivision lines and harmonic interference ripples
  5. Nodes in phase activation order (pulse glow, spiral vortex,
     kether glow, inner highlight, detailed node layers) with their
     mystic symbols
  6. Secondary glow bloom
"""

import logging
import math
from dataclasses import dataclass, field, replace

import numpy as np

from core.animation import AnimationConfig, ScalarRange
from core.canvas import Canvas
from core.detailed_geometry import GOLDEN_RATIO, DetailedGeometryEngine
from core.engine import synthesize_frame
from core.phases import PHASES
from core.pulses import EnergyPulseEngine, PulseSettings
from core.safety import ConfigError
from core.selection import ColorPicker, make_rng, pick_once, resolve_color
from core.settings import settings_from_dict, settings_to_dict
from effects.geometry import render_nodes as draw_geometry_nodes, \
    render_paths as draw_geometry_paths, transform_coordinate
from effects.sephiroth_geometry import PATHS, SEPHIROTH, SephirothGeometry, \
    node_activation_order, path_animation_order, sephirah_by_id
from effects.symbols import SymbolSet, phase_animation

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_COLOR = "#A0522D"
DEFAULT_ACCENT_COLOR = "#FFD700"
DEFAULT_GLOW_COLOR = "#FFFF00"
KETHER_ID = 1
SUBDIVISIONS_PER_PATH = 2
MAX_FUZZ_PARTICLES = 50
TREE_GEOMETRY = SephirothGeometry()


def tree_animation() -> AnimationConfig:
    """Base phase animation plus the radiance kether glow."""
    config = AnimationConfig()
    config.phases["radiance"].scalars["kether_glow"] = ScalarRange(2.0, 2.0)
    return config


@dataclass
class TreeOfLifeSettings:
    animation: AnimationConfig = field(default_factory=tree_animation)

    # Paths
    path_thickness: float = 2
    path_size_scale: float = 1.0

    # Colors: "#hex", {"picker": bucket} or None
    branch_color: object = None
    accent_color: object = None
    glow_color: object = None

    # Nodes
    node_size: float = 20
    node_glow_size: float = 25
    energy_flow: bool = True

    # Energy pulses (integer speeds keep the loop seamless)
    enable_energy_pulses: bool = True
    pulse_wave_speed: float = 2.0
    pulse_breath_speed: float = 2.0
    pulse_breath_intensity: float = 0.4
    pulse_spiral_speed: float = 3.0
    pulse_spiral_radius: float = 50
    pulse_aura_speed: float = 2.0
    pulse_aura_width: float = 0.15
    pulse_tracer_speed: float = 3.0
    pulse_tracer_count: int = 5
    energy_pulse_size_scale: float = 1.0

    # Mystic symbols
    enable_mystic_symbols: bool = True
    symbol_glow_size: float = 8
    symbol_show_on_phases: list = field(default_factory=lambda: list(PHASES))
    mystic_symbol_size_scale: float = 1.0

    # Detail and fuzz (0-1)
    fuzz_density: float = 0.15
    subdivision_intensity: float = 0.3
    interference_amount: float = 0.2
    glow_layer_intensity: float = 0.15

    # Detailed geometry (amounts 0-1)
    enable_detailed_geometry: bool = True
    node_layer_complexity: float = 0.8
    path_ribbon_effect: float = 0.6
    harmonic_subdivisions: float = 0.7
    crosshatch_intensity: float = 0.4
    node_crystalline_effect: bool = True
    node_fibonacci_spiral: bool = True
    node_harmonic_rings: bool = True
    node_orbital_elements: bool = True
    node_mandala_pattern: bool = True

    # Transform
    scale: float = 1.0
    center_x: float = 0.5
    center_y: float = 0.5

    # Layer
    layer_opacity: float = 1.0
    layer_blend_mode: object = field(
        default_factory=lambda: ["screen", "overlay", "lighten", "color-dodge", "color-burn"])

    def __post_init__(self):
        if isinstance(self.animation, dict):
            self.animation = AnimationConfig.from_dict(self.animation)

    def to_dict(self) -> dict:
        return settings_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict | None) -> "TreeOfLifeSettings":
        return settings_from_dict(cls, d)


# ─── Subsystems ──────────────────────────────────────────────────────

def build_subsystems(settings: TreeOfLifeSettings):
    """Construct the pulse engine, symbol set and detail engine for the
    enabled features.

    A subsystem that cannot be built is switched off on the settings (with
    a warning) and returned as None.

    Returns:
        (EnergyPulseEngine | None, SymbolSet | None, DetailedGeometryEngine | None)
    """
    pulses = None
    if settings.enable_energy_pulses:
        try:
            pulse_settings = PulseSettings.from_object(settings)
            size = settings.energy_pulse_size_scale
            pulses = EnergyPulseEngine(replace(
                pulse_settings,
                pulse_spiral_radius=pulse_settings.pulse_spiral_radius * size,
                pulse_aura_width=pulse_settings.pulse_aura_width * size,
            ))
        except (ConfigError, TypeError) as e:
            logger.warning("Energy pulses disabled: %s", e)
            settings.enable_energy_pulses = False

    symbols = None
    if settings.enable_mystic_symbols:
        try:
            symbols = SymbolSet()
        except ValueError as e:
            logger.warning("Mystic symbols disabled: %s", e)
            settings.enable_mystic_symbols = False

    detail = None
    if settings.enable_detailed_geometry:
        try:
            detail = DetailedGeometryEngine(settings)
        except (ConfigError, TypeError) as e:
            logger.warning("Detailed geometry disabled: %s", e)
            settings.enable_detailed_geometry = False
    return pulses, symbols, detail


# ─── Generate step ───────────────────────────────────────────────────

def generate(settings: TreeOfLifeSettings, rng=None,
             picker: ColorPicker | None = None) -> TreeOfLifeSettings:
    """Resolve easings, blend mode and colors once, and check the subsystems."""
    rng = make_rng(rng)
    if picker is None:
        picker = ColorPicker(seed=rng.randint(2 ** 31 - 1))
    settings.animation.resolve_choices(rng)
    settings.layer_blend_mode = pick_once(settings.layer_blend_mode, rng)
    settings.branch_color = resolve_color(settings.branch_color, picker, DEFAULT_BRANCH_COLOR)
    settings.accent_color = resolve_color(settings.accent_color, picker, DEFAULT_ACCENT_COLOR)
    settings.glow_color = resolve_color(settings.glow_color, picker, DEFAULT_GLOW_COLOR)
    build_subsystems(settings)
    return settings


# ─── Per-frame rendering ─────────────────────────────────────────────

def _position(settings, node, width, height):
    return transform_coordinate(node.x, node.y, width, height,
                                settings.scale, settings.center_x, settings.center_y)


def _hash01(value: float) -> float:
    h = math.sin(value) * 43758.5453
    return h - math.floor(h)


def render_fuzz(canvas, settings, ctx) -> None:
    count = min(MAX_FUZZ_PARTICLES, int(max(0.0, settings.fuzz_density) * MAX_FUZZ_PARTICLES))
    if settings.fuzz_density > 0:
        count = max(1, count)
    p = ctx["progress"]
    for i in range(count):
        seed = i + math.floor(p * 100) * 7
        x = _hash01(seed * 12.9898) * canvas.width
        y = _hash01(seed * 78.233) * canvas.height
        brightness = math.sin(((p * 5 + i * 0.2) % 1) * math.pi) * ctx["intensity"] * 0.3
        if brightness > 0.01:
            canvas.draw_filled_polygon(1.5, (x, y), 4, 0.0, ctx["glow"], brightness)


def _along(start, end, t: float) -> tuple[float, float]:
    return start[0] + (end[0] - start[0]) * t, start[1] + (end[1] - start[1]) * t


def render_path_details(canvas, settings, ctx, detail) -> None:
    """Ribbons, harmonic rings, thickness variation, crosshatch and flowing
    shapes under every path."""
    p = ctx["progress"]
    thickness = settings.path_thickness or 2
    ribbon_amount = settings.path_ribbon_effect
    for path_index, path in enumerate(PATHS):
        a = sephirah_by_id(path.from_id)
        b = sephirah_by_id(path.to_id)
        if a is None or b is None:
            continue
        start = _position(settings, a, canvas.width, canvas.height)
        end = _position(settings, b, canvas.width, canvas.height)
        extras = detail.path_enhancements(path_index, start, end, p)
        angle = math.atan2(end[1] - start[1], end[0] - start[0])
        perp_x, perp_y = math.cos(angle + math.pi / 2), math.sin(angle + math.pi / 2)

        if ribbon_amount > 0.01:
            lines = extras.ribbon.lines
            for i in range(lines):
                offset = (i - lines / 2) / lines * 3
                shift = (perp_x * offset, perp_y * offset)
                canvas.draw_line((start[0] + shift[0], start[1] + shift[1]),
                                 (end[0] + shift[0], end[1] + shift[1]),
                                 thickness * 0.5, ctx["accent"],
                                 ribbon_amount * (1 - abs(offset) / 3) * 0.3)

        if settings.harmonic_subdivisions > 0.01:
            for sub in extras.subdivisions:
                canvas.draw_ring(_along(start, end, sub.position), sub.thickness * 3, 0.5,
                                 ctx["glow"], sub.intensity * settings.harmonic_subdivisions * 0.3)

        if ribbon_amount > 0.01:
            for v1, v2 in zip(extras.thickness, extras.thickness[1:]):
                canvas.draw_line(_along(start, end, v1.position), _along(start, end, v2.position),
                                 thickness + v1.thickness * 2, ctx["branch"],
                                 v1.intensity * ribbon_amount * 0.4)

        if settings.crosshatch_intensity > 0.01:
            for hatch in extras.crosshatch:
                bx, by = _along(start, end, hatch.position)
                hx = math.cos(hatch.angle) * hatch.length / 2
                hy = math.sin(hatch.angle) * hatch.length / 2
                canvas.draw_line((bx + hx + hatch.offset, by + hy + hatch.offset),
                                 (bx - hx + hatch.offset, by - hy + hatch.offset),
                                 hatch.thickness, ctx["accent"],
                                 hatch.intensity * settings.crosshatch_intensity * 0.3)

        for point in extras.flow:
            canvas.draw_filled_polygon(point.scale * 5, _along(start, end, point.position),
                                       point.sides, math.radians(point.rotation),
                                       ctx["glow"], point.intensity * 0.3)


def render_paths(canvas, settings, ctx, pulses) -> None:
    size = settings.energy_pulse_size_scale
    tracers = pulses.path_tracers(ctx["progress"]) if pulses else []

    def decorate(canvas, path, start, end, thickness):
        if pulses is None:
            return
        wave = pulses.wave_pulse(ctx["progress"], path.metadata["order"], len(PATHS))
        if wave.intensity > 0.01:
            canvas.draw_filled_polygon(thickness * 3 * size, _along(start, end, wave.position),
                                       12, 0.0, ctx["glow"], wave.intensity * 0.8)
        for tracer in tracers:
            canvas.draw_filled_polygon(thickness * 2.5 * size, _along(start, end, tracer.position),
                                       8, 0.0, ctx["accent"], tracer.brightness * 0.7)

    draw_geometry_paths(canvas, TREE_GEOMETRY, ctx["state"], settings, color=ctx["branch"],
                        edges=path_animation_order(), decorate=decorate)


def render_subdivisions(canvas, settings, ctx) -> None:
    p = ctx["progress"]
    for path_index, path in enumerate(PATHS):
        a = sephirah_by_id(path.from_id)
        b = sephirah_by_id(path.to_id)
        x1, y1 = _position(settings, a, canvas.width, canvas.height)
        x2, y2 = _position(settings, b, canvas.width, canvas.height)
        for sub in range(1, SUBDIVISIONS_PER_PATH + 1):
            offset = sub / (SUBDIVISIONS_PER_PATH + 1) * 2
            px = -(y2 - y1) * offset / 20
            py = (x2 - x1) * offset / 20
            phase = (p * 3 + path_index * 0.3 + sub * 0.15) % 1
            intensity = math.sin(phase * math.pi) * settings.subdivision_intensity * ctx["intensity"]
            if intensity > 0.01:
                canvas.draw_line((x1 + px, y1 + py), (x2 + px, y2 + py), 0.5,
                                 ctx["accent"], intensity)


def render_interference(canvas, settings, ctx) -> None:
    p = ctx["progress"]
    samples = max(5, int(settings.interference_amount * 20))
    for i in range(samples):
        node = SEPHIROTH[i % len(SEPHIROTH)]
        pos = _position(settings, node, canvas.width, canvas.height)
        for ripple in range(1, 4):
            phase = (p * (2 + ripple) + i * 0.1) % 1
            radius = ripple * 8 + phase * 15
            intensity = math.sin(phase * math.pi) * ctx["intensity"] * 0.25 * (1 - ripple / 4)
            if intensity > 0.01:
                canvas.draw_ring(pos, radius, 0.8, ctx["glow"], intensity)


def render_node_details(canvas, settings, ctx, detail, node, pos) -> None:
    """The crystalline, spiral, ring, orbital and mandala layers of one node."""
    x, y = pos
    p = ctx["progress"]
    node_size = settings.node_size or 20
    complexity = detail.node_complexity(node.id) * settings.node_layer_complexity
    enabled = {
        "crystalline": settings.node_crystalline_effect,
        "fibonacci": settings.node_fibonacci_spiral,
        "harmonic_rings": settings.node_harmonic_rings,
        "orbital": settings.node_orbital_elements,
        "mandala": settings.node_mandala_pattern,
    }
    for layer in detail.node_layers(node.id, p, ctx["phase"]):
        if layer.intensity < 0.01 or not enabled[layer.kind]:
            continue
        color = ctx["glow"] if layer.color == "glow" else ctx["accent"]
        radius = node_size * layer.radius * complexity
        turn = math.radians(layer.rotation)

        if layer.kind == "crystalline":
            for i in range(6):
                angle = i / 6 * 2 * math.pi + turn
                canvas.draw_filled_polygon(2, (x + math.cos(angle) * radius, y + math.sin(angle) * radius),
                                           6, angle, color, layer.intensity * 0.5)
        elif layer.kind == "fibonacci":
            for i in range(layer.count):
                arm = detail.fibonacci_spiral(x, y, radius, p, layer.rotation,
                                              i / layer.count * 2 * math.pi)
                canvas.draw_path(arm, layer.thickness, color, layer.intensity * 0.4)
        elif layer.kind == "harmonic_rings":
            for i in range(1, layer.count + 1):
                canvas.draw_ring((x, y), radius * (i / GOLDEN_RATIO), 0.5, color,
                                 layer.intensity * (1 - i / (layer.count + 1)))
        elif layer.kind == "orbital":
            for i in range(layer.count):
                angle = i / layer.count * 2 * math.pi + turn
                canvas.draw_filled_polygon(node_size * 0.3,
                                           (x + math.cos(angle) * radius, y + math.sin(angle) * radius),
                                           8, angle, color, layer.intensity * 0.5)
        elif layer.kind == "mandala":
            size = node_size * 0.4
            for i in range(layer.count):
                angle = i / layer.count * 2 * math.pi + turn
                canvas.draw_filled_polygon(size * 0.3,
                                           (x + math.cos(angle) * size * 0.6, y + math.sin(angle) * size * 0.6),
                                           5, angle, color, layer.intensity * 0.5)


def render_nodes(canvas, settings, ctx, pulses, symbols, detail=None) -> None:
    p = ctx["progress"]
    phase = ctx["phase"]
    alpha = ctx["alpha"]
    intensity = ctx["intensity"]
    node_size = settings.node_size or 20
    glow_size = settings.node_glow_size or 25
    cx = settings.center_x * canvas.width
    cy = settings.center_y * canvas.height
    reach = math.hypot(cx, cy) or 1.0
    weights = EnergyPulseEngine.phase_weights(phase)
    show_symbols = symbols is not None and phase in (settings.symbol_show_on_phases or [])

    def draw_node(canvas, node, base):
        x, y = base
        is_kether = node.id == KETHER_ID
        if pulses is not None:
            pulse = pulses.combined_node_pulse(p, node.id, math.hypot(x - cx, y - cy) / reach, weights)
            pos = (x + pulse.offset_x, y + pulse.offset_y)
            canvas.draw_ring(pos, glow_size + pulse.glow * 15, 3, ctx["glow"], pulse.glow * 0.6)
            for point in pulses.spiral_vortex(p, x, y, node.id):
                if point.intensity > 0.01:
                    canvas.draw_filled_polygon(3, (point.x, point.y), 6, 0.0,
                                               ctx["accent"], point.intensity * 0.5)
            if is_kether:
                glow = intensity * ctx["kether_glow"] + pulse.glow * 0.3
            else:
                glow = intensity * 0.6 + pulse.glow * 0.2
            radius = node_size * pulse.scale
            highlight = alpha * (0.6 + pulse.glow * 0.4)
        else:
            pos = base
            glow = intensity * ctx["kether_glow"] if is_kether else intensity * 0.6
            radius = node_size
            highlight = alpha * 0.6

        canvas.draw_ring(pos, glow_size, 3, ctx["glow"], glow * 0.5)
        canvas.draw_filled_polygon(radius, pos, 32, 0.0, node.color, alpha)
        if settings.energy_flow:
            canvas.draw_filled_polygon(radius * 0.5, pos, 32, 0.0, ctx["glow"], highlight)

        if detail is not None:
            render_node_details(canvas, settings, ctx, detail, node, base)

        if show_symbols:
            symbols.draw(canvas, node, base,
                         node_size * settings.mystic_symbol_size_scale,
                         phase_animation(phase, ctx["phase_progress"], node.id),
                         settings.symbol_glow_size * settings.mystic_symbol_size_scale)

    draw_geometry_nodes(canvas, TREE_GEOMETRY, ctx["state"], settings,
                        nodes=node_activation_order(phase), draw_node=draw_node)


def render_secondary_glow(canvas, settings, ctx) -> None:
    p = ctx["progress"]
    for node in SEPHIROTH:
        pos = _position(settings, node, canvas.width, canvas.height)
        phase = (p * 2 + node.id * 0.15) % 1
        glow = math.sin(phase * math.pi) * settings.glow_layer_intensity * ctx["intensity"] * ctx["alpha"]
        if glow > 0.01:
            canvas.draw_ring(pos, 40 + math.sin(phase * math.pi * 2) * 10, 4, ctx["glow"], glow * 0.4)


def tree_of_life(frame: np.ndarray, settings=None, frame_index: int = 0,
                 total_frames: int = 1) -> np.ndarray:
    """Draw one frame of the animated Tree of Life over `frame`.

    Args:
        frame: (H, W, 3) uint8 RGB.
        settings: Generated TreeOfLifeSettings or its dict form.

    Returns:
        New (H, W, 3) uint8 frame.
    """
    if settings is None:
        settings = generate(TreeOfLifeSettings())
    elif isinstance(settings, dict):
        settings = TreeOfLifeSettings.from_dict(settings)

    height, width = frame.shape[:2]
    state = synthesize_frame(settings.animation, frame_index, total_frames)
    ctx = {
        "state": state,
        "progress": state.progress,
        "phase": state.phase,
        "phase_progress": state.phase_progress,
        "alpha": state.get("node_alpha", 1.0),
        "intensity": state.get("path_intensity", 1.0),
        "kether_glow": state.get("kether_glow", 1.0),
        "branch": settings.branch_color or DEFAULT_BRANCH_COLOR,
        "accent": settings.accent_color or DEFAULT_ACCENT_COLOR,
        "glow": settings.glow_color or DEFAULT_GLOW_COLOR,
    }
    pulses, symbols, detail = build_subsystems(settings)

    canvas = Canvas(width, height)
    render_fuzz(canvas, settings, ctx)
    if detail is not None:
        render_path_details(canvas, settings, ctx, detail)
    render_paths(canvas, settings, ctx, pulses)
    render_subdivisions(canvas, settings, ctx)
    render_interference(canvas, settings, ctx)
    render_nodes(canvas, settings, ctx, pulses, symbols, detail)
    render_secondary_glow(canvas, settings, ctx)
    return canvas.composite_onto(frame, settings.layer_opacity, settings.layer_blend_mode)
