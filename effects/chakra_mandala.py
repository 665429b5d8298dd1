"""
Mystic — Chakra Mandala

The seven-chakra system drawn as a layered mandala: energy explosions,
the central channel and its auras, mandala rings and their resonance
lines, energy flowing between chakras, the chakras themselves with glows
and breathing, frequency rings, vertical sine waves and orbiting beads.

Two entry points:
    generate(settings)  -- once per job; resolves every random choice
    chakra_mandala(frame, settings, frame_index, total_frames)  -- per frame
"""

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from core.animation import AnimationConfig
from core.canvas import Canvas
from core.engine import synthesize_frame
from core.oscillation import oscillate_progress, range_bounds
from core.phases import frame_progress
from core.selection import ColorPicker, make_rng, pick_once, resolve_color
from core.settings import settings_from_dict, settings_to_dict
from core.sine_waves import renderable_sine_waves, sine_wave_groups, sine_wave_path
from effects.chakra_geometry import CHAKRA_CONNECTIONS, CHAKRAS, chakra_by_name

logger = logging.getLogger(__name__)

MIN_RENDERING_SCALE = 0.1
MAX_RENDERING_SCALE = 3.0
MAX_BEADS = 24
OPACITY_FLOOR = 0.01

_PHASE_FOCUS_FIELDS = {
    "awakening": "awakening_chakra_focus",
    "ascension": "ascension_chakra_focus",
    "radiance": "radiance_chakra_focus",
    "descent": "descent_chakra_focus",
}

_ALGORITHMS = ["sinusoidal", "square", "sawtooth"]


def _candidates(*values):
    return field(default_factory=lambda: list(values))


def _range(lower, upper):
    return field(default_factory=lambda: {"lower": lower, "upper": upper})


@dataclass
class ChakraMandalaSettings:
    """Every knob of the chakra mandala.

    List-valued fields marked "candidates" are resolved to one value by
    generate(). Color fields accept "#hex", {"picker": bucket} or None
    (a random color from the default bucket).
    """
    animation: AnimationConfig = field(default_factory=AnimationConfig)

    # Placement
    scale: float = 1.0
    center_x: float = 0.5
    center_y: float = 0.5
    node_size: float = 20
    node_glow_size: float = 25
    path_thickness: float = 2
    rendering_scale: float = 1.0

    # Mandala rings
    enable_mandala_rings: bool = True
    mandala_ring_speed: float = 2.0
    mandala_ring_opacity: float = 0.6
    mandala_ring_thickness: float = 2
    mandala_ring_layers: int = 3
    mandala_resonance_patterns: bool = True
    mandala_symmetry: int = 6
    mandala_inner_radius: float = 0.1
    mandala_outer_radius: float = 0.4
    mandala_radius_multiplier: float = 1.0

    # Frequency visualization
    enable_frequency_visualization: bool = True
    frequency_oscillation_speed: float = 3.0
    frequency_detail_layers: int = 2

    # Glows and breathing
    enable_chakra_glows: bool = True
    chakra_glow_size: float = 35
    chakra_glow_intensity: float = 0.7
    chakra_breathe_intensity: float = 0.3
    chakra_aura_layers: int = 2

    # Explosions
    enable_chakra_explosions: bool = True
    explosion_ray_count: int = 12
    explosion_ray_length: float = 50
    explosion_ray_length_multiplier: float = 1.0
    explosion_ring_count: int = 4
    explosion_particle_count: int = 16
    explosion_even_particle_distribution: bool = True
    explosion_intensity: float = 0.8
    explosion_synchronize_with_breathing: bool = True
    explosion_color_scheme: object = _candidates("chakraColor", "rainbow", "white")
    explosion_enable_fuzz_layer: bool = True
    explosion_fuzz_color: object = None
    explosion_fuzz_opacity_multiplier: float = 0.4
    explosion_fuzz_layer_opacity: float = 0.6
    explosion_invert_fuzz_layers: bool = False
    explosion_particle_seed: int | None = None

    # Energy flow
    enable_energy_flow: bool = True
    energy_flow_speed: float = 2.0
    energy_flow_density: int = 5
    energy_flow_trail_length: int = 8
    energy_flow_spirals: bool = True
    energy_flow_spiral_density: int = 3

    # Central channel
    enable_central_channel: bool = True
    central_channel_glow: float = 1.2
    central_channel_auras: bool = True

    # Colors
    use_custom_chakra_colors: bool = False
    chakra_color_override: object = None
    chakra_glow_color_override: object = None

    # Layer
    layer_blend_mode: object = _candidates("screen", "overlay", "lighten", "color-dodge", "color-burn")
    layer_opacity: float = 1.0

    # Per-phase focus (candidates)
    awakening_chakra_focus: object = _candidates("muladhara", "svadhisthana", "manipura")
    ascension_chakra_focus: object = _candidates("anahata", "vishuddha", "ajna")
    radiance_chakra_focus: object = _candidates("sahasrara", "ajna", "anahata")
    descent_chakra_focus: object = _candidates("muladhara", "svadhisthana", "manipura")

    # Vertical sine waves
    enable_vertical_sine_waves: bool = True
    sine_wave_color: object = None
    sine_wave_fuzz_color: object = None
    sine_wave_thickness: float = 2.5
    sine_wave_amplitude: float = 15
    sine_wave_frequency: float = 2.5
    sine_wave_opacity_range: dict = _range(0.3, 1.0)
    sine_wave_opacity_times: float = 2
    sine_wave_opacity_algorithm: object = _candidates(*_ALGORITHMS)
    sine_wave_blur_range: dict = _range(2, 8)
    sine_wave_blur_times: float = 3
    sine_wave_blur_algorithm: object = _candidates(*_ALGORITHMS)
    sine_wave_accent_range: dict = _range(0.5, 2.5)
    sine_wave_accent_times: float = 3
    sine_wave_accent_algorithm: object = _candidates(*_ALGORITHMS)
    sine_wave_fuzz_layer_opacity: float = 0.6
    sine_wave_invert_layers: bool = False
    sine_wave_chakra_grouping: int = 3
    sine_wave_progression: str = "sequential"
    sine_wave_count: int | None = 10
    sine_wave_harmonic_ratios: list = field(default_factory=lambda: [1, 2, 1.5, 3, 2.5])
    enable_sine_wave_amplitude_oscillation: bool = True
    sine_wave_amplitude_oscillation_range: dict = _range(0.5, 2.0)
    sine_wave_amplitude_oscillation_times: float = 2
    sine_wave_amplitude_algorithm: object = _candidates(*_ALGORITHMS)

    # Energy beads
    enable_energy_beads: bool = True
    energy_bead_count: int = 8
    energy_bead_radius: float = 6
    energy_bead_color: object = None
    energy_bead_opacity: float = 0.8
    energy_bead_glow_intensity: float = 1.2
    energy_bead_speed: float = 1.0
    energy_bead_ring_layer: int = 1          # -1 = first three rings
    energy_bead_pulse_enabled: bool = True
    energy_bead_pulse_range: dict = _range(0.7, 1.3)
    energy_bead_pulse_times: float = 2

    def __post_init__(self):
        if isinstance(self.animation, dict):
            self.animation = AnimationConfig.from_dict(self.animation)
        try:
            value = float(self.rendering_scale if self.rendering_scale is not None else 1.0)
        except (TypeError, ValueError):
            value = 1.0
        self.rendering_scale = max(MIN_RENDERING_SCALE, min(MAX_RENDERING_SCALE, value))

    def scaled(self, name: str) -> float:
        """A pixel size multiplied by the rendering scale."""
        return float(getattr(self, name)) * self.rendering_scale

    def focus_for_phase(self, phase: str):
        return getattr(self, _PHASE_FOCUS_FIELDS.get(phase, "awakening_chakra_focus"))

    def to_dict(self) -> dict:
        return settings_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict | None) -> "ChakraMandalaSettings":
        return settings_from_dict(cls, d)


# ─── Generate step ───────────────────────────────────────────────────

def generate(settings: ChakraMandalaSettings, rng=None,
             picker: ColorPicker | None = None) -> ChakraMandalaSettings:
    """Resolve every random choice once and write it back into settings."""
    rng = make_rng(rng)
    if picker is None:
        picker = ColorPicker(seed=rng.randint(2 ** 31 - 1))

    settings.animation.resolve_choices(rng)
    settings.layer_blend_mode = pick_once(settings.layer_blend_mode, rng)
    settings.explosion_color_scheme = pick_once(settings.explosion_color_scheme, rng)
    for name in _PHASE_FOCUS_FIELDS.values():
        setattr(settings, name, pick_once(getattr(settings, name), rng))
    for name in ("sine_wave_opacity_algorithm", "sine_wave_blur_algorithm",
                 "sine_wave_accent_algorithm", "sine_wave_amplitude_algorithm"):
        setattr(settings, name, pick_once(getattr(settings, name), rng))

    settings.sine_wave_color = resolve_color(settings.sine_wave_color, picker, "#9b59b6")
    settings.sine_wave_fuzz_color = resolve_color(settings.sine_wave_fuzz_color, picker, "#c8a2e0")
    settings.explosion_fuzz_color = resolve_color(settings.explosion_fuzz_color, picker, "#ffffff")
    settings.energy_bead_color = resolve_color(settings.energy_bead_color, picker, "#ffff00")
    settings.chakra_color_override = resolve_color(settings.chakra_color_override, picker, "#ffffff")
    settings.chakra_glow_color_override = resolve_color(
        settings.chakra_glow_color_override, picker, "#ffffff")

    if settings.explosion_particle_seed is None:
        settings.explosion_particle_seed = int(rng.randint(2 ** 31 - 1))

    if settings.enable_vertical_sine_waves:
        try:
            groups = sine_wave_groups(CHAKRAS, settings.sine_wave_progression,
                                      settings.sine_wave_chakra_grouping)
            for group in groups:
                sine_wave_path(group.points, settings.sine_wave_amplitude,
                               settings.sine_wave_frequency, 1, 0)
        except (ValueError, TypeError) as e:
            logger.warning("Vertical sine waves disabled: %s", e)
            settings.enable_vertical_sine_waves = False
    return settings


# ─── Per-frame rendering ─────────────────────────────────────────────

def _chakra_xy(node, cx: float, cy: float, scale: float) -> tuple[float, float]:
    return cx + (node.x - 0.5) * scale * 2, cy + (node.y - 0.5) * scale * 2


def _ring_radii(settings: ChakraMandalaSettings, scale: float) -> list[float]:
    inner = scale * settings.mandala_inner_radius * settings.mandala_radius_multiplier
    outer = scale * settings.mandala_outer_radius * settings.mandala_radius_multiplier
    count = 3 + int(settings.mandala_ring_layers)
    if count <= 1:
        return [inner]
    return [inner + (outer - inner) * i / (count - 1) for i in range(count)]


def _chakra_colors(settings: ChakraMandalaSettings, node) -> tuple[str, str]:
    if settings.use_custom_chakra_colors:
        return (settings.chakra_color_override or node.color,
                settings.chakra_glow_color_override or node.glow_color)
    return node.color, node.glow_color


def _layered(draw, fuzz_enabled: bool, inverted: bool) -> None:
    """Draw the fuzz halo under the base layer, or over it when inverted."""
    if inverted:
        draw(False)
        if fuzz_enabled:
            draw(True)
    else:
        if fuzz_enabled:
            draw(True)
        draw(False)


def render_explosions(canvas, settings, ctx) -> None:
    if not settings.enable_chakra_explosions:
        return
    p, alpha, cx, cy, scale = ctx["progress"], ctx["alpha"], ctx["cx"], ctx["cy"], ctx["scale"]
    glow_size = settings.scaled("chakra_glow_size") * settings.scale
    ray_len = settings.scaled("explosion_ray_length")
    fuzz_mult = settings.explosion_fuzz_opacity_multiplier * settings.explosion_fuzz_layer_opacity
    fuzz_on = settings.explosion_enable_fuzz_layer
    inverted = settings.explosion_invert_fuzz_layers
    ring_count = max(1, int(settings.explosion_ring_count))
    ray_count = max(0, int(settings.explosion_ray_count))
    particle_count = max(0, int(settings.explosion_particle_count))

    random_particles = None
    if not settings.explosion_even_particle_distribution:
        seeded = np.random.RandomState(settings.explosion_particle_seed or 0)
        random_particles = seeded.random_sample((len(CHAKRAS), particle_count, 2))

    for chakra_idx, node in enumerate(CHAKRAS):
        x, y = _chakra_xy(node, cx, cy, scale)
        if settings.explosion_synchronize_with_breathing:
            pulse = math.sin(p * 2 * math.pi + node.y * math.pi * 4)
        else:
            pulse = math.sin(p * math.pi * 4)
        pulse = abs(pulse)
        magnitude = pulse * settings.explosion_intensity

        scheme = settings.explosion_color_scheme
        if scheme == "white":
            base_color = "#ffffff"
        elif scheme == "rainbow":
            base_color = f"hsl({node.y * 360}, 100%, 50%)"
        else:
            base_color = _chakra_colors(settings, node)[0]
        fuzz_color = (settings.explosion_fuzz_color or base_color) if fuzz_on else base_color

        def draw_rings(is_fuzz):
            for ring_idx in range(ring_count):
                ring_phase = ring_idx / ring_count
                ring_mag = math.sin(max(0.0, 1 - abs(ring_phase - pulse) * 2) * math.pi)
                ring_mag = math.sqrt(max(0.0, ring_mag))
                radius = glow_size * 0.5 * (1 + magnitude * ring_mag * 1.5)
                opacity = alpha * magnitude * ring_mag * 0.8 * (1 - ring_idx / ring_count)
                if is_fuzz:
                    opacity *= fuzz_mult
                    if opacity > OPACITY_FLOOR:
                        canvas.draw_ring((x, y), radius * 1.1, max(0.5, radius * 0.2),
                                         fuzz_color, opacity)
                elif opacity > OPACITY_FLOOR:
                    canvas.draw_ring((x, y), radius, max(0.5, radius * 0.15), base_color, opacity)

        def draw_rays(is_fuzz):
            start_r = glow_size * 0.3
            length = ray_len * settings.explosion_ray_length_multiplier * settings.scale * 0.2 * magnitude
            for ray_idx in range(ray_count):
                angle = (ray_idx / ray_count) * 2 * math.pi + p * 2.0 * 2 * math.pi
                start = (x + math.cos(angle) * start_r, y + math.sin(angle) * start_r)
                end = (x + math.cos(angle) * (start_r + length),
                       y + math.sin(angle) * (start_r + length))
                opacity = alpha * magnitude * 0.8
                if is_fuzz:
                    opacity *= fuzz_mult
                    if opacity > OPACITY_FLOOR:
                        canvas.draw_line(start, end, max(0.5, 4.5 * magnitude), fuzz_color, opacity)
                elif opacity > OPACITY_FLOOR:
                    canvas.draw_line(start, end, max(0.5, 3 * magnitude), base_color, opacity)

        particles = []
        if random_particles is None:
            if particle_count > 0:
                per_ring = math.ceil(math.sqrt(particle_count))
                rings = math.ceil(particle_count / per_ring)
                for ring_idx in range(rings):
                    ring_radius = ((ring_idx + 1) / rings) * ray_len * settings.scale * 0.2
                    in_ring = min(per_ring, particle_count - ring_idx * per_ring)
                    for p_idx in range(in_ring):
                        angle = (p_idx / in_ring) * 2 * math.pi + ring_idx * 0.5
                        distance = ring_radius * (0.8 + math.sin(p * 2 * math.pi + p_idx) * 0.2)
                        particles.append((angle, distance, 1.5 + magnitude * 1.5))
        else:
            for p_idx in range(particle_count):
                rand_dist, rand_radius = random_particles[chakra_idx, p_idx]
                seed = (node.y * 1000 + p_idx * 7 + p * 100) % 360
                angle = (seed * 2 * math.pi / 360 + p * math.pi) % (2 * math.pi)
                distance = (rand_dist + magnitude) * ray_len * settings.scale * 0.15
                particles.append((angle, distance, rand_radius * 3 + magnitude * 2))

        max_distance = ray_len * settings.scale * 0.2 + 50

        def draw_particles(is_fuzz):
            for angle, distance, radius in particles:
                px = x + math.cos(angle) * distance
                py = y + math.sin(angle) * distance
                opacity = alpha * magnitude * 0.7 * max(0.0, 1 - abs(distance) / max_distance)
                if is_fuzz:
                    opacity *= fuzz_mult
                    if opacity > OPACITY_FLOOR:
                        canvas.draw_ring((px, py), radius * 1.3, max(0.5, radius * 0.5),
                                         fuzz_color, opacity)
                elif opacity > OPACITY_FLOOR:
                    canvas.draw_ring((px, py), radius, max(0.5, radius * 0.4), base_color, opacity)

        _layered(draw_rings, fuzz_on, inverted)
        _layered(draw_rays, fuzz_on, inverted)
        _layered(draw_particles, fuzz_on, inverted)


def render_central_channel(canvas, settings, ctx) -> None:
    if not settings.enable_central_channel:
        return
    cx, cy, scale = ctx["cx"], ctx["cy"], ctx["scale"]
    start_y = _chakra_xy(CHAKRAS[0], cx, cy, scale)[1]
    end_y = _chakra_xy(CHAKRAS[-1], cx, cy, scale)[1]
    opacity = 0.3 * ctx["alpha"] * settings.central_channel_glow
    canvas.draw_line((cx, start_y), (cx, end_y), 3, "#FFFFFF", opacity)


def render_channel_auras(canvas, settings, ctx) -> None:
    if not (settings.enable_central_channel and settings.central_channel_auras):
        return
    cx, cy, scale, p = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"]
    start_y = _chakra_xy(CHAKRAS[0], cx, cy, scale)[1]
    end_y = _chakra_xy(CHAKRAS[-1], cx, cy, scale)[1]
    breathing = math.sin(p * 2 * math.pi) * 0.3 + 0.7
    for layer in range(1, 4):
        offset = 8 * layer * breathing
        opacity = ctx["alpha"] * (0.2 / layer) * settings.central_channel_glow
        canvas.draw_line((cx - offset, start_y), (cx - offset, end_y), 1, "#64C8FF", opacity)
        canvas.draw_line((cx + offset, start_y), (cx + offset, end_y), 1, "#64C8FF", opacity)


def render_mandala_rings(canvas, settings, ctx) -> None:
    if not settings.enable_mandala_rings:
        return
    cx, cy, scale, p = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"]
    rotation = (p * settings.mandala_ring_speed * 2 * math.pi) % (2 * math.pi)
    thickness = settings.scaled("mandala_ring_thickness")
    segments = int(settings.mandala_symmetry or 6)
    for node in CHAKRAS:
        x, y = _chakra_xy(node, cx, cy, scale)
        for ring_idx, radius in enumerate(_ring_radii(settings, scale)):
            opacity = settings.mandala_ring_opacity * (1 - ring_idx * 0.2) * ctx["alpha"]
            if opacity <= 0:
                continue
            canvas.draw_ring((x, y), radius, thickness, "#C8C8FF", opacity)
            for i in range(segments):
                angle = (i / segments) * 2 * math.pi + rotation
                outer = (x + math.cos(angle) * radius, y + math.sin(angle) * radius)
                inner = (x + math.cos(angle) * radius * 0.3, y + math.sin(angle) * radius * 0.3)
                canvas.draw_line(outer, inner, 1, "#C8C8FF", opacity)


def render_resonance(canvas, settings, ctx) -> None:
    if not (settings.enable_mandala_rings and settings.mandala_resonance_patterns):
        return
    cx, cy, scale, p = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"]
    for i, a in enumerate(CHAKRAS):
        for j in range(i + 1, len(CHAKRAS)):
            b = CHAKRAS[j]
            x1, y1 = _chakra_xy(a, cx, cy, scale)
            x2, y2 = _chakra_xy(b, cx, cy, scale)
            distance = math.hypot(x2 - x1, y2 - y1)
            strength = math.exp(-distance / (scale * 0.5)) if scale > 0 else 0.0
            pulse = math.sin(p * 3 * math.pi + i * j) * 0.5 + 0.5
            canvas.draw_line((x1, y1), (x2, y2), 1, "#96C8FF",
                             strength * pulse * 0.3 * ctx["alpha"])


def _connection_points(ctx):
    cx, cy, scale = ctx["cx"], ctx["cy"], ctx["scale"]
    for edge in CHAKRA_CONNECTIONS:
        a = chakra_by_name(edge.from_id)
        b = chakra_by_name(edge.to_id)
        yield _chakra_xy(a, cx, cy, scale), _chakra_xy(b, cx, cy, scale)


def render_flow_spirals(canvas, settings, ctx) -> None:
    if not (settings.enable_energy_flow and settings.energy_flow_spirals):
        return
    density = int(settings.energy_flow_spiral_density)
    if density <= 0:
        return
    p, intensity = ctx["progress"], ctx["intensity"]
    segments, radius = 12, 6
    for (x1, y1), (x2, y2) in _connection_points(ctx):
        dx, dy = x2 - x1, y2 - y1
        for spiral in range(density):
            phase = (p * 2 + spiral / density) * 2 * math.pi

            def point(t):
                return (x1 + dx * t + math.cos(phase + t * 4 * math.pi) * radius,
                        y1 + dy * t + math.sin(phase + t * 4 * math.pi) * radius)

            for seg in range(segments):
                t1 = seg / segments
                t2 = (seg + 1) / segments
                opacity = intensity * 0.3 * (1 - abs(t1 - 0.5) * 2)
                canvas.draw_line(point(t1), point(t2), 1, "#A0E0FF", opacity)


def render_energy_flow(canvas, settings, ctx) -> None:
    if not settings.enable_energy_flow:
        return
    density = int(settings.energy_flow_density)
    if density <= 0:
        return
    p, intensity = ctx["progress"], ctx["intensity"]
    radius = 4
    trails = int(min(3, settings.energy_flow_trail_length / 3)) if settings.energy_flow_trail_length > 0 else 0
    for (x1, y1), (x2, y2) in _connection_points(ctx):
        for i in range(density):
            pp = (p * settings.energy_flow_speed + i / density) % 1.0
            particle_alpha = math.sin(pp * math.pi) * intensity * 0.8
            canvas.draw_ring((x1 + (x2 - x1) * pp, y1 + (y2 - y1) * pp),
                             radius, radius, "#64C8FF", particle_alpha)
            for trail in range(1, trails + 1):
                tp = pp - trail * 0.1
                if tp < 0:
                    continue
                canvas.draw_ring((x1 + (x2 - x1) * tp, y1 + (y2 - y1) * tp),
                                 radius * 0.6, radius * 0.6, "#4096FF",
                                 particle_alpha * (1 - trail / 3) * 0.6)


def render_chakras(canvas, settings, ctx) -> None:
    cx, cy, scale, p, alpha = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"], ctx["alpha"]
    focus = settings.focus_for_phase(ctx["phase"])
    glow_size = settings.scaled("chakra_glow_size") * settings.scale
    layers = int(settings.chakra_aura_layers)
    for node in CHAKRAS:
        x, y = _chakra_xy(node, cx, cy, scale)
        multiplier = 1.0
        if settings.enable_frequency_visualization:
            freq = node.metadata["frequency"]
            multiplier = math.sin(p * settings.frequency_oscillation_speed * freq * 2 * math.pi) * 0.2 + 0.9
        radius = node.metadata["radius"] * settings.scale * 0.5 * multiplier
        color, glow_color = _chakra_colors(settings, node)

        extra = glow_size * 0.8 if node.id == focus else 0.0
        if settings.enable_chakra_glows and layers > 0:
            for layer in range(layers):
                size = glow_size * 0.5 + extra * (1 - layer / layers)
                opacity = settings.chakra_glow_intensity * alpha * (0.4 / (layer + 1))
                canvas.draw_ring((x, y), size, size * 0.2, "#FFFFFF", opacity)

        stroke = max(1.0, radius * 0.15)
        canvas.draw_ring((x, y), radius, stroke, color, alpha)
        canvas.draw_ring((x, y), radius + stroke, 2, glow_color, alpha)


def render_breathing(canvas, settings, ctx) -> None:
    if not settings.enable_chakra_glows or settings.chakra_breathe_intensity == 0:
        return
    cx, cy, scale, p = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"]
    glow_size = settings.scaled("chakra_glow_size") * settings.scale
    for node in CHAKRAS:
        x, y = _chakra_xy(node, cx, cy, scale)
        magnitude = math.sin(p * 2 * math.pi + node.y * math.pi * 4) * settings.chakra_breathe_intensity
        radius = glow_size * 0.6 * (1 + magnitude)
        canvas.draw_ring((x, y), radius, radius * 0.15, "#FFFFFF",
                         ctx["alpha"] * abs(magnitude) * 0.3)


def render_frequency(canvas, settings, ctx) -> None:
    if not settings.enable_frequency_visualization:
        return
    cx, cy, scale, p = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"]
    harmonics = 3 + int(settings.frequency_detail_layers)
    for node in CHAKRAS:
        x, y = _chakra_xy(node, cx, cy, scale)
        freq = node.metadata["frequency"]
        base = node.metadata["radius"] * settings.scale * 0.5
        for h in range(1, harmonics + 1):
            pulse = scale * 0.15 * math.sin(
                p * settings.frequency_oscillation_speed * freq * h * 2 * math.pi)
            opacity = ctx["alpha"] * (1 - h * 0.15) * 0.5
            if opacity <= 0:
                continue
            canvas.draw_ring((x, y), base + max(0.0, pulse), 1, "#6496FF", opacity)


def render_sine_waves(canvas, settings, ctx) -> None:
    if not settings.enable_vertical_sine_waves:
        return
    cx, cy, scale = ctx["cx"], ctx["cy"], ctx["scale"]
    waves = renderable_sine_waves(settings, CHAKRAS, ctx["total_frames"], ctx["frame_index"],
                                  amplitude=settings.scaled("sine_wave_amplitude"))
    thickness = settings.scaled("sine_wave_thickness")
    base_color = settings.sine_wave_color or "#9b59b6"
    fuzz_color = settings.sine_wave_fuzz_color or "#c8a2e0"

    for wave in waves:
        points = [(cx + (pt.x - 0.5) * scale * 2, cy + (pt.y - 0.5) * scale * 2)
                  for pt in wave.path]
        opacity = wave.opacity * ctx["alpha"]

        def draw(is_fuzz):
            if is_fuzz:
                halo = canvas.like()
                halo.draw_path(points, thickness + wave.accent * 1.5, fuzz_color,
                               opacity * settings.sine_wave_fuzz_layer_opacity)
                halo.blur(wave.blur)
                canvas.composite_layer(halo)
            else:
                canvas.draw_path(points, thickness, base_color, opacity)

        _layered(draw, True, settings.sine_wave_invert_layers)


def render_beads(canvas, settings, ctx) -> None:
    if not settings.enable_energy_beads:
        return
    cx, cy, scale, p = ctx["cx"], ctx["cy"], ctx["scale"], ctx["progress"]
    count = max(1, min(MAX_BEADS, int(settings.energy_bead_count)))
    bead_radius = settings.scaled("energy_bead_radius")
    color = settings.energy_bead_color or "#64C8FF"
    radii = _ring_radii(settings, scale)
    if settings.energy_bead_ring_layer == -1:
        rings = [r for r in (0, 1, 2) if r < len(radii)]
    else:
        rings = [min(max(0, int(settings.energy_bead_ring_layer)), len(radii) - 1)]

    radius = bead_radius
    if settings.energy_bead_pulse_enabled:
        lower, upper = range_bounds(settings.energy_bead_pulse_range)
        radius = bead_radius * oscillate_progress(lower, upper, settings.energy_bead_pulse_times, p)

    for node in CHAKRAS:
        x, y = _chakra_xy(node, cx, cy, scale)
        for ring_idx in rings:
            orbit = radii[ring_idx]
            for i in range(count):
                angle = (i / count) * 2 * math.pi + p * 2 * math.pi * settings.energy_bead_speed
                pos = (x + math.cos(angle) * orbit, y + math.sin(angle) * orbit)
                canvas.draw_ring(pos, radius * settings.energy_bead_glow_intensity * 1.5, 2,
                                 color, settings.energy_bead_opacity * 0.3)
                canvas.draw_filled_polygon(radius, pos, 24, 0.0, color, settings.energy_bead_opacity)


RENDER_ORDER = (
    render_explosions,
    render_central_channel,
    render_channel_auras,
    render_mandala_rings,
    render_resonance,
    render_flow_spirals,
    render_energy_flow,
    render_chakras,
    render_breathing,
    render_frequency,
    render_sine_waves,
    render_beads,
)


def chakra_mandala(frame: np.ndarray, settings=None, frame_index: int = 0,
                   total_frames: int = 1) -> np.ndarray:
    """Draw one frame of the chakra mandala over `frame`.

    Args:
        frame: (H, W, 3) uint8 RGB.
        settings: Generated ChakraMandalaSettings or its dict form.

    Returns:
        New (H, W, 3) uint8 frame.
    """
    if settings is None:
        settings = generate(ChakraMandalaSettings())
    elif isinstance(settings, dict):
        settings = ChakraMandalaSettings.from_dict(settings)

    height, width = frame.shape[:2]
    state = synthesize_frame(settings.animation, frame_index, total_frames)
    ctx = {
        "progress": frame_progress(frame_index, total_frames),
        "frame_index": frame_index,
        "total_frames": total_frames,
        "phase": state.phase,
        "alpha": state.get("node_alpha", 1.0),
        "intensity": state.get("path_intensity", 1.0),
        "cx": width * settings.center_x,
        "cy": height * settings.center_y,
        "scale": min(width, height) * settings.scale * 0.35,
    }

    canvas = Canvas(width, height)
    for step in RENDER_ORDER:
        step(canvas, settings, ctx)
    return canvas.composite_onto(frame, settings.layer_opacity, settings.layer_blend_mode)
