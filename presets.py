"""
Mystic -- Built-in Presets
Tuned settings for each effect, applied as overrides on its defaults.

Each preset is a recipe: an effect name plus the settings that differ from
that effect's defaults. The generate step still resolves any random choice
the preset leaves open (colors given as picker buckets, candidate lists).

Categories:
    Default     -- The effect exactly as shipped
    Atmospheric -- Soft, dreamy, slow
    Refined     -- Minimal layers, geometry first
    Cinematic   -- Maximum detail and drama
    Timing      -- Phase boundaries reshaped for slow or fast cycles
    Pattern     -- Subdivision, interference and crosshatch forward
    Maximal     -- Every layer at full strength
    Meditation  -- Chakra journeys, each focused on one center or theme
    Diagnostic  -- Every feature on at high visibility, for debugging
"""


def _phase(easing, node_alpha, path_intensity, path_anim_speed, **extra):
    scalars = {
        "node_alpha": {"start": node_alpha[0], "end": node_alpha[1]},
        "path_intensity": {"start": path_intensity[0], "end": path_intensity[1]},
        "path_anim_speed": path_anim_speed,
    }
    scalars.update(extra)
    return {"easing": easing, "scalars": scalars}


def _animation(ascension, radiance, descent, phases, width=0.05):
    return {
        "phase_boundaries": {
            "awakening_start": 0.0,
            "ascension_start": ascension,
            "radiance_start": radiance,
            "descent_start": descent,
        },
        "transition_zone_width": width,
        "phases": phases,
    }


def _node_alpha(awakening, ascension, radiance, descent):
    """Phases that only set the node alpha range (start, end) of each phase."""
    ranges = {"awakening": awakening, "ascension": ascension,
              "radiance": radiance, "descent": descent}
    return {
        phase: {"scalars": {"node_alpha": {"start": a, "end": b}}}
        for phase, (a, b) in ranges.items()
    }


BUILT_IN_PRESETS = [
    # =========================================================================
    # DEFAULTS
    # =========================================================================
    {
        "name": "Tree of Life",
        "effect": "treeoflife",
        "description": "The animated Tree of Life with every default: random easings per phase, "
                       "random blend mode and colors from the default bucket.",
        "category": "Default",
        "settings": {},
        "tags": ["default", "kabbalah", "sephiroth"],
    },
    {
        "name": "Chakra Mandala",
        "effect": "chakramandala",
        "description": "The seven-chakra mandala with every default.",
        "category": "Default",
        "settings": {},
        "tags": ["default", "chakra", "mandala"],
    },

    # =========================================================================
    # TREE OF LIFE
    # =========================================================================
    {
        "name": "Ethereal",
        "effect": "treeoflife",
        "description": "Soft atmospheric dreamscape. Lavender paths, opal accents and pearl glow "
                       "with extended timing for a meditative flow through the phases.",
        "category": "Atmospheric",
        "settings": {
            "animation": _animation(0.25, 0.65, 0.88, {
                "awakening": _phase("easeInCubic", (0.1, 0.45), (0.0, 0.3), 0.5),
                "ascension": _phase("easeOutCubic", (0.45, 0.95), (0.3, 1.0), 1.2),
                "radiance": _phase("smoothstep", (0.95, 1.0), (1.0, 0.95), 1.0, kether_glow=2.2),
                "descent": _phase("easeOutQuart", (1.0, 0.1), (0.95, 0.0), 0.8),
            }),
            "branch_color": "#DDA0DD",
            "accent_color": "#F0E68C",
            "glow_color": "#E6E6FA",
            "pulse_wave_speed": 1.0,
            "pulse_breath_speed": 1.0,
            "pulse_breath_intensity": 0.3,
            "pulse_spiral_speed": 2.0,
            "pulse_spiral_radius": 40,
            "pulse_aura_speed": 1.5,
            "pulse_aura_width": 0.2,
            "pulse_tracer_speed": 2.0,
            "pulse_tracer_count": 4,
            "energy_pulse_size_scale": 0.9,
            "symbol_glow_size": 10,
            "fuzz_density": 0.35,
            "subdivision_intensity": 0.25,
            "interference_amount": 0.15,
            "glow_layer_intensity": 0.35,
            "node_layer_complexity": 0.6,
            "path_ribbon_effect": 0.4,
            "harmonic_subdivisions": 0.4,
            "crosshatch_intensity": 0.2,
            "node_fibonacci_spiral": False,
            "node_orbital_elements": False,
            "node_mandala_pattern": False,
            "layer_blend_mode": "screen",
        },
        "tags": ["soft", "dreamy", "lavender", "slow", "meditative"],
    },
    {
        "name": "Minimalist",
        "effect": "treeoflife",
        "description": "Clean, refined aesthetic. Cool gray paths with teal accents; symbols only "
                       "during radiance and every enhancement turned down.",
        "category": "Refined",
        "settings": {
            "animation": _animation(0.22, 0.62, 0.86, {
                "awakening": _phase("easeInCubic", (0.1, 0.48), (0.0, 0.3), 0.5),
                "ascension": _phase("easeInOutCubic", (0.48, 0.95), (0.3, 1.0), 1.6),
                "radiance": _phase("smoothstep", (0.95, 1.0), (1.0, 1.0), 1.2, kether_glow=1.8),
                "descent": _phase("easeOutQuart", (1.0, 0.1), (1.0, 0.0), 0.8),
            }),
            "branch_color": "#A9A9A9",
            "accent_color": "#20B2AA",
            "glow_color": "#D3D3D3",
            "path_thickness": 1.5,
            "path_size_scale": 0.9,
            "node_size": 18,
            "node_glow_size": 20,
            "pulse_wave_speed": 1.0,
            "pulse_breath_speed": 1.0,
            "pulse_breath_intensity": 0.2,
            "pulse_spiral_speed": 1.5,
            "pulse_spiral_radius": 30,
            "pulse_aura_speed": 1.0,
            "pulse_aura_width": 0.1,
            "pulse_tracer_speed": 1.5,
            "pulse_tracer_count": 2,
            "energy_pulse_size_scale": 0.7,
            "symbol_glow_size": 4,
            "symbol_show_on_phases": ["radiance"],
            "mystic_symbol_size_scale": 0.7,
            "fuzz_density": 0.05,
            "subdivision_intensity": 0.12,
            "interference_amount": 0.08,
            "glow_layer_intensity": 0.08,
            "node_layer_complexity": 0.5,
            "path_ribbon_effect": 0.2,
            "harmonic_subdivisions": 0.3,
            "crosshatch_intensity": 0.15,
            "node_fibonacci_spiral": False,
            "node_orbital_elements": False,
            "node_mandala_pattern": False,
            "layer_opacity": 0.95,
            "layer_blend_mode": "screen",
        },
        "tags": ["clean", "minimal", "gray", "teal", "subtle"],
    },
    {
        "name": "Cinematic",
        "effect": "treeoflife",
        "description": "Dramatic and detailed. Crimson paths, golden highlights and warm amber "
                       "glow with every enhancement layer turned up.",
        "category": "Cinematic",
        "settings": {
            "animation": _animation(0.20, 0.60, 0.85, {
                "awakening": _phase("easeInCubic", (0.1, 0.5), (0.0, 0.4), 0.6),
                "ascension": _phase("easeInOutCubic", (0.5, 0.95), (0.4, 1.0), 2.0),
                "radiance": _phase("smoothstep", (0.95, 1.0), (1.0, 1.0), 1.8, kether_glow=2.5),
                "descent": _phase("easeOutQuart", (1.0, 0.15), (1.0, 0.0), 1.0),
            }),
            "branch_color": "#DC143C",
            "accent_color": "#FFD700",
            "glow_color": "#FFA500",
            "path_thickness": 2.5,
            "path_size_scale": 1.1,
            "node_size": 22,
            "node_glow_size": 28,
            "pulse_wave_speed": 2.5,
            "pulse_breath_speed": 2.0,
            "pulse_breath_intensity": 0.5,
            "pulse_spiral_speed": 3.0,
            "pulse_spiral_radius": 55,
            "pulse_aura_speed": 2.5,
            "pulse_aura_width": 0.18,
            "pulse_tracer_speed": 3.5,
            "pulse_tracer_count": 6,
            "energy_pulse_size_scale": 1.1,
            "symbol_glow_size": 10,
            "fuzz_density": 0.25,
            "subdivision_intensity": 0.5,
            "interference_amount": 0.4,
            "glow_layer_intensity": 0.3,
            "node_layer_complexity": 0.85,
            "path_ribbon_effect": 0.7,
            "harmonic_subdivisions": 0.8,
            "crosshatch_intensity": 0.5,
            "node_mandala_pattern": False,
            "layer_blend_mode": "screen",
        },
        "tags": ["dramatic", "crimson", "gold", "detailed", "warm"],
    },
    {
        "name": "Hermetic Ascent",
        "effect": "treeoflife",
        "description": "Slow, contemplative rise through the sephiroth. Slate-blue paths and "
                       "silver accents; a long ascension with a calm, even pulse.",
        "category": "Timing",
        "settings": {
            "animation": _animation(0.20, 0.60, 0.85, {
                "awakening": _phase("easeInCubic", (0.1, 0.5), (0.0, 0.3), 0.5),
                "ascension": _phase("linear", (0.5, 0.95), (0.3, 1.0), 1.5),
                "radiance": _phase("smoothstep", (0.95, 1.0), (1.0, 1.0), 1.3, kether_glow=2.0),
                "descent": _phase("easeOutQuart", (1.0, 0.15), (1.0, 0.0), 0.9),
            }),
            "branch_color": "#6A5ACD",
            "accent_color": "#C0C0C0",
            "glow_color": "#4B0082",
            "pulse_spiral_speed": 2.5,
            "pulse_spiral_radius": 45,
            "pulse_tracer_speed": 2.5,
            "pulse_tracer_count": 4,
            "energy_pulse_size_scale": 0.95,
            "node_layer_complexity": 0.7,
            "path_ribbon_effect": 0.5,
            "harmonic_subdivisions": 0.6,
            "crosshatch_intensity": 0.35,
            "node_mandala_pattern": False,
            "layer_blend_mode": "screen",
        },
        "tags": ["hermetic", "slow", "contemplative", "silver", "indigo"],
    },
    {
        "name": "Chakra Spin",
        "effect": "treeoflife",
        "description": "Fast, vivid cycle. Magenta paths and gold accents; a short awakening "
                       "into a long, high-speed ascension with strong spiral vortices.",
        "category": "Timing",
        "settings": {
            "animation": _animation(0.15, 0.50, 0.80, {
                "awakening": _phase("easeInQuart", (0.2, 0.6), (0.0, 0.35), 1.2),
                "ascension": _phase("easeInOutCubic", (0.6, 0.98), (0.35, 1.0), 3.0),
                "radiance": _phase("smootherstep", (0.98, 1.0), (1.0, 1.0), 2.8, kether_glow=3.0),
                "descent": _phase("easeOutCubic", (1.0, 0.2), (1.0, 0.0), 1.5),
            }),
            "branch_color": "#FF00FF",
            "accent_color": "#FFD700",
            "glow_color": "#FF1493",
            "path_thickness": 2.2,
            "path_size_scale": 1.05,
            "node_size": 24,
            "node_glow_size": 32,
            "pulse_wave_speed": 3.5,
            "pulse_breath_speed": 3.0,
            "pulse_breath_intensity": 0.6,
            "pulse_spiral_speed": 4.0,
            "pulse_spiral_radius": 70,
            "pulse_aura_speed": 3.5,
            "pulse_aura_width": 0.2,
            "pulse_tracer_speed": 4.5,
            "pulse_tracer_count": 8,
            "energy_pulse_size_scale": 1.15,
            "symbol_glow_size": 12,
            "mystic_symbol_size_scale": 1.2,
            "fuzz_density": 0.12,
            "subdivision_intensity": 0.35,
            "interference_amount": 0.15,
            "glow_layer_intensity": 0.2,
            "node_layer_complexity": 0.75,
            "path_ribbon_effect": 0.5,
            "harmonic_subdivisions": 0.5,
            "crosshatch_intensity": 0.3,
            "layer_blend_mode": "screen",
        },
        "tags": ["fast", "vivid", "magenta", "spiral", "energetic"],
    },
    {
        "name": "Alchemical Transmutation",
        "effect": "treeoflife",
        "description": "Gradual transformation. Emerald paths with copper accents; a long "
                       "awakening gives way to a slow, even build and a gentle fade.",
        "category": "Timing",
        "settings": {
            "animation": _animation(0.30, 0.70, 0.90, {
                "awakening": _phase("smoothstep", (0.08, 0.42), (0.0, 0.25), 0.4),
                "ascension": _phase("easeOutCubic", (0.42, 0.92), (0.25, 1.0), 0.8),
                "radiance": _phase("smoothstep", (0.92, 1.0), (1.0, 0.98), 0.9, kether_glow=2.5),
                "descent": _phase("easeOutQuart", (1.0, 0.1), (0.98, 0.0), 0.6),
            }),
            "branch_color": "#50C878",
            "accent_color": "#B87333",
            "glow_color": "#228B22",
            "pulse_wave_speed": 1.5,
            "pulse_breath_speed": 1.5,
            "pulse_breath_intensity": 0.35,
            "pulse_spiral_speed": 2.0,
            "pulse_spiral_radius": 48,
            "pulse_aura_speed": 1.5,
            "pulse_aura_width": 0.18,
            "pulse_tracer_speed": 2.0,
            "pulse_tracer_count": 3,
            "energy_pulse_size_scale": 0.85,
            "symbol_glow_size": 9,
            "fuzz_density": 0.22,
            "subdivision_intensity": 0.45,
            "interference_amount": 0.3,
            "glow_layer_intensity": 0.25,
            "node_layer_complexity": 0.75,
            "path_ribbon_effect": 0.55,
            "harmonic_subdivisions": 0.65,
            "crosshatch_intensity": 0.4,
            "layer_blend_mode": "screen",
        },
        "tags": ["alchemy", "gradual", "emerald", "copper", "organic"],
    },
    {
        "name": "Geometric",
        "effect": "treeoflife",
        "description": "Sharp structure over atmosphere. Alice-blue paths with cobalt accents; "
                       "dense harmonic subdivisions and interference, symbols only while the "
                       "tree is lit.",
        "category": "Pattern",
        "settings": {
            "animation": _animation(0.18, 0.55, 0.82, {
                "awakening": _phase("easeInQuart", (0.15, 0.55), (0.0, 0.4), 0.8),
                "ascension": _phase("easeInOutCubic", (0.55, 0.98), (0.4, 1.0), 2.5),
                "radiance": _phase("smoothstep", (0.98, 1.0), (1.0, 1.0), 2.2, kether_glow=2.0),
                "descent": _phase("easeOutCubic", (1.0, 0.2), (1.0, 0.0), 1.2),
            }),
            "branch_color": "#F0F8FF",
            "accent_color": "#0047AB",
            "glow_color": "#C0C0C0",
            "path_thickness": 1.5,
            "path_size_scale": 0.95,
            "node_size": 18,
            "node_glow_size": 22,
            "pulse_wave_speed": 3.0,
            "pulse_breath_intensity": 0.35,
            "pulse_spiral_speed": 4.0,
            "pulse_spiral_radius": 60,
            "pulse_aura_speed": 3.0,
            "pulse_aura_width": 0.12,
            "pulse_tracer_speed": 4.0,
            "pulse_tracer_count": 7,
            "symbol_glow_size": 6,
            "symbol_show_on_phases": ["ascension", "radiance"],
            "mystic_symbol_size_scale": 0.8,
            "fuzz_density": 0.08,
            "subdivision_intensity": 0.6,
            "interference_amount": 0.55,
            "glow_layer_intensity": 0.12,
            "node_layer_complexity": 0.9,
            "path_ribbon_effect": 0.3,
            "harmonic_subdivisions": 0.9,
            "crosshatch_intensity": 0.7,
            "node_orbital_elements": False,
            "node_mandala_pattern": False,
            "layer_blend_mode": "overlay",
        },
        "tags": ["geometric", "precise", "cobalt", "structure", "crosshatch"],
    },
    {
        "name": "Quantum",
        "effect": "treeoflife",
        "description": "Cyan and gold interference field. Default pulses with heavy "
                       "interference ripples and subdivisions.",
        "category": "Pattern",
        "settings": {
            "animation": _animation(0.16, 0.52, 0.84, {
                "awakening": _phase("easeInQuart", (0.15, 0.55), (0.0, 0.35), 0.8),
                "ascension": _phase("easeInOutCubic", (0.55, 0.95), (0.35, 1.0), 2.8),
                "radiance": _phase("smoothstep", (0.95, 1.0), (1.0, 1.0), 2.5, kether_glow=2.3),
                "descent": _phase("easeOutCubic", (1.0, 0.2), (1.0, 0.0), 1.0),
            }),
            "branch_color": "#00E5FF",
            "accent_color": "#FFD700",
            "glow_color": "#00E5FF",
            "fuzz_density": 0.18,
            "subdivision_intensity": 0.55,
            "interference_amount": 0.52,
            "glow_layer_intensity": 0.18,
            "layer_blend_mode": "screen",
        },
        "tags": ["quantum", "cyan", "gold", "interference", "field"],
    },

    # =========================================================================
    # MAXIMAL
    # =========================================================================
    {
        "name": "Operator Overload",
        "effect": "treeoflife",
        "description": "Everything at full. White paths, magenta accents and violet glow; every "
                       "pulse, symbol and detail layer pushed to its limit.",
        "category": "Maximal",
        "settings": {
            "animation": _animation(0.12, 0.42, 0.88, {
                "awakening": _phase("easeInCubic", (0.15, 0.65), (0.1, 0.5), 1.2),
                "ascension": _phase("easeInOutCubic", (0.65, 1.0), (0.5, 1.0), 3.0),
                "radiance": _phase("smoothstep", (1.0, 1.0), (1.0, 1.0), 2.5, kether_glow=3.0),
                "descent": _phase("easeOutQuart", (1.0, 0.0), (1.0, 0.0), 1.0),
            }),
            "branch_color": "#FFFFFF",
            "accent_color": "#FF00FF",
            "glow_color": "#8B00FF",
            "path_thickness": 3,
            "path_size_scale": 1.2,
            "node_size": 28,
            "node_glow_size": 35,
            "pulse_wave_speed": 4.0,
            "pulse_breath_speed": 3.0,
            "pulse_breath_intensity": 0.7,
            "pulse_spiral_speed": 5.0,
            "pulse_spiral_radius": 80,
            "pulse_aura_speed": 4.0,
            "pulse_aura_width": 0.25,
            "pulse_tracer_speed": 5.0,
            "pulse_tracer_count": 12,
            "energy_pulse_size_scale": 1.3,
            "symbol_glow_size": 15,
            "mystic_symbol_size_scale": 1.4,
            "fuzz_density": 0.35,
            "subdivision_intensity": 0.85,
            "interference_amount": 0.75,
            "glow_layer_intensity": 0.45,
            "node_layer_complexity": 1.0,
            "path_ribbon_effect": 1.0,
            "harmonic_subdivisions": 1.0,
            "crosshatch_intensity": 0.9,
            "layer_blend_mode": "screen",
        },
        "tags": ["maximal", "overload", "white", "magenta", "everything"],
    },

    # =========================================================================
    # CHAKRA MANDALA
    # =========================================================================
    {
        "name": "Kundalini Awakening",
        "effect": "chakramandala",
        "description": "Classic kundalini rising: serpent ascends from root to crown. "
                       "Mystical, energetic, transformative.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.15, 0.70, 0.85, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.05),
            "mandala_ring_speed": 1.0,
            "mandala_ring_opacity": 0.4,
            "mandala_ring_thickness": 1.5,
            "mandala_ring_layers": 2,
            "frequency_detail_layers": 1,
            "energy_flow_speed": 1.8,
            "energy_flow_density": 8,
            "energy_flow_trail_length": 6,
            "energy_flow_spiral_density": 2,
            "chakra_glow_size": 40,
            "chakra_aura_layers": 1,
            "central_channel_glow": 1.5,
            "chakra_color_override": "#ff0000",
            "chakra_glow_color_override": "#ff6666",
            "node_size": 22,
            "path_thickness": 1.5,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "muladhara",
            "ascension_chakra_focus": "anahata",
            "radiance_chakra_focus": "sahasrara",
            "descent_chakra_focus": "muladhara",
            "explosion_ray_length": 55,
            "explosion_particle_count": 18,
            "explosion_intensity": 0.85,
            "explosion_fuzz_color": "#ff9999",
            "sine_wave_color": "#c41e3a",
            "sine_wave_fuzz_color": "#ff6b6b",
            "sine_wave_amplitude": 18,
            "sine_wave_opacity_range": {"lower": 0.4, "upper": 1.0},
            "sine_wave_opacity_algorithm": ["sinusoidal", "square"],
            "sine_wave_blur_algorithm": ["sinusoidal"],
            "sine_wave_accent_range": {"lower": 0.8, "upper": 2.5},
            "sine_wave_accent_algorithm": ["square", "sawtooth"],
            "sine_wave_count": None,
            "sine_wave_amplitude_oscillation_range": {"lower": 0.7, "upper": 2.0},
            "sine_wave_amplitude_algorithm": ["sinusoidal", "square"],
            "energy_bead_color": "#ff6b6b",
        },
        "tags": ["mystical", "energetic", "transformative"],
    },
    {
        "name": "Heart Centered Healing",
        "effect": "chakramandala",
        "description": "Heart chakra meditation with gentle energy flows. "
                       "Gentle, nurturing, centered.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.25, 0.50, 0.80, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.06),
            "mandala_ring_speed": 0.8,
            "mandala_ring_opacity": 0.5,
            "mandala_symmetry": 8,
            "mandala_ring_layers": 2,
            "mandala_radius_multiplier": 1.1,
            "frequency_oscillation_speed": 2.5,
            "frequency_detail_layers": 1,
            "energy_flow_speed": 1.2,
            "energy_flow_density": 6,
            "energy_flow_trail_length": 10,
            "energy_flow_spiral_density": 2,
            "chakra_glow_size": 50,
            "chakra_glow_intensity": 0.85,
            "chakra_breathe_intensity": 0.5,
            "chakra_color_override": "#27ae60",
            "chakra_glow_color_override": "#a9dfbf",
            "node_size": 24,
            "layer_blend_mode": "lighten",
            "layer_opacity": 0.95,
            "awakening_chakra_focus": "svadhisthana",
            "ascension_chakra_focus": "anahata",
            "radiance_chakra_focus": "anahata",
            "descent_chakra_focus": "anahata",
            "explosion_ray_count": 8,
            "explosion_ray_length": 40,
            "explosion_ring_count": 3,
            "explosion_particle_count": 12,
            "explosion_intensity": 0.5,
            "explosion_fuzz_color": "#a9dfbf",
            "explosion_fuzz_opacity_multiplier": 0.3,
            "explosion_fuzz_layer_opacity": 0.5,
            "sine_wave_color": "#27ae60",
            "sine_wave_fuzz_color": "#a9dfbf",
            "sine_wave_thickness": 2.8,
            "sine_wave_amplitude": 12,
            "sine_wave_frequency": 1.8,
            "sine_wave_opacity_range": {"lower": 0.5, "upper": 0.95},
            "sine_wave_opacity_algorithm": ["sinusoidal"],
            "sine_wave_blur_range": {"lower": 3, "upper": 7},
            "sine_wave_blur_times": 2,
            "sine_wave_blur_algorithm": ["sinusoidal"],
            "sine_wave_accent_range": {"lower": 0.6, "upper": 2.0},
            "sine_wave_accent_times": 2,
            "sine_wave_accent_algorithm": ["sinusoidal"],
            "sine_wave_fuzz_layer_opacity": 0.5,
            "sine_wave_chakra_grouping": 4,
            "sine_wave_progression": "overlapping",
            "sine_wave_count": 5,
            "sine_wave_harmonic_ratios": [1, 1.5, 2, 1.2, 1.8],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.8, "upper": 1.8},
            "sine_wave_amplitude_oscillation_times": 1.5,
            "sine_wave_amplitude_algorithm": ["sinusoidal"],
            "energy_bead_color": "#27ae60",
            "energy_bead_opacity": 0.75,
            "energy_bead_glow_intensity": 1.0,
            "energy_bead_speed": 0.8,
            "energy_bead_pulse_range": {"lower": 0.8, "upper": 1.2},
            "energy_bead_pulse_times": 1.5,
        },
        "tags": ["gentle", "nurturing", "centered"],
    },
    {
        "name": "Third Eye Activation",
        "effect": "chakramandala",
        "description": "Intense intuition and inner vision focus on Ajna. "
                       "Hypnotic, visionary, introspective.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.20, 0.55, 0.90, _node_alpha(
                (0.1, 0.6), (0.6, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.04),
            "mandala_ring_speed": 2.5,
            "mandala_ring_opacity": 0.7,
            "mandala_ring_thickness": 1,
            "mandala_symmetry": 12,
            "mandala_ring_layers": 4,
            "mandala_inner_radius": 0.08,
            "mandala_outer_radius": 0.45,
            "mandala_radius_multiplier": 1.2,
            "frequency_oscillation_speed": 4.5,
            "frequency_detail_layers": 3,
            "energy_flow_speed": 2.2,
            "energy_flow_density": 10,
            "energy_flow_trail_length": 12,
            "energy_flow_spiral_density": 4,
            "chakra_glow_size": 60,
            "chakra_glow_intensity": 1.0,
            "chakra_breathe_intensity": 0.6,
            "chakra_aura_layers": 3,
            "central_channel_glow": 2.0,
            "chakra_color_override": "#3b2c6d",
            "chakra_glow_color_override": "#9d84b7",
            "path_thickness": 1,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "manipura",
            "ascension_chakra_focus": "ajna",
            "radiance_chakra_focus": "ajna",
            "descent_chakra_focus": "anahata",
            "explosion_ray_count": 16,
            "explosion_ray_length": 65,
            "explosion_ray_length_multiplier": 1.1,
            "explosion_ring_count": 5,
            "explosion_particle_count": 24,
            "explosion_even_particle_distribution": False,
            "explosion_intensity": 1.0,
            "explosion_fuzz_color": "#9d84b7",
            "explosion_fuzz_opacity_multiplier": 0.5,
            "explosion_fuzz_layer_opacity": 0.7,
            "explosion_invert_fuzz_layers": True,
            "sine_wave_color": "#3b2c6d",
            "sine_wave_fuzz_color": "#9d84b7",
            "sine_wave_thickness": 2.0,
            "sine_wave_amplitude": 22,
            "sine_wave_frequency": 3.5,
            "sine_wave_opacity_times": 3,
            "sine_wave_opacity_algorithm": ["sinusoidal", "square", "sawtooth"],
            "sine_wave_blur_range": {"lower": 1, "upper": 10},
            "sine_wave_blur_times": 4,
            "sine_wave_blur_algorithm": ["square", "sawtooth"],
            "sine_wave_accent_range": {"lower": 1.0, "upper": 3.0},
            "sine_wave_accent_times": 4,
            "sine_wave_accent_algorithm": ["sawtooth"],
            "sine_wave_invert_layers": True,
            "sine_wave_fuzz_layer_opacity": 0.7,
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [1.5, 2.5, 1, 3, 2],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.6, "upper": 2.5},
            "sine_wave_amplitude_oscillation_times": 3,
            "sine_wave_amplitude_algorithm": ["square", "sawtooth"],
            "energy_bead_count": 12,
            "energy_bead_radius": 7,
            "energy_bead_color": "#9d84b7",
            "energy_bead_opacity": 0.9,
            "energy_bead_glow_intensity": 1.5,
            "energy_bead_speed": 1.2,
            "energy_bead_ring_layer": -1,
            "energy_bead_pulse_range": {"lower": 0.6, "upper": 1.4},
            "energy_bead_pulse_times": 3,
        },
        "tags": ["hypnotic", "visionary", "introspective"],
    },
    {
        "name": "Grounding Stability",
        "effect": "chakramandala",
        "description": "Root chakra grounding with heavy presence. "
                       "Solid, grounded, protective.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.30, 0.65, 0.85, _node_alpha(
                (0.15, 0.5), (0.5, 0.95), (1.0, 1.0), (1.0, 0.15),
            ), width=0.08),
            "mandala_ring_speed": 0.5,
            "mandala_ring_opacity": 0.8,
            "mandala_ring_thickness": 3,
            "mandala_symmetry": 4,
            "mandala_ring_layers": 2,
            "mandala_resonance_patterns": False,
            "mandala_inner_radius": 0.15,
            "mandala_outer_radius": 0.35,
            "mandala_radius_multiplier": 0.9,
            "enable_frequency_visualization": False,
            "frequency_oscillation_speed": 1.0,
            "frequency_detail_layers": 0,
            "energy_flow_speed": 0.8,
            "energy_flow_density": 4,
            "energy_flow_trail_length": 4,
            "energy_flow_spirals": False,
            "energy_flow_spiral_density": 0,
            "chakra_glow_intensity": 0.65,
            "chakra_breathe_intensity": 0.1,
            "chakra_aura_layers": 1,
            "central_channel_glow": 0.8,
            "central_channel_auras": False,
            "chakra_color_override": "#704214",
            "chakra_glow_color_override": "#d2b48c",
            "node_size": 26,
            "path_thickness": 3,
            "layer_blend_mode": "multiply",
            "layer_opacity": 0.8,
            "awakening_chakra_focus": "muladhara",
            "ascension_chakra_focus": "muladhara",
            "radiance_chakra_focus": "manipura",
            "descent_chakra_focus": "muladhara",
            "explosion_ray_count": 6,
            "explosion_ray_length": 30,
            "explosion_ray_length_multiplier": 0.9,
            "explosion_ring_count": 2,
            "explosion_particle_count": 8,
            "explosion_intensity": 0.3,
            "explosion_fuzz_color": "#d2b48c",
            "explosion_fuzz_opacity_multiplier": 0.2,
            "explosion_fuzz_layer_opacity": 0.4,
            "sine_wave_color": "#704214",
            "sine_wave_fuzz_color": "#d2b48c",
            "sine_wave_thickness": 3.2,
            "sine_wave_amplitude": 8,
            "sine_wave_frequency": 1.2,
            "sine_wave_opacity_range": {"lower": 0.6, "upper": 0.9},
            "sine_wave_opacity_times": 1,
            "sine_wave_opacity_algorithm": ["sinusoidal"],
            "sine_wave_blur_range": {"lower": 4, "upper": 6},
            "sine_wave_blur_times": 1,
            "sine_wave_blur_algorithm": ["sinusoidal"],
            "sine_wave_accent_range": {"lower": 0.4, "upper": 1.5},
            "sine_wave_accent_times": 1,
            "sine_wave_accent_algorithm": ["sinusoidal"],
            "sine_wave_fuzz_layer_opacity": 0.4,
            "sine_wave_chakra_grouping": 5,
            "sine_wave_count": 3,
            "sine_wave_harmonic_ratios": [1, 1, 1],
            "enable_sine_wave_amplitude_oscillation": False,
            "sine_wave_amplitude_oscillation_range": {"lower": 0.9, "upper": 1.1},
            "sine_wave_amplitude_oscillation_times": 1,
            "sine_wave_amplitude_algorithm": ["sinusoidal"],
            "energy_bead_count": 6,
            "energy_bead_radius": 5,
            "energy_bead_color": "#704214",
            "energy_bead_opacity": 0.7,
            "energy_bead_glow_intensity": 0.8,
            "energy_bead_speed": 0.5,
            "energy_bead_ring_layer": 0,
            "energy_bead_pulse_enabled": False,
            "energy_bead_pulse_range": {"lower": 0.95, "upper": 1.05},
            "energy_bead_pulse_times": 1,
        },
        "tags": ["solid", "grounded", "protective"],
    },
    {
        "name": "Full Spectrum Resonance",
        "effect": "chakramandala",
        "description": "All chakras equally activated in harmonic resonance. "
                       "Balanced, harmonic, complete.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.20, 0.50, 0.80, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.05),
            "mandala_ring_speed": 1.5,
            "mandala_ring_thickness": 1.5,
            "mandala_symmetry": 7,
            "mandala_radius_multiplier": 1.05,
            "energy_flow_speed": 1.5,
            "energy_flow_density": 7,
            "chakra_glow_size": 45,
            "chakra_glow_intensity": 0.8,
            "chakra_breathe_intensity": 0.4,
            "central_channel_glow": 1.3,
            "chakra_color_override": "#f39c12",
            "chakra_glow_color_override": "#f8c471",
            "node_size": 23,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "muladhara",
            "ascension_chakra_focus": "anahata",
            "radiance_chakra_focus": "anahata",
            "descent_chakra_focus": "muladhara",
            "explosion_ray_length": 48,
            "explosion_intensity": 0.7,
            "explosion_fuzz_color": "#f8c471",
            "explosion_fuzz_opacity_multiplier": 0.35,
            "sine_wave_color": "#f39c12",
            "sine_wave_fuzz_color": "#f8c471",
            "sine_wave_thickness": 2.6,
            "sine_wave_frequency": 2.2,
            "sine_wave_opacity_range": {"lower": 0.4, "upper": 0.95},
            "sine_wave_opacity_algorithm": ["sinusoidal", "square"],
            "sine_wave_blur_range": {"lower": 2.5, "upper": 7.5},
            "sine_wave_blur_times": 2.5,
            "sine_wave_blur_algorithm": ["sinusoidal"],
            "sine_wave_accent_range": {"lower": 0.7, "upper": 2.2},
            "sine_wave_accent_times": 2.5,
            "sine_wave_accent_algorithm": ["sinusoidal", "square"],
            "sine_wave_progression": "overlapping",
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [1, 1.5, 2, 1, 1.5],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.8, "upper": 1.9},
            "sine_wave_amplitude_algorithm": ["sinusoidal"],
            "energy_bead_count": 10,
            "energy_bead_color": "#f39c12",
            "energy_bead_pulse_range": {"lower": 0.75, "upper": 1.25},
        },
        "tags": ["balanced", "harmonic", "complete"],
    },
    {
        "name": "Crown Enlightenment",
        "effect": "chakramandala",
        "description": "Ascending toward divine consciousness and crown activation. "
                       "Ethereal, transcendent, luminous.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.15, 0.60, 0.88, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.04),
            "mandala_ring_opacity": 0.5,
            "mandala_ring_thickness": 1,
            "mandala_symmetry": 12,
            "mandala_ring_layers": 4,
            "mandala_inner_radius": 0.08,
            "mandala_outer_radius": 0.42,
            "mandala_radius_multiplier": 1.15,
            "frequency_oscillation_speed": 4.0,
            "frequency_detail_layers": 3,
            "energy_flow_density": 9,
            "energy_flow_trail_length": 10,
            "energy_flow_spiral_density": 4,
            "chakra_glow_size": 55,
            "chakra_glow_intensity": 0.95,
            "chakra_breathe_intensity": 0.5,
            "chakra_aura_layers": 3,
            "central_channel_glow": 1.8,
            "chakra_color_override": "#e8daef",
            "chakra_glow_color_override": "#f5b7b1",
            "node_size": 21,
            "path_thickness": 1.5,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "manipura",
            "ascension_chakra_focus": "vishuddha",
            "radiance_chakra_focus": "sahasrara",
            "descent_chakra_focus": "anahata",
            "explosion_ray_count": 14,
            "explosion_ray_length": 60,
            "explosion_ray_length_multiplier": 1.05,
            "explosion_ring_count": 5,
            "explosion_particle_count": 20,
            "explosion_intensity": 0.9,
            "explosion_fuzz_color": "#f5b7b1",
            "explosion_fuzz_opacity_multiplier": 0.45,
            "explosion_fuzz_layer_opacity": 0.65,
            "explosion_invert_fuzz_layers": True,
            "sine_wave_color": "#e8daef",
            "sine_wave_fuzz_color": "#f5b7b1",
            "sine_wave_thickness": 2.2,
            "sine_wave_amplitude": 20,
            "sine_wave_frequency": 3.0,
            "sine_wave_opacity_range": {"lower": 0.35, "upper": 1.0},
            "sine_wave_opacity_times": 3,
            "sine_wave_opacity_algorithm": ["sinusoidal", "sawtooth"],
            "sine_wave_blur_range": {"lower": 1.5, "upper": 9},
            "sine_wave_blur_times": 3.5,
            "sine_wave_blur_algorithm": ["sinusoidal", "sawtooth"],
            "sine_wave_accent_range": {"lower": 1.0, "upper": 2.8},
            "sine_wave_accent_times": 3.5,
            "sine_wave_accent_algorithm": ["sawtooth"],
            "sine_wave_invert_layers": True,
            "sine_wave_fuzz_layer_opacity": 0.65,
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [2, 3, 1.5, 2.5, 1],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.5, "upper": 2.2},
            "sine_wave_amplitude_oscillation_times": 3,
            "sine_wave_amplitude_algorithm": ["sinusoidal", "sawtooth"],
            "energy_bead_count": 12,
            "energy_bead_radius": 7,
            "energy_bead_color": "#e8daef",
            "energy_bead_opacity": 0.85,
            "energy_bead_glow_intensity": 1.4,
            "energy_bead_speed": 1.1,
            "energy_bead_ring_layer": 2,
            "energy_bead_pulse_times": 2.5,
        },
        "tags": ["ethereal", "transcendent", "luminous"],
    },
    {
        "name": "Creative Flow",
        "effect": "chakramandala",
        "description": "Sacral energy activation with creative power. "
                       "Fluid, creative, passionate.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.25, 0.58, 0.82, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.06),
            "mandala_ring_speed": 1.8,
            "mandala_ring_opacity": 0.55,
            "mandala_symmetry": 5,
            "mandala_radius_multiplier": 1.08,
            "frequency_oscillation_speed": 3.2,
            "energy_flow_speed": 1.7,
            "energy_flow_density": 7,
            "energy_flow_trail_length": 12,
            "energy_flow_spiral_density": 5,
            "chakra_glow_size": 48,
            "chakra_glow_intensity": 0.8,
            "chakra_breathe_intensity": 0.6,
            "central_channel_glow": 1.4,
            "chakra_color_override": "#e74c3c",
            "chakra_glow_color_override": "#f5b7b1",
            "node_size": 22,
            "layer_blend_mode": "lighten",
            "layer_opacity": 0.95,
            "awakening_chakra_focus": "svadhisthana",
            "ascension_chakra_focus": "manipura",
            "radiance_chakra_focus": "anahata",
            "descent_chakra_focus": "svadhisthana",
            "explosion_ray_count": 13,
            "explosion_ray_length": 52,
            "explosion_ray_length_multiplier": 1.02,
            "explosion_particle_count": 20,
            "explosion_even_particle_distribution": False,
            "explosion_fuzz_color": "#f5b7b1",
            "explosion_fuzz_opacity_multiplier": 0.38,
            "sine_wave_color": "#e74c3c",
            "sine_wave_fuzz_color": "#f5b7b1",
            "sine_wave_thickness": 2.4,
            "sine_wave_amplitude": 19,
            "sine_wave_frequency": 2.8,
            "sine_wave_opacity_range": {"lower": 0.35, "upper": 0.98},
            "sine_wave_opacity_times": 2.5,
            "sine_wave_opacity_algorithm": ["sinusoidal", "square"],
            "sine_wave_blur_range": {"lower": 2, "upper": 8.5},
            "sine_wave_blur_algorithm": ["square"],
            "sine_wave_accent_range": {"lower": 0.9, "upper": 2.6},
            "sine_wave_accent_algorithm": ["square"],
            "sine_wave_progression": "overlapping",
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [1.2, 2.5, 1.8, 2, 1.5],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.65, "upper": 2.1},
            "sine_wave_amplitude_oscillation_times": 2.5,
            "sine_wave_amplitude_algorithm": ["square", "sawtooth"],
            "energy_bead_count": 10,
            "energy_bead_color": "#e74c3c",
            "energy_bead_glow_intensity": 1.3,
            "energy_bead_speed": 1.1,
            "energy_bead_pulse_times": 2.5,
        },
        "tags": ["fluid", "creative", "passionate"],
    },
    {
        "name": "Throat Truth Expression",
        "effect": "chakramandala",
        "description": "Communication and truth activation with resonant frequencies. "
                       "Clear, resonant, empowering.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.22, 0.55, 0.85, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.05),
            "mandala_ring_speed": 1.6,
            "mandala_ring_opacity": 0.65,
            "mandala_ring_thickness": 1.5,
            "mandala_symmetry": 8,
            "mandala_radius_multiplier": 1.03,
            "frequency_oscillation_speed": 3.5,
            "energy_flow_speed": 1.9,
            "energy_flow_density": 8,
            "energy_flow_trail_length": 9,
            "chakra_glow_size": 42,
            "chakra_glow_intensity": 0.75,
            "chakra_breathe_intensity": 0.45,
            "central_channel_glow": 1.5,
            "chakra_color_override": "#3498db",
            "chakra_glow_color_override": "#85c1e9",
            "node_size": 22,
            "path_thickness": 1.5,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "anahata",
            "ascension_chakra_focus": "vishuddha",
            "radiance_chakra_focus": "vishuddha",
            "descent_chakra_focus": "anahata",
            "explosion_ray_count": 10,
            "explosion_ray_length": 45,
            "explosion_ring_count": 3,
            "explosion_particle_count": 14,
            "explosion_intensity": 0.65,
            "explosion_fuzz_color": "#85c1e9",
            "explosion_fuzz_opacity_multiplier": 0.32,
            "explosion_fuzz_layer_opacity": 0.55,
            "sine_wave_color": "#3498db",
            "sine_wave_fuzz_color": "#85c1e9",
            "sine_wave_amplitude": 14,
            "sine_wave_frequency": 2.6,
            "sine_wave_opacity_range": {"lower": 0.4, "upper": 0.95},
            "sine_wave_opacity_algorithm": ["sinusoidal", "square"],
            "sine_wave_blur_range": {"lower": 2.5, "upper": 7.5},
            "sine_wave_blur_times": 2.5,
            "sine_wave_blur_algorithm": ["sinusoidal"],
            "sine_wave_accent_range": {"lower": 0.8, "upper": 2.4},
            "sine_wave_accent_times": 2.5,
            "sine_wave_accent_algorithm": ["sinusoidal", "square"],
            "sine_wave_fuzz_layer_opacity": 0.55,
            "sine_wave_chakra_grouping": 4,
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [1, 2, 1.5, 2.5, 1],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.75, "upper": 1.85},
            "sine_wave_amplitude_algorithm": ["sinusoidal"],
            "energy_bead_color": "#3498db",
            "energy_bead_opacity": 0.78,
            "energy_bead_glow_intensity": 1.15,
            "energy_bead_speed": 0.95,
            "energy_bead_pulse_range": {"lower": 0.75, "upper": 1.25},
        },
        "tags": ["clear", "resonant", "empowering"],
    },
    {
        "name": "Solar Power Will",
        "effect": "chakramandala",
        "description": "Personal power and willpower activation at Manipura. "
                       "Powerful, transformative, radiant.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.18, 0.52, 0.83, _node_alpha(
                (0.1, 0.5), (0.5, 1.0), (1.0, 1.0), (1.0, 0.1),
            ), width=0.05),
            "mandala_ring_speed": 2.2,
            "mandala_ring_opacity": 0.62,
            "mandala_symmetry": 10,
            "mandala_radius_multiplier": 1.07,
            "frequency_oscillation_speed": 3.3,
            "energy_flow_speed": 2.1,
            "energy_flow_density": 9,
            "energy_flow_trail_length": 10,
            "energy_flow_spiral_density": 4,
            "chakra_glow_size": 50,
            "chakra_glow_intensity": 0.88,
            "chakra_breathe_intensity": 0.55,
            "central_channel_glow": 1.7,
            "chakra_color_override": "#f1c40f",
            "chakra_glow_color_override": "#fdebd0",
            "node_size": 23,
            "path_thickness": 1.5,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "muladhara",
            "ascension_chakra_focus": "manipura",
            "radiance_chakra_focus": "manipura",
            "descent_chakra_focus": "anahata",
            "explosion_ray_count": 15,
            "explosion_ray_length": 58,
            "explosion_ray_length_multiplier": 1.04,
            "explosion_particle_count": 22,
            "explosion_intensity": 0.95,
            "explosion_fuzz_color": "#fdebd0",
            "explosion_fuzz_opacity_multiplier": 0.42,
            "explosion_fuzz_layer_opacity": 0.65,
            "sine_wave_color": "#f1c40f",
            "sine_wave_fuzz_color": "#fdebd0",
            "sine_wave_thickness": 2.7,
            "sine_wave_amplitude": 17,
            "sine_wave_frequency": 2.9,
            "sine_wave_opacity_range": {"lower": 0.38, "upper": 0.98},
            "sine_wave_opacity_times": 2.5,
            "sine_wave_opacity_algorithm": ["sinusoidal", "square"],
            "sine_wave_blur_algorithm": ["square"],
            "sine_wave_accent_range": {"lower": 0.9, "upper": 2.5},
            "sine_wave_accent_algorithm": ["square", "sawtooth"],
            "sine_wave_fuzz_layer_opacity": 0.65,
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [1.5, 2, 1, 2.5, 3],
            "sine_wave_amplitude_oscillation_range": {"lower": 0.7, "upper": 2.0},
            "sine_wave_amplitude_oscillation_times": 2.5,
            "sine_wave_amplitude_algorithm": ["square", "sawtooth"],
            "energy_bead_count": 11,
            "energy_bead_color": "#f1c40f",
            "energy_bead_opacity": 0.85,
            "energy_bead_glow_intensity": 1.4,
            "energy_bead_speed": 1.15,
            "energy_bead_pulse_range": {"lower": 0.65, "upper": 1.35},
            "energy_bead_pulse_times": 2.5,
        },
        "tags": ["powerful", "transformative", "radiant"],
    },
    {
        "name": "Celestial Void",
        "effect": "chakramandala",
        "description": "Cosmic meditation with minimal mandala, focus on chakra nodes. "
                       "Cosmic, minimal, transcendent.",
        "category": "Meditation",
        "settings": {
            "animation": _animation(0.20, 0.60, 0.85, _node_alpha(
                (0.05, 0.4), (0.4, 0.85), (0.9, 0.9), (0.85, 0.05),
            ), width=0.07),
            "enable_mandala_rings": False,
            "mandala_ring_speed": 1.0,
            "mandala_ring_opacity": 0.2,
            "mandala_ring_thickness": 1,
            "mandala_ring_layers": 1,
            "mandala_resonance_patterns": False,
            "mandala_inner_radius": 0.12,
            "mandala_outer_radius": 0.38,
            "mandala_radius_multiplier": 0.95,
            "enable_frequency_visualization": False,
            "frequency_oscillation_speed": 2.0,
            "frequency_detail_layers": 0,
            "enable_energy_flow": False,
            "energy_flow_speed": 1.0,
            "energy_flow_density": 2,
            "energy_flow_trail_length": 2,
            "energy_flow_spirals": False,
            "energy_flow_spiral_density": 0,
            "chakra_glow_size": 65,
            "chakra_glow_intensity": 0.6,
            "chakra_breathe_intensity": 0.2,
            "chakra_aura_layers": 1,
            "enable_central_channel": False,
            "central_channel_glow": 0.3,
            "central_channel_auras": False,
            "chakra_color_override": "#bdc3c7",
            "chakra_glow_color_override": "#ecf0f1",
            "path_thickness": 0.5,
            "layer_blend_mode": "screen",
            "layer_opacity": 0.8,
            "awakening_chakra_focus": "sahasrara",
            "ascension_chakra_focus": "sahasrara",
            "radiance_chakra_focus": "sahasrara",
            "descent_chakra_focus": "sahasrara",
            "explosion_ray_count": 9,
            "explosion_ray_length": 35,
            "explosion_ray_length_multiplier": 0.95,
            "explosion_ring_count": 2,
            "explosion_particle_count": 10,
            "explosion_intensity": 0.4,
            "explosion_fuzz_color": "#ecf0f1",
            "explosion_fuzz_opacity_multiplier": 0.25,
            "explosion_fuzz_layer_opacity": 0.5,
            "explosion_invert_fuzz_layers": True,
            "sine_wave_color": "#bdc3c7",
            "sine_wave_fuzz_color": "#ecf0f1",
            "sine_wave_thickness": 2.0,
            "sine_wave_amplitude": 10,
            "sine_wave_frequency": 1.5,
            "sine_wave_opacity_range": {"lower": 0.3, "upper": 0.7},
            "sine_wave_opacity_times": 1.5,
            "sine_wave_opacity_algorithm": ["sinusoidal"],
            "sine_wave_blur_range": {"lower": 3, "upper": 9},
            "sine_wave_blur_times": 2,
            "sine_wave_blur_algorithm": ["sinusoidal"],
            "sine_wave_accent_range": {"lower": 0.5, "upper": 1.8},
            "sine_wave_accent_times": 1.5,
            "sine_wave_accent_algorithm": ["sinusoidal"],
            "sine_wave_invert_layers": True,
            "sine_wave_fuzz_layer_opacity": 0.5,
            "sine_wave_chakra_grouping": 5,
            "sine_wave_progression": "overlapping",
            "sine_wave_count": 3,
            "sine_wave_harmonic_ratios": [1, 1.2, 1.5],
            "enable_sine_wave_amplitude_oscillation": False,
            "sine_wave_amplitude_oscillation_range": {"lower": 0.95, "upper": 1.05},
            "sine_wave_amplitude_oscillation_times": 1,
            "sine_wave_amplitude_algorithm": ["sinusoidal"],
            "energy_bead_count": 6,
            "energy_bead_radius": 5,
            "energy_bead_color": "#bdc3c7",
            "energy_bead_opacity": 0.65,
            "energy_bead_glow_intensity": 0.9,
            "energy_bead_speed": 0.7,
            "energy_bead_ring_layer": 0,
            "energy_bead_pulse_enabled": False,
            "energy_bead_pulse_range": {"lower": 0.95, "upper": 1.05},
            "energy_bead_pulse_times": 1,
        },
        "tags": ["cosmic", "minimal", "transcendent"],
    },
    {
        "name": "Diagnostic All Features",
        "effect": "chakramandala",
        "description": "Explosions, sine waves and energy beads all on with high opacity and "
                       "bright colors. Use it to check that every layer renders.",
        "category": "Diagnostic",
        "settings": {
            "animation": {
                "phase_boundaries": {"ascension_start": 0.25},
                "transition_zone_width": 0.05,
            },
            "explosion_ray_count": 16,
            "explosion_ray_length": 80,
            "explosion_ray_length_multiplier": 1.5,
            "explosion_ring_count": 5,
            "explosion_particle_count": 20,
            "explosion_intensity": 1.0,
            "explosion_color_scheme": "white",
            "explosion_fuzz_color": "#ffffff",
            "explosion_fuzz_opacity_multiplier": 0.6,
            "explosion_fuzz_layer_opacity": 0.9,
            "sine_wave_color": "#00ff00",
            "sine_wave_fuzz_color": "#ffff00",
            "sine_wave_thickness": 4.0,
            "sine_wave_amplitude": 25,
            "sine_wave_frequency": 2.0,
            "sine_wave_opacity_range": {"lower": 0.8, "upper": 1.0},
            "sine_wave_opacity_algorithm": "sinusoidal",
            "sine_wave_blur_range": {"lower": 0, "upper": 2},
            "sine_wave_blur_times": 2,
            "sine_wave_blur_algorithm": "sinusoidal",
            "sine_wave_accent_range": {"lower": 1.0, "upper": 2.5},
            "sine_wave_accent_times": 2,
            "sine_wave_accent_algorithm": "sinusoidal",
            "sine_wave_fuzz_layer_opacity": 0.9,
            "sine_wave_count": None,
            "sine_wave_harmonic_ratios": [1, 2, 1.5],
            "sine_wave_amplitude_oscillation_range": {"lower": 1.0, "upper": 2.0},
            "sine_wave_amplitude_algorithm": "sinusoidal",
            "energy_bead_count": 16,
            "energy_bead_radius": 10,
            "energy_bead_color": "#00ccff",
            "energy_bead_opacity": 1.0,
            "energy_bead_glow_intensity": 1.5,
            "energy_bead_speed": 1.2,
            "energy_bead_ring_layer": -1,
            "energy_bead_pulse_range": {"lower": 0.8, "upper": 1.4},
            "mandala_ring_speed": 1.0,
            "mandala_ring_opacity": 0.3,
            "mandala_ring_thickness": 1,
            "mandala_ring_layers": 1,
            "mandala_resonance_patterns": False,
            "frequency_oscillation_speed": 2.0,
            "frequency_detail_layers": 1,
            "energy_flow_speed": 1.0,
            "energy_flow_density": 3,
            "energy_flow_trail_length": 4,
            "energy_flow_spirals": False,
            "energy_flow_spiral_density": 1,
            "chakra_glow_size": 30,
            "chakra_glow_intensity": 0.4,
            "chakra_breathe_intensity": 0.2,
            "chakra_aura_layers": 1,
            "central_channel_glow": 1.0,
            "central_channel_auras": False,
            "node_size": 16,
            "path_thickness": 1,
            "layer_blend_mode": "screen",
            "awakening_chakra_focus": "muladhara",
            "ascension_chakra_focus": "anahata",
            "radiance_chakra_focus": "sahasrara",
            "descent_chakra_focus": "muladhara",
        },
        "tags": ["debug", "bright", "all-features", "explosions", "sine-waves", "beads"],
    },
]


def get_preset(name: str) -> dict | None:
    """Look up a preset by name (case-insensitive)."""
    name_lower = name.lower()
    for preset in BUILT_IN_PRESETS:
        if preset["name"].lower() == name_lower:
            return preset
    return None


def get_presets_for_effect(effect: str) -> list[dict]:
    """Get all presets for one effect."""
    return [p for p in BUILT_IN_PRESETS if p["effect"] == effect]


def get_presets_by_category(category: str) -> list[dict]:
    """Get all presets in a category."""
    return [p for p in BUILT_IN_PRESETS if p["category"].lower() == category.lower()]


def list_preset_names() -> list[str]:
    """Return all preset names."""
    return [p["name"] for p in BUILT_IN_PRESETS]


def list_categories() -> list[str]:
    """Return unique categories."""
    return sorted(set(p["category"] for p in BUILT_IN_PRESETS))
