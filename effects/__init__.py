"""
Mystic — Effects Registry
Every effect is a function: (frame, settings, frame_index, total_frames) -> frame
paired with a settings dataclass and a generate step that resolves its
random choices once per job.
"""

import logging

import numpy as np

from core.settings import apply_overrides
from effects.chakra_geometry import ChakraGeometry
from effects.chakra_mandala import ChakraMandalaSettings, chakra_mandala
from effects.chakra_mandala import generate as generate_chakra_mandala
from effects.geometry import geometry_metadata
from effects.sephiroth_geometry import SephirothGeometry
from effects.tree_of_life import TreeOfLifeSettings, tree_of_life
from effects.tree_of_life import generate as generate_tree_of_life

logger = logging.getLogger(__name__)

EFFECTS = {
    "chakramandala": {
        "fn": chakra_mandala,
        "settings": ChakraMandalaSettings,
        "generate": generate_chakra_mandala,
        "geometry": ChakraGeometry(),
        "category": "sacred",
        "params": {
            "scale": 1.0, "rendering_scale": 1.0, "layer_opacity": 1.0,
            "enable_mandala_rings": True, "enable_chakra_explosions": True,
            "enable_energy_flow": True, "enable_vertical_sine_waves": True,
            "enable_energy_beads": True,
        },
        "description": "Seven chakras as a layered mandala with explosions, energy flow, sine waves and beads",
    },
    "treeoflife": {
        "fn": tree_of_life,
        "settings": TreeOfLifeSettings,
        "generate": generate_tree_of_life,
        "geometry": SephirothGeometry(),
        "category": "sacred",
        "params": {
            "scale": 1.0, "center_x": 0.5, "center_y": 0.5, "layer_opacity": 1.0,
            "enable_energy_pulses": True, "enable_mystic_symbols": True,
            "fuzz_density": 0.15,
        },
        "description": "Tree of Life sephiroth and paths animated through four mystical phases",
    },
}

# Category display order and labels
CATEGORIES = {
    "sacred": "SACRED GEOMETRY",
}


def get_effect(name: str):
    """Get an effect by name. Returns the registry entry.

    Raises ValueError if the effect doesn't exist.
    """
    if name not in EFFECTS:
        available = ", ".join(sorted(EFFECTS.keys()))
        raise ValueError(f"Unknown effect: {name}. Available: {available}")
    return EFFECTS[name]


def list_effects(category: str = None) -> list[dict]:
    """List all available effects with descriptions.

    Args:
        category: Optional filter, only effects in this category.
    """
    results = []
    for name, entry in EFFECTS.items():
        if category and entry.get("category") != category:
            continue
        results.append({
            "name": name,
            "description": entry["description"],
            "params": dict(entry["params"]),
            "category": entry.get("category", "other"),
            "geometry": geometry_metadata(entry["geometry"]),
        })
    return results


def list_categories() -> list[str]:
    return list(CATEGORIES.keys())


def new_settings(name: str, overrides: dict | None = None):
    """Fresh (ungenerated) settings for an effect with optional overrides."""
    entry = get_effect(name)
    return apply_overrides(entry["settings"](), overrides)


def generate_settings(name: str, settings=None, rng=None, picker=None):
    """Run an effect's generate step: every random choice resolved once.

    Args:
        settings: Settings dataclass, plain dict, or None for defaults.
        rng: Seed or numpy RandomState.
    """
    entry = get_effect(name)
    cls = entry["settings"]
    if settings is None:
        settings = cls()
    elif isinstance(settings, dict):
        settings = cls.from_dict(settings)
    generated = entry["generate"](settings, rng=rng, picker=picker)
    logger.debug("Generated %s settings (blend mode %s)", name, generated.layer_blend_mode)
    return generated


def apply_effect(frame, effect_name: str, frame_index: int = 0, total_frames: int = 1,
                 settings=None, mix: float = 1.0):
    """Apply a named effect to a frame.

    Args:
        settings: Generated settings dataclass or its dict form. None
            generates fresh defaults (random choices differ per call).
        mix: Dry/wet blend (0.0-1.0). 1.0 = fully processed.
    """
    entry = get_effect(effect_name)
    if isinstance(settings, dict):
        settings = entry["settings"].from_dict(settings)
    elif settings is None:
        settings = generate_settings(effect_name)

    # RGBA in: draw on RGB, reattach alpha
    alpha = None
    if frame.ndim == 3 and frame.shape[2] == 4:
        alpha = frame[:, :, 3].copy()
        frame = frame[:, :, :3].copy()

    wet = entry["fn"](frame, settings, frame_index=frame_index, total_frames=total_frames)

    mix = max(0.0, min(1.0, float(mix)))
    if mix < 1.0:
        wet = np.clip(frame.astype(np.float32) * (1.0 - mix)
                      + wet.astype(np.float32) * mix, 0, 255).astype(np.uint8)
    if alpha is not None:
        wet = np.dstack([wet, alpha])
    return wet
