"""
Mystic — Safety & Validation
Explicit checks run at the edges of a job: when a config is generated or
loaded, and before a render is started. The per-frame path never calls
these; it degrades to defaults instead of raising.
"""

import math
import os
from pathlib import Path

from core.easing import EASINGS
from core.phases import PHASES
from core.selection import Fixed, RandomChoice

# --- Configurable Limits ---
MAX_DIMENSION = 4096        # Maximum frame width/height in pixels
MAX_FRAMES = 2000           # Maximum frames in one render
MAX_RECIPE_KB = 512         # Maximum recipe file size
MAX_TRANSITION_WIDTH = 0.5  # Transition zone must be narrower than this
RECIPE_EXTENSIONS = {".json"}


class ConfigError(Exception):
    """Raised when a config or render request fails validation."""
    pass


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (math.isnan(value) or math.isinf(value))


def validate_animation(config) -> list[str]:
    """Collect every problem with an AnimationConfig.

    Returns:
        list of human-readable error strings (empty when valid).
    """
    errors = list(config.boundaries.errors())

    width = config.transition_zone_width
    if not _is_number(width):
        errors.append(f"transition_zone_width must be a number, got {width!r}")
    elif not 0.0 <= width < MAX_TRANSITION_WIDTH:
        errors.append(
            f"transition_zone_width must be in [0, {MAX_TRANSITION_WIDTH}), got {width}"
        )

    for phase in PHASES:
        settings = config.phases[phase]
        if isinstance(settings.easing, RandomChoice):
            candidates = settings.easing.options
        elif isinstance(settings.easing, Fixed):
            candidates = (settings.easing.value,)
        else:
            candidates = (settings.easing,)
        for name in candidates:
            if name not in EASINGS:
                errors.append(f"{phase}: unknown easing {name!r}")

        for scalar, rng in settings.scalars.items():
            for label, value in (("start", rng.start), ("end", rng.end)):
                if not _is_number(value):
                    errors.append(f"{phase}.{scalar}.{label} must be a number")
                elif "alpha" in scalar and not 0.0 <= value <= 1.0:
                    errors.append(f"{phase}.{scalar}.{label} must be in [0, 1], got {value}")
                elif "glow" in scalar and value < 0:
                    errors.append(f"{phase}.{scalar}.{label} must be >= 0, got {value}")
    return errors


def check_animation(config) -> None:
    """Validate an AnimationConfig.

    Raises:
        ConfigError: listing every problem found.
    """
    errors = validate_animation(config)
    if errors:
        raise ConfigError("Invalid animation config: " + "; ".join(errors))


def validate_render_request(width, height, total_frames) -> None:
    """Check render dimensions and frame count.

    Raises:
        ConfigError: If any value is non-positive or exceeds its limit.
    """
    for label, value, limit in (("width", width, MAX_DIMENSION),
                                ("height", height, MAX_DIMENSION),
                                ("frames", total_frames, MAX_FRAMES)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{label} must be an integer, got {value!r}")
        if value <= 0:
            raise ConfigError(f"{label} must be positive, got {value}")
        if value > limit:
            raise ConfigError(f"{label} is {value}, max is {limit}.")


def preflight_recipe(path) -> Path:
    """Check a recipe file before loading it.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If it is not a .json file or is too large.
    """
    real_path = Path(os.path.realpath(str(path)))
    if not real_path.is_file():
        raise FileNotFoundError(f"Recipe not found: {path}")
    if real_path.suffix.lower() not in RECIPE_EXTENSIONS:
        raise ConfigError(f"Recipe must be a .json file, got '{real_path.suffix}'")
    size_kb = real_path.stat().st_size / 1024
    if size_kb > MAX_RECIPE_KB:
        raise ConfigError(f"Recipe is {size_kb:.0f}KB, exceeds {MAX_RECIPE_KB}KB limit.")
    return real_path
