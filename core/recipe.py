"""
Mystic — Recipe System
A recipe is the JSON blob that carries one render job from the generate
step to the per-frame workers: the effect name plus its fully resolved
settings.
"""

import json
from datetime import datetime
from pathlib import Path

from core.safety import ConfigError, preflight_recipe

RECIPE_VERSION = 1


def build_recipe(effect: str, settings: dict) -> dict:
    return {
        "effect": effect,
        "version": RECIPE_VERSION,
        "created": datetime.now().isoformat(),
        "settings": settings,
    }


def save_recipe(path, effect: str, settings: dict) -> dict:
    """Write a recipe file, creating parent directories.

    Returns:
        The recipe dict that was written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    recipe = build_recipe(effect, settings)
    path.write_text(json.dumps(recipe, indent=2))
    return recipe


def load_recipe(path) -> tuple[str, dict]:
    """Load a recipe file.

    Returns:
        (effect name, settings dict)

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the file isn't a valid recipe.
    """
    real_path = preflight_recipe(path)
    try:
        recipe = json.loads(real_path.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Recipe is not valid JSON: {e}") from e

    if not isinstance(recipe, dict) or "effect" not in recipe:
        raise ConfigError(f"Recipe has no 'effect' key: {path}")
    settings = recipe.get("settings") or {}
    if not isinstance(settings, dict):
        raise ConfigError(f"Recipe 'settings' must be an object: {path}")
    return recipe["effect"], settings
