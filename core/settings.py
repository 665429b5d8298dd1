"""
Mystic — Settings Serialization
Effect settings are dataclasses holding plain JSON values plus one nested
AnimationConfig. These helpers move them to and from plain dicts.
"""

import copy
import logging
from dataclasses import fields

from core.animation import AnimationConfig

logger = logging.getLogger(__name__)


def settings_to_dict(settings) -> dict:
    out = {}
    for f in fields(settings):
        value = getattr(settings, f.name)
        if isinstance(value, AnimationConfig):
            out[f.name] = value.to_dict()
        else:
            out[f.name] = copy.deepcopy(value)
    return out


def settings_from_dict(cls, d: dict | None):
    """Build a settings dataclass from plain data.

    Unknown keys are logged and ignored; missing keys keep their defaults.
    """
    d = d or {}
    known = {f.name: f for f in fields(cls)}
    kwargs = {}
    for key, value in d.items():
        if key not in known:
            logger.debug("Ignoring unknown setting %r for %s", key, cls.__name__)
            continue
        if key == "animation" and not isinstance(value, AnimationConfig):
            value = AnimationConfig.from_dict(value)
        kwargs[key] = copy.deepcopy(value)
    return cls(**kwargs)


def apply_overrides(settings, overrides: dict | None):
    """A copy of `settings` with some keys replaced (animation merged key by key)."""
    if not overrides:
        return settings_from_dict(type(settings), settings_to_dict(settings))
    data = settings_to_dict(settings)
    for key, value in overrides.items():
        if key == "animation" and isinstance(value, dict):
            data["animation"] = _merge(data.get("animation") or {}, value)
        else:
            data[key] = value
    return settings_from_dict(type(settings), data)


def _merge(base: dict, extra: dict) -> dict:
    merged = dict(base)
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
