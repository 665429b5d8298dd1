"""
Mystic — Color Helpers

Hex/RGB conversion, parsing and inversion. Colors travel through configs as
plain "#RRGGBB" strings so they survive JSON round trips.
"""

import colorsys
import re

_HEX6 = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
_HEX3 = re.compile(r"^#?([0-9a-f])([0-9a-f])([0-9a-f])$", re.IGNORECASE)
_HSL = re.compile(
    r"^hsla?\(\s*(-?[\d.]+)\s*,\s*([\d.]+)%\s*,\s*([\d.]+)%\s*(?:,\s*[\d.]+\s*)?\)$",
    re.IGNORECASE,
)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse "#RRGGBB" (hash optional). Invalid input → black."""
    match = _HEX6.match(value.strip()) if isinstance(value, str) else None
    if not match:
        return (0, 0, 0)
    return tuple(int(g, 16) for g in match.groups())


def rgb_to_hex(r, g, b) -> str:
    """Format an RGB triple as uppercase "#RRGGBB"."""
    parts = [max(0, min(255, int(round(c)))) for c in (r, g, b)]
    return "#" + "".join(f"{c:02X}" for c in parts)


def parse_color(value, fallback=(255, 255, 255)) -> tuple[int, int, int]:
    """Parse any supported color notation into an RGB triple.

    Accepts "#RGB", "#RRGGBB", "hsl(h, s%, l%)" and 3-element sequences.
    """
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return tuple(max(0, min(255, int(c))) for c in value)
    if not isinstance(value, str):
        return fallback

    text = value.strip()
    if _HEX6.match(text):
        return hex_to_rgb(text)
    match = _HEX3.match(text)
    if match:
        return tuple(int(g * 2, 16) for g in match.groups())
    match = _HSL.match(text)
    if match:
        h = (float(match.group(1)) % 360.0) / 360.0
        s = min(100.0, float(match.group(2))) / 100.0
        l = min(100.0, float(match.group(3))) / 100.0
        r, g, b = colorsys.hls_to_rgb(h, l, s)
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))
    return fallback


def invert_color(value) -> str:
    r, g, b = parse_color(value)
    return rgb_to_hex(255 - r, 255 - g, 255 - b)
