"""
Mystic — Mystic Symbols

One small line-art symbol per sephirah, defined in normalized 0-1 space
around the node and drawn in the inverse of the node color. Each phase
animates the symbols differently: they grow in during awakening, spin
through ascension and radiance, and fade back out in descent.

Element types:
    circle   filled disc at the node center (radius)
    ring     outline circle at the node center (radius)
    polygon  closed outline through points
    path     open polyline through points
    line     single segment (x1, y1, x2, y2)
"""

import math
from dataclasses import dataclass

from core.color import invert_color
from core.easing import ease

SYMBOL_LINE_WIDTH = 1.5
SYMBOL_ELEMENT_TYPES = ("circle", "ring", "polygon", "path", "line")


# ─── Shape generators (normalized space) ───

def regular_polygon(cx, cy, radius, sides, rotation=0.0) -> list:
    return [
        (cx + math.cos(i / sides * 2 * math.pi + rotation) * radius,
         cy + math.sin(i / sides * 2 * math.pi + rotation) * radius)
        for i in range(sides)
    ]


def star(cx, cy, radius, points=6, inner=0.6) -> list:
    """Alternating outer/inner vertices: a `points`-pointed star outline."""
    out = []
    for i in range(points * 2):
        r = radius if i % 2 == 0 else radius * inner
        angle = i / (points * 2) * 2 * math.pi
        out.append((cx + math.cos(angle) * r, cy + math.sin(angle) * r))
    return out


def rays(cx, cy, radius, count) -> list:
    """Center-to-rim spokes as one polyline that returns to the center each time."""
    out = []
    for i in range(count):
        angle = i / count * 2 * math.pi
        out.append((cx, cy))
        out.append((cx + math.cos(angle) * radius, cy + math.sin(angle) * radius))
    return out


def wave(cx, cy, amplitude, waves, steps=60) -> list:
    return [
        (cx - 0.4 + i / steps * 0.8,
         cy + math.sin(i / steps * math.pi * waves * 2) * amplitude)
        for i in range(steps + 1)
    ]


def spiral(cx, cy, max_radius, turns, steps=80) -> list:
    out = []
    for i in range(steps + 1):
        t = i / steps
        angle = t * 2 * math.pi * turns
        out.append((cx + math.cos(angle) * t * max_radius, cy + math.sin(angle) * t * max_radius))
    return out


def crescent(cx, cy, radius, steps=60) -> list:
    outer = [(cx + math.cos(i / steps * math.pi) * radius,
              cy + math.sin(i / steps * math.pi) * radius) for i in range(steps + 1)]
    inner = [(cx + math.cos(i / steps * math.pi + 0.3) * radius * 0.7,
              cy + math.sin(i / steps * math.pi + 0.3) * radius * 0.7)
             for i in range(steps, -1, -1)]
    return outer + inner


def square(cx, cy, size) -> list:
    h = size / 2
    return [(cx - h, cy - h), (cx + h, cy - h), (cx + h, cy + h), (cx - h, cy + h)]


def _cross(span=0.15):
    return [
        {"type": "line", "x1": 0.5, "y1": 0.5 - span, "x2": 0.5, "y2": 0.5 + span},
        {"type": "line", "x1": 0.5 - span, "y1": 0.5, "x2": 0.5 + span, "y2": 0.5},
    ]


# Keyed by sephirah id
SYMBOLS = {
    1: {"name": "Kether", "element": "Void/Ether", "elements": [
        {"type": "circle", "radius": 0.5},
        {"type": "polygon", "points": star(0.5, 0.5, 1.0)},
        {"type": "polygon", "points": star(0.5, 0.5, 0.6)},
        *_cross(0.3),
    ]},
    2: {"name": "Chokmah", "element": "Air", "elements": [
        {"type": "polygon", "points": [(0.5, 0.15), (0.15, 0.85), (0.85, 0.85)]},
        {"type": "ring", "radius": 0.4},
        {"type": "ring", "radius": 0.25},
    ]},
    3: {"name": "Binah", "element": "Water", "elements": [
        {"type": "polygon", "points": [(0.5, 0.85), (0.15, 0.15), (0.85, 0.15)]},
        {"type": "path", "points": wave(0.5, 0.5, 0.3, 3)},
        {"type": "ring", "radius": 0.35},
        {"type": "ring", "radius": 0.2},
    ]},
    4: {"name": "Chesed", "element": "Jupiter/Air", "elements": [
        {"type": "polygon", "points": square(0.5, 0.5, 0.6)},
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.21, 4)},
        {"type": "line", "x1": 0.5, "y1": 0.1, "x2": 0.5, "y2": 0.3},
        {"type": "line", "x1": 0.5, "y1": 0.7, "x2": 0.5, "y2": 0.9},
        {"type": "line", "x1": 0.1, "y1": 0.5, "x2": 0.3, "y2": 0.5},
        {"type": "line", "x1": 0.7, "y1": 0.5, "x2": 0.9, "y2": 0.5},
    ]},
    5: {"name": "Gevurah", "element": "Mars/Fire", "elements": [
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.4, 5)},
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.2, 5, math.pi)},
        {"type": "path", "points": rays(0.5, 0.5, 0.45, 8)},
    ]},
    6: {"name": "Tifereth", "element": "Sun/Fire", "elements": [
        {"type": "ring", "radius": 0.45},
        {"type": "ring", "radius": 0.3},
        {"type": "circle", "radius": 0.15},
        {"type": "path", "points": rays(0.5, 0.5, 0.45, 8)},
        *_cross(),
    ]},
    7: {"name": "Netzach", "element": "Venus/Water", "elements": [
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.4, 6)},
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.25, 6)},
        {"type": "circle", "radius": 0.1},
    ]},
    8: {"name": "Hod", "element": "Mercury/Air", "elements": [
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.4, 8)},
        {"type": "polygon", "points": regular_polygon(0.5, 0.5, 0.25, 8, math.pi / 8)},
        {"type": "ring", "radius": 0.12},
        *_cross(0.12),
    ]},
    9: {"name": "Yesod", "element": "Moon/Water", "elements": [
        {"type": "path", "points": crescent(0.5, 0.5, 0.35)},
        {"type": "ring", "radius": 0.4},
        {"type": "path", "points": spiral(0.5, 0.5, 0.3, 2)},
    ]},
    10: {"name": "Malkuth", "element": "Earth", "elements": [
        {"type": "polygon", "points": square(0.5, 0.5, 0.7)},
        {"type": "polygon", "points": square(0.5, 0.5, 0.5)},
        {"type": "polygon", "points": square(0.175, 0.175, 0.15)},
        {"type": "polygon", "points": square(0.825, 0.175, 0.15)},
        {"type": "polygon", "points": square(0.175, 0.825, 0.15)},
        {"type": "polygon", "points": square(0.825, 0.825, 0.15)},
        *_cross(),
    ]},
}


@dataclass(frozen=True)
class SymbolAnimation:
    scale: float
    rotation: float
    opacity: float
    glow: float


def phase_animation(phase: str, progress: float, node_id=None) -> SymbolAnimation:
    """Symbol transform for a phase at `progress` within that phase (0-1).

    Unknown phases animate like awakening.
    """
    p = min(1.0, max(0.0, float(progress)))
    if phase == "ascension":
        return SymbolAnimation(
            scale=1.0 + math.sin(p * math.pi * 4) * 0.15,
            rotation=p * math.pi * 4,
            opacity=0.9,
            glow=0.6 + math.sin(p * math.pi * 2) * 0.2,
        )
    if phase == "radiance":
        return SymbolAnimation(
            scale=1.1 + math.sin(p * math.pi * 3) * 0.1,
            rotation=p * math.pi * 6,
            opacity=1.0,
            glow=0.9 + math.sin(p * math.pi * 4) * 0.1,
        )
    if phase == "descent":
        fade = ease("easeOutQuart", 1.0 - p)
        return SymbolAnimation(
            scale=0.5 + fade * 0.5,
            rotation=(1.0 - p) * math.pi * 2,
            opacity=fade * 0.7,
            glow=fade * 0.4,
        )
    grow = ease("easeInCubic", p)
    return SymbolAnimation(scale=0.5 + grow * 0.5, rotation=0.0, opacity=grow * 0.7, glow=grow * 0.4)


class SymbolSet:
    """The symbol table for one job.

    Raises:
        ValueError: If an element has an unknown type or a polygon/path has
            fewer than two points.
    """

    def __init__(self, symbols: dict | None = None):
        symbols = SYMBOLS if symbols is None else symbols
        for node_id, symbol in symbols.items():
            for element in symbol.get("elements", []):
                kind = element.get("type")
                if kind not in SYMBOL_ELEMENT_TYPES:
                    raise ValueError(f"Symbol {node_id}: unknown element type {kind!r}")
                if kind in ("polygon", "path") and len(element.get("points", [])) < 2:
                    raise ValueError(f"Symbol {node_id}: {kind} needs at least 2 points")
        self.symbols = symbols

    def get(self, node_id):
        return self.symbols.get(node_id)

    def draw(self, canvas, node, center, radius, animation: SymbolAnimation,
             glow_size: float = 8) -> None:
        """Draw the node's symbol at `center`, `radius` pixels across the unit square."""
        symbol = self.get(node.id)
        if symbol is None:
            return
        color = invert_color(node.color)
        cx, cy = center
        size = radius * animation.scale
        cos_r = math.cos(animation.rotation)
        sin_r = math.sin(animation.rotation)

        def to_canvas(nx, ny):
            rx, ry = nx * 2 - 1, ny * 2 - 1
            return (cx + (rx * cos_r - ry * sin_r) * size,
                    cy + (rx * sin_r + ry * cos_r) * size)

        canvas.draw_ring(center, radius + glow_size, 2, color,
                         animation.opacity * animation.glow * 0.5)

        opacity = animation.opacity * 0.8
        for element in symbol["elements"]:
            kind = element["type"]
            if kind == "circle":
                canvas.draw_filled_polygon(element["radius"] * size, center, 64, 0.0, color, opacity)
            elif kind == "ring":
                canvas.draw_ring(center, element["radius"] * size, SYMBOL_LINE_WIDTH, color, opacity)
            elif kind == "line":
                canvas.draw_line(to_canvas(element["x1"], element["y1"]),
                                 to_canvas(element["x2"], element["y2"]),
                                 SYMBOL_LINE_WIDTH, color, opacity)
            else:
                points = [to_canvas(x, y) for x, y in element["points"]]
                if kind == "polygon":
                    points.append(points[0])
                canvas.draw_path(points, SYMBOL_LINE_WIDTH, color, opacity)
