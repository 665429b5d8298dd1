"""
Mystic — Sephiroth Geometry

Ten sephiroth on three pillars and the 22 paths between them. Each
sephirah carries its activation order for the awakening and ascension
phases; each path carries its Hebrew letter and animation order.
"""

from effects.geometry import GeometryEdge, GeometryNode

# key, id, name, meaning, x, y, color, awakening order, ascension order
_SEPHIROTH = [
    ("kether", 1, "KETHER", "Crown", 0.50, 0.08, "#FFFFFF", 10, 1),
    ("chokmah", 2, "CHOKMAH", "Wisdom", 0.75, 0.22, "#0099FF", 9, 2),
    ("binah", 3, "BINAH", "Understanding", 0.25, 0.22, "#FF00FF", 8, 3),
    ("chesed", 4, "CHESED", "Mercy", 0.75, 0.42, "#0000FF", 6, 5),
    ("gevurah", 5, "GEVURAH", "Severity", 0.25, 0.42, "#FF0000", 7, 4),
    ("tifereth", 6, "TIFERETH", "Beauty", 0.50, 0.50, "#FFFF00", 3, 6),
    ("netzach", 7, "NETZACH", "Victory", 0.75, 0.65, "#00FF00", 4, 7),
    ("hod", 8, "HOD", "Splendor", 0.25, 0.65, "#FFFF00", 5, 8),
    ("yesod", 9, "YESOD", "Foundation", 0.50, 0.80, "#9999FF", 2, 9),
    ("malkuth", 10, "MALKUTH", "Kingdom", 0.50, 0.95, "#FFAA00", 1, 10),
]

# start, end, letter (listed in animation order)
_PATHS = [
    (1, 2, "Aleph"), (1, 3, "Beth"), (2, 3, "Gimel"),
    (2, 4, "Daleth"), (3, 5, "He"), (4, 5, "Vav"),
    (4, 6, "Zayin"), (5, 6, "Cheth"),
    (6, 7, "Teth"), (6, 8, "Yodh"),
    (4, 7, "Kaph"), (5, 8, "Lamed"), (7, 8, "Mem"),
    (7, 9, "Nun"), (8, 9, "Samekh"),
    (6, 9, "Ayin"),
    (9, 10, "Pe"),
    (2, 5, "Tsade"), (3, 4, "Qoph"), (4, 8, "Resh"), (5, 7, "Shin"),
    (1, 6, "Tav"),
]

MISSING_ORDER = 999

SEPHIROTH = [
    GeometryNode(
        id=sid, name=name, x=x, y=y, color=color, glow_color=color,
        metadata={
            "key": key,
            "meaning": meaning,
            "activation_order": {"awakening": awake, "ascension": ascend},
        },
    )
    for key, sid, name, meaning, x, y, color, awake, ascend in _SEPHIROTH
]

PATHS = [
    GeometryEdge(start, end, metadata={"id": i, "letter": letter, "order": i})
    for i, (start, end, letter) in enumerate(_PATHS, start=1)
]


def sephirah_by_name(name: str) -> GeometryNode | None:
    key = name.lower()
    for node in SEPHIROTH:
        if node.metadata["key"] == key:
            return node
    return None


def sephirah_by_id(node_id: int) -> GeometryNode | None:
    for node in SEPHIROTH:
        if node.id == node_id:
            return node
    return None


def node_activation_order(phase: str) -> list[GeometryNode]:
    """Sephiroth sorted by their activation order in a phase.

    Phases without an order (radiance, descent) sort every node as 999,
    which keeps the table order.
    """
    return sorted(
        SEPHIROTH,
        key=lambda n: n.metadata["activation_order"].get(phase) or MISSING_ORDER,
    )


def path_animation_order() -> list[GeometryEdge]:
    return sorted(PATHS, key=lambda p: p.metadata["order"])


class SephirothGeometry:
    name = "Tree of Life"
    description = "Ten sephiroth connected by the 22 paths"

    def node_positions(self) -> list[GeometryNode]:
        return list(SEPHIROTH)

    def path_connections(self) -> list[GeometryEdge]:
        return list(PATHS)
