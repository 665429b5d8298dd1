"""
Mystic — Chakra Geometry

The seven chakras, root to crown, along the central channel, and the
six adjacent connections between them.
"""

from effects.geometry import GeometryEdge, GeometryNode

# name, label, y, radius, color, glow color, frequency (Hz)
_CHAKRAS = [
    ("muladhara", "Root (Muladhara)", 0.85, 25, "#e74c3c", "#c0392b", 228),
    ("svadhisthana", "Sacral (Svadhisthana)", 0.72, 24, "#f39c12", "#d68910", 303),
    ("manipura", "Solar Plexus (Manipura)", 0.59, 24, "#f1c40f", "#d4af37", 384),
    ("anahata", "Heart (Anahata)", 0.50, 26, "#2ecc71", "#27ae60", 341),
    ("vishuddha", "Throat (Vishuddha)", 0.41, 23, "#3498db", "#2980b9", 384),
    ("ajna", "Third Eye (Ajna)", 0.28, 22, "#9b59b6", "#8e44ad", 426),
    ("sahasrara", "Crown (Sahasrara)", 0.15, 24, "#e91e63", "#c2185b", 432),
]

CHAKRA_NAMES = [c[0] for c in _CHAKRAS]

CHAKRAS = [
    GeometryNode(
        id=name, name=label, x=0.5, y=y, color=color, glow_color=glow,
        metadata={"index": i, "radius": radius, "frequency": freq},
    )
    for i, (name, label, y, radius, color, glow, freq) in enumerate(_CHAKRAS)
]

CHAKRA_CONNECTIONS = [
    GeometryEdge(a.id, b.id) for a, b in zip(CHAKRAS, CHAKRAS[1:])
]

MANDALA_RING_RADII = [0.15, 0.30, 0.45]


def chakra_by_name(name: str) -> GeometryNode | None:
    for chakra in CHAKRAS:
        if chakra.id == name:
            return chakra
    return None


def chakra_by_index(index: int) -> GeometryNode:
    return CHAKRAS[index]


class ChakraGeometry:
    name = "Chakra Mandala"
    description = "Seven chakras along the central channel, root to crown"

    def node_positions(self) -> list[GeometryNode]:
        return list(CHAKRAS)

    def path_connections(self) -> list[GeometryEdge]:
        return list(CHAKRA_CONNECTIONS)
