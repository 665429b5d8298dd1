"""
Mystic — Sacred Geometry Descriptors

A geometry is anything that can list its nodes and its path connections.
Effects don't inherit from a shared base; they hand a descriptor to the
free-standing render_nodes/render_paths pipeline below and plug their own
drawing in through its hooks.
"""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class GeometryNode:
    """A point in normalized 0-1 canvas space."""
    id: int | str
    name: str
    x: float
    y: float
    color: str = "#FFFFFF"
    glow_color: str = "#FFFF00"
    metadata: dict = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class GeometryEdge:
    from_id: int | str
    to_id: int | str
    metadata: dict = field(default_factory=dict, hash=False, compare=False)


class GeometryDescriptor(Protocol):
    name: str
    description: str

    def node_positions(self) -> list[GeometryNode]: ...

    def path_connections(self) -> list[GeometryEdge]: ...


def geometry_metadata(geometry: GeometryDescriptor) -> dict:
    return {
        "name": getattr(geometry, "name", type(geometry).__name__),
        "description": getattr(geometry, "description", ""),
        "node_count": len(geometry.node_positions()),
        "path_count": len(geometry.path_connections()),
    }


def node_lookup(geometry: GeometryDescriptor) -> dict:
    return {node.id: node for node in geometry.node_positions()}


def transform_coordinate(x: float, y: float, width: int, height: int,
                         scale: float = 1.0, center_x: float = 0.5,
                         center_y: float = 0.5) -> tuple[float, float]:
    """Normalized coordinate → canvas pixels.

    Scales about the canvas center, then shifts so that 0.5 lands on
    (center_x, center_y).
    """
    scaled_x = 0.5 + (x - 0.5) * scale
    scaled_y = 0.5 + (y - 0.5) * scale
    return ((scaled_x - 0.5) + center_x) * width, ((scaled_y - 0.5) + center_y) * height


def _transform(settings, node: GeometryNode, width: int, height: int):
    return transform_coordinate(
        node.x, node.y, width, height,
        getattr(settings, "scale", 1.0),
        getattr(settings, "center_x", 0.5),
        getattr(settings, "center_y", 0.5),
    )


def render_nodes(canvas, geometry: GeometryDescriptor, frame_state, settings,
                 nodes=None, draw_node=None) -> None:
    """Draw every node at its canvas position.

    `nodes` overrides the descriptor's order. `draw_node(canvas, node, pos)`
    replaces the default hexagon with a glow ring at half the node alpha.
    """
    alpha = frame_state.get("node_alpha", 1.0)
    node_size = getattr(settings, "node_size", 20) or 20
    glow_size = getattr(settings, "node_glow_size", 25) or 25
    for node in geometry.node_positions() if nodes is None else nodes:
        pos = _transform(settings, node, canvas.width, canvas.height)
        if draw_node is not None:
            draw_node(canvas, node, pos)
            continue
        canvas.draw_filled_polygon(node_size, pos, 6, 0.0, node.color or "#FFFFFF", alpha)
        canvas.draw_ring(pos, glow_size, 3, node.glow_color or "#FFFF00", alpha * 0.5)


def render_paths(canvas, geometry: GeometryDescriptor, frame_state, settings,
                 color: str = "#FFFF00", edges=None, decorate=None) -> None:
    """Straight line per connection at the frame's path intensity.

    `edges` overrides the descriptor's order. Connections to unknown nodes
    are skipped. `decorate(canvas, edge, start, end, thickness)` runs after
    each line is drawn.
    """
    intensity = frame_state.get("path_intensity", 1.0)
    thickness = (getattr(settings, "path_thickness", 2) or 2) * \
        (getattr(settings, "path_size_scale", 1.0) or 1.0)
    nodes = node_lookup(geometry)
    for edge in geometry.path_connections() if edges is None else edges:
        a = nodes.get(edge.from_id)
        b = nodes.get(edge.to_id)
        if a is None or b is None:
            continue
        start = _transform(settings, a, canvas.width, canvas.height)
        end = _transform(settings, b, canvas.width, canvas.height)
        canvas.draw_line(start, end, thickness, color, intensity)
        if decorate is not None:
            decorate(canvas, edge, start, end, thickness)
