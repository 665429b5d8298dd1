"""
Mystic — Canvas
Transparent drawing layer with the primitives effects draw with: lines,
regular polygons, rings, polylines, blur and layer compositing.

Pixels are stored premultiplied (color * alpha, 0-255 float) with a
separate 0-1 alpha plane, so blurring and stacking layers stay correct.
Shapes are rasterized anti-aliased with OpenCV into a coverage mask and
stamped onto the layer with the "over" operator.
"""

import logging
import math

import cv2
import numpy as np

from core.color import parse_color

logger = logging.getLogger(__name__)

# Sub-pixel precision bits for cv2 drawing calls.
_SHIFT = 4
_SCALE = 1 << _SHIFT


def _normalize_mode(mode) -> str:
    return str(mode or "normal").strip().lower().replace("_", "-")


def _safe_div(a, b):
    return np.where(b > 0, a / np.maximum(b, 1e-6), 255.0)


BLEND_FNS = {
    "screen": lambda b, t: 255.0 - (255.0 - b) * (255.0 - t) / 255.0,
    "overlay": lambda b, t: np.where(b < 128.0, 2.0 * b * t / 255.0,
                                     255.0 - 2.0 * (255.0 - b) * (255.0 - t) / 255.0),
    "lighten": lambda b, t: np.maximum(b, t),
    "darken": lambda b, t: np.minimum(b, t),
    "multiply": lambda b, t: b * t / 255.0,
    "add": lambda b, t: np.minimum(255.0, b + t),
    "difference": lambda b, t: np.abs(b - t),
    "soft-light": lambda b, t: (1.0 - 2.0 * t / 255.0) * (b ** 2 / 255.0) + 2.0 * t / 255.0 * b,
    "color-dodge": lambda b, t: np.minimum(255.0, _safe_div(b * 255.0, 255.0 - t)),
    "color-burn": lambda b, t: 255.0 - np.minimum(255.0, _safe_div((255.0 - b) * 255.0, t)),
}

BLEND_MODES = ("normal",) + tuple(BLEND_FNS)


def blend(base: np.ndarray, top: np.ndarray, mode: str = "normal") -> np.ndarray:
    """Blend two float RGB arrays (0-255). Unknown modes behave as normal."""
    fn = BLEND_FNS.get(_normalize_mode(mode))
    if fn is None:
        return top
    return fn(base, top)


class Canvas:
    """A transparent RGBA layer the size of the output frame."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.color = np.zeros((self.height, self.width, 3), dtype=np.float32)
        self.alpha = np.zeros((self.height, self.width), dtype=np.float32)

    def like(self) -> "Canvas":
        """An empty canvas with the same size."""
        return Canvas(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return not self.alpha.any()

    # ─── Rasterization ───

    def _roi(self, xs, ys, pad: float):
        x0 = max(0, int(math.floor(min(xs) - pad)))
        y0 = max(0, int(math.floor(min(ys) - pad)))
        x1 = min(self.width, int(math.ceil(max(xs) + pad)) + 1)
        y1 = min(self.height, int(math.ceil(max(ys) + pad)) + 1)
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, x1, y1

    @staticmethod
    def _fixed(points, x0, y0):
        return np.array(
            [[int(round((x - x0) * _SCALE)), int(round((y - y0) * _SCALE))] for x, y in points],
            dtype=np.int32,
        )

    def _stamp(self, mask: np.ndarray, roi, color, opacity: float) -> None:
        x0, y0, x1, y1 = roi
        a = (mask.astype(np.float32) / 255.0) * opacity
        if not a.any():
            return
        rgb = np.array(parse_color(color), dtype=np.float32)
        region = self.color[y0:y1, x0:x1]
        inv = 1.0 - a
        self.color[y0:y1, x0:x1] = rgb * a[..., None] + region * inv[..., None]
        self.alpha[y0:y1, x0:x1] = a + self.alpha[y0:y1, x0:x1] * inv

    @staticmethod
    def _visible(opacity) -> bool:
        try:
            return float(opacity) > 0.0
        except (TypeError, ValueError):
            return False

    # ─── Primitives ───

    def draw_line(self, p1, p2, thickness, color, opacity=1.0) -> None:
        if not self._visible(opacity) or thickness <= 0:
            return
        self.draw_path([p1, p2], thickness, color, opacity)

    def draw_path(self, points, thickness, color, opacity=1.0) -> None:
        """Open polyline through points, stamped once so joins don't double up."""
        if not self._visible(opacity) or thickness <= 0 or len(points) < 2:
            return
        pts = [(float(x), float(y)) for x, y in points]
        if not all(math.isfinite(v) for pt in pts for v in pt):
            return
        width = max(1, int(round(thickness)))
        roi = self._roi([p[0] for p in pts], [p[1] for p in pts], width + 2)
        if roi is None:
            return
        x0, y0, x1, y1 = roi
        mask = np.zeros((y1 - y0, x1 - x0), dtype=np.uint8)
        cv2.polylines(mask, [self._fixed(pts, x0, y0)], False, 255, width, cv2.LINE_AA, _SHIFT)
        self._stamp(mask, roi, color, min(1.0, float(opacity)))

    def draw_filled_polygon(self, radius, center, sides, rotation, color, opacity=1.0) -> None:
        """Regular polygon with `sides` vertices; rotation in radians."""
        if not self._visible(opacity) or radius <= 0 or sides < 3:
            return
        cx, cy = float(center[0]), float(center[1])
        if not (math.isfinite(cx) and math.isfinite(cy) and math.isfinite(radius)):
            return
        pts = [
            (cx + radius * math.cos(rotation + 2 * math.pi * i / sides),
             cy + radius * math.sin(rotation + 2 * math.pi * i / sides))
            for i in range(int(sides))
        ]
        roi = self._roi([p[0] for p in pts], [p[1] for p in pts], 2)
        if roi is None:
            return
        x0, y0, x1, y1 = roi
        mask = np.zeros((y1 - y0, x1 - x0), dtype=np.uint8)
        cv2.fillPoly(mask, [self._fixed(pts, x0, y0)], 255, cv2.LINE_AA, _SHIFT)
        self._stamp(mask, roi, color, min(1.0, float(opacity)))

    def draw_ring(self, center, radius, stroke_width, color, opacity=1.0) -> None:
        if not self._visible(opacity) or radius <= 0 or stroke_width <= 0:
            return
        cx, cy = float(center[0]), float(center[1])
        if not (math.isfinite(cx) and math.isfinite(cy) and math.isfinite(radius)):
            return
        width = max(1, int(round(stroke_width)))
        pad = radius + width + 2
        roi = self._roi([cx], [cy], pad)
        if roi is None:
            return
        x0, y0, x1, y1 = roi
        mask = np.zeros((y1 - y0, x1 - x0), dtype=np.uint8)
        c = (int(round((cx - x0) * _SCALE)), int(round((cy - y0) * _SCALE)))
        cv2.circle(mask, c, int(round(radius * _SCALE)), 255, width, cv2.LINE_AA, _SHIFT)
        self._stamp(mask, roi, color, min(1.0, float(opacity)))

    def blur(self, radius) -> None:
        """Gaussian blur of the whole layer (color and alpha together)."""
        if radius is None or radius <= 0 or self.is_empty:
            return
        sigma = max(0.5, float(radius) / 2.0)
        self.color = cv2.GaussianBlur(self.color, (0, 0), sigma)
        self.alpha = cv2.GaussianBlur(self.alpha, (0, 0), sigma)

    def composite_layer(self, layer: "Canvas", opacity=1.0) -> None:
        """Stack another layer on top of this one."""
        if layer is None or not self._visible(opacity):
            return
        if (layer.width, layer.height) != (self.width, self.height):
            raise ValueError(
                f"Layer size {layer.width}x{layer.height} does not match "
                f"canvas {self.width}x{self.height}"
            )
        op = min(1.0, float(opacity))
        a = layer.alpha * op
        inv = 1.0 - a
        self.color = layer.color * op + self.color * inv[..., None]
        self.alpha = a + self.alpha * inv

    # ─── Output ───

    def composite_onto(self, frame: np.ndarray, opacity=1.0, blend_mode="normal") -> np.ndarray:
        """Blend this layer onto an RGB frame. Returns a new uint8 RGB frame."""
        base = frame[:, :, :3] if frame.ndim == 3 and frame.shape[2] == 4 else frame
        if base.shape[:2] != (self.height, self.width):
            raise ValueError(
                f"Frame size {base.shape[1]}x{base.shape[0]} does not match "
                f"canvas {self.width}x{self.height}"
            )
        b_f = base.astype(np.float32)
        if not self._visible(opacity) or self.is_empty:
            return base.astype(np.uint8).copy()

        mode = _normalize_mode(blend_mode)
        if mode not in BLEND_MODES:
            logger.debug("Unknown blend mode %r, using normal", blend_mode)

        a = np.clip(self.alpha * min(1.0, float(opacity)), 0.0, 1.0)[..., None]
        top = np.where(self.alpha[..., None] > 0,
                       self.color / np.maximum(self.alpha[..., None], 1e-6), 0.0)
        top = np.clip(top, 0.0, 255.0)
        blended = blend(b_f, top, mode)
        result = b_f * (1.0 - a) + blended * a
        return np.clip(result, 0, 255).astype(np.uint8)

    def to_rgba(self) -> np.ndarray:
        """Unpremultiplied uint8 RGBA snapshot of the layer."""
        a = self.alpha[..., None]
        rgb = np.where(a > 0, self.color / np.maximum(a, 1e-6), 0.0)
        out = np.concatenate([np.clip(rgb, 0, 255), np.clip(a * 255.0, 0, 255)], axis=2)
        return out.astype(np.uint8)
