"""
Mystic — Frame Render Pipeline

Renders a generated job frame by frame:
  1. The generate step resolves every random choice and writes a recipe
  2. Each frame rebuilds its settings from the recipe JSON and draws

Frames never share engine objects, so any frame can be rendered alone,
in any order, by any process.
"""

import json
import logging
import time
from pathlib import Path

import numpy as np
from PIL import Image

from core.safety import validate_render_request

logger = logging.getLogger(__name__)


def blank_frame(width: int, height: int, background=None) -> np.ndarray:
    """Solid RGB frame. background is an RGB triple or None for black."""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    if background is not None:
        frame[:, :] = np.clip(np.array(background[:3]), 0, 255).astype(np.uint8)
    return frame


def render_frame(effect: str, settings, frame_index: int, total_frames: int,
                 width: int, height: int, background=None) -> np.ndarray:
    """Render one frame of an effect onto a blank (or given) background.

    Args:
        settings: Settings dataclass or the plain dict from a recipe.
        background: RGB triple, an (H, W, 3) array, or None for black.
    """
    from effects import apply_effect

    if isinstance(background, np.ndarray):
        frame = background.copy()
    else:
        frame = blank_frame(width, height, background)
    return apply_effect(frame, effect, frame_index=frame_index,
                        total_frames=total_frames, settings=settings)


def render_sequence(effect: str, settings: dict, total_frames: int, width: int, height: int,
                    output_dir, background=None, progress_callback=None) -> list[Path]:
    """Render every frame of one animation cycle to PNG files.

    The settings go through a JSON round trip before each frame, the way a
    worker process would receive them.

    Args:
        settings: Plain (already generated) settings dict.
        output_dir: Directory for frame_000000.png, frame_000001.png, ...
        progress_callback: Optional fn(frame_index, total_frames).

    Returns:
        List of written frame paths.

    Raises:
        ConfigError: If the dimensions or frame count are out of range.
    """
    validate_render_request(width, height, total_frames)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    blob = json.dumps(settings)
    written = []
    start_time = time.time()
    for frame_index in range(total_frames):
        frame_settings = json.loads(blob)
        frame = render_frame(effect, frame_settings, frame_index, total_frames,
                             width, height, background)
        path = output_dir / f"frame_{frame_index:06d}.png"
        save_frame(frame, path)
        written.append(path)
        if progress_callback:
            progress_callback(frame_index, total_frames)

    elapsed = time.time() - start_time
    logger.info("Rendered %d frames of %s in %.1fs", total_frames, effect, elapsed)
    return written


def save_frame(array: np.ndarray, output_path) -> None:
    """Save a numpy array (H, W, 3) as PNG."""
    img = Image.fromarray(np.clip(array, 0, 255).astype(np.uint8))
    img.save(str(output_path))
