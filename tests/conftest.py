"""
Conftest: shared fixtures for all Mystic test modules.

1. Synthetic frames (gradient and black) sized for fast drawing tests
2. Animation configs, resolved and unresolved
3. Generated effect settings with a fixed seed
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _make_test_frame(width=96, height=96):
    """Generate a synthetic test frame (gradient, not blank)."""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :, 0] = np.linspace(0, 255, width, dtype=np.uint8)  # R gradient
    frame[:, :, 1] = 64  # constant G
    frame[:, :, 2] = np.linspace(255, 0, width, dtype=np.uint8)  # B inverse
    return frame


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

@pytest.fixture
def test_frame():
    return _make_test_frame()


@pytest.fixture
def black_frame():
    return np.zeros((96, 96, 3), dtype=np.uint8)


# ---------------------------------------------------------------------------
# Animation configs
# ---------------------------------------------------------------------------

@pytest.fixture
def animation_config():
    """Default config with its easing candidates still unresolved."""
    from core.animation import AnimationConfig
    return AnimationConfig()


@pytest.fixture
def linear_config():
    """Resolved config with linear easing everywhere, for exact arithmetic."""
    from core.animation import AnimationConfig
    phases = {name: {"easing": "linear"} for name in ("awakening", "ascension", "radiance", "descent")}
    return AnimationConfig.from_dict({"phases": phases})


# ---------------------------------------------------------------------------
# Generated effect settings
# ---------------------------------------------------------------------------

@pytest.fixture
def tree_settings():
    from effects import generate_settings
    return generate_settings("treeoflife", rng=42)


@pytest.fixture
def chakra_settings():
    from effects import generate_settings
    return generate_settings("chakramandala", rng=42)
