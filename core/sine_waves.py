"""
Mystic — Vertical Sine Waves

Sine-wave paths running vertically through groups of three or more points,
with oscillating opacity, blur and accent per wave.

Groups:
    sequential   → 0-1-2, 3-4-5, 6-0-1 (wraps; groups with repeats dropped)
    overlapping  → 0-1-2, 1-2-3, 2-3-4 (rolling window)
"""

import math
from dataclasses import dataclass

from core.oscillation import TWO_PI, oscillate, range_bounds

SEGMENTS_PER_INTERVAL = 20


@dataclass(frozen=True)
class SineGroup:
    group_index: int
    indices: tuple
    points: tuple


@dataclass(frozen=True)
class SinePoint:
    x: float
    y: float
    t: float
    sine_value: float


@dataclass(frozen=True)
class RenderableWave:
    group_index: int
    indices: tuple
    wave_index: int
    harmonic_ratio: float
    harmonic_frequency: float
    path: list
    opacity: float
    blur: int
    accent: float


def sine_wave_groups(points, progression: str = "sequential", grouping: int = 3) -> list[SineGroup]:
    groups = []
    n = len(points)
    grouping = int(grouping)
    if n == 0 or grouping <= 0:
        return groups

    if progression == "sequential":
        for start in range(0, n, grouping):
            indices = tuple((start + j) % n for j in range(grouping))
            if len(set(indices)) == grouping:
                groups.append(SineGroup(len(groups), indices,
                                        tuple(points[i] for i in indices)))
    elif progression == "overlapping":
        for start in range(n - grouping + 1):
            indices = tuple(range(start, start + grouping))
            groups.append(SineGroup(len(groups), indices,
                                    tuple(points[i] for i in indices)))
    return groups


def sine_wave_path(group_points, amplitude: float, frequency: float,
                   total_frames, current_frame) -> list[SinePoint]:
    """Normalized path points from the first point's y to the last one's.

    x oscillates around 0.5; amplitude is in thousandths of the width.

    Raises:
        ValueError: If fewer than 3 points are given.
    """
    if len(group_points) < 3:
        raise ValueError("Sine wave paths need at least 3 points")

    total_segments = (len(group_points) - 1) * SEGMENTS_PER_INTERVAL
    start_y = group_points[0].y
    end_y = group_points[-1].y

    total = total_frames if total_frames and total_frames > 0 else 1
    osc_phase = (current_frame / total) * TWO_PI * frequency

    path = []
    for segment in range(total_segments + 1):
        t = segment / total_segments
        y = start_y + (end_y - start_y) * t
        sine_value = math.sin(osc_phase + t * TWO_PI * frequency)
        path.append(SinePoint(0.5 + sine_value * amplitude / 1000.0, y, t, sine_value))
    return path


def _oscillated(settings, prefix: str, total_frames, current_frame) -> float:
    lower, upper = range_bounds(getattr(settings, f"{prefix}_range"))
    return oscillate(
        lower, upper,
        getattr(settings, f"{prefix}_times"),
        total_frames, current_frame,
        getattr(settings, f"{prefix}_algorithm") or "sinusoidal",
    )


def renderable_sine_waves(settings, points, total_frames, current_frame,
                          amplitude: float | None = None) -> list[RenderableWave]:
    """Every sine wave to draw on this frame, with its oscillated attributes.

    `settings` carries the sine_wave_* fields of the chakra mandala. The
    oscillation algorithms must already be resolved by the generate step.
    `amplitude` overrides settings.sine_wave_amplitude (e.g. pre-scaled).
    """
    if not settings.enable_vertical_sine_waves:
        return []

    groups = sine_wave_groups(points, settings.sine_wave_progression,
                              settings.sine_wave_chakra_grouping)
    count = settings.sine_wave_count
    if count is not None and count > 0:
        groups = groups[:min(int(count), len(groups))]

    base_amplitude = settings.sine_wave_amplitude if amplitude is None else amplitude
    ratios = settings.sine_wave_harmonic_ratios or []

    waves = []
    for wave_index, group in enumerate(groups):
        ratio = ratios[wave_index % len(ratios)] if ratios else 1
        frequency = settings.sine_wave_frequency * ratio

        wave_amplitude = base_amplitude
        if settings.enable_sine_wave_amplitude_oscillation:
            lower, upper = range_bounds(settings.sine_wave_amplitude_oscillation_range)
            wave_amplitude = base_amplitude * oscillate(
                lower, upper,
                settings.sine_wave_amplitude_oscillation_times,
                total_frames, current_frame,
                settings.sine_wave_amplitude_algorithm or "sinusoidal",
            )

        waves.append(RenderableWave(
            group_index=group.group_index,
            indices=group.indices,
            wave_index=wave_index,
            harmonic_ratio=ratio,
            harmonic_frequency=frequency,
            path=sine_wave_path(group.points, wave_amplitude, frequency,
                                total_frames, current_frame),
            opacity=_oscillated(settings, "sine_wave_opacity", total_frames, current_frame),
            blur=int(math.ceil(_oscillated(settings, "sine_wave_blur", total_frames, current_frame))),
            accent=_oscillated(settings, "sine_wave_accent", total_frames, current_frame),
        ))
    return waves
