# tubcalc/profiles.py
"""
Deflection profile samplers for visualization.

Mode-shape profiles scale a single-hump sin(pi u) sin(pi v) shape by the
surface's max deflection at fixed normalized sample points. Span strip
profiles sample the simply supported beam curve evenly along a surface,
repeating it in every span between supports.
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple

from tubcalc.formulas import mode_shape, beam_deflection_uniform_at
from tubcalc.model_state import DeflectionProfilePoint


class SamplePattern(Enum):
    GRID_11 = "grid_11"
    CORNERS_5 = "corners_5"


# (u, v) pairs, u along the primary span axis. Order is relied upon by
# point labels in the renderers.
SAMPLE_POINTS: Dict[SamplePattern, Tuple[Tuple[float, float], ...]] = {
    SamplePattern.GRID_11: (
        (0.05, 0.80),
        (1 / 3, 0.80),
        (2 / 3, 0.80),
        (0.95, 0.80),
        (0.15, 0.50),
        (0.85, 0.50),
        (0.05, 0.20),
        (1 / 3, 0.20),
        (2 / 3, 0.20),
        (0.95, 0.20),
        (0.50, 0.50),
    ),
    SamplePattern.CORNERS_5: (
        (0.05, 0.10),
        (0.95, 0.10),
        (0.50, 0.50),
        (0.05, 0.90),
        (0.95, 0.90),
    ),
}


def mode_shape_profile(w_max: float, dimension: float,
                       pattern: SamplePattern,
                       n_points: Optional[int] = None) -> List[DeflectionProfilePoint]:
    """Sample the plate mode shape at the pattern's points.

    Args:
        w_max: Max deflection of the surface (in)
        dimension: Physical length along u (in)
        pattern: Sample pattern to use
        n_points: Truncate to the first n points (default: whole pattern)

    Returns:
        Points in pattern order
    """
    points = SAMPLE_POINTS[pattern]
    if n_points is not None:
        points = points[:max(0, n_points)]

    return [
        DeflectionProfilePoint(
            position=u * dimension,
            deflection=w_max * mode_shape(u, v),
            u=u,
            v=v,
        )
        for u, v in points
    ]


def span_strip_profile(total_length: float, span: float, w: float,
                       E: float, I: float, n_points: int) -> List[DeflectionProfilePoint]:
    """Evenly spaced beam-strip deflections along a multi-span surface.

    Args:
        total_length: Full surface length (in)
        span: Distance between supports (in)
        w: Line load on the strip (lb/in)
        E: Modulus (psi)
        I: Strip moment of inertia (in^4)
        n_points: Number of samples, ends included

    Returns:
        Points ordered by position
    """
    if n_points <= 1:
        mid = span / 2
        return [DeflectionProfilePoint(
            position=mid,
            deflection=beam_deflection_uniform_at(span, w, E, I, mid),
            u=mid / total_length,
        )]

    dx = total_length / (n_points - 1)
    result = []
    for i in range(n_points):
        x_global = i * dx
        x_local = x_global % span
        result.append(DeflectionProfilePoint(
            position=x_global,
            deflection=beam_deflection_uniform_at(span, w, E, I, x_local),
            u=x_global / total_length,
        ))
    return result
