# tubcalc/formulas.py
"""
Closed-form plate and beam formulas.
Pure functions, inch-pound units throughout.
"""
from typing import Tuple

import numpy as np

from tubcalc.constants import POISSON_MDF


def plate_flexural_rigidity(E: float, t: float, nu: float = POISSON_MDF) -> float:
    """Flexural rigidity of a plate, D = E t^3 / [12 (1 - nu^2)].

    Args:
        E: Modulus of elasticity (psi)
        t: Plate thickness (in)
        nu: Poisson's ratio

    Returns:
        Rigidity D (lb*in)
    """
    return E * t ** 3 / (12 * (1 - nu ** 2))


def plate_max_deflection(q: float, a: float, D: float) -> float:
    """Max deflection of a simply supported rectangular plate under uniform load.

    delta_max = q a^4 / (64 D), with ``a`` the short side.
    """
    return q * a ** 4 / (64 * D)


def rectangular_moment_of_inertia(b: float, t: float) -> float:
    """I = b t^3 / 12 for a solid rectangle bending about its width."""
    return b * t ** 3 / 12


def beam_deflection_uniform(L: float, w: float, E: float, I: float) -> Tuple[float, float]:
    """Midspan moment and deflection of a simply supported beam under uniform load.

    Args:
        L: Span (in)
        w: Uniform load (lb/in)
        E: Modulus (psi)
        I: Moment of inertia (in^4)

    Returns:
        Tuple of (M_max, delta_max)
    """
    M_max = w * L ** 2 / 8
    delta_max = 5 * w * L ** 4 / (384 * E * I)
    return M_max, delta_max


def beam_deflection_uniform_at(L: float, w: float, E: float, I: float, x: float) -> float:
    """Deflection at ``x`` of a simply supported beam under uniform load.

    v(x) = w x (L^3 - 2 L x^2 + x^3) / (24 E I), zero at both supports.
    """
    return w * x * (L ** 3 - 2 * L * x ** 2 + x ** 3) / (24 * E * I)


def bending_stress(M: float, c: float, I: float) -> float:
    return M * c / I


def mode_shape(u: float, v: float) -> float:
    """sin(pi u) sin(pi v); 1 at the plate center, 0 on every edge."""
    # Edges are pinned to zero so sin(pi) round-off does not leak through
    if u <= 0.0 or u >= 1.0 or v <= 0.0 or v >= 1.0:
        return 0.0
    return float(np.sin(np.pi * u) * np.sin(np.pi * v))
