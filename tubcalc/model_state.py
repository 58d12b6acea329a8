# tubcalc/model_state.py
"""
Value objects for the tub calculator.
All inputs and outputs are frozen; every calculation builds new instances.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class MaterialsConfig:
    """Material properties (inch-pound units)."""

    water_gamma: float          # psi per inch of depth
    mdf_E: float                # psi
    aluminum_E: float           # psi
    aluminum_I: float           # in^4
    aluminum_c: float           # in, extreme fiber distance


@dataclass(frozen=True)
class TubGeometry:
    """Tub dimensions and support layout.

    ``water_depth`` is measured from the tub floor. Post counts default to
    zero, which means an unstiffened wall.
    """

    length: float
    width: float
    height: float
    t_bottom: float
    t_side: float
    water_depth: float
    n_transverse: int
    n_long_side_posts: int = 0
    n_short_side_posts: int = 0


@dataclass(frozen=True)
class FrameGeometry:
    """Aluminum extrusion frame."""

    length: float
    width: float
    height: float
    extrusion_size_mm: float


@dataclass(frozen=True)
class DeflectionResult:
    """Summary for a panel or member."""

    span: float                 # in
    load: float                 # lb/in
    M_max: float                # lb*in
    delta_max: float            # in
    sigma_max: float            # psi

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeflectionProfilePoint:
    """A deflection sample on a surface."""

    position: float             # in, along the primary axis
    deflection: float           # in
    u: float = 0.0
    v: float = 0.0
