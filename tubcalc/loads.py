# tubcalc/loads.py
"""
Hydrostatic load derivation.
Turns water depth and tub geometry into pressures and line loads.
"""
from tubcalc.model_state import TubGeometry, MaterialsConfig


def effective_water_depth(tub: TubGeometry) -> float:
    """Water depth from the floor, clamped to the tub height."""
    return min(tub.water_depth, tub.height)


def bottom_pressure(tub: TubGeometry, materials: MaterialsConfig) -> float:
    """Full hydrostatic pressure on the floor, q = gamma h (psi)."""
    return materials.water_gamma * effective_water_depth(tub)


def average_side_pressure(tub: TubGeometry, materials: MaterialsConfig) -> float:
    """Mean of the triangular wall pressure, q = gamma h / 2 (psi)."""
    return materials.water_gamma * effective_water_depth(tub) / 2


def extrusion_pressure(tub: TubGeometry, materials: MaterialsConfig) -> float:
    """Pressure carried by the transverse floor extrusions (psi).

    The extrusions are loaded with the depth-averaged pressure gamma h / 2,
    not the full floor pressure.
    """
    return materials.water_gamma * effective_water_depth(tub) / 2


def tributary_line_load(pressure: float, tributary_width: float) -> float:
    """Load intensity on a member carrying ``tributary_width`` of wetted area."""
    return pressure * tributary_width


def side_line_load(tub: TubGeometry, materials: MaterialsConfig) -> float:
    """Lateral load per inch of wall run, w = q_side h (lb/in).

    Equal to the integrated triangular profile gamma h^2 / 2.
    """
    return tributary_line_load(average_side_pressure(tub, materials), effective_water_depth(tub))


def water_fill_fraction(tub: TubGeometry) -> float:
    """Wetted fraction of the tub height, in [0, 1]."""
    if tub.height <= 0:
        return 0.0
    return max(0.0, min(1.0, effective_water_depth(tub) / tub.height))
