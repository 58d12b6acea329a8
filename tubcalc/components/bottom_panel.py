# tubcalc/components/bottom_panel.py
"""
Bottom panel component - MDF floor between transverse extrusions.
"""
from typing import Tuple

from tubcalc.components.base_component import BaseComponent
from tubcalc.model_state import DeflectionResult
from tubcalc.formulas import (
    plate_flexural_rigidity,
    plate_max_deflection,
    rectangular_moment_of_inertia,
    beam_deflection_uniform,
    bending_stress,
)
from tubcalc.loads import bottom_pressure, tributary_line_load


class BottomPanel(BaseComponent):
    """MDF floor panel, modelled as a plate simply supported on four edges."""

    @property
    def panel_length(self) -> float:
        """Distance between transverse supports along the tub length."""
        return self.tub.length / max(1, self.tub.n_transverse - 1)

    def plate_sides(self) -> Tuple[float, float]:
        """Short and long side of one bottom panel.

        Returns:
            Tuple of (a, b) with a <= b
        """
        a = min(self.panel_length, self.tub.width)
        b = max(self.panel_length, self.tub.width)
        return a, b

    def compute(self) -> DeflectionResult:
        """Compute floor deflection and bending stress."""
        q = bottom_pressure(self.tub, self.materials)
        a, b = self.plate_sides()
        t = self.tub.t_bottom

        D = plate_flexural_rigidity(self.materials.mdf_E, t)
        delta_max = plate_max_deflection(q, a, D)

        # Stress: beam of span a, full panel width b
        w_line = tributary_line_load(q, b)
        I_beam = rectangular_moment_of_inertia(b, t)
        M_max, _ = beam_deflection_uniform(a, w_line, self.materials.mdf_E, I_beam)
        sigma_max = bending_stress(M_max, t / 2, I_beam)

        result = DeflectionResult(
            span=a,
            load=w_line,
            M_max=M_max,
            delta_max=delta_max,
            sigma_max=sigma_max,
        )
        self._log_result(result)
        return result
