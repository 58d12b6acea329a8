# tubcalc/components/frame_extrusion.py
"""
Frame extrusion component - transverse aluminum members under the floor.
"""
from tubcalc.components.base_component import BaseComponent
from tubcalc.model_state import TubGeometry, FrameGeometry, MaterialsConfig, DeflectionResult
from tubcalc.formulas import beam_deflection_uniform, bending_stress
from tubcalc.loads import extrusion_pressure
from tubcalc.constants import mm


class FrameExtrusion(BaseComponent):
    """One transverse extrusion spanning the frame width."""

    def __init__(self, tub: TubGeometry, frame: FrameGeometry, materials: MaterialsConfig):
        """Initialize extrusion component.

        Args:
            tub: TubGeometry instance
            frame: FrameGeometry instance
            materials: MaterialsConfig instance
        """
        super().__init__(tub, materials)
        self.frame = frame

    @property
    def extrusion_size(self) -> float:
        """Extrusion side dimension in inches."""
        return self.frame.extrusion_size_mm * mm

    @property
    def clear_span(self) -> float:
        return self.frame.width - 2 * self.extrusion_size

    @property
    def tributary_length(self) -> float:
        """Length of floor carried by each extrusion."""
        return self.tub.length / max(1, self.tub.n_transverse)

    def compute(self) -> DeflectionResult:
        """Compute extrusion deflection and bending stress."""
        L = self.clear_span
        p_avg = extrusion_pressure(self.tub, self.materials)

        area = self.tributary_length * self.tub.width
        total_load = p_avg * area
        w = total_load / L

        E = self.materials.aluminum_E
        I = self.materials.aluminum_I
        M_max, delta_max = beam_deflection_uniform(L, w, E, I)
        sigma_max = bending_stress(M_max, self.materials.aluminum_c, I)

        self.logger.debug(f"Tributary area {area:.1f} in^2, total load {total_load:.2f} lb")

        result = DeflectionResult(
            span=L,
            load=w,
            M_max=M_max,
            delta_max=delta_max,
            sigma_max=sigma_max,
        )
        self._log_result(result)
        return result
