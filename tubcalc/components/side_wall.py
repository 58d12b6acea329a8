# tubcalc/components/side_wall.py
"""
Side wall components - MDF walls stiffened by vertical posts.
Short and long walls share one design and differ only in which tub
dimension runs along the wall and which post count applies.
"""
from abc import abstractmethod

from tubcalc.components.base_component import BaseComponent
from tubcalc.model_state import DeflectionResult
from tubcalc.formulas import (
    plate_flexural_rigidity,
    plate_max_deflection,
    rectangular_moment_of_inertia,
    beam_deflection_uniform,
    bending_stress,
)
from tubcalc.loads import average_side_pressure, side_line_load


class SideWall(BaseComponent):
    """Wall panel subdivided by ``post_count`` posts."""

    @property
    @abstractmethod
    def wall_length(self) -> float:
        """Full horizontal run of the wall (in)."""
        pass

    @property
    @abstractmethod
    def post_count(self) -> int:
        pass

    @property
    def panel_count(self) -> int:
        return max(0, self.post_count or 0) + 1

    @property
    def panel_width(self) -> float:
        """Clear width between posts."""
        return self.wall_length / self.panel_count

    @property
    def stiffness_scale(self) -> float:
        """Fourth-power span reduction from subdividing the wall."""
        return (self.panel_width / self.wall_length) ** 4

    def compute(self) -> DeflectionResult:
        """Compute wall deflection and bending stress between posts."""
        t = self.tub.t_side
        H = self.tub.height
        E = self.materials.mdf_E

        q_side = average_side_pressure(self.tub, self.materials)
        D = plate_flexural_rigidity(E, t)
        base_delta = plate_max_deflection(q_side, H, D)
        delta_max = base_delta * self.stiffness_scale

        # Horizontal strip spanning post to post over the full wall height
        span = self.panel_width
        w = side_line_load(self.tub, self.materials)
        I = rectangular_moment_of_inertia(H, t)
        M_max, _ = beam_deflection_uniform(span, w, E, I)
        sigma_max = bending_stress(M_max, t / 2, I)

        self.logger.debug(
            f"{self.panel_count} panel(s) of {span:.2f} in, "
            f"scale={self.stiffness_scale:.5f}"
        )

        result = DeflectionResult(
            span=span,
            load=w,
            M_max=M_max,
            delta_max=delta_max,
            sigma_max=sigma_max,
        )
        self._log_result(result)
        return result


class ShortWall(SideWall):
    """End wall running along the tub width."""

    @property
    def wall_length(self) -> float:
        return self.tub.width

    @property
    def post_count(self) -> int:
        return self.tub.n_short_side_posts


class LongWall(SideWall):
    """Side wall running along the tub length."""

    @property
    def wall_length(self) -> float:
        return self.tub.length

    @property
    def post_count(self) -> int:
        return self.tub.n_long_side_posts
