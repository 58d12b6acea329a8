# tubcalc/calculator.py
"""
Public calculation surface and the orchestrator that runs every component
for one set of inputs.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from tubcalc.model_state import (
    TubGeometry,
    FrameGeometry,
    MaterialsConfig,
    DeflectionResult,
    DeflectionProfilePoint,
)
from tubcalc.components.bottom_panel import BottomPanel
from tubcalc.components.side_wall import ShortWall, LongWall
from tubcalc.components.frame_extrusion import FrameExtrusion
from tubcalc.profiles import SamplePattern, mode_shape_profile, span_strip_profile
from tubcalc.formulas import rectangular_moment_of_inertia
from tubcalc.loads import bottom_pressure, side_line_load, water_fill_fraction

logger = logging.getLogger(__name__)


# =========================================================================
# Panel and member results
# =========================================================================

def mdf_bottom_deflection(tub: TubGeometry, materials: MaterialsConfig) -> DeflectionResult:
    """Bottom panel summary."""
    return BottomPanel(tub, materials).compute()


def short_side_deflection(tub: TubGeometry, materials: MaterialsConfig) -> DeflectionResult:
    """Short (end) wall summary."""
    return ShortWall(tub, materials).compute()


def long_side_deflection(tub: TubGeometry, materials: MaterialsConfig) -> DeflectionResult:
    """Long (side) wall summary."""
    return LongWall(tub, materials).compute()


def extrusion_deflection(tub: TubGeometry, frame: FrameGeometry,
                         materials: MaterialsConfig) -> DeflectionResult:
    """Transverse extrusion summary."""
    return FrameExtrusion(tub, frame, materials).compute()


# =========================================================================
# Mode-shape profiles
# =========================================================================

def bottom_deflection_profile(tub: TubGeometry, materials: MaterialsConfig,
                              n_points: Optional[int] = None) -> List[DeflectionProfilePoint]:
    """Bottom profile on the 11-point grid, positions along the tub length."""
    w_max = mdf_bottom_deflection(tub, materials).delta_max
    return mode_shape_profile(w_max, tub.length, SamplePattern.GRID_11, n_points)


def short_side_deflection_profile(tub: TubGeometry, materials: MaterialsConfig,
                                  n_points: Optional[int] = None) -> List[DeflectionProfilePoint]:
    """Short wall profile on the 5-point pattern, positions along the tub width."""
    w_max = short_side_deflection(tub, materials).delta_max
    return mode_shape_profile(w_max, tub.width, SamplePattern.CORNERS_5, n_points)


def long_side_deflection_profile(tub: TubGeometry, materials: MaterialsConfig,
                                 n_points: Optional[int] = None) -> List[DeflectionProfilePoint]:
    """Long wall profile on the 11-point grid, positions along the tub length."""
    w_max = long_side_deflection(tub, materials).delta_max
    return mode_shape_profile(w_max, tub.length, SamplePattern.GRID_11, n_points)


# =========================================================================
# Span strip profiles
# =========================================================================

def bottom_strip_profile(tub: TubGeometry, materials: MaterialsConfig,
                         n_points: int = 10) -> List[DeflectionProfilePoint]:
    """Floor strip repeated between transverse extrusions."""
    panel = BottomPanel(tub, materials)
    w = bottom_pressure(tub, materials) * tub.width
    I = rectangular_moment_of_inertia(tub.width, tub.t_bottom)
    return span_strip_profile(tub.length, panel.panel_length, w, materials.mdf_E, I, n_points)


def _wall_strip_profile(wall, n_points: int) -> List[DeflectionProfilePoint]:
    tub, materials = wall.tub, wall.materials
    w = side_line_load(tub, materials)
    I = rectangular_moment_of_inertia(tub.height, tub.t_side)
    return span_strip_profile(wall.wall_length, wall.panel_width, w, materials.mdf_E, I, n_points)


def short_side_strip_profile(tub: TubGeometry, materials: MaterialsConfig,
                             n_points: int = 5) -> List[DeflectionProfilePoint]:
    """Short wall strip repeated between posts."""
    return _wall_strip_profile(ShortWall(tub, materials), n_points)


def long_side_strip_profile(tub: TubGeometry, materials: MaterialsConfig,
                            n_points: int = 10) -> List[DeflectionProfilePoint]:
    """Long wall strip repeated between posts."""
    return _wall_strip_profile(LongWall(tub, materials), n_points)


# =========================================================================
# Orchestration
# =========================================================================

@dataclass(frozen=True)
class TubResults:
    """Everything computed for one set of inputs."""
    bottom: DeflectionResult
    short_wall: DeflectionResult
    long_wall: DeflectionResult
    extrusion: DeflectionResult
    bottom_profile: List[DeflectionProfilePoint]
    short_profile: List[DeflectionProfilePoint]
    long_profile: List[DeflectionProfilePoint]
    fill_fraction: float


class TubCalculator:
    """Coordinates the component calculations for a tub on its frame."""

    def __init__(self, tub: TubGeometry, frame: FrameGeometry, materials: MaterialsConfig):
        """Initialize calculator.

        Args:
            tub: TubGeometry instance
            frame: FrameGeometry instance
            materials: MaterialsConfig instance
        """
        self.tub = tub
        self.frame = frame
        self.materials = materials
        self.logger = logging.getLogger(__name__)

        # Initialize components
        self.bottom = BottomPanel(tub, materials)
        self.short_wall = ShortWall(tub, materials)
        self.long_wall = LongWall(tub, materials)
        self.extrusion = FrameExtrusion(tub, frame, materials)

    def run(self, bottom_points: Optional[int] = None,
            short_points: Optional[int] = None,
            long_points: Optional[int] = None) -> TubResults:
        """Compute all summaries and mode-shape profiles.

        Args:
            bottom_points: Bottom profile length (default: full grid)
            short_points: Short wall profile length (default: full pattern)
            long_points: Long wall profile length (default: full grid)

        Returns:
            TubResults bundle
        """
        bottom = self.bottom.compute()
        short_wall = self.short_wall.compute()
        long_wall = self.long_wall.compute()
        extrusion = self.extrusion.compute()

        results = TubResults(
            bottom=bottom,
            short_wall=short_wall,
            long_wall=long_wall,
            extrusion=extrusion,
            bottom_profile=mode_shape_profile(
                bottom.delta_max, self.tub.length, SamplePattern.GRID_11, bottom_points),
            short_profile=mode_shape_profile(
                short_wall.delta_max, self.tub.width, SamplePattern.CORNERS_5, short_points),
            long_profile=mode_shape_profile(
                long_wall.delta_max, self.tub.length, SamplePattern.GRID_11, long_points),
            fill_fraction=water_fill_fraction(self.tub),
        )

        self.logger.info(
            f"Tub {self.tub.length:g}x{self.tub.width:g}x{self.tub.height:g} in: "
            f"bottom delta={bottom.delta_max:.4f} in, "
            f"extrusion delta={extrusion.delta_max:.4f} in"
        )
        return results
