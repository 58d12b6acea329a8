# tubcalc/components/base_component.py
"""
Abstract base class for all structural components of the tub.
Ensures a consistent compute interface and result logging.
"""
from abc import ABC, abstractmethod
import logging

from tubcalc.model_state import TubGeometry, MaterialsConfig, DeflectionResult


class BaseComponent(ABC):
    """Abstract base for panel and member calculators."""

    def __init__(self, tub: TubGeometry, materials: MaterialsConfig):
        """Initialize component with geometry and materials.

        Args:
            tub: TubGeometry instance
            materials: MaterialsConfig instance
        """
        self.tub = tub
        self.materials = materials
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def compute(self) -> DeflectionResult:
        """Compute the summary result for this component."""
        pass

    def _log_result(self, result: DeflectionResult) -> None:
        self.logger.debug(
            f"span={result.span:.3f} in, w={result.load:.4f} lb/in, "
            f"M={result.M_max:.2f} lb*in, delta={result.delta_max:.5f} in, "
            f"sigma={result.sigma_max:.1f} psi"
        )
