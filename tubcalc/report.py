# tubcalc/report.py
"""
Tabular output for the calculator results.
The only place where inches are converted to millimeters for display.
"""
import logging
from pathlib import Path
from typing import Dict, List, Union

import numpy as np
import pandas as pd

from tubcalc.calculator import TubResults
from tubcalc.constants import INCH_TO_MM, SMALL_NUMBER
from tubcalc.model_state import DeflectionProfilePoint

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ['component', 'span_in', 'load_lb_per_in', 'M_max_lb_in',
                   'delta_max_in', 'delta_max_mm', 'sigma_max_psi']


def relative_intensity(deflections: Dict[str, float]) -> Dict[str, float]:
    """Normalize max deflections to [0, 1] for colour mapping.

    Args:
        deflections: Component name -> max deflection (in)

    Returns:
        Component name -> intensity
    """
    if not deflections:
        return {}
    peak = max(max(abs(d) for d in deflections.values()), SMALL_NUMBER)
    return {
        name: float(np.clip(abs(d) / peak, 0.0, 1.0))
        for name, d in deflections.items()
    }


def summary_table(results: TubResults) -> pd.DataFrame:
    """One row per component."""
    components = {
        'bottom': results.bottom,
        'short_wall': results.short_wall,
        'long_wall': results.long_wall,
        'extrusion': results.extrusion,
    }
    rows = []
    for name, res in components.items():
        rows.append({
            'component': name,
            'span_in': res.span,
            'load_lb_per_in': res.load,
            'M_max_lb_in': res.M_max,
            'delta_max_in': res.delta_max,
            'delta_max_mm': res.delta_max * INCH_TO_MM,
            'sigma_max_psi': res.sigma_max,
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def _profile_rows(surface: str, profile: List[DeflectionProfilePoint]) -> List[Dict]:
    return [
        {
            'surface': surface,
            'point': idx + 1,
            'u': p.u,
            'v': p.v,
            'position_in': p.position,
            'position_mm': p.position * INCH_TO_MM,
            'deflection_in': p.deflection,
            'deflection_mm': p.deflection * INCH_TO_MM,
        }
        for idx, p in enumerate(profile)
    ]


def profile_table(results: TubResults) -> pd.DataFrame:
    """All sample points, labelled by surface and 1-based point number."""
    rows = (
        _profile_rows('bottom', results.bottom_profile)
        + _profile_rows('short_wall', results.short_profile)
        + _profile_rows('long_wall', results.long_profile)
    )
    return pd.DataFrame(rows)


def save_report(results: TubResults, result_path: Union[str, Path]) -> None:
    """Write summary and profile tables as CSV into ``result_path``."""
    result_path = Path(result_path)
    result_path.mkdir(parents=True, exist_ok=True)

    summary_table(results).to_csv(result_path / 'summary.csv', index=False)
    profile_table(results).to_csv(result_path / 'profiles.csv', index=False)

    logger.info(f"Saved report to {result_path}")
