# main-sweep.py
"""Parametric deflection sweep over MDF thickness and water depth."""
import logging
from pathlib import Path
import time

import pandas as pd

from tub_configurations import generate_configurations
from tubcalc.model_config import ConfigLoader
from tubcalc.calculator import TubCalculator
from tubcalc.constants import INCH_TO_MM
from tubcalc.report import save_report


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main():
    setup_logging()
    logger = logging.getLogger(__name__)

    # Define parameter space
    bottom_thicknesses_mm = [12, 15, 19, 25]
    water_depths_in = [12, 16, 20, 24]

    # Fixed parameters
    tub_length = 60
    tub_width = 30
    tub_height = 24
    n_transverse = 3

    base_dir = Path(__file__).parent
    results_base = base_dir / "Sweep_Results"
    results_base.mkdir(exist_ok=True)

    total_configs = len(bottom_thicknesses_mm) * len(water_depths_in)
    config_count = 0
    rows = []
    start = time.time()

    for t_mm in bottom_thicknesses_mm:
        for depth in water_depths_in:
            config_count += 1
            config_name = f"T{t_mm}_H{depth}"
            logger.info(f"[{config_count}/{total_configs}] Running {config_name}")

            raw_config = {
                "tub_length_in": tub_length,
                "tub_width_in": tub_width,
                "tub_height_in": tub_height,
                "water_depth_in": depth,
                "n_transverse": n_transverse,
                "bottom_thickness_mm": t_mm,
                "side_thickness_mm": 19,
                "n_long_side_posts": 3,
                "n_short_side_posts": 1,
            }

            config = generate_configurations(raw_config)
            tub, frame, materials = ConfigLoader.load(config)

            results = TubCalculator(tub, frame, materials).run()
            save_report(results, results_base / config_name)

            rows.append({
                "case": config_name,
                "bottom_thickness_mm": t_mm,
                "water_depth_in": depth,
                "bottom_delta_mm": results.bottom.delta_max * INCH_TO_MM,
                "bottom_sigma_psi": results.bottom.sigma_max,
                "short_wall_delta_mm": results.short_wall.delta_max * INCH_TO_MM,
                "long_wall_delta_mm": results.long_wall.delta_max * INCH_TO_MM,
                "extrusion_delta_mm": results.extrusion.delta_max * INCH_TO_MM,
                "extrusion_sigma_psi": results.extrusion.sigma_max,
            })

    pd.DataFrame(rows).to_csv(results_base / "sweep_summary.csv", index=False)
    logger.info(f"Completed all {total_configs} configurations in {time.time() - start:.2f}s")


if __name__ == "__main__":
    main()
