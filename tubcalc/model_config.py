# tubcalc/model_config.py
"""
Configuration loading and validation.
Builds the geometry and material value objects from dicts or YAML files.
"""
import os
import logging
import yaml
from typing import Dict, Any, Union, Tuple
from pathlib import Path

from tubcalc.model_state import TubGeometry, FrameGeometry, MaterialsConfig
from tubcalc.constants import mm, SMALL_NUMBER

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent / "config"
DEFAULT_TUB_PATH = CONFIG_DIR / "tub_defaults.yaml"
DEFAULT_MATERIALS_PATH = CONFIG_DIR / "materials.yaml"

LoadedConfig = Tuple[TubGeometry, FrameGeometry, MaterialsConfig]


class ConfigLoader:
    """Loads and validates tub configuration."""

    @staticmethod
    def load(config_input: Union[Dict, str, Path]) -> LoadedConfig:
        """Load configuration from dict or YAML file.

        Args:
            config_input: Dictionary or path to YAML file with
                'tub', 'frame' and 'materials' sections

        Returns:
            Tuple of (TubGeometry, FrameGeometry, MaterialsConfig)

        Raises:
            TypeError: If config_input is neither dict nor path
            FileNotFoundError: If YAML file missing
            KeyError: If a required key is missing
            ValueError: If configuration invalid
        """
        if isinstance(config_input, dict):
            config = config_input
        elif isinstance(config_input, (str, os.PathLike)):
            config = ConfigLoader._load_yaml(config_input)
        else:
            raise TypeError("config_input must be dict or file path")

        return ConfigLoader._validate(config)

    @staticmethod
    def load_defaults(tub_path: Union[str, Path] = DEFAULT_TUB_PATH,
                      materials_path: Union[str, Path] = DEFAULT_MATERIALS_PATH) -> LoadedConfig:
        """Load the geometry and material default files and merge them."""
        config = dict(ConfigLoader._load_yaml(tub_path))
        config.update(ConfigLoader._load_yaml(materials_path))
        logger.info(f"Loaded defaults from {tub_path} and {materials_path}")
        return ConfigLoader.load(config)

    @staticmethod
    def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _validate_required_keys(data: dict, keys: list, context: str) -> None:
        """Validate required keys exist in data dictionary.

        Raises:
            KeyError: If any required key missing
        """
        missing = [k for k in keys if k not in data]
        if missing:
            raise KeyError(f"{context} missing required keys: {missing}")

    @staticmethod
    def _validate_positive(value: float, name: str) -> float:
        """Validate value is strictly positive and return it as float.

        Raises:
            ValueError: If value not positive
        """
        value = float(value)
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
        return value

    @staticmethod
    def _validate_count(value: Any, name: str, minimum: int = 0) -> int:
        """Validate value is a whole number no smaller than ``minimum``.

        Raises:
            ValueError: If value is fractional or below minimum
        """
        number = float(value)
        if not number.is_integer():
            raise ValueError(f"{name} must be a whole number, got {value}")
        count = int(number)
        if count < minimum:
            raise ValueError(f"{name} must be >= {minimum}, got {count}")
        return count

    @staticmethod
    def _validate(config: Dict[str, Any]) -> LoadedConfig:
        """Validate configuration and build value objects.

        Args:
            config: Raw configuration dictionary

        Returns:
            Tuple of (TubGeometry, FrameGeometry, MaterialsConfig)
        """
        ConfigLoader._validate_required_keys(config, ['tub', 'frame', 'materials'], "Config")
        return (
            ConfigLoader._build_tub(config['tub']),
            ConfigLoader._build_frame(config['frame']),
            ConfigLoader._build_materials(config['materials']),
        )

    @staticmethod
    def _build_tub(tub: Dict[str, Any]) -> TubGeometry:
        ConfigLoader._validate_required_keys(
            tub,
            ['L_tub_in', 'W_tub_in', 'H_tub_in', 't_mdf_bottom_in',
             't_mdf_side_in', 'n_transverse'],
            "Tub config"
        )

        # Older files store the water depth (from the floor) as 'water_freeboard_in'
        if 'water_depth_in' in tub:
            water_depth = float(tub['water_depth_in'])
        elif 'water_freeboard_in' in tub:
            water_depth = float(tub['water_freeboard_in'])
        else:
            raise KeyError("Tub config missing required keys: ['water_depth_in']")

        if water_depth < 0:
            raise ValueError(f"Water depth must be non-negative, got {water_depth}")

        n_transverse = ConfigLoader._validate_count(tub['n_transverse'], "n_transverse", minimum=1)
        if n_transverse < 2:
            logger.warning("Fewer than 2 transverse supports; bottom treated as a single span")

        return TubGeometry(
            length=ConfigLoader._validate_positive(tub['L_tub_in'], "Tub length"),
            width=ConfigLoader._validate_positive(tub['W_tub_in'], "Tub width"),
            height=ConfigLoader._validate_positive(tub['H_tub_in'], "Tub height"),
            t_bottom=ConfigLoader._validate_positive(tub['t_mdf_bottom_in'], "Bottom thickness"),
            t_side=ConfigLoader._validate_positive(tub['t_mdf_side_in'], "Side thickness"),
            water_depth=water_depth,
            n_transverse=n_transverse,
            n_long_side_posts=ConfigLoader._validate_count(
                tub.get('n_long_side_posts') or 0, "n_long_side_posts"),
            n_short_side_posts=ConfigLoader._validate_count(
                tub.get('n_short_side_posts') or 0, "n_short_side_posts"),
        )

    @staticmethod
    def _build_frame(frame: Dict[str, Any]) -> FrameGeometry:
        ConfigLoader._validate_required_keys(
            frame,
            ['L_frame_in', 'W_frame_in', 'H_frame_in', 'extr_size_mm'],
            "Frame config"
        )
        geometry = FrameGeometry(
            length=ConfigLoader._validate_positive(frame['L_frame_in'], "Frame length"),
            width=ConfigLoader._validate_positive(frame['W_frame_in'], "Frame width"),
            height=ConfigLoader._validate_positive(frame['H_frame_in'], "Frame height"),
            extrusion_size_mm=ConfigLoader._validate_positive(frame['extr_size_mm'], "Extrusion size"),
        )

        # Transverse extrusions span between the two side extrusions
        clear_span = geometry.width - 2 * geometry.extrusion_size_mm * mm
        if clear_span <= SMALL_NUMBER:
            raise ValueError(
                f"Frame width ({geometry.width} in) leaves no clear span between "
                f"{geometry.extrusion_size_mm} mm extrusions"
            )
        return geometry

    @staticmethod
    def _build_materials(materials: Dict[str, Any]) -> MaterialsConfig:
        ConfigLoader._validate_required_keys(
            materials, ['water', 'mdf_extira', 'aluminum_2525'], "Materials config")

        water = materials['water']
        mdf = materials['mdf_extira']
        aluminum = materials['aluminum_2525']
        ConfigLoader._validate_required_keys(water, ['gamma_psi_per_in'], "Water")
        ConfigLoader._validate_required_keys(mdf, ['E_psi'], "MDF")
        ConfigLoader._validate_required_keys(aluminum, ['E_psi', 'I_in4', 'c_in'], "Aluminum")

        return MaterialsConfig(
            water_gamma=ConfigLoader._validate_positive(water['gamma_psi_per_in'], "Water gamma"),
            mdf_E=ConfigLoader._validate_positive(mdf['E_psi'], "MDF modulus"),
            aluminum_E=ConfigLoader._validate_positive(aluminum['E_psi'], "Aluminum modulus"),
            aluminum_I=ConfigLoader._validate_positive(aluminum['I_in4'], "Aluminum I"),
            aluminum_c=ConfigLoader._validate_positive(aluminum['c_in'], "Aluminum c"),
        )
