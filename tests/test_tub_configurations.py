"""Tests for the raw-parameter configuration generator."""
import pytest

from tub_configurations import generate_configurations
from tubcalc.model_config import ConfigLoader


@pytest.fixture
def raw():
    return {
        "tub_length_in": 60,
        "tub_width_in": 30,
        "tub_height_in": 24,
        "water_depth_in": 20,
    }


class TestGenerateConfigurations:

    def test_defaults(self, raw):
        config = generate_configurations(raw)
        assert config["tub"]["n_transverse"] == 3
        assert config["tub"]["t_mdf_bottom_in"] == pytest.approx(19 / 25.4)
        assert config["tub"]["t_mdf_side_in"] == pytest.approx(19 / 25.4)
        assert config["tub"]["n_long_side_posts"] == 0
        assert config["materials"]["mdf_extira"]["E_psi"] == pytest.approx(400000)

    def test_frame_wraps_tub(self, raw):
        config = generate_configurations(raw)
        assert config["frame"]["W_frame_in"] == pytest.approx(30 + 2 * 25 / 25.4)
        assert config["frame"]["H_frame_in"] == pytest.approx(24 + 6)

    def test_loads_cleanly(self, raw):
        raw["n_short_side_posts"] = 2
        tub, frame, materials = ConfigLoader.load(generate_configurations(raw))
        assert tub.n_short_side_posts == 2
        assert materials.aluminum_c == pytest.approx(12.5 / 25.4)

    def test_unknown_grade(self, raw):
        raw["mdf_grade"] = "balsa"
        with pytest.raises(KeyError):
            generate_configurations(raw)
