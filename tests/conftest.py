"""Shared fixtures: the 60 x 30 x 24 in reference tub."""
import pytest

from tubcalc.model_state import TubGeometry, FrameGeometry, MaterialsConfig


@pytest.fixture
def materials():
    return MaterialsConfig(
        water_gamma=0.0361,
        mdf_E=400000.0,
        aluminum_E=10.0e6,
        aluminum_I=0.0192,
        aluminum_c=0.492,
    )


@pytest.fixture
def tub():
    return TubGeometry(
        length=60.0,
        width=30.0,
        height=24.0,
        t_bottom=0.75,
        t_side=0.75,
        water_depth=20.0,
        n_transverse=3,
    )


@pytest.fixture
def frame():
    return FrameGeometry(length=62.0, width=32.0, height=30.0, extrusion_size_mm=25.0)
