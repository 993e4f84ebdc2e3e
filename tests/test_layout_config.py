import math

import pytest

from gedtree.core.exceptions import LayoutConfigError
from gedtree.layout.config import LayoutConfig, default_layout_config


@pytest.mark.parametrize(
    "field_name",
    ["horizontal_gap", "vertical_gap", "node_width", "node_height"],
)
@pytest.mark.parametrize("value", [0, -1, -0.5])
def test_non_positive_spacing_rejected(field_name, value):
    with pytest.raises(LayoutConfigError) as excinfo:
        LayoutConfig(**{field_name: value})
    assert field_name in str(excinfo.value)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        LayoutConfig(node_width=0)


def test_negative_depth_rejected():
    with pytest.raises(LayoutConfigError):
        LayoutConfig(max_generations=-1)


def test_unknown_mode_rejected():
    with pytest.raises(LayoutConfigError):
        LayoutConfig(mode="radial")


def test_non_numeric_gap_rejected():
    with pytest.raises(LayoutConfigError):
        LayoutConfig(horizontal_gap="wide")


def test_row_height():
    assert LayoutConfig(node_height=40, vertical_gap=30).row_height == 70


def test_with_overrides_ignores_none():
    config = LayoutConfig().with_overrides(horizontal_gap=None, max_generations=2)
    assert config.horizontal_gap == LayoutConfig().horizontal_gap
    assert config.max_generations == 2


def test_from_mapping():
    config = LayoutConfig.from_mapping({"node_width": 90, "mode": "ancestor"})
    assert config.node_width == 90
    assert config.mode == "ancestor"


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(LayoutConfigError):
        LayoutConfig.from_mapping({"zoom": 2})


def test_default_layout_config_is_valid():
    assert isinstance(default_layout_config(), LayoutConfig)


@pytest.mark.parametrize("value", [math.inf, math.nan])
def test_non_finite_spacing_rejected(value):
    with pytest.raises(LayoutConfigError):
        LayoutConfig(horizontal_gap=value)
