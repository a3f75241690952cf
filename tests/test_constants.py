import json

import pytest

from sidss.constants import (
    DEFAULT_CONSTANTS,
    ModelConstants,
    constants_from_dict,
    load_model_constants,
)


def test_packaged_file_matches_defaults():
    assert load_model_constants() == DEFAULT_CONSTANTS


def test_default_weights_sum_to_one():
    assert DEFAULT_CONSTANTS.weights.total == pytest.approx(1.0)


def test_partial_override_keeps_other_defaults():
    constants = constants_from_dict({"weights": {"financial": 0.5}, "irr": {"max_iterations": 50}})

    assert constants.weights.financial == 0.5
    assert constants.weights.environmental == 0.3
    assert constants.irr.max_iterations == 50
    assert isinstance(constants.irr.max_iterations, int)
    assert constants.carbon_reference_tons == 50000.0


def test_unknown_key_raises():
    with pytest.raises(ValueError, match="weights.aesthetics"):
        constants_from_dict({"weights": {"aesthetics": 0.1}})


def test_non_numeric_value_raises():
    with pytest.raises(ValueError, match="carbon_reference_tons"):
        constants_from_dict({"carbon_reference_tons": "lots"})


def test_group_must_be_object():
    with pytest.raises(ValueError, match="social"):
        constants_from_dict({"social": 5})


def test_load_from_custom_path(tmp_path):
    path = tmp_path / "constants.json"
    path.write_text(json.dumps({"cost_per_year_divisor": 5000}), encoding="utf-8")

    constants = load_model_constants(path)

    assert isinstance(constants, ModelConstants)
    assert constants.cost_per_year_divisor == 5000.0
