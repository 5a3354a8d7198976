"""Test matrix models."""

import pytest
from pydantic import ValidationError

from daxis.matrix.models import AxisDefinition, AxisType, Combination, MatrixYamlConfig


class TestAxisDefinition:
    """Test axis definition validation."""

    def test_dynamic_defaults(self):
        """Test dynamic is the default axis type."""
        definition = AxisDefinition.model_validate(
            {"name": "AXIS", "var-name": "AXIS_VALUES"}
        )

        assert definition.type == AxisType.DYNAMIC
        assert definition.var_name == "AXIS_VALUES"
        assert definition.values == []

    def test_dynamic_requires_var_name(self):
        """Test dynamic axis without variable name."""
        with pytest.raises(ValidationError, match="Environment variable name is required"):
            AxisDefinition.model_validate({"name": "AXIS", "var-name": ""})

    def test_dynamic_rejects_values(self):
        """Test dynamic axis cannot list static values."""
        with pytest.raises(ValidationError, match="cannot list values"):
            AxisDefinition.model_validate(
                {"name": "AXIS", "var-name": "V", "values": ["a"]}
            )

    def test_text_requires_values(self):
        """Test text axis without values."""
        with pytest.raises(ValidationError, match="at least one value"):
            AxisDefinition.model_validate({"name": "OS", "type": "text"})

    def test_name_required(self):
        """Test empty axis names are rejected."""
        with pytest.raises(ValidationError):
            AxisDefinition.model_validate({"name": "  ", "var-name": "V"})

    def test_text_values_kept_verbatim(self):
        """Test surrounding spaces in text values survive validation."""
        definition = AxisDefinition.model_validate(
            {"name": " OS ", "type": "text", "values": [" ", " linux", "macos "]}
        )

        assert definition.name == "OS"
        assert definition.values == [" ", " linux", "macos "]

    def test_var_name_stripped(self):
        """Test the variable name is trimmed before it is checked."""
        definition = AxisDefinition.model_validate(
            {"name": "AXIS", "var-name": " AXIS_VALUES "}
        )
        assert definition.var_name == "AXIS_VALUES"

    def test_unknown_type(self):
        """Test unknown axis types are rejected."""
        with pytest.raises(ValidationError):
            AxisDefinition.model_validate({"name": "AXIS", "type": "label"})

    def test_unknown_key(self):
        """Test typos in keys are reported."""
        with pytest.raises(ValidationError):
            AxisDefinition.model_validate({"name": "AXIS", "varname": "V"})


class TestMatrixYamlConfig:
    """Test matrix configuration validation."""

    def test_duplicate_names(self):
        """Test duplicate axis names are rejected."""
        with pytest.raises(ValidationError, match="Duplicate axis name"):
            MatrixYamlConfig.model_validate(
                {
                    "axes": [
                        {"name": "AXIS", "var-name": "A"},
                        {"name": "AXIS", "type": "text", "values": ["x"]},
                    ]
                }
            )

    def test_null_axes(self):
        """Test an empty axes key means no axes."""
        assert MatrixYamlConfig.model_validate({"axes": None}).axes == []


def test_combination_string_and_lookup():
    """Test combination formatting and lookup keep axis order."""
    combination = Combination(items=(("AXIS", "2 3"), ("OS", "linux")))

    assert str(combination) == "AXIS=2 3,OS=linux"
    assert combination.get("OS") == "linux"
    assert combination.get("MISSING") is None
    assert combination.to_dict() == {"AXIS": "2 3", "OS": "linux"}
