"""Test DynamicAxis class."""

import logging
from collections.abc import Iterator, Mapping

import pytest

from daxis.axis import DEFAULT_AXIS_VALUE, DynamicAxis, MappingEnvironment
from daxis.protocols import AxisProtocol


class ExplodingMapping(Mapping[str, str]):
    """Mapping whose lookups fail, like a broken host environment."""

    def __getitem__(self, key: str) -> str:
        raise RuntimeError("lookup failed")

    def __iter__(self) -> Iterator[str]:
        return iter(())

    def __len__(self) -> int:
        return 0


class TestDynamicAxis:
    """Test DynamicAxis functionality."""

    def setup_method(self):
        """Set up test instance."""
        self.axis = DynamicAxis("AXIS", "V")

    def test_initialization(self):
        """Test axis initialization."""
        assert self.axis.name == "AXIS"
        assert self.axis.var_name == "V"
        assert isinstance(self.axis, AxisProtocol)

    def test_value_label_is_variable_name(self):
        """Test value label shows the configured variable."""
        assert self.axis.value_label() == "V"

    def test_value_label_unset(self):
        """Test value label for an unset variable name."""
        assert DynamicAxis("AXIS", None).value_label() == ""

    def test_current_values_before_rebuild(self):
        """Test the cache is populated with the default on first read."""
        assert self.axis.current_values() == (DEFAULT_AXIS_VALUE,)

    def test_rebuild_splits_values(self):
        """Test plain whitespace separated values."""
        assert self.axis.rebuild({"V": "1 2 3"}) == ("1", "2", "3")

    def test_rebuild_keeps_quoted_values_together(self):
        """Test quoted values with spaces form one value."""
        assert self.axis.rebuild({"V": '1 "2 3"'}) == ("1", "2 3")

    def test_rebuild_preserves_order_and_duplicates(self):
        """Test values keep order and duplicates."""
        assert self.axis.rebuild({"V": "x x y"}) == ("x", "x", "y")

    def test_rebuild_absent_variable(self):
        """Test absent variable falls back to the default value."""
        assert self.axis.rebuild({}) == ("default",)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rebuild_empty_value(self, value):
        """Test empty or blank value falls back to the default value."""
        assert self.axis.rebuild({"V": value}) == ("default",)

    def test_rebuild_none_environment(self):
        """Test missing build environment falls back to the default value."""
        assert self.axis.rebuild(None) == ("default",)

    def test_rebuild_empty_variable_name(self):
        """Test an unset variable name behaves like an absent variable."""
        axis = DynamicAxis("AXIS", "")
        assert axis.rebuild({"": "1 2"}) == ("default",)

    def test_rebuild_replaces_previous_values(self):
        """Test a rebuild leaves no residue from the previous one."""
        self.axis.rebuild({"V": "a b"})
        assert self.axis.rebuild({"V": "c"}) == ("c",)
        assert self.axis.current_values() == ("c",)

    def test_rebuild_back_to_default(self):
        """Test a rebuild without values replaces real values with the default."""
        self.axis.rebuild({"V": "a b"})
        assert self.axis.rebuild({}) == ("default",)
        assert self.axis.current_values() == ("default",)

    def test_rebuild_result_matches_current_values(self):
        """Test rebuild returns the same values it cached."""
        result = self.axis.rebuild({"V": '1 "2 3" 4'})
        assert self.axis.current_values() == result

    def test_current_values_idempotent(self):
        """Test repeated reads without a rebuild are identical."""
        self.axis.rebuild({"V": "a b"})
        assert self.axis.current_values() == self.axis.current_values()

    def test_current_values_is_snapshot(self):
        """Test callers cannot modify the cache through the result."""
        values = self.axis.rebuild({"V": "a b"})
        assert isinstance(values, tuple)
        assert isinstance(self.axis.current_values(), tuple)

        copy = list(self.axis.current_values())
        copy.append("c")
        assert self.axis.current_values() == ("a", "b")

    def test_rebuild_from_provider(self):
        """Test environment supplied through a provider."""
        environment = MappingEnvironment({"V": "p q"})
        assert self.axis.rebuild(environment) == ("p", "q")

    def test_rebuild_provider_failure(self, failing_environment, caplog):
        """Test an unavailable environment is logged and falls back."""
        with caplog.at_level(logging.ERROR, logger="daxis.axis.dynamic_axis"):
            result = self.axis.rebuild(failing_environment)

        assert result == ("default",)
        assert self.axis.current_values() == ("default",)
        failing_environment.get_environment.assert_called_once_with()
        assert "build environment not available" in caplog.text

    def test_rebuild_lookup_failure(self, caplog):
        """Test a failing lookup is logged and falls back."""
        with caplog.at_level(logging.ERROR, logger="daxis.axis.dynamic_axis"):
            result = self.axis.rebuild(ExplodingMapping())

        assert result == ("default",)
        assert "lookup failed" in caplog.text

    def test_rebuild_non_string_value(self):
        """Test a non-string value is ignored."""
        assert self.axis.rebuild({"V": 42}) == ("default",)  # type: ignore[dict-item]

    def test_rebuild_unterminated_quote(self):
        """Test malformed quoting never fails the rebuild."""
        assert self.axis.rebuild({"V": '1 "2 3'}) == ("1", "2 3")

    def test_rebuild_only_reads_its_variable(self):
        """Test other variables do not contribute values."""
        assert self.axis.rebuild({"V": "a", "W": "b c"}) == ("a",)

    def test_repr(self):
        """Test repr shows the axis configuration."""
        assert repr(self.axis) == "DynamicAxis(name='AXIS', var_name='V')"


@pytest.mark.parametrize(
    "environment",
    [
        None,
        {},
        {"V": ""},
        {"V": " "},
        {"V": "a"},
        {"V": '"'},
        {"V": "\\"},
        {"OTHER": "1 2"},
        ExplodingMapping(),
    ],
)
def test_values_never_empty(environment):
    """Test rebuild and current values are never empty."""
    axis = DynamicAxis("AXIS", "V")
    assert len(axis.current_values()) > 0
    assert len(axis.rebuild(environment)) > 0
    assert len(axis.current_values()) > 0
