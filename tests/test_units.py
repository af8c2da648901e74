"""Tests for cssexpr.core.units — unit splitting and number formatting."""

from __future__ import annotations

import pytest

from cssexpr.core.units import format_css, format_number, format_value, split_unit
from cssexpr.model import Unit, ValueWithUnit


class TestSplitUnit:
    def test_suffix(self) -> None:
        assert split_unit("10px") == ("10", "px")

    def test_percent(self) -> None:
        assert split_unit("50%") == ("50", "%")

    def test_trims_before_matching(self) -> None:
        assert split_unit("  2 * 3 em  ") == ("2 * 3 ", "em")

    def test_no_suffix(self) -> None:
        assert split_unit(" 2 + 3 ") == ("2 + 3", "none")

    def test_lower_cases(self) -> None:
        assert split_unit("1REM") == ("1", "rem")

    def test_only_trailing_run(self) -> None:
        assert split_unit("1px2") == ("1px2", "none")


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (10.0, "10"),
            (-7.5, "-7.5"),
            (0.0, "0"),
            (-0.0, "0"),
            (1e-7, "0.0000001"),
            (1e22, "10000000000000000000000"),
            (0.1 + 0.2, "0.30000000000000004"),
        ],
    )
    def test_positional(self, value: float, text: str) -> None:
        assert format_number(value) == text

    @pytest.mark.parametrize("value", [1 / 3, 2.5e-12, 123456789.125, -1e300])
    def test_exact(self, value: float) -> None:
        assert float(format_number(value)) == value


class TestFormatCss:
    def test_unit_appended(self) -> None:
        assert format_css(1.5, "em") == "1.5em"

    def test_unitless(self) -> None:
        assert format_css(1.5, "none") == "1.5"
        assert format_css(1.5, "") == "1.5"

    def test_value_with_unit_str(self) -> None:
        assert str(ValueWithUnit(2, Unit.PERCENT.value)) == "2%"
        assert ValueWithUnit(2).css == "2"

    def test_format_value(self) -> None:
        assert format_value(ValueWithUnit(-7.5, "px")) == "-7.5px"
        assert format_value(ValueWithUnit(0.1, "none")) == "0.1"
        assert format_value(ValueWithUnit(-0.0, "em")) == "0em"

    def test_format_value_matches_str(self) -> None:
        v = ValueWithUnit(1e-7, "%")
        assert format_value(v) == str(v) == "0.0000001%"

    def test_to_dict(self) -> None:
        assert ValueWithUnit(-3, "px").to_dict() == {"value": -3, "unit": "px", "css": "-3px"}
