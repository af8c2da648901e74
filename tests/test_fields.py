"""Tests for policy.fields — keystroke checks, commits and unit switching."""

from __future__ import annotations

import logging

import pytest

from cssexpr.model import ValueWithUnit
from cssexpr.policy.fields import (
    FIELDS,
    FONT_SIZE,
    LETTER_SPACING,
    LINE_HEIGHT,
    FieldSpec,
    check,
    commit,
    get_field,
    switch_unit,
)


class TestFieldSpec:
    """FieldSpec validates its own constraints."""

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_value"):
            FieldSpec(name="x", min_value=5, max_value=1)

    def test_default_unit_must_be_allowed(self) -> None:
        with pytest.raises(ValueError, match="default_unit"):
            FieldSpec(name="x", allowed_units=("em",), default_unit="px")

    def test_unbounded_by_default(self) -> None:
        spec = FieldSpec(name="x")
        assert spec.in_range(-1e300) and spec.in_range(1e300)

    def test_presets_registered(self) -> None:
        assert set(FIELDS) == {"font-size", "line-height", "letter-spacing"}
        assert get_field("line-height") is LINE_HEIGHT

    def test_unknown_preset(self) -> None:
        with pytest.raises(KeyError, match="known: font-size"):
            get_field("word-spacing")

    def test_preset_ranges(self) -> None:
        assert (FONT_SIZE.min_value, FONT_SIZE.max_value) == (1, 1000)
        assert (LINE_HEIGHT.min_value, LINE_HEIGHT.max_value) == (0, 10)
        assert (LETTER_SPACING.min_value, LETTER_SPACING.max_value) == (-50, 50)
        assert LINE_HEIGHT.default_unit == "none"
        assert "ch" in LETTER_SPACING.allowed_units


class TestCheck:
    """check() is the per-keystroke validity signal."""

    def test_valid_in_range(self) -> None:
        assert check("1.2 * 1.5", LINE_HEIGHT) is True

    def test_partial_input_invalid(self) -> None:
        assert check("1.2 *", LINE_HEIGHT) is False

    def test_out_of_range_invalid(self) -> None:
        assert check("11", LINE_HEIGHT) is False
        assert check("-51px", LETTER_SPACING) is False

    def test_bounds_inclusive(self) -> None:
        assert check("10", LINE_HEIGHT) is True
        assert check("0", LINE_HEIGHT) is True
        assert check("-50px", LETTER_SPACING) is True


class TestCommit:
    """commit() either takes the new value or reverts."""

    def test_new_value_with_unit(self) -> None:
        result = commit("2 * 3em", ValueWithUnit(1, "px"), LETTER_SPACING)
        assert result.valid is True
        assert result.reverted is False
        assert result.value == ValueWithUnit(6, "em")

    def test_bare_number_keeps_current_unit(self) -> None:
        result = commit("1.5 + 1", ValueWithUnit(1, "em"), LETTER_SPACING)
        assert result.value == ValueWithUnit(2.5, "em")

    def test_bare_number_on_unitless_field(self) -> None:
        result = commit("1.4", ValueWithUnit(1, "none"), LINE_HEIGHT)
        assert result.value == ValueWithUnit(1.4, "none")

    def test_invalid_reverts(self) -> None:
        current = ValueWithUnit(0, "px")
        result = commit("3 +", current, LETTER_SPACING)
        assert result.valid is False
        assert result.reverted is True
        assert result.value is current
        assert result.error is not None and "Invalid expression" in result.error

    def test_out_of_range_reverts(self) -> None:
        current = ValueWithUnit(200, "px")
        result = commit("500 * 3", current, FONT_SIZE)
        assert result.reverted is True
        assert result.value is current
        assert "outside" in (result.error or "")

    def test_disallowed_unit_reverts(self) -> None:
        current = ValueWithUnit(12, "px")
        result = commit("10vw", current, FONT_SIZE)
        assert result.valid is False
        assert result.reverted is True
        assert result.value is current
        assert "allowed_units" in (result.error or "")

    def test_unknown_unit_reverts(self) -> None:
        result = commit("3pt", ValueWithUnit(1, "em"), LETTER_SPACING)
        assert result.reverted is True

    def test_allowed_unit_on_unitless_field(self) -> None:
        result = commit("1.5em", ValueWithUnit(1, "none"), LINE_HEIGHT)
        assert result.valid is True
        assert result.value == ValueWithUnit(1.5, "em")

    def test_to_dict(self) -> None:
        d = commit("3 +", ValueWithUnit(0, "px"), LETTER_SPACING).to_dict()
        assert d["valid"] is False and d["reverted"] is True
        assert d["value"] == {"value": 0, "unit": "px", "css": "0px"}
        assert "error" in d

    def test_success_dict_has_no_error(self) -> None:
        d = commit("2", ValueWithUnit(0, "px"), LETTER_SPACING).to_dict()
        assert "error" not in d

    def test_commit_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cssexpr.policy.fields"):
            commit("oops", ValueWithUnit(0, "px"), LETTER_SPACING)
        assert any("reverting" in r.getMessage() for r in caplog.records)


class TestSwitchUnit:
    """switch_unit() applies a unit picked from the selector."""

    def test_keeps_current_value(self) -> None:
        assert switch_unit(ValueWithUnit(2, "px"), "em", LETTER_SPACING) == ValueWithUnit(2, "em")

    def test_takes_valid_pending_text(self) -> None:
        out = switch_unit(
            ValueWithUnit(2, "px"), "rem", LETTER_SPACING, pending_expression="1.5 * 2"
        )
        assert out == ValueWithUnit(3, "rem")

    def test_ignores_invalid_pending_text(self) -> None:
        out = switch_unit(
            ValueWithUnit(2, "px"), "rem", LETTER_SPACING, pending_expression="1.5 *"
        )
        assert out == ValueWithUnit(2, "rem")

    def test_ignores_out_of_range_pending_text(self) -> None:
        out = switch_unit(
            ValueWithUnit(2, "px"), "%", LETTER_SPACING, pending_expression="99"
        )
        assert out == ValueWithUnit(2, "%")

    def test_disallowed_unit(self) -> None:
        with pytest.raises(ValueError, match="allowed_units"):
            switch_unit(ValueWithUnit(2, "px"), "vw", LETTER_SPACING)
