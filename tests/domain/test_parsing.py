"""Tests for raw-input parsing outcomes."""

import pytest

from staffctl.domain.parsing import (
    PARSERS,
    is_blank,
    parse_age,
    parse_employee_id,
    parse_salary,
)


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t"])
    def test_blank(self, value: str | None) -> None:
        assert is_blank(value)

    def test_not_blank(self) -> None:
        assert not is_blank(" a ")


class TestParseAge:
    def test_strips_whitespace(self) -> None:
        outcome = parse_age(" 30 ")
        assert outcome.ok
        assert outcome.value == 30
        assert outcome.error is None

    @pytest.mark.parametrize("raw", ["thirty", "30.5", "", "3 0", "1_8", "0x1f", "\u0663\u0660"])
    def test_failure_is_a_value(self, raw: str) -> None:
        outcome = parse_age(raw)
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.field == "age"
        assert outcome.raw == raw

    def test_out_of_range_still_parses(self) -> None:
        # Range is the validator's job, not the parser's.
        assert parse_age("17").value == 17


class TestParseSalary:
    def test_integer_text(self) -> None:
        outcome = parse_salary("50000")
        assert outcome.ok
        assert outcome.value == 50000.0

    def test_decimal_and_negative(self) -> None:
        assert parse_salary("1234.56").value == 1234.56
        assert parse_salary("-1").value == -1.0

    @pytest.mark.parametrize(
        ("raw", "expected"), [(".5", 0.5), ("5.", 5.0), ("+12", 12.0), ("1e3", 1000.0)]
    )
    def test_plain_decimal_forms(self, raw: str, expected: float) -> None:
        assert parse_salary(raw).value == expected

    @pytest.mark.parametrize(
        "raw", ["lots", "", "nan", "inf", "-inf", "Infinity", "5_0000", "1e999", "1.2.3"]
    )
    def test_rejects(self, raw: str) -> None:
        outcome = parse_salary(raw)
        assert not outcome.ok
        assert outcome.field == "basic_salary"


class TestParseEmployeeId:
    def test_ok(self) -> None:
        assert parse_employee_id("7").value == 7

    def test_bad(self) -> None:
        outcome = parse_employee_id("seven")
        assert not outcome.ok
        assert "seven" in (outcome.error or "")

    def test_rejects_digit_separators(self) -> None:
        assert not parse_employee_id("1_0").ok


def test_parsers_cover_numeric_fields() -> None:
    assert set(PARSERS) == {"age", "basic_salary"}
