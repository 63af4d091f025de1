"""Tests for the scalar validator kinds."""

import enum
import math
from datetime import date, datetime, timedelta, timezone

import pytest

from dataknobs_validators import v, validate


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"


class TestNumberValidator:
    """Test number, int, float and numeric validators."""

    @pytest.mark.asyncio
    async def test_type_rules(self):
        """Test number type checks."""
        assert (await validate(v.number(), 3)).is_valid
        assert (await validate(v.number(), True)).errors[0].type == "number"
        assert (await validate(v.number(), "abc")).errors[0].type == "number"
        assert (await validate(v.int(), 3.5)).errors[0].type == "int"
        assert (await validate(v.float(), 3.5)).is_valid

    @pytest.mark.asyncio
    async def test_nan_is_a_number(self):
        """Test that NaN passes the type rule but fails comparisons."""
        assert (await validate(v.number(), math.nan)).is_valid
        assert (await validate(v.number().min(0), math.nan)).errors[0].type == "min"
        assert (await validate(v.number().odd(), math.nan)).errors[0].type == "odd"
        assert (await validate(v.number().even(), math.nan)).errors[0].type == "even"

    @pytest.mark.asyncio
    async def test_wrong_type_with_all_errors(self, all_errors):
        """Test that numeric rules report mistyped input instead of raising."""
        schema = v.object({"age": v.number().min(5)})
        result = await validate(schema, {"age": "abc"}, all_errors)
        assert [(error.input, error.type) for error in result.errors] == [
            ("age", "number"),
            ("age", "min"),
        ]

        result = await validate(v.number().positive().odd(), [1], all_errors)
        assert [error.type for error in result.errors] == ["number", "positive", "odd"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,args,rule", [
        ("min", (5,), "min"),
        ("max", (1,), "max"),
        ("greater_than", (5,), "greaterThan"),
        ("less_than", (1,), "lessThan"),
        ("between", (1, 3), "betweenNumbers"),
        ("positive", (), "positive"),
        ("negative", (), "negative"),
        ("odd", (), "odd"),
        ("even", (), "even"),
        ("modulo", (3,), "modulo"),
    ])
    @pytest.mark.parametrize("value", ["abc", [1], {"n": 1}])
    async def test_each_rule_fails_on_wrong_type(self, all_errors, method, args, rule, value):
        """Test that every numeric rule adds exactly one error for mistyped input."""
        validator = getattr(v.number(), method)(*args)
        result = await validate(validator, value, all_errors)
        assert [error.type for error in result.errors] == ["number", rule]

    @pytest.mark.asyncio
    async def test_field_bound_with_mistyped_value(self, all_errors):
        """Test sibling bounds against a mistyped value."""
        schema = v.object({"low": v.int(), "high": v.int().min_sibling("low")})
        result = await validate(schema, {"low": 5, "high": "x"}, all_errors)
        assert [error.type for error in result.errors] == ["number", "int", "min"]

    @pytest.mark.asyncio
    async def test_bounds(self):
        """Test literal numeric bounds."""
        schema = v.number().min(1).max(10)
        assert (await validate(schema, 5)).is_valid
        assert (await validate(schema, 0)).errors[0].error == "The data must be at least 1"
        assert (await validate(schema, 11)).errors[0].type == "max"
        assert (await validate(v.number().between(1, 3), 4)).errors[0].type == "betweenNumbers"
        assert (await validate(v.number().gt(1), 1)).errors[0].type == "greaterThan"
        assert (await validate(v.number().lt(1), 1)).errors[0].type == "lessThan"

    @pytest.mark.asyncio
    async def test_field_bounds(self):
        """Test bounds read from other fields."""
        schema = v.object({
            "low": v.int(),
            "high": v.int().min_sibling("low"),
        })

        assert not (await validate(schema, {"low": 5, "high": 3})).is_valid
        assert (await validate(schema, {"low": 5, "high": 7})).is_valid
        assert (await validate(schema, {"high": 3})).is_valid

    @pytest.mark.asyncio
    async def test_parity_and_sign(self):
        """Test odd, even, positive, negative and modulo."""
        assert (await validate(v.int().even(), 3)).errors[0].type == "even"
        assert (await validate(v.int().odd(), 3)).is_valid
        assert (await validate(v.int().negative(), 3)).errors[0].type == "negative"
        assert (await validate(v.int().modulo(5), 10)).is_valid

    @pytest.mark.asyncio
    async def test_numeric(self):
        """Test the numeric validator."""
        assert (await validate(v.numeric(), "12.5")).data == 12.5
        assert v.numeric().matches_type("12")
        assert not v.number().matches_type("12")


class TestStringValidator:
    """Test string rules."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rule,value,valid", [
        ("email", "ada@example.com", True),
        ("email", "ada@", False),
        ("url", "https://example.com/path", True),
        ("url", "example", False),
        ("ip", "10.0.0.1", True),
        ("ip4", "::1", False),
        ("ip6", "::1", True),
        ("credit_card", "4111 1111 1111 1111", True),
        ("credit_card", "4111 1111 1111 1112", False),
        ("alpha", "abc", True),
        ("alphanumeric", "abc1!", False),
        ("numeric", "123", True),
        ("without_whitespace", "a b", False),
    ])
    async def test_format_rules(self, rule, value, valid):
        """Test the format rules."""
        validator = getattr(v.string(), rule)()
        assert (await validate(validator, value)).is_valid is valid

    @pytest.mark.asyncio
    async def test_length_rules(self):
        """Test length and word-count rules."""
        assert (await validate(v.string().length(3), "abcd")).errors[0].type == "length"
        assert (await validate(v.string().between(2, 3), "abcd")).errors[0].type == "betweenLength"
        assert (await validate(v.string().max(3), "abcd")).errors[0].error == (
            "The data must not exceed 3 characters"
        )
        assert (await validate(v.string().min_words(2), "one")).errors[0].type == "minWords"
        assert (await validate(v.string().words(2), "one two")).is_valid

    @pytest.mark.asyncio
    async def test_affix_rules(self):
        """Test starts_with, ends_with, contains and not_contains."""
        assert (await validate(v.string().starts_with("ab"), "abc")).is_valid
        assert (await validate(v.string().ends_with("x"), "abc")).errors[0].error == (
            "The data must end with x"
        )
        assert (await validate(v.string().contains("b"), "abc")).is_valid
        assert not (await validate(v.string().not_contains("b"), "abc")).is_valid

    @pytest.mark.asyncio
    async def test_pattern_and_password(self):
        """Test pattern and strong password rules."""
        assert (await validate(v.string().pattern(r"^\d{3}$"), "123")).is_valid
        assert not (await validate(v.string().pattern(r"^\d{3}$"), "12a")).is_valid
        assert (await validate(v.string().strong_password(), "Str0ng!Pass")).is_valid
        assert not (await validate(v.string().strong_password(), "weak")).is_valid


class TestScalarMembership:
    """Test enum and membership rules."""

    @pytest.mark.asyncio
    async def test_enum_from_enum_class(self):
        """Test enums built from an Enum class."""
        schema = v.enum(Color)
        assert (await validate(schema, "red")).is_valid

        result = await validate(schema, "pink")
        assert result.errors[0].type == "enum"
        assert result.errors[0].error == "The data must be one of the following values: red, green"

    @pytest.mark.asyncio
    async def test_in_and_not_in(self):
        """Test allow and deny lists on strings and numbers."""
        assert (await validate(v.string().in_(["a", "b"]), "c")).errors[0].type == "in"
        assert (await validate(v.number().one_of([1, 2]), 2)).is_valid
        assert (await validate(v.string().not_in(["root"]), "root")).errors[0].type == (
            "notAllowedValues"
        )

    @pytest.mark.asyncio
    async def test_equal(self):
        """Test the equal rule and boolean helpers."""
        assert (await validate(v.boolean().must_be_true(), False)).errors[0].type == "equal"
        assert (await validate(v.boolean().must_be_false(), False)).is_valid
        assert (await validate(v.string().equal("x"), "y")).errors[0].error == (
            "The data must be equal to x"
        )


class TestDateValidator:
    """Test date parsing and comparisons."""

    @pytest.mark.asyncio
    async def test_parses_input(self):
        """Test accepted date inputs."""
        assert (await validate(v.date(), "2024-01-02")).data == datetime(2024, 1, 2)
        assert (await validate(v.date(), "2024-01-02T10:00:00Z")).data == datetime(2024, 1, 2, 10)
        assert (await validate(v.date(), date(2024, 1, 2))).data == datetime(2024, 1, 2)
        assert (await validate(v.date(), "not a date")).errors[0].type == "date"

    @pytest.mark.asyncio
    async def test_literal_comparisons(self):
        """Test comparisons against literal dates."""
        assert (await validate(v.date().before("2024-01-01"), "2023-06-01")).is_valid
        assert (await validate(v.date().before("2024-01-01"), "2024-06-01")).errors[0].type == (
            "beforeDate"
        )
        assert (await validate(v.date().min("2024-01-01"), "2024-01-01")).is_valid
        assert not (await validate(v.date().between("2024-01-01", "2024-01-31"), "2024-02-01")).is_valid

    @pytest.mark.asyncio
    async def test_field_comparisons(self):
        """Test comparisons against another field."""
        schema = v.object({
            "starts_at": v.date().required(),
            "ends_at": v.date().required().after_sibling("starts_at"),
        })

        assert (await validate(schema, {"starts_at": "2024-01-01", "ends_at": "2024-01-02"})).is_valid
        result = await validate(schema, {"starts_at": "2024-01-02", "ends_at": "2024-01-01"})
        assert result.errors[0].type == "afterDate"

    @pytest.mark.asyncio
    async def test_relative_rules(self):
        """Test past, future and weekday rules."""
        yesterday = datetime.now() - timedelta(days=1)
        tomorrow = datetime.now() + timedelta(days=1)

        assert (await validate(v.date().past(), yesterday)).is_valid
        assert (await validate(v.date().future(), tomorrow)).is_valid
        assert not (await validate(v.date().future(), yesterday)).is_valid
        # 2024-01-06 is a Saturday
        assert (await validate(v.date().weekend(), "2024-01-06")).is_valid
        assert not (await validate(v.date().business_day(), "2024-01-06")).is_valid

    @pytest.mark.asyncio
    async def test_age_rules(self):
        """Test minimum and maximum age."""
        birth = date.today().replace(year=date.today().year - 30, day=1)
        assert (await validate(v.date().min_age(18), birth)).is_valid
        assert not (await validate(v.date().max_age(20), birth)).is_valid

    @pytest.mark.asyncio
    async def test_relative_rules_use_utc(self, non_utc_clock):
        """Test that past and future compare against the current UTC time."""
        an_hour_ago = datetime.now(timezone.utc) - timedelta(hours=1)
        in_an_hour = datetime.now(timezone.utc) + timedelta(hours=1)

        assert (await validate(v.date().past(), an_hour_ago)).is_valid
        assert (await validate(v.date().future(), in_an_hour)).is_valid
        assert (await validate(v.date().past(), an_hour_ago.isoformat())).is_valid

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,args,rule", [
        ("min", ("2020-01-01",), "minDate"),
        ("max", ("2020-01-01",), "maxDate"),
        ("before", ("2020-01-01",), "beforeDate"),
        ("after", ("2020-01-01",), "afterDate"),
        ("between", ("2020-01-01", "2030-01-01"), "betweenDates"),
        ("today", (), "today"),
        ("from_today", (), "fromToday"),
        ("before_today", (), "beforeToday"),
        ("past", (), "past"),
        ("future", (), "future"),
        ("weekend", (), "weekend"),
        ("business_day", (), "businessDay"),
        ("min_age", (18,), "minAge"),
        ("max_age", (99,), "maxAge"),
    ])
    @pytest.mark.parametrize("value", ["not a date", [2024, 1, 2], {"year": 2024}])
    async def test_each_rule_fails_on_wrong_type(self, all_errors, method, args, rule, value):
        """Test that every date rule adds exactly one error for mistyped input."""
        validator = getattr(v.date(), method)(*args)
        result = await validate(validator, value, all_errors)
        assert [error.type for error in result.errors] == ["date", rule]
