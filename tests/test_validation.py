"""Tests for request validation."""

import pytest
from datetime import datetime, timedelta, timezone

from errors import (
    AddCostFailed,
    InvalidCategory,
    InvalidDate,
    InvalidDescription,
    InvalidMonth,
    InvalidMonthFormat,
    InvalidSum,
    InvalidUserId,
    InvalidYearFormat,
    InvalidYearRange,
    MissingUserId,
    UserNotFound,
    ValidationError,
)
from validation import (
    CostRequest,
    ValidationPolicy,
    coerce_user_id,
    parse_cost_date,
    parse_report_period,
    parse_report_user_id,
    validate_category,
    validate_cost_fields,
    validate_description,
    validate_sum,
)


class TestCoerceUserId:
    """Tests for coerce_user_id."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (123123, 123123),
            ("123123", 123123),
            (" 7 ", 7),
            (5.0, 5),
            ("0042", 42),
            (2**63 - 1, 2**63 - 1),
        ],
    )
    def test_valid_ids(self, value, expected):
        assert coerce_user_id(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, 0, -3, "0", "abc", "12a", 1.5, True, "", [], {}, 2**63, "9" * 5000, 1e30],
    )
    def test_values_that_never_name_a_user(self, value):
        assert coerce_user_id(value) is None


class TestCostFieldValidation:
    """Tests for the individual cost field checks."""

    def test_category_accepts_every_taxonomy_member(self):
        for category in ("food", "health", "housing", "sport", "education"):
            assert validate_category(category) == category

    def test_category_rejects_unknown_value(self):
        with pytest.raises(InvalidCategory) as exc_info:
            validate_category("travel")

        message = exc_info.value.message
        for category in ("food", "health", "housing", "sport", "education"):
            assert category in message

    def test_category_is_case_sensitive(self):
        with pytest.raises(InvalidCategory):
            validate_category("Food")

    def test_description_is_trimmed(self):
        assert validate_description("  Lunch  ") == "Lunch"

    @pytest.mark.parametrize("value", ["", "   ", None, 42])
    def test_description_empty(self, value):
        with pytest.raises(InvalidDescription, match="cannot be empty"):
            validate_description(value)

    def test_description_length_boundary(self):
        assert validate_description("x" * 100) == "x" * 100
        # Surrounding whitespace does not count towards the limit
        assert validate_description("  " + "x" * 100 + "  ") == "x" * 100

    def test_description_too_long(self):
        with pytest.raises(InvalidDescription, match="cannot exceed 100 characters"):
            validate_description("x" * 101)

    @pytest.mark.parametrize(
        "value,expected", [(15.5, 15.5), ("15.5", 15.5), (3, 3.0), ("-20", -20.0), (0, 0.0)]
    )
    def test_sum_coerces_numbers(self, value, expected):
        assert validate_sum(value, ValidationPolicy()) == expected

    @pytest.mark.parametrize("value", ["abc", None, "", True, "nan", "inf", [1], 10**400])
    def test_sum_rejects_non_numbers(self, value):
        with pytest.raises(InvalidSum, match="Sum"):
            validate_sum(value, ValidationPolicy())

    def test_sum_failure_is_an_add_failure(self):
        with pytest.raises(AddCostFailed):
            validate_sum("abc", ValidationPolicy())

    @pytest.mark.parametrize("value", [0, -0.01, "-20"])
    def test_positive_sum_policy_rejects_zero_and_negative(self, value):
        policy = ValidationPolicy(require_positive_sum=True)

        with pytest.raises(InvalidSum, match="positive"):
            validate_sum(value, policy)

    def test_positive_sum_policy_accepts_positive(self):
        policy = ValidationPolicy(require_positive_sum=True)

        assert validate_sum("0.01", policy) == 0.01

    def test_date_absent(self):
        assert parse_cost_date(None) is None
        assert parse_cost_date("") is None

    def test_date_only_is_midnight_utc(self):
        assert parse_cost_date("2024-06-01") == datetime(2024, 6, 1, tzinfo=timezone.utc)

    def test_date_with_offset_is_converted_to_utc(self):
        parsed = parse_cost_date("2024-06-01T01:30:00+02:00")

        assert parsed == datetime(2024, 5, 31, 23, 30, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_date_accepts_datetime_objects(self):
        naive = datetime(2024, 6, 1, 8, 0)

        assert parse_cost_date(naive) == datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        [
            "not a date",
            "2024-13-01",
            "2023-02-29",
            "01/06/2024",
            "9999-12-31T23:00:00-05:00",
            "0001-01-01T00:00:00+05:00",
        ],
    )
    def test_date_rejects_invalid_values(self, value):
        with pytest.raises(InvalidDate, match="date"):
            parse_cost_date(value)

    def test_fields_checked_in_order(self):
        """Category is reported before description, sum and date."""
        request = CostRequest(
            description="", category="travel", userid=1, sum="abc", date="nope"
        )

        with pytest.raises(InvalidCategory):
            validate_cost_fields(request, ValidationPolicy())

    def test_valid_fields_are_normalized(self):
        request = CostRequest.from_dict(
            {
                "description": " Gym ",
                "category": "sport",
                "userid": "1",
                "sum": "30",
                "date": "2024-01-15",
            }
        )

        fields = validate_cost_fields(request, ValidationPolicy())

        assert fields.description == "Gym"
        assert fields.category == "sport"
        assert fields.sum == 30.0
        assert fields.date == datetime(2024, 1, 15, tzinfo=timezone.utc)


class TestReportValidation:
    """Tests for report request parsing."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_user_id(self, value):
        with pytest.raises(MissingUserId):
            parse_report_user_id(value)

    @pytest.mark.parametrize("value", ["abc", "12a", "-1", "1.5"])
    def test_invalid_user_id(self, value):
        with pytest.raises(InvalidUserId):
            parse_report_user_id(value)

    def test_valid_user_id(self):
        assert parse_report_user_id("123123") == 123123
        assert parse_report_user_id(str(2**63 - 1)) == 2**63 - 1

    @pytest.mark.parametrize("value", [str(2**63), "9" * 5000])
    def test_user_id_too_large_for_the_store(self, value):
        with pytest.raises(UserNotFound):
            parse_report_user_id(value)

    def test_missing_user_id_shares_invalid_id_code(self):
        assert MissingUserId("x").code == InvalidUserId("x").code

    def test_valid_period(self):
        assert parse_report_period("2024", "06", ValidationPolicy()) == (2024, 6)

    def test_year_format_checked_before_month(self):
        with pytest.raises(InvalidYearFormat):
            parse_report_period("20a4", "13", ValidationPolicy())

    @pytest.mark.parametrize("year", [None, "", "-2024", "2024.0", " 2024", "²"])
    def test_invalid_year_format(self, year):
        with pytest.raises(InvalidYearFormat):
            parse_report_period(year, "6", ValidationPolicy())

    @pytest.mark.parametrize("month", [None, "", "june", "-1", "6.0"])
    def test_invalid_month_format(self, month):
        with pytest.raises(InvalidMonthFormat):
            parse_report_period("2024", month, ValidationPolicy())

    @pytest.mark.parametrize("month", ["0", "13", "00", "99"])
    def test_month_out_of_range(self, month):
        with pytest.raises(InvalidMonth):
            parse_report_period("2024", month, ValidationPolicy())

    def test_month_checked_regardless_of_year_bounds(self):
        policy = ValidationPolicy(year_min=2000, year_max=2100)

        with pytest.raises(InvalidMonth):
            parse_report_period("1999", "13", policy)

    def test_year_unbounded_by_default(self):
        assert parse_report_period("1999", "1", ValidationPolicy()) == (1999, 1)
        assert parse_report_period("2101", "1", ValidationPolicy()) == (2101, 1)

    @pytest.mark.parametrize("year", ["1999", "2101"])
    def test_configured_year_bounds(self, year):
        policy = ValidationPolicy(year_min=2000, year_max=2100)

        with pytest.raises(InvalidYearRange, match="2000 and 2100"):
            parse_report_period(year, "1", policy)

    @pytest.mark.parametrize("year", ["2000", "2100"])
    def test_configured_year_bounds_inclusive(self, year):
        policy = ValidationPolicy(year_min=2000, year_max=2100)

        assert parse_report_period(year, "1", policy) == (int(year), 1)

    @pytest.mark.parametrize("year", ["0", "10000"])
    def test_years_datetime_cannot_represent(self, year):
        with pytest.raises(InvalidYearRange):
            parse_report_period(year, "1", ValidationPolicy())

    def test_all_report_errors_are_validation_errors(self):
        for error in (
            MissingUserId,
            InvalidUserId,
            InvalidYearFormat,
            InvalidMonthFormat,
            InvalidMonth,
            InvalidYearRange,
        ):
            assert issubclass(error, ValidationError)
            assert error("x").status == 400
