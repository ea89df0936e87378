"""
Unit Tests for the Row Validator

Tests trimming, weight coercion, error messages and partial success.

Run with: pytest tests/test_row_validator.py -v
"""

import math

import pytest

from freight_routes.core.errors import ERROR_KINDS, INVALID_WEIGHT, REQUIRED_FIELD_MISSING
from freight_routes.core.models import FieldError, TransportRow
from freight_routes.validation import FIELD_RULES, validate_record, validate_rows


def with_weight(record, weight):
    """Copy of `record` with weightKg replaced."""
    return {**record, "weightKg": weight}


def messages(outcome):
    """Messages of a rejected record."""
    assert isinstance(outcome, list), f"expected errors, got {outcome!r}"
    return [err.message for err in outcome]


# =============================================================================
# SINGLE RECORD TESTS
# =============================================================================

class TestValidateRecord:
    """Tests for validate_record on well-formed and malformed records."""

    def test_valid_record(self, record):
        """A complete record becomes a TransportRow with a float weight."""
        row = validate_record(record)
        assert row == TransportRow(
            origin="London",
            destination="Paris",
            weight_kg=1000.0,
            origin_country="UK",
            destination_country="France",
        )

    def test_text_fields_trimmed(self, record):
        """Surrounding whitespace is stripped from text fields."""
        row = validate_record({**record, "origin": "  London ", "destinationCountry": " France\t"})
        assert row.origin == "London"
        assert row.destination_country == "France"

    def test_countries_optional(self):
        """Missing country fields default to empty strings."""
        row = validate_record({"origin": "A", "destination": "B", "weightKg": "5"})
        assert row.origin_country == ""
        assert row.destination_country == ""

    def test_extra_fields_ignored(self, record):
        """Unknown keys do not affect validation."""
        row = validate_record({**record, "carrier": "ACME"})
        assert isinstance(row, TransportRow)

    def test_rules_cover_all_fields(self):
        """Rules are declared for the five external fields, in order."""
        assert list(FIELD_RULES) == [
            "origin", "originCountry", "destination", "destinationCountry", "weightKg",
        ]


class TestRequiredFields:
    """Tests for origin/destination presence."""

    def test_missing_origin(self, record):
        """Empty origin is rejected with RequiredFieldMissing."""
        outcome = validate_record({**record, "origin": ""})
        assert outcome == [FieldError("origin", REQUIRED_FIELD_MISSING, "Origin is required")]

    def test_whitespace_destination(self, record):
        """Whitespace-only destination counts as empty."""
        outcome = validate_record({**record, "destination": "   "})
        assert outcome == [FieldError("destination", REQUIRED_FIELD_MISSING, "Destination is required")]

    def test_none_origin(self, record):
        """None is treated like an empty string."""
        assert messages(validate_record({**record, "origin": None})) == ["Origin is required"]

    def test_all_errors_reported(self):
        """An empty record reports every failing field in declaration order."""
        outcome = validate_record({})
        assert [e.field for e in outcome] == ["origin", "destination", "weightKg"]
        assert messages(outcome) == ["Origin is required", "Destination is required", "Required"]

    def test_non_mapping_is_empty_record(self):
        """Anything that is not a mapping is validated as {}."""
        assert len(validate_record(None)) == 3
        assert len(validate_record(["London", "Paris", 10])) == 3


class TestWeight:
    """Tests for weightKg coercion and checks."""

    @pytest.mark.parametrize("raw,expected", [
        ("1000", 1000.0),
        ("  12.5 ", 12.5),
        ("-500", 500.0),
        ("12.5kg", 12.5),
        ("1e3", 1000.0),
        (".5", 0.5),
        (250, 250.0),
        (-3.25, 3.25),
    ])
    def test_coercion(self, record, raw, expected):
        """Numbers and numeric text become abs(float)."""
        row = validate_record(with_weight(record, raw))
        assert isinstance(row, TransportRow)
        assert row.weight_kg == pytest.approx(expected)
        assert isinstance(row.weight_kg, float)

    @pytest.mark.parametrize("raw", ["0", 0, "-0", "0.0"])
    def test_zero_rejected(self, record, raw):
        """Zero (after abs) is not a positive weight."""
        outcome = validate_record(with_weight(record, raw))
        assert outcome == [FieldError("weightKg", INVALID_WEIGHT, "Weight must be a positive number")]

    @pytest.mark.parametrize("raw,message", [
        ("abc", "Expected number, received string"),
        ("", "Expected number, received string"),
        (None, "Expected number, received null"),
        (True, "Expected number, received boolean"),
        (float("nan"), "Expected number, received null"),
    ])
    def test_non_numeric(self, record, raw, message):
        """Values that do not read as numbers are reported with their type."""
        assert messages(validate_record(with_weight(record, raw))) == [message]

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "1e400", math.inf])
    def test_infinite_rejected(self, record, raw):
        """Infinite weights are rejected."""
        assert messages(validate_record(with_weight(record, raw))) == ["Weight must be a finite number"]

    @pytest.mark.parametrize("raw", [10 ** 400, -(10 ** 400)])
    def test_int_beyond_float_range_rejected(self, record, raw):
        """Integers too large for a float are rejected as non-finite."""
        assert messages(validate_record(with_weight(record, raw))) == ["Weight must be a finite number"]

    def test_int_beyond_float_range_keeps_batch(self):
        """An oversized integer weight rejects only its own row."""
        result = validate_rows([
            {"origin": "A", "destination": "B", "weightKg": 10 ** 400},
            {"origin": "C", "destination": "D", "weightKg": 5},
        ])
        assert [r.origin for r in result.valid_rows] == ["C"]
        assert [e.summary() for e in result.errors] == ["Row 1: Weight must be a finite number"]

    def test_missing_key(self, record):
        """An absent weightKg key reports 'Required'."""
        del record["weightKg"]
        assert messages(validate_record(record)) == ["Required"]

    def test_error_kind(self, record):
        """Weight failures are tagged InvalidWeight."""
        outcome = validate_record(with_weight(record, "abc"))
        assert outcome[0].kind == INVALID_WEIGHT


# =============================================================================
# BATCH TESTS
# =============================================================================

class TestValidateRows:
    """Tests for validate_rows partial success and indexing."""

    def test_partial_success(self, mixed_records):
        """Invalid rows do not affect valid ones."""
        result = validate_rows(mixed_records)
        assert [r.origin for r in result.valid_rows] == ["London", "Rotterdam", "London"]
        assert [e.row_index for e in result.errors] == [2, 4]
        assert result.has_errors

    def test_counts_add_up(self, mixed_records):
        """Every record is either valid or rejected."""
        result = validate_rows(mixed_records)
        assert len(result.valid_rows) + len(result.errors) == len(mixed_records)

    def test_error_summaries(self, mixed_records):
        """Summaries carry the 1-based row index and the messages."""
        result = validate_rows(mixed_records)
        assert [e.summary() for e in result.errors] == [
            "Row 2: Origin is required",
            "Row 4: Weight must be a positive number",
        ]

    def test_multiple_messages_joined(self):
        """All messages of a row are comma-joined in its summary."""
        result = validate_rows([{"weightKg": "x"}])
        assert result.errors[0].summary() == (
            "Row 1: Origin is required, Destination is required, Expected number, received string"
        )
        assert result.errors[0].fields == ["origin", "destination", "weightKg"]

    def test_empty_input(self):
        """No records → no rows, no errors."""
        result = validate_rows([])
        assert result.valid_rows == []
        assert result.errors == []
        assert not result.has_errors

    def test_accepts_generator(self, mixed_records):
        """Any iterable of records is accepted."""
        result = validate_rows(r for r in mixed_records)
        assert len(result.valid_rows) == 3

    def test_one_bad_of_three(self):
        """Three rows, the second without origin: two valid, one error at row 2."""
        result = validate_rows([
            {"origin": "A", "destination": "B", "weightKg": 1},
            {"origin": "", "destination": "B", "weightKg": 1},
            {"origin": "C", "destination": "D", "weightKg": 1},
        ])
        assert len(result.valid_rows) == 2
        assert len(result.errors) == 1
        assert result.errors[0].row_index == 2

    def test_error_kinds_known(self, record):
        """Every reported field error carries one of the declared kinds."""
        result = validate_rows([
            {},
            None,
            ["London", "Paris", 10],
            with_weight(record, "abc"),
            with_weight(record, 0),
            with_weight(record, math.inf),
            {**record, "destination": " "},
        ])
        kinds = [e.kind for err in result.errors for e in err.errors]
        assert len(result.errors) == 7
        assert set(kinds) == set(ERROR_KINDS)
