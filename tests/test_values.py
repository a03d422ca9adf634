"""
Tests for the value encoder.

Quoting is the part of CSV output that is easy to get wrong, so the escaping
stage is checked against a broad set of awkward strings, and every supported
value type is checked under each relevant strategy.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID

import pytest
from csvtable.configuration import (
    BoolEncodingStrategy,
    CustomBoolEncoding,
    CustomDateEncoding,
    DateEncodingStrategy,
    EncoderConfiguration,
    FormattedDateEncoding,
)
from csvtable.values import (
    UnsupportedValueError,
    encode_value,
    escape_field,
    format_value,
    needs_quoting,
)


def unescape_field(field: str) -> str:
    """Inverse of escape_field for a single field."""
    if field.startswith('"') and field.endswith('"') and len(field) >= 2:
        return field[1:-1].replace('""', '"')
    return field


QUOTED_SAMPLES = [
    "Jo, Ann",
    'say "hi"',
    '"',
    '""',
    ",",
    "line one\nline two",
    "carriage\rreturn",
    "windows\r\nbreak",
    'all, of "them"\r\n',
    ' leading comma,',
]

PLAIN_SAMPLES = [
    "",
    "plain",
    "with spaces",
    "semi;colon",
    "tab\tseparated",
    "single 'quotes'",
    "Montréal",
    "123",
]


class TestEscapeField:
    """RFC 4180 escaping stage."""

    @pytest.mark.parametrize("raw", QUOTED_SAMPLES)
    def test_trigger_characters_are_quoted(self, raw):
        """Fields with comma, quote, CR or LF are wrapped in quotes."""
        escaped = escape_field(raw)
        assert escaped.startswith('"') and escaped.endswith('"')
        assert escaped[1:-1] == raw.replace('"', '""')

    @pytest.mark.parametrize("raw", QUOTED_SAMPLES)
    def test_quoted_fields_round_trip(self, raw):
        """Unquoting an escaped field gives back the original text."""
        assert unescape_field(escape_field(raw)) == raw

    @pytest.mark.parametrize("raw", PLAIN_SAMPLES)
    def test_plain_fields_are_verbatim(self, raw):
        """Fields without trigger characters are not quoted."""
        assert escape_field(raw) == raw
        assert not needs_quoting(raw)

    def test_internal_quotes_doubled(self):
        assert escape_field('say "hi"') == '"say ""hi"""'

    def test_empty_string_stays_empty(self):
        assert escape_field("") == ""

    @pytest.mark.parametrize("raw", QUOTED_SAMPLES + PLAIN_SAMPLES)
    def test_unquoted_output_never_contains_triggers(self, raw):
        """Anything emitted without quotes is free of trigger characters."""
        escaped = escape_field(raw)
        if not escaped.startswith('"'):
            assert not any(c in escaped for c in ',"\r\n')


class TestScalars:
    """Strings, numbers and missing values."""

    def test_string_passes_through(self):
        assert format_value("hello") == "hello"

    def test_string_is_escaped(self):
        assert encode_value("Jo, Ann") == '"Jo, Ann"'

    def test_integer(self):
        assert encode_value(42) == "42"
        assert encode_value(-7) == "-7"

    def test_large_integer_has_no_separators(self):
        assert encode_value(1234567890) == "1234567890"

    def test_float_uses_round_trippable_repr(self):
        assert encode_value(0.1) == "0.1"
        assert encode_value(51250.5) == "51250.5"
        assert float(encode_value(1 / 3)) == 1 / 3

    def test_decimal(self):
        assert encode_value(Decimal("19.990")) == "19.990"

    def test_uuid(self):
        value = UUID("12345678-1234-5678-1234-567812345678")
        assert encode_value(value) == "12345678-1234-5678-1234-567812345678"

    def test_none_is_empty_field(self):
        assert encode_value(None) == ""

    def test_unsupported_type_raises(self):
        """Values outside the supported set fail loudly, naming the type."""
        with pytest.raises(UnsupportedValueError, match="list"):
            encode_value(["a", "b"])

    def test_unsupported_value_error_is_type_error(self):
        with pytest.raises(TypeError):
            encode_value(object())


class TestBooleans:
    """Boolean strategies are a pure lookup."""

    @pytest.mark.parametrize(
        "strategy, expected",
        [
            (BoolEncodingStrategy.TRUE_FALSE, ("true", "false")),
            (BoolEncodingStrategy.TRUE_FALSE_UPPERCASE, ("TRUE", "FALSE")),
            (BoolEncodingStrategy.YES_NO, ("yes", "no")),
            (BoolEncodingStrategy.YES_NO_UPPERCASE, ("YES", "NO")),
            (BoolEncodingStrategy.INTEGER, ("1", "0")),
            (CustomBoolEncoding("on", "off"), ("on", "off")),
        ],
    )
    def test_strategy_pairs(self, strategy, expected):
        config = EncoderConfiguration(bool_encoding_strategy=strategy)
        assert encode_value(True, config) == expected[0]
        assert encode_value(False, config) == expected[1]

    def test_default_is_lowercase_true_false(self):
        assert encode_value(True) == "true"
        assert encode_value(False) == "false"

    def test_bool_not_treated_as_integer(self):
        """bool subclasses int but must use the bool strategy."""
        config = EncoderConfiguration(bool_encoding_strategy=BoolEncodingStrategy.YES_NO)
        assert encode_value(True, config) == "yes"

    def test_custom_texts_are_escaped(self):
        config = EncoderConfiguration(bool_encoding_strategy=CustomBoolEncoding("yes, sir", "no"))
        assert encode_value(True, config) == '"yes, sir"'


class TestDates:
    """Date strategies."""

    INSTANT = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)

    def test_iso8601_known_instant(self):
        assert encode_value(self.INSTANT) == "2024-01-15T10:30:00Z"

    def test_iso8601_converts_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2024, 1, 15, 12, 30, 0, tzinfo=plus_two)
        assert encode_value(value) == "2024-01-15T10:30:00Z"

    def test_iso8601_naive_datetime_taken_as_utc(self):
        assert encode_value(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00Z"

    def test_iso8601_drops_microseconds(self):
        value = datetime(2024, 1, 15, 10, 30, 0, 999999, tzinfo=timezone.utc)
        assert encode_value(value) == "2024-01-15T10:30:00Z"

    def test_iso8601_plain_date_is_midnight(self):
        assert encode_value(date(2024, 1, 15)) == "2024-01-15T00:00:00Z"

    def test_deferred_to_date_uses_str(self):
        config = EncoderConfiguration(date_encoding_strategy=DateEncodingStrategy.DEFERRED_TO_DATE)
        value = datetime(2024, 1, 15, 10, 30)
        assert encode_value(value, config) == "2024-01-15 10:30:00"
        assert encode_value(date(2024, 1, 15), config) == "2024-01-15"

    def test_formatted_pattern(self):
        config = EncoderConfiguration(date_encoding_strategy=FormattedDateEncoding("%d/%m/%Y"))
        assert encode_value(self.INSTANT, config) == "15/01/2024"

    def test_formatted_output_is_escaped(self):
        config = EncoderConfiguration(date_encoding_strategy=FormattedDateEncoding("%b %d, %Y"))
        assert encode_value(self.INSTANT, config) == '"Jan 15, 2024"'

    def test_custom_function(self):
        config = EncoderConfiguration(
            date_encoding_strategy=CustomDateEncoding(lambda d: f"Y{d.year}")
        )
        assert encode_value(self.INSTANT, config) == "Y2024"

    def test_custom_function_errors_propagate(self):
        """Exceptions from a custom formatter reach the caller unchanged."""
        def broken(_):
            raise RuntimeError("formatter failed")

        config = EncoderConfiguration(date_encoding_strategy=CustomDateEncoding(broken))
        with pytest.raises(RuntimeError, match="formatter failed"):
            encode_value(self.INSTANT, config)

    def test_iso8601_pads_years_below_1000(self):
        """Years are always written with four digits."""
        value = datetime(999, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert encode_value(value) == "0999-01-02T03:04:05Z"

    def test_custom_function_must_return_text(self):
        config = EncoderConfiguration(date_encoding_strategy=CustomDateEncoding(lambda d: d.year))
        with pytest.raises(TypeError, match="must return str, got int"):
            encode_value(self.INSTANT, config)


class TestPackageImport:
    """The public API is importable from the package root."""

    def test_encoder_exported(self):
        import csvtable

        assert csvtable.escape_field is escape_field
        assert csvtable.encode_value("a,b") == '"a,b"'
