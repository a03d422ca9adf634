"""
Value encoder for CSV fields.

Converts a single scalar value into the text of one CSV field.

Two stages:
    1. format_value: value -> raw text, honouring the EncoderConfiguration
    2. escape_field: raw text -> RFC 4180 field (quoted only when needed)

Every field goes through both stages, whatever its source type.
"""

from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from csvtable.configuration import (
    DEFAULT_CONFIGURATION,
    CustomDateEncoding,
    DateEncodingStrategy,
    DateStrategy,
    EncoderConfiguration,
    FormattedDateEncoding,
    bool_encoding_values,
)


Value = Optional[Union[str, bool, int, float, Decimal, UUID, date, datetime]]

QUOTE = '"'
_QUOTE_TRIGGERS = (",", QUOTE, "\r", "\n")


class UnsupportedValueError(TypeError):
    """Raised when an extractor yields a value the encoder cannot represent."""
    pass


def needs_quoting(text: str) -> bool:
    """True when text contains a comma, double quote, CR or LF."""
    return any(trigger in text for trigger in _QUOTE_TRIGGERS)


def escape_field(text: str) -> str:
    """
    Apply RFC 4180 quoting to a raw field.

    Fields containing a delimiter, quote or line break are wrapped in
    double quotes with each internal quote doubled. Anything else,
    including the empty string, is returned unchanged.

    Examples:
        Jo, Ann     ->  "Jo, Ann"
        say "hi"    ->  wrapped in quotes, inner quotes doubled
        plain       ->  plain
    """
    if not needs_quoting(text):
        return text
    return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE


def _to_utc(value: date) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            # Naive datetimes are taken as UTC already
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return datetime.combine(value, time.min)


def format_date(value: date, strategy: DateStrategy) -> str:
    """
    Render a date or datetime according to a date strategy.

    Args:
        value: date or datetime to render
        strategy: One of the DateStrategy variants

    Returns:
        Raw (unescaped) field text
    """
    if strategy == DateEncodingStrategy.DEFERRED_TO_DATE:
        return str(value)
    if strategy == DateEncodingStrategy.ISO8601:
        # isoformat zero-pads years below 1000, strftime("%Y") does not on glibc
        return _to_utc(value).isoformat(timespec="seconds") + "Z"
    if isinstance(strategy, FormattedDateEncoding):
        return value.strftime(strategy.pattern)
    if isinstance(strategy, CustomDateEncoding):
        text = strategy.function(value)
        if not isinstance(text, str):
            raise TypeError(
                f"Custom date encoding must return str, got {type(text).__name__}"
            )
        return text
    raise TypeError(f"Unsupported date encoding strategy: {type(strategy)}")


def format_value(value: Value, configuration: EncoderConfiguration = DEFAULT_CONFIGURATION) -> str:
    """
    Convert a value to its raw field text, before escaping.

    Args:
        value: str, bool, int, float, Decimal, UUID, date, datetime or None
        configuration: Strategies for dates and booleans

    Returns:
        Raw field text

    Raises:
        UnsupportedValueError: If value is of any other type
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        true_text, false_text = bool_encoding_values(configuration.bool_encoding_strategy)
        return true_text if value else false_text
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    # datetime is a date subclass, format_date handles both
    if isinstance(value, date):
        return format_date(value, configuration.date_encoding_strategy)
    raise UnsupportedValueError(f"Unsupported CSV value type: {type(value).__name__}")


def encode_value(value: Value, configuration: EncoderConfiguration = DEFAULT_CONFIGURATION) -> str:
    """Format and escape a value into a finished CSV field."""
    return escape_field(format_value(value, configuration))


__all__ = [
    "Value",
    "UnsupportedValueError",
    "needs_quoting",
    "escape_field",
    "format_date",
    "format_value",
    "encode_value",
]
