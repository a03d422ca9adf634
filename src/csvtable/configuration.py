"""
Encoder Configuration

Defines the formatting policies applied while turning record values into
CSV fields.

These are pure value objects representing:
    - How dates are written (DateEncodingStrategy)
    - How booleans are written (BoolEncodingStrategy)
    - The pair of policies in force for one table (EncoderConfiguration)

ARCHITECTURAL RULE:
    These objects:
        - Hold policy, not behaviour
        - Are immutable (frozen) and safe to share between threads
        - Are interpreted by csvtable.values, never by themselves
"""

import warnings
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Tuple, Union


class DateEncodingStrategy(Enum):
    """
    Payload-free strategies for encoding dates.

    DEFERRED_TO_DATE:
        Use Python's own str() of the date or datetime.
        Example: 2024-01-15 10:30:00

    ISO8601:
        ISO 8601 / RFC 3339 instant in UTC, seconds precision.
        Example: 2024-01-15T10:30:00Z

    Strategies that carry a payload live in FormattedDateEncoding and
    CustomDateEncoding.
    """

    DEFERRED_TO_DATE = "deferred_to_date"
    ISO8601 = "iso8601"


@dataclass(frozen=True)
class FormattedDateEncoding:
    """
    Defers formatting to a strftime pattern bound at configuration time.

    Example:
        FormattedDateEncoding("%d/%m/%Y")  ->  15/01/2024

    Properties:
        pattern: strftime() format string
    """

    pattern: str


@dataclass(frozen=True)
class CustomDateEncoding:
    """
    Formats dates by calling a user-defined function.

    Properties:
        function: Receives the date to encode and returns the field text

    IMPORTANT:
        The function is shared by every encode call using this configuration.
        It must not depend on mutable state.
        Anything it raises reaches the caller unchanged.
    """

    function: Callable[[date], str]


class BoolEncodingStrategy(Enum):
    """
    Fixed strategies for encoding booleans.

    Each member's value is the (true_text, false_text) pair it emits.
    Use CustomBoolEncoding for any other pair.
    """

    TRUE_FALSE = ("true", "false")
    TRUE_FALSE_UPPERCASE = ("TRUE", "FALSE")
    YES_NO = ("yes", "no")
    YES_NO_UPPERCASE = ("YES", "NO")
    INTEGER = ("1", "0")


@dataclass(frozen=True)
class CustomBoolEncoding:
    """
    Emits caller-supplied strings for boolean fields.

    Properties:
        true_text: Text written for True
        false_text: Text written for False

    IMPORTANT:
        Identical texts are accepted, but make the column unreadable,
        so a UserWarning is issued.
    """

    true_text: str
    false_text: str

    def __post_init__(self):
        if self.true_text == self.false_text:
            warnings.warn(
                f"Custom boolean encoding uses {self.true_text!r} for both True and False",
                UserWarning,
            )


DateStrategy = Union[DateEncodingStrategy, FormattedDateEncoding, CustomDateEncoding]
BoolStrategy = Union[BoolEncodingStrategy, CustomBoolEncoding]


def bool_encoding_values(strategy: BoolStrategy) -> Tuple[str, str]:
    """Return the (true_text, false_text) pair for a boolean strategy."""
    if isinstance(strategy, CustomBoolEncoding):
        return (strategy.true_text, strategy.false_text)
    if isinstance(strategy, BoolEncodingStrategy):
        return strategy.value
    raise TypeError(f"Unsupported bool encoding strategy: {type(strategy)}")


@dataclass(frozen=True)
class EncoderConfiguration:
    """
    A set of decisions about how to encode values for one table.

    Properties:
        date_encoding_strategy:
            How date and datetime values are written.
            Default: DateEncodingStrategy.ISO8601

        bool_encoding_strategy:
            How bool values are written.
            Default: BoolEncodingStrategy.TRUE_FALSE

    Example:
        EncoderConfiguration(
            date_encoding_strategy=FormattedDateEncoding("%Y/%m/%d"),
            bool_encoding_strategy=BoolEncodingStrategy.YES_NO,
        )
    """

    date_encoding_strategy: DateStrategy = DateEncodingStrategy.ISO8601
    bool_encoding_strategy: BoolStrategy = BoolEncodingStrategy.TRUE_FALSE


DEFAULT_CONFIGURATION = EncoderConfiguration()


__all__ = [
    "DateEncodingStrategy",
    "FormattedDateEncoding",
    "CustomDateEncoding",
    "BoolEncodingStrategy",
    "CustomBoolEncoding",
    "DateStrategy",
    "BoolStrategy",
    "bool_encoding_values",
    "EncoderConfiguration",
    "DEFAULT_CONFIGURATION",
]
