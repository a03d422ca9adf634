"""
csvtable: typed, declarative CSV encoding.

Describe a record type once as an ordered list of columns, then encode any
sequence of those records into RFC 4180 CSV text:

    table = CSVTable([("Name", "name"), ("Active", "active")])
    table.export(people)

Dates and booleans are written according to an EncoderConfiguration.
This package performs no I/O: writing the text anywhere is up to the caller.
"""

from csvtable.columns import Column, ColumnSchema, resolve_path
from csvtable.configuration import (
    DEFAULT_CONFIGURATION,
    BoolEncodingStrategy,
    CustomBoolEncoding,
    CustomDateEncoding,
    DateEncodingStrategy,
    EncoderConfiguration,
    FormattedDateEncoding,
)
from csvtable.table import CRLF, LF, CSVTable, encode_table
from csvtable.values import UnsupportedValueError, encode_value, escape_field, format_value

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ColumnSchema",
    "resolve_path",
    "DEFAULT_CONFIGURATION",
    "BoolEncodingStrategy",
    "CustomBoolEncoding",
    "CustomDateEncoding",
    "DateEncodingStrategy",
    "EncoderConfiguration",
    "FormattedDateEncoding",
    "CRLF",
    "LF",
    "CSVTable",
    "encode_table",
    "UnsupportedValueError",
    "encode_value",
    "escape_field",
    "format_value",
]
