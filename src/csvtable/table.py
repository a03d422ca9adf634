"""
CSV table encoder.

Combines a ColumnSchema and an EncoderConfiguration into CSV text:

    header line
    one line per record, in input order

Output follows RFC 4180: comma delimiter, CRLF line terminator (LF may be
chosen instead), header row always present and first.
"""

import logging
from typing import Any, Iterable, Iterator, Optional, Union

from csvtable.columns import ColumnSchema, ColumnSpec
from csvtable.configuration import DEFAULT_CONFIGURATION, EncoderConfiguration
from csvtable.values import encode_value, escape_field

logger = logging.getLogger(__name__)

CRLF = "\r\n"
LF = "\n"
DELIMITER = ","

_LINE_TERMINATORS = (CRLF, LF)


class CSVTable:
    """
    A reusable CSV encoder for one record type.

    Args:
        columns: A ColumnSchema, or anything ColumnSchema accepts
        configuration: Date and bool strategies (default: ISO 8601, true/false)
        line_terminator: CRLF (default) or LF

    Example:
        table = CSVTable([("Name", "name"), ("Active", "active")])
        text = table.export(people)
    """

    def __init__(
        self,
        columns: Union[ColumnSchema, Iterable[ColumnSpec]],
        configuration: EncoderConfiguration = DEFAULT_CONFIGURATION,
        line_terminator: str = CRLF,
    ):
        if line_terminator not in _LINE_TERMINATORS:
            raise ValueError(f"Unsupported line terminator: {line_terminator!r}")
        self.schema = columns if isinstance(columns, ColumnSchema) else ColumnSchema(columns)
        self.configuration = configuration
        self.line_terminator = line_terminator

    def header_line(self) -> str:
        fields = [escape_field(header) for header in self.schema.headers()]
        return DELIMITER.join(fields) + self.line_terminator

    def encode_row(self, record: Any) -> str:
        fields = [encode_value(value, self.configuration) for value in self.schema.values(record)]
        return DELIMITER.join(fields) + self.line_terminator

    def iter_lines(self, records: Iterable[Any]) -> Iterator[str]:
        """
        Lazily produce the header line, then one line per record.

        Lines already yielded belong to the consumer: if an extractor fails
        on a later record, the exception surfaces from the next iteration.
        """
        yield self.header_line()
        for record in records:
            yield self.encode_row(record)

    def export(self, records: Iterable[Any]) -> str:
        """
        Encode all records into a single CSV string.

        Either the full text is returned or the extractor's exception
        propagates; no partial output escapes.
        """
        lines = list(self.iter_lines(records))
        logger.debug("Exported %d rows across %d columns", len(lines) - 1, len(self.schema))
        return "".join(lines)

    def to_bytes(self, records: Iterable[Any], encoding: str = "utf-8") -> bytes:
        """Encode all records and return the text as bytes (UTF-8 by default)."""
        return self.export(records).encode(encoding)


def encode_table(
    schema: Union[ColumnSchema, Iterable[ColumnSpec]],
    records: Iterable[Any],
    configuration: Optional[EncoderConfiguration] = None,
    line_terminator: str = CRLF,
) -> str:
    """
    Encode records into CSV text in one call.

    Args:
        schema: Columns describing the record type
        records: Any finite iterable of records
        configuration: Strategies to use (None means the default configuration)
        line_terminator: CRLF (default) or LF

    Returns:
        CSV text including the header row
    """
    table = CSVTable(
        schema,
        configuration=configuration or DEFAULT_CONFIGURATION,
        line_terminator=line_terminator,
    )
    return table.export(records)


__all__ = ["CRLF", "LF", "DELIMITER", "CSVTable", "encode_table"]
