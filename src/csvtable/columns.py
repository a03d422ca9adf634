"""
Column schema for CSV tables.

A schema is the ordered list of columns that describes one record type:

    ColumnSchema([
        Column("Name", lambda person: person.name),
        Column.keyed("City", "address.city"),
        ("Active", lambda person: person.active),
    ])

ARCHITECTURAL RULE:
    Columns know how to pull a value out of a record.
    They know nothing about formatting or quoting (see csvtable.values).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Tuple, Union

from csvtable.values import Value


Extractor = Callable[[Any], Value]


def resolve_path(record: Any, path: str) -> Any:
    """
    Follow a dotted field path through a record.

    Each segment uses item access on mappings and attribute access on
    everything else, so "address.city" works for objects, dicts, and
    mixtures of both.

    Raises:
        KeyError / AttributeError: If a segment is missing
    """
    current = record
    for segment in path.split("."):
        if isinstance(current, Mapping):
            current = current[segment]
        else:
            current = getattr(current, segment)
    return current


@dataclass(frozen=True)
class Column:
    """
    The definition of a single column in a CSV table.

    Properties:
        header:
            Text written to the header row. Not validated: empty and
            duplicate headers are written as given.

        attribute:
            Function returning this column's value for a record.
            Anything it raises propagates to the caller unchanged.
    """

    header: str
    attribute: Extractor

    @classmethod
    def keyed(cls, header: str, path: str) -> "Column":
        """
        Create a column bound directly to a record field.

        Sugar for Column(header, lambda record: resolve_path(record, path)).

        Args:
            header: Header row text
            path: Dotted field path, e.g. "name" or "address.city"
        """
        return cls(header, lambda record: resolve_path(record, path))


ColumnSpec = Union[Column, Tuple[str, Union[Extractor, str]]]


def _as_column(spec: ColumnSpec) -> Column:
    if isinstance(spec, Column):
        return spec
    header, attribute = spec
    if isinstance(attribute, str):
        return Column.keyed(header, attribute)
    return Column(header, attribute)


class ColumnSchema:
    """
    Ordered, immutable collection of columns for one record type.

    Order is output order, left to right. The schema is built once and can
    be reused (and shared between threads) for any number of encodes.
    """

    def __init__(self, columns: Iterable[ColumnSpec]):
        self._columns: Tuple[Column, ...] = tuple(_as_column(spec) for spec in columns)

    def headers(self) -> List[str]:
        return [column.header for column in self._columns]

    def values(self, record: Any) -> List[Value]:
        """Extract one value per column from a record, in schema order."""
        return [column.attribute(record) for column in self._columns]

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __repr__(self) -> str:
        return f"ColumnSchema({self.headers()!r})"


__all__ = ["Extractor", "Column", "ColumnSpec", "ColumnSchema", "resolve_path"]
