"""
Example staff roster for demos and tests.

Builds a small set of Person records (with nested Address) and the
CSVTable that exports them, covering every value type the encoder
supports: text needing quotes, integers, floats, booleans, datetimes and
missing values.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from csvtable.columns import Column
from csvtable.configuration import DEFAULT_CONFIGURATION, EncoderConfiguration
from csvtable.table import CRLF, CSVTable


@dataclass(frozen=True)
class Address:
    street: str
    city: str


@dataclass(frozen=True)
class Person:
    name: str
    age: int
    salary: float
    active: bool
    joined: datetime
    address: Address
    manager: Optional[str] = None


def build_example_people() -> List[Person]:
    return [
        Person(
            name="Jo, Ann",
            age=34,
            salary=51250.5,
            active=True,
            joined=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            address=Address(street="1 High St", city="Leeds"),
        ),
        Person(
            name='Sam "Ace" Lee',
            age=41,
            salary=64000.0,
            active=False,
            joined=datetime(2019, 6, 3, 9, 0, tzinfo=timezone.utc),
            address=Address(street="Flat 2\n7 Mill Lane", city="York"),
            manager="Jo, Ann",
        ),
    ]


def build_example_table(
    configuration: EncoderConfiguration = DEFAULT_CONFIGURATION,
    line_terminator: str = CRLF,
) -> CSVTable:
    columns = [
        Column.keyed("Name", "name"),
        Column.keyed("Age", "age"),
        Column("Salary", lambda person: person.salary),
        Column("Active", lambda person: person.active),
        Column.keyed("Joined", "joined"),
        Column.keyed("Street", "address.street"),
        Column.keyed("City", "address.city"),
        ("Manager", "manager"),
    ]
    return CSVTable(columns, configuration=configuration, line_terminator=line_terminator)
