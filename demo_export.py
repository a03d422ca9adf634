#!/usr/bin/env python3
"""
Demo: Export the example staff roster as CSV.

Shows the same records under several encoder configurations.
"""

from csvtable import (
    BoolEncodingStrategy,
    DateEncodingStrategy,
    EncoderConfiguration,
    FormattedDateEncoding,
)
from csvtable.examples import build_example_people, build_example_table
from csvtable.serialization import configuration_to_yaml


def main():
    people = build_example_people()

    print("=" * 80)
    print("CSV EXPORT DEMO")
    print("=" * 80)

    configurations = {
        "default": EncoderConfiguration(),
        "uppercase yes/no, native dates": EncoderConfiguration(
            date_encoding_strategy=DateEncodingStrategy.DEFERRED_TO_DATE,
            bool_encoding_strategy=BoolEncodingStrategy.YES_NO_UPPERCASE,
        ),
        "integer booleans, day/month/year": EncoderConfiguration(
            date_encoding_strategy=FormattedDateEncoding("%d/%m/%Y"),
            bool_encoding_strategy=BoolEncodingStrategy.INTEGER,
        ),
    }

    for label, configuration in configurations.items():
        print(f"\n{label.upper()}:")
        print("-" * 80)
        print(configuration_to_yaml(configuration).rstrip())
        print("-" * 80)

        table = build_example_table(configuration)
        print(table.export(people))

    print("=" * 80)


if __name__ == "__main__":
    main()
