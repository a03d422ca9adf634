"""
Serialization helpers for encoder configurations.

Provides JSON/YAML round-trip of EncoderConfiguration via an intermediate
dict representation, so table policies can live in config files:

    date_encoding_strategy: {formatted: "%d/%m/%Y"}
    bool_encoding_strategy: yes_no_uppercase

CustomDateEncoding wraps a Python function and cannot be serialized.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

import yaml

from csvtable.configuration import (
    BoolEncodingStrategy,
    BoolStrategy,
    CustomBoolEncoding,
    CustomDateEncoding,
    DateEncodingStrategy,
    DateStrategy,
    EncoderConfiguration,
    FormattedDateEncoding,
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a configuration document cannot be understood."""
    pass


def date_strategy_to_dict(strategy: DateStrategy) -> Any:
    if isinstance(strategy, DateEncodingStrategy):
        return strategy.value
    if isinstance(strategy, FormattedDateEncoding):
        return {"formatted": strategy.pattern}
    if isinstance(strategy, CustomDateEncoding):
        raise TypeError("CustomDateEncoding wraps a function and cannot be serialized")
    raise TypeError(f"Unsupported date encoding strategy: {type(strategy)}")


def date_strategy_from_dict(d: Any) -> DateStrategy:
    if isinstance(d, str):
        try:
            return DateEncodingStrategy(d)
        except ValueError:
            raise ConfigurationError(f"Unknown date encoding strategy: {d!r}")
    if isinstance(d, dict) and set(d) == {"formatted"}:
        if not isinstance(d["formatted"], str):
            raise ConfigurationError(f"Date format pattern must be a string: {d['formatted']!r}")
        return FormattedDateEncoding(pattern=d["formatted"])
    raise ConfigurationError(f"Malformed date encoding strategy: {d!r}")


def bool_strategy_to_dict(strategy: BoolStrategy) -> Any:
    if isinstance(strategy, BoolEncodingStrategy):
        return strategy.name.lower()
    if isinstance(strategy, CustomBoolEncoding):
        return {"custom": {"true": strategy.true_text, "false": strategy.false_text}}
    raise TypeError(f"Unsupported bool encoding strategy: {type(strategy)}")


def bool_strategy_from_dict(d: Any) -> BoolStrategy:
    if isinstance(d, str):
        try:
            return BoolEncodingStrategy[d.upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown bool encoding strategy: {d!r}")
    if isinstance(d, dict) and set(d) == {"custom"} and isinstance(d["custom"], dict):
        pair = d["custom"]
        # YAML 1.1 reads bare true/false keys as booleans
        true_text = pair.get("true", pair.get(True))
        false_text = pair.get("false", pair.get(False))
        if true_text is None or false_text is None:
            raise ConfigurationError(f"Custom bool encoding needs 'true' and 'false' texts: {pair!r}")
        if not isinstance(true_text, str) or not isinstance(false_text, str):
            raise ConfigurationError(
                f"Custom bool encoding texts must be strings (quote yes/no/on/off in YAML): {pair!r}"
            )
        return CustomBoolEncoding(true_text=true_text, false_text=false_text)
    raise ConfigurationError(f"Malformed bool encoding strategy: {d!r}")


def configuration_to_dict(c: EncoderConfiguration) -> Dict[str, Any]:
    return {
        "date_encoding_strategy": date_strategy_to_dict(c.date_encoding_strategy),
        "bool_encoding_strategy": bool_strategy_to_dict(c.bool_encoding_strategy),
    }


def configuration_from_dict(d: Dict[str, Any] | None) -> EncoderConfiguration:
    """Build a configuration from a dict; missing keys keep their defaults."""
    if d is None:
        return EncoderConfiguration()
    if not isinstance(d, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(d).__name__}")
    unknown = set(d) - {"date_encoding_strategy", "bool_encoding_strategy"}
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

    kwargs = {}
    if "date_encoding_strategy" in d:
        kwargs["date_encoding_strategy"] = date_strategy_from_dict(d["date_encoding_strategy"])
    if "bool_encoding_strategy" in d:
        kwargs["bool_encoding_strategy"] = bool_strategy_from_dict(d["bool_encoding_strategy"])
    configuration = EncoderConfiguration(**kwargs)
    logger.debug("Loaded encoder configuration: %s", configuration)
    return configuration


def configuration_to_json(c: EncoderConfiguration) -> str:
    return json.dumps(configuration_to_dict(c), sort_keys=True)


def configuration_from_json(s: str) -> EncoderConfiguration:
    d = json.loads(s)
    return configuration_from_dict(d)


def configuration_to_yaml(c: EncoderConfiguration) -> str:
    return yaml.safe_dump(configuration_to_dict(c))


def configuration_from_yaml(s: str) -> EncoderConfiguration:
    d = yaml.safe_load(s)
    return configuration_from_dict(d)


__all__ = [
    "ConfigurationError",
    "date_strategy_to_dict",
    "date_strategy_from_dict",
    "bool_strategy_to_dict",
    "bool_strategy_from_dict",
    "configuration_to_dict",
    "configuration_from_dict",
    "configuration_to_json",
    "configuration_from_json",
    "configuration_to_yaml",
    "configuration_from_yaml",
]
