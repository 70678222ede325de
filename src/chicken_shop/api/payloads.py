"""Conversion of domain objects into JSON response bodies."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


def to_payload(value: object) -> object:
    """Recursively convert dataclasses and scalars into JSON-ready values.

    Money and weights are sent as decimal strings so no precision is lost.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return to_payload(asdict(value))
    if isinstance(value, dict):
        return {str(to_payload(key)): to_payload(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_payload(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value
