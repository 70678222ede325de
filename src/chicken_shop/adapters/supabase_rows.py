"""Row conversion helpers shared by the Supabase repositories."""

from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum

from chicken_shop.domain.money import to_decimal


def to_json_value(value: object) -> object:
    """Convert a domain value into something PostgREST accepts."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


def to_row(changes: dict[str, object]) -> dict[str, object]:
    """Convert a dict of field changes into a row payload."""
    return {key: to_json_value(value) for key, value in changes.items()}


def row_id(row: dict[str, object], key: str = "id") -> str:
    """Return a row identifier as an opaque string."""
    value = row.get(key)
    return "" if value is None else str(value)


def row_text(row: dict[str, object], key: str) -> str:
    """Return a text column, treating NULL as empty."""
    value = row.get(key)
    return "" if value is None else str(value)


def row_decimal(row: dict[str, object], key: str) -> Decimal:
    """Return a numeric column as a Decimal."""
    return to_decimal(row.get(key))


def row_datetime(row: dict[str, object], key: str) -> datetime | None:
    """Return a timestamp column, if set; naive values are read as UTC."""
    raw = row.get(key)
    if not isinstance(raw, str) or not raw:
        return None
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def row_date(row: dict[str, object], key: str) -> date:
    """Return a date column; timestamps are cut to their day."""
    raw = row.get(key)
    if isinstance(raw, str) and raw:
        return date.fromisoformat(raw[:10])
    raise ValueError(f"Missing date column: {key}")
