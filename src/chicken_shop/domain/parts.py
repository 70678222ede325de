"""Domain models for chicken parts and stock."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ChickenPart:
    """A priced, weighable stock-keeping unit."""

    id: str
    name: str
    price_per_kg: Decimal
    stock: Decimal
    unit: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class StockSummary:
    """Totals across all parts on hand."""

    part_count: int
    total_stock: Decimal
    total_value: Decimal
