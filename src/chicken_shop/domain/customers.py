"""Customer domain models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Customer:
    """A shop customer."""

    id: str
    name: str
    phone: str
    address: str
    notes: str
    last_order_at: datetime | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CustomerSummary:
    """Order activity for one customer."""

    customer: Customer
    order_count: int
    total_spent: Decimal
