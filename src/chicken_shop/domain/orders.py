"""Order aggregate: line items, validation and totals."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from chicken_shop.domain.errors import ValidationError
from chicken_shop.domain.money import (
    ZERO,
    line_total,
    round_currency,
    sum_amounts,
    to_decimal,
)
from chicken_shop.domain.parts import ChickenPart

NO_CUSTOMER = "no customer selected"
NO_ITEMS = "no line items"
DUPLICATE_ITEM = "duplicate item"
NON_POSITIVE_QUANTITY = "quantity must be positive"


class OrderStatus(StrEnum):
    """Lifecycle state of an order."""

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderItem:
    """One (part, quantity) line with the part's name and price copied in.

    An empty ``chicken_part_id`` marks a blank row that has not been
    filled in yet; validation drops such rows.
    """

    chicken_part_id: str
    chicken_part_name: str
    quantity: Decimal
    price_per_kg: Decimal
    total: Decimal

    @classmethod
    def blank(cls) -> "OrderItem":
        """Return an unselected row with a default quantity of one."""
        return cls(
            chicken_part_id="",
            chicken_part_name="",
            quantity=Decimal("1"),
            price_per_kg=ZERO,
            total=ZERO,
        )

    @classmethod
    def for_part(cls, part: ChickenPart, quantity: Decimal) -> "OrderItem":
        """Build a line that snapshots the part's current name and price."""
        return cls(
            chicken_part_id=part.id,
            chicken_part_name=part.name,
            quantity=quantity,
            price_per_kg=part.price_per_kg,
            total=line_total(quantity, part.price_per_kg),
        )


@dataclass(frozen=True)
class ValidatedOrder:
    """Order input that passed validation, ready to be persisted."""

    customer_id: str
    items: list[OrderItem]
    total_amount: Decimal
    notes: str


@dataclass(frozen=True)
class Order:
    """A stored order."""

    id: str
    customer_id: str
    customer_name: str
    items: list[OrderItem]
    total_amount: Decimal
    notes: str
    status: OrderStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_locked(self) -> bool:
        """Completed and cancelled orders can no longer be edited."""
        return self.status in {OrderStatus.COMPLETED, OrderStatus.CANCELLED}


_ITEM_FIELDS = {item_field.name for item_field in fields(OrderItem)}
_DECIMAL_FIELDS = {"price_per_kg", "total"}


def order_total(items: list[OrderItem]) -> Decimal:
    """Return the rounded sum of quantity x price over ``items``."""
    return round_currency(
        sum_amounts(line_total(item.quantity, item.price_per_kg) for item in items)
    )


def validate_order(
    customer_id: str, items: list[OrderItem], notes: str = ""
) -> ValidatedOrder:
    """Check order input and compute its total.

    All problems are collected and raised together in one
    ``ValidationError``. Rows without a selected part are dropped from
    the result.
    """
    errors: list[str] = []
    if not customer_id:
        errors.append(NO_CUSTOMER)
    if not items or all(not item.chicken_part_id for item in items):
        errors.append(NO_ITEMS)

    seen: set[str] = set()
    for position, item in enumerate(items, start=1):
        if not item.chicken_part_id:
            continue
        if item.chicken_part_id in seen:
            errors.append(f"item {position}: {DUPLICATE_ITEM}")
        seen.add(item.chicken_part_id)
        if item.quantity <= 0:
            errors.append(f"item {position}: {NON_POSITIVE_QUANTITY}")

    if errors:
        raise ValidationError(errors)

    kept = [
        replace(item, total=line_total(item.quantity, item.price_per_kg))
        for item in items
        if item.chicken_part_id
    ]
    return ValidatedOrder(
        customer_id=customer_id,
        items=kept,
        total_amount=order_total(kept),
        notes=notes,
    )


def recompute_item(
    items: list[OrderItem],
    index: int,
    field: str,
    value: object,
    parts: Mapping[str, ChickenPart],
) -> list[OrderItem]:
    """Return a copy of ``items`` with one field of one row changed.

    Selecting a part copies that part's current name and price and
    recomputes the row total; changing the quantity recomputes the total
    at the row's existing price. Price and total are set as decimals and
    the name as text, without recomputation. An unknown part id leaves
    the row untouched. An unknown field or a missing row raises
    ``ValidationError``.
    """
    if field not in _ITEM_FIELDS:
        raise ValidationError(f"unknown order item field: {field}")
    if not 0 <= index < len(items):
        raise ValidationError(f"item {index + 1}: no such row")
    updated = list(items)
    item = updated[index]
    if field == "chicken_part_id":
        part = parts.get(str(value))
        if part is None:
            return updated
        item = replace(
            item,
            chicken_part_id=part.id,
            chicken_part_name=part.name,
            price_per_kg=part.price_per_kg,
            total=line_total(item.quantity, part.price_per_kg),
        )
    elif field == "quantity":
        quantity = to_decimal(value)
        item = replace(
            item,
            quantity=quantity,
            total=line_total(quantity, item.price_per_kg),
        )
    elif field in _DECIMAL_FIELDS:
        item = replace(item, **{field: to_decimal(value)})
    else:
        item = replace(item, **{field: str(value)})
    updated[index] = item
    return updated
