"""Stock ledger for chicken parts."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from chicken_shop.domain.errors import NotFoundError, ValidationError
from chicken_shop.domain.money import ZERO, format_quantity, line_total, sum_amounts
from chicken_shop.domain.parts import ChickenPart, StockSummary

logger = logging.getLogger(__name__)


class ChickenPartRepository(Protocol):
    """Persistence interface for chicken parts."""

    def list_parts(self) -> list[ChickenPart]:
        """Return all parts ordered by name."""

    def get_part(self, part_id: str) -> ChickenPart | None:
        """Return a part by id, if present."""

    def create_part(
        self, name: str, price_per_kg: Decimal, stock: Decimal, unit: str
    ) -> ChickenPart:
        """Create a part and return it."""

    def update_part(self, part_id: str, changes: dict[str, object]) -> ChickenPart:
        """Apply field changes to a part and return it."""

    def set_stock(self, part_id: str, stock: Decimal) -> ChickenPart:
        """Overwrite the stock level of a part and return it."""

    def delete_part(self, part_id: str) -> None:
        """Delete a part."""


@dataclass
class StockLedger:
    """Service owning stock levels and the part catalogue."""

    repository: ChickenPartRepository

    def list_parts(self) -> list[ChickenPart]:
        """Return all parts."""
        return self.repository.list_parts()

    def get_part(self, part_id: str) -> ChickenPart:
        """Return a part or raise ``NotFoundError``."""
        part = self.repository.get_part(part_id)
        if part is None:
            raise NotFoundError("chicken part", part_id)
        return part

    def create_part(
        self,
        name: str,
        price_per_kg: Decimal,
        stock: Decimal = ZERO,
        unit: str = "kg",
    ) -> ChickenPart:
        """Validate and create a part."""
        _validate_part_fields(name=name, price_per_kg=price_per_kg, stock=stock)
        return self.repository.create_part(
            name=name.strip(),
            price_per_kg=price_per_kg,
            stock=stock,
            unit=unit or "kg",
        )

    def update_part(
        self,
        part_id: str,
        *,
        name: str | None = None,
        price_per_kg: Decimal | None = None,
        stock: Decimal | None = None,
        unit: str | None = None,
    ) -> ChickenPart:
        """Validate and apply edits to a part.

        Existing orders keep the price they were taken at.
        """
        self.get_part(part_id)
        _validate_part_fields(name=name, price_per_kg=price_per_kg, stock=stock)
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name.strip()
        if price_per_kg is not None:
            changes["price_per_kg"] = price_per_kg
        if stock is not None:
            changes["stock"] = stock
        if unit is not None:
            changes["unit"] = unit
        if not changes:
            return self.get_part(part_id)
        return self.repository.update_part(part_id, changes)

    def delete_part(self, part_id: str) -> None:
        """Delete a part."""
        self.get_part(part_id)
        self.repository.delete_part(part_id)

    def adjust(self, part_id: str, signed_amount: Decimal) -> Decimal:
        """Apply a signed adjustment and return the new stock level.

        Never fails on over-selling: the result is clamped at zero and a
        warning is logged instead.
        """
        part = self.get_part(part_id)
        new_stock = apply_adjustment(part.stock, signed_amount)
        if part.stock + signed_amount < 0:
            logger.warning(
                "Stock adjustment clamped at zero",
                extra={
                    "part_id": part_id,
                    "current_stock": format_quantity(part.stock, part.unit),
                    "adjustment": format_quantity(signed_amount, part.unit),
                },
            )
        self.repository.set_stock(part_id, new_stock)
        return new_stock

    def low_stock(self, threshold: Decimal) -> list[ChickenPart]:
        """Return parts with stock strictly below ``threshold``."""
        return filter_low_stock(self.repository.list_parts(), threshold)

    def stock_summary(self) -> StockSummary:
        """Return total weight and value of stock on hand."""
        return summarize_stock(self.repository.list_parts())


def apply_adjustment(current: Decimal, signed_amount: Decimal) -> Decimal:
    """Return ``current + signed_amount`` clamped at zero."""
    return max(ZERO, current + signed_amount)


def filter_low_stock(parts: list[ChickenPart], threshold: Decimal) -> list[ChickenPart]:
    """Return the parts below ``threshold``, lowest stock first."""
    low = [part for part in parts if part.stock < threshold]
    return sorted(low, key=lambda part: (part.stock, part.name))


def summarize_stock(parts: list[ChickenPart]) -> StockSummary:
    """Aggregate weight and value across ``parts``."""
    return StockSummary(
        part_count=len(parts),
        total_stock=sum_amounts(part.stock for part in parts),
        total_value=sum_amounts(
            line_total(part.stock, part.price_per_kg) for part in parts
        ),
    )


def _validate_part_fields(
    *,
    name: str | None,
    price_per_kg: Decimal | None,
    stock: Decimal | None,
) -> None:
    errors: list[str] = []
    if name is not None and not name.strip():
        errors.append("name is required")
    if price_per_kg is not None and price_per_kg < 0:
        errors.append("price must not be negative")
    if stock is not None and stock < 0:
        errors.append("stock must not be negative")
    if errors:
        raise ValidationError(errors)
