"""Order intake service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import Protocol

from chicken_shop.domain.errors import (
    NotFoundError,
    OrderSideEffectError,
    ValidationError,
)
from chicken_shop.domain.money import format_currency
from chicken_shop.domain.orders import (
    Order,
    OrderItem,
    OrderStatus,
    ValidatedOrder,
    validate_order,
)
from chicken_shop.services.customers import CustomerService
from chicken_shop.services.stock import StockLedger

logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    """Persistence interface for orders and their items."""

    def list_orders(self) -> list[Order]:
        """Return all orders, newest first."""

    def list_orders_by_customer(self, customer_id: str) -> list[Order]:
        """Return a customer's orders, newest first."""

    def list_orders_created_between(
        self, start: datetime, end: datetime
    ) -> list[Order]:
        """Return orders with ``start <= created_at < end``."""

    def get_order(self, order_id: str) -> Order | None:
        """Return an order with its items, if present."""

    def create_order(  # noqa: PLR0913
        self,
        customer_id: str,
        customer_name: str,
        items: list[OrderItem],
        total_amount: Decimal,
        notes: str,
        status: OrderStatus,
        created_at: datetime,
    ) -> Order:
        """Create an order with its items and return it."""

    def update_order(
        self,
        order_id: str,
        changes: dict[str, object],
        items: list[OrderItem] | None,
        updated_at: datetime,
    ) -> Order:
        """Apply field changes, optionally replace items, and return the order."""

    def delete_order(self, order_id: str) -> None:
        """Delete an order and its items."""


@dataclass
class OrderService:
    """Validates, creates and edits orders.

    Creating an order is a sequence of separate store calls: the order
    row, then one stock decrement per item, then the customer's
    last-order timestamp. They are not atomic; see ``create_order``.
    """

    repository: OrderRepository
    stock_ledger: StockLedger
    customer_service: CustomerService

    def validate(
        self, customer_id: str, items: list[OrderItem], notes: str = ""
    ) -> ValidatedOrder:
        """Validate order input and compute its total."""
        return validate_order(customer_id, items, notes)

    def create_order(
        self, validated: ValidatedOrder, now: datetime | None = None
    ) -> Order:
        """Persist a validated order and apply its side effects.

        The customer and every referenced part are checked before anything
        is written. After the order row exists, a failing stock or customer
        update raises ``OrderSideEffectError``; steps that already ran are
        not rolled back.
        """
        customer = self.customer_service.get_customer(validated.customer_id)
        for item in validated.items:
            self.stock_ledger.get_part(item.chicken_part_id)

        created_at = now or datetime.now(tz=UTC)
        order = self.repository.create_order(
            customer_id=customer.id,
            customer_name=customer.name,
            items=validated.items,
            total_amount=validated.total_amount,
            notes=validated.notes,
            status=OrderStatus.PENDING,
            created_at=created_at,
        )
        logger.info(
            "Order created",
            extra={
                "order_id": order.id,
                "total_amount": format_currency(order.total_amount),
            },
        )

        for item in order.items:
            try:
                self.stock_ledger.adjust(item.chicken_part_id, -item.quantity)
            except Exception as exc:
                logger.exception(
                    "Stock decrement failed after order creation",
                    extra={"order_id": order.id, "part_id": item.chicken_part_id},
                )
                raise OrderSideEffectError(
                    order.id, f"stock decrement for part {item.chicken_part_id}", exc
                ) from exc

        try:
            self.customer_service.record_order(customer.id, created_at)
        except Exception as exc:
            logger.exception(
                "Customer update failed after order creation",
                extra={"order_id": order.id, "customer_id": customer.id},
            )
            raise OrderSideEffectError(
                order.id, f"last order update for customer {customer.id}", exc
            ) from exc
        return order

    def place_order(
        self,
        customer_id: str,
        items: list[OrderItem],
        notes: str = "",
        now: datetime | None = None,
    ) -> Order:
        """Validate then create an order."""
        return self.create_order(self.validate(customer_id, items, notes), now=now)

    def get_order(self, order_id: str) -> Order:
        """Return an order or raise ``NotFoundError``."""
        order = self.repository.get_order(order_id)
        if order is None:
            raise NotFoundError("order", order_id)
        return order

    def list_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """Return all orders, optionally only those with ``status``."""
        orders = self.repository.list_orders()
        if status is None:
            return orders
        return [order for order in orders if order.status == status]

    def list_orders_by_customer(self, customer_id: str) -> list[Order]:
        """Return a customer's orders."""
        return self.repository.list_orders_by_customer(customer_id)

    def update_order(
        self,
        order_id: str,
        *,
        customer_id: str | None = None,
        items: list[OrderItem] | None = None,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Edit a pending order's customer, items or notes.

        Items are re-validated and the total recomputed. Stock is not
        re-adjusted for changed quantities. Moving the order to another
        customer recomputes both customers' last order timestamps.
        """
        order = self.get_order(order_id)
        if order.is_locked:
            raise ValidationError(f"{order.status} orders cannot be edited")

        validated = self.validate(
            customer_id if customer_id is not None else order.customer_id,
            items if items is not None else order.items,
            notes if notes is not None else order.notes,
        )
        if items is not None:
            for item in validated.items:
                self.stock_ledger.get_part(item.chicken_part_id)
        changes: dict[str, object] = {
            "notes": validated.notes,
            "total_amount": validated.total_amount,
        }
        customer_changed = validated.customer_id != order.customer_id
        if customer_changed:
            customer = self.customer_service.get_customer(validated.customer_id)
            changes["customer_id"] = customer.id
            changes["customer_name"] = customer.name
        updated = self.repository.update_order(
            order_id,
            changes,
            items=validated.items if items is not None else None,
            updated_at=now or datetime.now(tz=UTC),
        )
        if customer_changed:
            for affected_id in (order.customer_id, updated.customer_id):
                self.customer_service.refresh_last_order(
                    affected_id,
                    latest_order_at(
                        self.repository.list_orders_by_customer(affected_id)
                    ),
                )
        return updated

    def set_status(
        self, order_id: str, status: OrderStatus, now: datetime | None = None
    ) -> Order:
        """Move an order to any status; transitions are unrestricted.

        Cancelling does not return stock to inventory.
        """
        self.get_order(order_id)
        return self.repository.update_order(
            order_id,
            {"status": OrderStatus(status)},
            items=None,
            updated_at=now or datetime.now(tz=UTC),
        )

    def delete_order(self, order_id: str) -> None:
        """Delete an order that is not completed.

        Stock is not restored. The customer's last order timestamp is
        recomputed from the orders that remain.
        """
        order = self.get_order(order_id)
        if order.status == OrderStatus.COMPLETED:
            raise ValidationError("completed orders cannot be deleted")
        self.repository.delete_order(order_id)
        remaining = self.repository.list_orders_by_customer(order.customer_id)
        self.customer_service.refresh_last_order(
            order.customer_id, latest_order_at(remaining)
        )


def latest_order_at(orders: list[Order]) -> datetime | None:
    """Return the newest ``created_at`` in ``orders``, if any."""
    if not orders:
        return None
    return max(order.created_at for order in orders)
