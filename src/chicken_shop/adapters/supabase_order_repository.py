"""Supabase repository for orders and order items."""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from supabase import Client

from chicken_shop.adapters.supabase_rows import (
    row_datetime,
    row_decimal,
    row_id,
    row_text,
    to_row,
)
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.domain.orders import Order, OrderItem, OrderStatus
from chicken_shop.services.orders import OrderRepository

_ORDERS = "orders"
_ITEMS = "order_items"
_SELECT = "*, order_items(*)"


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for orders.

    Items live in their own table and are embedded on reads.
    """

    client: Client

    def list_orders(self) -> list[Order]:
        """Return all orders, newest first."""
        response = (
            self.client.table(_ORDERS)
            .select(_SELECT)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_order(row) for row in response.data or []]

    def list_orders_by_customer(self, customer_id: str) -> list[Order]:
        """Return a customer's orders, newest first."""
        response = (
            self.client.table(_ORDERS)
            .select(_SELECT)
            .eq("customer_id", customer_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_order(row) for row in response.data or []]

    def list_orders_created_between(
        self, start: datetime, end: datetime
    ) -> list[Order]:
        """Return orders created in ``[start, end)``."""
        response = (
            self.client.table(_ORDERS)
            .select(_SELECT)
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_order(row) for row in response.data or []]

    def get_order(self, order_id: str) -> Order | None:
        """Return an order with its items."""
        response = (
            self.client.table(_ORDERS)
            .select(_SELECT)
            .eq("id", order_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])

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
        """Insert the order row and then its item rows."""
        response = (
            self.client.table(_ORDERS)
            .insert(
                to_row(
                    {
                        "customer_id": customer_id,
                        "customer_name": customer_name,
                        "total_amount": total_amount,
                        "notes": notes,
                        "status": status,
                        "created_at": created_at,
                        "updated_at": created_at,
                    }
                )
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create order")
        row = response.data[0]
        order_id = row_id(row)
        row["order_items"] = self._insert_items(order_id, items)
        return _parse_order(row)

    def update_order(
        self,
        order_id: str,
        changes: dict[str, object],
        items: list[OrderItem] | None,
        updated_at: datetime,
    ) -> Order:
        """Update the order row and, when given, replace all of its items."""
        response = (
            self.client.table(_ORDERS)
            .update(to_row({**changes, "updated_at": updated_at}))
            .eq("id", order_id)
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to update order")
        if items is not None:
            self.client.table(_ITEMS).delete().eq("order_id", order_id).execute()
            self._insert_items(order_id, items)
        order = self.get_order(order_id)
        if order is None:
            raise PersistenceError("Order disappeared during update")
        return order

    def delete_order(self, order_id: str) -> None:
        """Delete item rows, then the order row."""
        self.client.table(_ITEMS).delete().eq("order_id", order_id).execute()
        self.client.table(_ORDERS).delete().eq("id", order_id).execute()

    def _insert_items(
        self, order_id: str, items: list[OrderItem]
    ) -> list[dict[str, object]]:
        payload = [
            to_row(
                {
                    "order_id": order_id,
                    "chicken_part_id": item.chicken_part_id,
                    "chicken_part_name": item.chicken_part_name,
                    "quantity": item.quantity,
                    "price_per_kg": item.price_per_kg,
                    "total": item.total,
                }
            )
            for item in items
        ]
        if not payload:
            return []
        response = self.client.table(_ITEMS).insert(payload).execute()
        if not response.data:
            raise PersistenceError("Failed to create order items")
        return response.data


def _item_sort_key(row: dict[str, object]) -> tuple[int, int, str]:
    raw = row_id(row)
    if raw.isdigit():
        return 0, int(raw), ""
    return 1, 0, raw


def _parse_item(row: dict[str, object]) -> OrderItem:
    return OrderItem(
        chicken_part_id=row_id(row, "chicken_part_id"),
        chicken_part_name=row_text(row, "chicken_part_name"),
        quantity=row_decimal(row, "quantity"),
        price_per_kg=row_decimal(row, "price_per_kg"),
        total=row_decimal(row, "total"),
    )


def _parse_order(row: dict[str, object]) -> Order:
    item_rows = row.get("order_items") or []
    items = [_parse_item(item) for item in sorted(item_rows, key=_item_sort_key)]
    created_at = row_datetime(row, "created_at") or datetime.min.replace(tzinfo=UTC)
    return Order(
        id=row_id(row),
        customer_id=row_id(row, "customer_id"),
        customer_name=row_text(row, "customer_name") or "Unknown",
        items=items,
        total_amount=row_decimal(row, "total_amount"),
        notes=row_text(row, "notes"),
        status=OrderStatus(row_text(row, "status") or OrderStatus.PENDING),
        created_at=created_at,
        updated_at=row_datetime(row, "updated_at") or created_at,
    )
