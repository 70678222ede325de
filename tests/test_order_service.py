"""Tests for order intake and editing."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from chicken_shop.domain.errors import (
    NotFoundError,
    OrderSideEffectError,
    ValidationError,
)
from chicken_shop.domain.orders import OrderItem, OrderStatus
from tests.conftest import InMemoryChickenPartRepository, InMemoryCustomerRepository

NOW = datetime(2025, 3, 10, 9, 30, tzinfo=UTC)


def _seed(container):  # type: ignore[no-untyped-def]
    customer = container.customer_service.create_customer("Somchai", "0812345678")
    wing = container.stock_ledger.create_part(
        "Wing", price_per_kg=Decimal("120"), stock=Decimal("50")
    )
    breast = container.stock_ledger.create_part(
        "Breast", price_per_kg=Decimal("95.50"), stock=Decimal("20")
    )
    return customer, wing, breast


def test_place_order_decrements_stock_and_stamps_customer(container) -> None:
    customer, wing, _ = _seed(container)

    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("5"))], now=NOW
    )

    assert order.total_amount == Decimal("600.00")
    assert order.status == OrderStatus.PENDING
    assert order.customer_name == "Somchai"
    assert container.stock_ledger.get_part(wing.id).stock == Decimal("45")
    assert container.customer_service.get_customer(customer.id).last_order_at == NOW


def test_place_order_round_trips_items(container) -> None:
    customer, wing, breast = _seed(container)
    items = [
        OrderItem.for_part(wing, Decimal("1.5")),
        OrderItem.for_part(breast, Decimal("2")),
    ]

    order = container.order_service.place_order(customer.id, items, "no skin", NOW)
    fetched = container.order_service.get_order(order.id)

    assert [item.chicken_part_id for item in fetched.items] == [wing.id, breast.id]
    assert fetched.items[0].total == Decimal("180.0")
    assert fetched.total_amount == Decimal("371.00")
    assert fetched.notes == "no skin"


def test_total_is_independent_of_item_order(container) -> None:
    customer, wing, breast = _seed(container)
    first = [
        OrderItem.for_part(wing, Decimal("0.75")),
        OrderItem.for_part(breast, Decimal("1.25")),
    ]

    forward = container.order_service.validate(customer.id, first)
    backward = container.order_service.validate(customer.id, list(reversed(first)))

    assert forward.total_amount == backward.total_amount


def test_validation_collects_every_problem(container) -> None:
    _, wing, _ = _seed(container)
    items = [
        OrderItem.for_part(wing, Decimal("1")),
        OrderItem.for_part(wing, Decimal("0")),
    ]

    with pytest.raises(ValidationError) as exc_info:
        container.order_service.validate("", items)

    assert exc_info.value.messages == [
        "no customer selected",
        "item 2: duplicate item",
        "item 2: quantity must be positive",
    ]


def test_rejected_order_writes_nothing(container, order_repository) -> None:
    customer, wing, _ = _seed(container)
    items = [
        OrderItem.for_part(wing, Decimal("1")),
        OrderItem.for_part(wing, Decimal("2")),
    ]

    with pytest.raises(ValidationError):
        container.order_service.place_order(customer.id, items, now=NOW)

    assert order_repository.orders == {}
    assert container.stock_ledger.get_part(wing.id).stock == Decimal("50")
    assert container.customer_service.get_customer(customer.id).last_order_at is None


def test_only_blank_rows_is_no_items(container) -> None:
    customer, _, _ = _seed(container)

    with pytest.raises(ValidationError) as exc_info:
        container.order_service.validate(customer.id, [OrderItem.blank()])

    assert exc_info.value.messages == ["no line items"]


def test_unknown_customer_is_checked_before_writing(
    container, order_repository
) -> None:
    _, wing, _ = _seed(container)

    with pytest.raises(NotFoundError):
        container.order_service.place_order(
            "missing", [OrderItem.for_part(wing, Decimal("1"))], now=NOW
        )

    assert order_repository.orders == {}


def test_oversell_clamps_stock_at_zero(container) -> None:
    customer, _, breast = _seed(container)

    container.order_service.place_order(
        customer.id, [OrderItem.for_part(breast, Decimal("25"))], now=NOW
    )

    assert container.stock_ledger.get_part(breast.id).stock == Decimal("0")


def test_failed_stock_update_reports_created_order(
    container,
    order_repository,
    part_repository: InMemoryChickenPartRepository,
) -> None:
    customer, wing, breast = _seed(container)
    part_repository.failing_stock_parts.add(breast.id)
    items = [
        OrderItem.for_part(wing, Decimal("2")),
        OrderItem.for_part(breast, Decimal("1")),
    ]

    with pytest.raises(OrderSideEffectError) as exc_info:
        container.order_service.place_order(customer.id, items, now=NOW)

    assert exc_info.value.order_id in order_repository.orders
    assert exc_info.value.to_dict()["message"] == "save failed"
    assert container.stock_ledger.get_part(wing.id).stock == Decimal("48")
    assert container.customer_service.get_customer(customer.id).last_order_at is None


def test_failed_customer_update_keeps_stock_changes(
    container, customer_repository: InMemoryCustomerRepository
) -> None:
    customer, wing, _ = _seed(container)
    customer_repository.fail_last_order_update = True

    with pytest.raises(OrderSideEffectError) as exc_info:
        container.order_service.place_order(
            customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
        )

    assert "last order update" in exc_info.value.step
    assert container.stock_ledger.get_part(wing.id).stock == Decimal("49")


def test_update_pending_order_recomputes_total(container) -> None:
    customer, wing, breast = _seed(container)
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )

    updated = container.order_service.update_order(
        order.id,
        items=[
            OrderItem.for_part(wing, Decimal("1")),
            OrderItem.for_part(breast, Decimal("2")),
        ],
        notes="add breast",
    )

    assert updated.total_amount == Decimal("311.00")
    assert len(updated.items) == 2
    assert updated.notes == "add breast"
    assert container.stock_ledger.get_part(breast.id).stock == Decimal("20")


def test_update_order_switches_customer_name(container) -> None:
    customer, wing, _ = _seed(container)
    other = container.customer_service.create_customer("Malee")
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )

    updated = container.order_service.update_order(order.id, customer_id=other.id)

    assert updated.customer_id == other.id
    assert updated.customer_name == "Malee"
    assert updated.items == order.items


def test_update_order_moves_last_order_between_customers(container) -> None:
    customer, wing, _ = _seed(container)
    other = container.customer_service.create_customer("Malee")
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )

    container.order_service.update_order(order.id, customer_id=other.id)

    assert container.customer_service.get_customer(customer.id).last_order_at is None
    assert container.customer_service.get_customer(other.id).last_order_at == NOW


def test_update_order_rejects_unknown_part(container, order_repository) -> None:
    customer, wing, _ = _seed(container)
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )
    ghost = OrderItem(
        chicken_part_id="missing",
        chicken_part_name="Ghost",
        quantity=Decimal("1"),
        price_per_kg=Decimal("10"),
        total=Decimal("10"),
    )

    with pytest.raises(NotFoundError):
        container.order_service.update_order(order.id, items=[ghost])

    assert order_repository.orders[order.id].items == order.items


@pytest.mark.parametrize("status", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
def test_locked_orders_cannot_be_edited(container, status: OrderStatus) -> None:
    customer, wing, _ = _seed(container)
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )
    container.order_service.set_status(order.id, status)

    with pytest.raises(ValidationError):
        container.order_service.update_order(order.id, notes="late change")


def test_status_transitions_are_unrestricted(container) -> None:
    customer, wing, _ = _seed(container)
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )

    container.order_service.set_status(order.id, OrderStatus.CANCELLED)
    reopened = container.order_service.set_status(order.id, OrderStatus.PENDING)

    assert reopened.status == OrderStatus.PENDING


def test_completed_order_cannot_be_deleted(container) -> None:
    customer, wing, _ = _seed(container)
    order = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )
    container.order_service.set_status(order.id, OrderStatus.COMPLETED)

    with pytest.raises(ValidationError):
        container.order_service.delete_order(order.id)


def test_delete_recomputes_last_order_and_keeps_stock(container) -> None:
    customer, wing, _ = _seed(container)
    earlier = datetime(2025, 3, 1, 8, 0, tzinfo=UTC)
    container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=earlier
    )
    latest = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("2"))], now=NOW
    )

    container.order_service.delete_order(latest.id)

    assert container.customer_service.get_customer(customer.id).last_order_at == earlier
    assert container.stock_ledger.get_part(wing.id).stock == Decimal("47")

    remaining = container.order_service.list_orders_by_customer(customer.id)
    container.order_service.delete_order(remaining[0].id)

    assert container.customer_service.get_customer(customer.id).last_order_at is None


def test_list_orders_filters_by_status(container) -> None:
    customer, wing, _ = _seed(container)
    first = container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )
    container.order_service.place_order(
        customer.id, [OrderItem.for_part(wing, Decimal("1"))], now=NOW
    )
    container.order_service.set_status(first.id, OrderStatus.COMPLETED)

    completed = container.order_service.list_orders(OrderStatus.COMPLETED)

    assert [order.id for order in completed] == [first.id]
    assert len(container.order_service.list_orders()) == 2
