"""Revenue and customer activity reports."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo

from chicken_shop.domain.calendar import DECEMBER
from chicken_shop.domain.customers import Customer, CustomerSummary
from chicken_shop.domain.money import ZERO, sum_amounts
from chicken_shop.domain.orders import Order, OrderStatus
from chicken_shop.services.customers import CustomerRepository
from chicken_shop.services.orders import OrderRepository


@dataclass
class RevenueAggregator:
    """Computes revenue over the shop's calendar days and months.

    Revenue is recognised when an order is created: pending and completed
    orders both count, cancelled orders never do.
    """

    order_repository: OrderRepository
    customer_repository: CustomerRepository
    timezone_name: str = "UTC"

    def today_revenue(self, now: datetime | None = None) -> Decimal:
        """Return revenue from orders created today in the shop timezone."""
        start, end = day_bounds(self._local_now(now))
        return self._revenue_between(start, end)

    def monthly_revenue(self, now: datetime | None = None) -> Decimal:
        """Return revenue from orders created this calendar month."""
        start, end = month_bounds(self._local_now(now))
        return self._revenue_between(start, end)

    def inactive_customers(
        self, threshold_days: int, now: datetime | None = None
    ) -> list[Customer]:
        """Return customers who have not ordered in ``threshold_days`` days.

        Customers who never ordered are always included.
        """
        cutoff = self._local_now(now) - timedelta(days=threshold_days)
        return find_inactive(self.customer_repository.list_customers(), cutoff)

    def customer_summaries(self) -> list[CustomerSummary]:
        """Return order count and spend per customer, biggest spender first."""
        return summarize_customers(
            self.customer_repository.list_customers(),
            self.order_repository.list_orders(),
        )

    def _local_now(self, now: datetime | None) -> datetime:
        tz = ZoneInfo(self.timezone_name)
        if now is None:
            return datetime.now(tz=tz)
        return now.astimezone(tz)

    def _revenue_between(self, start: datetime, end: datetime) -> Decimal:
        orders = self.order_repository.list_orders_created_between(
            start.astimezone(UTC), end.astimezone(UTC)
        )
        return revenue_between(orders, start, end)


def is_revenue(order: Order) -> bool:
    """Return True when the order counts toward revenue."""
    return order.status != OrderStatus.CANCELLED


def revenue_between(orders: list[Order], start: datetime, end: datetime) -> Decimal:
    """Sum non-cancelled order totals created in ``[start, end)``."""
    return sum_amounts(
        order.total_amount
        for order in orders
        if is_revenue(order) and start <= order.created_at < end
    )


def find_inactive(customers: list[Customer], cutoff: datetime) -> list[Customer]:
    """Return customers with no order at all or none since ``cutoff``."""
    return [
        customer
        for customer in customers
        if customer.last_order_at is None or customer.last_order_at < cutoff
    ]


def summarize_customers(
    customers: list[Customer], orders: list[Order]
) -> list[CustomerSummary]:
    """Aggregate non-cancelled orders per customer."""
    counts: dict[str, int] = {}
    totals: dict[str, Decimal] = {}
    for order in orders:
        if not is_revenue(order):
            continue
        counts[order.customer_id] = counts.get(order.customer_id, 0) + 1
        totals[order.customer_id] = (
            totals.get(order.customer_id, ZERO) + order.total_amount
        )
    summaries = [
        CustomerSummary(
            customer=customer,
            order_count=counts.get(customer.id, 0),
            total_spent=totals.get(customer.id, ZERO),
        )
        for customer in customers
    ]
    return sorted(summaries, key=lambda summary: summary.total_spent, reverse=True)


def day_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return local midnight of ``now``'s day and the next midnight."""
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def month_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return the start of ``now``'s calendar month and of the next one."""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == DECEMBER:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end
