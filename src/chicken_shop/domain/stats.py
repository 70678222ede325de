"""Domain models for dashboard statistics."""

from dataclasses import dataclass
from decimal import Decimal

from chicken_shop.domain.customers import Customer
from chicken_shop.domain.parts import ChickenPart


@dataclass(frozen=True)
class DashboardStats:
    """Headline figures for the shop dashboard."""

    today_revenue: Decimal
    monthly_revenue: Decimal
    today_wages: Decimal
    monthly_wages: Decimal
    today_profit: Decimal
    monthly_profit: Decimal
    total_customers: int
    total_employees: int
    low_stock_items: list[ChickenPart]
    inactive_customers: list[Customer]
