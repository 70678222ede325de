"""Dashboard figures combining sales, wages and stock."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from chicken_shop.domain.stats import DashboardStats
from chicken_shop.services.customers import CustomerService
from chicken_shop.services.employees import EmployeeService
from chicken_shop.services.revenue import RevenueAggregator
from chicken_shop.services.stock import StockLedger
from chicken_shop.services.wages import WageLedger


@dataclass
class DashboardService:
    """Service for the headline dashboard."""

    revenue: RevenueAggregator
    wage_ledger: WageLedger
    stock_ledger: StockLedger
    customer_service: CustomerService
    employee_service: EmployeeService

    def get_stats(
        self,
        low_stock_threshold: Decimal,
        inactive_days: int,
        now: datetime | None = None,
    ) -> DashboardStats:
        """Return today's and this month's figures.

        Profit is revenue minus wages paid over the same window.
        """
        local_now = (
            now.astimezone(ZoneInfo(self.revenue.timezone_name))
            if now
            else datetime.now(tz=ZoneInfo(self.revenue.timezone_name))
        )
        today_revenue = self.revenue.today_revenue(local_now)
        monthly_revenue = self.revenue.monthly_revenue(local_now)
        today_wages = self.wage_ledger.daily_total(local_now.date())
        monthly_wages = self.wage_ledger.month_total(local_now.year, local_now.month)
        return DashboardStats(
            today_revenue=today_revenue,
            monthly_revenue=monthly_revenue,
            today_wages=today_wages,
            monthly_wages=monthly_wages,
            today_profit=today_revenue - today_wages,
            monthly_profit=monthly_revenue - monthly_wages,
            total_customers=len(self.customer_service.list_customers()),
            total_employees=len(self.employee_service.list_employees()),
            low_stock_items=self.stock_ledger.low_stock(low_stock_threshold),
            inactive_customers=self.revenue.inactive_customers(
                inactive_days, local_now
            ),
        )
