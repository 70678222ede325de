"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from chicken_shop.adapters.supabase_calendar_note_repository import (
    SupabaseCalendarNoteRepository,
)
from chicken_shop.adapters.supabase_chicken_part_repository import (
    SupabaseChickenPartRepository,
)
from chicken_shop.adapters.supabase_customer_repository import (
    SupabaseCustomerRepository,
)
from chicken_shop.adapters.supabase_employee_repository import (
    SupabaseEmployeeRepository,
)
from chicken_shop.adapters.supabase_order_repository import SupabaseOrderRepository
from chicken_shop.adapters.supabase_wage_repository import SupabaseWageRepository
from chicken_shop.config import Settings
from chicken_shop.services.calendar_notes import (
    CalendarNoteRepository,
    CalendarNoteService,
)
from chicken_shop.services.customers import CustomerRepository, CustomerService
from chicken_shop.services.dashboard import DashboardService
from chicken_shop.services.employees import EmployeeRepository, EmployeeService
from chicken_shop.services.orders import OrderRepository, OrderService
from chicken_shop.services.revenue import RevenueAggregator
from chicken_shop.services.stock import ChickenPartRepository, StockLedger
from chicken_shop.services.wages import WageLedger, WageRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    customer_service: CustomerService
    stock_ledger: StockLedger
    order_service: OrderService
    employee_service: EmployeeService
    wage_ledger: WageLedger
    revenue: RevenueAggregator
    calendar_note_service: CalendarNoteService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    customer_repository = SupabaseCustomerRepository(supabase_client)
    part_repository = SupabaseChickenPartRepository(supabase_client)
    order_repository = SupabaseOrderRepository(supabase_client)
    employee_repository = SupabaseEmployeeRepository(supabase_client)
    wage_repository = SupabaseWageRepository(supabase_client)
    note_repository = SupabaseCalendarNoteRepository(supabase_client)
    return wire_container(
        settings=resolved_settings,
        customer_repository=customer_repository,
        part_repository=part_repository,
        order_repository=order_repository,
        employee_repository=employee_repository,
        wage_repository=wage_repository,
        note_repository=note_repository,
    )


def wire_container(  # noqa: PLR0913
    *,
    settings: Settings,
    customer_repository: CustomerRepository,
    part_repository: ChickenPartRepository,
    order_repository: OrderRepository,
    employee_repository: EmployeeRepository,
    wage_repository: WageRepository,
    note_repository: CalendarNoteRepository,
) -> AppContainer:
    """Build services on top of the given repositories."""
    customer_service = CustomerService(customer_repository)
    stock_ledger = StockLedger(part_repository)
    employee_service = EmployeeService(employee_repository)
    order_service = OrderService(
        repository=order_repository,
        stock_ledger=stock_ledger,
        customer_service=customer_service,
    )
    wage_ledger = WageLedger(
        repository=wage_repository,
        employee_service=employee_service,
    )
    revenue = RevenueAggregator(
        order_repository=order_repository,
        customer_repository=customer_repository,
        timezone_name=settings.shop_timezone,
    )
    dashboard_service = DashboardService(
        revenue=revenue,
        wage_ledger=wage_ledger,
        stock_ledger=stock_ledger,
        customer_service=customer_service,
        employee_service=employee_service,
    )
    return AppContainer(
        settings=settings,
        customer_service=customer_service,
        stock_ledger=stock_ledger,
        order_service=order_service,
        employee_service=employee_service,
        wage_ledger=wage_ledger,
        revenue=revenue,
        calendar_note_service=CalendarNoteService(note_repository),
        dashboard_service=dashboard_service,
    )
