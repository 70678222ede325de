"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from decimal import Decimal
from itertools import count

import pytest

from chicken_shop.config import Settings
from chicken_shop.containers import AppContainer, wire_container
from chicken_shop.domain.calendar import CalendarNote
from chicken_shop.domain.customers import Customer
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.domain.orders import Order, OrderItem, OrderStatus
from chicken_shop.domain.parts import ChickenPart
from chicken_shop.domain.staff import DailyWage, DailyWageDraft, Employee
from chicken_shop.services.calendar_notes import CalendarNoteRepository
from chicken_shop.services.customers import CustomerRepository
from chicken_shop.services.employees import EmployeeRepository
from chicken_shop.services.orders import OrderRepository
from chicken_shop.services.stock import ChickenPartRepository
from chicken_shop.services.wages import WageRepository

API_TOKEN = "api-token"
AUTH_HEADERS = {"X-Api-Token": API_TOKEN}


def _id_sequence(prefix: str) -> Iterator[str]:
    return (f"{prefix}-{number}" for number in count(1))


@dataclass
class InMemoryCustomerRepository(CustomerRepository):
    """In-memory customer repository for tests."""

    customers: dict[str, Customer] = field(default_factory=dict)
    fail_last_order_update: bool = False
    _ids: Iterator[str] = field(default_factory=lambda: _id_sequence("customer"))

    def list_customers(self) -> list[Customer]:
        return sorted(self.customers.values(), key=lambda customer: customer.name)

    def get_customer(self, customer_id: str) -> Customer | None:
        return self.customers.get(customer_id)

    def create_customer(
        self, name: str, phone: str, address: str, notes: str
    ) -> Customer:
        customer = Customer(
            id=next(self._ids),
            name=name,
            phone=phone,
            address=address,
            notes=notes,
            created_at=datetime.now(tz=UTC),
        )
        self.customers[customer.id] = customer
        return customer

    def update_customer(self, customer_id: str, changes: dict[str, object]) -> Customer:
        customer = replace(self.customers[customer_id], **changes)
        self.customers[customer_id] = customer
        return customer

    def set_last_order_at(
        self, customer_id: str, last_order_at: datetime | None
    ) -> None:
        if self.fail_last_order_update:
            raise PersistenceError("customer update rejected")
        self.customers[customer_id] = replace(
            self.customers[customer_id], last_order_at=last_order_at
        )

    def delete_customer(self, customer_id: str) -> None:
        self.customers.pop(customer_id, None)


@dataclass
class InMemoryChickenPartRepository(ChickenPartRepository):
    """In-memory chicken part repository for tests."""

    parts: dict[str, ChickenPart] = field(default_factory=dict)
    failing_stock_parts: set[str] = field(default_factory=set)
    _ids: Iterator[str] = field(default_factory=lambda: _id_sequence("part"))

    def list_parts(self) -> list[ChickenPart]:
        return sorted(self.parts.values(), key=lambda part: part.name)

    def get_part(self, part_id: str) -> ChickenPart | None:
        return self.parts.get(part_id)

    def create_part(
        self, name: str, price_per_kg: Decimal, stock: Decimal, unit: str
    ) -> ChickenPart:
        part = ChickenPart(
            id=next(self._ids),
            name=name,
            price_per_kg=price_per_kg,
            stock=stock,
            unit=unit,
            created_at=datetime.now(tz=UTC),
        )
        self.parts[part.id] = part
        return part

    def update_part(self, part_id: str, changes: dict[str, object]) -> ChickenPart:
        part = replace(self.parts[part_id], **changes)
        self.parts[part_id] = part
        return part

    def set_stock(self, part_id: str, stock: Decimal) -> ChickenPart:
        if part_id in self.failing_stock_parts:
            raise PersistenceError("stock update rejected")
        return self.update_part(part_id, {"stock": stock})

    def delete_part(self, part_id: str) -> None:
        self.parts.pop(part_id, None)


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository for tests."""

    orders: dict[str, Order] = field(default_factory=dict)
    _ids: Iterator[str] = field(default_factory=lambda: _id_sequence("order"))

    def list_orders(self) -> list[Order]:
        return sorted(
            self.orders.values(), key=lambda order: order.created_at, reverse=True
        )

    def list_orders_by_customer(self, customer_id: str) -> list[Order]:
        return [
            order for order in self.list_orders() if order.customer_id == customer_id
        ]

    def list_orders_created_between(
        self, start: datetime, end: datetime
    ) -> list[Order]:
        return [
            order
            for order in self.list_orders()
            if start <= order.created_at < end
        ]

    def get_order(self, order_id: str) -> Order | None:
        return self.orders.get(order_id)

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
        order = Order(
            id=next(self._ids),
            customer_id=customer_id,
            customer_name=customer_name,
            items=list(items),
            total_amount=total_amount,
            notes=notes,
            status=status,
            created_at=created_at,
            updated_at=created_at,
        )
        self.orders[order.id] = order
        return order

    def update_order(
        self,
        order_id: str,
        changes: dict[str, object],
        items: list[OrderItem] | None,
        updated_at: datetime,
    ) -> Order:
        order = replace(self.orders[order_id], **changes, updated_at=updated_at)
        if items is not None:
            order = replace(order, items=list(items))
        self.orders[order_id] = order
        return order

    def delete_order(self, order_id: str) -> None:
        self.orders.pop(order_id, None)


@dataclass
class InMemoryEmployeeRepository(EmployeeRepository):
    """In-memory employee repository for tests."""

    employees: dict[str, Employee] = field(default_factory=dict)
    _ids: Iterator[str] = field(default_factory=lambda: _id_sequence("employee"))

    def list_employees(self) -> list[Employee]:
        return sorted(self.employees.values(), key=lambda employee: employee.name)

    def get_employee(self, employee_id: str) -> Employee | None:
        return self.employees.get(employee_id)

    def create_employee(
        self, name: str, phone: str, base_daily_wage: Decimal, notes: str
    ) -> Employee:
        employee = Employee(
            id=next(self._ids),
            name=name,
            phone=phone,
            base_daily_wage=base_daily_wage,
            notes=notes,
        )
        self.employees[employee.id] = employee
        return employee

    def update_employee(self, employee_id: str, changes: dict[str, object]) -> Employee:
        employee = replace(self.employees[employee_id], **changes)
        self.employees[employee_id] = employee
        return employee

    def delete_employee(self, employee_id: str) -> None:
        self.employees.pop(employee_id, None)


@dataclass
class InMemoryWageRepository(WageRepository):
    """In-memory wage repository for tests."""

    wages: dict[str, DailyWage] = field(default_factory=dict)
    _ids: Iterator[str] = field(default_factory=lambda: _id_sequence("wage"))

    def list_wages(self) -> list[DailyWage]:
        return sorted(self.wages.values(), key=lambda wage: wage.date, reverse=True)

    def list_wages_by_employee(self, employee_id: str) -> list[DailyWage]:
        return [wage for wage in self.list_wages() if wage.employee_id == employee_id]

    def list_wages_by_date(self, day: date) -> list[DailyWage]:
        return [wage for wage in self.list_wages() if wage.date == day]

    def list_wages_between(self, start: date, end: date) -> list[DailyWage]:
        return [wage for wage in self.list_wages() if start <= wage.date < end]

    def get_wage(self, wage_id: str) -> DailyWage | None:
        return self.wages.get(wage_id)

    def create_wage(self, draft: DailyWageDraft) -> DailyWage:
        wage = DailyWage(
            id=next(self._ids),
            employee_id=draft.employee_id,
            employee_name=draft.employee_name,
            date=draft.date,
            amount=draft.amount,
            adjustment=draft.adjustment,
            adjustment_reason=draft.adjustment_reason,
            notes=draft.notes,
        )
        self.wages[wage.id] = wage
        return wage

    def update_wage(self, wage_id: str, changes: dict[str, object]) -> DailyWage:
        wage = replace(self.wages[wage_id], **changes)
        self.wages[wage_id] = wage
        return wage

    def delete_wage(self, wage_id: str) -> None:
        self.wages.pop(wage_id, None)


@dataclass
class InMemoryCalendarNoteRepository(CalendarNoteRepository):
    """In-memory calendar note repository for tests."""

    notes: dict[str, CalendarNote] = field(default_factory=dict)
    _ids: Iterator[str] = field(default_factory=lambda: _id_sequence("note"))

    def list_notes(self) -> list[CalendarNote]:
        return sorted(self.notes.values(), key=lambda note: note.date)

    def list_notes_by_date(self, day: date) -> list[CalendarNote]:
        return [note for note in self.list_notes() if note.date == day]

    def list_notes_between(self, start: date, end: date) -> list[CalendarNote]:
        return [note for note in self.list_notes() if start <= note.date < end]

    def get_note(self, note_id: str) -> CalendarNote | None:
        return self.notes.get(note_id)

    def create_note(self, day: date, title: str, content: str) -> CalendarNote:
        note = CalendarNote(
            id=next(self._ids),
            date=day,
            title=title,
            content=content,
        )
        self.notes[note.id] = note
        return note

    def update_note(self, note_id: str, changes: dict[str, object]) -> CalendarNote:
        note = replace(self.notes[note_id], **changes)
        self.notes[note_id] = note
        return note

    def delete_note(self, note_id: str) -> None:
        self.notes.pop(note_id, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        api_token=API_TOKEN,
        shop_timezone="UTC",
    )


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def part_repository() -> InMemoryChickenPartRepository:
    return InMemoryChickenPartRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def employee_repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def wage_repository() -> InMemoryWageRepository:
    return InMemoryWageRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    customer_repository: InMemoryCustomerRepository,
    part_repository: InMemoryChickenPartRepository,
    order_repository: InMemoryOrderRepository,
    employee_repository: InMemoryEmployeeRepository,
    wage_repository: InMemoryWageRepository,
) -> AppContainer:
    return wire_container(
        settings=settings,
        customer_repository=customer_repository,
        part_repository=part_repository,
        order_repository=order_repository,
        employee_repository=employee_repository,
        wage_repository=wage_repository,
        note_repository=InMemoryCalendarNoteRepository(),
    )
