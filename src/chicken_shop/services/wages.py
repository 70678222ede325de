"""Wage ledger for daily employee pay."""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Protocol

from chicken_shop.domain.calendar import month_bounds
from chicken_shop.domain.errors import NotFoundError, ValidationError
from chicken_shop.domain.money import ZERO, sum_amounts
from chicken_shop.domain.staff import DailyWage, DailyWageDraft
from chicken_shop.services.employees import EmployeeService

DAYS_PER_WEEK = 7
SUNDAY = 6


class WageRepository(Protocol):
    """Persistence interface for daily wage entries."""

    def list_wages(self) -> list[DailyWage]:
        """Return all wage entries, newest date first."""

    def list_wages_by_employee(self, employee_id: str) -> list[DailyWage]:
        """Return an employee's wage entries."""

    def list_wages_by_date(self, day: date) -> list[DailyWage]:
        """Return all entries for one day."""

    def list_wages_between(self, start: date, end: date) -> list[DailyWage]:
        """Return entries with ``start <= date < end``."""

    def get_wage(self, wage_id: str) -> DailyWage | None:
        """Return a wage entry by id, if present."""

    def create_wage(self, draft: DailyWageDraft) -> DailyWage:
        """Create a wage entry and return it."""

    def update_wage(self, wage_id: str, changes: dict[str, object]) -> DailyWage:
        """Apply field changes to a wage entry and return it."""

    def delete_wage(self, wage_id: str) -> None:
        """Delete a wage entry."""


@dataclass
class WageLedger:
    """Records daily wages and totals them over calendar windows.

    Nothing stops two entries for the same employee and day; totals
    include every entry.
    """

    repository: WageRepository
    employee_service: EmployeeService

    def record_wage(  # noqa: PLR0913
        self,
        employee_id: str,
        day: date,
        adjustment: Decimal = ZERO,
        adjustment_reason: str = "",
        notes: str = "",
        amount: Decimal | None = None,
    ) -> DailyWage:
        """Create a wage entry.

        ``amount`` defaults to the employee's base wage plus ``adjustment``
        and is stored as given from then on.
        """
        if not employee_id:
            raise ValidationError("no employee selected")
        employee = self.employee_service.get_employee(employee_id)
        resolved_amount = (
            amount if amount is not None else employee.base_daily_wage + adjustment
        )
        if resolved_amount < 0:
            raise ValidationError("amount must not be negative")
        return self.repository.create_wage(
            DailyWageDraft(
                employee_id=employee.id,
                employee_name=employee.name,
                date=day,
                amount=resolved_amount,
                adjustment=adjustment,
                adjustment_reason=adjustment_reason,
                notes=notes,
            )
        )

    def get_wage(self, wage_id: str) -> DailyWage:
        """Return a wage entry or raise ``NotFoundError``."""
        wage = self.repository.get_wage(wage_id)
        if wage is None:
            raise NotFoundError("wage", wage_id)
        return wage

    def update_wage(self, wage_id: str, changes: dict[str, object]) -> DailyWage:
        """Edit a wage entry; the amount is not re-derived."""
        self.get_wage(wage_id)
        allowed = {
            key: value
            for key, value in changes.items()
            if key in {"date", "amount", "adjustment", "adjustment_reason", "notes"}
            and value is not None
        }
        amount = allowed.get("amount")
        if isinstance(amount, Decimal) and amount < 0:
            raise ValidationError("amount must not be negative")
        if not allowed:
            return self.get_wage(wage_id)
        return self.repository.update_wage(wage_id, allowed)

    def delete_wage(self, wage_id: str) -> None:
        """Delete a wage entry."""
        self.get_wage(wage_id)
        self.repository.delete_wage(wage_id)

    def list_wages(self, employee_id: str | None = None) -> list[DailyWage]:
        """Return wage entries, optionally for one employee."""
        if employee_id:
            return self.repository.list_wages_by_employee(employee_id)
        return self.repository.list_wages()

    def list_wages_by_date(self, day: date) -> list[DailyWage]:
        """Return all wage entries for ``day``."""
        return self.repository.list_wages_by_date(day)

    def daily_total(self, day: date) -> Decimal:
        """Return the sum paid to all employees on ``day``."""
        return total_for_day(self.repository.list_wages_by_date(day), day)

    def monthly_total(self, employee_id: str, year: int, month: int) -> Decimal:
        """Return one employee's total for a calendar month."""
        wages = self.repository.list_wages_by_employee(employee_id)
        return total_for_month(wages, year, month, employee_id=employee_id)

    def weekly_total(self, employee_id: str, week_start: date) -> Decimal:
        """Return one employee's total for ``[week_start, week_start + 7 days)``."""
        wages = self.repository.list_wages_by_employee(employee_id)
        return total_for_week(wages, week_start, employee_id=employee_id)

    def month_total(self, year: int, month: int) -> Decimal:
        """Return the total paid to all employees in a calendar month."""
        start, end = month_bounds(year, month)
        return total_for_month(
            self.repository.list_wages_between(start, end), year, month
        )


def total_for_day(wages: list[DailyWage], day: date) -> Decimal:
    """Sum the stored amounts of entries dated exactly ``day``."""
    return sum_amounts(wage.amount for wage in wages if wage.date == day)


def total_for_month(
    wages: list[DailyWage],
    year: int,
    month: int,
    employee_id: str | None = None,
) -> Decimal:
    """Sum the stored amounts of entries inside one calendar month."""
    return sum_amounts(
        wage.amount
        for wage in wages
        if (wage.date.year, wage.date.month) == (year, month)
        and (employee_id is None or wage.employee_id == employee_id)
    )


def total_for_week(
    wages: list[DailyWage], week_start: date, employee_id: str | None = None
) -> Decimal:
    """Sum the stored amounts of entries in the seven days from ``week_start``."""
    week_end = week_start + timedelta(days=DAYS_PER_WEEK)
    return sum_amounts(
        wage.amount
        for wage in wages
        if week_start <= wage.date < week_end
        and (employee_id is None or wage.employee_id == employee_id)
    )


def most_recent_sunday(today: date) -> date:
    """Return ``today`` if it is a Sunday, else the Sunday before it."""
    offset = (today.weekday() - SUNDAY) % DAYS_PER_WEEK
    return today - timedelta(days=offset)
