"""Domain models for employees and daily wages."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum


class WageAdjustmentReason(StrEnum):
    """Preset reasons for adjusting a day's wage."""

    GOOD_WORK = "good_work"
    OVERTIME = "overtime"
    ABSENT = "absent"
    LATE = "late"
    SICK_LEAVE = "sick_leave"
    PERSONAL_LEAVE = "personal_leave"


@dataclass(frozen=True)
class Employee:
    """An employee paid by the day."""

    id: str
    name: str
    phone: str
    base_daily_wage: Decimal
    notes: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class DailyWageDraft:
    """Wage entry values before the store assigns an id."""

    employee_id: str
    employee_name: str
    date: date
    amount: Decimal
    adjustment: Decimal
    adjustment_reason: str
    notes: str


@dataclass(frozen=True)
class DailyWage:
    """A stored wage entry.

    ``amount`` is captured when the entry is written and is never
    re-derived from the employee's base wage.
    """

    id: str
    employee_id: str
    employee_name: str
    date: date
    amount: Decimal
    adjustment: Decimal
    adjustment_reason: str
    notes: str
    created_at: datetime | None = None
