"""Tests for employee records."""

from decimal import Decimal

import pytest

from chicken_shop.domain.errors import ValidationError
from chicken_shop.services.employees import EmployeeService
from tests.conftest import InMemoryEmployeeRepository


def test_create_employee() -> None:
    service = EmployeeService(InMemoryEmployeeRepository())

    employee = service.create_employee(" Nok ", Decimal("350"), phone="0891234567")

    assert employee.name == "Nok"
    assert employee.base_daily_wage == Decimal("350")


def test_employee_validation_collects_errors() -> None:
    service = EmployeeService(InMemoryEmployeeRepository())

    with pytest.raises(ValidationError) as exc_info:
        service.create_employee("", Decimal("0"), phone="12345")

    assert exc_info.value.messages == [
        "name is required",
        "phone number must be 10 digits",
        "base daily wage must be positive",
    ]


def test_phone_is_optional() -> None:
    service = EmployeeService(InMemoryEmployeeRepository())

    assert service.create_employee("Lek", Decimal("300")).phone == ""


def test_update_employee_wage() -> None:
    service = EmployeeService(InMemoryEmployeeRepository())
    employee = service.create_employee("Lek", Decimal("300"))

    updated = service.update_employee(employee.id, base_daily_wage=Decimal("320"))

    assert updated.base_daily_wage == Decimal("320")
    assert updated.name == "Lek"
