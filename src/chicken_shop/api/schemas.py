"""Pydantic models for API request bodies."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from chicken_shop.domain.orders import OrderStatus


class CustomerCreate(BaseModel):
    """New customer payload."""

    name: str
    phone: str = ""
    address: str = ""
    notes: str = ""


class CustomerUpdate(BaseModel):
    """Customer edit payload."""

    name: str | None = None
    phone: str | None = None
    address: str | None = None
    notes: str | None = None


class ChickenPartCreate(BaseModel):
    """New chicken part payload."""

    name: str
    price_per_kg: Decimal = Field(alias="pricePerKg")
    stock: Decimal = Decimal("0")
    unit: str = "kg"

    model_config = {"populate_by_name": True}


class ChickenPartUpdate(BaseModel):
    """Chicken part edit payload."""

    name: str | None = None
    price_per_kg: Decimal | None = Field(default=None, alias="pricePerKg")
    stock: Decimal | None = None
    unit: str | None = None

    model_config = {"populate_by_name": True}


class StockAdjustment(BaseModel):
    """Signed stock change in kilograms."""

    amount: Decimal


class OrderItemPayload(BaseModel):
    """One order line as sent by the order form.

    When ``price_per_kg`` is omitted the part's current name and price
    are looked up and copied in.
    """

    chicken_part_id: str = Field(default="", alias="chickenPartId")
    chicken_part_name: str = Field(default="", alias="chickenPartName")
    quantity: Decimal
    price_per_kg: Decimal | None = Field(default=None, alias="pricePerKg")
    total: Decimal | None = None

    model_config = {"populate_by_name": True}


class OrderCreate(BaseModel):
    """New order payload."""

    customer_id: str = Field(default="", alias="customerId")
    items: list[OrderItemPayload] = Field(default_factory=list)
    notes: str = ""

    model_config = {"populate_by_name": True}


class OrderUpdate(BaseModel):
    """Order edit payload; ``status`` may be sent alone."""

    customer_id: str | None = Field(default=None, alias="customerId")
    items: list[OrderItemPayload] | None = None
    notes: str | None = None
    status: OrderStatus | None = None

    model_config = {"populate_by_name": True}


class OrderStatusUpdate(BaseModel):
    """Status change payload."""

    status: OrderStatus


class ItemRecompute(BaseModel):
    """Change one field of one row in an order form."""

    items: list[OrderItemPayload]
    index: int = Field(ge=0)
    field: str
    value: str | Decimal


class EmployeeCreate(BaseModel):
    """New employee payload."""

    name: str
    base_daily_wage: Decimal = Field(alias="baseDailyWage")
    phone: str = ""
    notes: str = ""

    model_config = {"populate_by_name": True}


class EmployeeUpdate(BaseModel):
    """Employee edit payload."""

    name: str | None = None
    base_daily_wage: Decimal | None = Field(default=None, alias="baseDailyWage")
    phone: str | None = None
    notes: str | None = None

    model_config = {"populate_by_name": True}


class WageCreate(BaseModel):
    """New daily wage payload; ``amount`` defaults to base + adjustment."""

    employee_id: str = Field(default="", alias="employeeId")
    date: dt.date
    adjustment: Decimal = Decimal("0")
    adjustment_reason: str = Field(default="", alias="adjustmentReason")
    notes: str = ""
    amount: Decimal | None = None

    model_config = {"populate_by_name": True}


class WageUpdate(BaseModel):
    """Daily wage edit payload."""

    date: dt.date | None = None
    amount: Decimal | None = None
    adjustment: Decimal | None = None
    adjustment_reason: str | None = Field(default=None, alias="adjustmentReason")
    notes: str | None = None

    model_config = {"populate_by_name": True}


class CalendarNoteCreate(BaseModel):
    """New calendar note payload."""

    date: dt.date
    title: str
    content: str = ""


class CalendarNoteUpdate(BaseModel):
    """Calendar note edit payload."""

    date: dt.date | None = None
    title: str | None = None
    content: str | None = None
